"""Runtime settings read from the environment (a local .env is honoured by the entry points)."""
import logging
import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    server_name: str = "deliberate-thinking"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            server_name=os.getenv("DELIBERATE_THINKING_SERVER_NAME", cls.server_name),
            log_level=os.getenv("LOG_LEVEL", cls.log_level).upper(),
            host=os.getenv("SERVER_HOST", cls.host),
            port=int(os.getenv("SERVER_PORT", str(cls.port))),
        )

    def logging_level(self) -> int:
        """Numeric level for `logging`; unknown names fall back to INFO."""
        level = logging.getLevelName(self.log_level)
        return level if isinstance(level, int) else logging.INFO
