"""
Deliberate Thinking Server Main Entry Point

Run the MCP server over stdio (default):
    python -m server

Or the HTTP API:
    python -m server --transport http --port 8000
"""
import argparse
import logging
import uvicorn
from dotenv import load_dotenv

from core.config import Settings


def load_env() -> None:
    """Load environment variables from .env file."""
    load_dotenv()


def configure_logging(level: int = logging.INFO) -> None:
    """Configure logging; the default stream is stderr, leaving stdout to MCP."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def main() -> None:
    load_env()
    settings = Settings.from_env()

    parser = argparse.ArgumentParser(description="Deliberate Thinking Server")
    parser.add_argument("--transport", choices=["stdio", "http"], default="stdio")
    parser.add_argument("--host", default=settings.host)
    parser.add_argument("--port", type=int, default=settings.port)
    args = parser.parse_args()

    configure_logging(settings.logging_level())

    if args.transport == "http":
        uvicorn.run(
            "server.app:app",  # module path
            host=args.host,
            port=args.port,
            log_level=settings.log_level.lower(),
        )
        return

    from server.mcp_stdio import DeliberateThinkingMCPServer

    DeliberateThinkingMCPServer(name=settings.server_name).run()


if __name__ == '__main__':
    main()
