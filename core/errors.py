"""Error types raised by the deliberate thinking core.

Codes follow JSON-RPC 2.0 (https://www.jsonrpc.org/specification#error_object)
so protocol surfaces can forward them unchanged.
"""

JSONRPC_INVALID_PARAMS = -32602
JSONRPC_INTERNAL_ERROR = -32603


class DeliberateThinkingError(Exception):
    """Base class for errors surfaced to callers."""

    code: int = JSONRPC_INTERNAL_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidParameterError(DeliberateThinkingError):
    """A request field is outside its allowed range. Raised before any mutation."""

    code = JSONRPC_INVALID_PARAMS

    def __init__(self, field: str, minimum: int):
        super().__init__(f"{field} must be at least {minimum}")
        self.field = field
        self.minimum = minimum


class SerializationError(DeliberateThinkingError):
    """The response could not be encoded. The ledger has already been updated."""

    code = JSONRPC_INTERNAL_ERROR
