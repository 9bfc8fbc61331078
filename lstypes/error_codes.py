"""Error codes specific to the Language Server Protocol.

Only the LSP codes live here; the generic codes (-32700 parse error, -32600
invalid request, ...) belong to the JSON-RPC specification.
"""

from .base import LspIntEnum


class ErrorCode(LspIntEnum):
    """LSP error codes carried in a JSON-RPC error response.

    Attributes:
        SERVER_NOT_INITIALIZED: A request arrived before `initialize`. Lives in the JSON-RPC
            "implementation-defined server-errors" range for backwards compatibility.
        UNKNOWN_ERROR_CODE: Unknown error. Same range caveat as above.
        LSP_RESERVED_ERROR_RANGE_START: Start of the range reserved for LSP (@since 3.16.0). Not a real error.
        REQUEST_FAILED: A syntactically correct request failed (@since 3.17.0).
        SERVER_CANCELLED: The server cancelled the request (@since 3.17.0).
        CONTENT_MODIFIED: The document changed while the request was being processed.
        REQUEST_CANCELLED: The client cancelled the request and the server noticed.
    """

    SERVER_NOT_INITIALIZED = -32002
    UNKNOWN_ERROR_CODE = -32001
    LSP_RESERVED_ERROR_RANGE_START = -32899
    REQUEST_FAILED = -32803
    SERVER_CANCELLED = -32802
    CONTENT_MODIFIED = -32801
    REQUEST_CANCELLED = -32800


# End of the LSP reserved range (@since 3.16.0). Not a real error code; it
# shares its value with REQUEST_CANCELLED.
LSP_RESERVED_ERROR_RANGE_END = ErrorCode.REQUEST_CANCELLED


def is_lsp_reserved(code: int) -> bool:
    """Whether `code` falls in the range reserved for LSP error codes."""
    return ErrorCode.LSP_RESERVED_ERROR_RANGE_START <= code <= LSP_RESERVED_ERROR_RANGE_END
