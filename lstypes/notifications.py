"""Registry of LSP notification methods and their params types."""

import dataclasses
import logging
import typing as t

from . import codec
from .capabilities import InitializedParams
from .exceptions import UnknownMethodError
from .language import PublishDiagnosticsParams
from .notebook import (
    DidChangeNotebookDocumentParams,
    DidCloseNotebookDocumentParams,
    DidOpenNotebookDocumentParams,
    DidSaveNotebookDocumentParams,
)
from .structs import CancelParams
from .sync import (
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    DidSaveTextDocumentParams,
    WillSaveTextDocumentParams,
)
from .window import (
    LogMessageParams,
    LogTraceParams,
    ProgressParams,
    SetTraceParams,
    ShowMessageParams,
    TelemetryEventParams,
    WorkDoneProgressCancelParams,
)
from .workspace import (
    CreateFilesParams,
    DeleteFilesParams,
    DidChangeConfigurationParams,
    DidChangeWatchedFilesParams,
    DidChangeWorkspaceFoldersParams,
    RenameFilesParams,
)

_logger = logging.getLogger(__name__)

NoneType = type(None)


@dataclasses.dataclass(frozen=True)
class NotificationType:
    """A notification method and the type of its params.

    Args:
        method (str): The method name, e.g. ``textDocument/didOpen``.
        params (Any): The params type. ``NoneType`` when the notification has no params.
    """

    method: str
    params: t.Any

    def decode_params(self, data: t.Any) -> t.Any:
        """Decode the ``params`` member of a notification message.

        Raises:
            DecodeError: If `data` does not match the params type.
        """
        return codec.decode(self.params, data)

    def encode_params(self, params: t.Any) -> t.Any:
        return codec.encode(params, self.params)


CANCEL_REQUEST = NotificationType("$/cancelRequest", CancelParams)
SET_TRACE = NotificationType("$/setTrace", SetTraceParams)
LOG_TRACE = NotificationType("$/logTrace", LogTraceParams)
PROGRESS = NotificationType("$/progress", ProgressParams)

INITIALIZED = NotificationType("initialized", InitializedParams)
EXIT = NotificationType("exit", NoneType)

SHOW_MESSAGE = NotificationType("window/showMessage", ShowMessageParams)
LOG_MESSAGE = NotificationType("window/logMessage", LogMessageParams)
WORK_DONE_PROGRESS_CANCEL = NotificationType(
    "window/workDoneProgress/cancel", WorkDoneProgressCancelParams
)
TELEMETRY_EVENT = NotificationType("telemetry/event", TelemetryEventParams)

DID_OPEN_TEXT_DOCUMENT = NotificationType("textDocument/didOpen", DidOpenTextDocumentParams)
DID_CHANGE_TEXT_DOCUMENT = NotificationType("textDocument/didChange", DidChangeTextDocumentParams)
WILL_SAVE_TEXT_DOCUMENT = NotificationType("textDocument/willSave", WillSaveTextDocumentParams)
DID_SAVE_TEXT_DOCUMENT = NotificationType("textDocument/didSave", DidSaveTextDocumentParams)
DID_CLOSE_TEXT_DOCUMENT = NotificationType("textDocument/didClose", DidCloseTextDocumentParams)
PUBLISH_DIAGNOSTICS = NotificationType(
    "textDocument/publishDiagnostics", PublishDiagnosticsParams
)

DID_CHANGE_CONFIGURATION = NotificationType(
    "workspace/didChangeConfiguration", DidChangeConfigurationParams
)
DID_CHANGE_WATCHED_FILES = NotificationType(
    "workspace/didChangeWatchedFiles", DidChangeWatchedFilesParams
)
DID_CHANGE_WORKSPACE_FOLDERS = NotificationType(
    "workspace/didChangeWorkspaceFolders", DidChangeWorkspaceFoldersParams
)
DID_CREATE_FILES = NotificationType("workspace/didCreateFiles", CreateFilesParams)
DID_RENAME_FILES = NotificationType("workspace/didRenameFiles", RenameFilesParams)
DID_DELETE_FILES = NotificationType("workspace/didDeleteFiles", DeleteFilesParams)

DID_OPEN_NOTEBOOK_DOCUMENT = NotificationType(
    "notebookDocument/didOpen", DidOpenNotebookDocumentParams
)
DID_CHANGE_NOTEBOOK_DOCUMENT = NotificationType(
    "notebookDocument/didChange", DidChangeNotebookDocumentParams
)
DID_SAVE_NOTEBOOK_DOCUMENT = NotificationType(
    "notebookDocument/didSave", DidSaveNotebookDocumentParams
)
DID_CLOSE_NOTEBOOK_DOCUMENT = NotificationType(
    "notebookDocument/didClose", DidCloseNotebookDocumentParams
)

NOTIFICATIONS: t.Mapping[str, NotificationType] = {
    v.method: v for v in list(globals().values()) if isinstance(v, NotificationType)
}


def get_notification(method: str) -> NotificationType:
    """Look up the params type of a notification method.

    Raises:
        UnknownMethodError: If no notification is registered under `method`.
    """
    try:
        return NOTIFICATIONS[method]
    except KeyError:
        _logger.debug("no notification registered for method %r", method)
        raise UnknownMethodError(method) from None
