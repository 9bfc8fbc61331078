"""Workspace features: folders, configuration, watched files, commands, edits,
workspace symbols and file operations."""

import enum
import typing as t

from pydantic import StrictBool, StrictInt, StrictStr

from .base import NULLABLE, LspIntEnum, LspModel, LSPAny, OneOf
from .language import ResolveSupport, SymbolInformation
from .structs import (
    GlobPattern,
    Location,
    PartialResultParams,
    SymbolKind,
    SymbolKindCapability,
    SymbolTag,
    TagSupport,
    WatchKind,
    WorkDoneProgressOptions,
    WorkDoneProgressParams,
    WorkspaceEdit,
    WorkspaceFolder,
)
from .uri import Uri

# Workspace folders


class WorkspaceFoldersServerCapabilities(LspModel):
    """Workspace folder support advertised by the server.

    Args:
        supported (Optional[bool]): The server has support for workspace folders.
        changeNotifications (Union[str, bool, None]): Whether the server wants to receive workspace
            folder change notifications. A string is an id under which the notification is
            registered on the client side.
    """

    supported: t.Optional[StrictBool] = None
    changeNotifications: t.Optional[OneOf[StrictStr, StrictBool]] = None


class WorkspaceFoldersChangeEvent(LspModel):
    """The workspace folder change event.

    Args:
        added (List[WorkspaceFolder]): The array of added workspace folders.
        removed (List[WorkspaceFolder]): The array of the removed workspace folders.
    """

    added: t.List[WorkspaceFolder]
    removed: t.List[WorkspaceFolder]


class DidChangeWorkspaceFoldersParams(LspModel):
    event: WorkspaceFoldersChangeEvent


# Configuration


class ConfigurationItem(LspModel):
    """Represents a configuration item.

    Args:
        scopeUri (Optional[Uri]): The scope to get the configuration section for.
        section (Optional[str]): The configuration section asked for.
    """

    scopeUri: t.Optional[Uri] = None
    section: t.Optional[StrictStr] = None


class ConfigurationParams(LspModel):
    items: t.List[ConfigurationItem]


class DidChangeConfigurationParams(LspModel):
    """Parameters of the `workspace/didChangeConfiguration` notification.

    Args:
        settings (Any): The actual changed settings, possibly ``None``.
    """

    settings: t.Annotated[LSPAny, NULLABLE]


# Watched files


class FileChangeType(LspIntEnum):
    """The file event type.

    Attributes:
        CREATED: The file got created.
        CHANGED: The file got changed.
        DELETED: The file got deleted.
    """

    CREATED = 1
    CHANGED = 2
    DELETED = 3


class FileEvent(LspModel):
    """An event describing a file change.

    Args:
        uri (Uri): The file's URI.
        type (FileChangeType): The change type.
    """

    uri: Uri
    type: FileChangeType


class DidChangeWatchedFilesParams(LspModel):
    changes: t.List[FileEvent]


class FileSystemWatcher(LspModel):
    """A glob pattern and the file events to watch it for.

    Args:
        globPattern (Union[str, RelativePattern]): The glob pattern to watch.
        kind (Optional[WatchKind]): The kind of events of interest. Defaults to
            ``WatchKind.default()`` when omitted.
    """

    globPattern: GlobPattern
    kind: t.Optional[WatchKind] = None


class DidChangeWatchedFilesRegistrationOptions(LspModel):
    """Describe options to be used when registering for file system change events.

    Args:
        watchers (List[FileSystemWatcher]): The watchers to register.
    """

    watchers: t.List[FileSystemWatcher]


class DidChangeWatchedFilesClientCapabilities(LspModel):
    """Client capabilities for `workspace/didChangeWatchedFiles`.

    Args:
        dynamicRegistration (Optional[bool]): Did change watched files notification supports dynamic
            registration.
        relativePatternSupport (Optional[bool]): Whether the client has support for relative patterns
            (@since 3.17.0).
    """

    dynamicRegistration: t.Optional[StrictBool] = None
    relativePatternSupport: t.Optional[StrictBool] = None


# Execute command


class ExecuteCommandClientCapabilities(LspModel):
    dynamicRegistration: t.Optional[StrictBool] = None


class ExecuteCommandOptions(WorkDoneProgressOptions):
    """The commands a server can execute.

    Args:
        commands (List[str]): The commands to be executed on the server.
    """

    commands: t.List[StrictStr]


class ExecuteCommandRegistrationOptions(ExecuteCommandOptions):
    pass


class ExecuteCommandParams(WorkDoneProgressParams):
    """Parameters of the `workspace/executeCommand` request.

    Args:
        command (str): The identifier of the actual command handler.
        arguments (Optional[List[Any]]): Arguments that the command should be invoked with.
    """

    command: StrictStr
    arguments: t.Optional[t.List[LSPAny]] = None


# Apply edit


class ResourceOperationKind(enum.Enum):
    """The kind of resource operations supported by the client.

    Attributes:
        CREATE: Supports creating new files and folders.
        RENAME: Supports renaming existing files and folders.
        DELETE: Supports deleting existing files and folders.
    """

    CREATE = "create"
    RENAME = "rename"
    DELETE = "delete"


class FailureHandlingKind(enum.Enum):
    """How the client handles failures while applying a workspace edit.

    Attributes:
        ABORT: Applying the workspace change is simply aborted if one of the changes fails.
        TRANSACTIONAL: All operations are executed transactionally.
        TEXT_ONLY_TRANSACTIONAL: Transactional if the changes only consist of text edits.
        UNDO: The client tries to undo the operations already executed.
    """

    ABORT = "abort"
    TRANSACTIONAL = "transactional"
    TEXT_ONLY_TRANSACTIONAL = "textOnlyTransactional"
    UNDO = "undo"


class ChangeAnnotationWorkspaceEditClientCapabilities(LspModel):
    groupsOnLabel: t.Optional[StrictBool] = None


class WorkspaceEditClientCapabilities(LspModel):
    """Client capabilities for workspace edits.

    Args:
        documentChanges (Optional[bool]): The client supports versioned document changes.
        resourceOperations (Optional[List[ResourceOperationKind]]): The resource operations the client supports.
        failureHandling (Optional[FailureHandlingKind]): The failure handling strategy of the client.
        normalizesLineEndings (Optional[bool]): Whether the client normalizes line endings to the client
            specific setting.
        changeAnnotationSupport (Optional[ChangeAnnotationWorkspaceEditClientCapabilities]): Whether the
            client in general supports change annotations.
    """

    documentChanges: t.Optional[StrictBool] = None
    resourceOperations: t.Optional[t.List[ResourceOperationKind]] = None
    failureHandling: t.Optional[FailureHandlingKind] = None
    normalizesLineEndings: t.Optional[StrictBool] = None
    changeAnnotationSupport: t.Optional[ChangeAnnotationWorkspaceEditClientCapabilities] = None


class ApplyWorkspaceEditParams(LspModel):
    """Parameters of the `workspace/applyEdit` request.

    Args:
        label (Optional[str]): An optional label of the workspace edit, e.g. for an undo stack.
        edit (WorkspaceEdit): The edits to apply.
    """

    label: t.Optional[StrictStr] = None
    edit: WorkspaceEdit


class ApplyWorkspaceEditResult(LspModel):
    """The result returned from the apply workspace edit request.

    Args:
        applied (bool): Indicates whether the edit was applied or not.
        failureReason (Optional[str]): An optional textual description for why the edit was not applied.
        failedChange (Optional[int]): The index of the change that failed, depending on failure handling.
    """

    applied: StrictBool
    failureReason: t.Optional[StrictStr] = None
    failedChange: t.Optional[StrictInt] = None


# Workspace symbols


class WorkspaceSymbolClientCapabilities(LspModel):
    """Client capabilities for `workspace/symbol`.

    Args:
        dynamicRegistration (Optional[bool]): Symbol request supports dynamic registration.
        symbolKind (Optional[SymbolKindCapability]): Specific capabilities for `SymbolKind`.
        tagSupport (Optional[TagSupport[SymbolTag]]): The client supports tags on `SymbolInformation`.
        resolveSupport (Optional[ResolveSupport]): Properties the client can resolve lazily.
    """

    dynamicRegistration: t.Optional[StrictBool] = None
    symbolKind: t.Optional[SymbolKindCapability] = None
    tagSupport: t.Optional[TagSupport[SymbolTag]] = None
    resolveSupport: t.Optional[ResolveSupport] = None


class WorkspaceSymbolOptions(WorkDoneProgressOptions):
    resolveProvider: t.Optional[StrictBool] = None


class WorkspaceSymbolRegistrationOptions(WorkspaceSymbolOptions):
    pass


WorkspaceSymbolProviderCapability = OneOf[StrictBool, WorkspaceSymbolOptions]


class WorkspaceSymbolParams(WorkDoneProgressParams, PartialResultParams):
    """Parameters of the `workspace/symbol` request.

    Args:
        query (str): A query string to filter symbols by. Clients may send an empty string to
            request all symbols.
    """

    query: StrictStr


class WorkspaceLocation(LspModel):
    uri: Uri


class WorkspaceSymbol(LspModel):
    """A special workspace symbol that supports locations without a range (@since 3.17.0).

    Args:
        name (str): The name of this symbol.
        kind (SymbolKind): The kind of this symbol.
        tags (Optional[List[SymbolTag]]): Tags for this completion item.
        containerName (Optional[str]): The name of the symbol containing this symbol.
        location (Union[Location, WorkspaceLocation]): The location of this symbol, with a range
            unless the server resolves it later.
        data (Optional[Any]): Preserved between `workspace/symbol` and `workspaceSymbol/resolve`.
    """

    name: StrictStr
    kind: SymbolKind
    tags: t.Optional[t.List[SymbolTag]] = None
    containerName: t.Optional[StrictStr] = None
    location: OneOf[Location, WorkspaceLocation]
    data: t.Optional[LSPAny] = None


WorkspaceSymbolResponse = OneOf[t.List[SymbolInformation], t.List[WorkspaceSymbol]]


# File operations


class FileOperationPatternKind(enum.Enum):
    """A pattern kind describing if a glob pattern matches a file, a folder, or both.

    Attributes:
        FILE: The pattern matches a file only.
        FOLDER: The pattern matches a folder only.
    """

    FILE = "file"
    FOLDER = "folder"


class FileOperationPatternOptions(LspModel):
    ignoreCase: t.Optional[StrictBool] = None


class FileOperationPattern(LspModel):
    """A pattern to describe in which file operation requests or notifications the server is interested.

    Args:
        glob (str): The glob pattern to match.
        matches (Optional[FileOperationPatternKind]): Whether to match files or folders. Both if omitted.
        options (Optional[FileOperationPatternOptions]): Additional options used during matching.
    """

    glob: StrictStr
    matches: t.Optional[FileOperationPatternKind] = None
    options: t.Optional[FileOperationPatternOptions] = None


class FileOperationFilter(LspModel):
    scheme: t.Optional[StrictStr] = None
    pattern: FileOperationPattern


class FileOperationRegistrationOptions(LspModel):
    filters: t.List[FileOperationFilter]


class WorkspaceFileOperationsServerCapabilities(LspModel):
    """The server is interested in file notifications/requests (@since 3.16.0)."""

    didCreate: t.Optional[FileOperationRegistrationOptions] = None
    willCreate: t.Optional[FileOperationRegistrationOptions] = None
    didRename: t.Optional[FileOperationRegistrationOptions] = None
    willRename: t.Optional[FileOperationRegistrationOptions] = None
    didDelete: t.Optional[FileOperationRegistrationOptions] = None
    willDelete: t.Optional[FileOperationRegistrationOptions] = None


class WorkspaceFileOperationsClientCapabilities(LspModel):
    dynamicRegistration: t.Optional[StrictBool] = None
    didCreate: t.Optional[StrictBool] = None
    willCreate: t.Optional[StrictBool] = None
    didRename: t.Optional[StrictBool] = None
    willRename: t.Optional[StrictBool] = None
    didDelete: t.Optional[StrictBool] = None
    willDelete: t.Optional[StrictBool] = None


class FileCreate(LspModel):
    """Represents information on a file/folder create (@since 3.16.0).

    Args:
        uri (str): A file:// URI for the location of the file/folder being created.
    """

    uri: StrictStr


class CreateFilesParams(LspModel):
    files: t.List[FileCreate]


class FileRename(LspModel):
    """Represents information on a file/folder rename.

    Args:
        oldUri (str): A file:// URI for the original location of the file/folder being renamed.
        newUri (str): A file:// URI for the new location of the file/folder being renamed.
    """

    oldUri: StrictStr
    newUri: StrictStr


class RenameFilesParams(LspModel):
    files: t.List[FileRename]


class FileDelete(LspModel):
    uri: StrictStr


class DeleteFilesParams(LspModel):
    files: t.List[FileDelete]


# Refresh requests sent from the server to the client


class RefreshClientCapabilities(LspModel):
    """Whether the client supports a server-initiated `workspace/*/refresh` request.

    Args:
        refreshSupport (Optional[bool]): The client implementation supports the refresh request.
    """

    refreshSupport: t.Optional[StrictBool] = None


SemanticTokensWorkspaceClientCapabilities = RefreshClientCapabilities
CodeLensWorkspaceClientCapabilities = RefreshClientCapabilities
InlineValueWorkspaceClientCapabilities = RefreshClientCapabilities
InlayHintWorkspaceClientCapabilities = RefreshClientCapabilities
DiagnosticWorkspaceClientCapabilities = RefreshClientCapabilities
