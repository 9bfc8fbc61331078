"""Typed data model for the Language Server Protocol and the Language Server Index Format.

Every protocol payload is a pydantic model whose attribute names are the wire
names. `decode` and `encode` translate between models and JSON, the request
and notification registries tell which types travel with each method::

    import lstypes

    request = lstypes.get_request("textDocument/hover")
    params = request.decode_params(message["params"])
    result = lstypes.Hover(contents=lstypes.MarkupContent(kind="markdown", value="**x**"))
    reply = request.encode_result(result)

LSIF entries live in `lstypes.lsif`. Draft protocol items are only available
through an explicit import of `lstypes.proposed`.
"""

import logging

from . import codec, lsif, notifications, requests
from .base import (
    NULLABLE,
    Int32,
    LspIntEnum,
    LspModel,
    LspStrEnum,
    LSPAny,
    LSPArray,
    LSPObject,
    NumberOrString,
    OneOf,
    Percentage,
    ProgressToken,
    UInt32,
)
from .capabilities import (
    ClientCapabilities,
    ClientInfo,
    GeneralClientCapabilities,
    InitializedParams,
    InitializeError,
    InitializeParams,
    InitializeResult,
    MarkdownClientCapabilities,
    NotebookDocumentSyncServerCapabilities,
    Registration,
    RegistrationParams,
    RegularExpressionsClientCapabilities,
    ServerCapabilities,
    ServerInfo,
    StaleRequestSupportClientCapabilities,
    TextDocumentClientCapabilities,
    Unregistration,
    UnregistrationParams,
    WorkspaceClientCapabilities,
    WorkspaceServerCapabilities,
)
from .codec import decode, decode_json, encode, encode_json
from .error_codes import (
    LSP_RESERVED_ERROR_RANGE_END,
    ErrorCode,
    is_lsp_reserved,
)
from .exceptions import DecodeError, DecodeIssue, ErrorKind, InvalidUriError, UnknownMethodError
from .language import (
    CallHierarchyIncomingCall,
    CallHierarchyIncomingCallsParams,
    CallHierarchyItem,
    CallHierarchyOptions,
    CallHierarchyOutgoingCall,
    CallHierarchyOutgoingCallsParams,
    CallHierarchyPrepareParams,
    CallHierarchyRegistrationOptions,
    CallHierarchyServerCapability,
    CodeAction,
    CodeActionClientCapabilities,
    CodeActionContext,
    CodeActionDisabled,
    CodeActionKind,
    CodeActionKindLiteralSupport,
    CodeActionLiteralSupport,
    CodeActionOptions,
    CodeActionOrCommand,
    CodeActionParams,
    CodeActionProviderCapability,
    CodeActionRegistrationOptions,
    CodeActionResponse,
    CodeActionTriggerKind,
    CodeLens,
    CodeLensOptions,
    CodeLensParams,
    CodeLensRegistrationOptions,
    Color,
    ColorInformation,
    ColorPresentation,
    ColorPresentationParams,
    ColorProviderCapability,
    CompletionClientCapabilities,
    CompletionContext,
    CompletionItem,
    CompletionItemCapability,
    CompletionItemKind,
    CompletionItemKindCapability,
    CompletionItemLabelDetails,
    CompletionItemTag,
    CompletionList,
    CompletionListCapability,
    CompletionListItemDefaults,
    CompletionOptions,
    CompletionOptionsCompletionItem,
    CompletionParams,
    CompletionRegistrationOptions,
    CompletionResponse,
    CompletionTextEdit,
    CompletionTriggerKind,
    DeclarationOptions,
    DeclarationParams,
    DeclarationProviderCapability,
    DeclarationRegistrationOptions,
    DefinitionOptions,
    DefinitionParams,
    DefinitionProviderCapability,
    DefinitionRegistrationOptions,
    DiagnosticClientCapabilities,
    DiagnosticOptions,
    DiagnosticRegistrationOptions,
    DiagnosticServerCancellationData,
    DiagnosticServerCapabilities,
    DocumentColorOptions,
    DocumentColorParams,
    DocumentColorRegistrationOptions,
    DocumentDiagnosticParams,
    DocumentDiagnosticReport,
    DocumentDiagnosticReportKind,
    DocumentDiagnosticReportPartialResult,
    DocumentDiagnosticReportResult,
    DocumentDiagnosticReportVariant,
    DocumentFormattingOptions,
    DocumentFormattingParams,
    DocumentFormattingProviderCapability,
    DocumentFormattingRegistrationOptions,
    DocumentHighlight,
    DocumentHighlightKind,
    DocumentHighlightOptions,
    DocumentHighlightParams,
    DocumentHighlightRegistrationOptions,
    DocumentLink,
    DocumentLinkClientCapabilities,
    DocumentLinkOptions,
    DocumentLinkParams,
    DocumentLinkRegistrationOptions,
    DocumentOnTypeFormattingOptions,
    DocumentOnTypeFormattingParams,
    DocumentOnTypeFormattingRegistrationOptions,
    DocumentRangeFormattingOptions,
    DocumentRangeFormattingParams,
    DocumentRangeFormattingProviderCapability,
    DocumentRangeFormattingRegistrationOptions,
    DocumentSymbol,
    DocumentSymbolClientCapabilities,
    DocumentSymbolOptions,
    DocumentSymbolParams,
    DocumentSymbolProviderCapability,
    DocumentSymbolRegistrationOptions,
    DocumentSymbolResponse,
    FoldingRange,
    FoldingRangeCapability,
    FoldingRangeClientCapabilities,
    FoldingRangeKind,
    FoldingRangeKindCapability,
    FoldingRangeOptions,
    FoldingRangeParams,
    FoldingRangeProviderCapability,
    FoldingRangeRegistrationOptions,
    FormattingOptions,
    FullDocumentDiagnosticReport,
    GotoDeclarationResponse,
    GotoDefinitionResponse,
    GotoImplementationResponse,
    GotoTypeDefinitionResponse,
    Hover,
    HoverClientCapabilities,
    HoverContents,
    HoverOptions,
    HoverParams,
    HoverProviderCapability,
    HoverRegistrationOptions,
    ImplementationOptions,
    ImplementationParams,
    ImplementationProviderCapability,
    ImplementationRegistrationOptions,
    InlayHint,
    InlayHintClientCapabilities,
    InlayHintKind,
    InlayHintLabel,
    InlayHintLabelPart,
    InlayHintOptions,
    InlayHintParams,
    InlayHintRegistrationOptions,
    InlayHintServerCapabilities,
    InlayHintTooltip,
    InlineValue,
    InlineValueContext,
    InlineValueEvaluatableExpression,
    InlineValueOptions,
    InlineValueParams,
    InlineValueRegistrationOptions,
    InlineValueServerCapabilities,
    InlineValueText,
    InlineValueVariableLookup,
    InsertReplaceEdit,
    InsertReplaceRange,
    InsertTextFormat,
    InsertTextMode,
    InsertTextModeSupport,
    LinkedEditingRangeOptions,
    LinkedEditingRangeParams,
    LinkedEditingRangeRegistrationOptions,
    LinkedEditingRanges,
    LinkedEditingRangeServerCapabilities,
    Moniker,
    MonikerKind,
    MonikerOptions,
    MonikerParams,
    MonikerRegistrationOptions,
    MonikerServerCapabilities,
    ParameterInformation,
    ParameterInformationSettings,
    ParameterLabel,
    PrepareRenameDefaultBehavior,
    PrepareRenameParams,
    PrepareRenamePlaceholder,
    PrepareRenameResponse,
    PrepareSupportDefaultBehavior,
    PreviousResultId,
    PublishDiagnosticsClientCapabilities,
    PublishDiagnosticsParams,
    ReferenceContext,
    ReferenceOptions,
    ReferenceParams,
    ReferenceRegistrationOptions,
    RelatedFullDocumentDiagnosticReport,
    RelatedUnchangedDocumentDiagnosticReport,
    RenameClientCapabilities,
    RenameOptions,
    RenameParams,
    RenameProviderCapability,
    RenameRegistrationOptions,
    ResolveSupport,
    SelectionRange,
    SelectionRangeOptions,
    SelectionRangeParams,
    SelectionRangeProviderCapability,
    SelectionRangeRegistrationOptions,
    SemanticTokenModifier,
    SemanticTokens,
    SemanticTokensClientCapabilities,
    SemanticTokensClientCapabilitiesRequests,
    SemanticTokensClientCapabilitiesRequestsFull,
    SemanticTokensDelta,
    SemanticTokensDeltaParams,
    SemanticTokensDeltaPartialResult,
    SemanticTokensEdit,
    SemanticTokensFullDeltaResult,
    SemanticTokensFullOptions,
    SemanticTokensLegend,
    SemanticTokensOptions,
    SemanticTokensParams,
    SemanticTokensPartialResult,
    SemanticTokensRangeParams,
    SemanticTokensRegistrationOptions,
    SemanticTokensServerCapabilities,
    SemanticTokenType,
    SignatureHelp,
    SignatureHelpClientCapabilities,
    SignatureHelpContext,
    SignatureHelpOptions,
    SignatureHelpParams,
    SignatureHelpRegistrationOptions,
    SignatureHelpTriggerKind,
    SignatureInformation,
    SignatureInformationSettings,
    SymbolInformation,
    TokenFormat,
    TypeDefinitionOptions,
    TypeDefinitionParams,
    TypeDefinitionProviderCapability,
    TypeDefinitionRegistrationOptions,
    TypeHierarchyItem,
    TypeHierarchyOptions,
    TypeHierarchyPrepareParams,
    TypeHierarchyRegistrationOptions,
    TypeHierarchyServerCapabilities,
    TypeHierarchySubtypesParams,
    TypeHierarchySupertypesParams,
    UnchangedDocumentDiagnosticReport,
    UniquenessLevel,
    WorkspaceDiagnosticParams,
    WorkspaceDiagnosticReport,
    WorkspaceDiagnosticReportPartialResult,
    WorkspaceDocumentDiagnosticReport,
    WorkspaceFullDocumentDiagnosticReport,
    WorkspaceUnchangedDocumentDiagnosticReport,
)
from .notebook import (
    DidChangeNotebookDocumentParams,
    DidCloseNotebookDocumentParams,
    DidOpenNotebookDocumentParams,
    DidSaveNotebookDocumentParams,
    ExecutionSummary,
    NotebookCell,
    NotebookCellArrayChange,
    NotebookCellKind,
    NotebookCellSelector,
    NotebookDocument,
    NotebookDocumentCellChanges,
    NotebookDocumentCellChangeStructure,
    NotebookDocumentCellContentChanges,
    NotebookDocumentChangeEvent,
    NotebookDocumentClientCapabilities,
    NotebookDocumentFilter,
    NotebookDocumentIdentifier,
    NotebookDocumentSyncClientCapabilities,
    NotebookDocumentSyncOptions,
    NotebookDocumentSyncRegistrationOptions,
    NotebookSelector,
    VersionedNotebookDocumentIdentifier,
)
from .notifications import NOTIFICATIONS, NotificationType, get_notification
from .requests import REQUESTS, RequestType, get_request
from .structs import (
    AnnotatedTextEdit,
    CancelParams,
    ChangeAnnotation,
    ChangeAnnotationIdentifier,
    CodeDescription,
    Command,
    CreateFile,
    CreateFileOptions,
    DeleteFile,
    DeleteFileOptions,
    Diagnostic,
    DiagnosticRelatedInformation,
    DiagnosticSeverity,
    DiagnosticTag,
    Documentation,
    DocumentChangeOperation,
    DocumentChanges,
    DocumentFilter,
    DocumentSelector,
    DynamicRegistrationClientCapabilities,
    GlobPattern,
    GotoCapability,
    LanguageString,
    Location,
    LocationLink,
    MarkedString,
    MarkupContent,
    MarkupKind,
    OptionalVersionedTextDocumentIdentifier,
    PartialResultParams,
    Position,
    PositionEncodingKind,
    ProviderCapability,
    Range,
    RegistrableOptions,
    RelativePattern,
    RenameFile,
    RenameFileOptions,
    ResourceOp,
    StaticRegistrationOptions,
    StaticTextDocumentRegistrationOptions,
    SymbolKind,
    SymbolKindCapability,
    SymbolTag,
    TagSupport,
    TextDocumentEdit,
    TextDocumentIdentifier,
    TextDocumentItem,
    TextDocumentPositionParams,
    TextDocumentRegistrationOptions,
    TextEdit,
    VersionedTextDocumentIdentifier,
    WatchKind,
    WorkDoneProgressOptions,
    WorkDoneProgressParams,
    WorkspaceEdit,
    WorkspaceFolder,
)
from .sync import (
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    DidSaveTextDocumentParams,
    SaveOptions,
    TextDocumentChangeRegistrationOptions,
    TextDocumentContentChangeEvent,
    TextDocumentSaveReason,
    TextDocumentSaveRegistrationOptions,
    TextDocumentSyncCapability,
    TextDocumentSyncClientCapabilities,
    TextDocumentSyncKind,
    TextDocumentSyncOptions,
    TextDocumentSyncSaveOptions,
    WillSaveTextDocumentParams,
)
from .uri import Uri
from .window import (
    LogMessageParams,
    LogTraceParams,
    MessageActionItem,
    MessageActionItemCapabilities,
    MessageType,
    ProgressParams,
    ProgressParamsValue,
    SetTraceParams,
    ShowDocumentClientCapabilities,
    ShowDocumentParams,
    ShowDocumentResult,
    ShowMessageParams,
    ShowMessageRequestClientCapabilities,
    ShowMessageRequestParams,
    TelemetryEventParams,
    TraceValue,
    WindowClientCapabilities,
    WorkDoneProgress,
    WorkDoneProgressBegin,
    WorkDoneProgressCancelParams,
    WorkDoneProgressCreateParams,
    WorkDoneProgressEnd,
    WorkDoneProgressReport,
)
from .workspace import (
    ApplyWorkspaceEditParams,
    ApplyWorkspaceEditResult,
    ChangeAnnotationWorkspaceEditClientCapabilities,
    CodeLensWorkspaceClientCapabilities,
    ConfigurationItem,
    ConfigurationParams,
    CreateFilesParams,
    DeleteFilesParams,
    DiagnosticWorkspaceClientCapabilities,
    DidChangeConfigurationParams,
    DidChangeWatchedFilesClientCapabilities,
    DidChangeWatchedFilesParams,
    DidChangeWatchedFilesRegistrationOptions,
    DidChangeWorkspaceFoldersParams,
    ExecuteCommandClientCapabilities,
    ExecuteCommandOptions,
    ExecuteCommandParams,
    ExecuteCommandRegistrationOptions,
    FailureHandlingKind,
    FileChangeType,
    FileCreate,
    FileDelete,
    FileEvent,
    FileOperationFilter,
    FileOperationPattern,
    FileOperationPatternKind,
    FileOperationPatternOptions,
    FileOperationRegistrationOptions,
    FileRename,
    FileSystemWatcher,
    InlayHintWorkspaceClientCapabilities,
    InlineValueWorkspaceClientCapabilities,
    RefreshClientCapabilities,
    RenameFilesParams,
    ResourceOperationKind,
    SemanticTokensWorkspaceClientCapabilities,
    WorkspaceEditClientCapabilities,
    WorkspaceFileOperationsClientCapabilities,
    WorkspaceFileOperationsServerCapabilities,
    WorkspaceFoldersChangeEvent,
    WorkspaceFoldersServerCapabilities,
    WorkspaceLocation,
    WorkspaceSymbol,
    WorkspaceSymbolClientCapabilities,
    WorkspaceSymbolOptions,
    WorkspaceSymbolParams,
    WorkspaceSymbolProviderCapability,
    WorkspaceSymbolRegistrationOptions,
    WorkspaceSymbolResponse,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
