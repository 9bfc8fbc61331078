"""Registry of LSP request methods and their payload types.

Each constant pairs a method name with the types of its params, its result
and, where the feature can be registered dynamically, its registration
options::

    request = get_request("textDocument/codeAction")
    params = request.decode_params(message["params"])
    reply = request.encode_result([CodeAction(title="Fix")])

The registry only declares types; it never sends or receives anything.
"""

import dataclasses
import logging
import typing as t

from . import codec
from .base import LSPAny
from .capabilities import (
    InitializeParams,
    InitializeResult,
    RegistrationParams,
    UnregistrationParams,
)
from .exceptions import UnknownMethodError
from .language import (
    CallHierarchyIncomingCall,
    CallHierarchyIncomingCallsParams,
    CallHierarchyItem,
    CallHierarchyOutgoingCall,
    CallHierarchyOutgoingCallsParams,
    CallHierarchyPrepareParams,
    CallHierarchyRegistrationOptions,
    CodeAction,
    CodeActionParams,
    CodeActionRegistrationOptions,
    CodeActionResponse,
    CodeLens,
    CodeLensParams,
    CodeLensRegistrationOptions,
    ColorInformation,
    ColorPresentation,
    ColorPresentationParams,
    CompletionItem,
    CompletionParams,
    CompletionRegistrationOptions,
    CompletionResponse,
    DeclarationParams,
    DeclarationRegistrationOptions,
    DefinitionParams,
    DefinitionRegistrationOptions,
    DiagnosticRegistrationOptions,
    DocumentColorParams,
    DocumentColorRegistrationOptions,
    DocumentDiagnosticParams,
    DocumentDiagnosticReportResult,
    DocumentFormattingParams,
    DocumentFormattingRegistrationOptions,
    DocumentHighlight,
    DocumentHighlightParams,
    DocumentHighlightRegistrationOptions,
    DocumentLink,
    DocumentLinkParams,
    DocumentLinkRegistrationOptions,
    DocumentOnTypeFormattingParams,
    DocumentOnTypeFormattingRegistrationOptions,
    DocumentRangeFormattingParams,
    DocumentRangeFormattingRegistrationOptions,
    DocumentSymbolParams,
    DocumentSymbolRegistrationOptions,
    DocumentSymbolResponse,
    FoldingRange,
    FoldingRangeParams,
    FoldingRangeRegistrationOptions,
    GotoDeclarationResponse,
    GotoDefinitionResponse,
    GotoImplementationResponse,
    GotoTypeDefinitionResponse,
    Hover,
    HoverParams,
    HoverRegistrationOptions,
    ImplementationParams,
    ImplementationRegistrationOptions,
    InlayHint,
    InlayHintParams,
    InlayHintRegistrationOptions,
    InlineValue,
    InlineValueParams,
    InlineValueRegistrationOptions,
    LinkedEditingRangeParams,
    LinkedEditingRangeRegistrationOptions,
    LinkedEditingRanges,
    Moniker,
    MonikerParams,
    MonikerRegistrationOptions,
    PrepareRenameParams,
    PrepareRenameResponse,
    ReferenceParams,
    ReferenceRegistrationOptions,
    RenameParams,
    RenameRegistrationOptions,
    SelectionRange,
    SelectionRangeParams,
    SelectionRangeRegistrationOptions,
    SemanticTokens,
    SemanticTokensDeltaParams,
    SemanticTokensFullDeltaResult,
    SemanticTokensParams,
    SemanticTokensRangeParams,
    SemanticTokensRegistrationOptions,
    SignatureHelp,
    SignatureHelpParams,
    SignatureHelpRegistrationOptions,
    TypeDefinitionParams,
    TypeDefinitionRegistrationOptions,
    TypeHierarchyItem,
    TypeHierarchyPrepareParams,
    TypeHierarchyRegistrationOptions,
    TypeHierarchySubtypesParams,
    TypeHierarchySupertypesParams,
    WorkspaceDiagnosticParams,
    WorkspaceDiagnosticReport,
)
from .structs import Location, TextDocumentRegistrationOptions, TextEdit, WorkspaceEdit, WorkspaceFolder
from .sync import WillSaveTextDocumentParams
from .window import (
    MessageActionItem,
    ShowDocumentParams,
    ShowDocumentResult,
    ShowMessageRequestParams,
    WorkDoneProgressCreateParams,
)
from .workspace import (
    ApplyWorkspaceEditParams,
    ApplyWorkspaceEditResult,
    ConfigurationParams,
    CreateFilesParams,
    DeleteFilesParams,
    ExecuteCommandParams,
    ExecuteCommandRegistrationOptions,
    FileOperationRegistrationOptions,
    RenameFilesParams,
    WorkspaceSymbol,
    WorkspaceSymbolParams,
    WorkspaceSymbolRegistrationOptions,
    WorkspaceSymbolResponse,
)

_logger = logging.getLogger(__name__)

NoneType = type(None)


@dataclasses.dataclass(frozen=True)
class RequestType:
    """A request method and the types of its payloads.

    Args:
        method (str): The method name, e.g. ``textDocument/hover``.
        params (Any): The params type. ``NoneType`` when the request has no params.
        result (Any): The result type. ``NoneType`` when the response carries ``null``.
        registration_options (Any): The registration options type, or ``None`` if the
            feature cannot be registered dynamically.
    """

    method: str
    params: t.Any
    result: t.Any
    registration_options: t.Any = None

    def decode_params(self, data: t.Any) -> t.Any:
        """Decode the ``params`` member of a request message.

        Raises:
            DecodeError: If `data` does not match the params type.
        """
        return codec.decode(self.params, data)

    def encode_params(self, params: t.Any) -> t.Any:
        return codec.encode(params, self.params)

    def decode_result(self, data: t.Any) -> t.Any:
        """Decode the ``result`` member of a response message.

        Raises:
            DecodeError: If `data` does not match the result type.
        """
        return codec.decode(self.result, data)

    def encode_result(self, result: t.Any) -> t.Any:
        return codec.encode(result, self.result)

    def decode_registration_options(self, data: t.Any) -> t.Any:
        """Decode the ``registerOptions`` of a `Registration` for this method.

        Raises:
            DecodeError: If `data` does not match the registration options.
            TypeError: If the method is not dynamically registrable.
        """
        if self.registration_options is None:
            raise TypeError(f"{self.method} has no registration options")
        return codec.decode(self.registration_options, data)


# Lifecycle

INITIALIZE = RequestType("initialize", InitializeParams, InitializeResult)
SHUTDOWN = RequestType("shutdown", NoneType, NoneType)
REGISTER_CAPABILITY = RequestType("client/registerCapability", RegistrationParams, NoneType)
UNREGISTER_CAPABILITY = RequestType("client/unregisterCapability", UnregistrationParams, NoneType)

# Window

SHOW_MESSAGE_REQUEST = RequestType(
    "window/showMessageRequest", ShowMessageRequestParams, t.Optional[MessageActionItem]
)
SHOW_DOCUMENT = RequestType("window/showDocument", ShowDocumentParams, ShowDocumentResult)
WORK_DONE_PROGRESS_CREATE = RequestType(
    "window/workDoneProgress/create", WorkDoneProgressCreateParams, NoneType
)

# Workspace

WORKSPACE_FOLDERS = RequestType(
    "workspace/workspaceFolders", NoneType, t.Optional[t.List[WorkspaceFolder]]
)
WORKSPACE_CONFIGURATION = RequestType(
    "workspace/configuration", ConfigurationParams, t.List[LSPAny]
)
WORKSPACE_SYMBOL = RequestType(
    "workspace/symbol",
    WorkspaceSymbolParams,
    t.Optional[WorkspaceSymbolResponse],
    WorkspaceSymbolRegistrationOptions,
)
WORKSPACE_SYMBOL_RESOLVE = RequestType("workspaceSymbol/resolve", WorkspaceSymbol, WorkspaceSymbol)
EXECUTE_COMMAND = RequestType(
    "workspace/executeCommand",
    ExecuteCommandParams,
    t.Optional[LSPAny],
    ExecuteCommandRegistrationOptions,
)
APPLY_WORKSPACE_EDIT = RequestType(
    "workspace/applyEdit", ApplyWorkspaceEditParams, ApplyWorkspaceEditResult
)
WILL_CREATE_FILES = RequestType(
    "workspace/willCreateFiles",
    CreateFilesParams,
    t.Optional[WorkspaceEdit],
    FileOperationRegistrationOptions,
)
WILL_RENAME_FILES = RequestType(
    "workspace/willRenameFiles",
    RenameFilesParams,
    t.Optional[WorkspaceEdit],
    FileOperationRegistrationOptions,
)
WILL_DELETE_FILES = RequestType(
    "workspace/willDeleteFiles",
    DeleteFilesParams,
    t.Optional[WorkspaceEdit],
    FileOperationRegistrationOptions,
)

# Refresh requests are sent from the server to the client and carry no payload.
CODE_LENS_REFRESH = RequestType("workspace/codeLens/refresh", NoneType, NoneType)
SEMANTIC_TOKENS_REFRESH = RequestType("workspace/semanticTokens/refresh", NoneType, NoneType)
INLINE_VALUE_REFRESH = RequestType("workspace/inlineValue/refresh", NoneType, NoneType)
INLAY_HINT_REFRESH = RequestType("workspace/inlayHint/refresh", NoneType, NoneType)
WORKSPACE_DIAGNOSTIC_REFRESH = RequestType("workspace/diagnostic/refresh", NoneType, NoneType)

# Text document

WILL_SAVE_WAIT_UNTIL = RequestType(
    "textDocument/willSaveWaitUntil",
    WillSaveTextDocumentParams,
    t.Optional[t.List[TextEdit]],
    TextDocumentRegistrationOptions,
)
COMPLETION = RequestType(
    "textDocument/completion",
    CompletionParams,
    t.Optional[CompletionResponse],
    CompletionRegistrationOptions,
)
COMPLETION_RESOLVE = RequestType("completionItem/resolve", CompletionItem, CompletionItem)
HOVER = RequestType(
    "textDocument/hover", HoverParams, t.Optional[Hover], HoverRegistrationOptions
)
SIGNATURE_HELP = RequestType(
    "textDocument/signatureHelp",
    SignatureHelpParams,
    t.Optional[SignatureHelp],
    SignatureHelpRegistrationOptions,
)
GOTO_DECLARATION = RequestType(
    "textDocument/declaration",
    DeclarationParams,
    t.Optional[GotoDeclarationResponse],
    DeclarationRegistrationOptions,
)
GOTO_DEFINITION = RequestType(
    "textDocument/definition",
    DefinitionParams,
    t.Optional[GotoDefinitionResponse],
    DefinitionRegistrationOptions,
)
GOTO_TYPE_DEFINITION = RequestType(
    "textDocument/typeDefinition",
    TypeDefinitionParams,
    t.Optional[GotoTypeDefinitionResponse],
    TypeDefinitionRegistrationOptions,
)
GOTO_IMPLEMENTATION = RequestType(
    "textDocument/implementation",
    ImplementationParams,
    t.Optional[GotoImplementationResponse],
    ImplementationRegistrationOptions,
)
REFERENCES = RequestType(
    "textDocument/references",
    ReferenceParams,
    t.Optional[t.List[Location]],
    ReferenceRegistrationOptions,
)
DOCUMENT_HIGHLIGHT = RequestType(
    "textDocument/documentHighlight",
    DocumentHighlightParams,
    t.Optional[t.List[DocumentHighlight]],
    DocumentHighlightRegistrationOptions,
)
DOCUMENT_SYMBOL = RequestType(
    "textDocument/documentSymbol",
    DocumentSymbolParams,
    t.Optional[DocumentSymbolResponse],
    DocumentSymbolRegistrationOptions,
)
CODE_ACTION = RequestType(
    "textDocument/codeAction",
    CodeActionParams,
    t.Optional[CodeActionResponse],
    CodeActionRegistrationOptions,
)
CODE_ACTION_RESOLVE = RequestType("codeAction/resolve", CodeAction, CodeAction)
CODE_LENS = RequestType(
    "textDocument/codeLens",
    CodeLensParams,
    t.Optional[t.List[CodeLens]],
    CodeLensRegistrationOptions,
)
CODE_LENS_RESOLVE = RequestType("codeLens/resolve", CodeLens, CodeLens)
DOCUMENT_LINK = RequestType(
    "textDocument/documentLink",
    DocumentLinkParams,
    t.Optional[t.List[DocumentLink]],
    DocumentLinkRegistrationOptions,
)
DOCUMENT_LINK_RESOLVE = RequestType("documentLink/resolve", DocumentLink, DocumentLink)
DOCUMENT_COLOR = RequestType(
    "textDocument/documentColor",
    DocumentColorParams,
    t.List[ColorInformation],
    DocumentColorRegistrationOptions,
)
COLOR_PRESENTATION = RequestType(
    "textDocument/colorPresentation",
    ColorPresentationParams,
    t.List[ColorPresentation],
    TextDocumentRegistrationOptions,
)
FORMATTING = RequestType(
    "textDocument/formatting",
    DocumentFormattingParams,
    t.Optional[t.List[TextEdit]],
    DocumentFormattingRegistrationOptions,
)
RANGE_FORMATTING = RequestType(
    "textDocument/rangeFormatting",
    DocumentRangeFormattingParams,
    t.Optional[t.List[TextEdit]],
    DocumentRangeFormattingRegistrationOptions,
)
ON_TYPE_FORMATTING = RequestType(
    "textDocument/onTypeFormatting",
    DocumentOnTypeFormattingParams,
    t.Optional[t.List[TextEdit]],
    DocumentOnTypeFormattingRegistrationOptions,
)
RENAME = RequestType(
    "textDocument/rename",
    RenameParams,
    t.Optional[WorkspaceEdit],
    RenameRegistrationOptions,
)
PREPARE_RENAME = RequestType(
    "textDocument/prepareRename", PrepareRenameParams, t.Optional[PrepareRenameResponse]
)
FOLDING_RANGE = RequestType(
    "textDocument/foldingRange",
    FoldingRangeParams,
    t.Optional[t.List[FoldingRange]],
    FoldingRangeRegistrationOptions,
)
SELECTION_RANGE = RequestType(
    "textDocument/selectionRange",
    SelectionRangeParams,
    t.Optional[t.List[SelectionRange]],
    SelectionRangeRegistrationOptions,
)
CALL_HIERARCHY_PREPARE = RequestType(
    "textDocument/prepareCallHierarchy",
    CallHierarchyPrepareParams,
    t.Optional[t.List[CallHierarchyItem]],
    CallHierarchyRegistrationOptions,
)
CALL_HIERARCHY_INCOMING_CALLS = RequestType(
    "callHierarchy/incomingCalls",
    CallHierarchyIncomingCallsParams,
    t.Optional[t.List[CallHierarchyIncomingCall]],
)
CALL_HIERARCHY_OUTGOING_CALLS = RequestType(
    "callHierarchy/outgoingCalls",
    CallHierarchyOutgoingCallsParams,
    t.Optional[t.List[CallHierarchyOutgoingCall]],
)
SEMANTIC_TOKENS_FULL = RequestType(
    "textDocument/semanticTokens/full",
    SemanticTokensParams,
    t.Optional[SemanticTokens],
    SemanticTokensRegistrationOptions,
)
SEMANTIC_TOKENS_FULL_DELTA = RequestType(
    "textDocument/semanticTokens/full/delta",
    SemanticTokensDeltaParams,
    t.Optional[SemanticTokensFullDeltaResult],
    SemanticTokensRegistrationOptions,
)
SEMANTIC_TOKENS_RANGE = RequestType(
    "textDocument/semanticTokens/range",
    SemanticTokensRangeParams,
    t.Optional[SemanticTokens],
    SemanticTokensRegistrationOptions,
)
LINKED_EDITING_RANGE = RequestType(
    "textDocument/linkedEditingRange",
    LinkedEditingRangeParams,
    t.Optional[LinkedEditingRanges],
    LinkedEditingRangeRegistrationOptions,
)
MONIKER = RequestType(
    "textDocument/moniker",
    MonikerParams,
    t.Optional[t.List[Moniker]],
    MonikerRegistrationOptions,
)
TYPE_HIERARCHY_PREPARE = RequestType(
    "textDocument/prepareTypeHierarchy",
    TypeHierarchyPrepareParams,
    t.Optional[t.List[TypeHierarchyItem]],
    TypeHierarchyRegistrationOptions,
)
TYPE_HIERARCHY_SUPERTYPES = RequestType(
    "typeHierarchy/supertypes",
    TypeHierarchySupertypesParams,
    t.Optional[t.List[TypeHierarchyItem]],
)
TYPE_HIERARCHY_SUBTYPES = RequestType(
    "typeHierarchy/subtypes",
    TypeHierarchySubtypesParams,
    t.Optional[t.List[TypeHierarchyItem]],
)
INLINE_VALUE = RequestType(
    "textDocument/inlineValue",
    InlineValueParams,
    t.Optional[t.List[InlineValue]],
    InlineValueRegistrationOptions,
)
INLAY_HINT = RequestType(
    "textDocument/inlayHint",
    InlayHintParams,
    t.Optional[t.List[InlayHint]],
    InlayHintRegistrationOptions,
)
INLAY_HINT_RESOLVE = RequestType("inlayHint/resolve", InlayHint, InlayHint)
DOCUMENT_DIAGNOSTIC = RequestType(
    "textDocument/diagnostic",
    DocumentDiagnosticParams,
    DocumentDiagnosticReportResult,
    DiagnosticRegistrationOptions,
)
WORKSPACE_DIAGNOSTIC = RequestType(
    "workspace/diagnostic", WorkspaceDiagnosticParams, WorkspaceDiagnosticReport
)


def _collect(namespace: t.Dict[str, t.Any]) -> t.Dict[str, RequestType]:
    return {v.method: v for v in namespace.values() if isinstance(v, RequestType)}


REQUESTS: t.Mapping[str, RequestType] = _collect(globals())


def get_request(method: str, registry: t.Optional[t.Mapping[str, RequestType]] = None) -> RequestType:
    """Look up the payload types of a request method.

    Args:
        method: The method name, e.g. ``textDocument/completion``.
        registry: The registry to search, `REQUESTS` by default.

    Raises:
        UnknownMethodError: If no request is registered under `method`.
    """
    registry = REQUESTS if registry is None else registry
    try:
        return registry[method]
    except KeyError:
        _logger.debug("no request registered for method %r", method)
        raise UnknownMethodError(method) from None
