"""The initialize handshake, client and server capabilities, and dynamic registration."""

import typing as t

from pydantic import StrictBool, StrictStr

from .base import NULLABLE, LspModel, LSPAny, OneOf, UInt32
from .language import (
    CallHierarchyServerCapability,
    CodeActionClientCapabilities,
    CodeActionProviderCapability,
    CodeLensOptions,
    ColorProviderCapability,
    CompletionClientCapabilities,
    CompletionOptions,
    DeclarationProviderCapability,
    DefinitionProviderCapability,
    DiagnosticClientCapabilities,
    DiagnosticServerCapabilities,
    DocumentFormattingProviderCapability,
    DocumentHighlightOptions,
    DocumentLinkClientCapabilities,
    DocumentLinkOptions,
    DocumentOnTypeFormattingOptions,
    DocumentRangeFormattingProviderCapability,
    DocumentSymbolClientCapabilities,
    DocumentSymbolProviderCapability,
    FoldingRangeClientCapabilities,
    FoldingRangeProviderCapability,
    HoverClientCapabilities,
    HoverProviderCapability,
    ImplementationProviderCapability,
    InlayHintClientCapabilities,
    InlayHintServerCapabilities,
    InlineValueServerCapabilities,
    LinkedEditingRangeServerCapabilities,
    MonikerServerCapabilities,
    PublishDiagnosticsClientCapabilities,
    ReferenceOptions,
    RenameClientCapabilities,
    RenameProviderCapability,
    SelectionRangeProviderCapability,
    SemanticTokensClientCapabilities,
    SemanticTokensServerCapabilities,
    SignatureHelpClientCapabilities,
    SignatureHelpOptions,
    TypeDefinitionProviderCapability,
    TypeHierarchyServerCapabilities,
)
from .notebook import (
    NotebookDocumentClientCapabilities,
    NotebookDocumentSyncOptions,
    NotebookDocumentSyncRegistrationOptions,
)
from .structs import (
    DynamicRegistrationClientCapabilities,
    GotoCapability,
    PositionEncodingKind,
    RegistrableOptions,
    WorkDoneProgressParams,
    WorkspaceFolder,
)
from .sync import TextDocumentSyncCapability, TextDocumentSyncClientCapabilities
from .uri import Uri
from .window import TraceValue, WindowClientCapabilities
from .workspace import (
    CodeLensWorkspaceClientCapabilities,
    DiagnosticWorkspaceClientCapabilities,
    DidChangeWatchedFilesClientCapabilities,
    ExecuteCommandClientCapabilities,
    ExecuteCommandOptions,
    InlayHintWorkspaceClientCapabilities,
    InlineValueWorkspaceClientCapabilities,
    SemanticTokensWorkspaceClientCapabilities,
    WorkspaceEditClientCapabilities,
    WorkspaceFileOperationsClientCapabilities,
    WorkspaceFileOperationsServerCapabilities,
    WorkspaceFoldersServerCapabilities,
    WorkspaceSymbolClientCapabilities,
    WorkspaceSymbolProviderCapability,
)

# Client capabilities


class WorkspaceClientCapabilities(LspModel):
    """Workspace specific client capabilities.

    Args:
        applyEdit (Optional[bool]): The client supports applying batch edits to the workspace.
        workspaceEdit (Optional[WorkspaceEditClientCapabilities]): Capabilities specific to `WorkspaceEdit`s.
        didChangeConfiguration (Optional[DynamicRegistrationClientCapabilities]): Capabilities specific to
            the `workspace/didChangeConfiguration` notification.
        didChangeWatchedFiles (Optional[DidChangeWatchedFilesClientCapabilities]): Capabilities specific to
            the `workspace/didChangeWatchedFiles` notification.
        symbol (Optional[WorkspaceSymbolClientCapabilities]): Capabilities specific to `workspace/symbol`.
        executeCommand (Optional[ExecuteCommandClientCapabilities]): Capabilities specific to
            `workspace/executeCommand`.
        workspaceFolders (Optional[bool]): The client has support for workspace folders.
        configuration (Optional[bool]): The client supports `workspace/configuration` requests.
        semanticTokens (Optional[RefreshClientCapabilities]): Semantic tokens refresh support.
        codeLens (Optional[RefreshClientCapabilities]): Code lens refresh support.
        fileOperations (Optional[WorkspaceFileOperationsClientCapabilities]): File operation notifications
            and requests the client supports.
        inlineValue (Optional[RefreshClientCapabilities]): Inline value refresh support.
        inlayHint (Optional[RefreshClientCapabilities]): Inlay hint refresh support.
        diagnostics (Optional[RefreshClientCapabilities]): Diagnostic refresh support.
    """

    applyEdit: t.Optional[StrictBool] = None
    workspaceEdit: t.Optional[WorkspaceEditClientCapabilities] = None
    didChangeConfiguration: t.Optional[DynamicRegistrationClientCapabilities] = None
    didChangeWatchedFiles: t.Optional[DidChangeWatchedFilesClientCapabilities] = None
    symbol: t.Optional[WorkspaceSymbolClientCapabilities] = None
    executeCommand: t.Optional[ExecuteCommandClientCapabilities] = None
    workspaceFolders: t.Optional[StrictBool] = None
    configuration: t.Optional[StrictBool] = None
    semanticTokens: t.Optional[SemanticTokensWorkspaceClientCapabilities] = None
    codeLens: t.Optional[CodeLensWorkspaceClientCapabilities] = None
    fileOperations: t.Optional[WorkspaceFileOperationsClientCapabilities] = None
    inlineValue: t.Optional[InlineValueWorkspaceClientCapabilities] = None
    inlayHint: t.Optional[InlayHintWorkspaceClientCapabilities] = None
    diagnostics: t.Optional[DiagnosticWorkspaceClientCapabilities] = None


class TextDocumentClientCapabilities(LspModel):
    """Text document specific client capabilities, one entry per language feature."""

    synchronization: t.Optional[TextDocumentSyncClientCapabilities] = None
    completion: t.Optional[CompletionClientCapabilities] = None
    hover: t.Optional[HoverClientCapabilities] = None
    signatureHelp: t.Optional[SignatureHelpClientCapabilities] = None
    declaration: t.Optional[GotoCapability] = None
    definition: t.Optional[GotoCapability] = None
    typeDefinition: t.Optional[GotoCapability] = None
    implementation: t.Optional[GotoCapability] = None
    references: t.Optional[DynamicRegistrationClientCapabilities] = None
    documentHighlight: t.Optional[DynamicRegistrationClientCapabilities] = None
    documentSymbol: t.Optional[DocumentSymbolClientCapabilities] = None
    codeAction: t.Optional[CodeActionClientCapabilities] = None
    codeLens: t.Optional[DynamicRegistrationClientCapabilities] = None
    documentLink: t.Optional[DocumentLinkClientCapabilities] = None
    colorProvider: t.Optional[DynamicRegistrationClientCapabilities] = None
    formatting: t.Optional[DynamicRegistrationClientCapabilities] = None
    rangeFormatting: t.Optional[DynamicRegistrationClientCapabilities] = None
    onTypeFormatting: t.Optional[DynamicRegistrationClientCapabilities] = None
    rename: t.Optional[RenameClientCapabilities] = None
    publishDiagnostics: t.Optional[PublishDiagnosticsClientCapabilities] = None
    foldingRange: t.Optional[FoldingRangeClientCapabilities] = None
    selectionRange: t.Optional[DynamicRegistrationClientCapabilities] = None
    linkedEditingRange: t.Optional[DynamicRegistrationClientCapabilities] = None
    callHierarchy: t.Optional[DynamicRegistrationClientCapabilities] = None
    semanticTokens: t.Optional[SemanticTokensClientCapabilities] = None
    moniker: t.Optional[DynamicRegistrationClientCapabilities] = None
    typeHierarchy: t.Optional[DynamicRegistrationClientCapabilities] = None
    inlineValue: t.Optional[DynamicRegistrationClientCapabilities] = None
    inlayHint: t.Optional[InlayHintClientCapabilities] = None
    diagnostic: t.Optional[DiagnosticClientCapabilities] = None


class StaleRequestSupportClientCapabilities(LspModel):
    """How the client handles stale requests (@since 3.17.0).

    Args:
        cancel (bool): The client will actively cancel the request.
        retryOnContentModified (List[str]): The methods the client retries when a request
            fails with `ContentModified`.
    """

    cancel: StrictBool
    retryOnContentModified: t.List[StrictStr]


class RegularExpressionsClientCapabilities(LspModel):
    engine: StrictStr
    version: t.Optional[StrictStr] = None


class MarkdownClientCapabilities(LspModel):
    """Client capabilities specific to the used markdown parser (@since 3.16.0).

    Args:
        parser (str): The name of the parser.
        version (Optional[str]): The version of the parser.
        allowedTags (Optional[List[str]]): A list of HTML tags that the client allows in Markdown.
    """

    parser: StrictStr
    version: t.Optional[StrictStr] = None
    allowedTags: t.Optional[t.List[StrictStr]] = None


class GeneralClientCapabilities(LspModel):
    """General client capabilities (@since 3.16.0).

    Args:
        staleRequestSupport (Optional[StaleRequestSupportClientCapabilities]): Stale request handling.
        regularExpressions (Optional[RegularExpressionsClientCapabilities]): Regular expression engine.
        markdown (Optional[MarkdownClientCapabilities]): Markdown parser.
        positionEncodings (Optional[List[PositionEncodingKind]]): The position encodings supported by
            the client, in order of preference (@since 3.17.0).
    """

    staleRequestSupport: t.Optional[StaleRequestSupportClientCapabilities] = None
    regularExpressions: t.Optional[RegularExpressionsClientCapabilities] = None
    markdown: t.Optional[MarkdownClientCapabilities] = None
    positionEncodings: t.Optional[t.List[PositionEncodingKind]] = None


class ClientCapabilities(LspModel):
    """The capabilities provided by the client.

    Args:
        workspace (Optional[WorkspaceClientCapabilities]): Workspace specific client capabilities.
        textDocument (Optional[TextDocumentClientCapabilities]): Text document specific client capabilities.
        notebookDocument (Optional[NotebookDocumentClientCapabilities]): Notebook specific client capabilities.
        window (Optional[WindowClientCapabilities]): Window specific client capabilities.
        general (Optional[GeneralClientCapabilities]): General client capabilities.
        experimental (Optional[Any]): Experimental client capabilities.
    """

    workspace: t.Optional[WorkspaceClientCapabilities] = None
    textDocument: t.Optional[TextDocumentClientCapabilities] = None
    notebookDocument: t.Optional[NotebookDocumentClientCapabilities] = None
    window: t.Optional[WindowClientCapabilities] = None
    general: t.Optional[GeneralClientCapabilities] = None
    experimental: t.Optional[LSPAny] = None


# Server capabilities


class WorkspaceServerCapabilities(LspModel):
    workspaceFolders: t.Optional[WorkspaceFoldersServerCapabilities] = None
    fileOperations: t.Optional[WorkspaceFileOperationsServerCapabilities] = None


NotebookDocumentSyncServerCapabilities = RegistrableOptions[
    NotebookDocumentSyncOptions, NotebookDocumentSyncRegistrationOptions
]


class ServerCapabilities(LspModel):
    """The capabilities the language server provides.

    Every provider field is optional; an absent provider means the server does
    not support the feature. Many accept a bare boolean or an options record.
    """

    positionEncoding: t.Optional[PositionEncodingKind] = None
    textDocumentSync: t.Optional[TextDocumentSyncCapability] = None
    notebookDocumentSync: t.Optional[NotebookDocumentSyncServerCapabilities] = None
    completionProvider: t.Optional[CompletionOptions] = None
    hoverProvider: t.Optional[HoverProviderCapability] = None
    signatureHelpProvider: t.Optional[SignatureHelpOptions] = None
    declarationProvider: t.Optional[DeclarationProviderCapability] = None
    definitionProvider: t.Optional[DefinitionProviderCapability] = None
    typeDefinitionProvider: t.Optional[TypeDefinitionProviderCapability] = None
    implementationProvider: t.Optional[ImplementationProviderCapability] = None
    referencesProvider: t.Optional[OneOf[StrictBool, ReferenceOptions]] = None
    documentHighlightProvider: t.Optional[OneOf[StrictBool, DocumentHighlightOptions]] = None
    documentSymbolProvider: t.Optional[DocumentSymbolProviderCapability] = None
    codeActionProvider: t.Optional[CodeActionProviderCapability] = None
    codeLensProvider: t.Optional[CodeLensOptions] = None
    documentLinkProvider: t.Optional[DocumentLinkOptions] = None
    colorProvider: t.Optional[ColorProviderCapability] = None
    documentFormattingProvider: t.Optional[DocumentFormattingProviderCapability] = None
    documentRangeFormattingProvider: t.Optional[DocumentRangeFormattingProviderCapability] = None
    documentOnTypeFormattingProvider: t.Optional[DocumentOnTypeFormattingOptions] = None
    renameProvider: t.Optional[RenameProviderCapability] = None
    foldingRangeProvider: t.Optional[FoldingRangeProviderCapability] = None
    executeCommandProvider: t.Optional[ExecuteCommandOptions] = None
    selectionRangeProvider: t.Optional[SelectionRangeProviderCapability] = None
    linkedEditingRangeProvider: t.Optional[LinkedEditingRangeServerCapabilities] = None
    callHierarchyProvider: t.Optional[CallHierarchyServerCapability] = None
    semanticTokensProvider: t.Optional[SemanticTokensServerCapabilities] = None
    monikerProvider: t.Optional[MonikerServerCapabilities] = None
    typeHierarchyProvider: t.Optional[TypeHierarchyServerCapabilities] = None
    inlineValueProvider: t.Optional[InlineValueServerCapabilities] = None
    inlayHintProvider: t.Optional[InlayHintServerCapabilities] = None
    diagnosticProvider: t.Optional[DiagnosticServerCapabilities] = None
    workspaceSymbolProvider: t.Optional[WorkspaceSymbolProviderCapability] = None
    workspace: t.Optional[WorkspaceServerCapabilities] = None
    experimental: t.Optional[LSPAny] = None


# Initialize handshake


class ClientInfo(LspModel):
    """Information about the client (@since 3.15.0).

    Args:
        name (str): The name of the client as defined by the client.
        version (Optional[str]): The client's version as defined by the client.
    """

    name: StrictStr
    version: t.Optional[StrictStr] = None


class ServerInfo(LspModel):
    name: StrictStr
    version: t.Optional[StrictStr] = None


class InitializeParams(WorkDoneProgressParams):
    """Parameters of the `initialize` request.

    `processId` and `rootUri` are always emitted, as ``null`` when unset.

    Args:
        processId (Optional[int]): The process id of the parent process that started the server.
        clientInfo (Optional[ClientInfo]): Information about the client.
        locale (Optional[str]): The locale the client is currently showing the user interface in.
        rootPath (Optional[str]): The rootPath of the workspace (deprecated in favour of `rootUri`).
        rootUri (Optional[Uri]): The rootUri of the workspace (deprecated in favour of `workspaceFolders`).
        initializationOptions (Optional[Any]): User provided initialization options.
        capabilities (ClientCapabilities): The capabilities provided by the client (editor or tool).
        trace (Optional[TraceValue]): The initial trace setting.
        workspaceFolders (Optional[List[WorkspaceFolder]]): The workspace folders configured in the
            client when the server starts.
    """

    processId: t.Annotated[t.Optional[UInt32], NULLABLE] = None
    clientInfo: t.Optional[ClientInfo] = None
    locale: t.Optional[StrictStr] = None
    rootPath: t.Optional[StrictStr] = None
    rootUri: t.Annotated[t.Optional[Uri], NULLABLE] = None
    initializationOptions: t.Optional[LSPAny] = None
    capabilities: ClientCapabilities
    trace: t.Optional[TraceValue] = None
    workspaceFolders: t.Optional[t.List[WorkspaceFolder]] = None


class InitializeResult(LspModel):
    """The result returned from an initialize request.

    Args:
        capabilities (ServerCapabilities): The capabilities the language server provides.
        serverInfo (Optional[ServerInfo]): Information about the server.
    """

    capabilities: ServerCapabilities
    serverInfo: t.Optional[ServerInfo] = None


class InitializeError(LspModel):
    """Data of the error returned when `initialize` fails with `UnknownProtocolVersion`.

    Args:
        retry (bool): Whether the client should retry after the user was asked to resolve the problem.
    """

    retry: StrictBool


class InitializedParams(LspModel):
    pass


# Dynamic registration


class Registration(LspModel):
    """General parameters to register for a capability.

    Args:
        id (str): The id used to register the request, usable to unregister it again.
        method (str): The method / capability to register for.
        registerOptions (Optional[Any]): Options necessary for the registration.
    """

    id: StrictStr
    method: StrictStr
    registerOptions: t.Optional[LSPAny] = None


class RegistrationParams(LspModel):
    registrations: t.List[Registration]


class Unregistration(LspModel):
    """General parameters to unregister a capability.

    Args:
        id (str): The id used to unregister the request or notification.
        method (str): The method / capability to unregister for.
    """

    id: StrictStr
    method: StrictStr


class UnregistrationParams(LspModel):
    """Parameters of `client/unregisterCapability`.

    The wire name of the list is ``unregisterations``. The misspelling is part
    of the protocol and is kept for compatibility.
    """

    unregisterations: t.List[Unregistration]
