"""Language features: hover, completion, navigation, code actions, formatting,
semantic tokens, hierarchies, inlay hints and diagnostics.

Each feature follows the same layout: its enumerations, the client
capability, the server options and registration options, the request
params and finally the result records.
"""

import enum
import typing as t

from pydantic import ConfigDict, Field, StrictBool, StrictFloat, StrictStr, field_validator
from typing_extensions import Literal

from .base import (
    NULLABLE,
    Int32,
    LspIntEnum,
    LspModel,
    LspStrEnum,
    LSPAny,
    LSPObject,
    OneOf,
    UInt32,
)
from .structs import (
    Command,
    Diagnostic,
    DiagnosticTag,
    Documentation,
    Location,
    LocationLink,
    MarkedString,
    MarkupContent,
    MarkupKind,
    PartialResultParams,
    Position,
    ProviderCapability,
    Range,
    RegistrableOptions,
    StaticRegistrationOptions,
    SymbolKind,
    SymbolKindCapability,
    SymbolTag,
    TagSupport,
    TextDocumentIdentifier,
    TextDocumentPositionParams,
    TextDocumentRegistrationOptions,
    TextEdit,
    WorkDoneProgressOptions,
    WorkDoneProgressParams,
    WorkspaceEdit,
)
from .uri import Uri


class ResolveSupport(LspModel):
    """The properties a client can resolve lazily.

    Args:
        properties (List[str]): The names of the properties.
    """

    properties: t.List[StrictStr]


# Hover


class HoverClientCapabilities(LspModel):
    """Client capabilities for `textDocument/hover`.

    Args:
        dynamicRegistration (Optional[bool]): Whether hover supports dynamic registration.
        contentFormat (Optional[List[MarkupKind]]): Content formats for the content property,
            in order of preference.
    """

    dynamicRegistration: t.Optional[StrictBool] = None
    contentFormat: t.Optional[t.List[MarkupKind]] = None


class HoverOptions(WorkDoneProgressOptions):
    pass


class HoverRegistrationOptions(TextDocumentRegistrationOptions, HoverOptions):
    pass


HoverProviderCapability = OneOf[StrictBool, HoverOptions]


class HoverParams(TextDocumentPositionParams, WorkDoneProgressParams):
    pass


HoverContents = OneOf[MarkupContent, MarkedString, t.List[MarkedString]]


class Hover(LspModel):
    """The result of a hover request.

    Args:
        contents (Union[MarkupContent, MarkedString, List[MarkedString]]): The hover's content.
        range (Optional[Range]): An optional range used to visualize the hover, e.g. by
            changing the background color.
    """

    contents: HoverContents
    range: t.Optional[Range] = None


# Completion


class CompletionItemKind(LspIntEnum):
    """The kind of a completion entry."""

    TEXT = 1
    METHOD = 2
    FUNCTION = 3
    CONSTRUCTOR = 4
    FIELD = 5
    VARIABLE = 6
    CLASS = 7
    INTERFACE = 8
    MODULE = 9
    PROPERTY = 10
    UNIT = 11
    VALUE = 12
    ENUM = 13
    KEYWORD = 14
    SNIPPET = 15
    COLOR = 16
    FILE = 17
    REFERENCE = 18
    FOLDER = 19
    ENUM_MEMBER = 20
    CONSTANT = 21
    STRUCT = 22
    EVENT = 23
    OPERATOR = 24
    TYPE_PARAMETER = 25


class CompletionItemTag(LspIntEnum):
    """Completion item tags are extra annotations that tweak the rendering of a completion item.

    Attributes:
        DEPRECATED: Renders a completion as obsolete, usually using a strike-out.
    """

    DEPRECATED = 1


class InsertTextFormat(LspIntEnum):
    """Defines whether the insert text in a completion item should be interpreted as plain text or a snippet.

    Attributes:
        PLAIN_TEXT: The primary text to be inserted is treated as a plain string.
        SNIPPET: The primary text to be inserted is treated as a snippet.
    """

    PLAIN_TEXT = 1
    SNIPPET = 2


class InsertTextMode(LspIntEnum):
    """How whitespace and indentation is handled during completion item insertion (@since 3.16.0).

    Attributes:
        AS_IS: The insertion or replace string is taken as it is.
        ADJUST_INDENTATION: The editor adjusts leading whitespace of new lines to the line
            the item is accepted on.
    """

    AS_IS = 1
    ADJUST_INDENTATION = 2


class CompletionTriggerKind(LspIntEnum):
    """Defines how the completion was triggered.

    Attributes:
        INVOKED: Completion was triggered by typing an identifier.
        TRIGGER_CHARACTER: Completion was triggered by a trigger character.
        TRIGGER_FOR_INCOMPLETE_COMPLETIONS: Completion was re-triggered as the current completion list is incomplete.
    """

    INVOKED = 1
    TRIGGER_CHARACTER = 2
    TRIGGER_FOR_INCOMPLETE_COMPLETIONS = 3


class InsertTextModeSupport(LspModel):
    valueSet: t.List[InsertTextMode]


class CompletionItemCapability(LspModel):
    """The client supports the following `CompletionItem` specific capabilities.

    Args:
        snippetSupport (Optional[bool]): Client supports snippets as insert text.
        commitCharactersSupport (Optional[bool]): Client supports commit characters on a completion item.
        documentationFormat (Optional[List[MarkupKind]]): Content formats for the documentation property.
        deprecatedSupport (Optional[bool]): Client supports the deprecated property.
        preselectSupport (Optional[bool]): Client supports the preselect property.
        tagSupport (Optional[TagSupport[CompletionItemTag]]): Tags the client renders.
        insertReplaceSupport (Optional[bool]): Client supports insert replace edits.
        resolveSupport (Optional[ResolveSupport]): Properties the client can resolve lazily.
        insertTextModeSupport (Optional[InsertTextModeSupport]): Supported insert text modes.
        labelDetailsSupport (Optional[bool]): Client supports `CompletionItemLabelDetails`.
    """

    snippetSupport: t.Optional[StrictBool] = None
    commitCharactersSupport: t.Optional[StrictBool] = None
    documentationFormat: t.Optional[t.List[MarkupKind]] = None
    deprecatedSupport: t.Optional[StrictBool] = None
    preselectSupport: t.Optional[StrictBool] = None
    tagSupport: t.Optional[TagSupport[CompletionItemTag]] = None
    insertReplaceSupport: t.Optional[StrictBool] = None
    resolveSupport: t.Optional[ResolveSupport] = None
    insertTextModeSupport: t.Optional[InsertTextModeSupport] = None
    labelDetailsSupport: t.Optional[StrictBool] = None


class CompletionItemKindCapability(LspModel):
    valueSet: t.Optional[t.List[CompletionItemKind]] = None


class CompletionListCapability(LspModel):
    """Capabilities specific to `CompletionList` (@since 3.17.0).

    Args:
        itemDefaults (Optional[List[str]]): The property names the client supports in
            `CompletionList.itemDefaults`.
    """

    itemDefaults: t.Optional[t.List[StrictStr]] = None


class CompletionClientCapabilities(LspModel):
    dynamicRegistration: t.Optional[StrictBool] = None
    completionItem: t.Optional[CompletionItemCapability] = None
    completionItemKind: t.Optional[CompletionItemKindCapability] = None
    contextSupport: t.Optional[StrictBool] = None
    insertTextMode: t.Optional[InsertTextMode] = None
    completionList: t.Optional[CompletionListCapability] = None


class CompletionOptionsCompletionItem(LspModel):
    labelDetailsSupport: t.Optional[StrictBool] = None


class CompletionOptions(WorkDoneProgressOptions):
    """Completion options advertised by the server.

    Args:
        triggerCharacters (Optional[List[str]]): Characters that trigger completion automatically.
        allCommitCharacters (Optional[List[str]]): Commit characters for every completion item.
        resolveProvider (Optional[bool]): The server provides support to resolve additional
            information for a completion item.
        completionItem (Optional[CompletionOptionsCompletionItem]): Completion item specific options.
    """

    triggerCharacters: t.Optional[t.List[StrictStr]] = None
    allCommitCharacters: t.Optional[t.List[StrictStr]] = None
    resolveProvider: t.Optional[StrictBool] = None
    completionItem: t.Optional[CompletionOptionsCompletionItem] = None


class CompletionRegistrationOptions(TextDocumentRegistrationOptions, CompletionOptions):
    pass


class CompletionContext(LspModel):
    """Contains additional information about the context in which a completion request is triggered.

    Args:
        triggerKind (CompletionTriggerKind): How the completion was triggered.
        triggerCharacter (Optional[str]): The trigger character that caused the completion.
    """

    triggerKind: CompletionTriggerKind
    triggerCharacter: t.Optional[StrictStr] = None


class CompletionParams(TextDocumentPositionParams, WorkDoneProgressParams, PartialResultParams):
    """Parameters of the `textDocument/completion` request.

    Args:
        context (Optional[CompletionContext]): How the completion was triggered. Only
            available if the client advertises `contextSupport`.
    """

    context: t.Optional[CompletionContext] = None


class InsertReplaceEdit(LspModel):
    """A special text edit to provide an insert and a replace operation (@since 3.16.0).

    Args:
        newText (str): The string to be inserted.
        insert (Range): The range if the insert is requested.
        replace (Range): The range if the replace is requested.
    """

    newText: StrictStr
    insert: Range
    replace: Range


CompletionTextEdit = OneOf[TextEdit, InsertReplaceEdit]


class CompletionItemLabelDetails(LspModel):
    """Additional details for a completion item label (@since 3.17.0).

    Args:
        detail (Optional[str]): Rendered less prominently directly after the label.
        description (Optional[str]): Rendered less prominently after `detail`.
    """

    detail: t.Optional[StrictStr] = None
    description: t.Optional[StrictStr] = None


class CompletionItem(LspModel):
    """A completion item represents a text snippet that is proposed to complete text that is being typed.

    Args:
        label (str): The label of this completion item.
        labelDetails (Optional[CompletionItemLabelDetails]): Additional details for the label.
        kind (Optional[CompletionItemKind]): The kind of this completion item.
        tags (Optional[List[CompletionItemTag]]): Tags for this completion item.
        detail (Optional[str]): A human-readable string with additional information about this item.
        documentation (Union[str, MarkupContent, None]): A human-readable string that represents a doc-comment.
        deprecated (Optional[bool]): Indicates if this item is deprecated.
        preselect (Optional[bool]): Select this item when showing.
        sortText (Optional[str]): A string that should be used when comparing this item with other items.
        filterText (Optional[str]): A string that should be used when filtering a set of completion items.
        insertText (Optional[str]): A string that should be inserted into a document when selecting this completion.
        insertTextFormat (Optional[InsertTextFormat]): The format of the insert text.
        insertTextMode (Optional[InsertTextMode]): How whitespace and indentation is handled.
        textEdit (Union[TextEdit, InsertReplaceEdit, None]): An edit which is applied to a document when
            selecting this completion.
        textEditText (Optional[str]): The edit text used if the list provides default edit ranges.
        additionalTextEdits (Optional[List[TextEdit]]): An optional array of additional text edits that are
            applied when selecting this completion.
        commitCharacters (Optional[List[str]]): An optional set of characters that when pressed while this
            completion is active will accept it first and then type that character.
        command (Optional[Command]): An optional command that is executed after inserting this completion.
        data (Optional[Any]): A data entry field that is preserved on a completion item between a completion
            and a completion resolve request.
    """

    label: StrictStr
    labelDetails: t.Optional[CompletionItemLabelDetails] = None
    kind: t.Optional[CompletionItemKind] = None
    tags: t.Optional[t.List[CompletionItemTag]] = None
    detail: t.Optional[StrictStr] = None
    documentation: t.Optional[Documentation] = None
    deprecated: t.Optional[StrictBool] = None
    preselect: t.Optional[StrictBool] = None
    sortText: t.Optional[StrictStr] = None
    filterText: t.Optional[StrictStr] = None
    insertText: t.Optional[StrictStr] = None
    insertTextFormat: t.Optional[InsertTextFormat] = None
    insertTextMode: t.Optional[InsertTextMode] = None
    textEdit: t.Optional[CompletionTextEdit] = None
    textEditText: t.Optional[StrictStr] = None
    additionalTextEdits: t.Optional[t.List[TextEdit]] = None
    commitCharacters: t.Optional[t.List[StrictStr]] = None
    command: t.Optional[Command] = None
    data: t.Optional[LSPAny] = None

    @classmethod
    def new_simple(cls, label: str, detail: str) -> "CompletionItem":
        """Create a completion item with only a label and a detail."""
        return cls(label=label, detail=detail)


class InsertReplaceRange(LspModel):
    insert: Range
    replace: Range


class CompletionListItemDefaults(LspModel):
    """Defaults applied to every item of a completion list that does not set them (@since 3.17.0)."""

    commitCharacters: t.Optional[t.List[StrictStr]] = None
    editRange: t.Optional[OneOf[Range, InsertReplaceRange]] = None
    insertTextFormat: t.Optional[InsertTextFormat] = None
    insertTextMode: t.Optional[InsertTextMode] = None
    data: t.Optional[LSPAny] = None


class CompletionList(LspModel):
    """Represents a collection of completion items to be presented in the editor.

    Args:
        isIncomplete (bool): This list is not complete. Further typing should result in recomputing this list.
        itemDefaults (Optional[CompletionListItemDefaults]): Defaults for the items of this list.
        items (List[CompletionItem]): The completion items.
    """

    isIncomplete: StrictBool
    itemDefaults: t.Optional[CompletionListItemDefaults] = None
    items: t.List[CompletionItem]


CompletionResponse = OneOf[t.List[CompletionItem], CompletionList]


# Signature help


class SignatureHelpTriggerKind(LspIntEnum):
    """How a signature help was triggered (@since 3.15.0).

    Attributes:
        INVOKED: Invoked manually by the user or by a command.
        TRIGGER_CHARACTER: Triggered by a trigger character.
        CONTENT_CHANGE: Triggered by the cursor moving or by the document content changing.
    """

    INVOKED = 1
    TRIGGER_CHARACTER = 2
    CONTENT_CHANGE = 3


class ParameterInformationSettings(LspModel):
    labelOffsetSupport: t.Optional[StrictBool] = None


class SignatureInformationSettings(LspModel):
    documentationFormat: t.Optional[t.List[MarkupKind]] = None
    parameterInformation: t.Optional[ParameterInformationSettings] = None
    activeParameterSupport: t.Optional[StrictBool] = None


class SignatureHelpClientCapabilities(LspModel):
    dynamicRegistration: t.Optional[StrictBool] = None
    signatureInformation: t.Optional[SignatureInformationSettings] = None
    contextSupport: t.Optional[StrictBool] = None


class SignatureHelpOptions(WorkDoneProgressOptions):
    """Signature help options advertised by the server.

    Args:
        triggerCharacters (Optional[List[str]]): Characters that trigger signature help automatically.
        retriggerCharacters (Optional[List[str]]): Characters that re-trigger signature help while it is showing.
    """

    triggerCharacters: t.Optional[t.List[StrictStr]] = None
    retriggerCharacters: t.Optional[t.List[StrictStr]] = None


class SignatureHelpRegistrationOptions(TextDocumentRegistrationOptions, SignatureHelpOptions):
    pass


# Either the label itself or inclusive start and exclusive end offsets into the signature label.
ParameterLabel = OneOf[StrictStr, t.Tuple[UInt32, UInt32]]


class ParameterInformation(LspModel):
    """Represents a parameter of a callable-signature.

    Args:
        label (Union[str, Tuple[int, int]]): The label of this parameter information.
        documentation (Union[str, MarkupContent, None]): The human-readable doc-comment of this parameter.
    """

    label: ParameterLabel
    documentation: t.Optional[Documentation] = None


class SignatureInformation(LspModel):
    """Represents the signature of something callable.

    Args:
        label (str): The label of this signature.
        documentation (Union[str, MarkupContent, None]): The human-readable doc-comment of this signature.
        parameters (Optional[List[ParameterInformation]]): The parameters of this signature.
        activeParameter (Optional[int]): The index of the active parameter (@since 3.16.0).
    """

    label: StrictStr
    documentation: t.Optional[Documentation] = None
    parameters: t.Optional[t.List[ParameterInformation]] = None
    activeParameter: t.Optional[UInt32] = None


class SignatureHelp(LspModel):
    """The signature of something callable, with the active signature and parameter.

    Args:
        signatures (List[SignatureInformation]): One or more signatures.
        activeSignature (Optional[int]): The active signature.
        activeParameter (Optional[int]): The active parameter of the active signature.
    """

    signatures: t.List[SignatureInformation]
    activeSignature: t.Optional[UInt32] = None
    activeParameter: t.Optional[UInt32] = None


class SignatureHelpContext(LspModel):
    """Additional information about the context in which a signature help request was triggered.

    Args:
        triggerKind (SignatureHelpTriggerKind): Action that caused signature help to be triggered.
        triggerCharacter (Optional[str]): Character that caused signature help to be triggered.
        isRetrigger (bool): Whether signature help was already showing when it was triggered.
        activeSignatureHelp (Optional[SignatureHelp]): The currently active `SignatureHelp`.
    """

    triggerKind: SignatureHelpTriggerKind
    triggerCharacter: t.Optional[StrictStr] = None
    isRetrigger: StrictBool
    activeSignatureHelp: t.Optional[SignatureHelp] = None


class SignatureHelpParams(TextDocumentPositionParams, WorkDoneProgressParams):
    context: t.Optional[SignatureHelpContext] = None


# Goto declaration, definition, type definition and implementation


class DeclarationOptions(WorkDoneProgressOptions):
    pass


class DeclarationRegistrationOptions(
    DeclarationOptions, TextDocumentRegistrationOptions, StaticRegistrationOptions
):
    pass


DeclarationProviderCapability = ProviderCapability[DeclarationOptions, DeclarationRegistrationOptions]


class DeclarationParams(TextDocumentPositionParams, WorkDoneProgressParams, PartialResultParams):
    pass


class DefinitionOptions(WorkDoneProgressOptions):
    pass


class DefinitionRegistrationOptions(TextDocumentRegistrationOptions, DefinitionOptions):
    pass


DefinitionProviderCapability = OneOf[StrictBool, DefinitionOptions]


class DefinitionParams(TextDocumentPositionParams, WorkDoneProgressParams, PartialResultParams):
    pass


class TypeDefinitionOptions(WorkDoneProgressOptions):
    pass


class TypeDefinitionRegistrationOptions(
    TextDocumentRegistrationOptions, TypeDefinitionOptions, StaticRegistrationOptions
):
    pass


TypeDefinitionProviderCapability = ProviderCapability[TypeDefinitionOptions, TypeDefinitionRegistrationOptions]


class TypeDefinitionParams(TextDocumentPositionParams, WorkDoneProgressParams, PartialResultParams):
    pass


class ImplementationOptions(WorkDoneProgressOptions):
    pass


class ImplementationRegistrationOptions(
    TextDocumentRegistrationOptions, ImplementationOptions, StaticRegistrationOptions
):
    pass


ImplementationProviderCapability = ProviderCapability[ImplementationOptions, ImplementationRegistrationOptions]


class ImplementationParams(TextDocumentPositionParams, WorkDoneProgressParams, PartialResultParams):
    pass


# A single location, several locations, or location links carrying origin and target spans.
GotoDefinitionResponse = OneOf[Location, t.List[Location], t.List[LocationLink]]

GotoDeclarationResponse = GotoDefinitionResponse
GotoTypeDefinitionResponse = GotoDefinitionResponse
GotoImplementationResponse = GotoDefinitionResponse


# References


class ReferenceOptions(WorkDoneProgressOptions):
    pass


class ReferenceRegistrationOptions(TextDocumentRegistrationOptions, ReferenceOptions):
    pass


class ReferenceContext(LspModel):
    """Additional information for a references request.

    Args:
        includeDeclaration (bool): Include the declaration of the current symbol.
    """

    includeDeclaration: StrictBool


class ReferenceParams(TextDocumentPositionParams, WorkDoneProgressParams, PartialResultParams):
    context: ReferenceContext


# Document highlight


class DocumentHighlightKind(LspIntEnum):
    """A document highlight kind.

    Attributes:
        TEXT: A textual occurrence.
        READ: Read-access of a symbol, like reading a variable.
        WRITE: Write-access of a symbol, like writing to a variable.
    """

    TEXT = 1
    READ = 2
    WRITE = 3


class DocumentHighlightOptions(WorkDoneProgressOptions):
    pass


class DocumentHighlightRegistrationOptions(TextDocumentRegistrationOptions, DocumentHighlightOptions):
    pass


class DocumentHighlightParams(TextDocumentPositionParams, WorkDoneProgressParams, PartialResultParams):
    pass


class DocumentHighlight(LspModel):
    """A range inside a text document which deserves special attention.

    Args:
        range (Range): The range this highlight applies to.
        kind (Optional[DocumentHighlightKind]): The highlight kind, default is `TEXT`.
    """

    range: Range
    kind: t.Optional[DocumentHighlightKind] = None


# Document symbols


class DocumentSymbolClientCapabilities(LspModel):
    """Client capabilities for `textDocument/documentSymbol`.

    Args:
        dynamicRegistration (Optional[bool]): Whether document symbol supports dynamic registration.
        symbolKind (Optional[SymbolKindCapability]): Specific capabilities for the `SymbolKind`.
        hierarchicalDocumentSymbolSupport (Optional[bool]): The client supports hierarchical document symbols.
        tagSupport (Optional[TagSupport[SymbolTag]]): The tags the client supports (@since 3.16.0).
        labelSupport (Optional[bool]): The client supports an additional label in the UI (@since 3.16.0).
    """

    dynamicRegistration: t.Optional[StrictBool] = None
    symbolKind: t.Optional[SymbolKindCapability] = None
    hierarchicalDocumentSymbolSupport: t.Optional[StrictBool] = None
    tagSupport: t.Optional[TagSupport[SymbolTag]] = None
    labelSupport: t.Optional[StrictBool] = None


class DocumentSymbolOptions(WorkDoneProgressOptions):
    label: t.Optional[StrictStr] = None


class DocumentSymbolRegistrationOptions(TextDocumentRegistrationOptions, DocumentSymbolOptions):
    pass


DocumentSymbolProviderCapability = OneOf[StrictBool, DocumentSymbolOptions]


class DocumentSymbolParams(WorkDoneProgressParams, PartialResultParams):
    textDocument: TextDocumentIdentifier


class DocumentSymbol(LspModel):
    """Represents programming constructs like variables, classes, interfaces etc. that appear in a document.

    Document symbols can be hierarchical and they have two ranges: one that
    encloses its definition and one that points to its most interesting range,
    e.g. the range of an identifier.

    Args:
        name (str): The name of this symbol.
        detail (Optional[str]): More detail for this symbol, e.g. the signature of a function.
        kind (SymbolKind): The kind of this symbol.
        tags (Optional[List[SymbolTag]]): Tags for this document symbol.
        deprecated (Optional[bool]): Indicates if this symbol is deprecated (deprecated, use tags).
        range (Range): The range enclosing this symbol not including leading/trailing whitespace.
        selectionRange (Range): The range that should be selected and revealed when this symbol is being picked.
        children (Optional[List[DocumentSymbol]]): Children of this symbol, e.g. properties of a class.
    """

    name: StrictStr
    detail: t.Optional[StrictStr] = None
    kind: SymbolKind
    tags: t.Optional[t.List[SymbolTag]] = None
    deprecated: t.Optional[StrictBool] = None
    range: Range
    selectionRange: Range
    children: t.Optional[t.List["DocumentSymbol"]] = None


class SymbolInformation(LspModel):
    """Represents information about programming constructs like variables, classes, interfaces etc.

    Args:
        name (str): The name of this symbol.
        kind (SymbolKind): The kind of this symbol.
        tags (Optional[List[SymbolTag]]): Tags for this symbol.
        deprecated (Optional[bool]): Indicates if this symbol is deprecated (deprecated, use tags).
        location (Location): The location of this symbol.
        containerName (Optional[str]): The name of the symbol containing this symbol.
    """

    name: StrictStr
    kind: SymbolKind
    tags: t.Optional[t.List[SymbolTag]] = None
    deprecated: t.Optional[StrictBool] = None
    location: Location
    containerName: t.Optional[StrictStr] = None


DocumentSymbolResponse = OneOf[t.List[SymbolInformation], t.List[DocumentSymbol]]


# Code action


class CodeActionKind(LspStrEnum):
    """The kind of a code action.

    Kinds are a hierarchical list of identifiers separated by ``.``, e.g.
    ``"refactor.extract.function"``. Any string is accepted.
    """

    EMPTY = ""
    QUICKFIX = "quickfix"
    REFACTOR = "refactor"
    REFACTOR_EXTRACT = "refactor.extract"
    REFACTOR_INLINE = "refactor.inline"
    REFACTOR_REWRITE = "refactor.rewrite"
    SOURCE = "source"
    SOURCE_ORGANIZE_IMPORTS = "source.organizeImports"
    SOURCE_FIX_ALL = "source.fixAll"


class CodeActionTriggerKind(LspIntEnum):
    """The reason why code actions were requested (@since 3.17.0).

    Attributes:
        INVOKED: Code actions were explicitly requested by the user or by an extension.
        AUTOMATIC: Code actions were requested automatically, e.g. after a document change.
    """

    INVOKED = 1
    AUTOMATIC = 2


class CodeActionKindLiteralSupport(LspModel):
    valueSet: t.List[CodeActionKind]


class CodeActionLiteralSupport(LspModel):
    codeActionKind: CodeActionKindLiteralSupport


class CodeActionClientCapabilities(LspModel):
    """Client capabilities for `textDocument/codeAction`.

    Args:
        dynamicRegistration (Optional[bool]): Whether code action supports dynamic registration.
        codeActionLiteralSupport (Optional[CodeActionLiteralSupport]): The client supports code action
            literals as a valid response of the request.
        isPreferredSupport (Optional[bool]): Whether code action supports the `isPreferred` property.
        disabledSupport (Optional[bool]): Whether code action supports the `disabled` property.
        dataSupport (Optional[bool]): Whether code action supports the `data` property.
        resolveSupport (Optional[ResolveSupport]): Properties the client can resolve lazily.
        honorsChangeAnnotations (Optional[bool]): Whether the client honors change annotations.
    """

    dynamicRegistration: t.Optional[StrictBool] = None
    codeActionLiteralSupport: t.Optional[CodeActionLiteralSupport] = None
    isPreferredSupport: t.Optional[StrictBool] = None
    disabledSupport: t.Optional[StrictBool] = None
    dataSupport: t.Optional[StrictBool] = None
    resolveSupport: t.Optional[ResolveSupport] = None
    honorsChangeAnnotations: t.Optional[StrictBool] = None


class CodeActionOptions(WorkDoneProgressOptions):
    """Code action options advertised by the server.

    Args:
        codeActionKinds (Optional[List[CodeActionKind]]): Code action kinds this server may return.
        resolveProvider (Optional[bool]): The server provides support to resolve additional
            information for a code action.
    """

    codeActionKinds: t.Optional[t.List[CodeActionKind]] = None
    resolveProvider: t.Optional[StrictBool] = None


class CodeActionRegistrationOptions(TextDocumentRegistrationOptions, CodeActionOptions):
    pass


CodeActionProviderCapability = OneOf[StrictBool, CodeActionOptions]


class CodeActionContext(LspModel):
    """Contains additional diagnostic information about the context in which a code action is run.

    Args:
        diagnostics (List[Diagnostic]): The diagnostics overlapping the requested range.
        only (Optional[List[CodeActionKind]]): Requested kinds of actions to return.
        triggerKind (Optional[CodeActionTriggerKind]): The reason why code actions were requested.
    """

    diagnostics: t.List[Diagnostic]
    only: t.Optional[t.List[CodeActionKind]] = None
    triggerKind: t.Optional[CodeActionTriggerKind] = None


class CodeActionParams(WorkDoneProgressParams, PartialResultParams):
    """Params for the `textDocument/codeAction` request.

    Args:
        textDocument (TextDocumentIdentifier): The document in which the command was invoked.
        range (Range): The range for which the command was invoked.
        context (CodeActionContext): Context carrying additional information.
    """

    textDocument: TextDocumentIdentifier
    range: Range
    context: CodeActionContext


class CodeActionDisabled(LspModel):
    reason: StrictStr


class CodeAction(LspModel):
    """A code action represents a change that can be performed in code, e.g. to fix a problem or to refactor code.

    A code action must set either `edit` and/or a `command`. If both are
    supplied, the `edit` is applied first, then the `command` is executed.

    Args:
        title (str): A short, human-readable title for this code action.
        kind (Optional[CodeActionKind]): The kind of the code action.
        diagnostics (Optional[List[Diagnostic]]): The diagnostics that this code action resolves.
        isPreferred (Optional[bool]): Marks this as a preferred action.
        disabled (Optional[CodeActionDisabled]): Marks that the code action cannot currently be applied.
        edit (Optional[WorkspaceEdit]): The workspace edit this code action performs.
        command (Optional[Command]): A command this code action executes.
        data (Optional[Any]): Preserved between `textDocument/codeAction` and `codeAction/resolve`.
    """

    title: StrictStr
    kind: t.Optional[CodeActionKind] = None
    diagnostics: t.Optional[t.List[Diagnostic]] = None
    isPreferred: t.Optional[StrictBool] = None
    disabled: t.Optional[CodeActionDisabled] = None
    edit: t.Optional[WorkspaceEdit] = None
    command: t.Optional[Command] = None
    data: t.Optional[LSPAny] = None


# A `Command` has a string `command`; a `CodeAction` never does.
CodeActionOrCommand = OneOf[Command, CodeAction]

CodeActionResponse = t.List[CodeActionOrCommand]


# Code lens


class CodeLensOptions(WorkDoneProgressOptions):
    resolveProvider: t.Optional[StrictBool] = None


class CodeLensRegistrationOptions(TextDocumentRegistrationOptions, CodeLensOptions):
    pass


class CodeLensParams(WorkDoneProgressParams, PartialResultParams):
    textDocument: TextDocumentIdentifier


class CodeLens(LspModel):
    """A command that should be shown along with source text, like the number of references.

    A code lens is unresolved when no command is associated to it.

    Args:
        range (Range): The range in which this code lens is valid. Should only span a single line.
        command (Optional[Command]): The command this code lens represents.
        data (Optional[Any]): Preserved between `textDocument/codeLens` and `codeLens/resolve`.
    """

    range: Range
    command: t.Optional[Command] = None
    data: t.Optional[LSPAny] = None


# Document link


class DocumentLinkClientCapabilities(LspModel):
    dynamicRegistration: t.Optional[StrictBool] = None
    tooltipSupport: t.Optional[StrictBool] = None


class DocumentLinkOptions(WorkDoneProgressOptions):
    resolveProvider: t.Optional[StrictBool] = None


class DocumentLinkRegistrationOptions(TextDocumentRegistrationOptions, DocumentLinkOptions):
    pass


class DocumentLinkParams(WorkDoneProgressParams, PartialResultParams):
    textDocument: TextDocumentIdentifier


class DocumentLink(LspModel):
    """A range in a text document that links to an internal or external resource.

    Args:
        range (Range): The range this link applies to.
        target (Optional[Uri]): The uri this link points to. Resolved later if omitted.
        tooltip (Optional[str]): The tooltip text when you hover over this link.
        data (Optional[Any]): Preserved between `textDocument/documentLink` and `documentLink/resolve`.
    """

    range: Range
    target: t.Optional[Uri] = None
    tooltip: t.Optional[StrictStr] = None
    data: t.Optional[LSPAny] = None


# Document color


class DocumentColorOptions(WorkDoneProgressOptions):
    pass


class DocumentColorRegistrationOptions(
    TextDocumentRegistrationOptions, StaticRegistrationOptions, DocumentColorOptions
):
    pass


ColorProviderCapability = ProviderCapability[DocumentColorOptions, DocumentColorRegistrationOptions]


class DocumentColorParams(WorkDoneProgressParams, PartialResultParams):
    textDocument: TextDocumentIdentifier


class Color(LspModel):
    """Represents a color in RGBA space, each component in the range [0-1]."""

    red: StrictFloat
    green: StrictFloat
    blue: StrictFloat
    alpha: StrictFloat


class ColorInformation(LspModel):
    range: Range
    color: Color


class ColorPresentationParams(WorkDoneProgressParams, PartialResultParams):
    """Parameters of the `textDocument/colorPresentation` request.

    Args:
        textDocument (TextDocumentIdentifier): The text document.
        color (Color): The color information to request presentations for.
        range (Range): The range where the color would be inserted.
    """

    textDocument: TextDocumentIdentifier
    color: Color
    range: Range


class ColorPresentation(LspModel):
    """A way to render a color as text.

    Args:
        label (str): The label of this color presentation, shown on the color picker header.
        textEdit (Optional[TextEdit]): An edit applied when selecting this presentation.
        additionalTextEdits (Optional[List[TextEdit]]): Additional edits applied when selecting this presentation.
    """

    label: StrictStr
    textEdit: t.Optional[TextEdit] = None
    additionalTextEdits: t.Optional[t.List[TextEdit]] = None


# Formatting


class FormattingOptions(LspModel):
    """Value-object describing what options formatting should use.

    Keys beyond the well-known ones are kept as extra attributes and must be
    booleans, integers or strings.

    Args:
        tabSize (int): Size of a tab in spaces.
        insertSpaces (bool): Prefer spaces over tabs.
        trimTrailingWhitespace (Optional[bool]): Trim trailing whitespace on a line.
        insertFinalNewline (Optional[bool]): Insert a newline character at the end of the file if one does not exist.
        trimFinalNewlines (Optional[bool]): Trim all newlines after the final newline at the end of the file.
    """

    model_config = ConfigDict(extra="allow")

    tabSize: UInt32
    insertSpaces: StrictBool
    trimTrailingWhitespace: t.Optional[StrictBool] = None
    insertFinalNewline: t.Optional[StrictBool] = None
    trimFinalNewlines: t.Optional[StrictBool] = None


class DocumentFormattingOptions(WorkDoneProgressOptions):
    pass


class DocumentFormattingRegistrationOptions(TextDocumentRegistrationOptions, DocumentFormattingOptions):
    pass


DocumentFormattingProviderCapability = OneOf[StrictBool, DocumentFormattingOptions]


class DocumentFormattingParams(WorkDoneProgressParams):
    textDocument: TextDocumentIdentifier
    options: FormattingOptions


class DocumentRangeFormattingOptions(WorkDoneProgressOptions):
    pass


class DocumentRangeFormattingRegistrationOptions(TextDocumentRegistrationOptions, DocumentRangeFormattingOptions):
    pass


DocumentRangeFormattingProviderCapability = OneOf[StrictBool, DocumentRangeFormattingOptions]


class DocumentRangeFormattingParams(WorkDoneProgressParams):
    textDocument: TextDocumentIdentifier
    range: Range
    options: FormattingOptions


class DocumentOnTypeFormattingOptions(LspModel):
    """Format document on type options.

    Args:
        firstTriggerCharacter (str): A character on which formatting should be triggered, like `{`.
        moreTriggerCharacter (Optional[List[str]]): More trigger characters.
    """

    firstTriggerCharacter: StrictStr
    moreTriggerCharacter: t.Optional[t.List[StrictStr]] = None


class DocumentOnTypeFormattingRegistrationOptions(TextDocumentRegistrationOptions, DocumentOnTypeFormattingOptions):
    pass


class DocumentOnTypeFormattingParams(TextDocumentPositionParams):
    """Parameters of the `textDocument/onTypeFormatting` request.

    Args:
        ch (str): The character that has been typed that triggered the formatting request.
        options (FormattingOptions): The formatting options.
    """

    ch: StrictStr
    options: FormattingOptions


# Rename


class PrepareSupportDefaultBehavior(LspIntEnum):
    """Default behavior of a client for prepare rename requests.

    Attributes:
        IDENTIFIER: The client's default behavior is to select the identifier according to the
            language's syntax rule.
    """

    IDENTIFIER = 1


class RenameClientCapabilities(LspModel):
    """Client capabilities for `textDocument/rename`.

    Args:
        dynamicRegistration (Optional[bool]): Whether rename supports dynamic registration.
        prepareSupport (Optional[bool]): Client supports testing for validity of rename operations.
        prepareSupportDefaultBehavior (Optional[PrepareSupportDefaultBehavior]): The client's default
            behavior when the server answers a prepare rename with ``{defaultBehavior: true}``.
        honorsChangeAnnotations (Optional[bool]): Whether the client honors change annotations.
    """

    dynamicRegistration: t.Optional[StrictBool] = None
    prepareSupport: t.Optional[StrictBool] = None
    prepareSupportDefaultBehavior: t.Optional[PrepareSupportDefaultBehavior] = None
    honorsChangeAnnotations: t.Optional[StrictBool] = None


class RenameOptions(WorkDoneProgressOptions):
    prepareProvider: t.Optional[StrictBool] = None


class RenameRegistrationOptions(TextDocumentRegistrationOptions, RenameOptions):
    pass


RenameProviderCapability = OneOf[StrictBool, RenameOptions]


class RenameParams(TextDocumentPositionParams, WorkDoneProgressParams):
    """Parameters of the `textDocument/rename` request.

    Args:
        newName (str): The new name of the symbol. Invalid names make the request fail with an error.
    """

    newName: StrictStr


class PrepareRenameParams(TextDocumentPositionParams, WorkDoneProgressParams):
    pass


class PrepareRenamePlaceholder(LspModel):
    range: Range
    placeholder: StrictStr


class PrepareRenameDefaultBehavior(LspModel):
    defaultBehavior: StrictBool


PrepareRenameResponse = OneOf[Range, PrepareRenamePlaceholder, PrepareRenameDefaultBehavior]


# Folding range


class FoldingRangeKind(LspStrEnum):
    """A set of predefined range kinds.

    Attributes:
        COMMENT: Folding range for a comment.
        IMPORTS: Folding range for imports or includes.
        REGION: Folding range for a region (e.g. `#region`).
    """

    COMMENT = "comment"
    IMPORTS = "imports"
    REGION = "region"


class FoldingRangeKindCapability(LspModel):
    valueSet: t.Optional[t.List[FoldingRangeKind]] = None


class FoldingRangeCapability(LspModel):
    collapsedText: t.Optional[StrictBool] = None


class FoldingRangeClientCapabilities(LspModel):
    """Client capabilities for `textDocument/foldingRange`.

    Args:
        dynamicRegistration (Optional[bool]): Whether folding range supports dynamic registration.
        rangeLimit (Optional[int]): The maximum number of folding ranges the client prefers to receive per document.
        lineFoldingOnly (Optional[bool]): The client only supports folding complete lines.
        foldingRangeKind (Optional[FoldingRangeKindCapability]): Specific options for the folding range kind.
        foldingRange (Optional[FoldingRangeCapability]): Specific options for the folding range.
    """

    dynamicRegistration: t.Optional[StrictBool] = None
    rangeLimit: t.Optional[UInt32] = None
    lineFoldingOnly: t.Optional[StrictBool] = None
    foldingRangeKind: t.Optional[FoldingRangeKindCapability] = None
    foldingRange: t.Optional[FoldingRangeCapability] = None


class FoldingRangeOptions(WorkDoneProgressOptions):
    pass


class FoldingRangeRegistrationOptions(
    TextDocumentRegistrationOptions, FoldingRangeOptions, StaticRegistrationOptions
):
    pass


FoldingRangeProviderCapability = ProviderCapability[FoldingRangeOptions, FoldingRangeRegistrationOptions]


class FoldingRangeParams(WorkDoneProgressParams, PartialResultParams):
    textDocument: TextDocumentIdentifier


class FoldingRange(LspModel):
    """Represents a folding range.

    Args:
        startLine (int): The zero-based start line of the range to fold.
        startCharacter (Optional[int]): The zero-based character offset from where the folded range starts.
        endLine (int): The zero-based end line of the range to fold.
        endCharacter (Optional[int]): The zero-based character offset before the folded range ends.
        kind (Optional[FoldingRangeKind]): Describes the kind of the folding range.
        collapsedText (Optional[str]): The text the client should show when the range is collapsed.
    """

    startLine: UInt32
    startCharacter: t.Optional[UInt32] = None
    endLine: UInt32
    endCharacter: t.Optional[UInt32] = None
    kind: t.Optional[FoldingRangeKind] = None
    collapsedText: t.Optional[StrictStr] = None


# Selection range


class SelectionRangeOptions(WorkDoneProgressOptions):
    pass


class SelectionRangeRegistrationOptions(
    SelectionRangeOptions, TextDocumentRegistrationOptions, StaticRegistrationOptions
):
    pass


SelectionRangeProviderCapability = ProviderCapability[SelectionRangeOptions, SelectionRangeRegistrationOptions]


class SelectionRangeParams(WorkDoneProgressParams, PartialResultParams):
    """Parameters of the `textDocument/selectionRange` request.

    Args:
        textDocument (TextDocumentIdentifier): The text document.
        positions (List[Position]): The positions inside the text document.
    """

    textDocument: TextDocumentIdentifier
    positions: t.List[Position]


class SelectionRange(LspModel):
    """A selection range, optionally nested in a parent range that contains it."""

    range: Range
    parent: t.Optional["SelectionRange"] = None


# Call hierarchy


class CallHierarchyOptions(WorkDoneProgressOptions):
    pass


class CallHierarchyRegistrationOptions(
    TextDocumentRegistrationOptions, CallHierarchyOptions, StaticRegistrationOptions
):
    pass


CallHierarchyServerCapability = ProviderCapability[CallHierarchyOptions, CallHierarchyRegistrationOptions]


class CallHierarchyPrepareParams(TextDocumentPositionParams, WorkDoneProgressParams):
    pass


class CallHierarchyItem(LspModel):
    """Represents programming constructs like functions or constructors in the context of call hierarchy.

    Args:
        name (str): The name of this item.
        kind (SymbolKind): The kind of this item.
        tags (Optional[List[SymbolTag]]): Tags for this item.
        detail (Optional[str]): More detail for this item, e.g. the signature of a function.
        uri (Uri): The resource identifier of this item.
        range (Range): The range enclosing this symbol not including leading/trailing whitespace.
        selectionRange (Range): The range that should be selected and revealed when this symbol is being picked.
        data (Optional[Any]): Preserved between a call hierarchy prepare and incoming/outgoing calls requests.
    """

    name: StrictStr
    kind: SymbolKind
    tags: t.Optional[t.List[SymbolTag]] = None
    detail: t.Optional[StrictStr] = None
    uri: Uri
    range: Range
    selectionRange: Range
    data: t.Optional[LSPAny] = None


class CallHierarchyIncomingCallsParams(WorkDoneProgressParams, PartialResultParams):
    item: CallHierarchyItem


class CallHierarchyIncomingCall(LspModel):
    """Represents an incoming call, e.g. a caller of a method or constructor.

    Args:
        from_ (CallHierarchyItem): The item that makes the call.
        fromRanges (List[Range]): The ranges at which the calls appear, relative to the caller.
    """

    from_: CallHierarchyItem = Field(alias="from")
    fromRanges: t.List[Range]


class CallHierarchyOutgoingCallsParams(WorkDoneProgressParams, PartialResultParams):
    item: CallHierarchyItem


class CallHierarchyOutgoingCall(LspModel):
    """Represents an outgoing call, e.g. calling a getter from a method or a method from a constructor.

    Args:
        to (CallHierarchyItem): The item that is called.
        fromRanges (List[Range]): The ranges at which this item is called, relative to the caller.
    """

    to: CallHierarchyItem
    fromRanges: t.List[Range]


# Semantic tokens


class SemanticTokenType(LspStrEnum):
    """A set of predefined token types. Servers may use any other string."""

    NAMESPACE = "namespace"
    TYPE = "type"
    CLASS = "class"
    ENUM = "enum"
    INTERFACE = "interface"
    STRUCT = "struct"
    TYPE_PARAMETER = "typeParameter"
    PARAMETER = "parameter"
    VARIABLE = "variable"
    PROPERTY = "property"
    ENUM_MEMBER = "enumMember"
    EVENT = "event"
    FUNCTION = "function"
    METHOD = "method"
    MACRO = "macro"
    KEYWORD = "keyword"
    MODIFIER = "modifier"
    COMMENT = "comment"
    STRING = "string"
    NUMBER = "number"
    REGEXP = "regexp"
    OPERATOR = "operator"
    DECORATOR = "decorator"


class SemanticTokenModifier(LspStrEnum):
    """A set of predefined token modifiers. Servers may use any other string."""

    DECLARATION = "declaration"
    DEFINITION = "definition"
    READONLY = "readonly"
    STATIC = "static"
    DEPRECATED = "deprecated"
    ABSTRACT = "abstract"
    ASYNC = "async"
    MODIFICATION = "modification"
    DOCUMENTATION = "documentation"
    DEFAULT_LIBRARY = "defaultLibrary"


class TokenFormat(enum.Enum):
    RELATIVE = "relative"


class SemanticTokensLegend(LspModel):
    """The legend that maps token type and modifier indices to names.

    Args:
        tokenTypes (List[SemanticTokenType]): The token types a server uses.
        tokenModifiers (List[SemanticTokenModifier]): The token modifiers a server uses.
    """

    tokenTypes: t.List[SemanticTokenType]
    tokenModifiers: t.List[SemanticTokenModifier]


class SemanticTokensClientCapabilitiesRequestsFull(LspModel):
    delta: t.Optional[StrictBool] = None


class SemanticTokensClientCapabilitiesRequests(LspModel):
    """Which requests the client supports. An empty object for `range` still means supported."""

    range: t.Optional[OneOf[StrictBool, LSPObject]] = None
    full: t.Optional[OneOf[StrictBool, SemanticTokensClientCapabilitiesRequestsFull]] = None


class SemanticTokensClientCapabilities(LspModel):
    """Client capabilities for the `textDocument/semanticTokens` requests (@since 3.16.0).

    Args:
        dynamicRegistration (Optional[bool]): Whether the implementation supports dynamic registration.
        requests (SemanticTokensClientCapabilitiesRequests): Which requests the client supports.
        tokenTypes (List[SemanticTokenType]): The token types that the client supports.
        tokenModifiers (List[SemanticTokenModifier]): The token modifiers that the client supports.
        formats (List[TokenFormat]): The formats the client supports.
        overlappingTokenSupport (Optional[bool]): Whether the client supports tokens that can overlap each other.
        multilineTokenSupport (Optional[bool]): Whether the client supports tokens that can span multiple lines.
        serverCancelSupport (Optional[bool]): Whether the client allows the server to cancel a request.
        augmentsSyntaxTokens (Optional[bool]): Whether the client uses semantic tokens to augment
            existing syntax tokens.
    """

    dynamicRegistration: t.Optional[StrictBool] = None
    requests: SemanticTokensClientCapabilitiesRequests
    tokenTypes: t.List[SemanticTokenType]
    tokenModifiers: t.List[SemanticTokenModifier]
    formats: t.List[TokenFormat]
    overlappingTokenSupport: t.Optional[StrictBool] = None
    multilineTokenSupport: t.Optional[StrictBool] = None
    serverCancelSupport: t.Optional[StrictBool] = None
    augmentsSyntaxTokens: t.Optional[StrictBool] = None


class SemanticTokensFullOptions(LspModel):
    delta: t.Optional[StrictBool] = None


class SemanticTokensOptions(WorkDoneProgressOptions):
    """Semantic tokens options advertised by the server (@since 3.16.0).

    Args:
        legend (SemanticTokensLegend): The legend used by the server.
        range (Union[bool, dict, None]): The server supports semantic tokens for a specific range.
        full (Union[bool, SemanticTokensFullOptions, None]): The server supports semantic tokens for a full document.
    """

    legend: SemanticTokensLegend
    range: t.Optional[OneOf[StrictBool, LSPObject]] = None
    full: t.Optional[OneOf[StrictBool, SemanticTokensFullOptions]] = None


class SemanticTokensRegistrationOptions(
    TextDocumentRegistrationOptions, SemanticTokensOptions, StaticRegistrationOptions
):
    pass


SemanticTokensServerCapabilities = RegistrableOptions[SemanticTokensOptions, SemanticTokensRegistrationOptions]


class SemanticTokensParams(WorkDoneProgressParams, PartialResultParams):
    textDocument: TextDocumentIdentifier


class SemanticTokensDeltaParams(WorkDoneProgressParams, PartialResultParams):
    textDocument: TextDocumentIdentifier
    previousResultId: StrictStr


class SemanticTokensRangeParams(WorkDoneProgressParams, PartialResultParams):
    textDocument: TextDocumentIdentifier
    range: Range


class SemanticTokens(LspModel):
    """Semantic tokens of a document.

    Args:
        resultId (Optional[str]): An optional result id, used in a delta request to identify this result.
        data (List[int]): The actual tokens, five integers per token relative to the previous one.
    """

    resultId: t.Optional[StrictStr] = None
    data: t.List[UInt32]


class SemanticTokensPartialResult(LspModel):
    data: t.List[UInt32]


class SemanticTokensEdit(LspModel):
    """A single edit of the semantic tokens array.

    Args:
        start (int): The start offset of the edit.
        deleteCount (int): The count of elements to remove.
        data (Optional[List[int]]): The elements to insert.
    """

    start: UInt32
    deleteCount: UInt32
    data: t.Optional[t.List[UInt32]] = None


class SemanticTokensDelta(LspModel):
    resultId: t.Optional[StrictStr] = None
    edits: t.List[SemanticTokensEdit]


class SemanticTokensDeltaPartialResult(LspModel):
    edits: t.List[SemanticTokensEdit]


# A delta must carry `edits`; full tokens always carry `data`.
SemanticTokensFullDeltaResult = OneOf[SemanticTokensDelta, SemanticTokens]


# Linked editing range


class LinkedEditingRangeOptions(WorkDoneProgressOptions):
    pass


class LinkedEditingRangeRegistrationOptions(
    TextDocumentRegistrationOptions, LinkedEditingRangeOptions, StaticRegistrationOptions
):
    pass


LinkedEditingRangeServerCapabilities = ProviderCapability[
    LinkedEditingRangeOptions, LinkedEditingRangeRegistrationOptions
]


class LinkedEditingRangeParams(TextDocumentPositionParams, WorkDoneProgressParams):
    pass


class LinkedEditingRanges(LspModel):
    """The result of a linked editing range request (@since 3.16.0).

    Args:
        ranges (List[Range]): Ranges that have the same content and shape and are edited together.
        wordPattern (Optional[str]): An optional word pattern (regular expression) describing valid contents.
    """

    ranges: t.List[Range]
    wordPattern: t.Optional[StrictStr] = None


# Moniker


class UniquenessLevel(enum.Enum):
    """Moniker uniqueness level to define scope of the moniker.

    Attributes:
        DOCUMENT: The moniker is only unique inside a document.
        PROJECT: The moniker is unique inside a project for which a dump got created.
        GROUP: The moniker is unique inside the group to which a project belongs.
        SCHEME: The moniker is unique inside the moniker scheme.
        GLOBAL: The moniker is globally unique.
    """

    DOCUMENT = "document"
    PROJECT = "project"
    GROUP = "group"
    SCHEME = "scheme"
    GLOBAL = "global"


class MonikerKind(enum.Enum):
    """The moniker kind.

    Attributes:
        IMPORT: The moniker represents a symbol that is imported into a project.
        EXPORT: The moniker represents a symbol that is exported from a project.
        LOCAL: The moniker represents a symbol that is local to a project.
    """

    IMPORT = "import"
    EXPORT = "export"
    LOCAL = "local"


class MonikerOptions(WorkDoneProgressOptions):
    pass


class MonikerRegistrationOptions(TextDocumentRegistrationOptions, MonikerOptions):
    pass


MonikerServerCapabilities = ProviderCapability[MonikerOptions, MonikerRegistrationOptions]


class MonikerParams(TextDocumentPositionParams, WorkDoneProgressParams, PartialResultParams):
    pass


class Moniker(LspModel):
    """Moniker definition to match LSIF 0.5 moniker definition.

    Args:
        scheme (str): The scheme of the moniker, for example `tsc` or `.Net`.
        identifier (str): The identifier of the moniker, opaque in LSIF.
        unique (UniquenessLevel): The scope in which the moniker is unique.
        kind (Optional[MonikerKind]): The moniker kind if known.
    """

    scheme: StrictStr
    identifier: StrictStr
    unique: UniquenessLevel
    kind: t.Optional[MonikerKind] = None


# Type hierarchy


class TypeHierarchyOptions(WorkDoneProgressOptions):
    pass


class TypeHierarchyRegistrationOptions(
    TextDocumentRegistrationOptions, TypeHierarchyOptions, StaticRegistrationOptions
):
    pass


TypeHierarchyServerCapabilities = ProviderCapability[TypeHierarchyOptions, TypeHierarchyRegistrationOptions]


class TypeHierarchyPrepareParams(TextDocumentPositionParams, WorkDoneProgressParams):
    pass


class TypeHierarchyItem(LspModel):
    """A type in the context of a type hierarchy (@since 3.17.0).

    Args:
        name (str): The name of this item.
        kind (SymbolKind): The kind of this item.
        tags (Optional[List[SymbolTag]]): Tags for this item.
        detail (Optional[str]): More detail for this item, e.g. the signature of a function.
        uri (Uri): The resource identifier of this item.
        range (Range): The range enclosing this symbol.
        selectionRange (Range): The range that should be selected and revealed when this symbol is picked.
        data (Optional[Any]): Preserved between a prepare and the supertypes or subtypes requests.
    """

    name: StrictStr
    kind: SymbolKind
    tags: t.Optional[t.List[SymbolTag]] = None
    detail: t.Optional[StrictStr] = None
    uri: Uri
    range: Range
    selectionRange: Range
    data: t.Optional[LSPAny] = None


class TypeHierarchySupertypesParams(WorkDoneProgressParams, PartialResultParams):
    item: TypeHierarchyItem


class TypeHierarchySubtypesParams(WorkDoneProgressParams, PartialResultParams):
    item: TypeHierarchyItem


# Inline value


class InlineValueOptions(WorkDoneProgressOptions):
    pass


class InlineValueRegistrationOptions(
    InlineValueOptions, TextDocumentRegistrationOptions, StaticRegistrationOptions
):
    pass


InlineValueServerCapabilities = ProviderCapability[InlineValueOptions, InlineValueRegistrationOptions]


class InlineValueContext(LspModel):
    """Additional information about the context of an inline value request.

    Args:
        frameId (int): The stack frame (as a DAP Id) where the execution has stopped.
        stoppedLocation (Range): The document range where execution has stopped.
    """

    frameId: Int32
    stoppedLocation: Range


class InlineValueParams(WorkDoneProgressParams):
    textDocument: TextDocumentIdentifier
    range: Range
    context: InlineValueContext


class InlineValueText(LspModel):
    range: Range
    text: StrictStr


class InlineValueVariableLookup(LspModel):
    """Provide inline value through a variable lookup.

    Args:
        range (Range): The document range for which the inline value applies.
        variableName (Optional[str]): If specified the name of the variable to look up.
        caseSensitiveLookup (bool): How to perform the lookup.
    """

    range: Range
    variableName: t.Optional[StrictStr] = None
    caseSensitiveLookup: StrictBool


class InlineValueEvaluatableExpression(LspModel):
    range: Range
    expression: t.Optional[StrictStr] = None


# Evaluatable expression only requires a range, so it is tried last.
InlineValue = OneOf[InlineValueText, InlineValueVariableLookup, InlineValueEvaluatableExpression]


# Inlay hints


class InlayHintKind(LspIntEnum):
    """Inlay hint kinds (@since 3.17.0).

    Attributes:
        TYPE: An inlay hint that is for a type annotation.
        PARAMETER: An inlay hint that is for a parameter.
    """

    TYPE = 1
    PARAMETER = 2


class InlayHintClientCapabilities(LspModel):
    dynamicRegistration: t.Optional[StrictBool] = None
    resolveSupport: t.Optional[ResolveSupport] = None


class InlayHintOptions(WorkDoneProgressOptions):
    resolveProvider: t.Optional[StrictBool] = None


class InlayHintRegistrationOptions(
    InlayHintOptions, TextDocumentRegistrationOptions, StaticRegistrationOptions
):
    pass


InlayHintServerCapabilities = ProviderCapability[InlayHintOptions, InlayHintRegistrationOptions]


class InlayHintParams(WorkDoneProgressParams):
    textDocument: TextDocumentIdentifier
    range: Range


InlayHintTooltip = OneOf[StrictStr, MarkupContent]


class InlayHintLabelPart(LspModel):
    """Represents a part of an inlay hint label.

    Args:
        value (str): The value of this label part.
        tooltip (Union[str, MarkupContent, None]): The tooltip text when you hover over this label part.
        location (Optional[Location]): An optional source code location that represents this label part.
        command (Optional[Command]): An optional command for this label part.
    """

    value: StrictStr
    tooltip: t.Optional[InlayHintTooltip] = None
    location: t.Optional[Location] = None
    command: t.Optional[Command] = None


InlayHintLabel = OneOf[StrictStr, t.List[InlayHintLabelPart]]


class InlayHint(LspModel):
    """Inlay hint information.

    Args:
        position (Position): The position of this hint.
        label (Union[str, List[InlayHintLabelPart]]): The label of this hint.
        kind (Optional[InlayHintKind]): The kind of this hint.
        textEdits (Optional[List[TextEdit]]): Text edits performed when accepting this inlay hint.
        tooltip (Union[str, MarkupContent, None]): The tooltip text when you hover over this item.
        paddingLeft (Optional[bool]): Render padding before the hint.
        paddingRight (Optional[bool]): Render padding after the hint.
        data (Optional[Any]): Preserved between `textDocument/inlayHint` and `inlayHint/resolve`.
    """

    position: Position
    label: InlayHintLabel
    kind: t.Optional[InlayHintKind] = None
    textEdits: t.Optional[t.List[TextEdit]] = None
    tooltip: t.Optional[InlayHintTooltip] = None
    paddingLeft: t.Optional[StrictBool] = None
    paddingRight: t.Optional[StrictBool] = None
    data: t.Optional[LSPAny] = None


# Publish diagnostics


class PublishDiagnosticsClientCapabilities(LspModel):
    """Client capabilities for `textDocument/publishDiagnostics`.

    Args:
        relatedInformation (Optional[bool]): Whether the client accepts diagnostics with related information.
        tagSupport (Optional[TagSupport[DiagnosticTag]]): The tags the client supports. Older clients
            send a bare boolean here.
        versionSupport (Optional[bool]): Whether the client interprets the version property.
        codeDescriptionSupport (Optional[bool]): Client supports a `codeDescription` property.
        dataSupport (Optional[bool]): Whether code action preserves the `data` property.
    """

    relatedInformation: t.Optional[StrictBool] = None
    tagSupport: t.Optional[TagSupport[DiagnosticTag]] = None
    versionSupport: t.Optional[StrictBool] = None
    codeDescriptionSupport: t.Optional[StrictBool] = None
    dataSupport: t.Optional[StrictBool] = None

    @field_validator("tagSupport", mode="before")
    @classmethod
    def _tag_support_from_bool(cls, value: t.Any) -> t.Any:
        if value is True:
            return {"valueSet": []}
        if value is False:
            return None
        return value


class PublishDiagnosticsParams(LspModel):
    """Parameters of the `textDocument/publishDiagnostics` notification.

    Args:
        uri (Uri): The URI for which diagnostic information is reported.
        diagnostics (List[Diagnostic]): An array of diagnostic information items.
        version (Optional[int]): The version number of the document the diagnostics are published for.
    """

    uri: Uri
    diagnostics: t.List[Diagnostic]
    version: t.Optional[Int32] = None


# Pull diagnostics


class DiagnosticClientCapabilities(LspModel):
    dynamicRegistration: t.Optional[StrictBool] = None
    relatedDocumentSupport: t.Optional[StrictBool] = None


class DiagnosticOptions(WorkDoneProgressOptions):
    """Diagnostic options (@since 3.17.0).

    Args:
        identifier (Optional[str]): An optional identifier under which the diagnostics are managed by the client.
        interFileDependencies (bool): Whether the language has inter file dependencies.
        workspaceDiagnostics (bool): The server provides support for workspace diagnostics as well.
    """

    identifier: t.Optional[StrictStr] = None
    interFileDependencies: StrictBool
    workspaceDiagnostics: StrictBool


class DiagnosticRegistrationOptions(
    TextDocumentRegistrationOptions, DiagnosticOptions, StaticRegistrationOptions
):
    pass


DiagnosticServerCapabilities = RegistrableOptions[DiagnosticOptions, DiagnosticRegistrationOptions]


class DocumentDiagnosticParams(WorkDoneProgressParams, PartialResultParams):
    """Parameters of the `textDocument/diagnostic` request.

    Args:
        textDocument (TextDocumentIdentifier): The text document.
        identifier (Optional[str]): The additional identifier provided during registration.
        previousResultId (Optional[str]): The result id of a previous response if provided.
    """

    textDocument: TextDocumentIdentifier
    identifier: t.Optional[StrictStr] = None
    previousResultId: t.Optional[StrictStr] = None


class DocumentDiagnosticReportKind(enum.Enum):
    """The document diagnostic report kinds.

    Attributes:
        FULL: A diagnostic report with a full set of problems.
        UNCHANGED: A report indicating that the last returned report is still accurate.
    """

    FULL = "full"
    UNCHANGED = "unchanged"


class FullDocumentDiagnosticReport(LspModel):
    """A diagnostic report with a full set of problems.

    Args:
        kind (Literal["full"]): A full document diagnostic report.
        resultId (Optional[str]): An optional result id used in the next request.
        items (List[Diagnostic]): The actual items.
    """

    kind: Literal["full"] = "full"
    resultId: t.Optional[StrictStr] = None
    items: t.List[Diagnostic]


class UnchangedDocumentDiagnosticReport(LspModel):
    """A report indicating that the last returned report is still accurate.

    Args:
        kind (Literal["unchanged"]): An unchanged document diagnostic report.
        resultId (str): A result id which will be sent on the next diagnostic request.
    """

    kind: Literal["unchanged"] = "unchanged"
    resultId: StrictStr


DocumentDiagnosticReportVariant = t.Annotated[
    t.Union[FullDocumentDiagnosticReport, UnchangedDocumentDiagnosticReport],
    Field(discriminator="kind"),
]


class RelatedFullDocumentDiagnosticReport(FullDocumentDiagnosticReport):
    """A full diagnostic report with a set of related documents.

    Args:
        relatedDocuments (Optional[Dict[Uri, Union[FullDocumentDiagnosticReport,
            UnchangedDocumentDiagnosticReport]]]): Diagnostics of related documents.
    """

    relatedDocuments: t.Optional[t.Dict[Uri, DocumentDiagnosticReportVariant]] = None


class RelatedUnchangedDocumentDiagnosticReport(UnchangedDocumentDiagnosticReport):
    relatedDocuments: t.Optional[t.Dict[Uri, DocumentDiagnosticReportVariant]] = None


DocumentDiagnosticReport = t.Annotated[
    t.Union[RelatedFullDocumentDiagnosticReport, RelatedUnchangedDocumentDiagnosticReport],
    Field(discriminator="kind"),
]


class DocumentDiagnosticReportPartialResult(LspModel):
    relatedDocuments: t.Dict[Uri, DocumentDiagnosticReportVariant]


# A partial result has no `kind`, so it can never be mistaken for a report.
DocumentDiagnosticReportResult = OneOf[DocumentDiagnosticReport, DocumentDiagnosticReportPartialResult]


class DiagnosticServerCancellationData(LspModel):
    retriggerRequest: StrictBool


class PreviousResultId(LspModel):
    """A previous result id in a workspace pull request.

    Args:
        uri (Uri): The URI for which the client knows a result id.
        value (str): The value of the previous result id.
    """

    uri: Uri
    value: StrictStr


class WorkspaceDiagnosticParams(WorkDoneProgressParams, PartialResultParams):
    identifier: t.Optional[StrictStr] = None
    previousResultIds: t.List[PreviousResultId]


class WorkspaceFullDocumentDiagnosticReport(FullDocumentDiagnosticReport):
    """A full document diagnostic report for a workspace diagnostic result.

    Args:
        uri (Uri): The URI for which diagnostic information is reported.
        version (Optional[int]): The version number for which the diagnostics are reported,
            ``None`` if the document is not open.
    """

    uri: Uri
    version: t.Annotated[t.Optional[Int32], NULLABLE] = None


class WorkspaceUnchangedDocumentDiagnosticReport(UnchangedDocumentDiagnosticReport):
    uri: Uri
    version: t.Annotated[t.Optional[Int32], NULLABLE] = None


WorkspaceDocumentDiagnosticReport = t.Annotated[
    t.Union[WorkspaceFullDocumentDiagnosticReport, WorkspaceUnchangedDocumentDiagnosticReport],
    Field(discriminator="kind"),
]


class WorkspaceDiagnosticReport(LspModel):
    items: t.List[WorkspaceDocumentDiagnosticReport]


class WorkspaceDiagnosticReportPartialResult(LspModel):
    items: t.List[WorkspaceDocumentDiagnosticReport]
