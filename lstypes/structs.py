import enum
import functools
import typing as t

from pydantic import ConfigDict, Discriminator, Field, StrictBool, StrictStr, Tag
from pydantic_core import PydanticCustomError, core_schema
from typing_extensions import Literal

from .base import (
    NULLABLE,
    Int32,
    LspIntEnum,
    LspModel,
    LspStrEnum,
    NumberOrString,
    OneOf,
    ProgressToken,
    UInt32,
    json_serializer,
)
from .uri import Uri

T = t.TypeVar("T")


@functools.total_ordering
class Position(LspModel):
    """Position in a text document expressed as zero-based line and character offset.

    The character offset is measured in the code units of the negotiated
    `PositionEncodingKind` (UTF-16 unless agreed otherwise). Values past the end
    of a line are clamped by consumers, not by this type.

    Args:
        line (int): Line position in a document (zero-based).
        character (int): Character offset on a line in a document (zero-based).
    """

    model_config = ConfigDict(frozen=True)

    line: UInt32
    character: UInt32

    def __lt__(self, other: "Position") -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (self.line, self.character) < (other.line, other.character)

    def as_tuple(self) -> t.Tuple[int, int]:
        return (self.line, self.character)


class Range(LspModel):
    """A range in a text document expressed as (zero-based) start and end positions.

    The end position is exclusive. ``start <= end`` is expected but not checked.

    Args:
        start (Position): The range's start position.
        end (Position): The range's end position.
    """

    model_config = ConfigDict(frozen=True)

    start: Position
    end: Position

    def calculate_length(self, text: str) -> int:
        """Count the characters `text` holds between `start` and `end`, line breaks excluded."""
        text_lines = text.splitlines()

        if self.end.line == self.start.line:
            line = text_lines[self.start.line]
            return len(line[self.start.character : self.end.character])

        total = len(text_lines[self.start.line][self.start.character :])
        for line_number in range(self.start.line + 1, self.end.line):
            total += len(text_lines[line_number])
        total += len(text_lines[self.end.line][: self.end.character])
        return total


class Location(LspModel):
    """Represents a location inside a resource, such as a line inside a text file.

    Args:
        uri (Uri): The text document's URI.
        range (Range): The range inside the text document.
    """

    model_config = ConfigDict(frozen=True)

    uri: Uri
    range: Range


class LocationLink(LspModel):
    """Represents a link between a source and a target location.

    Args:
        originSelectionRange (Optional[Range]): Span of the origin of this link. Defaults to the word
            range at the mouse position.
        targetUri (Uri): The target resource identifier of this link.
        targetRange (Range): The full target range of this link.
        targetSelectionRange (Range): The span of this link, e.g. the name of a function.
    """

    originSelectionRange: t.Optional[Range] = None
    targetUri: Uri
    targetRange: Range
    targetSelectionRange: Range


class PositionEncodingKind(LspStrEnum):
    """How character offsets in a `Position` are measured (@since 3.17.0).

    Attributes:
        UTF8: Character offsets count UTF-8 code units.
        UTF16: Character offsets count UTF-16 code units. The default, always supported by servers.
        UTF32: Character offsets count UTF-32 code units, i.e. Unicode code points.
    """

    UTF8 = "utf-8"
    UTF16 = "utf-16"
    UTF32 = "utf-32"


class TextDocumentIdentifier(LspModel):
    """Text documents are identified using a URI.

    Args:
        uri (Uri): The text document's URI.
    """

    uri: Uri


class TextDocumentItem(LspModel):
    """An item to transfer a text document from the client to the server.

    Args:
        uri (Uri): The text document's URI.
        languageId (str): The text document's language identifier.
        version (int): The version number of this document, increasing after each change.
        text (str): The content of the opened text document.
    """

    uri: Uri
    languageId: StrictStr
    version: Int32
    text: StrictStr


class VersionedTextDocumentIdentifier(TextDocumentIdentifier):
    """An identifier to denote a specific version of a text document.

    Args:
        uri (Uri): The text document's URI.
        version (int): The version number of this document.
    """

    version: Int32


class OptionalVersionedTextDocumentIdentifier(TextDocumentIdentifier):
    """An identifier which optionally denotes a specific version of a text document.

    The version is ``null`` when the server sends edits for a file the client
    does not have open.

    Args:
        uri (Uri): The text document's URI.
        version (Optional[int]): The version number of this document, or ``None``.
    """

    version: t.Annotated[t.Optional[Int32], NULLABLE] = None


class TextDocumentPositionParams(LspModel):
    """A parameter literal used in requests to pass a text document and a position inside it.

    Args:
        textDocument (TextDocumentIdentifier): The text document.
        position (Position): The position inside the text document.
    """

    textDocument: TextDocumentIdentifier
    position: Position


class DocumentFilter(LspModel):
    """Denotes a document through properties like language, scheme or pattern.

    Args:
        language (Optional[str]): A language id, like `typescript`.
        scheme (Optional[str]): A Uri scheme, like `file` or `untitled`.
        pattern (Optional[str]): A glob pattern, like `*.{ts,js}`.
    """

    language: t.Optional[StrictStr] = None
    scheme: t.Optional[StrictStr] = None
    pattern: t.Optional[StrictStr] = None


DocumentSelector = t.List[DocumentFilter]


class DiagnosticSeverity(LspIntEnum):
    """Enumeration of diagnostic severity levels."""

    ERROR = 1
    WARNING = 2
    INFORMATION = 3
    HINT = 4


class DiagnosticTag(LspIntEnum):
    """The diagnostic tags (@since 3.15.0).

    Attributes:
        UNNECESSARY: Unused or unnecessary code. Clients may fade it out.
        DEPRECATED: Deprecated or obsolete code. Clients may strike it through.
    """

    UNNECESSARY = 1
    DEPRECATED = 2


class CodeDescription(LspModel):
    """Structure to capture a description for an error code (@since 3.16.0).

    Args:
        href (Uri): An URI to open with more information about the diagnostic error.
    """

    href: Uri


class DiagnosticRelatedInformation(LspModel):
    """Represents a related message and source code location for a diagnostic.

    Args:
        location (Location): The location of this related diagnostic information.
        message (str): The message of this related diagnostic information.
    """

    location: Location
    message: StrictStr


class Diagnostic(LspModel):
    """Represents a diagnostic, such as a compiler error or warning.

    Diagnostic objects are only valid in the scope of a resource.

    Args:
        range (Range): The range at which the message applies.
        severity (Optional[DiagnosticSeverity]): The diagnostic's severity. If omitted it is up to the
            client to interpret it.
        code (Optional[Union[int, str]]): The diagnostic's code.
        codeDescription (Optional[CodeDescription]): An optional property to describe the error code.
        source (Optional[str]): A human-readable string describing the source of this diagnostic.
        message (str): The diagnostic's message.
        relatedInformation (Optional[List[DiagnosticRelatedInformation]]): Related diagnostic information.
        tags (Optional[List[DiagnosticTag]]): Additional metadata about the diagnostic.
        data (Optional[Any]): Data preserved between `textDocument/publishDiagnostics` and
            `textDocument/codeAction`.
    """

    range: Range
    severity: t.Optional[DiagnosticSeverity] = None
    code: t.Optional[NumberOrString] = None
    codeDescription: t.Optional[CodeDescription] = None
    source: t.Optional[StrictStr] = None
    message: StrictStr
    relatedInformation: t.Optional[t.List[DiagnosticRelatedInformation]] = None
    tags: t.Optional[t.List[DiagnosticTag]] = None
    data: t.Optional[t.Any] = None

    @classmethod
    def new_simple(cls, range: Range, message: str) -> "Diagnostic":
        """Create a diagnostic with only a range and a message."""
        return cls(range=range, message=message)

    @classmethod
    def new_with_code_number(
        cls,
        range: Range,
        severity: DiagnosticSeverity,
        code_number: int,
        source: t.Optional[str],
        message: str,
    ) -> "Diagnostic":
        """Create a diagnostic with a numeric code."""
        return cls(
            range=range,
            severity=severity,
            code=code_number,
            source=source,
            message=message,
        )


class Command(LspModel):
    """Represents a reference to a command.

    Args:
        title (str): Title of the command, like `save`.
        command (str): The identifier of the actual command handler.
        arguments (Optional[List[Any]]): Arguments that the command handler should be invoked with.
    """

    title: StrictStr
    command: StrictStr
    arguments: t.Optional[t.List[t.Any]] = None


class TextEdit(LspModel):
    """A text edit applicable to a text document.

    Args:
        range (Range): The range of the text document to be manipulated. To insert text into a
            document create a range where start == end.
        newText (str): The string to be inserted. For delete operations use an empty string.
    """

    range: Range
    newText: StrictStr


ChangeAnnotationIdentifier = StrictStr


class AnnotatedTextEdit(TextEdit):
    """A special text edit with an additional change annotation (@since 3.16.0).

    Args:
        range (Range): The range of the text document to be manipulated.
        newText (str): The string to be inserted.
        annotationId (str): The actual annotation identifier.
    """

    annotationId: ChangeAnnotationIdentifier


class TextDocumentEdit(LspModel):
    """Describes textual changes on a single text document.

    Args:
        textDocument (OptionalVersionedTextDocumentIdentifier): The text document to change.
        edits (List[Union[AnnotatedTextEdit, TextEdit]]): The edits to be applied.
    """

    textDocument: OptionalVersionedTextDocumentIdentifier
    edits: t.List[OneOf[AnnotatedTextEdit, TextEdit]]


class ChangeAnnotation(LspModel):
    """Additional information that describes document changes (@since 3.16.0).

    Args:
        label (str): A human-readable string describing the actual change.
        needsConfirmation (Optional[bool]): Whether user confirmation is needed before applying the change.
        description (Optional[str]): A human-readable string rendered less prominent in the user interface.
    """

    label: StrictStr
    needsConfirmation: t.Optional[StrictBool] = None
    description: t.Optional[StrictStr] = None


class CreateFileOptions(LspModel):
    """Options to create a file."""

    overwrite: t.Optional[StrictBool] = None
    ignoreIfExists: t.Optional[StrictBool] = None


class CreateFile(LspModel):
    """Create file operation.

    Args:
        kind (Literal["create"]): A create.
        uri (Uri): The resource to create.
        options (Optional[CreateFileOptions]): Additional options.
        annotationId (Optional[str]): An optional annotation identifier describing the operation.
    """

    kind: Literal["create"] = "create"
    uri: Uri
    options: t.Optional[CreateFileOptions] = None
    annotationId: t.Optional[ChangeAnnotationIdentifier] = None


class RenameFileOptions(LspModel):
    """Rename file options."""

    overwrite: t.Optional[StrictBool] = None
    ignoreIfExists: t.Optional[StrictBool] = None


class RenameFile(LspModel):
    """Rename file operation.

    Args:
        kind (Literal["rename"]): A rename.
        oldUri (Uri): The old (existing) location.
        newUri (Uri): The new location.
        options (Optional[RenameFileOptions]): Rename options.
        annotationId (Optional[str]): An optional annotation identifier describing the operation.
    """

    kind: Literal["rename"] = "rename"
    oldUri: Uri
    newUri: Uri
    options: t.Optional[RenameFileOptions] = None
    annotationId: t.Optional[ChangeAnnotationIdentifier] = None


class DeleteFileOptions(LspModel):
    """Delete file options."""

    recursive: t.Optional[StrictBool] = None
    ignoreIfNotExists: t.Optional[StrictBool] = None


class DeleteFile(LspModel):
    """Delete file operation.

    Args:
        kind (Literal["delete"]): A delete.
        uri (Uri): The file to delete.
        options (Optional[DeleteFileOptions]): Delete options.
        annotationId (Optional[str]): An optional annotation identifier describing the operation.
    """

    kind: Literal["delete"] = "delete"
    uri: Uri
    options: t.Optional[DeleteFileOptions] = None
    annotationId: t.Optional[ChangeAnnotationIdentifier] = None


ResourceOp = t.Annotated[t.Union[CreateFile, RenameFile, DeleteFile], Field(discriminator="kind")]

DocumentChangeOperation = OneOf[ResourceOp, TextDocumentEdit]

DocumentChanges = OneOf[t.List[TextDocumentEdit], t.List[DocumentChangeOperation]]


class WorkspaceEdit(LspModel):
    """A workspace edit represents changes to many resources managed in the workspace.

    Either `changes` or `documentChanges` is used; carrying neither is legal.
    Annotation identifiers in `changeAnnotations` are referenced from
    `AnnotatedTextEdit` and the resource operations but are not cross-checked.

    Args:
        changes (Optional[Dict[Uri, List[TextEdit]]]): Holds changes to existing resources.
        documentChanges (Optional[DocumentChanges]): Versioned document edits, optionally mixed with
            create, rename and delete file operations.
        changeAnnotations (Optional[Dict[str, ChangeAnnotation]]): A map of change annotations (@since 3.16.0).
    """

    changes: t.Optional[t.Dict[Uri, t.List[TextEdit]]] = None
    documentChanges: t.Optional[DocumentChanges] = None
    changeAnnotations: t.Optional[t.Dict[ChangeAnnotationIdentifier, ChangeAnnotation]] = None

    @classmethod
    def new(cls, changes: t.Dict[Uri, t.List[TextEdit]]) -> "WorkspaceEdit":
        """Create a workspace edit that only carries `changes`."""
        return cls(changes=changes)


class MarkupKind(enum.Enum):
    """Describes the content type of a `MarkupContent`.

    Attributes:
        PLAINTEXT: The content is to be interpreted as plain text.
        MARKDOWN: The content is to be interpreted as Markdown.
    """

    PLAINTEXT = "plaintext"
    MARKDOWN = "markdown"


class MarkupContent(LspModel):
    """Represents a string value which content can be represented in different formats.

    Args:
        kind (MarkupKind): The type of markup used.
        value (str): The content itself.
    """

    kind: MarkupKind
    value: StrictStr


class LanguageString(LspModel):
    """A code block in a given language, one of the shapes of a `MarkedString`.

    Args:
        language (str): The language of the string (e.g., 'python', 'javascript').
        value (str): The string value.
    """

    language: StrictStr
    value: StrictStr

    @classmethod
    def from_language_code(cls, language: str, code_block: str) -> "LanguageString":
        return cls(language=language, value=code_block)


# A plain string is interpreted as markdown. Deprecated in favour of MarkupContent.
MarkedString = OneOf[StrictStr, LanguageString]

Documentation = OneOf[StrictStr, MarkupContent]


class WorkDoneProgressParams(LspModel):
    """Mixin for requests that can report work done progress.

    Args:
        workDoneToken (Optional[Union[int, str]]): An optional token to report work done progress.
    """

    workDoneToken: t.Optional[ProgressToken] = None


class PartialResultParams(LspModel):
    """Mixin for requests that can stream partial results.

    Args:
        partialResultToken (Optional[Union[int, str]]): An optional token to report partial results.
    """

    partialResultToken: t.Optional[ProgressToken] = None


class WorkDoneProgressOptions(LspModel):
    """Mixin for server options that advertise work done progress support."""

    workDoneProgress: t.Optional[StrictBool] = None


class StaticRegistrationOptions(LspModel):
    """Static registration options to be returned in the initialize request.

    Args:
        id (Optional[str]): The id used to register the request, usable to unregister it again.
    """

    id: t.Optional[StrictStr] = None


class TextDocumentRegistrationOptions(LspModel):
    """General text document registration options.

    Args:
        documentSelector (Optional[List[DocumentFilter]]): A document selector to identify the scope of
            the registration. ``None`` means the document selector provided on the client side is used.
    """

    documentSelector: t.Annotated[t.Optional[DocumentSelector], NULLABLE] = None


class StaticTextDocumentRegistrationOptions(TextDocumentRegistrationOptions, StaticRegistrationOptions):
    """Text document registration options plus a static registration id."""


_REGISTRATION_KEYS = ("documentSelector", "id")


def _provider_tag(value: t.Any) -> str:
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, dict):
        keys: t.Container[str] = value
    elif isinstance(value, LspModel):
        keys = type(value).model_fields
    else:
        return "bool"
    if any(key in keys for key in _REGISTRATION_KEYS):
        return "registration"
    return "options"


class _RegistrableOptions:
    """Server capability given as plain options or as registration options.

    Both records accept any object, so the variant is chosen by the presence
    of a `documentSelector` or `id` key rather than by trial.
    ``RegistrableOptions[DiagnosticOptions, DiagnosticRegistrationOptions]``.
    """

    with_bool = False

    def __getitem__(self, item: t.Tuple[t.Any, t.Any]) -> t.Any:
        options, registration = item
        variants = (
            t.Annotated[options, Tag("options")],
            t.Annotated[registration, Tag("registration")],
        )
        if self.with_bool:
            variants = (t.Annotated[StrictBool, Tag("bool")],) + variants
        return t.Annotated[t.Union[variants], Discriminator(_provider_tag)]


class _ProviderCapability(_RegistrableOptions):
    """Like `RegistrableOptions` but a bare boolean is accepted too."""

    with_bool = True


RegistrableOptions = _RegistrableOptions()
ProviderCapability = _ProviderCapability()


class DynamicRegistrationClientCapabilities(LspModel):
    """Client capability that only states dynamic registration support.

    Args:
        dynamicRegistration (Optional[bool]): Whether the feature supports dynamic registration.
    """

    dynamicRegistration: t.Optional[StrictBool] = None


class GotoCapability(LspModel):
    """Client capabilities shared by the goto requests.

    Args:
        dynamicRegistration (Optional[bool]): Whether the request supports dynamic registration.
        linkSupport (Optional[bool]): The client supports additional metadata in the form of links.
    """

    dynamicRegistration: t.Optional[StrictBool] = None
    linkSupport: t.Optional[StrictBool] = None


class TagSupport(LspModel, t.Generic[T]):
    """The tags a client supports for a given kind of item.

    Args:
        valueSet (List[T]): The tags supported by the client.
    """

    valueSet: t.List[T]


class WorkspaceFolder(LspModel):
    """Represents a workspace folder.

    Args:
        uri (Uri): The associated URI for this workspace folder.
        name (str): The name of the workspace folder.
    """

    uri: Uri
    name: StrictStr


class CancelParams(LspModel):
    """Parameters of the `$/cancelRequest` notification.

    Args:
        id (Union[int, str]): The request id to cancel.
    """

    id: NumberOrString


class SymbolKind(LspIntEnum):
    """A symbol kind."""

    FILE = 1
    MODULE = 2
    NAMESPACE = 3
    PACKAGE = 4
    CLASS = 5
    METHOD = 6
    PROPERTY = 7
    FIELD = 8
    CONSTRUCTOR = 9
    ENUM = 10
    INTERFACE = 11
    FUNCTION = 12
    VARIABLE = 13
    CONSTANT = 14
    STRING = 15
    NUMBER = 16
    BOOLEAN = 17
    ARRAY = 18
    OBJECT = 19
    KEY = 20
    NULL = 21
    ENUM_MEMBER = 22
    STRUCT = 23
    EVENT = 24
    OPERATOR = 25
    TYPE_PARAMETER = 26


class SymbolTag(LspIntEnum):
    """Symbol tags are extra annotations that tweak the rendering of a symbol (@since 3.16).

    Attributes:
        DEPRECATED: Render a symbol as obsolete, usually using a strike-out.
    """

    DEPRECATED = 1


class SymbolKindCapability(LspModel):
    """The symbol kind values the client supports.

    When this property exists the client also guarantees that it will handle
    values outside its set gracefully and falls back to a default value when
    unknown.
    """

    valueSet: t.Optional[t.List[SymbolKind]] = None


class WatchKind(enum.IntFlag):
    """The kind of file events a `FileSystemWatcher` is interested in.

    Attributes:
        CREATE: Interested in create events.
        CHANGE: Interested in change events.
        DELETE: Interested in delete events.
    """

    CREATE = 1
    CHANGE = 2
    DELETE = 4

    @classmethod
    def default(cls) -> "WatchKind":
        """The interest assumed when a watcher omits its kind: every event."""
        return cls.CREATE | cls.CHANGE | cls.DELETE

    @classmethod
    def _validate(cls, value: t.Any) -> "WatchKind":
        if isinstance(value, cls):
            return value
        if isinstance(value, bool) or not isinstance(value, int):
            raise PydanticCustomError("int_type", "Input should be a valid integer")
        if value < 0 or value & ~int(cls.default()):
            raise PydanticCustomError(
                "watch_kind_bits", "Unknown WatchKind flag bits in {value}", {"value": value}
            )
        return cls(value)

    @classmethod
    def __get_pydantic_core_schema__(cls, source: t.Any, handler: t.Any) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=json_serializer(int, int),
        )


class RelativePattern(LspModel):
    """A glob pattern relative to a workspace folder or base URI (@since 3.17.0).

    Args:
        baseUri (Union[WorkspaceFolder, Uri]): The folder or URI the pattern is relative to.
        pattern (str): The actual glob pattern.
    """

    baseUri: OneOf[WorkspaceFolder, Uri]
    pattern: StrictStr


# A plain string pattern or a RelativePattern (@since 3.17.0).
GlobPattern = OneOf[StrictStr, RelativePattern]
