"""Language Server Index Format (LSIF) graph entries.

An LSIF dump is a stream of JSON objects, one per line. Every object is an
`Entry`: a vertex or an edge, told apart by ``type``, whose variant is picked
by ``label``::

    for entry in iter_entries(open("dump.lsif")):
        if isinstance(entry, HoverResult):
            ...

Vertices carry data (documents, ranges, results), edges connect them through
``outV`` and either a single ``inV`` or a list of ``inVs``.
"""

import enum
import logging
import typing as t

from pydantic import Field, StrictBool, StrictStr
from typing_extensions import Literal

from . import codec
from .base import LspModel, NumberOrString, OneOf
from .exceptions import DecodeError
from .language import DocumentLink, DocumentSymbol, FoldingRange, Hover, Moniker
from .structs import Diagnostic, Position, Range, SymbolKind
from .uri import Uri

_logger = logging.getLogger(__name__)

Id = NumberOrString


class Encoding(enum.Enum):
    """The encoding used to compute line and character values in positions and ranges."""

    UTF16 = "utf-16"


class EventKind(enum.Enum):
    BEGIN = "begin"
    END = "end"


class EventScope(enum.Enum):
    DOCUMENT = "document"
    PROJECT = "project"


class ItemKind(enum.Enum):
    """The property of an `item` edge, telling what the target ranges are.

    Attributes:
        DECLARATIONS: The ranges are declarations.
        DEFINITIONS: The ranges are definitions.
        REFERENCES: The ranges are references.
        REFERENCE_RESULTS: The targets are other reference results.
        IMPLEMENTATION_RESULTS: The targets are other implementation results.
    """

    DECLARATIONS = "declarations"
    DEFINITIONS = "definitions"
    REFERENCES = "references"
    REFERENCE_RESULTS = "referenceResults"
    IMPLEMENTATION_RESULTS = "implementationResults"


class ToolInfo(LspModel):
    """Information about the tool that created the dump.

    Args:
        name (str): The name of the tool.
        args (Optional[List[str]]): The arguments passed to the tool.
        version (Optional[str]): The version of the tool.
    """

    name: StrictStr
    args: t.Optional[t.List[StrictStr]] = None
    version: t.Optional[StrictStr] = None


class Repository(LspModel):
    type: StrictStr
    url: StrictStr
    commitId: t.Optional[StrictStr] = None


# Range tags


class DefinitionTag(LspModel):
    """Tags a range as the definition of a symbol.

    Args:
        text (str): The text covered by the range.
        kind (SymbolKind): The symbol kind.
        deprecated (Optional[bool]): Whether the symbol is deprecated.
        fullRange (Range): The full range of the definition not including leading and trailing
            whitespace but everything else, e.g. comments and code.
        detail (Optional[str]): Optional detail information for the definition.
    """

    type: Literal["definition"] = "definition"
    text: StrictStr
    kind: SymbolKind
    deprecated: t.Optional[StrictBool] = None
    fullRange: Range
    detail: t.Optional[StrictStr] = None


class DeclarationTag(LspModel):
    type: Literal["declaration"] = "declaration"
    text: StrictStr
    kind: SymbolKind
    deprecated: t.Optional[StrictBool] = None
    fullRange: Range
    detail: t.Optional[StrictStr] = None


class ReferenceTag(LspModel):
    type: Literal["reference"] = "reference"
    text: StrictStr


class UnknownTag(LspModel):
    type: Literal["unknown"] = "unknown"
    text: StrictStr


RangeTag = t.Annotated[
    t.Union[DefinitionTag, DeclarationTag, ReferenceTag, UnknownTag],
    Field(discriminator="type"),
]


class RangeBasedDocumentSymbol(LspModel):
    """A document symbol expressed through range vertex ids.

    Args:
        id (Union[int, str]): The id of the range vertex.
        children (Optional[List[RangeBasedDocumentSymbol]]): The nested symbols.
    """

    id: Id
    children: t.Optional[t.List["RangeBasedDocumentSymbol"]] = None


DocumentSymbolOrRangeBasedVec = OneOf[t.List[DocumentSymbol], t.List[RangeBasedDocumentSymbol]]


# Vertices


class _Vertex(LspModel):
    id: Id
    type: Literal["vertex"] = "vertex"


class MetaData(_Vertex):
    """The first vertex of every dump.

    Args:
        version (str): The version of the LSIF format using semver notation.
        projectRoot (Uri): The project root used to compute relative URIs.
        positionEncoding (Encoding): The string encoding used to compute positions.
        toolInfo (Optional[ToolInfo]): Information about the tool that created the dump.
    """

    label: Literal["metaData"] = "metaData"
    version: StrictStr
    projectRoot: Uri
    positionEncoding: Encoding
    toolInfo: t.Optional[ToolInfo] = None


class Project(_Vertex):
    label: Literal["project"] = "project"
    kind: StrictStr
    name: t.Optional[StrictStr] = None
    resource: t.Optional[Uri] = None
    content: t.Optional[StrictStr] = None


class Document(_Vertex):
    """A text document that is part of the dump.

    Args:
        uri (Uri): The document's URI.
        languageId (str): The document's language identifier.
        contents (Optional[str]): The base64 encoded content of the document, if embedded.
    """

    label: Literal["document"] = "document"
    uri: Uri
    languageId: StrictStr
    contents: t.Optional[StrictStr] = None


class RangeVertex(_Vertex):
    """A range inside a document, optionally tagged with what it denotes.

    The position fields are inlined, the same shape as an LSP `Range`.
    """

    label: Literal["range"] = "range"
    start: Position
    end: Position
    tag: t.Optional[RangeTag] = None

    def as_range(self) -> Range:
        return Range(start=self.start, end=self.end)


class ResultSet(_Vertex):
    label: Literal["resultSet"] = "resultSet"
    key: t.Optional[StrictStr] = None


class MonikerVertex(_Vertex, Moniker):
    label: Literal["moniker"] = "moniker"


class PackageInformation(_Vertex):
    """Information about the package a moniker belongs to.

    Args:
        name (str): The package name.
        manager (str): The package manager, e.g. `npm`.
        uri (Optional[Uri]): The URI of the package manifest.
        content (Optional[str]): The manifest content, if embedded.
        repository (Optional[Repository]): The repository hosting the package sources.
        version (Optional[str]): The package version.
    """

    label: Literal["packageInformation"] = "packageInformation"
    name: StrictStr
    manager: StrictStr
    uri: t.Optional[Uri] = None
    content: t.Optional[StrictStr] = None
    repository: t.Optional[Repository] = None
    version: t.Optional[StrictStr] = None


class Event(_Vertex):
    """Marks the beginning or end of the entries of a document or project.

    Args:
        kind (EventKind): Whether the scope begins or ends.
        scope (EventScope): The kind of scope.
        data (Union[int, str]): The id of the document or project vertex.
    """

    label: Literal["$event"] = "$event"
    kind: EventKind
    scope: EventScope
    data: Id


class DefinitionResult(_Vertex):
    label: Literal["definitionResult"] = "definitionResult"


class DeclarationResult(_Vertex):
    label: Literal["declarationResult"] = "declarationResult"


class TypeDefinitionResult(_Vertex):
    label: Literal["typeDefinitionResult"] = "typeDefinitionResult"


class ReferenceResult(_Vertex):
    label: Literal["referenceResult"] = "referenceResult"


class ImplementationResult(_Vertex):
    label: Literal["implementationResult"] = "implementationResult"


class FoldingRangeResult(_Vertex):
    label: Literal["foldingRangeResult"] = "foldingRangeResult"
    result: t.List[FoldingRange]


class HoverResult(_Vertex):
    label: Literal["hoverResult"] = "hoverResult"
    result: Hover


class DocumentSymbolResult(_Vertex):
    label: Literal["documentSymbolResult"] = "documentSymbolResult"
    result: DocumentSymbolOrRangeBasedVec


class DocumentLinkResult(_Vertex):
    label: Literal["documentLinkResult"] = "documentLinkResult"
    result: t.List[DocumentLink]


class DiagnosticResult(_Vertex):
    label: Literal["diagnosticResult"] = "diagnosticResult"
    result: t.List[Diagnostic]


Vertex = t.Annotated[
    t.Union[
        MetaData,
        Project,
        Document,
        RangeVertex,
        ResultSet,
        MonikerVertex,
        PackageInformation,
        Event,
        DefinitionResult,
        DeclarationResult,
        TypeDefinitionResult,
        ReferenceResult,
        ImplementationResult,
        FoldingRangeResult,
        HoverResult,
        DocumentSymbolResult,
        DocumentLinkResult,
        DiagnosticResult,
    ],
    Field(discriminator="label"),
]


# Edges


class _Edge(LspModel):
    id: Id
    type: Literal["edge"] = "edge"


class EdgeData(LspModel):
    """Connects one vertex to another.

    Args:
        inV (Union[int, str]): The id of the target vertex.
        outV (Union[int, str]): The id of the source vertex.
    """

    inV: Id
    outV: Id


class EdgeDataMultiIn(LspModel):
    """Connects one vertex to many.

    Args:
        inVs (List[Union[int, str]]): The ids of the target vertices.
        outV (Union[int, str]): The id of the source vertex.
    """

    inVs: t.List[Id]
    outV: Id


class ContainsEdge(_Edge, EdgeDataMultiIn):
    label: Literal["contains"] = "contains"


class ItemEdge(_Edge, EdgeDataMultiIn):
    """Connects a result vertex to the ranges of one document.

    Args:
        document (Union[int, str]): The id of the document the target ranges belong to.
        property (Optional[ItemKind]): What the target ranges are.
    """

    label: Literal["item"] = "item"
    document: Id
    property: t.Optional[ItemKind] = None


class MonikerEdge(_Edge, EdgeData):
    label: Literal["moniker"] = "moniker"


class NextMonikerEdge(_Edge, EdgeData):
    label: Literal["nextMoniker"] = "nextMoniker"


class NextEdge(_Edge, EdgeData):
    label: Literal["next"] = "next"


class PackageInformationEdge(_Edge, EdgeData):
    label: Literal["packageInformation"] = "packageInformation"


class DefinitionEdge(_Edge, EdgeData):
    label: Literal["textDocument/definition"] = "textDocument/definition"


class DeclarationEdge(_Edge, EdgeData):
    label: Literal["textDocument/declaration"] = "textDocument/declaration"


class HoverEdge(_Edge, EdgeData):
    label: Literal["textDocument/hover"] = "textDocument/hover"


class ReferencesEdge(_Edge, EdgeData):
    label: Literal["textDocument/references"] = "textDocument/references"


class ImplementationEdge(_Edge, EdgeData):
    label: Literal["textDocument/implementation"] = "textDocument/implementation"


class TypeDefinitionEdge(_Edge, EdgeData):
    label: Literal["textDocument/typeDefinition"] = "textDocument/typeDefinition"


class FoldingRangeEdge(_Edge, EdgeData):
    label: Literal["textDocument/foldingRange"] = "textDocument/foldingRange"


class DocumentLinkEdge(_Edge, EdgeData):
    label: Literal["textDocument/documentLink"] = "textDocument/documentLink"


class DocumentSymbolEdge(_Edge, EdgeData):
    label: Literal["textDocument/documentSymbol"] = "textDocument/documentSymbol"


class DiagnosticEdge(_Edge, EdgeData):
    label: Literal["textDocument/diagnostic"] = "textDocument/diagnostic"


Edge = t.Annotated[
    t.Union[
        ContainsEdge,
        ItemEdge,
        MonikerEdge,
        NextMonikerEdge,
        NextEdge,
        PackageInformationEdge,
        DefinitionEdge,
        DeclarationEdge,
        HoverEdge,
        ReferencesEdge,
        ImplementationEdge,
        TypeDefinitionEdge,
        FoldingRangeEdge,
        DocumentLinkEdge,
        DocumentSymbolEdge,
        DiagnosticEdge,
    ],
    Field(discriminator="label"),
]

Entry = t.Annotated[t.Union[Vertex, Edge], Field(discriminator="type")]


def decode_entry(line: t.Union[str, bytes]) -> t.Any:
    """Decode one line of an LSIF dump.

    Raises:
        DecodeError: If the line is not a known vertex or edge.
    """
    return codec.decode_json(Entry, line)


def encode_entry(entry: t.Any) -> str:
    """Encode a vertex or edge as a single line of compact JSON (without newline)."""
    return codec.encode_json(entry)


def iter_entries(lines: t.Iterable[t.Union[str, bytes]]) -> t.Iterator[t.Any]:
    """Decode a JSON lines stream of entries, skipping blank lines.

    Args:
        lines: Any iterable of lines, e.g. an open file.

    Raises:
        DecodeError: On the first line that does not decode.
    """
    for lineno, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            yield decode_entry(line)
        except DecodeError as e:
            _logger.debug("cannot decode LSIF entry on line %d: %s", lineno, e)
            raise


def dump_entries(entries: t.Iterable[t.Any]) -> str:
    """Encode entries as JSON lines, one object per line."""
    return "".join(encode_entry(entry) + "\n" for entry in entries)
