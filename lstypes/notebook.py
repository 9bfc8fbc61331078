"""Notebook document synchronization (@since 3.17.0)."""

import typing as t

from pydantic import StrictBool, StrictStr

from .base import Int32, LspIntEnum, LspModel, LSPObject, OneOf, UInt32
from .structs import (
    StaticRegistrationOptions,
    TextDocumentIdentifier,
    TextDocumentItem,
    VersionedTextDocumentIdentifier,
)
from .sync import TextDocumentContentChangeEvent
from .uri import Uri


class NotebookCellKind(LspIntEnum):
    """A notebook cell kind.

    Attributes:
        MARKUP: A markup-cell is formatted source that is used for display.
        CODE: A code-cell is source code.
    """

    MARKUP = 1
    CODE = 2


class ExecutionSummary(LspModel):
    """Execution information of a notebook cell.

    Args:
        executionOrder (int): A strict monotonically increasing value indicating the execution
            order of a cell inside a notebook.
        success (Optional[bool]): Whether the execution was successful or not if known by the client.
    """

    executionOrder: UInt32
    success: t.Optional[StrictBool] = None


class NotebookCell(LspModel):
    """A notebook cell.

    The cell's content is not part of the notebook document; it is synced as
    a regular text document identified by `document`.

    Args:
        kind (NotebookCellKind): The cell's kind.
        document (Uri): The URI of the cell's text document content.
        metadata (Optional[Dict[str, Any]]): Additional metadata stored with the cell.
        executionSummary (Optional[ExecutionSummary]): Additional execution summary information if
            supported by the client.
    """

    kind: NotebookCellKind
    document: Uri
    metadata: t.Optional[LSPObject] = None
    executionSummary: t.Optional[ExecutionSummary] = None


class NotebookDocument(LspModel):
    """A notebook document.

    Args:
        uri (Uri): The notebook document's URI.
        notebookType (str): The type of the notebook.
        version (int): The version number of this document, increasing after each change.
        metadata (Optional[Dict[str, Any]]): Additional metadata stored with the notebook document.
        cells (List[NotebookCell]): The cells of a notebook.
    """

    uri: Uri
    notebookType: StrictStr
    version: Int32
    metadata: t.Optional[LSPObject] = None
    cells: t.List[NotebookCell]


class NotebookDocumentFilter(LspModel):
    """A notebook document filter denotes a notebook document by different properties.

    At least one of the properties is expected to be set.
    """

    notebookType: t.Optional[StrictStr] = None
    scheme: t.Optional[StrictStr] = None
    pattern: t.Optional[StrictStr] = None


class NotebookCellSelector(LspModel):
    language: StrictStr


class NotebookSelector(LspModel):
    """Selects notebooks by filter and, optionally, which of their cells to sync.

    Args:
        notebook (Union[str, NotebookDocumentFilter, None]): The notebook to be synced. A string is
            matched against the notebook type.
        cells (Optional[List[NotebookCellSelector]]): The cells of the matching notebook to be synced.
    """

    notebook: t.Optional[OneOf[StrictStr, NotebookDocumentFilter]] = None
    cells: t.Optional[t.List[NotebookCellSelector]] = None


class NotebookDocumentSyncOptions(LspModel):
    """Options specific to a notebook plus its cells to be synced to the server.

    Args:
        notebookSelector (List[NotebookSelector]): The notebooks to be synced.
        save (Optional[bool]): Whether save notifications should be forwarded to the server.
    """

    notebookSelector: t.List[NotebookSelector]
    save: t.Optional[StrictBool] = None


class NotebookDocumentSyncRegistrationOptions(NotebookDocumentSyncOptions, StaticRegistrationOptions):
    pass


class NotebookDocumentSyncClientCapabilities(LspModel):
    dynamicRegistration: t.Optional[StrictBool] = None
    executionSummarySupport: t.Optional[StrictBool] = None


class NotebookDocumentClientCapabilities(LspModel):
    synchronization: NotebookDocumentSyncClientCapabilities


class DidOpenNotebookDocumentParams(LspModel):
    """The params sent in an open notebook document notification.

    Args:
        notebookDocument (NotebookDocument): The notebook document that got opened.
        cellTextDocuments (List[TextDocumentItem]): The text documents that represent the content
            of a notebook cell.
    """

    notebookDocument: NotebookDocument
    cellTextDocuments: t.List[TextDocumentItem]


class VersionedNotebookDocumentIdentifier(LspModel):
    version: Int32
    uri: Uri


class NotebookCellArrayChange(LspModel):
    """A change describing how to move a `NotebookCell` array from state S to S'.

    Args:
        start (int): The start offset of the cell that changed.
        deleteCount (int): The deleted cells.
        cells (Optional[List[NotebookCell]]): The new cells, if any.
    """

    start: UInt32
    deleteCount: UInt32
    cells: t.Optional[t.List[NotebookCell]] = None


class NotebookDocumentCellChangeStructure(LspModel):
    """Structural changes to the cells of a notebook.

    Args:
        array (NotebookCellArrayChange): The change to the cell array.
        didOpen (Optional[List[TextDocumentItem]]): Additional opened cell text documents.
        didClose (Optional[List[TextDocumentIdentifier]]): Additional closed cell text documents.
    """

    array: NotebookCellArrayChange
    didOpen: t.Optional[t.List[TextDocumentItem]] = None
    didClose: t.Optional[t.List[TextDocumentIdentifier]] = None


class NotebookDocumentCellContentChanges(LspModel):
    document: VersionedTextDocumentIdentifier
    changes: t.List[TextDocumentContentChangeEvent]


class NotebookDocumentCellChanges(LspModel):
    """Changes to cells.

    Args:
        structure (Optional[NotebookDocumentCellChangeStructure]): Changes to the cell structure
            to add or remove cells.
        data (Optional[List[NotebookCell]]): Changes to notebook cells properties like their kind,
            execution summary or metadata.
        textContent (Optional[List[NotebookDocumentCellContentChanges]]): Changes to the text
            content of notebook cells.
    """

    structure: t.Optional[NotebookDocumentCellChangeStructure] = None
    data: t.Optional[t.List[NotebookCell]] = None
    textContent: t.Optional[t.List[NotebookDocumentCellContentChanges]] = None


class NotebookDocumentChangeEvent(LspModel):
    metadata: t.Optional[LSPObject] = None
    cells: t.Optional[NotebookDocumentCellChanges] = None


class DidChangeNotebookDocumentParams(LspModel):
    """The params sent in a change notebook document notification.

    Args:
        notebookDocument (VersionedNotebookDocumentIdentifier): The notebook document that did change.
            The version number points to the version after all provided changes have been applied.
        change (NotebookDocumentChangeEvent): The actual changes to the notebook document.
    """

    notebookDocument: VersionedNotebookDocumentIdentifier
    change: NotebookDocumentChangeEvent


class NotebookDocumentIdentifier(LspModel):
    uri: Uri


class DidSaveNotebookDocumentParams(LspModel):
    notebookDocument: NotebookDocumentIdentifier


class DidCloseNotebookDocumentParams(LspModel):
    """The params sent in a close notebook document notification.

    Args:
        notebookDocument (NotebookDocumentIdentifier): The notebook document that got closed.
        cellTextDocuments (List[TextDocumentIdentifier]): The text documents that represent the
            content of a notebook cell that got closed.
    """

    notebookDocument: NotebookDocumentIdentifier
    cellTextDocuments: t.List[TextDocumentIdentifier]
