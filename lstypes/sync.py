"""Text document synchronization: open, change, save and close notifications."""

import typing as t

from pydantic import StrictBool, StrictStr

from .base import LspIntEnum, LspModel, OneOf, UInt32
from .structs import (
    Position,
    Range,
    TextDocumentIdentifier,
    TextDocumentItem,
    TextDocumentRegistrationOptions,
    VersionedTextDocumentIdentifier,
)


class TextDocumentSyncKind(LspIntEnum):
    """Defines how the host (editor) should sync document changes to the language server.

    Attributes:
        NONE: Documents should not be synced at all.
        FULL: Documents are synced by always sending the full content of the document.
        INCREMENTAL: Documents are synced by sending the full content on open, then only
            incremental updates.
    """

    NONE = 0
    FULL = 1
    INCREMENTAL = 2


class TextDocumentSaveReason(LspIntEnum):
    """Represents reasons why a text document is saved.

    Attributes:
        MANUAL: Manually triggered, e.g. by the user pressing save, by starting debugging, or by an API call.
        AFTER_DELAY: Automatic after a delay.
        FOCUS_OUT: When the editor lost focus.
    """

    MANUAL = 1
    AFTER_DELAY = 2
    FOCUS_OUT = 3


class SaveOptions(LspModel):
    """Save options.

    Args:
        includeText (Optional[bool]): The client is supposed to include the content on save.
    """

    includeText: t.Optional[StrictBool] = None


TextDocumentSyncSaveOptions = OneOf[StrictBool, SaveOptions]


class TextDocumentSyncOptions(LspModel):
    """Detailed text document sync options advertised by the server.

    Args:
        openClose (Optional[bool]): Open and close notifications are sent to the server.
        change (Optional[TextDocumentSyncKind]): Change notifications are sent to the server.
        willSave (Optional[bool]): Will save notifications are sent to the server.
        willSaveWaitUntil (Optional[bool]): Will save wait until requests are sent to the server.
        save (Optional[Union[bool, SaveOptions]]): Save notifications are sent to the server.
    """

    openClose: t.Optional[StrictBool] = None
    change: t.Optional[TextDocumentSyncKind] = None
    willSave: t.Optional[StrictBool] = None
    willSaveWaitUntil: t.Optional[StrictBool] = None
    save: t.Optional[TextDocumentSyncSaveOptions] = None


# Servers may answer with just the kind for backwards compatibility.
TextDocumentSyncCapability = OneOf[TextDocumentSyncKind, TextDocumentSyncOptions]


class TextDocumentSyncClientCapabilities(LspModel):
    dynamicRegistration: t.Optional[StrictBool] = None
    willSave: t.Optional[StrictBool] = None
    willSaveWaitUntil: t.Optional[StrictBool] = None
    didSave: t.Optional[StrictBool] = None


class DidOpenTextDocumentParams(LspModel):
    """Parameters of the `textDocument/didOpen` notification.

    Args:
        textDocument (TextDocumentItem): The document that was opened.
    """

    textDocument: TextDocumentItem


class TextDocumentChangeRegistrationOptions(TextDocumentRegistrationOptions):
    """Describe options to be used when registering for text document change events.

    Args:
        documentSelector (Optional[List[DocumentFilter]]): The registration scope.
        syncKind (TextDocumentSyncKind): How documents are synced to the server.
    """

    syncKind: TextDocumentSyncKind


class TextDocumentContentChangeEvent(LspModel):
    """Represents a content change event in a text document.

    Without a range the event carries the full new content of the document.

    Args:
        range (Optional[Range]): The range of the document that changed.
        rangeLength (Optional[int]): The length of the range that changed (deprecated, use .range).
        text (str): The new text of the range, or of the whole document.
    """

    range: t.Optional[Range] = None
    rangeLength: t.Optional[UInt32] = None  # deprecated, use .range
    text: StrictStr

    @classmethod
    def range_change(
        cls, start: Position, end: Position, text: str, old_text: str
    ) -> "TextDocumentContentChangeEvent":
        """Describe the replacement of `start`..`end` in `old_text` by `text`.

        `rangeLength` is computed from `old_text`. When building a batch of
        events, `old_text` is the document as left by the previous event.
        """
        replaced = Range(start=start, end=end)
        return cls(range=replaced, rangeLength=replaced.calculate_length(old_text), text=text)

    @classmethod
    def whole_document_change(cls, text: str) -> "TextDocumentContentChangeEvent":
        return cls(text=text)


class DidChangeTextDocumentParams(LspModel):
    """Parameters of the `textDocument/didChange` notification.

    Args:
        textDocument (VersionedTextDocumentIdentifier): The document that did change. The version
            number points to the version after all provided content changes have been applied.
        contentChanges (List[TextDocumentContentChangeEvent]): The actual content changes, applied in order.
    """

    textDocument: VersionedTextDocumentIdentifier
    contentChanges: t.List[TextDocumentContentChangeEvent]


class WillSaveTextDocumentParams(LspModel):
    """The parameters sent in a will save text document notification.

    Args:
        textDocument (TextDocumentIdentifier): The document that will be saved.
        reason (TextDocumentSaveReason): The reason why the document is saved.
    """

    textDocument: TextDocumentIdentifier
    reason: TextDocumentSaveReason


class TextDocumentSaveRegistrationOptions(TextDocumentRegistrationOptions):
    includeText: t.Optional[StrictBool] = None


class DidSaveTextDocumentParams(LspModel):
    """Parameters of the `textDocument/didSave` notification.

    Args:
        textDocument (TextDocumentIdentifier): The document that was saved.
        text (Optional[str]): The content when saved, depending on `includeText`.
    """

    textDocument: TextDocumentIdentifier
    text: t.Optional[StrictStr] = None


class DidCloseTextDocumentParams(LspModel):
    textDocument: TextDocumentIdentifier
