"""Draft protocol items that are not part of a released LSP version.

Nothing else in `lstypes` imports this module. Hosts that want the draft
items opt in by importing it and using its handshake records and request
registry in place of the stable ones::

    from lstypes import proposed

    params = proposed.get_request("initialize").decode_params(message["params"])
    params.capabilities.textDocument.inlineCompletion

The stable records never carry these fields, so a host that does not import
this module cannot emit them.
"""

import typing as t

from pydantic import StrictBool, StrictStr
from typing_extensions import Literal

from . import capabilities, requests
from .base import LspIntEnum, LspModel, OneOf
from .structs import (
    Command,
    Range,
    StaticRegistrationOptions,
    TextDocumentPositionParams,
    TextDocumentRegistrationOptions,
    WorkDoneProgressOptions,
    WorkDoneProgressParams,
)

# Inline completion (@since 3.18.0)


class InlineCompletionClientCapabilities(LspModel):
    dynamicRegistration: t.Optional[StrictBool] = None


class InlineCompletionOptions(WorkDoneProgressOptions):
    pass


class InlineCompletionRegistrationOptions(
    InlineCompletionOptions, TextDocumentRegistrationOptions, StaticRegistrationOptions
):
    pass


class InlineCompletionTriggerKind(LspIntEnum):
    """Describes how an inline completion request was triggered.

    Attributes:
        INVOKED: Completion was triggered explicitly by a user gesture.
        AUTOMATIC: Completion was triggered automatically while editing.
    """

    INVOKED = 1
    AUTOMATIC = 2


class SelectedCompletionInfo(LspModel):
    """The completion item currently selected in the completion widget.

    Args:
        range (Range): The range that will be replaced if this completion item is accepted.
        text (str): The text the range will be replaced with if this completion is accepted.
    """

    range: Range
    text: StrictStr


class InlineCompletionContext(LspModel):
    triggerKind: InlineCompletionTriggerKind
    selectedCompletionInfo: t.Optional[SelectedCompletionInfo] = None


class InlineCompletionParams(TextDocumentPositionParams, WorkDoneProgressParams):
    context: InlineCompletionContext


class StringValue(LspModel):
    """A snippet string, a template which allows to insert text and control the editor cursor.

    Args:
        kind (Literal["snippet"]): Always "snippet".
        value (str): The snippet string.
    """

    kind: Literal["snippet"] = "snippet"
    value: StrictStr


class InlineCompletionItem(LspModel):
    """An inline completion item represents a text snippet proposed inline to complete typed text.

    Args:
        insertText (Union[str, StringValue]): The text to replace the range with.
        filterText (Optional[str]): A text used to decide if this inline completion should be shown.
        range (Optional[Range]): The range to replace. Defaults to the requested position.
        command (Optional[Command]): An optional command executed after inserting this completion.
    """

    insertText: OneOf[StrictStr, StringValue]
    filterText: t.Optional[StrictStr] = None
    range: t.Optional[Range] = None
    command: t.Optional[Command] = None


class InlineCompletionList(LspModel):
    items: t.List[InlineCompletionItem]


InlineCompletionResponse = OneOf[InlineCompletionList, t.List[InlineCompletionItem]]


# Handshake records extended with the draft fields


class TextDocumentClientCapabilities(capabilities.TextDocumentClientCapabilities):
    inlineCompletion: t.Optional[InlineCompletionClientCapabilities] = None


class ClientCapabilities(capabilities.ClientCapabilities):
    """Client capabilities including draft items.

    Args:
        textDocument (Optional[TextDocumentClientCapabilities]): Text document capabilities,
            including inline completion.
        offsetEncoding (Optional[List[str]]): The position encodings the client supports, most
            preferred first. An older extension superseded by `general.positionEncodings`.
    """

    textDocument: t.Optional[TextDocumentClientCapabilities] = None
    offsetEncoding: t.Optional[t.List[StrictStr]] = None


class InitializeParams(capabilities.InitializeParams):
    capabilities: ClientCapabilities


class ServerCapabilities(capabilities.ServerCapabilities):
    inlineCompletionProvider: t.Optional[OneOf[StrictBool, InlineCompletionOptions]] = None


class InitializeResult(capabilities.InitializeResult):
    """The initialize result including draft items.

    Args:
        capabilities (ServerCapabilities): The server capabilities, including inline completion.
        offsetEncoding (Optional[str]): The position encoding the server picked from the
            client's `offsetEncoding`, e.g. ``utf-8``.
    """

    capabilities: ServerCapabilities
    offsetEncoding: t.Optional[StrictStr] = None


INITIALIZE = requests.RequestType("initialize", InitializeParams, InitializeResult)
INLINE_COMPLETION = requests.RequestType(
    "textDocument/inlineCompletion",
    InlineCompletionParams,
    t.Optional[InlineCompletionResponse],
    InlineCompletionRegistrationOptions,
)

REQUESTS: t.Mapping[str, requests.RequestType] = {
    **requests.REQUESTS,
    INITIALIZE.method: INITIALIZE,
    INLINE_COMPLETION.method: INLINE_COMPLETION,
}


def get_request(method: str) -> requests.RequestType:
    """Like `lstypes.requests.get_request`, including the draft methods."""
    return requests.get_request(method, REQUESTS)
