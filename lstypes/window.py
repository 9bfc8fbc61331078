"""Window features, progress reporting, telemetry and tracing."""

import enum
import typing as t

from pydantic import ConfigDict, Field, StrictBool, StrictStr
from typing_extensions import Literal

from .base import NULLABLE, LspIntEnum, LspModel, LSPAny, OneOf, Percentage, ProgressToken
from .structs import Range
from .uri import Uri


class MessageType(LspIntEnum):
    """Message type for LSP notifications.

    Attributes:
        ERROR: Error message.
        WARNING: Warning message.
        INFO: Information message.
        LOG: Log message.
    """

    ERROR = 1
    WARNING = 2
    INFO = 3
    LOG = 4


class MessageActionItem(LspModel):
    """Represents an action item in a message.

    Clients that support `additionalPropertiesSupport` send back every
    property of the chosen item, so unknown keys are kept.

    Args:
        title (str): A short title like 'Retry', 'Open Log' etc.
    """

    model_config = ConfigDict(extra="allow")

    title: StrictStr


class ShowMessageParams(LspModel):
    """Parameters of the `window/showMessage` notification.

    Args:
        type (MessageType): The message type.
        message (str): The actual message.
    """

    type: MessageType
    message: StrictStr


class ShowMessageRequestParams(LspModel):
    """Parameters of the `window/showMessageRequest` request.

    Args:
        type (MessageType): The message type.
        message (str): The actual message.
        actions (Optional[List[MessageActionItem]]): The message action items to present.
    """

    type: MessageType
    message: StrictStr
    actions: t.Optional[t.List[MessageActionItem]] = None


class MessageActionItemCapabilities(LspModel):
    additionalPropertiesSupport: t.Optional[StrictBool] = None


class ShowMessageRequestClientCapabilities(LspModel):
    messageActionItem: t.Optional[MessageActionItemCapabilities] = None


class LogMessageParams(LspModel):
    type: MessageType
    message: StrictStr


class ShowDocumentClientCapabilities(LspModel):
    """Client capabilities for the show document request (@since 3.16.0).

    Args:
        support (bool): The client has support for the show document request.
    """

    support: StrictBool


class ShowDocumentParams(LspModel):
    """Params to show a resource (@since 3.16.0).

    Args:
        uri (Uri): The uri to show.
        external (Optional[bool]): Show the resource in an external program, e.g. a browser.
        takeFocus (Optional[bool]): Whether the editor showing the document should take focus.
        selection (Optional[Range]): An optional selection range if the document is a text document.
    """

    uri: Uri
    external: t.Optional[StrictBool] = None
    takeFocus: t.Optional[StrictBool] = None
    selection: t.Optional[Range] = None


class ShowDocumentResult(LspModel):
    success: StrictBool


class WindowClientCapabilities(LspModel):
    """Window specific client capabilities.

    Args:
        workDoneProgress (Optional[bool]): Whether the client supports server initiated progress.
        showMessage (Optional[ShowMessageRequestClientCapabilities]): Capabilities for the show message request.
        showDocument (Optional[ShowDocumentClientCapabilities]): Capabilities for the show document request.
    """

    workDoneProgress: t.Optional[StrictBool] = None
    showMessage: t.Optional[ShowMessageRequestClientCapabilities] = None
    showDocument: t.Optional[ShowDocumentClientCapabilities] = None


# Work done progress


class WorkDoneProgressCreateParams(LspModel):
    token: ProgressToken


class WorkDoneProgressCancelParams(LspModel):
    token: ProgressToken


class WorkDoneProgressBegin(LspModel):
    """Represents the beginning of a work done progress.

    Args:
        kind (Literal["begin"]): The kind of progress (always "begin" for this class).
        title (str): The title of the progress operation.
        cancellable (Optional[bool]): Whether the operation is cancellable.
        message (Optional[str]): An optional message providing additional details.
        percentage (Optional[int]): An optional initial percentage of the progress, in [0, 100].
    """

    kind: Literal["begin"] = "begin"
    title: StrictStr
    cancellable: t.Optional[StrictBool] = None
    message: t.Optional[StrictStr] = None
    percentage: t.Optional[Percentage] = None


class WorkDoneProgressReport(LspModel):
    """Represents a report of ongoing work done progress.

    Args:
        kind (Literal["report"]): The kind of progress (always "report" for this class).
        cancellable (Optional[bool]): Whether the operation is cancellable.
        message (Optional[str]): An optional message providing additional details.
        percentage (Optional[int]): An optional updated percentage of the progress, in [0, 100].
    """

    kind: Literal["report"] = "report"
    cancellable: t.Optional[StrictBool] = None
    message: t.Optional[StrictStr] = None
    percentage: t.Optional[Percentage] = None


class WorkDoneProgressEnd(LspModel):
    """Represents the end of a work done progress.

    Args:
        kind (Literal["end"]): The kind of progress (always "end" for this class).
        message (Optional[str]): An optional message providing final details or results.
    """

    kind: Literal["end"] = "end"
    message: t.Optional[StrictStr] = None


WorkDoneProgress = t.Annotated[
    t.Union[WorkDoneProgressBegin, WorkDoneProgressReport, WorkDoneProgressEnd],
    Field(discriminator="kind"),
]

# Work done progress values are recognised; partial results are kept as plain JSON.
ProgressParamsValue = OneOf[WorkDoneProgress, LSPAny]


class ProgressParams(LspModel):
    """Parameters of the `$/progress` notification.

    Args:
        token (Union[int, str]): The progress token provided by the client or server.
        value (Any): The progress data.
    """

    token: ProgressToken
    value: t.Annotated[ProgressParamsValue, NULLABLE]


# Tracing


class TraceValue(enum.Enum):
    """The level of verbosity with which the server systematically reports its execution trace.

    Attributes:
        OFF: No tracing.
        MESSAGES: Trace messages only.
        VERBOSE: Trace messages including their verbose details.
    """

    OFF = "off"
    MESSAGES = "messages"
    VERBOSE = "verbose"


class SetTraceParams(LspModel):
    value: TraceValue


class LogTraceParams(LspModel):
    """Parameters of the `$/logTrace` notification.

    Args:
        message (str): The message to be logged.
        verbose (Optional[str]): Additional information that can be computed if the trace
            configuration is set to `verbose`.
    """

    message: StrictStr
    verbose: t.Optional[StrictStr] = None


# Telemetry


TelemetryEventParams = LSPAny