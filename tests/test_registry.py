import pytest

from lstypes import (
    CodeAction,
    CodeActionKind,
    CodeActionParams,
    CodeActionRegistrationOptions,
    DecodeError,
    DidOpenTextDocumentParams,
    ErrorKind,
    Hover,
    UnknownMethodError,
    WorkDoneProgressBegin,
    notifications,
    requests,
)

STABLE_REQUESTS = """
initialize shutdown window/showMessageRequest client/registerCapability
client/unregisterCapability workspace/workspaceFolders workspace/configuration
window/workDoneProgress/create window/showDocument textDocument/willSaveWaitUntil
textDocument/completion completionItem/resolve textDocument/hover textDocument/signatureHelp
textDocument/declaration textDocument/definition textDocument/typeDefinition
textDocument/implementation textDocument/references textDocument/documentHighlight
textDocument/documentSymbol workspace/symbol workspaceSymbol/resolve workspace/executeCommand
workspace/applyEdit textDocument/codeAction codeAction/resolve textDocument/codeLens
codeLens/resolve workspace/codeLens/refresh textDocument/documentLink documentLink/resolve
textDocument/documentColor textDocument/colorPresentation textDocument/formatting
textDocument/rangeFormatting textDocument/onTypeFormatting textDocument/rename
textDocument/prepareRename textDocument/foldingRange textDocument/selectionRange
textDocument/prepareCallHierarchy callHierarchy/incomingCalls callHierarchy/outgoingCalls
textDocument/semanticTokens/full textDocument/semanticTokens/full/delta
textDocument/semanticTokens/range workspace/semanticTokens/refresh
textDocument/linkedEditingRange workspace/willCreateFiles workspace/willRenameFiles
workspace/willDeleteFiles textDocument/moniker textDocument/prepareTypeHierarchy
typeHierarchy/supertypes typeHierarchy/subtypes textDocument/inlineValue
workspace/inlineValue/refresh textDocument/inlayHint inlayHint/resolve
workspace/inlayHint/refresh textDocument/diagnostic workspace/diagnostic
workspace/diagnostic/refresh
""".split()

STABLE_NOTIFICATIONS = """
$/cancelRequest $/setTrace $/logTrace $/progress initialized exit window/showMessage
window/logMessage window/workDoneProgress/cancel telemetry/event textDocument/didOpen
textDocument/didChange textDocument/willSave textDocument/didSave textDocument/didClose
textDocument/publishDiagnostics workspace/didChangeConfiguration
workspace/didChangeWatchedFiles workspace/didChangeWorkspaceFolders workspace/didCreateFiles
workspace/didRenameFiles workspace/didDeleteFiles notebookDocument/didOpen
notebookDocument/didChange notebookDocument/didSave notebookDocument/didClose
""".split()


def test_every_request_is_registered():
    assert set(requests.REQUESTS) == set(STABLE_REQUESTS)
    for method, request in requests.REQUESTS.items():
        assert request.method == method


def test_every_notification_is_registered():
    assert set(notifications.NOTIFICATIONS) == set(STABLE_NOTIFICATIONS)


def test_code_action_request():
    request = requests.get_request("textDocument/codeAction")
    assert request is requests.CODE_ACTION
    assert request.params is CodeActionParams

    params = request.decode_params(
        {
            "textDocument": {"uri": "file:///a.py"},
            "range": {"start": {"line": 0, "character": 0}, "end": {"line": 0, "character": 4}},
            "context": {"diagnostics": []},
        }
    )
    assert params.context.diagnostics == []

    reply = request.encode_result([CodeAction(title="Fix", kind=CodeActionKind.QUICKFIX)])
    assert reply == [{"title": "Fix", "kind": "quickfix"}]
    assert request.encode_result(None) is None
    assert request.decode_result(None) is None


def test_registration_options():
    options = requests.CODE_ACTION.decode_registration_options(
        {"documentSelector": [{"language": "python"}], "codeActionKinds": ["quickfix"]}
    )
    assert isinstance(options, CodeActionRegistrationOptions)
    assert options.documentSelector[0].language == "python"

    with pytest.raises(TypeError):
        requests.SHUTDOWN.decode_registration_options({})


def test_requests_without_params():
    assert requests.SHUTDOWN.decode_params(None) is None
    assert requests.SHUTDOWN.encode_result(None) is None
    with pytest.raises(DecodeError) as info:
        requests.SHUTDOWN.decode_params({})
    assert info.value.kind is ErrorKind.STRUCTURAL


def test_hover_result():
    hover = requests.HOVER.decode_result({"contents": {"kind": "markdown", "value": "**x**"}})
    assert isinstance(hover, Hover)
    assert requests.HOVER.decode_result(None) is None


def test_unknown_request():
    with pytest.raises(UnknownMethodError) as info:
        requests.get_request("textDocument/inlineCompletion")
    assert isinstance(info.value, KeyError)
    assert info.value.method == "textDocument/inlineCompletion"
    assert str(info.value) == "unknown method: 'textDocument/inlineCompletion'"


def test_notifications():
    did_open = notifications.get_notification("textDocument/didOpen")
    assert did_open.params is DidOpenTextDocumentParams
    params = did_open.decode_params(
        {"textDocument": {"uri": "file:///a.py", "languageId": "python", "version": 1, "text": "x = 1\n"}}
    )
    assert params.textDocument.version == 1
    assert did_open.encode_params(params)["textDocument"]["text"] == "x = 1\n"

    assert notifications.EXIT.decode_params(None) is None

    with pytest.raises(UnknownMethodError):
        notifications.get_notification("textDocument/didFrobnicate")


def test_progress_notification():
    begin = notifications.PROGRESS.decode_params(
        {"token": "index", "value": {"kind": "begin", "title": "Indexing", "percentage": 10}}
    )
    assert isinstance(begin.value, WorkDoneProgressBegin)
    assert begin.value.percentage == 10

    partial = notifications.PROGRESS.decode_params({"token": 7, "value": [{"name": "x"}]})
    assert partial.value == [{"name": "x"}]
    assert notifications.PROGRESS.encode_params(partial) == {"token": 7, "value": [{"name": "x"}]}


def test_cancel_request_notification():
    params = notifications.CANCEL_REQUEST.decode_params({"id": "abc"})
    assert params.id == "abc"
    assert notifications.CANCEL_REQUEST.encode_params(params) == {"id": "abc"}
