import pytest

from lstypes import (
    DiagnosticTag,
    FailureHandlingKind,
    InitializeParams,
    InitializeResult,
    MarkupKind,
    PublishDiagnosticsClientCapabilities,
    TextDocumentSyncKind,
    TraceValue,
    UnregistrationParams,
    Uri,
    codec,
)

CLIENT_PARAMS = {
    "processId": 1234,
    "clientInfo": {"name": "Visual Studio Code", "version": "1.90.0"},
    "locale": "en",
    "rootPath": "/home/user/project",
    "rootUri": "file:///home/user/project",
    "capabilities": {
        "workspace": {
            "applyEdit": True,
            "workspaceEdit": {
                "documentChanges": True,
                "resourceOperations": ["create", "rename", "delete"],
                "failureHandling": "textOnlyTransactional",
            },
            "didChangeWatchedFiles": {"dynamicRegistration": True, "relativePatternSupport": True},
            "workspaceFolders": True,
            "configuration": True,
        },
        "textDocument": {
            "synchronization": {"dynamicRegistration": True, "willSave": True, "didSave": True},
            "hover": {"contentFormat": ["markdown", "plaintext"]},
            "publishDiagnostics": {"relatedInformation": True, "tagSupport": {"valueSet": [1, 2]}},
        },
        "window": {"workDoneProgress": True},
        "general": {"positionEncodings": ["utf-16"]},
    },
    "trace": "off",
    "workspaceFolders": [{"uri": "file:///home/user/project", "name": "project"}],
}

SERVER_RESULT = {
    "capabilities": {
        "positionEncoding": "utf-16",
        "textDocumentSync": {"openClose": True, "change": 2, "save": {"includeText": False}},
        "completionProvider": {"triggerCharacters": [".", ":"], "resolveProvider": True},
        "hoverProvider": True,
        "signatureHelpProvider": {"triggerCharacters": ["(", ","]},
        "definitionProvider": True,
        "referencesProvider": True,
        "documentSymbolProvider": True,
        "codeActionProvider": {"codeActionKinds": ["quickfix", "refactor.extract"], "resolveProvider": True},
        "renameProvider": {"prepareProvider": True},
        "semanticTokensProvider": {
            "legend": {"tokenTypes": ["namespace", "type"], "tokenModifiers": ["declaration"]},
            "range": True,
            "full": {"delta": True},
        },
        "inlayHintProvider": {"resolveProvider": False},
        "diagnosticProvider": {
            "identifier": "rustc",
            "interFileDependencies": True,
            "workspaceDiagnostics": False,
        },
        "executeCommandProvider": {"commands": ["apply"]},
        "workspaceSymbolProvider": True,
        "workspace": {
            "workspaceFolders": {"supported": True, "changeNotifications": True},
            "fileOperations": {
                "willRename": {
                    "filters": [{"scheme": "file", "pattern": {"glob": "**/*.rs", "matches": "file"}}]
                }
            },
        },
        "experimental": {"serverStatusNotification": True},
    },
    "serverInfo": {"name": "rust-analyzer", "version": "1.0.0"},
}


def test_minimal_params():
    params = codec.decode(InitializeParams, {"capabilities": {}})
    assert params.processId is None
    assert params.rootUri is None
    assert params.capabilities.workspace is None
    assert params.capabilities.textDocument is None
    assert codec.encode(params) == {"processId": None, "rootUri": None, "capabilities": {}}


def test_null_and_absent_root_uri_are_equivalent():
    explicit = codec.decode(InitializeParams, {"processId": None, "rootUri": None, "capabilities": {}})
    absent = codec.decode(InitializeParams, {"capabilities": {}})
    assert explicit == absent


def test_client_params_round_trip(roundtrip):
    params, encoded = roundtrip(InitializeParams, CLIENT_PARAMS)
    assert encoded == CLIENT_PARAMS
    assert params.rootUri == Uri("file:///home/user/project")
    assert params.trace is TraceValue.OFF
    workspace_edit = params.capabilities.workspace.workspaceEdit
    assert workspace_edit.failureHandling is FailureHandlingKind.TEXT_ONLY_TRANSACTIONAL
    assert params.capabilities.textDocument.hover.contentFormat == [MarkupKind.MARKDOWN, MarkupKind.PLAINTEXT]


def test_server_result_round_trip(roundtrip):
    result, encoded = roundtrip(InitializeResult, SERVER_RESULT)
    assert encoded == SERVER_RESULT
    capabilities = result.capabilities
    assert capabilities.textDocumentSync.change is TextDocumentSyncKind.INCREMENTAL
    assert capabilities.hoverProvider is True
    assert capabilities.diagnosticProvider.identifier == "rustc"
    assert capabilities.workspace.workspaceFolders.changeNotifications is True
    assert result.serverInfo.name == "rust-analyzer"


def test_change_notifications_registration_id():
    result = codec.decode(
        InitializeResult,
        {"capabilities": {"workspace": {"workspaceFolders": {"changeNotifications": "reg-1"}}}},
    )
    assert result.capabilities.workspace.workspaceFolders.changeNotifications == "reg-1"


@pytest.mark.parametrize(
    "tag_support, expected",
    [
        (True, []),
        ({"valueSet": [1, 2]}, [DiagnosticTag.UNNECESSARY, DiagnosticTag.DEPRECATED]),
    ],
)
def test_publish_diagnostics_tag_support(tag_support, expected):
    caps = codec.decode(PublishDiagnosticsClientCapabilities, {"tagSupport": tag_support})
    assert caps.tagSupport.valueSet == expected


def test_publish_diagnostics_tag_support_false():
    caps = codec.decode(PublishDiagnosticsClientCapabilities, {"tagSupport": False})
    assert caps.tagSupport is None
    assert codec.encode(caps) == {}


def test_unregistration_field_keeps_wire_spelling():
    payload = {"unregisterations": [{"id": "1", "method": "textDocument/willSaveWaitUntil"}]}
    params = codec.decode(UnregistrationParams, payload)
    assert params.unregisterations[0].method == "textDocument/willSaveWaitUntil"
    assert codec.encode(params) == payload
