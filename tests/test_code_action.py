from lstypes import (
    CodeAction,
    CodeActionKind,
    CodeActionParams,
    CodeActionResponse,
    CodeActionTriggerKind,
    Command,
    DiagnosticSeverity,
    Uri,
    codec,
)


def test_encode_mixed_response():
    response = [
        Command(title="title", command="command"),
        CodeAction(title="title", kind=CodeActionKind.QUICKFIX),
    ]
    assert (
        codec.encode_json(response, CodeActionResponse)
        == '[{"title":"title","command":"command"},{"title":"title","kind":"quickfix"}]'
    )


def test_decode_mixed_response():
    response = codec.decode(
        CodeActionResponse,
        [
            {"title": "Run", "command": "run", "arguments": [1, "two"]},
            {"title": "Fix", "kind": "quickfix", "command": {"title": "Fix", "command": "fix"}},
        ],
    )
    assert isinstance(response[0], Command)
    assert response[0].arguments == [1, "two"]
    assert isinstance(response[1], CodeAction)
    assert response[1].command == Command(title="Fix", command="fix")


def test_decode_params():
    params = codec.decode(
        CodeActionParams,
        {
            "textDocument": {"uri": "file:///src/lib.rs"},
            "range": {"start": {"line": 1, "character": 2}, "end": {"line": 1, "character": 8}},
            "context": {
                "diagnostics": [
                    {
                        "range": {
                            "start": {"line": 1, "character": 2},
                            "end": {"line": 1, "character": 8},
                        },
                        "severity": 1,
                        "message": "unused variable",
                    }
                ],
                "only": ["quickfix", "source.fixAll.eslint"],
                "triggerKind": 2,
            },
        },
    )
    assert params.textDocument.uri == Uri("file:///src/lib.rs")
    assert params.context.diagnostics[0].severity is DiagnosticSeverity.ERROR
    assert params.context.only[0] is CodeActionKind.QUICKFIX
    assert params.context.only[1] == "source.fixAll.eslint"
    assert params.context.triggerKind is CodeActionTriggerKind.AUTOMATIC
    assert params.workDoneToken is None


def test_unknown_kind_is_preserved():
    action = codec.decode(CodeAction, {"title": "Extract", "kind": "refactor.extract.constant"})
    assert action.kind == "refactor.extract.constant"
    assert codec.encode(action) == {"title": "Extract", "kind": "refactor.extract.constant"}


def test_code_action_with_edit():
    payload = {
        "title": "Remove",
        "kind": "quickfix",
        "isPreferred": True,
        "edit": {
            "changes": {
                "file:///src/lib.rs": [
                    {
                        "range": {
                            "start": {"line": 1, "character": 0},
                            "end": {"line": 2, "character": 0},
                        },
                        "newText": "",
                    }
                ]
            }
        },
        "data": {"id": 7},
    }
    action = codec.decode(CodeAction, payload)
    assert list(action.edit.changes) == [Uri("file:///src/lib.rs")]
    assert codec.encode(action) == payload
