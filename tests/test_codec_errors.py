import typing as t

import pytest
from pydantic import ValidationError

from lstypes import (
    DecodeError,
    DecodeIssue,
    ErrorKind,
    Hover,
    Position,
    ServerCapabilities,
    TextDocumentEdit,
    TextDocumentItem,
    WorkspaceEdit,
    codec,
)

RANGE = {"start": {"line": 0, "character": 0}, "end": {"line": 0, "character": 3}}


def _issues(error):
    return {(issue.kind, issue.path) for issue in error.issues}


def test_missing_field():
    with pytest.raises(DecodeError) as info:
        codec.decode(Position, {"line": 1})
    assert info.value.kind is ErrorKind.MISSING_FIELD
    assert info.value.path == "$.character"
    assert info.value.target == "Position"


def test_array_where_object_expected():
    with pytest.raises(DecodeError) as info:
        codec.decode(Position, [1, 2])
    assert info.value.kind is ErrorKind.STRUCTURAL
    assert info.value.path == "$"


def test_path_through_list_index():
    with pytest.raises(DecodeError) as info:
        codec.decode(t.List[Position], [{"line": 0, "character": 0}, {"line": None, "character": 0}])
    assert info.value.kind is ErrorKind.STRUCTURAL
    assert info.value.path == "$[1].line"


def test_path_skips_union_variant_names():
    payload = {
        "textDocument": {"uri": "file:///a.rs", "version": 1},
        "edits": [{"range": RANGE, "newText": 5}],
    }
    with pytest.raises(DecodeError) as info:
        codec.decode(TextDocumentEdit, payload)
    issues = _issues(info.value)
    assert (ErrorKind.STRUCTURAL, "$.edits[0].newText") in issues
    assert (ErrorKind.MISSING_FIELD, "$.edits[0].annotationId") in issues
    assert all(path.startswith("$.edits[0].") for _, path in issues)


def test_path_skips_discriminator_tags():
    with pytest.raises(DecodeError) as info:
        codec.decode(WorkspaceEdit, {"documentChanges": [{"kind": "create"}]})
    assert (ErrorKind.MISSING_FIELD, "$.documentChanges[0].uri") in _issues(info.value)


def test_malformed_json():
    with pytest.raises(DecodeError) as info:
        codec.decode_json(Position, '{"line": 1,')
    assert info.value.kind is ErrorKind.STRUCTURAL
    assert info.value.path == "$"


def test_decode_json_reports_paths():
    with pytest.raises(DecodeError) as info:
        codec.decode_json(Position, '{"line": -1, "character": 0}')
    assert info.value.kind is ErrorKind.INVALID_PRIMITIVE
    assert info.value.path == "$.line"


def test_error_carries_validation_error():
    with pytest.raises(DecodeError) as info:
        codec.decode(Position, {})
    assert isinstance(info.value.__cause__, ValidationError)
    assert isinstance(info.value, ValueError)
    assert len(info.value.issues) == 2


def test_error_message_lists_every_issue():
    with pytest.raises(DecodeError) as info:
        codec.decode(Position, {})
    message = str(info.value)
    assert message.startswith("cannot decode Position:")
    assert "$.line" in message
    assert "$.character" in message


def test_issue_rendering():
    issue = DecodeIssue(ErrorKind.MISSING_FIELD, "$.uri", "Field required")
    assert str(issue) == "$.uri: Field required (missingField)"


def test_format_path():
    assert codec.format_path(()) == "$"
    assert codec.format_path(("edits", 0, "range")) == "$.edits[0].range"
    data = {"edits": [{"range": {}}]}
    assert codec.format_path(("edits", 0, "TextEdit", "range", "start"), data) == "$.edits[0].range.start"


def test_decode_json_accepts_bytes():
    assert codec.decode_json(Position, b'{"line": 1, "character": 2}') == Position(line=1, character=2)


def test_encode_optional_result():
    assert codec.encode(None, t.Optional[Hover]) is None
    assert codec.encode_json(None, t.Optional[Hover]) == "null"
    hover = Hover(contents="text")
    assert codec.encode(hover, t.Optional[Hover]) == {"contents": "text"}


def test_encode_untyped_containers():
    positions = [Position(line=0, character=1), Position(line=2, character=3)]
    assert codec.encode(positions) == [{"line": 0, "character": 1}, {"line": 2, "character": 3}]
    assert codec.encode_json({"p": positions[0]}) == '{"p":{"line":0,"character":1}}'


@pytest.mark.parametrize("line", ["5", 5.0, 5.5, True, None])
def test_numbers_are_not_coerced(line):
    with pytest.raises(DecodeError) as info:
        codec.decode(Position, {"line": line, "character": 0})
    assert info.value.kind is ErrorKind.STRUCTURAL
    assert info.value.path == "$.line"


def test_document_version_must_be_an_integer():
    item = {"uri": "file:///a.py", "languageId": "python", "version": 2.0, "text": ""}
    with pytest.raises(DecodeError) as info:
        codec.decode(TextDocumentItem, item)
    assert info.value.kind is ErrorKind.STRUCTURAL
    assert info.value.path == "$.version"


@pytest.mark.parametrize("field", ["hoverProvider", "declarationProvider"])
@pytest.mark.parametrize("value", ["yes", "true", 1, 0])
def test_booleans_are_not_coerced(field, value):
    with pytest.raises(DecodeError) as info:
        codec.decode(ServerCapabilities, {field: value})
    assert {kind for kind, _ in _issues(info.value)} == {ErrorKind.STRUCTURAL}
    assert info.value.path == f"$.{field}"


def test_strings_in_boolean_option_fields_are_rejected():
    with pytest.raises(DecodeError) as info:
        codec.decode(
            ServerCapabilities,
            {"diagnosticProvider": {"interFileDependencies": "no", "workspaceDiagnostics": False}},
        )
    assert info.value.kind is ErrorKind.STRUCTURAL
    assert info.value.path == "$.diagnosticProvider.interFileDependencies"


def test_strings_are_not_coerced():
    item = {"uri": "file:///a.py", "languageId": 3, "version": 1, "text": ""}
    with pytest.raises(DecodeError) as info:
        codec.decode(TextDocumentItem, item)
    assert info.value.kind is ErrorKind.STRUCTURAL
    assert info.value.path == "$.languageId"
