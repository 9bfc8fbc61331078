import json

import pytest

from lstypes import codec
from lstypes.capabilities import ServerCapabilities
from lstypes.exceptions import DecodeError, ErrorKind
from lstypes.language import (
    CallHierarchyIncomingCall,
    CodeActionKind,
    DocumentColorOptions,
    DocumentColorRegistrationOptions,
    GotoDefinitionResponse,
    Hover,
)
from lstypes.structs import (
    AnnotatedTextEdit,
    CancelParams,
    Command,
    CreateFile,
    Diagnostic,
    DiagnosticSeverity,
    LanguageString,
    Location,
    LocationLink,
    MarkupContent,
    MarkupKind,
    OptionalVersionedTextDocumentIdentifier,
    Position,
    Range,
    RelativePattern,
    TextDocumentEdit,
    TextEdit,
    WatchKind,
    WorkspaceEdit,
    WorkspaceFolder,
)
from lstypes.sync import TextDocumentSyncKind, TextDocumentSyncOptions
from lstypes.uri import Uri
from lstypes.workspace import FileSystemWatcher, ResourceOperationKind

RANGE = {"start": {"line": 1, "character": 2}, "end": {"line": 1, "character": 5}}


def test_workspace_edit_with_empty_changes() -> None:
    assert codec.encode(WorkspaceEdit(changes={})) == {"changes": {}}


def test_workspace_edit_without_anything() -> None:
    assert codec.encode(WorkspaceEdit()) == {}
    assert codec.encode_json(WorkspaceEdit()) == "{}"


def test_workspace_edit_with_uri_keys() -> None:
    edit = WorkspaceEdit.new({Uri("file://test"): []})
    assert codec.encode(edit) == {"changes": {"file://test": []}}
    assert codec.decode(WorkspaceEdit, {"changes": {"file://test": []}}) == edit


def test_document_changes_prefers_plain_text_document_edits() -> None:
    payload = {
        "documentChanges": [
            {
                "textDocument": {"uri": "file:///a.py", "version": 3},
                "edits": [{"range": RANGE, "newText": "x"}],
            }
        ]
    }
    edit = codec.decode(WorkspaceEdit, payload)
    (change,) = edit.documentChanges
    assert isinstance(change, TextDocumentEdit)
    assert type(change.edits[0]) is TextEdit
    assert codec.encode(edit) == payload


def test_document_changes_with_resource_operations() -> None:
    payload = {
        "documentChanges": [
            {"kind": "create", "uri": "file:///new.py", "options": {"overwrite": True}},
            {
                "textDocument": {"uri": "file:///new.py", "version": None},
                "edits": [{"range": RANGE, "newText": "x", "annotationId": "a1"}],
            },
            {"kind": "rename", "oldUri": "file:///new.py", "newUri": "file:///renamed.py"},
            {"kind": "delete", "uri": "file:///old.py"},
        ],
        "changeAnnotations": {"a1": {"label": "Create module", "needsConfirmation": True}},
    }
    edit = codec.decode(WorkspaceEdit, payload)
    create, text_edit, rename, delete = edit.documentChanges
    assert isinstance(create, CreateFile)
    assert create.options.overwrite is True
    assert isinstance(text_edit.edits[0], AnnotatedTextEdit)
    assert text_edit.textDocument.version is None
    assert rename.kind == "rename"
    assert delete.kind == "delete"
    assert codec.encode(edit) == payload


def test_unknown_resource_operation_kind_is_a_discriminator_mismatch() -> None:
    with pytest.raises(DecodeError) as excinfo:
        codec.decode(WorkspaceEdit, {"documentChanges": [{"kind": "copy", "uri": "file:///a"}]})
    kinds = {issue.kind for issue in excinfo.value.issues}
    assert ErrorKind.DISCRIMINATOR_MISMATCH in kinds


def test_optional_version_is_emitted_as_null() -> None:
    ident = OptionalVersionedTextDocumentIdentifier(uri=Uri("file:///a.py"))
    assert codec.encode(ident) == {"uri": "file:///a.py", "version": None}
    decoded = codec.decode(OptionalVersionedTextDocumentIdentifier, {"uri": "file:///a.py"})
    assert decoded == ident


@pytest.mark.parametrize(
    "kind, expected",
    [
        (WatchKind.CREATE, 1),
        (WatchKind.CREATE | WatchKind.CHANGE, 3),
        (WatchKind.CREATE | WatchKind.CHANGE | WatchKind.DELETE, 7),
        (WatchKind.default(), 7),
    ],
)
def test_watch_kind_encoding(kind: WatchKind, expected: int) -> None:
    assert codec.encode(kind, WatchKind) == expected
    assert codec.encode_json(kind, WatchKind) == str(expected)


def test_watch_kind_rejects_unknown_bits() -> None:
    with pytest.raises(DecodeError) as excinfo:
        codec.decode(WatchKind, 8)
    assert excinfo.value.kind is ErrorKind.INVALID_PRIMITIVE


def test_watch_kind_rejects_booleans() -> None:
    with pytest.raises(DecodeError):
        codec.decode(WatchKind, True)


def test_file_system_watcher_patterns() -> None:
    watcher = codec.decode(FileSystemWatcher, {"globPattern": "**/*.py"})
    assert watcher.globPattern == "**/*.py"
    assert watcher.kind is None

    payload = {
        "globPattern": {
            "baseUri": {"uri": "file:///ws", "name": "ws"},
            "pattern": "src/**",
        },
        "kind": 5,
    }
    watcher = codec.decode(FileSystemWatcher, payload)
    assert isinstance(watcher.globPattern, RelativePattern)
    assert isinstance(watcher.globPattern.baseUri, WorkspaceFolder)
    assert watcher.kind == WatchKind.CREATE | WatchKind.DELETE
    assert codec.encode(watcher) == payload


def test_relative_pattern_with_plain_base_uri() -> None:
    pattern = codec.decode(RelativePattern, {"baseUri": "file:///ws", "pattern": "*.md"})
    assert pattern.baseUri == Uri("file:///ws")


def test_resource_operation_kinds() -> None:
    kinds = [ResourceOperationKind.CREATE, ResourceOperationKind.RENAME, ResourceOperationKind.DELETE]
    assert codec.encode(kinds) == ["create", "rename", "delete"]


def test_position_order_and_hash() -> None:
    a = Position(line=0, character=5)
    b = Position(line=1, character=0)
    assert a < b
    assert max(b, a) == b
    assert sorted([b, a]) == [a, b]
    assert len({a, Position(line=0, character=5)}) == 1
    assert a.as_tuple() == (0, 5)


def test_position_rejects_negative_and_oversized_numbers() -> None:
    with pytest.raises(DecodeError) as excinfo:
        codec.decode(Position, {"line": -1, "character": 0})
    assert excinfo.value.kind is ErrorKind.INVALID_PRIMITIVE
    assert excinfo.value.path == "$.line"

    with pytest.raises(DecodeError):
        codec.decode(Position, {"line": 0, "character": 2**32})


def test_range_calculate_length() -> None:
    text = "abc\ndef\nghi"
    single = Range(start=Position(line=0, character=1), end=Position(line=0, character=3))
    multi = Range(start=Position(line=0, character=1), end=Position(line=2, character=1))
    assert single.calculate_length(text) == 2
    assert multi.calculate_length(text) == 2 + 3 + 1


def test_location_is_hashable() -> None:
    loc = codec.decode(Location, {"uri": "file:///a", "range": RANGE})
    assert loc in {loc}


@pytest.mark.parametrize(
    "payload, expected",
    [(1, 1), ("1", "1"), (-(2**31), -(2**31)), ("abc", "abc")],
)
def test_number_or_string_keeps_its_shape(payload, expected) -> None:
    params = codec.decode(CancelParams, {"id": payload})
    assert params.id == expected
    assert type(params.id) is type(expected)
    assert codec.encode(params) == {"id": payload}


def test_number_or_string_rejects_int32_overflow() -> None:
    with pytest.raises(DecodeError):
        codec.decode(CancelParams, {"id": 2**31})


def test_diagnostic_helpers() -> None:
    rng = Range(start=Position(line=0, character=0), end=Position(line=0, character=1))
    assert codec.encode(Diagnostic.new_simple(rng, "oops")) == {
        "range": {"start": {"line": 0, "character": 0}, "end": {"line": 0, "character": 1}},
        "message": "oops",
    }
    diagnostic = Diagnostic.new_with_code_number(rng, DiagnosticSeverity.WARNING, 42, "lint", "bad")
    encoded = codec.encode(diagnostic)
    assert encoded["severity"] == 2
    assert encoded["code"] == 42
    assert encoded["source"] == "lint"


def test_unknown_keys_are_ignored() -> None:
    plain = codec.decode(TextEdit, {"range": RANGE, "newText": "x"})
    extended = codec.decode(TextEdit, {"range": RANGE, "newText": "x", "futureField": [1, 2]})
    assert plain == extended


def test_null_optional_field_is_absent() -> None:
    command = codec.decode(Command, {"title": "t", "command": "c", "arguments": None})
    assert command.arguments is None
    assert codec.encode(command) == {"title": "t", "command": "c"}


def test_null_required_field_is_structural_error() -> None:
    with pytest.raises(DecodeError) as excinfo:
        codec.decode(TextEdit, {"range": RANGE, "newText": None})
    assert excinfo.value.kind is ErrorKind.STRUCTURAL
    assert excinfo.value.path == "$.newText"


def test_goto_definition_response_shapes() -> None:
    location = {"uri": "file:///a", "range": RANGE}
    link = {"targetUri": "file:///b", "targetRange": RANGE, "targetSelectionRange": RANGE}

    assert isinstance(codec.decode(GotoDefinitionResponse, location), Location)
    many = codec.decode(GotoDefinitionResponse, [location, location])
    assert all(isinstance(item, Location) for item in many)
    links = codec.decode(GotoDefinitionResponse, [link])
    assert isinstance(links[0], LocationLink)
    assert codec.encode(links, GotoDefinitionResponse) == [link]


def test_hover_contents_shapes() -> None:
    assert codec.decode(Hover, {"contents": "plain"}).contents == "plain"

    markup = codec.decode(Hover, {"contents": {"kind": "markdown", "value": "**x**"}}).contents
    assert isinstance(markup, MarkupContent)
    assert markup.kind is MarkupKind.MARKDOWN

    code = codec.decode(Hover, {"contents": {"language": "python", "value": "x = 1"}}).contents
    assert code == LanguageString.from_language_code("python", "x = 1")

    mixed = codec.decode(Hover, {"contents": ["text", {"language": "c", "value": "int x;"}]})
    assert mixed.contents[0] == "text"
    assert isinstance(mixed.contents[1], LanguageString)


def test_unknown_markup_kind_is_rejected() -> None:
    with pytest.raises(DecodeError) as excinfo:
        codec.decode(MarkupContent, {"kind": "html", "value": "<b>"})
    assert excinfo.value.kind is ErrorKind.DISCRIMINATOR_MISMATCH


def test_provider_capability_variants() -> None:
    caps = codec.decode(ServerCapabilities, {"colorProvider": True})
    assert caps.colorProvider is True

    caps = codec.decode(ServerCapabilities, {"colorProvider": {"workDoneProgress": True}})
    assert type(caps.colorProvider) is DocumentColorOptions

    payload = {"colorProvider": {"documentSelector": None, "id": "colors"}}
    caps = codec.decode(ServerCapabilities, payload)
    assert isinstance(caps.colorProvider, DocumentColorRegistrationOptions)
    assert caps.colorProvider.id == "colors"
    assert codec.encode(caps) == payload


def test_text_document_sync_capability() -> None:
    caps = codec.decode(ServerCapabilities, {"textDocumentSync": 2})
    assert caps.textDocumentSync is TextDocumentSyncKind.INCREMENTAL

    payload = {"textDocumentSync": {"openClose": True, "change": 1, "save": {"includeText": True}}}
    caps = codec.decode(ServerCapabilities, payload)
    assert isinstance(caps.textDocumentSync, TextDocumentSyncOptions)
    assert caps.textDocumentSync.change is TextDocumentSyncKind.FULL
    assert codec.encode(caps) == payload


def test_code_action_kind_in_text_edit_context() -> None:
    # Open-ended kinds compare equal to their string values.
    assert CodeActionKind("refactor.extract") == "refactor.extract"
    assert json.loads(codec.encode_json([CodeActionKind.QUICKFIX])) == ["quickfix"]


def test_incoming_call_uses_from_on_the_wire() -> None:
    range_ = {"start": {"line": 1, "character": 0}, "end": {"line": 1, "character": 5}}
    payload = {
        "from": {
            "name": "main",
            "kind": 12,
            "uri": "file:///src/main.rs",
            "range": range_,
            "selectionRange": range_,
        },
        "fromRanges": [range_],
    }
    call = codec.decode(CallHierarchyIncomingCall, payload)
    assert call.from_.name == "main"
    assert codec.encode(call) == payload
