import pytest

from lstypes import (
    CodeActionKind,
    DecodeError,
    DiagnosticSeverity,
    ErrorCode,
    ErrorKind,
    MarkupKind,
    MessageType,
    PositionEncodingKind,
    SetTraceParams,
    SymbolKind,
    TraceValue,
    codec,
    is_lsp_reserved,
)
from lstypes.error_codes import LSP_RESERVED_ERROR_RANGE_END


def test_known_int_constant_renders_pascal_case():
    assert repr(SymbolKind.ENUM_MEMBER) == "EnumMember"
    assert repr(SymbolKind.TYPE_PARAMETER) == "TypeParameter"
    assert repr(DiagnosticSeverity.ERROR) == "Error"
    assert SymbolKind.ENUM_MEMBER.is_known


def test_unknown_int_constant_is_kept():
    severity = DiagnosticSeverity(99)
    assert int(severity) == 99
    assert not severity.is_known
    assert repr(severity) == "DiagnosticSeverity(99)"
    assert str(severity) == "99"
    assert DiagnosticSeverity(99) == severity
    assert hash(DiagnosticSeverity(99)) == hash(severity)


def test_known_int_constant_str_is_its_value():
    assert str(SymbolKind.FILE) == "1"


def test_unknown_values_are_not_cached():
    int_members = dict(SymbolKind._value2member_map_)
    str_members = dict(CodeActionKind._value2member_map_)
    for n in range(1000, 1500):
        codec.decode(SymbolKind, n)
        codec.decode(CodeActionKind, f"refactor.custom.{n}")
    assert SymbolKind._value2member_map_ == int_members
    assert CodeActionKind._value2member_map_ == str_members


def test_from_pascal_case():
    assert SymbolKind.from_pascal_case("EnumMember") is SymbolKind.ENUM_MEMBER
    assert MessageType.from_pascal_case("Warning") is MessageType.WARNING
    with pytest.raises(ValueError):
        SymbolKind.from_pascal_case("ENUM_MEMBER")
    with pytest.raises(ValueError):
        SymbolKind.from_pascal_case("Nope")


def test_unknown_int_constant_round_trips():
    kind = codec.decode(SymbolKind, 4242)
    assert int(kind) == 4242
    assert codec.encode(kind, SymbolKind) == 4242


def test_int_constant_rejects_bool_and_strings():
    with pytest.raises(DecodeError) as info:
        codec.decode(SymbolKind, True)
    assert info.value.kind is ErrorKind.STRUCTURAL

    with pytest.raises(DecodeError):
        codec.decode(SymbolKind, "1")


def test_int_constant_out_of_range():
    with pytest.raises(DecodeError) as info:
        codec.decode(DiagnosticSeverity, 2**31)
    assert info.value.kind is ErrorKind.INVALID_PRIMITIVE


def test_open_string_kind_preserves_unknown_values():
    kind = codec.decode(CodeActionKind, "refactor.extract.function")
    assert kind == "refactor.extract.function"
    assert not kind.is_known
    assert repr(kind) == "CodeActionKind('refactor.extract.function')"
    assert codec.encode(kind, CodeActionKind) == "refactor.extract.function"

    assert codec.decode(CodeActionKind, "quickfix") is CodeActionKind.QUICKFIX
    assert CodeActionKind.QUICKFIX.is_known
    assert str(CodeActionKind.SOURCE_FIX_ALL) == "source.fixAll"


def test_position_encoding_kind_is_open():
    assert codec.decode(PositionEncodingKind, "utf-16") is PositionEncodingKind.UTF16
    assert codec.decode(PositionEncodingKind, "latin-1") == "latin-1"


def test_closed_string_enums_reject_unknown_values():
    assert codec.decode(MarkupKind, "markdown") is MarkupKind.MARKDOWN
    with pytest.raises(DecodeError) as info:
        codec.decode(MarkupKind, "rst")
    assert info.value.kind is ErrorKind.DISCRIMINATOR_MISMATCH


def test_trace_value():
    params = codec.decode(SetTraceParams, {"value": "verbose"})
    assert params.value is TraceValue.VERBOSE
    assert codec.encode(params) == {"value": "verbose"}

    with pytest.raises(DecodeError):
        codec.decode(SetTraceParams, {"value": "loud"})


def test_error_codes():
    assert ErrorCode.SERVER_NOT_INITIALIZED == -32002
    assert ErrorCode.UNKNOWN_ERROR_CODE == -32001
    assert ErrorCode.LSP_RESERVED_ERROR_RANGE_START == -32899
    assert ErrorCode.REQUEST_FAILED == -32803
    assert ErrorCode.SERVER_CANCELLED == -32802
    assert ErrorCode.CONTENT_MODIFIED == -32801
    assert ErrorCode.REQUEST_CANCELLED == -32800
    assert LSP_RESERVED_ERROR_RANGE_END == -32800


def test_lsp_reserved_range():
    assert is_lsp_reserved(ErrorCode.REQUEST_FAILED)
    assert is_lsp_reserved(-32899)
    assert is_lsp_reserved(-32800)
    assert not is_lsp_reserved(ErrorCode.SERVER_NOT_INITIALIZED)
    assert not is_lsp_reserved(-32700)
