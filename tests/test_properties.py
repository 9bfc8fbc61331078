"""Property tests for the codec.

These check the guarantees that hold for every input rather than for a few
hand-picked payloads: lossless re-encoding, tolerance of unknown keys, and
the value ranges accepted by numbers, flags and open enumerations.
"""

import pytest
import hypothesis.strategies as st
from hypothesis import given, settings

from lstypes import (
    CancelParams,
    CodeActionKind,
    DecodeError,
    DiagnosticSeverity,
    ErrorKind,
    LocationLink,
    Position,
    Range,
    SymbolKind,
    Uri,
    WatchKind,
    codec,
)
from lstypes.base import INT32_MAX, INT32_MIN, UINT32_MAX

# =============================================================================
# Strategy Definitions
# =============================================================================

uint32 = st.integers(min_value=0, max_value=UINT32_MAX)
int32 = st.integers(min_value=INT32_MIN, max_value=INT32_MAX)
path_segment = st.text(alphabet="abcdefghijklmnopqrstuvwxyz0123456789-._~", min_size=1, max_size=12)


@st.composite
def position_payload(draw):
    """Generate a wire-format position."""
    return {"line": draw(uint32), "character": draw(uint32)}


@st.composite
def range_payload(draw):
    """Generate a wire-format range."""
    return {"start": draw(position_payload()), "end": draw(position_payload())}


@st.composite
def file_uri(draw):
    """Generate a file URI built from unreserved path segments."""
    segments = draw(st.lists(path_segment, min_size=1, max_size=5))
    return "file:///" + "/".join(segments)


@st.composite
def location_link_payload(draw):
    """Generate a location link, with or without its optional origin range."""
    payload = {
        "targetUri": draw(file_uri()),
        "targetRange": draw(range_payload()),
        "targetSelectionRange": draw(range_payload()),
    }
    if draw(st.booleans()):
        payload["originSelectionRange"] = draw(range_payload())
    return payload


extra_keys = st.dictionaries(
    st.text(min_size=1, max_size=10).filter(lambda k: k not in ("line", "character")),
    st.one_of(st.none(), st.booleans(), st.integers(), st.text(max_size=10)),
    max_size=4,
)


# =============================================================================
# Round trips
# =============================================================================


@given(range_payload())
def test_range_round_trip(payload):
    value = codec.decode(Range, payload)
    assert codec.encode(value) == payload
    assert codec.decode(Range, codec.encode(value)) == value


@given(location_link_payload())
def test_optional_fields_absent_exactly_when_unset(payload):
    link = codec.decode(LocationLink, payload)
    assert (link.originSelectionRange is None) == ("originSelectionRange" not in payload)
    assert codec.encode(link) == payload


@given(position_payload(), extra_keys)
def test_unknown_keys_are_ignored(payload, extra):
    noisy = dict(extra, **payload)
    assert codec.decode(Position, noisy) == codec.decode(Position, payload)


@given(st.one_of(int32, st.text(max_size=20)))
def test_number_or_string_keeps_its_shape(request_id):
    params = codec.decode(CancelParams, {"id": request_id})
    assert type(params.id) is type(request_id)
    assert codec.encode(params) == {"id": request_id}


@given(file_uri())
def test_uri_text_is_preserved(text):
    uri = Uri(text)
    assert str(uri) == text
    assert codec.encode(codec.decode(Uri, text), Uri) == text


# =============================================================================
# Numbers, flags and enumerations
# =============================================================================


@given(st.integers(min_value=0, max_value=255))
def test_watch_kind_accepts_only_known_bits(bits):
    if bits & ~0b111:
        with pytest.raises(DecodeError) as info:
            codec.decode(WatchKind, bits)
        assert info.value.kind is ErrorKind.INVALID_PRIMITIVE
    else:
        assert codec.encode(codec.decode(WatchKind, bits), WatchKind) == bits


@given(st.one_of(st.integers(max_value=-1), st.integers(min_value=UINT32_MAX + 1)))
def test_positions_reject_out_of_range_numbers(number):
    with pytest.raises(DecodeError) as info:
        codec.decode(Position, {"line": number, "character": 0})
    assert info.value.kind is ErrorKind.INVALID_PRIMITIVE
    assert info.value.path == "$.line"


@settings(max_examples=200)
@given(int32)
def test_int_enums_keep_any_int32(number):
    for tp in (SymbolKind, DiagnosticSeverity):
        value = codec.decode(tp, number)
        assert int(value) == number
        assert codec.encode(value, tp) == number


@given(st.text(max_size=40))
def test_open_string_kinds_keep_any_string(text):
    kind = codec.decode(CodeActionKind, text)
    assert kind == text
    assert codec.encode(kind, CodeActionKind) == text
