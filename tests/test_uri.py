import pytest

from lstypes import DecodeError, ErrorKind, InvalidUriError, Location, Uri, codec


def test_keeps_exact_string():
    for text in ["file:///C%3A/src/main.rs", "FILE:///a/", "untitled:Untitled-1", "file://test"]:
        uri = Uri(text)
        assert str(uri) == text
        assert uri.as_str() == text


def test_components():
    uri = Uri("https://example.com:8080/a/b.rs?x=1#L10")
    assert uri.scheme == "https"
    assert uri.authority == "example.com:8080"
    assert uri.path == "/a/b.rs"
    assert uri.query == "x=1"
    assert uri.fragment == "L10"
    assert uri.is_absolute


def test_relative_reference():
    uri = Uri("src/main.rs")
    assert uri.scheme is None
    assert uri.authority is None
    assert not uri.is_absolute


def test_no_normalization():
    assert Uri("file:///a") != Uri("file:///a/")
    assert Uri("file:///a%2Fb") != Uri("file:///a/b")
    assert Uri("FILE:///a") != Uri("file:///a")


def test_ordering_and_hashing():
    uris = [Uri("file:///b"), Uri("file:///a"), Uri("file:///a")]
    assert sorted(uris) == [Uri("file:///a"), Uri("file:///a"), Uri("file:///b")]
    assert len(set(uris)) == 2
    assert Uri("file:///a") != "file:///a"


@pytest.mark.parametrize("text", ["file:///a b", "1abc:foo", "file:///a%zz", "http://exa mple.com/"])
def test_invalid(text):
    with pytest.raises(InvalidUriError) as info:
        Uri(text)
    assert info.value.text == text


def test_with_fragment():
    uri = Uri("file:///doc.md")
    assert uri.with_fragment("sec 1") == Uri("file:///doc.md#sec%201")
    assert uri.with_fragment("L10").with_fragment("L20") == Uri("file:///doc.md#L20")
    assert Uri("file:///doc.md#L10").with_fragment(None) == uri


def test_decodes_inside_records():
    range_ = {"start": {"line": 0, "character": 0}, "end": {"line": 0, "character": 1}}
    location = codec.decode(Location, {"uri": "file:///a.rs", "range": range_})
    assert location.uri == Uri("file:///a.rs")
    assert codec.encode(location)["uri"] == "file:///a.rs"

    with pytest.raises(DecodeError) as info:
        codec.decode(Location, {"uri": "file:///a b", "range": range_})
    assert info.value.kind is ErrorKind.INVALID_PRIMITIVE
    assert info.value.path == "$.uri"


def test_encodes_untyped():
    assert codec.encode(Uri("file:///a.rs")) == "file:///a.rs"
    assert codec.encode_json([Uri("file:///a.rs")]) == '["file:///a.rs"]'
