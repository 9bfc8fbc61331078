import functools
import re
import typing as t
from urllib.parse import quote

from pydantic_core import PydanticCustomError, core_schema

from .base import json_serializer
from .exceptions import InvalidUriError

# RFC 3986, appendix B.
_URI_REFERENCE = re.compile(r"^(?:([^:/?#]+):)?(?://([^/?#]*))?([^?#]*)(?:\?([^#]*))?(?:#(.*))?$", re.DOTALL)

_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
_PCT = r"%[0-9A-Fa-f]{2}"
_UNRESERVED = r"A-Za-z0-9\-._~"
_SUB_DELIMS = r"!$&'()*+,;="
_AUTHORITY = re.compile(rf"^(?:[{_UNRESERVED}{_SUB_DELIMS}:@\[\]]|{_PCT})*$")
_PATH = re.compile(rf"^(?:[{_UNRESERVED}{_SUB_DELIMS}:@/]|{_PCT})*$")
_QUERY_OR_FRAGMENT = re.compile(rf"^(?:[{_UNRESERVED}{_SUB_DELIMS}:@/?]|{_PCT})*$")

_FRAGMENT_SAFE = "-._~" + _SUB_DELIMS + ":@/?"


@functools.total_ordering
class Uri:
    """An absolute URI or relative reference, kept exactly as it was written.

    The string is checked against the RFC 3986 grammar on construction but is
    never normalized: scheme casing, percent-encoding and trailing slashes are
    preserved, and equality, hashing and ordering all use the exact string.

    Args:
        text (str): The URI string.

    Raises:
        InvalidUriError: If `text` is not a valid URI reference.
    """

    __slots__ = ("_text", "_scheme", "_authority", "_path", "_query", "_fragment")

    def __init__(self, text: str) -> None:
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")
        match = _URI_REFERENCE.match(text)
        if match is None:
            raise InvalidUriError(text, "unparsable URI reference")
        scheme, authority, path, query, fragment = match.groups()

        if scheme is not None and not _SCHEME.match(scheme):
            raise InvalidUriError(text, f"invalid scheme {scheme!r}")
        if authority is not None and not _AUTHORITY.match(authority):
            raise InvalidUriError(text, f"invalid authority {authority!r}")
        if not _PATH.match(path):
            raise InvalidUriError(text, f"invalid path {path!r}")
        if query is not None and not _QUERY_OR_FRAGMENT.match(query):
            raise InvalidUriError(text, f"invalid query {query!r}")
        if fragment is not None and not _QUERY_OR_FRAGMENT.match(fragment):
            raise InvalidUriError(text, f"invalid fragment {fragment!r}")

        self._text = text
        self._scheme = scheme
        self._authority = authority
        self._path = path
        self._query = query
        self._fragment = fragment

    @classmethod
    def parse(cls, text: str) -> "Uri":
        """Parse `text`, same as calling the constructor."""
        return cls(text)

    @property
    def scheme(self) -> t.Optional[str]:
        return self._scheme

    @property
    def authority(self) -> t.Optional[str]:
        return self._authority

    @property
    def path(self) -> str:
        return self._path

    @property
    def query(self) -> t.Optional[str]:
        return self._query

    @property
    def fragment(self) -> t.Optional[str]:
        return self._fragment

    @property
    def is_absolute(self) -> bool:
        """Whether the URI has a scheme, as opposed to being a relative reference."""
        return self._scheme is not None

    def as_str(self) -> str:
        return self._text

    def with_fragment(self, fragment: t.Optional[str]) -> "Uri":
        """Return a copy of this URI with its fragment replaced.

        Characters that may not appear in a fragment are percent-encoded.
        Passing ``None`` removes the fragment.

        Args:
            fragment (Optional[str]): The new, unencoded fragment.

        Returns:
            Uri: The re-rendered URI.
        """
        base = self._text
        if self._fragment is not None:
            base = base[: -(len(self._fragment) + 1)]
        if fragment is None:
            return Uri(base)
        return Uri(f"{base}#{quote(fragment, safe=_FRAGMENT_SAFE)}")

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"Uri({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Uri):
            return self._text == other._text
        return NotImplemented

    def __lt__(self, other: "Uri") -> bool:
        if isinstance(other, Uri):
            return self._text < other._text
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._text)

    @classmethod
    def _validate(cls, value: t.Any) -> "Uri":
        if isinstance(value, Uri):
            return value
        if not isinstance(value, str):
            raise PydanticCustomError("string_type", "Input should be a valid URI string")
        try:
            return cls(value)
        except InvalidUriError as e:
            raise PydanticCustomError(
                "uri_parsing", "Input should be a valid URI: {reason}", {"reason": e.reason}
            ) from e

    @classmethod
    def __get_pydantic_core_schema__(cls, source: t.Any, handler: t.Any) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=json_serializer(cls, str),
        )
