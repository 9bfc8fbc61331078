"""Encode and decode protocol values.

The codec is the single place where the wire representation lives::

    params = decode(CodeActionParams, {"textDocument": {...}, ...})
    payload = encode([Command(title="t", command="c")])

`decode` and `decode_json` raise `DecodeError` with the JSON path of every
offending value. `encode` and `encode_json` never raise for values built
through the public types.
"""

import functools
import typing as t

from pydantic import TypeAdapter, ValidationError
from pydantic_core import from_json, to_json, to_jsonable_python

from .exceptions import DecodeError, DecodeIssue, ErrorKind
from .uri import Uri

JSONValue = t.Any

_STRUCTURAL = frozenset({"json_invalid", "none_required", "too_short", "too_long"})
_DISCRIMINATOR = frozenset({"union_tag_invalid", "union_tag_not_found", "literal_error", "enum"})
_UNKNOWN = object()
_JSON_TYPES = (dict, list, str, int, float, type(None))


@functools.lru_cache(maxsize=None)
def _cached_adapter(tp: t.Any) -> TypeAdapter:
    return TypeAdapter(tp)


# Annotated aliases carrying a FieldInfo are not hashable; key them by identity.
# The type object is kept alongside so its id cannot be reused.
_UNHASHABLE: t.Dict[int, t.Tuple[t.Any, TypeAdapter]] = {}


def adapter(tp: t.Any) -> TypeAdapter:
    """Return the cached pydantic `TypeAdapter` for `tp`."""
    try:
        return _cached_adapter(tp)
    except TypeError:
        pass
    entry = _UNHASHABLE.get(id(tp))
    if entry is None or entry[0] is not tp:
        entry = _UNHASHABLE[id(tp)] = (tp, TypeAdapter(tp))
    return entry[1]


def _type_name(tp: t.Any) -> str:
    return getattr(tp, "__name__", None) or repr(tp)


def format_path(loc: t.Sequence[t.Union[str, int]], data: t.Any = _UNKNOWN) -> str:
    """Render a pydantic error location as a JSON path, e.g. ``$.edits[0].range``.

    Args:
        loc: The ``loc`` of a pydantic error.
        data: The decoded input, if available. Location parts that do not
            address a value inside it (union variant names and tags) are
            left out of the path.
    """
    path = "$"
    last = len(loc) - 1
    for i, part in enumerate(loc):
        if data is not _UNKNOWN:
            if isinstance(data, dict) and isinstance(part, str):
                if part not in data and i != last:
                    continue
                data = data.get(part, _UNKNOWN)
            elif isinstance(data, list) and isinstance(part, int) and 0 <= part < len(data):
                data = data[part]
            elif isinstance(part, str) and isinstance(data, _JSON_TYPES):
                continue
            else:
                data = _UNKNOWN
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}"
    return path


def _error_kind(error_type: str) -> ErrorKind:
    if error_type == "missing":
        return ErrorKind.MISSING_FIELD
    if error_type in _DISCRIMINATOR:
        return ErrorKind.DISCRIMINATOR_MISMATCH
    if error_type in _STRUCTURAL or error_type.endswith("_type"):
        return ErrorKind.STRUCTURAL
    return ErrorKind.INVALID_PRIMITIVE


def _translate(tp: t.Any, error: ValidationError, data: t.Any = _UNKNOWN) -> DecodeError:
    issues = [
        DecodeIssue(_error_kind(e["type"]), format_path(e["loc"], data), e["msg"])
        for e in error.errors(include_url=False)
    ]
    return DecodeError(_type_name(tp), issues)


def decode(tp: t.Any, data: JSONValue) -> t.Any:
    """Decode an already parsed JSON value as `tp`.

    Args:
        tp: A record class or any type expression built from records,
            e.g. ``t.Optional[t.List[CodeActionOrCommand]]``.
        data: The value produced by `json.loads`.

    Returns:
        The decoded value.

    Raises:
        DecodeError: If `data` does not match `tp`.
    """
    try:
        return adapter(tp).validate_python(data)
    except ValidationError as e:
        raise _translate(tp, e, data) from e


def _parsed(text: t.Union[str, bytes]) -> t.Any:
    try:
        return from_json(text)
    except ValueError:
        return _UNKNOWN


def decode_json(tp: t.Any, text: t.Union[str, bytes]) -> t.Any:
    """Decode JSON text as `tp`. See `decode`."""
    try:
        return adapter(tp).validate_json(text)
    except ValidationError as e:
        raise _translate(tp, e, _parsed(text)) from e


def _fallback(value: t.Any) -> t.Any:
    if isinstance(value, Uri):
        return value.as_str()
    raise TypeError(f"cannot encode {type(value).__name__}")


def encode(value: t.Any, tp: t.Any = None) -> JSONValue:
    """Encode `value` into plain JSON-compatible Python data.

    Args:
        value: The value to encode.
        tp: Optionally the declared type of `value`. Needed only when a
            union must be encoded through its declared shape; by default
            the value's own type decides.

    Returns:
        Dicts, lists, strings, numbers, booleans and ``None`` only.
    """
    if tp is not None:
        return adapter(tp).dump_python(value, mode="json", by_alias=True)
    return to_jsonable_python(value, by_alias=True, fallback=_fallback)


def encode_json(value: t.Any, tp: t.Any = None) -> str:
    """Encode `value` as compact JSON text. See `encode`."""
    if tp is not None:
        return adapter(tp).dump_json(value, by_alias=True).decode("utf-8")
    return to_json(value, by_alias=True, fallback=_fallback).decode("utf-8")
