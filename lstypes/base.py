"""Building blocks shared by every protocol record.

`LspModel` is the base of all records. Attribute names are the camelCase wire
names, optional fields left at ``None`` are omitted when encoding, and unknown
keys are ignored when decoding. Fields that must be emitted as ``null`` are
declared with the `NULLABLE` marker::

    class InitializeParams(LspModel):
        processId: t.Annotated[t.Optional[UInt32], NULLABLE] = None

Enumerations come in two shapes: `LspIntEnum` for integer constants and
`LspStrEnum` for open-ended string kinds. Both keep values they do not know
about, so a newer peer never breaks decoding.
"""

import enum
import functools
import typing as t

from pydantic import BaseModel, ConfigDict, Field, SerializerFunctionWrapHandler, Strict, StrictStr
from pydantic import model_serializer
from pydantic_core import PydanticCustomError, PydanticSerializationUnexpectedValue, core_schema

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
UINT32_MAX = 2**32 - 1

# Numbers are never coerced from other JSON types.
Int32 = t.Annotated[int, Strict(), Field(ge=INT32_MIN, le=INT32_MAX)]
UInt32 = t.Annotated[int, Strict(), Field(ge=0, le=UINT32_MAX)]
Percentage = t.Annotated[int, Strict(), Field(ge=0, le=100)]

# The LSP any type, object and array.
LSPAny = t.Any
LSPObject = t.Dict[str, t.Any]
LSPArray = t.List[t.Any]

# A number of messages include an id/token that is either a number or a string.
NumberOrString = t.Union[Int32, StrictStr]
ProgressToken = NumberOrString


class _Nullable:
    def __repr__(self) -> str:
        return "NULLABLE"


NULLABLE = _Nullable()


class _OneOf:
    """Untagged union whose variants are tried in declaration order.

    ``OneOf[StrictBool, HoverOptions]`` is shorthand for
    ``Annotated[Union[StrictBool, HoverOptions], Field(union_mode="left_to_right")]``.
    """

    def __getitem__(self, variants: t.Any) -> t.Any:
        if not isinstance(variants, tuple):
            variants = (variants,)
        return t.Annotated[t.Union[variants], Field(union_mode="left_to_right")]


OneOf = _OneOf()


@functools.lru_cache(maxsize=None)
def _nullable_keys(cls: t.Type["LspModel"]) -> t.FrozenSet[str]:
    keys = set()
    for name, field in cls.model_fields.items():
        if any(item is NULLABLE for item in field.metadata):
            keys.add(name)
            if field.alias:
                keys.add(field.alias)
    return frozenset(keys)


class LspModel(BaseModel):
    """Base class for every LSP and LSIF record."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @model_serializer(mode="wrap")
    def _omit_absent(self, handler: SerializerFunctionWrapHandler) -> t.Dict[str, t.Any]:
        data = handler(self)
        keep = _nullable_keys(type(self))
        return {k: v for k, v in data.items() if v is not None or k in keep}

    @classmethod
    def from_json(cls, data: t.Union[str, bytes]) -> t.Any:
        """Decode a JSON document into an instance of this record.

        Raises:
            DecodeError: If the document does not match the record.
        """
        from .codec import decode_json

        return decode_json(cls, data)

    @classmethod
    def from_dict(cls, data: t.Any) -> t.Any:
        """Decode an already parsed JSON value into an instance of this record."""
        from .codec import decode

        return decode(cls, data)

    def to_dict(self) -> t.Dict[str, t.Any]:
        """Return the wire representation of this record as plain Python data."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> str:
        """Return the compact JSON encoding of this record."""
        return self.model_dump_json(by_alias=True)


def json_serializer(
    expected: t.Any, convert: t.Callable[[t.Any], t.Any]
) -> core_schema.SerSchema:
    """JSON serialization schema applying `convert` to instances of `expected`.

    Anything else raises `PydanticSerializationUnexpectedValue`, which lets a
    union try its next member.
    """

    def serialize(value: t.Any) -> t.Any:
        if isinstance(value, bool) or not isinstance(value, expected):
            raise PydanticSerializationUnexpectedValue(
                f"Expected {getattr(expected, '__name__', expected)}, got {type(value).__name__}"
            )
        return convert(value)

    return core_schema.plain_serializer_function_ser_schema(serialize, when_used="json")


def _pascal_case(name: str) -> str:
    return "".join(word[:1] + word[1:].lower() for word in name.split("_"))


class LspIntEnum(enum.IntEnum):
    """Integer constants with room for values this library does not know.

    Attributes:
        Subclasses declare their constants as ``UPPER_SNAKE_CASE = n``.
    """

    @classmethod
    def _missing_(cls, value: object) -> t.Any:
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        if not INT32_MIN <= value <= INT32_MAX:
            return None
        # Pseudo-members are not cached.
        member = int.__new__(cls, value)
        member._name_ = None
        member._value_ = value
        return member

    def __repr__(self) -> str:
        if self._name_ is None:
            return f"{type(self).__name__}({self._value_})"
        return _pascal_case(self._name_)

    def __str__(self) -> str:
        return str(self._value_)

    def __hash__(self) -> int:
        return hash(self._value_)

    @property
    def is_known(self) -> bool:
        """Whether the value is one of the declared constants."""
        return self._name_ is not None

    @classmethod
    def from_pascal_case(cls, name: str) -> t.Any:
        """Parse the PascalCase rendering produced by `repr`.

        Raises:
            ValueError: If no constant renders as `name`.
        """
        for member in cls:
            if _pascal_case(member.name) == name:
                return member
        raise ValueError(f"unknown {cls.__name__} variant: {name!r}")

    @classmethod
    def _validate(cls, value: t.Any) -> t.Any:
        if isinstance(value, cls):
            return value
        if isinstance(value, bool) or not isinstance(value, int):
            raise PydanticCustomError("int_type", "Input should be a valid integer")
        if not INT32_MIN <= value <= INT32_MAX:
            raise PydanticCustomError(
                "int_range",
                "Input should fit in a signed 32-bit integer, got {value}",
                {"value": value},
            )
        return cls(value)

    @classmethod
    def __get_pydantic_core_schema__(cls, source: t.Any, handler: t.Any) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=json_serializer(int, int),
        )


class LspStrEnum(str, enum.Enum):
    """Open-ended string kind: well-known constants, any other string allowed."""

    @classmethod
    def _missing_(cls, value: object) -> t.Any:
        if not isinstance(value, str):
            return None
        member = str.__new__(cls, value)
        member._name_ = None
        member._value_ = value
        return member

    def __repr__(self) -> str:
        if self._name_ is None:
            return f"{type(self).__name__}({self._value_!r})"
        return f"{type(self).__name__}.{self._name_}"

    def __str__(self) -> str:
        return self._value_

    def __hash__(self) -> int:
        return hash(self._value_)

    @property
    def is_known(self) -> bool:
        """Whether the value is one of the declared constants."""
        return self._name_ is not None

    @classmethod
    def _validate(cls, value: t.Any) -> t.Any:
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise PydanticCustomError("string_type", "Input should be a valid string")
        return cls(value)

    @classmethod
    def __get_pydantic_core_schema__(cls, source: t.Any, handler: t.Any) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=json_serializer(str, str),
        )
