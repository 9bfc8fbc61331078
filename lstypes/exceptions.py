import enum
import typing as t


class ErrorKind(enum.Enum):
    """Classification of a decode failure.

    Attributes:
        STRUCTURAL: The JSON shape does not match the record (e.g. array where an object was expected).
        MISSING_FIELD: A required field is absent.
        INVALID_PRIMITIVE: A number is out of range, a URI is unparsable, flag bits are outside the mask, etc.
        DISCRIMINATOR_MISMATCH: A `kind`, `type` or `label` tag names no known variant.
    """

    STRUCTURAL = "structural"
    MISSING_FIELD = "missingField"
    INVALID_PRIMITIVE = "invalidPrimitive"
    DISCRIMINATOR_MISMATCH = "discriminatorMismatch"


class DecodeIssue(t.NamedTuple):
    """A single problem found while decoding.

    Args:
        kind (ErrorKind): What went wrong.
        path (str): The JSON path of the offending value, e.g. ``$.capabilities.textDocument``.
        message (str): A human-readable description.
    """

    kind: ErrorKind
    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message} ({self.kind.value})"


class DecodeError(ValueError):
    """Raised when a JSON value does not decode into the requested type.

    Args:
        target (str): Name of the type that was being decoded.
        issues (Sequence[DecodeIssue]): Every problem found, never empty.
    """

    def __init__(self, target: str, issues: t.Sequence[DecodeIssue]) -> None:
        self.target = target
        self.issues = tuple(issues)
        lines = "\n".join(f"  {issue}" for issue in self.issues)
        super().__init__(f"cannot decode {target}:\n{lines}")

    @property
    def kind(self) -> ErrorKind:
        """The kind of the first issue."""
        return self.issues[0].kind

    @property
    def path(self) -> str:
        """The path of the first issue."""
        return self.issues[0].path


class InvalidUriError(ValueError):
    """Raised when a string is not a valid RFC 3986 URI reference."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"invalid URI {text!r}: {reason}")


class UnknownMethodError(KeyError):
    """Raised when a registry has no entry for a method name."""

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(method)

    def __str__(self) -> str:
        return f"unknown method: {self.method!r}"
