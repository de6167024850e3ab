"""
Mapping errors raised when a wire payload cannot be decoded into a model.

Every failure is attributable to one field (by its wire key path inside the
record being decoded) or to one element of an envelope sequence. All classes
derive from ValueError so callers that only care about "bad payload" can
catch that.
"""

from typing import Any


class MappingError(ValueError):
    """Base class for all wire-mapping failures."""


class MissingField(MappingError):
    """A required field is absent from the wire object."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"missing required field '{field}'")


class TypeMismatch(MappingError):
    """A field is present but its wire value has the wrong shape."""

    def __init__(self, field: str, expected: str, actual: str):
        self.field = field
        self.expected = expected
        self.actual = actual
        super().__init__(f"field '{field}': expected {expected}, got {actual}")


class UnknownEnumToken(MappingError):
    """A wire token matches none of the enum's declared variants."""

    def __init__(self, type_name: str, token: Any, field: str = ""):
        self.type_name = type_name
        self.token = token
        self.field = field
        where = f" in field '{field}'" if field else ""
        super().__init__(f"unknown {type_name} token {token!r}{where}")


class MalformedEnvelope(MappingError):
    """
    An element of a sequence failed to decode.

    Attributes:
        index: Zero-based position of the failing element
        inner: The element's own MappingError (may itself be a MalformedEnvelope
            when sequences are nested, e.g. a wallet's coin list)
        path: Wire key path of the sequence inside the outer record ("list",
            "result.list", ...)
    """

    def __init__(self, index: int, inner: MappingError, path: str = ""):
        self.index = index
        self.inner = inner
        self.path = path
        where = f"{path}[{index}]" if path else f"[{index}]"
        super().__init__(f"element {where} is malformed: {inner}")
