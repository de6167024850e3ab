"""
Base model and the decode/encode entry points of the wire layer.

Every exchange entity subclasses WireModel. Field names are snake_case in
Python and camelCase on the wire (see naming.to_camel); irregular keys are
declared with wire_field(alias=...). Models are frozen and ignore unknown
wire keys, so a new field added by the exchange never breaks decoding.

    order = decode(BatchedOrder, payload)     # wire tree -> model
    payload = encode(order)                   # model -> wire tree

decode() raises MappingError subclasses (errors.py) instead of pydantic's
ValidationError so callers see one stable error taxonomy. Validation is
strict: a value of the wrong JSON shape is a TypeMismatch, never coerced,
and decode() only reads wire keys (Python attribute names are for code).
"""

import json
from decimal import Decimal
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, Tag, ValidationError, model_serializer

from ..utils.helpers import json_kind
from .errors import (
    MalformedEnvelope,
    MappingError,
    MissingField,
    TypeMismatch,
    UnknownEnumToken,
)
from .naming import to_camel

M = TypeVar("M", bound=BaseModel)

# json_schema_extra key marking a field that is left out of encode() when None
OMIT_IF_NONE = "omit_if_none"

# discriminated-union tags; pydantic puts them in error locations
_UNION_TAGS: set[str] = set()

# pydantic error type -> semantic kind the field expected
_EXPECTED_KINDS = {
    "string_type": "string",
    "string_unicode": "string",
    "int_type": "integer",
    "int_parsing": "integer",
    "int_from_float": "integer",
    "decimal_type": "decimal",
    "Decimal": "decimal",
    "decimal_parsing": "decimal",
    "decimal_max_digits": "decimal",
    "decimal_max_places": "decimal",
    "decimal_whole_digits": "decimal",
    "finite_number": "decimal",
    "bool_type": "boolean",
    "bool_parsing": "boolean",
    "list_type": "sequence",
    "tuple_type": "sequence",
    "dict_type": "record",
    "model_type": "record",
    "model_attributes_type": "record",
    "enum_token_type": "enum",
    "union_tag_invalid": "record",
    "union_tag_not_found": "record",
}


class WireModel(BaseModel):
    """Immutable record mirroring one exchange JSON object."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        strict=True,
        frozen=True,
        extra="ignore",
    )

    @model_serializer(mode="wrap")
    def _omit_unset_optionals(self, handler, info):
        data = handler(self)
        if not isinstance(data, dict):
            return data
        for name, field in type(self).model_fields.items():
            extra = field.json_schema_extra
            if not (isinstance(extra, dict) and extra.get(OMIT_IF_NONE)):
                continue
            if getattr(self, name) is None:
                key = field.alias if (info.by_alias and field.alias) else name
                data.pop(key, None)
        return data

    def to_wire(self) -> dict:
        return encode(self)


def wire_field(default: Any = ..., *, alias: str | None = None, **kwargs: Any) -> Any:
    """
    Declare a field whose wire token does not follow the camelCase rule.

    Args:
        default: Default value when the key is absent (omit for required)
        alias: Exact wire key, e.g. "bid1Price" or "accountIMRate"
        default_factory: Called for the default instead (mutually exclusive with default)
    """
    if "default_factory" in kwargs:
        return Field(alias=alias, **kwargs)
    return Field(default, alias=alias, **kwargs)


def optional_on_encode(*, alias: str | None = None) -> Any:
    """A field defaulting to None that encode() leaves out while it is None."""
    return Field(None, alias=alias, json_schema_extra={OMIT_IF_NONE: True})


def union_tag(name: str) -> Tag:
    """Tag one member of a discriminated union; the tag is kept out of error paths."""
    _UNION_TAGS.add(name)
    return Tag(name)


def decode(model: type[M], wire: Any) -> M:
    """
    Map a JSON-like tree onto model.

    Raises:
        MissingField, TypeMismatch, UnknownEnumToken, MalformedEnvelope
    """
    try:
        return model.model_validate(wire, by_alias=True, by_name=False)
    except ValidationError as exc:
        raise translate_validation_error(exc, model) from exc


def decode_json(model: type[M], raw: str | bytes) -> M:
    """Parse JSON text with exact decimals, then decode()."""
    try:
        wire = json.loads(raw, parse_float=Decimal)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise TypeMismatch(model.__name__, "json", "invalid json") from exc
    return decode(model, wire)


def encode(entity: BaseModel) -> Any:
    """Map a model onto a JSON-like tree with wire keys."""
    return entity.model_dump(mode="json", by_alias=True)


def encode_json(entity: BaseModel) -> str:
    return json.dumps(encode(entity), separators=(",", ":"))


def translate_validation_error(exc: ValidationError, model: type) -> MappingError:
    """
    Classify the first pydantic error into the wire-layer taxonomy.

    Integer positions in the error location mark sequence elements; the
    first one becomes a MalformedEnvelope wrapping the classification of the
    rest of the location.
    """
    error = exc.errors(include_url=False)[0]
    return _classify(error, tuple(error["loc"]), model.__name__)


def _classify(error: dict, loc: tuple, root_name: str) -> MappingError:
    loc = tuple(part for part in loc if part not in _UNION_TAGS)
    for i, part in enumerate(loc):
        if isinstance(part, int):
            inner = _classify(error, loc[i + 1:], root_name)
            return MalformedEnvelope(part, inner, path=_path(loc[:i]))

    field = _path(loc) or root_name
    kind = error["type"]
    ctx = error.get("ctx") or {}

    if kind == "missing":
        return MissingField(field)
    if kind == "unknown_enum_token":
        return UnknownEnumToken(ctx.get("type_name", ""), ctx.get("token"), field)
    if kind == "is_instance_of":
        # strict checks on Python input, e.g. a string where a Decimal is needed
        cls = str(ctx.get("class", ""))
        expected = _EXPECTED_KINDS.get(cls, cls.lower())
    elif kind == "value_error":
        # raised by a model validator; ctx["error"] is the original ValueError
        expected = f"valid value ({ctx.get('error', error['msg'])})"
    else:
        expected = _EXPECTED_KINDS.get(kind, kind)
    return TypeMismatch(field, expected, json_kind(error.get("input")))


def _path(loc: tuple) -> str:
    return ".".join(str(part) for part in loc)
