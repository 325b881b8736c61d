"""
Wire field kinds and the field-level encode/decode rules.

Every payload and message dataclass declares its fields with ``wire_field``,
naming the wire kind of each one. The generic ``encode_fields`` and
``decode_fields`` walk those declarations in declaration order, so both
message families follow exactly the same rules:

- required fields must be present; absence raises MissingFieldError
- optional fields are omitted when None and accept an explicit null
- fields with a schema default fall back to it only when absent
- values are never coerced across JSON types (no str -> number, no bool -> int)
- unknown keys are ignored unless CodecOptions.reject_unknown_fields is set
"""

import math
from dataclasses import MISSING, Field, dataclass, field, fields
from enum import Enum
from typing import Any, Optional

from ..config.defaults import DEFAULT_CODEC_OPTIONS, CodecOptions
from ..errors import EncodeError, MissingFieldError, TypeMismatchError

U16_MAX = 2**16 - 1
U32_MAX = 2**32 - 1
U64_MAX = 2**64 - 1
I64_MIN = -(2**63)
I64_MAX = 2**63 - 1


def join_path(path: Optional[str], name: str) -> str:
    """Append a field name to a dotted field path."""
    return f"{path}.{name}" if path else name


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a JSON number
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_finite(value: Any) -> bool:
    # ints past the double range cannot widen to f64
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


class WireKind:
    """Base class for the wire representation of a single field value."""

    name = "value"

    def encode(self, value: Any, path: str) -> Any:
        raise NotImplementedError

    def decode(self, raw: Any, path: str, options: CodecOptions) -> Any:
        raise NotImplementedError

    def mismatch(self, raw: Any, path: str) -> TypeMismatchError:
        actual = "null" if raw is None else type(raw).__name__
        return TypeMismatchError(
            f"Field '{path}' must be {self.name}, got {actual}",
            path=path,
            expected=self.name,
            actual=raw,
        )


class StringKind(WireKind):
    """UTF-8 string (account addresses, codes, reasons)."""

    name = "string"

    def encode(self, value: Any, path: str) -> str:
        if not isinstance(value, str):
            raise EncodeError(f"Field '{path}' must be a string", field_path=path, value=value)
        return value

    def decode(self, raw: Any, path: str, options: CodecOptions) -> str:
        if not isinstance(raw, str):
            raise self.mismatch(raw, path)
        return raw


class IntKind(WireKind):
    """Fixed-width integer checked against its range on both directions."""

    def __init__(self, name: str, minimum: int, maximum: int):
        self.name = name
        self.minimum = minimum
        self.maximum = maximum

    def _in_range(self, value: Any) -> bool:
        return isinstance(value, int) and not isinstance(value, bool) \
            and self.minimum <= value <= self.maximum

    def encode(self, value: Any, path: str) -> int:
        if not self._in_range(value):
            raise EncodeError(
                f"Field '{path}' must be an integer in {self.name} range, got {value!r}",
                field_path=path,
                value=value,
            )
        return value

    def decode(self, raw: Any, path: str, options: CodecOptions) -> int:
        if not isinstance(raw, int) or isinstance(raw, bool):
            raise self.mismatch(raw, path)
        if not self._in_range(raw):
            raise TypeMismatchError(
                f"Field '{path}' value {raw} is out of {self.name} range "
                f"[{self.minimum}, {self.maximum}]",
                path=path,
                expected=self.name,
                actual=raw,
            )
        return raw


class FloatKind(WireKind):
    """IEEE double; JSON integers are accepted and widened to float."""

    name = "f64"

    def encode(self, value: Any, path: str) -> float:
        if not _is_number(value) or not _is_finite(value):
            raise EncodeError(
                f"Field '{path}' must be a finite number, got {value!r}",
                field_path=path,
                value=value,
            )
        return float(value)

    def decode(self, raw: Any, path: str, options: CodecOptions) -> float:
        if not _is_number(raw):
            raise self.mismatch(raw, path)
        if not _is_finite(raw):
            raise TypeMismatchError(
                f"Field '{path}' must be finite, got {raw}",
                path=path,
                expected="finite f64",
                actual=raw,
            )
        return float(raw)


class StringListKind(WireKind):
    """Ordered list of strings, held as a tuple in memory."""

    name = "list[string]"

    def __init__(self, accept_single: bool = False):
        # Legacy producers sent one bare string instead of a list
        self.accept_single = accept_single

    def encode(self, value: Any, path: str) -> list[str]:
        if not isinstance(value, (list, tuple)):
            raise EncodeError(f"Field '{path}' must be a sequence of strings",
                              field_path=path, value=value)
        return [StringKind().encode(item, f"{path}[{i}]") for i, item in enumerate(value)]

    def decode(self, raw: Any, path: str, options: CodecOptions) -> tuple[str, ...]:
        if self.accept_single and isinstance(raw, str):
            return (raw,)
        if not isinstance(raw, list):
            raise self.mismatch(raw, path)
        items = []
        for i, item in enumerate(raw):
            if not isinstance(item, str):
                raise StringKind().mismatch(item, f"{path}[{i}]")
            items.append(item)
        return tuple(items)


class EnumKind(WireKind):
    """String-valued enum encoded by its value."""

    def __init__(self, enum_cls: type[Enum]):
        self.enum_cls = enum_cls
        self.name = enum_cls.__name__

    def encode(self, value: Any, path: str) -> str:
        if not isinstance(value, self.enum_cls):
            raise EncodeError(f"Field '{path}' must be a {self.name}",
                              field_path=path, value=value)
        return value.value

    def decode(self, raw: Any, path: str, options: CodecOptions) -> Enum:
        if not isinstance(raw, str):
            raise self.mismatch(raw, path)
        try:
            return self.enum_cls(raw)
        except ValueError:
            allowed = ", ".join(member.value for member in self.enum_cls)
            raise TypeMismatchError(
                f"Field '{path}' has unknown {self.name} '{raw}', expected one of: {allowed}",
                path=path,
                expected=self.name,
                actual=raw,
            ) from None


class NestedKind(WireKind):
    """Nested payload dataclass encoded as a JSON object."""

    def __init__(self, model: type):
        self.model = model
        self.name = f"{model.__name__} object"

    def encode(self, value: Any, path: str) -> dict[str, Any]:
        if not isinstance(value, self.model):
            raise EncodeError(f"Field '{path}' must be a {self.model.__name__}",
                              field_path=path, value=value)
        return encode_fields(value, path)

    def decode(self, raw: Any, path: str, options: CodecOptions) -> Any:
        if not isinstance(raw, dict):
            raise self.mismatch(raw, path)
        return self.model(**decode_fields(self.model, raw, options, path))


@dataclass(frozen=True)
class WireSpec:
    """Wire declaration attached to a dataclass field's metadata."""
    kind: WireKind
    optional: bool = False                  # Omitted when None, null accepted
    has_default: bool = False               # Schema default used when absent
    aliases: tuple[str, ...] = ()           # Legacy input names


def wire_field(kind: WireKind, *, optional: bool = False, default: Any = MISSING,
               aliases: tuple[str, ...] = ()) -> Any:
    """Declare a dataclass field together with its wire kind."""
    spec = WireSpec(
        kind=kind,
        optional=optional,
        has_default=default is not MISSING,
        aliases=aliases,
    )
    if optional:
        return field(default=None, metadata={"wire": spec})
    return field(default=default, metadata={"wire": spec})


def wire_fields(cls_or_obj: Any) -> list[tuple[Field, WireSpec]]:
    """Declared wire fields of a dataclass, in declaration order."""
    return [(f, f.metadata["wire"]) for f in fields(cls_or_obj) if "wire" in f.metadata]


def encode_fields(obj: Any, path: Optional[str] = None) -> dict[str, Any]:
    """
    Render a wire dataclass into a plain dict in declared field order.

    Raises:
        EncodeError: If a field value cannot be represented on the wire
    """
    out: dict[str, Any] = {}
    for f, spec in wire_fields(obj):
        value = getattr(obj, f.name)
        if spec.optional and value is None:
            continue
        out[f.name] = spec.kind.encode(value, join_path(path, f.name))
    return out


def decode_fields(cls: type, data: Any, options: CodecOptions = DEFAULT_CODEC_OPTIONS,
                  path: Optional[str] = None,
                  reserved: tuple[str, ...] = ()) -> dict[str, Any]:
    """
    Read constructor arguments for a wire dataclass from a decoded JSON object.

    Args:
        cls: Target dataclass type
        data: Decoded JSON value expected to be an object
        options: Codec options controlling aliases and unknown keys
        path: Dotted path of ``data`` within the whole message
        reserved: Keys owned by the caller (e.g. the ``type`` discriminator)

    Returns:
        Keyword arguments for ``cls``

    Raises:
        MissingFieldError: If a required field is absent
        TypeMismatchError: If a value has the wrong wire type
    """
    if not isinstance(data, dict):
        actual = "null" if data is None else type(data).__name__
        where = f"'{path}'" if path else "Message"
        raise TypeMismatchError(f"{where} must be a JSON object, got {actual}",
                                path=path, expected="object", actual=data)

    known = set(reserved)
    kwargs: dict[str, Any] = {}

    for f, spec in wire_fields(cls):
        names = (f.name,) + (spec.aliases if options.accept_legacy_aliases else ())
        known.update(names)
        field_path = join_path(path, f.name)

        present = [name for name in names if name in data]
        if len(present) > 1:
            raise TypeMismatchError(
                f"Field '{field_path}' given under more than one name: {', '.join(present)}",
                path=field_path,
                expected="single occurrence",
                actual=data[present[0]],
            )

        if not present:
            if spec.optional or spec.has_default:
                continue
            raise MissingFieldError(
                f"Missing required field '{field_path}'",
                path=field_path,
                field_name=f.name,
            )

        raw = data[present[0]]
        if raw is None and spec.optional:
            kwargs[f.name] = None
            continue
        kwargs[f.name] = spec.kind.decode(raw, field_path, options)

    if options.reject_unknown_fields:
        for key in data:
            if key not in known:
                key_path = join_path(path, key)
                raise TypeMismatchError(
                    f"Unknown field '{key_path}'",
                    path=key_path,
                    expected="no such field",
                    actual=data[key],
                )

    return kwargs


# Shared kind instances
STRING = StringKind()
U16 = IntKind("u16", 0, U16_MAX)
U32 = IntKind("u32", 0, U32_MAX)
U64 = IntKind("u64", 0, U64_MAX)
I64 = IntKind("i64", I64_MIN, I64_MAX)
F64 = FloatKind()
STRING_LIST = StringListKind()
