"""Schema-driven encode/decode between JSON value trees and typed objects.

Protocol types are frozen dataclasses whose fields are declared with
:func:`required`, :func:`optional` or :func:`embedded`. Each declaration
carries a :class:`FieldCodec` describing the wire shape. A class schema is
compiled once on first use and reused for every later call.

Optional fields default to :data:`UNSET`. ``UNSET`` means "absent on the
wire" and is never emitted; ``None`` means "present as ``null``".
"""

from __future__ import annotations

import dataclasses
import json
import threading
from datetime import datetime, timezone
from typing import Any, Mapping, Optional, Protocol, Sequence, TypeVar, Union

from .enums import WireEnum
from .errors import (
    DecodeError,
    EncodeError,
    MalformedPayloadError,
    MissingRequiredFieldError,
    TypeMismatchError,
)
from .files import InputFile, InputFileId, InputFileStream, InputFileUrl

T = TypeVar("T")

_WIRE_KEY = "tgwire"
ROOT_PATH = "$"


class UnsetType:
    __slots__ = ()
    _instance: Optional["UnsetType"] = None

    def __new__(cls) -> "UnsetType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNSET"


UNSET = UnsetType()

# Field value that may be absent from the wire.
Maybe = Union[T, UnsetType]


def is_set(value: Any) -> bool:
    return value is not UNSET


def child_path(path: str, key: Union[str, int]) -> str:
    if isinstance(key, int):
        return f"{path}[{key}]"
    return f"{path}.{key}"


class EncodeContext(Protocol):
    """Receives file references met while encoding a request."""

    def resolve(self, ref: InputFile, path: str) -> str: ...


class FieldCodec:
    """Wire shape of a single field value (never ``None``/``UNSET``)."""

    label = "value"

    def encode(self, value: Any, ctx: Optional[EncodeContext], path: str) -> Any:
        raise NotImplementedError

    def decode(self, raw: Any, path: str) -> Any:
        raise NotImplementedError

    def describe(self) -> str:
        return self.label


class _Int(FieldCodec):
    label = "int"

    def encode(self, value: Any, ctx: Optional[EncodeContext], path: str) -> Any:
        if isinstance(value, bool) or not isinstance(value, int):
            raise EncodeError(f"expected int, got {type(value).__name__}", path=path)
        return value

    def decode(self, raw: Any, path: str) -> Any:
        if isinstance(raw, bool):
            raise TypeMismatchError("int", raw, path=path)
        if isinstance(raw, int):
            return raw
        if isinstance(raw, float) and raw.is_integer():
            return int(raw)
        raise TypeMismatchError("int", raw, path=path)


class _Float(FieldCodec):
    label = "float"

    def encode(self, value: Any, ctx: Optional[EncodeContext], path: str) -> Any:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise EncodeError(f"expected float, got {type(value).__name__}", path=path)
        return float(value)

    def decode(self, raw: Any, path: str) -> Any:
        if isinstance(raw, bool) or not isinstance(raw, (int, float)):
            raise TypeMismatchError("float", raw, path=path)
        return float(raw)


class _Str(FieldCodec):
    label = "str"

    def encode(self, value: Any, ctx: Optional[EncodeContext], path: str) -> Any:
        if not isinstance(value, str):
            raise EncodeError(f"expected str, got {type(value).__name__}", path=path)
        return value

    def decode(self, raw: Any, path: str) -> Any:
        if not isinstance(raw, str):
            raise TypeMismatchError("str", raw, path=path)
        return raw


class _Bool(FieldCodec):
    label = "bool"

    def encode(self, value: Any, ctx: Optional[EncodeContext], path: str) -> Any:
        if not isinstance(value, bool):
            raise EncodeError(f"expected bool, got {type(value).__name__}", path=path)
        return value

    def decode(self, raw: Any, path: str) -> Any:
        if not isinstance(raw, bool):
            raise TypeMismatchError("bool", raw, path=path)
        return raw


class _ChatId(FieldCodec):
    """Numeric chat id or ``@username``."""

    label = "int|str"

    def encode(self, value: Any, ctx: Optional[EncodeContext], path: str) -> Any:
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            raise EncodeError(
                f"expected chat id or username, got {type(value).__name__}", path=path
            )
        return value

    def decode(self, raw: Any, path: str) -> Any:
        if isinstance(raw, bool) or not isinstance(raw, (int, str)):
            raise TypeMismatchError(self.label, raw, path=path)
        return raw


class _DateTime(FieldCodec):
    """Unix timestamp in seconds <-> timezone-aware UTC ``datetime``."""

    label = "datetime"

    def encode(self, value: Any, ctx: Optional[EncodeContext], path: str) -> Any:
        if not isinstance(value, datetime):
            raise EncodeError(
                f"expected datetime, got {type(value).__name__}", path=path
            )
        if value.microsecond:
            raise EncodeError(
                "timestamps are sent in whole seconds; drop the microseconds first",
                path=path,
            )
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return int(value.timestamp())

    def decode(self, raw: Any, path: str) -> Any:
        if isinstance(raw, bool) or not isinstance(raw, (int, float)):
            raise TypeMismatchError("unix timestamp", raw, path=path)
        try:
            return datetime.fromtimestamp(int(raw), tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as exc:
            raise TypeMismatchError("unix timestamp", raw, path=path) from exc


class _Raw(FieldCodec):
    """Untyped JSON passed through as-is."""

    label = "json"

    def encode(self, value: Any, ctx: Optional[EncodeContext], path: str) -> Any:
        return value

    def decode(self, raw: Any, path: str) -> Any:
        return raw


INT = _Int()
FLOAT = _Float()
STR = _Str()
BOOL = _Bool()
CHAT_ID = _ChatId()
DATETIME = _DateTime()
RAW = _Raw()


class ListOf(FieldCodec):
    def __init__(self, item: FieldCodec) -> None:
        self.item = item

    def describe(self) -> str:
        return f"list[{self.item.describe()}]"

    def encode(self, value: Any, ctx: Optional[EncodeContext], path: str) -> Any:
        if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
            raise EncodeError(
                f"expected a sequence, got {type(value).__name__}", path=path
            )
        return [
            self.item.encode(item, ctx, child_path(path, index))
            for index, item in enumerate(value)
        ]

    def decode(self, raw: Any, path: str) -> Any:
        if not isinstance(raw, list):
            raise TypeMismatchError("array", raw, path=path)
        return [
            self.item.decode(item, child_path(path, index))
            for index, item in enumerate(raw)
        ]


class ObjectOf(FieldCodec):
    """Nested protocol object (a dataclass with declared fields)."""

    def __init__(self, cls: type) -> None:
        self.cls = cls

    def describe(self) -> str:
        return self.cls.__name__

    def encode(self, value: Any, ctx: Optional[EncodeContext], path: str) -> Any:
        if not isinstance(value, self.cls):
            raise EncodeError(
                f"expected {self.cls.__name__}, got {type(value).__name__}", path=path
            )
        return encode_object(value, ctx, path)

    def decode(self, raw: Any, path: str) -> Any:
        return decode_object(self.cls, raw, path)


class VariantOf(FieldCodec):
    """Field typed as a variant hierarchy; resolved through its registry."""

    def __init__(self, base: type) -> None:
        self.base = base

    @property
    def hierarchy(self) -> Any:
        hierarchy = getattr(self.base, "__hierarchy__", None)
        if hierarchy is None:
            raise TypeError(f"{self.base.__name__} is not a variant hierarchy")
        return hierarchy

    def describe(self) -> str:
        return f"{self.base.__name__}<{self.hierarchy.field}>"

    def encode(self, value: Any, ctx: Optional[EncodeContext], path: str) -> Any:
        return self.hierarchy.encode(value, ctx, path)

    def decode(self, raw: Any, path: str) -> Any:
        return self.hierarchy.decode(raw, path)


class EnumOf(FieldCodec):
    def __init__(self, enum_cls: type[WireEnum], *, by: Optional[str] = None) -> None:
        self.enum_cls = enum_cls
        self.by = by

    def describe(self) -> str:
        return f"{self.enum_cls.__name__}({self.by or self.enum_cls.__wire_by__})"

    def encode(self, value: Any, ctx: Optional[EncodeContext], path: str) -> Any:
        if not isinstance(value, self.enum_cls):
            raise EncodeError(
                f"expected {self.enum_cls.__name__}, got {type(value).__name__}",
                path=path,
            )
        return value.wire_value(self.by)

    def decode(self, raw: Any, path: str) -> Any:
        member = self.enum_cls.lookup(raw, self.by)
        if member is None:
            raise TypeMismatchError(self.enum_cls.__name__, raw, path=path)
        return member


class FileRef(FieldCodec):
    """File-valued field: inline id/URL, or an ``attach://`` placeholder."""

    label = "InputFile"

    def encode(self, value: Any, ctx: Optional[EncodeContext], path: str) -> Any:
        if not isinstance(value, (InputFileId, InputFileUrl, InputFileStream)):
            raise EncodeError(
                f"expected an input file, got {type(value).__name__}", path=path
            )
        if ctx is None:
            if isinstance(value, InputFileStream):
                raise EncodeError(
                    "local file streams can only be encoded as part of a request",
                    path=path,
                )
            return value.wire_value()
        return ctx.resolve(value, path)

    def decode(self, raw: Any, path: str) -> Any:
        if not isinstance(raw, str):
            raise TypeMismatchError("file id or URL", raw, path=path)
        if raw.startswith("attach://"):
            raise TypeMismatchError("file id or URL", raw, path=path)
        if raw.startswith(("http://", "https://")):
            return InputFileUrl(raw)
        return InputFileId(raw)


FILE = FileRef()


@dataclasses.dataclass(frozen=True)
class WireField:
    codec: FieldCodec
    required: bool
    wire_name: Optional[str] = None
    flatten: bool = False


@dataclasses.dataclass(frozen=True)
class FieldBinding:
    attr: str
    wire_name: str
    codec: FieldCodec
    required: bool
    flatten: bool


def required(codec: FieldCodec, *, name: Optional[str] = None) -> Any:
    return dataclasses.field(
        metadata={_WIRE_KEY: WireField(codec=codec, required=True, wire_name=name)}
    )


def optional(codec: FieldCodec, *, name: Optional[str] = None) -> Any:
    return dataclasses.field(
        default=UNSET,
        metadata={_WIRE_KEY: WireField(codec=codec, required=False, wire_name=name)},
    )


def embedded(cls: type) -> Any:
    """Composed value whose fields are spliced into the parent object."""
    return dataclasses.field(
        metadata={
            _WIRE_KEY: WireField(codec=ObjectOf(cls), required=True, flatten=True)
        }
    )


_schemas: dict[type, tuple[FieldBinding, ...]] = {}
_schema_lock = threading.RLock()


def schema_for(cls: type) -> tuple[FieldBinding, ...]:
    schema = _schemas.get(cls)
    if schema is not None:
        return schema
    with _schema_lock:
        schema = _schemas.get(cls)
        if schema is None:
            schema = _compile_schema(cls)
            _schemas[cls] = schema
    return schema


def _compile_schema(cls: type) -> tuple[FieldBinding, ...]:
    if not dataclasses.is_dataclass(cls):
        raise TypeError(f"{cls.__name__} is not a protocol type")
    bindings: list[FieldBinding] = []
    seen: set[str] = set()
    for field in dataclasses.fields(cls):
        meta = field.metadata.get(_WIRE_KEY)
        if not isinstance(meta, WireField):
            raise TypeError(f"{cls.__name__}.{field.name} has no wire declaration")
        wire_name = meta.wire_name or field.name
        if meta.flatten:
            names = {b.wire_name for b in schema_for(meta.codec.cls)}  # type: ignore[attr-defined]
        else:
            names = {wire_name}
        clash = names & seen
        if clash:
            raise TypeError(f"{cls.__name__} declares wire field(s) twice: {sorted(clash)}")
        seen |= names
        bindings.append(
            FieldBinding(
                attr=field.name,
                wire_name=wire_name,
                codec=meta.codec,
                required=meta.required,
                flatten=meta.flatten,
            )
        )
    return tuple(bindings)


def wire_names(cls: type) -> frozenset[str]:
    names: set[str] = set()
    for binding in schema_for(cls):
        if binding.flatten:
            names |= wire_names(binding.codec.cls)  # type: ignore[attr-defined]
        else:
            names.add(binding.wire_name)
    return frozenset(names)


def encode_object(
    obj: Any, ctx: Optional[EncodeContext] = None, path: str = ROOT_PATH
) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for binding in schema_for(type(obj)):
        value = getattr(obj, binding.attr)
        field_path = child_path(path, binding.wire_name)
        if value is UNSET:
            if binding.required:
                raise EncodeError(
                    f"{type(obj).__name__}.{binding.attr} is required", path=field_path
                )
            continue
        if binding.flatten:
            out.update(binding.codec.encode(value, ctx, path))
            continue
        if value is None:
            if binding.required:
                raise EncodeError(
                    f"{type(obj).__name__}.{binding.attr} cannot be null",
                    path=field_path,
                )
            out[binding.wire_name] = None
            continue
        out[binding.wire_name] = binding.codec.encode(value, ctx, field_path)
    return out


def decode_object(cls: type[T], raw: Any, path: str = ROOT_PATH) -> T:
    if not isinstance(raw, Mapping):
        raise TypeMismatchError(f"{cls.__name__} object", raw, path=path)
    kwargs: dict[str, Any] = {}
    for binding in schema_for(cls):
        if binding.flatten:
            kwargs[binding.attr] = binding.codec.decode(raw, path)
            continue
        field_path = child_path(path, binding.wire_name)
        if binding.wire_name not in raw:
            if binding.required:
                raise MissingRequiredFieldError(
                    cls.__name__, binding.wire_name, path=field_path
                )
            continue
        value = raw[binding.wire_name]
        if value is None:
            if binding.required:
                raise TypeMismatchError(binding.codec.describe(), value, path=field_path)
            kwargs[binding.attr] = None
            continue
        kwargs[binding.attr] = binding.codec.decode(value, field_path)
    return cls(**kwargs)


def codec_for(target: Any) -> FieldCodec:
    """Return a codec for a class, hierarchy base or codec instance."""
    if isinstance(target, FieldCodec):
        return target
    if isinstance(target, type):
        if getattr(target, "__hierarchy__", None) is not None and not hasattr(
            target, "__kind__"
        ):
            return VariantOf(target)
        if issubclass(target, WireEnum):
            return EnumOf(target)
        return ObjectOf(target)
    raise TypeError(f"cannot build a codec for {target!r}")


def encode(obj: Any, ctx: Optional[EncodeContext] = None) -> Any:
    """Encode a protocol object (or enum/list of them) to a JSON value tree."""
    if isinstance(obj, WireEnum):
        return obj.wire_value()
    if isinstance(obj, (list, tuple)):
        return [encode_value(item, ctx, child_path(ROOT_PATH, i)) for i, item in enumerate(obj)]
    return encode_value(obj, ctx, ROOT_PATH)


def encode_value(obj: Any, ctx: Optional[EncodeContext], path: str) -> Any:
    if isinstance(obj, WireEnum):
        return obj.wire_value()
    hierarchy = getattr(type(obj), "__hierarchy__", None)
    if hierarchy is not None:
        return hierarchy.encode(obj, ctx, path)
    to_wire = getattr(obj, "to_wire", None)
    if to_wire is not None:
        # UnknownVariant and other raw-preserving values
        return to_wire()
    return encode_object(obj, ctx, path)


def decode(target: Any, raw: Any) -> Any:
    """Decode *raw* into *target* (a class, hierarchy base or codec)."""
    return codec_for(target).decode(raw, ROOT_PATH)


def decode_json(target: Any, text: Union[str, bytes, bytearray]) -> Any:
    return decode(target, loads(text))


def loads(text: Union[str, bytes, bytearray]) -> Any:
    try:
        return json.loads(text)
    except (TypeError, ValueError) as exc:
        raise MalformedPayloadError(f"invalid JSON: {exc}") from exc


def dumps(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


__all__ = [
    "BOOL",
    "CHAT_ID",
    "DATETIME",
    "DecodeError",
    "EncodeContext",
    "EnumOf",
    "FILE",
    "FLOAT",
    "FieldCodec",
    "FileRef",
    "INT",
    "ListOf",
    "Maybe",
    "ObjectOf",
    "RAW",
    "STR",
    "UNSET",
    "UnsetType",
    "VariantOf",
    "codec_for",
    "decode",
    "decode_json",
    "decode_object",
    "dumps",
    "embedded",
    "encode",
    "encode_object",
    "is_set",
    "loads",
    "optional",
    "required",
    "schema_for",
    "wire_names",
]
