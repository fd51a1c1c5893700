"""Discriminator registry for polymorphic ("one-of-N") protocol objects.

A :class:`Hierarchy` owns a discriminator field name, the enum of its
discriminator values and a closed table mapping each wire value to the
concrete variant class. Variants register at import time with the
:meth:`Hierarchy.variant` decorator; the table freezes on first use and is
read-only afterwards.

Decoding an unregistered discriminator yields an :class:`UnknownVariant`
that keeps the raw payload, so protocol additions never break decode.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, Mapping, Optional, TypeVar

from .codec import (
    ROOT_PATH,
    EncodeContext,
    decode_object,
    encode_object,
    wire_names,
)
from .enums import WireEnum
from .errors import (
    EncodeError,
    MissingDiscriminatorError,
    RegistryError,
    TypeMismatchError,
)

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=type)

HIERARCHIES: dict[str, "Hierarchy"] = {}
_hierarchies_lock = threading.Lock()


class Variant:
    """Base for every hierarchy root; the discriminator lives on the class."""

    __slots__ = ()

    __hierarchy__: ClassVar["Hierarchy"]
    __kind__: ClassVar[WireEnum]

    @property
    def kind(self) -> WireEnum:
        return type(self).__kind__


@dataclass(frozen=True)
class UnknownVariant:
    """Payload whose discriminator is not registered for its hierarchy."""

    hierarchy: str
    discriminator: Any
    payload: Mapping[str, Any] = field(default_factory=dict)

    def to_wire(self) -> dict[str, Any]:
        return dict(self.payload)


class Hierarchy:
    def __init__(
        self,
        name: str,
        *,
        base: type,
        field: str,
        kinds: type[WireEnum],
        by: Optional[str] = None,
        aliases: tuple[str, ...] = (),
    ) -> None:
        if not issubclass(base, Variant):
            raise RegistryError(f"{base.__name__} must derive from Variant")
        self.name = name
        self.base = base
        self.field = field
        self.kinds = kinds
        self.by = by or kinds.__wire_by__
        self.aliases = tuple(aliases)
        self._variants: dict[WireEnum, type] = {}
        self._by_wire: dict[Any, type] = {}
        self._frozen = False
        self._lock = threading.Lock()
        with _hierarchies_lock:
            if name in HIERARCHIES:
                raise RegistryError(f"hierarchy '{name}' is already defined")
            HIERARCHIES[name] = self
        base.__hierarchy__ = self

    def __repr__(self) -> str:
        return f"Hierarchy({self.name!r}, field={self.field!r}, by={self.by!r})"

    def variant(self, kind: WireEnum) -> Callable[[V], V]:
        """Register the decorated dataclass as the variant for *kind*."""
        if not isinstance(kind, self.kinds):
            raise RegistryError(
                f"{kind!r} is not a {self.kinds.__name__} discriminator for {self.name}"
            )

        def register(cls: V) -> V:
            if not issubclass(cls, self.base):
                raise RegistryError(f"{cls.__name__} does not derive from {self.base.__name__}")
            if self.field in wire_names(cls):
                raise RegistryError(
                    f"{cls.__name__} declares a field named like the "
                    f"discriminator '{self.field}'"
                )
            with self._lock:
                if self._frozen:
                    raise RegistryError(
                        f"cannot register {cls.__name__}: {self.name} is frozen"
                    )
                if kind in self._variants:
                    raise RegistryError(
                        f"{self.name} already maps {kind.name} to "
                        f"{self._variants[kind].__name__}"
                    )
                self._variants[kind] = cls
            cls.__kind__ = kind
            setattr(cls, self.field, kind)
            return cls

        return register

    def freeze(self) -> None:
        with self._lock:
            if self._frozen:
                return
            for kind, cls in self._variants.items():
                self._by_wire[kind.wire_value(self.by)] = cls
            self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def table(self) -> Mapping[Any, type]:
        if not self._frozen:
            self.freeze()
        return dict(self._by_wire)

    def variant_for(self, raw_value: Any) -> Optional[type]:
        if not self._frozen:
            self.freeze()
        kind = self.kinds.lookup(raw_value, self.by)
        if kind is None:
            return None
        return self._by_wire.get(kind.wire_value(self.by))

    def wire_value_of(self, cls: type) -> Any:
        kind = getattr(cls, "__kind__", None)
        if kind is None or self._variants.get(kind) is not cls:
            raise EncodeError(f"{cls.__name__} is not a registered {self.name} variant")
        return kind.wire_value(self.by)

    def decode(self, raw: Any, path: str = ROOT_PATH) -> Any:
        if not isinstance(raw, Mapping):
            raise TypeMismatchError(f"{self.name} object", raw, path=path)
        for key in (self.field, *self.aliases):
            if key in raw:
                raw_value = raw[key]
                break
        else:
            raise MissingDiscriminatorError(self.name, self.field, path=path)
        cls = self.variant_for(raw_value)
        if cls is None:
            logger.debug(
                "Unknown %s discriminator %r at %s; keeping raw payload",
                self.name,
                raw_value,
                path,
            )
            return UnknownVariant(
                hierarchy=self.name, discriminator=raw_value, payload=dict(raw)
            )
        return decode_object(cls, raw, path)

    def encode(
        self, value: Any, ctx: Optional[EncodeContext] = None, path: str = ROOT_PATH
    ) -> dict[str, Any]:
        if isinstance(value, UnknownVariant):
            if value.hierarchy != self.name:
                raise EncodeError(
                    f"unknown {value.hierarchy} payload used as {self.name}", path=path
                )
            return value.to_wire()
        if not isinstance(value, self.base):
            raise EncodeError(
                f"expected {self.base.__name__}, got {type(value).__name__}", path=path
            )
        if not self._frozen:
            self.freeze()
        out: dict[str, Any] = {self.field: self.wire_value_of(type(value))}
        out.update(encode_object(value, ctx, path))
        return out

    def describe(self) -> list[tuple[Any, str]]:
        return [(wire, cls.__name__) for wire, cls in self.table().items()]


def hierarchy_of(target: Any) -> Hierarchy:
    hierarchy = getattr(target, "__hierarchy__", None)
    if hierarchy is None:
        raise TypeError(f"{target!r} is not part of a variant hierarchy")
    return hierarchy


def freeze_all() -> None:
    for hierarchy in list(HIERARCHIES.values()):
        hierarchy.freeze()


__all__ = [
    "HIERARCHIES",
    "Hierarchy",
    "UnknownVariant",
    "Variant",
    "freeze_all",
    "hierarchy_of",
]
