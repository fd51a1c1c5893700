"""Chat backgrounds: a fill hierarchy nested inside a background hierarchy."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from ..codec import (
    BOOL,
    INT,
    STR,
    ListOf,
    Maybe,
    ObjectOf,
    VariantOf,
    optional,
    required,
)
from ..enums import BackgroundFillKind, BackgroundTypeKind
from ..registry import Hierarchy, Variant
from .common import Document


class BackgroundFill(Variant):
    __slots__ = ()


BACKGROUND_FILLS = Hierarchy(
    "background_fill", base=BackgroundFill, field="type", kinds=BackgroundFillKind
)


@BACKGROUND_FILLS.variant(BackgroundFillKind.SOLID)
@dataclass(frozen=True, kw_only=True, slots=True)
class BackgroundFillSolid(BackgroundFill):
    color: int = required(INT)


@BACKGROUND_FILLS.variant(BackgroundFillKind.GRADIENT)
@dataclass(frozen=True, kw_only=True, slots=True)
class BackgroundFillGradient(BackgroundFill):
    top_color: int = required(INT)
    bottom_color: int = required(INT)
    rotation_angle: int = required(INT)


@BACKGROUND_FILLS.variant(BackgroundFillKind.FREEFORM_GRADIENT)
@dataclass(frozen=True, kw_only=True, slots=True)
class BackgroundFillFreeformGradient(BackgroundFill):
    # 3 or 4 RGB24 colors
    colors: List[int] = required(ListOf(INT))


class BackgroundType(Variant):
    __slots__ = ()


BACKGROUND_TYPES = Hierarchy(
    "background_type", base=BackgroundType, field="type", kinds=BackgroundTypeKind
)


@BACKGROUND_TYPES.variant(BackgroundTypeKind.FILL)
@dataclass(frozen=True, kw_only=True, slots=True)
class BackgroundTypeFill(BackgroundType):
    fill: BackgroundFill = required(VariantOf(BackgroundFill))
    dark_theme_dimming: int = required(INT)


@BACKGROUND_TYPES.variant(BackgroundTypeKind.WALLPAPER)
@dataclass(frozen=True, kw_only=True, slots=True)
class BackgroundTypeWallpaper(BackgroundType):
    document: Document = required(ObjectOf(Document))
    dark_theme_dimming: int = required(INT)
    is_blurred: Maybe[Optional[bool]] = optional(BOOL)
    is_moving: Maybe[Optional[bool]] = optional(BOOL)


@BACKGROUND_TYPES.variant(BackgroundTypeKind.PATTERN)
@dataclass(frozen=True, kw_only=True, slots=True)
class BackgroundTypePattern(BackgroundType):
    document: Document = required(ObjectOf(Document))
    fill: BackgroundFill = required(VariantOf(BackgroundFill))
    intensity: int = required(INT)
    is_inverted: Maybe[Optional[bool]] = optional(BOOL)
    is_moving: Maybe[Optional[bool]] = optional(BOOL)


@BACKGROUND_TYPES.variant(BackgroundTypeKind.CHAT_THEME)
@dataclass(frozen=True, kw_only=True, slots=True)
class BackgroundTypeChatTheme(BackgroundType):
    theme_name: str = required(STR)


@dataclass(frozen=True, kw_only=True, slots=True)
class ChatBackground:
    type: BackgroundType = required(VariantOf(BackgroundType))


__all__ = [
    "BACKGROUND_FILLS",
    "BACKGROUND_TYPES",
    "BackgroundFill",
    "BackgroundFillFreeformGradient",
    "BackgroundFillGradient",
    "BackgroundFillSolid",
    "BackgroundType",
    "BackgroundTypeChatTheme",
    "BackgroundTypeFill",
    "BackgroundTypePattern",
    "BackgroundTypeWallpaper",
    "ChatBackground",
]
