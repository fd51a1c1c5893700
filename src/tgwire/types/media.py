"""Media items sent as part of an album or an edit."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from ..codec import (
    BOOL,
    FILE,
    INT,
    STR,
    EnumOf,
    ListOf,
    Maybe,
    ObjectOf,
    optional,
    required,
)
from ..enums import InputMediaType, ParseMode
from ..files import InputFile
from ..registry import Hierarchy, Variant
from .common import MessageEntity


@dataclass(frozen=True, kw_only=True, slots=True)
class InputMedia(Variant):
    media: InputFile = required(FILE)
    caption: Maybe[Optional[str]] = optional(STR)
    parse_mode: Maybe[Optional[ParseMode]] = optional(EnumOf(ParseMode))
    caption_entities: Maybe[Optional[List[MessageEntity]]] = optional(
        ListOf(ObjectOf(MessageEntity))
    )


INPUT_MEDIA = Hierarchy(
    "input_media", base=InputMedia, field="type", kinds=InputMediaType
)


@INPUT_MEDIA.variant(InputMediaType.PHOTO)
@dataclass(frozen=True, kw_only=True, slots=True)
class InputMediaPhoto(InputMedia):
    show_caption_above_media: Maybe[Optional[bool]] = optional(BOOL)
    has_spoiler: Maybe[Optional[bool]] = optional(BOOL)


@INPUT_MEDIA.variant(InputMediaType.VIDEO)
@dataclass(frozen=True, kw_only=True, slots=True)
class InputMediaVideo(InputMedia):
    thumbnail: Maybe[Optional[InputFile]] = optional(FILE)
    show_caption_above_media: Maybe[Optional[bool]] = optional(BOOL)
    width: Maybe[Optional[int]] = optional(INT)
    height: Maybe[Optional[int]] = optional(INT)
    duration: Maybe[Optional[int]] = optional(INT)
    supports_streaming: Maybe[Optional[bool]] = optional(BOOL)
    has_spoiler: Maybe[Optional[bool]] = optional(BOOL)


@INPUT_MEDIA.variant(InputMediaType.ANIMATION)
@dataclass(frozen=True, kw_only=True, slots=True)
class InputMediaAnimation(InputMedia):
    thumbnail: Maybe[Optional[InputFile]] = optional(FILE)
    show_caption_above_media: Maybe[Optional[bool]] = optional(BOOL)
    width: Maybe[Optional[int]] = optional(INT)
    height: Maybe[Optional[int]] = optional(INT)
    duration: Maybe[Optional[int]] = optional(INT)
    has_spoiler: Maybe[Optional[bool]] = optional(BOOL)


@INPUT_MEDIA.variant(InputMediaType.AUDIO)
@dataclass(frozen=True, kw_only=True, slots=True)
class InputMediaAudio(InputMedia):
    thumbnail: Maybe[Optional[InputFile]] = optional(FILE)
    duration: Maybe[Optional[int]] = optional(INT)
    performer: Maybe[Optional[str]] = optional(STR)
    title: Maybe[Optional[str]] = optional(STR)


@INPUT_MEDIA.variant(InputMediaType.DOCUMENT)
@dataclass(frozen=True, kw_only=True, slots=True)
class InputMediaDocument(InputMedia):
    thumbnail: Maybe[Optional[InputFile]] = optional(FILE)
    disable_content_type_detection: Maybe[Optional[bool]] = optional(BOOL)


__all__ = [
    "INPUT_MEDIA",
    "InputMedia",
    "InputMediaAnimation",
    "InputMediaAudio",
    "InputMediaDocument",
    "InputMediaPhoto",
    "InputMediaVideo",
]
