"""Plain (non-polymorphic) entities shared across the protocol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..codec import (
    BOOL,
    FLOAT,
    INT,
    STR,
    EnumOf,
    Maybe,
    ObjectOf,
    embedded,
    optional,
    required,
)
from ..enums import ChatType


@dataclass(frozen=True, kw_only=True, slots=True)
class User:
    id: int = required(INT)
    is_bot: bool = required(BOOL)
    first_name: str = required(STR)
    last_name: Maybe[Optional[str]] = optional(STR)
    username: Maybe[Optional[str]] = optional(STR)
    language_code: Maybe[Optional[str]] = optional(STR)
    is_premium: Maybe[Optional[bool]] = optional(BOOL)
    added_to_attachment_menu: Maybe[Optional[bool]] = optional(BOOL)
    can_join_groups: Maybe[Optional[bool]] = optional(BOOL)
    can_read_all_group_messages: Maybe[Optional[bool]] = optional(BOOL)
    supports_inline_queries: Maybe[Optional[bool]] = optional(BOOL)
    can_connect_to_business: Maybe[Optional[bool]] = optional(BOOL)


@dataclass(frozen=True, kw_only=True, slots=True)
class Chat:
    id: int = required(INT)
    type: ChatType = required(EnumOf(ChatType))
    title: Maybe[Optional[str]] = optional(STR)
    username: Maybe[Optional[str]] = optional(STR)
    first_name: Maybe[Optional[str]] = optional(STR)
    last_name: Maybe[Optional[str]] = optional(STR)
    is_forum: Maybe[Optional[bool]] = optional(BOOL)


@dataclass(frozen=True, kw_only=True, slots=True)
class FileMeta:
    """Identifiers every downloadable file carries.

    Embedded into file-bearing entities; its fields sit directly in the
    entity's JSON object.
    """

    file_id: str = required(STR)
    file_unique_id: str = required(STR)
    file_size: Maybe[Optional[int]] = optional(INT)


@dataclass(frozen=True, kw_only=True, slots=True)
class PhotoSize:
    file: FileMeta = embedded(FileMeta)
    width: int = required(INT)
    height: int = required(INT)


@dataclass(frozen=True, kw_only=True, slots=True)
class Document:
    file: FileMeta = embedded(FileMeta)
    thumbnail: Maybe[Optional[PhotoSize]] = optional(ObjectOf(PhotoSize))
    file_name: Maybe[Optional[str]] = optional(STR)
    mime_type: Maybe[Optional[str]] = optional(STR)


@dataclass(frozen=True, kw_only=True, slots=True)
class Video:
    file: FileMeta = embedded(FileMeta)
    width: int = required(INT)
    height: int = required(INT)
    duration: int = required(INT)
    thumbnail: Maybe[Optional[PhotoSize]] = optional(ObjectOf(PhotoSize))
    file_name: Maybe[Optional[str]] = optional(STR)
    mime_type: Maybe[Optional[str]] = optional(STR)


@dataclass(frozen=True, kw_only=True, slots=True)
class Voice:
    file: FileMeta = embedded(FileMeta)
    duration: int = required(INT)
    mime_type: Maybe[Optional[str]] = optional(STR)


@dataclass(frozen=True, kw_only=True, slots=True)
class MessageEntity:
    # open set of entity kinds, kept as text
    type: str = required(STR)
    offset: int = required(INT)
    length: int = required(INT)
    url: Maybe[Optional[str]] = optional(STR)
    user: Maybe[Optional[User]] = optional(ObjectOf(User))
    language: Maybe[Optional[str]] = optional(STR)
    custom_emoji_id: Maybe[Optional[str]] = optional(STR)


@dataclass(frozen=True, kw_only=True, slots=True)
class Dice:
    # literal symbol as sent by the server, see DiceEmoji for outgoing calls
    emoji: str = required(STR)
    value: int = required(INT)


@dataclass(frozen=True, kw_only=True, slots=True)
class Location:
    latitude: float = required(FLOAT)
    longitude: float = required(FLOAT)
    horizontal_accuracy: Maybe[Optional[float]] = optional(FLOAT)
    live_period: Maybe[Optional[int]] = optional(INT)
    heading: Maybe[Optional[int]] = optional(INT)
    proximity_alert_radius: Maybe[Optional[int]] = optional(INT)


__all__ = [
    "Chat",
    "Dice",
    "Document",
    "FileMeta",
    "Location",
    "MessageEntity",
    "PhotoSize",
    "User",
    "Video",
    "Voice",
]
