"""Typed outgoing Bot API calls.

Each request is a frozen dataclass declared like any protocol type, plus
the API ``method`` name and a codec for its ``result``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, List, Optional, Union

from .codec import (
    BOOL,
    CHAT_ID,
    FILE,
    INT,
    STR,
    EnumOf,
    FieldCodec,
    ListOf,
    Maybe,
    ObjectOf,
    VariantOf,
    optional,
    required,
)
from .enums import DiceEmoji, ParseMode
from .files import InputFile
from .types import (
    InputMedia,
    Message,
    MessageEntity,
    PassportElementError,
    ReactionType,
    User,
    UserChatBoosts,
)

ChatId = Union[int, str]

METHODS: dict[str, type["BotRequest"]] = {}


class BotRequest:
    __slots__ = ()

    method: ClassVar[str]
    result: ClassVar[FieldCodec]

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        method = cls.__dict__.get("method")
        if isinstance(method, str):
            METHODS[method] = cls


@dataclass(frozen=True, kw_only=True, slots=True)
class GetMe(BotRequest):
    method = "getMe"
    result = ObjectOf(User)


@dataclass(frozen=True, kw_only=True, slots=True)
class SendPhoto(BotRequest):
    method = "sendPhoto"
    result = ObjectOf(Message)

    chat_id: ChatId = required(CHAT_ID)
    photo: InputFile = required(FILE)
    message_thread_id: Maybe[Optional[int]] = optional(INT)
    thumbnail: Maybe[Optional[InputFile]] = optional(FILE)
    caption: Maybe[Optional[str]] = optional(STR)
    parse_mode: Maybe[Optional[ParseMode]] = optional(EnumOf(ParseMode))
    caption_entities: Maybe[Optional[List[MessageEntity]]] = optional(
        ListOf(ObjectOf(MessageEntity))
    )
    show_caption_above_media: Maybe[Optional[bool]] = optional(BOOL)
    has_spoiler: Maybe[Optional[bool]] = optional(BOOL)
    disable_notification: Maybe[Optional[bool]] = optional(BOOL)
    protect_content: Maybe[Optional[bool]] = optional(BOOL)


@dataclass(frozen=True, kw_only=True, slots=True)
class SendVideo(BotRequest):
    method = "sendVideo"
    result = ObjectOf(Message)

    chat_id: ChatId = required(CHAT_ID)
    video: InputFile = required(FILE)
    message_thread_id: Maybe[Optional[int]] = optional(INT)
    duration: Maybe[Optional[int]] = optional(INT)
    width: Maybe[Optional[int]] = optional(INT)
    height: Maybe[Optional[int]] = optional(INT)
    thumbnail: Maybe[Optional[InputFile]] = optional(FILE)
    caption: Maybe[Optional[str]] = optional(STR)
    parse_mode: Maybe[Optional[ParseMode]] = optional(EnumOf(ParseMode))
    supports_streaming: Maybe[Optional[bool]] = optional(BOOL)
    has_spoiler: Maybe[Optional[bool]] = optional(BOOL)
    disable_notification: Maybe[Optional[bool]] = optional(BOOL)


@dataclass(frozen=True, kw_only=True, slots=True)
class SendDocument(BotRequest):
    method = "sendDocument"
    result = ObjectOf(Message)

    chat_id: ChatId = required(CHAT_ID)
    document: InputFile = required(FILE)
    message_thread_id: Maybe[Optional[int]] = optional(INT)
    thumbnail: Maybe[Optional[InputFile]] = optional(FILE)
    caption: Maybe[Optional[str]] = optional(STR)
    parse_mode: Maybe[Optional[ParseMode]] = optional(EnumOf(ParseMode))
    disable_content_type_detection: Maybe[Optional[bool]] = optional(BOOL)
    disable_notification: Maybe[Optional[bool]] = optional(BOOL)


@dataclass(frozen=True, kw_only=True, slots=True)
class SendMediaGroup(BotRequest):
    """Album of 2-10 photos/videos, or documents, or audio files."""

    method = "sendMediaGroup"
    result = ListOf(ObjectOf(Message))

    chat_id: ChatId = required(CHAT_ID)
    media: List[InputMedia] = required(ListOf(VariantOf(InputMedia)))
    message_thread_id: Maybe[Optional[int]] = optional(INT)
    disable_notification: Maybe[Optional[bool]] = optional(BOOL)
    protect_content: Maybe[Optional[bool]] = optional(BOOL)


@dataclass(frozen=True, kw_only=True, slots=True)
class SendDice(BotRequest):
    method = "sendDice"
    result = ObjectOf(Message)

    chat_id: ChatId = required(CHAT_ID)
    emoji: Maybe[Optional[DiceEmoji]] = optional(EnumOf(DiceEmoji))
    message_thread_id: Maybe[Optional[int]] = optional(INT)
    disable_notification: Maybe[Optional[bool]] = optional(BOOL)


@dataclass(frozen=True, kw_only=True, slots=True)
class SetMessageReaction(BotRequest):
    method = "setMessageReaction"
    result = BOOL

    chat_id: ChatId = required(CHAT_ID)
    message_id: int = required(INT)
    reaction: Maybe[Optional[List[ReactionType]]] = optional(
        ListOf(VariantOf(ReactionType))
    )
    is_big: Maybe[Optional[bool]] = optional(BOOL)


@dataclass(frozen=True, kw_only=True, slots=True)
class GetUserChatBoosts(BotRequest):
    method = "getUserChatBoosts"
    result = ObjectOf(UserChatBoosts)

    chat_id: ChatId = required(CHAT_ID)
    user_id: int = required(INT)


@dataclass(frozen=True, kw_only=True, slots=True)
class SetPassportDataErrors(BotRequest):
    method = "setPassportDataErrors"
    result = BOOL

    user_id: int = required(INT)
    errors: List[PassportElementError] = required(
        ListOf(VariantOf(PassportElementError))
    )


__all__ = [
    "METHODS",
    "BotRequest",
    "GetMe",
    "GetUserChatBoosts",
    "SendDice",
    "SendDocument",
    "SendMediaGroup",
    "SendPhoto",
    "SendVideo",
    "SetMessageReaction",
    "SetPassportDataErrors",
]
