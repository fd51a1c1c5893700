from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from ..codec import (
    DATETIME,
    INT,
    STR,
    ListOf,
    Maybe,
    ObjectOf,
    VariantOf,
    optional,
    required,
)
from .backgrounds import ChatBackground
from .boosts import ChatBoostAdded
from .common import (
    Chat,
    Dice,
    Document,
    Location,
    MessageEntity,
    PhotoSize,
    User,
    Video,
    Voice,
)
from .origins import MessageOrigin


@dataclass(frozen=True, kw_only=True, slots=True)
class Message:
    """Subset of the message object covering the modelled content kinds."""

    message_id: int = required(INT)
    date: datetime = required(DATETIME)
    chat: Chat = required(ObjectOf(Chat))
    # "from" is a Python keyword
    from_user: Maybe[Optional[User]] = optional(ObjectOf(User), name="from")
    sender_chat: Maybe[Optional[Chat]] = optional(ObjectOf(Chat))
    message_thread_id: Maybe[Optional[int]] = optional(INT)
    forward_origin: Maybe[Optional[MessageOrigin]] = optional(VariantOf(MessageOrigin))
    edit_date: Maybe[Optional[datetime]] = optional(DATETIME)
    media_group_id: Maybe[Optional[str]] = optional(STR)
    text: Maybe[Optional[str]] = optional(STR)
    entities: Maybe[Optional[List[MessageEntity]]] = optional(
        ListOf(ObjectOf(MessageEntity))
    )
    caption: Maybe[Optional[str]] = optional(STR)
    caption_entities: Maybe[Optional[List[MessageEntity]]] = optional(
        ListOf(ObjectOf(MessageEntity))
    )
    photo: Maybe[Optional[List[PhotoSize]]] = optional(ListOf(ObjectOf(PhotoSize)))
    document: Maybe[Optional[Document]] = optional(ObjectOf(Document))
    video: Maybe[Optional[Video]] = optional(ObjectOf(Video))
    voice: Maybe[Optional[Voice]] = optional(ObjectOf(Voice))
    dice: Maybe[Optional[Dice]] = optional(ObjectOf(Dice))
    location: Maybe[Optional[Location]] = optional(ObjectOf(Location))
    chat_background_set: Maybe[Optional[ChatBackground]] = optional(
        ObjectOf(ChatBackground)
    )
    boost_added: Maybe[Optional[ChatBoostAdded]] = optional(ObjectOf(ChatBoostAdded))


__all__ = ["Message"]
