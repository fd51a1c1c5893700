from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..codec import DATETIME, INT, STR, Maybe, ObjectOf, optional, required
from ..enums import MessageOriginKind
from ..registry import Hierarchy, Variant
from .common import Chat, User


@dataclass(frozen=True, kw_only=True, slots=True)
class MessageOrigin(Variant):
    """Where a forwarded message was originally sent from."""

    date: datetime = required(DATETIME)


MESSAGE_ORIGINS = Hierarchy(
    "message_origin", base=MessageOrigin, field="type", kinds=MessageOriginKind
)


@MESSAGE_ORIGINS.variant(MessageOriginKind.USER)
@dataclass(frozen=True, kw_only=True, slots=True)
class MessageOriginUser(MessageOrigin):
    sender_user: User = required(ObjectOf(User))


@MESSAGE_ORIGINS.variant(MessageOriginKind.HIDDEN_USER)
@dataclass(frozen=True, kw_only=True, slots=True)
class MessageOriginHiddenUser(MessageOrigin):
    sender_user_name: str = required(STR)


@MESSAGE_ORIGINS.variant(MessageOriginKind.CHAT)
@dataclass(frozen=True, kw_only=True, slots=True)
class MessageOriginChat(MessageOrigin):
    sender_chat: Chat = required(ObjectOf(Chat))
    author_signature: Maybe[Optional[str]] = optional(STR)


@MESSAGE_ORIGINS.variant(MessageOriginKind.CHANNEL)
@dataclass(frozen=True, kw_only=True, slots=True)
class MessageOriginChannel(MessageOrigin):
    chat: Chat = required(ObjectOf(Chat))
    message_id: int = required(INT)
    author_signature: Maybe[Optional[str]] = optional(STR)


__all__ = [
    "MESSAGE_ORIGINS",
    "MessageOrigin",
    "MessageOriginChannel",
    "MessageOriginChat",
    "MessageOriginHiddenUser",
    "MessageOriginUser",
]
