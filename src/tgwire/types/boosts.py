"""Chat boosts and the sources they were obtained from."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from ..codec import (
    BOOL,
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
from ..enums import ChatBoostSourceKind
from ..registry import Hierarchy, Variant
from .common import Chat, User


class ChatBoostSource(Variant):
    __slots__ = ()


# Older payloads and some proxies label the source with "type".
CHAT_BOOST_SOURCES = Hierarchy(
    "chat_boost_source",
    base=ChatBoostSource,
    field="source",
    kinds=ChatBoostSourceKind,
    aliases=("type",),
)


@CHAT_BOOST_SOURCES.variant(ChatBoostSourceKind.PREMIUM)
@dataclass(frozen=True, kw_only=True, slots=True)
class ChatBoostSourcePremium(ChatBoostSource):
    """Boost from a Premium subscription (own or gifted)."""

    user: User = required(ObjectOf(User))


@CHAT_BOOST_SOURCES.variant(ChatBoostSourceKind.GIFT_CODE)
@dataclass(frozen=True, kw_only=True, slots=True)
class ChatBoostSourceGiftCode(ChatBoostSource):
    user: User = required(ObjectOf(User))


@CHAT_BOOST_SOURCES.variant(ChatBoostSourceKind.GIVEAWAY)
@dataclass(frozen=True, kw_only=True, slots=True)
class ChatBoostSourceGiveaway(ChatBoostSource):
    """Boost from a Premium giveaway.

    ``giveaway_message_id`` may be 0 while the giveaway message is unsent.
    ``user`` is only present once someone won the prize.
    """

    giveaway_message_id: int = required(INT)
    user: Maybe[Optional[User]] = optional(ObjectOf(User))
    is_unclaimed: Maybe[Optional[bool]] = optional(BOOL)


@dataclass(frozen=True, kw_only=True, slots=True)
class ChatBoost:
    boost_id: str = required(STR)
    add_date: datetime = required(DATETIME)
    expiration_date: datetime = required(DATETIME)
    source: ChatBoostSource = required(VariantOf(ChatBoostSource))


@dataclass(frozen=True, kw_only=True, slots=True)
class ChatBoostUpdated:
    chat: Chat = required(ObjectOf(Chat))
    boost: ChatBoost = required(ObjectOf(ChatBoost))


@dataclass(frozen=True, kw_only=True, slots=True)
class ChatBoostRemoved:
    chat: Chat = required(ObjectOf(Chat))
    boost_id: str = required(STR)
    remove_date: datetime = required(DATETIME)
    source: ChatBoostSource = required(VariantOf(ChatBoostSource))


@dataclass(frozen=True, kw_only=True, slots=True)
class ChatBoostAdded:
    boost_count: int = required(INT)


@dataclass(frozen=True, kw_only=True, slots=True)
class UserChatBoosts:
    boosts: List[ChatBoost] = required(ListOf(ObjectOf(ChatBoost)))


__all__ = [
    "CHAT_BOOST_SOURCES",
    "ChatBoost",
    "ChatBoostAdded",
    "ChatBoostRemoved",
    "ChatBoostSource",
    "ChatBoostSourceGiftCode",
    "ChatBoostSourceGiveaway",
    "ChatBoostSourcePremium",
    "ChatBoostUpdated",
    "UserChatBoosts",
]
