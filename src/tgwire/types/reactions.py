from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import List

from ..codec import DATETIME, INT, STR, ListOf, ObjectOf, VariantOf, required
from ..enums import ReactionTypeKind
from ..registry import Hierarchy, Variant
from .common import Chat


class ReactionType(Variant):
    """Type of a reaction; see :class:`ReactionTypeKind`."""

    __slots__ = ()


REACTION_TYPES = Hierarchy(
    "reaction_type", base=ReactionType, field="type", kinds=ReactionTypeKind
)


@REACTION_TYPES.variant(ReactionTypeKind.EMOJI)
@dataclass(frozen=True, kw_only=True, slots=True)
class ReactionTypeEmoji(ReactionType):
    """Standard emoji reaction; see :class:`~tgwire.enums.KnownReactionEmoji`."""

    emoji: str = required(STR)


@REACTION_TYPES.variant(ReactionTypeKind.CUSTOM_EMOJI)
@dataclass(frozen=True, kw_only=True, slots=True)
class ReactionTypeCustomEmoji(ReactionType):
    custom_emoji_id: str = required(STR)


@REACTION_TYPES.variant(ReactionTypeKind.PAID)
@dataclass(frozen=True, kw_only=True, slots=True)
class ReactionTypePaid(ReactionType):
    pass


@dataclass(frozen=True, kw_only=True, slots=True)
class ReactionCount:
    type: ReactionType = required(VariantOf(ReactionType))
    total_count: int = required(INT)


@dataclass(frozen=True, kw_only=True, slots=True)
class MessageReactionCountUpdated:
    chat: Chat = required(ObjectOf(Chat))
    message_id: int = required(INT)
    date: datetime = required(DATETIME)
    reactions: List[ReactionCount] = required(ListOf(ObjectOf(ReactionCount)))


__all__ = [
    "REACTION_TYPES",
    "MessageReactionCountUpdated",
    "ReactionCount",
    "ReactionType",
    "ReactionTypeCustomEmoji",
    "ReactionTypeEmoji",
    "ReactionTypePaid",
]
