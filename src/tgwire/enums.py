"""Enumerations used on the wire.

Every member carries a stable integer ``code`` (starting at 1, never reused),
a lowercase ``token`` and a human-visible ``display`` string. Which of the
three travels on the wire is chosen per enum via ``__wire_by__``.
"""

from __future__ import annotations

import functools
from enum import Enum
from typing import Any, Mapping, Optional

WIRE_STYLES = ("token", "code", "display")


class WireEnum(Enum):
    __wire_by__ = "token"

    def __new__(cls, code: int, token: str, display: Optional[str] = None):
        member = object.__new__(cls)
        member._value_ = code
        member.code = code
        member.token = token
        member.display = display if display is not None else token
        return member

    def wire_value(self, by: Optional[str] = None) -> Any:
        return getattr(self, by or type(self).__wire_by__)

    @classmethod
    def lookup(cls, raw: Any, by: Optional[str] = None) -> Optional["WireEnum"]:
        """Return the member whose wire value is *raw*, or ``None``."""
        style = by or cls.__wire_by__
        if style == "code" and isinstance(raw, bool):
            return None
        try:
            return _wire_table(cls, style).get(raw)
        except TypeError:
            # unhashable raw value
            return None

    def __str__(self) -> str:
        return str(self.wire_value())


@functools.lru_cache(maxsize=None)
def _wire_table(enum_cls: type[WireEnum], style: str) -> Mapping[Any, WireEnum]:
    if style not in WIRE_STYLES:
        raise ValueError(f"unknown wire style {style!r}")
    return {getattr(member, style): member for member in enum_cls}


class ReactionTypeKind(WireEnum):
    EMOJI = 1, "emoji"
    CUSTOM_EMOJI = 2, "custom_emoji"
    PAID = 3, "paid"


class ChatBoostSourceKind(WireEnum):
    PREMIUM = 1, "premium"
    GIFT_CODE = 2, "gift_code"
    GIVEAWAY = 3, "giveaway"


class MessageOriginKind(WireEnum):
    USER = 1, "user"
    HIDDEN_USER = 2, "hidden_user"
    CHAT = 3, "chat"
    CHANNEL = 4, "channel"


class BackgroundFillKind(WireEnum):
    SOLID = 1, "solid"
    GRADIENT = 2, "gradient"
    FREEFORM_GRADIENT = 3, "freeform_gradient"


class BackgroundTypeKind(WireEnum):
    FILL = 1, "fill"
    WALLPAPER = 2, "wallpaper"
    PATTERN = 3, "pattern"
    CHAT_THEME = 4, "chat_theme"


class PassportElementErrorSource(WireEnum):
    DATA = 1, "data"
    FRONT_SIDE = 2, "front_side"
    REVERSE_SIDE = 3, "reverse_side"
    SELFIE = 4, "selfie"
    FILE = 5, "file"
    FILES = 6, "files"
    TRANSLATION_FILE = 7, "translation_file"
    TRANSLATION_FILES = 8, "translation_files"
    UNSPECIFIED = 9, "unspecified"


class InputMediaType(WireEnum):
    PHOTO = 1, "photo"
    VIDEO = 2, "video"
    ANIMATION = 3, "animation"
    AUDIO = 4, "audio"
    DOCUMENT = 5, "document"


class FileType(WireEnum):
    STREAM = 1, "stream"
    ID = 2, "id"
    URL = 3, "url"


class DiceEmoji(WireEnum):
    """Emoji on which a dice throw animation is based.

    Sent as the literal symbol, e.g. ``"🎲"``.
    """

    __wire_by__ = "display"

    DICE = 1, "dice", "🎲"
    DARTS = 2, "darts", "🎯"
    BASKETBALL = 3, "basketball", "🏀"
    FOOTBALL = 4, "football", "⚽"
    SLOT_MACHINE = 5, "slot_machine", "🎰"
    BOWLING = 6, "bowling", "🎳"

    @property
    def max_value(self) -> int:
        if self is DiceEmoji.SLOT_MACHINE:
            return 64
        if self in (DiceEmoji.BASKETBALL, DiceEmoji.FOOTBALL):
            return 5
        return 6


class ChatType(WireEnum):
    PRIVATE = 1, "private"
    GROUP = 2, "group"
    SUPERGROUP = 3, "supergroup"
    CHANNEL = 4, "channel"
    SENDER = 5, "sender"


class ParseMode(WireEnum):
    MARKDOWN = 1, "Markdown"
    HTML = 2, "HTML"
    MARKDOWN_V2 = 3, "MarkdownV2"


class EncryptedPassportElementType(WireEnum):
    PERSONAL_DETAILS = 1, "personal_details"
    PASSPORT = 2, "passport"
    DRIVER_LICENSE = 3, "driver_license"
    IDENTITY_CARD = 4, "identity_card"
    INTERNAL_PASSPORT = 5, "internal_passport"
    ADDRESS = 6, "address"
    UTILITY_BILL = 7, "utility_bill"
    BANK_STATEMENT = 8, "bank_statement"
    RENTAL_AGREEMENT = 9, "rental_agreement"
    PASSPORT_REGISTRATION = 10, "passport_registration"
    TEMPORARY_REGISTRATION = 11, "temporary_registration"
    PHONE_NUMBER = 12, "phone_number"
    EMAIL = 13, "email"


class KnownReactionEmoji:
    """Shortcuts for the emoji accepted by ``ReactionTypeEmoji``."""

    THUMBS_UP = "👍"
    THUMBS_DOWN = "👎"
    RED_HEART = "❤"
    FIRE = "🔥"
    SMILING_FACE_WITH_HEARTS = "🥰"
    CLAPPING_HANDS = "👏"
    BEAMING_FACE_WITH_SMILING_EYES = "😁"
    THINKING_FACE = "🤔"
    EXPLODING_HEAD = "🤯"
    FACE_SCREAMING_IN_FEAR = "😱"
    FACE_WITH_SYMBOLS_ON_MOUTH = "🤬"
    CRYING_FACE = "😢"
    PARTY_POPPER = "🎉"
    STAR_STRUCK = "🤩"
    FACE_VOMITING = "🤮"
    PILE_OF_POO = "💩"
    FOLDED_HANDS = "🙏"
    OK_HAND = "👌"
    DOVE = "🕊"
    CLOWN_FACE = "🤡"
    YAWNING_FACE = "🥱"
    WOOZY_FACE = "🥴"
    SMILING_FACE_WITH_HEART_EYES = "😍"
    SPOUTING_WHALE = "🐳"
    HEART_ON_FIRE = "❤‍🔥"
    NEW_MOON_FACE = "🌚"
    HOT_DOG = "🌭"
    HUNDRED_POINTS = "💯"
    ROLLING_ON_THE_FLOOR_LAUGHING = "🤣"
    HIGH_VOLTAGE = "⚡"
    BANANA = "🍌"
    TROPHY = "🏆"
    BROKEN_HEART = "💔"
    FACE_WITH_RAISED_EYEBROW = "🤨"
    NEUTRAL_FACE = "😐"
    STRAWBERRY = "🍓"
    BOTTLE_WITH_POPPING_CORK = "🍾"
    KISS_MARK = "💋"
    MIDDLE_FINGER = "🖕"
    SMILING_FACE_WITH_HORNS = "😈"
    SLEEPING_FACE = "😴"
    LOUDLY_CRYING_FACE = "😭"
    NERD_FACE = "🤓"
    GHOST = "👻"
    MAN_TECHNOLOGIST = "👨‍💻"
    EYES = "👀"
    JACK_O_LANTERN = "🎃"
    SEE_NO_EVIL_MONKEY = "🙈"
    SMILING_FACE_WITH_HALO = "😇"
    FEARFUL_FACE = "😨"
    HANDSHAKE = "🤝"
    WRITING_HAND = "✍"
    SMILING_FACE_WITH_OPEN_HANDS = "🤗"
    SALUTING_FACE = "🫡"
    SANTA_CLAUS = "🎅"
    CHRISTMAS_TREE = "🎄"
    SNOWMAN = "☃"
    NAIL_POLISH = "💅"
    ZANY_FACE = "🤪"
    MOAI = "🗿"
    COOL_BUTTON = "🆒"
    HEART_WITH_ARROW = "💘"
    HEAR_NO_EVIL_MONKEY = "🙉"
    UNICORN = "🦄"
    FACE_BLOWING_A_KISS = "😘"
    PILL = "💊"
    SPEAK_NO_EVIL_MONKEY = "🙊"
    SMILING_FACE_WITH_SUNGLASSES = "😎"
    ALIEN_MONSTER = "👾"
    MAN_SHRUGGING = "🤷‍♂"
    SHRUGGING_PERSON = "🤷"
    WOMAN_SHRUGGING = "🤷‍♀"
    ENRAGED_FACE = "😡"
