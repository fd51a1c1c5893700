"""Errors reported back for Telegram Passport elements."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ..codec import STR, EnumOf, ListOf, required
from ..enums import EncryptedPassportElementType, PassportElementErrorSource
from ..registry import Hierarchy, Variant


@dataclass(frozen=True, kw_only=True, slots=True)
class PassportElementError(Variant):
    type: EncryptedPassportElementType = required(EnumOf(EncryptedPassportElementType))
    message: str = required(STR)


PASSPORT_ELEMENT_ERRORS = Hierarchy(
    "passport_element_error",
    base=PassportElementError,
    field="source",
    kinds=PassportElementErrorSource,
)


@PASSPORT_ELEMENT_ERRORS.variant(PassportElementErrorSource.DATA)
@dataclass(frozen=True, kw_only=True, slots=True)
class PassportElementErrorDataField(PassportElementError):
    field_name: str = required(STR)
    data_hash: str = required(STR)


@PASSPORT_ELEMENT_ERRORS.variant(PassportElementErrorSource.FRONT_SIDE)
@dataclass(frozen=True, kw_only=True, slots=True)
class PassportElementErrorFrontSide(PassportElementError):
    file_hash: str = required(STR)


@PASSPORT_ELEMENT_ERRORS.variant(PassportElementErrorSource.REVERSE_SIDE)
@dataclass(frozen=True, kw_only=True, slots=True)
class PassportElementErrorReverseSide(PassportElementError):
    file_hash: str = required(STR)


@PASSPORT_ELEMENT_ERRORS.variant(PassportElementErrorSource.SELFIE)
@dataclass(frozen=True, kw_only=True, slots=True)
class PassportElementErrorSelfie(PassportElementError):
    file_hash: str = required(STR)


@PASSPORT_ELEMENT_ERRORS.variant(PassportElementErrorSource.FILE)
@dataclass(frozen=True, kw_only=True, slots=True)
class PassportElementErrorFile(PassportElementError):
    file_hash: str = required(STR)


@PASSPORT_ELEMENT_ERRORS.variant(PassportElementErrorSource.FILES)
@dataclass(frozen=True, kw_only=True, slots=True)
class PassportElementErrorFiles(PassportElementError):
    file_hashes: List[str] = required(ListOf(STR))


@PASSPORT_ELEMENT_ERRORS.variant(PassportElementErrorSource.TRANSLATION_FILE)
@dataclass(frozen=True, kw_only=True, slots=True)
class PassportElementErrorTranslationFile(PassportElementError):
    file_hash: str = required(STR)


@PASSPORT_ELEMENT_ERRORS.variant(PassportElementErrorSource.TRANSLATION_FILES)
@dataclass(frozen=True, kw_only=True, slots=True)
class PassportElementErrorTranslationFiles(PassportElementError):
    file_hashes: List[str] = required(ListOf(STR))


@PASSPORT_ELEMENT_ERRORS.variant(PassportElementErrorSource.UNSPECIFIED)
@dataclass(frozen=True, kw_only=True, slots=True)
class PassportElementErrorUnspecified(PassportElementError):
    element_hash: str = required(STR)


__all__ = [
    "PASSPORT_ELEMENT_ERRORS",
    "PassportElementError",
    "PassportElementErrorDataField",
    "PassportElementErrorFile",
    "PassportElementErrorFiles",
    "PassportElementErrorFrontSide",
    "PassportElementErrorReverseSide",
    "PassportElementErrorSelfie",
    "PassportElementErrorTranslationFile",
    "PassportElementErrorTranslationFiles",
    "PassportElementErrorUnspecified",
]
