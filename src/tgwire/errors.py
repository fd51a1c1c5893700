from __future__ import annotations

from typing import Any, Optional


class CodecError(Exception):
    """Base error for wire encode/decode failures."""

    def __init__(self, message: str, *, path: Optional[str] = None) -> None:
        if path:
            message = f"{message} (at {path})"
        super().__init__(message)
        self.path = path


class DecodeError(CodecError):
    """Inbound JSON could not be turned into a typed object."""


class MissingDiscriminatorError(DecodeError):
    """Polymorphic object without its discriminator field."""

    def __init__(self, hierarchy: str, field: str, *, path: Optional[str] = None) -> None:
        super().__init__(
            f"{hierarchy} object is missing discriminator field '{field}'", path=path
        )
        self.hierarchy = hierarchy
        self.field = field


class MissingRequiredFieldError(DecodeError):
    def __init__(self, type_name: str, field: str, *, path: Optional[str] = None) -> None:
        super().__init__(f"{type_name} requires field '{field}'", path=path)
        self.type_name = type_name
        self.field = field


class TypeMismatchError(DecodeError):
    def __init__(self, expected: str, value: Any, *, path: Optional[str] = None) -> None:
        super().__init__(
            f"expected {expected}, got {type(value).__name__} {value!r:.80}",
            path=path,
        )
        self.expected = expected
        self.value = value


class MalformedPayloadError(DecodeError):
    """Payload is not valid JSON or not shaped like a protocol object."""


class EncodeError(CodecError):
    """Outgoing object could not be encoded."""


class AttachmentUnavailableError(EncodeError):
    def __init__(self, name: str, reason: str, *, path: Optional[str] = None) -> None:
        super().__init__(f"attachment '{name}' is unavailable: {reason}", path=path)
        self.name = name
        self.reason = reason


class DuplicateAttachmentNameError(EncodeError):
    def __init__(self, name: str, *, path: Optional[str] = None) -> None:
        super().__init__(f"attachment name '{name}' is already in use", path=path)
        self.name = name


class RegistryError(CodecError):
    """Invalid discriminator registration."""


class TelegramAPIError(Exception):
    """Raised when a caller unwraps a failed Bot API response."""

    def __init__(
        self,
        code: int,
        description: str,
        *,
        retry_after: Optional[int] = None,
        migrate_to_chat_id: Optional[int] = None,
    ) -> None:
        super().__init__(f"Bot API error {code}: {description}")
        self.code = code
        self.description = description
        self.retry_after = retry_after
        self.migrate_to_chat_id = migrate_to_chat_id


class TelegramTransportError(Exception):
    """The HTTP exchange itself failed before a response was received."""
