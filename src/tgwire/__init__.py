"""Typed wire binding for the Telegram Bot API."""

from . import types
from .client import BotApiClient
from .codec import (
    UNSET,
    Maybe,
    decode,
    decode_json,
    dumps,
    encode,
    is_set,
    loads,
)
from .config import ClientConfig, ClientConfigError, load_client_config
from .enums import DiceEmoji, FileType, ParseMode, WireEnum
from .envelope import (
    ProtocolError,
    Response,
    ResponseParameters,
    Success,
    decode_response,
    decode_response_json,
)
from .errors import (
    AttachmentUnavailableError,
    CodecError,
    DecodeError,
    DuplicateAttachmentNameError,
    EncodeError,
    MalformedPayloadError,
    MissingDiscriminatorError,
    MissingRequiredFieldError,
    RegistryError,
    TelegramAPIError,
    TelegramTransportError,
    TypeMismatchError,
)
from .files import (
    FileResolver,
    InputFile,
    InputFileId,
    InputFileStream,
    InputFileUrl,
    input_file,
)
from .methods import METHODS, BotRequest
from .multipart import (
    JsonPayload,
    MultipartPayload,
    build_payload,
    build_payload_async,
)
from .registry import HIERARCHIES, Hierarchy, UnknownVariant, Variant
from .storage import FileCache

__all__ = [
    "AttachmentUnavailableError",
    "BotApiClient",
    "BotRequest",
    "ClientConfig",
    "ClientConfigError",
    "CodecError",
    "DecodeError",
    "DiceEmoji",
    "DuplicateAttachmentNameError",
    "EncodeError",
    "FileCache",
    "FileResolver",
    "FileType",
    "HIERARCHIES",
    "Hierarchy",
    "InputFile",
    "InputFileId",
    "InputFileStream",
    "InputFileUrl",
    "JsonPayload",
    "METHODS",
    "MalformedPayloadError",
    "Maybe",
    "MissingDiscriminatorError",
    "MissingRequiredFieldError",
    "MultipartPayload",
    "ParseMode",
    "ProtocolError",
    "RegistryError",
    "Response",
    "ResponseParameters",
    "Success",
    "TelegramAPIError",
    "TelegramTransportError",
    "TypeMismatchError",
    "UNSET",
    "UnknownVariant",
    "Variant",
    "WireEnum",
    "build_payload",
    "build_payload_async",
    "decode",
    "decode_json",
    "decode_response",
    "decode_response_json",
    "dumps",
    "encode",
    "input_file",
    "is_set",
    "load_client_config",
    "loads",
    "types",
]
