"""Uniform success/failure wrapper around every call's response.

``{"ok": true, "result": ...}`` decodes to :class:`Success`;
``{"ok": false, "error_code": ..., "description": ..., "parameters": ...}``
decodes to :class:`ProtocolError`. ``result`` is only looked at once ``ok``
is known to be true.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Mapping, Optional, TypeVar, Union

from .codec import (
    INT,
    ROOT_PATH,
    Maybe,
    child_path,
    codec_for,
    decode_object,
    is_set,
    loads,
    optional,
)
from .errors import MalformedPayloadError, TelegramAPIError, TypeMismatchError

T = TypeVar("T")


@dataclass(frozen=True, kw_only=True, slots=True)
class ResponseParameters:
    """Hints describing why a call failed and how to recover."""

    migrate_to_chat_id: Maybe[Optional[int]] = optional(INT)
    retry_after: Maybe[Optional[int]] = optional(INT)


@dataclass(frozen=True)
class Success(Generic[T]):
    result: T

    ok = True

    def unwrap(self) -> T:
        return self.result


@dataclass(frozen=True)
class ProtocolError:
    """Application-level failure reported by the server.

    Returned as a value, not raised; call :meth:`raise_for_error` or
    :meth:`unwrap` to turn it into :class:`TelegramAPIError`.
    """

    code: int
    description: str
    parameters: Optional[ResponseParameters] = None

    ok = False

    @property
    def retry_after(self) -> Optional[int]:
        if self.parameters is None or not is_set(self.parameters.retry_after):
            return None
        return self.parameters.retry_after

    @property
    def migrate_to_chat_id(self) -> Optional[int]:
        if self.parameters is None or not is_set(self.parameters.migrate_to_chat_id):
            return None
        return self.parameters.migrate_to_chat_id

    def to_exception(self) -> TelegramAPIError:
        return TelegramAPIError(
            self.code,
            self.description,
            retry_after=self.retry_after,
            migrate_to_chat_id=self.migrate_to_chat_id,
        )

    def raise_for_error(self) -> None:
        raise self.to_exception()

    def unwrap(self) -> Any:
        raise self.to_exception()


Response = Union[Success[T], ProtocolError]


def decode_response(raw: Any, result: Any) -> Response:
    """Decode an envelope; *result* is a class, hierarchy base or codec."""
    if not isinstance(raw, Mapping):
        raise MalformedPayloadError("response envelope must be a JSON object")
    ok = raw.get("ok")
    if not isinstance(ok, bool):
        raise MalformedPayloadError("response envelope has no boolean 'ok'")
    if not ok:
        return _decode_failure(raw)
    if "result" not in raw:
        raise MalformedPayloadError("successful response has no 'result'")
    value = codec_for(result).decode(raw["result"], child_path(ROOT_PATH, "result"))
    return Success(result=value)


def decode_response_json(text: Union[str, bytes, bytearray], result: Any) -> Response:
    return decode_response(loads(text), result)


def _decode_failure(raw: Mapping[str, Any]) -> ProtocolError:
    code = raw.get("error_code", 0)
    if isinstance(code, bool) or not isinstance(code, int):
        raise TypeMismatchError("int", code, path=child_path(ROOT_PATH, "error_code"))
    description = raw.get("description", "")
    if not isinstance(description, str):
        raise TypeMismatchError(
            "str", description, path=child_path(ROOT_PATH, "description")
        )
    parameters = None
    raw_parameters = raw.get("parameters")
    if raw_parameters is not None:
        parameters = decode_object(
            ResponseParameters, raw_parameters, child_path(ROOT_PATH, "parameters")
        )
    return ProtocolError(code=code, description=description, parameters=parameters)


__all__ = [
    "ProtocolError",
    "Response",
    "ResponseParameters",
    "Success",
    "decode_response",
    "decode_response_json",
]
