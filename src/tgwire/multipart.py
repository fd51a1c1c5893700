"""Assemble outgoing call payloads.

A request without local streams is sent as a plain JSON body. A request
with at least one :class:`~tgwire.files.InputFileStream` becomes multipart:
the JSON body (streams replaced by ``attach://`` placeholders) plus one part
per attachment, matched by part name.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

from .codec import ROOT_PATH, dumps, encode_object
from .errors import AttachmentUnavailableError, DuplicateAttachmentNameError
from .files import FileResolver, PendingAttachment, explicit_attach_names

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Attachment:
    name: str
    filename: str
    content: bytes
    mime_type: str


@dataclass(frozen=True)
class JsonPayload:
    method: str
    body: dict[str, Any]

    is_multipart = False

    def to_httpx(self) -> dict[str, Any]:
        return {"json": self.body}


@dataclass(frozen=True)
class MultipartPayload:
    method: str
    body: dict[str, Any]
    attachments: tuple[Attachment, ...]
    body_part: Optional[str] = None

    is_multipart = True

    def form_fields(self) -> dict[str, str]:
        """Render the JSON body as form fields.

        With ``body_part`` set the whole body travels as one JSON part under
        that name; otherwise every top-level key becomes its own field and
        non-string values are JSON-encoded. Form encoding has no null, so
        keys holding ``None`` are left out, which the Bot API reads the same
        as an absent parameter.
        """
        if self.body_part:
            return {self.body_part: dumps(self.body)}
        fields: dict[str, str] = {}
        for key, value in self.body.items():
            if value is None:
                continue
            fields[key] = value if isinstance(value, str) else dumps(value)
        return fields

    def files(self) -> list[tuple[str, tuple[str, bytes, str]]]:
        return [
            (item.name, (item.filename, item.content, item.mime_type))
            for item in self.attachments
        ]

    def to_httpx(self) -> dict[str, Any]:
        return {"data": self.form_fields(), "files": self.files()}


Payload = Union[JsonPayload, MultipartPayload]


def _encode_request(
    request: Any, body_part: Optional[str]
) -> tuple[dict[str, Any], FileResolver]:
    resolver = FileResolver(reserved=explicit_attach_names(request))
    body = encode_object(request, resolver, ROOT_PATH)
    _check_part_names(body, resolver, body_part)
    return body, resolver


def _check_part_names(
    body: dict[str, Any], resolver: FileResolver, body_part: Optional[str]
) -> None:
    """File parts share one namespace with the form fields they travel with."""
    taken = {body_part} if body_part else set(body)
    for pending in resolver.pending:
        if pending.name in taken:
            raise DuplicateAttachmentNameError(pending.name, path=pending.path)


def _read_attachment(pending: PendingAttachment) -> Attachment:
    stream = pending.stream
    try:
        content = stream.read_bytes()
    except (OSError, ValueError) as exc:
        raise AttachmentUnavailableError(pending.name, str(exc), path=pending.path) from exc
    filename = stream.resolved_filename(pending.name)
    return Attachment(
        name=pending.name,
        filename=filename,
        content=content,
        mime_type=stream.resolved_mime_type(filename),
    )


def _assemble(
    method: str,
    body: dict[str, Any],
    attachments: list[Attachment],
    body_part: Optional[str],
) -> Payload:
    if not attachments:
        logger.debug("Encoded %s as JSON", method)
        return JsonPayload(method=method, body=body)
    logger.debug("Encoded %s as multipart with %d attachment(s)", method, len(attachments))
    return MultipartPayload(
        method=method, body=body, attachments=tuple(attachments), body_part=body_part
    )


def build_payload(request: Any, *, body_part: Optional[str] = None) -> Payload:
    """Encode *request* and read its attachments (may block on file I/O)."""
    body, resolver = _encode_request(request, body_part)
    attachments = [_read_attachment(pending) for pending in resolver.pending]
    return _assemble(request.method, body, attachments, body_part)


async def build_payload_async(
    request: Any, *, body_part: Optional[str] = None
) -> Payload:
    """Like :func:`build_payload`, reading attachments in a worker thread."""
    body, resolver = _encode_request(request, body_part)
    attachments: list[Attachment] = []
    for pending in resolver.pending:
        attachments.append(await asyncio.to_thread(_read_attachment, pending))
    return _assemble(request.method, body, attachments, body_part)


__all__ = [
    "Attachment",
    "JsonPayload",
    "MultipartPayload",
    "Payload",
    "build_payload",
    "build_payload_async",
]
