"""File references and their wire classification.

A file-valued field holds one of three references: a file id already stored
on the server, a remote URL the server fetches itself, or a local byte
stream that must travel as a separate multipart part. Only the last one
needs out-of-band transmission; :class:`FileResolver` swaps it for an
``attach://<name>`` placeholder and remembers it for the payload builder.
"""

from __future__ import annotations

import logging
import mimetypes
import os
import re
from dataclasses import dataclass, fields, is_dataclass
from pathlib import Path
from typing import IO, Any, Iterable, Iterator, Optional, Union

from .enums import FileType
from .errors import DuplicateAttachmentNameError

logger = logging.getLogger(__name__)

ATTACH_SCHEME = "attach://"
DEFAULT_MIME_TYPE = "application/octet-stream"

StreamSource = Union[bytes, bytearray, memoryview, "os.PathLike[str]", IO[bytes]]

_NAME_SANITIZER = re.compile(r"[^A-Za-z0-9]+")


@dataclass(frozen=True)
class InputFileId:
    id: str

    file_type = FileType.ID

    def wire_value(self) -> str:
        return self.id


@dataclass(frozen=True)
class InputFileUrl:
    url: str

    file_type = FileType.URL

    def wire_value(self) -> str:
        return self.url


@dataclass(frozen=True)
class InputFileStream:
    """Local bytes uploaded with the request.

    *content* is raw bytes, a filesystem path or a binary file object. Paths
    and file objects are only read when the payload is built.
    """

    content: StreamSource
    filename: Optional[str] = None
    mime_type: Optional[str] = None
    attach_name: Optional[str] = None

    file_type = FileType.STREAM

    def resolved_filename(self, fallback: str) -> str:
        if self.filename:
            return self.filename
        if isinstance(self.content, os.PathLike):
            return Path(self.content).name
        name = getattr(self.content, "name", None)
        if isinstance(name, str) and name:
            return os.path.basename(name)
        return fallback

    def resolved_mime_type(self, filename: str) -> str:
        if self.mime_type:
            return self.mime_type
        guessed, _ = mimetypes.guess_type(filename)
        return guessed or DEFAULT_MIME_TYPE

    def read_bytes(self) -> bytes:
        """Return the stream content; may block on I/O.

        Raises ``OSError`` when the source cannot be read and ``ValueError``
        when it is closed, exhausted or not a binary source.
        """
        content = self.content
        if isinstance(content, (bytes, bytearray, memoryview)):
            return bytes(content)
        if isinstance(content, os.PathLike):
            return Path(content).read_bytes()
        reader = getattr(content, "read", None)
        if reader is None:
            raise ValueError(f"unsupported stream source {type(content).__name__}")
        data = reader()
        if isinstance(data, str):
            raise ValueError("stream must be opened in binary mode")
        if not data:
            raise ValueError("stream is exhausted")
        return bytes(data)


InputFile = Union[InputFileId, InputFileUrl, InputFileStream]


def input_file(value: Union[InputFile, str, bytes, "os.PathLike[str]", IO[bytes]]) -> InputFile:
    """Coerce a loose value into a file reference.

    Strings are URLs when they carry an http(s) scheme and file ids
    otherwise; bytes, paths and file objects become local streams.
    """
    if isinstance(value, (InputFileId, InputFileUrl, InputFileStream)):
        return value
    if isinstance(value, str):
        if value.startswith(("http://", "https://")):
            return InputFileUrl(value)
        return InputFileId(value)
    return InputFileStream(value)


@dataclass(frozen=True)
class PendingAttachment:
    name: str
    path: str
    stream: InputFileStream


def explicit_attach_names(value: Any) -> Iterator[str]:
    """Yield every ``attach_name`` set by the caller inside *value*."""
    if isinstance(value, InputFileStream):
        if value.attach_name:
            yield value.attach_name
        return
    if isinstance(value, (list, tuple)):
        for item in value:
            yield from explicit_attach_names(item)
    elif isinstance(value, dict):
        for item in value.values():
            yield from explicit_attach_names(item)
    elif is_dataclass(value) and not isinstance(value, type):
        for field in fields(value):
            yield from explicit_attach_names(getattr(value, field.name))


class FileResolver:
    """Collects local streams met while encoding a single request.

    Generated names skip anything in *reserved* (the explicit names the
    caller chose) so only two explicit names can clash.
    """

    def __init__(self, reserved: Iterable[str] = ()) -> None:
        self._reserved = frozenset(reserved)
        self._pending: dict[str, PendingAttachment] = {}
        self._names_by_stream: dict[int, str] = {}
        self._sequence = 0

    @staticmethod
    def classify(ref: InputFile) -> FileType:
        return ref.file_type

    def resolve(self, ref: InputFile, path: str) -> str:
        if not isinstance(ref, InputFileStream):
            return ref.wire_value()
        existing = self._names_by_stream.get(id(ref))
        if existing is not None and self._pending[existing].stream is ref:
            return ATTACH_SCHEME + existing
        name = ref.attach_name or self._next_name(path)
        if name in self._pending:
            raise DuplicateAttachmentNameError(name, path=path)
        self._pending[name] = PendingAttachment(name=name, path=path, stream=ref)
        self._names_by_stream[id(ref)] = name
        self._sequence += 1
        logger.debug("Registered attachment %s for %s", name, path)
        return ATTACH_SCHEME + name

    def _next_name(self, path: str) -> str:
        slug = _NAME_SANITIZER.sub("_", path.lstrip("$")).strip("_") or "file"
        name = f"{slug}_{self._sequence}"
        while name in self._pending or name in self._reserved:
            self._sequence += 1
            name = f"{slug}_{self._sequence}"
        return name

    @property
    def pending(self) -> tuple[PendingAttachment, ...]:
        return tuple(self._pending.values())

    @property
    def needs_multipart(self) -> bool:
        return bool(self._pending)


__all__ = [
    "ATTACH_SCHEME",
    "FileResolver",
    "InputFile",
    "InputFileId",
    "InputFileStream",
    "InputFileUrl",
    "PendingAttachment",
    "explicit_attach_names",
    "input_file",
]
