"""Keyed file cache for session and entity blobs.

Each key is stored as one file inside the cache folder and mirrored in
memory after the first read or write.
"""

from __future__ import annotations

import logging
import os
import re
import tempfile
import threading
from pathlib import Path
from typing import Any, Optional, Union

from .codec import decode, dumps, encode, loads
from .errors import DecodeError

logger = logging.getLogger(__name__)

Key = Union[int, str]

_KEY_RE = re.compile(r"^[A-Za-z0-9_.-]+$")
_SUFFIX = ".bin"


def _atomic_write_bytes(path: Path, data: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except OSError:
            pass
        raise


class FileCache:
    def __init__(self, folder: Union[str, Path]) -> None:
        self._folder = Path(folder)
        self._folder.mkdir(parents=True, exist_ok=True)
        self._memory: dict[str, bytes] = {}
        self._lock = threading.Lock()

    @property
    def folder(self) -> Path:
        return self._folder

    def _name(self, key: Key) -> str:
        if isinstance(key, bool):
            raise ValueError("cache key must be an int or a string")
        name = str(key)
        if not _KEY_RE.match(name) or name in {".", ".."}:
            raise ValueError(f"invalid cache key {key!r}")
        return name

    def _path(self, name: str) -> Path:
        return self._folder / f"{name}{_SUFFIX}"

    def get(self, key: Key) -> Optional[bytes]:
        name = self._name(key)
        with self._lock:
            cached = self._memory.get(name)
        if cached is not None:
            return cached
        try:
            data = self._path(name).read_bytes()
        except FileNotFoundError:
            return None
        except OSError as exc:
            logger.warning("Failed to read cache entry %s: %s", name, exc)
            return None
        with self._lock:
            self._memory[name] = data
        return data

    def put(self, key: Key, data: bytes) -> None:
        name = self._name(key)
        _atomic_write_bytes(self._path(name), bytes(data))
        with self._lock:
            self._memory[name] = bytes(data)

    def clear(self, *, purge_files: bool = False) -> None:
        """Drop the in-memory mirror; with *purge_files* also delete entries."""
        with self._lock:
            self._memory.clear()
        if not purge_files:
            return
        for path in self._folder.glob(f"*{_SUFFIX}"):
            try:
                path.unlink()
            except FileNotFoundError:
                continue

    def put_entity(self, key: Key, obj: Any) -> None:
        self.put(key, dumps(encode(obj)).encode("utf-8"))

    def get_entity(self, key: Key, target: Any) -> Any:
        """Decode a stored entity; unreadable entries are treated as missing."""
        data = self.get(key)
        if data is None:
            return None
        try:
            return decode(target, loads(data))
        except DecodeError as exc:
            logger.warning("Discarding unreadable cache entry %s: %s", key, exc)
            return None


__all__ = ["FileCache"]
