from __future__ import annotations

from pathlib import Path

import pytest

from tgwire.storage import FileCache
from tgwire.types import ChatBoostSource, ChatBoostSourceGiveaway, User


def test_put_and_get_round_trip(tmp_path: Path) -> None:
    cache = FileCache(tmp_path / "cache")

    cache.put("session", b"\x00\x01state")

    assert cache.get("session") == b"\x00\x01state"
    assert (tmp_path / "cache" / "session.bin").read_bytes() == b"\x00\x01state"


def test_entries_survive_a_new_instance(tmp_path: Path) -> None:
    FileCache(tmp_path).put(1001, b"blob")

    assert FileCache(tmp_path).get(1001) == b"blob"
    assert FileCache(tmp_path).get("absent") is None


def test_clear_keeps_files_unless_purged(tmp_path: Path) -> None:
    cache = FileCache(tmp_path)
    cache.put("a", b"1")
    cache.put("b", b"2")

    cache.clear()
    assert cache.get("a") == b"1"

    cache.clear(purge_files=True)
    assert cache.get("a") is None
    assert cache.get("b") is None
    assert list(tmp_path.glob("*.bin")) == []


@pytest.mark.parametrize("key", ["../escape", "a/b", "", True])
def test_invalid_keys_are_rejected(tmp_path: Path, key: object) -> None:
    cache = FileCache(tmp_path)

    with pytest.raises(ValueError):
        cache.put(key, b"x")  # type: ignore[arg-type]


def test_entities_are_stored_as_wire_json(tmp_path: Path) -> None:
    cache = FileCache(tmp_path)
    user = User(id=1, is_bot=False, first_name="Ada", language_code="en")

    cache.put_entity("me", user)

    assert cache.get("me") == b'{"id":1,"is_bot":false,"first_name":"Ada","language_code":"en"}'
    assert FileCache(tmp_path).get_entity("me", User) == user


def test_polymorphic_entities_round_trip(tmp_path: Path) -> None:
    cache = FileCache(tmp_path)
    source = ChatBoostSourceGiveaway(giveaway_message_id=3)

    cache.put_entity("boost", source)

    assert cache.get_entity("boost", ChatBoostSource) == source


def test_unreadable_entity_is_treated_as_missing(tmp_path: Path) -> None:
    cache = FileCache(tmp_path)
    cache.put("me", b"{truncated")

    assert cache.get_entity("me", User) is None
    assert cache.get_entity("nothing", User) is None
