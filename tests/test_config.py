from __future__ import annotations

from pathlib import Path

import pytest

from tgwire.config import (
    DEFAULT_BASE_URL,
    ClientConfig,
    ClientConfigError,
    load_client_config,
)


def test_defaults_when_section_is_empty(tmp_path: Path) -> None:
    config = ClientConfig.from_raw({}, root=tmp_path, env={})

    assert config.bot_token_env == "TGWIRE_BOT_TOKEN"
    assert config.bot_token is None
    assert config.base_url == DEFAULT_BASE_URL
    assert config.timeout_seconds == 30.0
    assert config.cache_dir == tmp_path / ".tgwire" / "cache"
    assert config.body_part is None


def test_token_is_read_from_named_env_var(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("MY_BOT_TOKEN", "  123:abc ")

    config = ClientConfig.from_raw({"bot_token_env": "MY_BOT_TOKEN"}, root=tmp_path)

    assert config.bot_token == "123:abc"


def test_custom_values(tmp_path: Path) -> None:
    config = ClientConfig.from_raw(
        {
            "base_url": "http://localhost:8081/",
            "timeout_seconds": 5,
            "cache_dir": "/var/cache/tgwire",
            "multipart": {"body_part": "payload_json"},
        },
        root=tmp_path,
        env={},
    )

    assert config.base_url == "http://localhost:8081"
    assert config.timeout_seconds == 5.0
    assert config.cache_dir == Path("/var/cache/tgwire")
    assert config.body_part == "payload_json"


@pytest.mark.parametrize(
    "raw",
    [
        {"bot_token_env": ""},
        {"base_url": "ftp://example.com"},
        {"timeout_seconds": 0},
        {"timeout_seconds": "fast"},
        {"timeout_seconds": True},
        {"cache_dir": ""},
        {"multipart": {"body_part": 3}},
    ],
)
def test_invalid_values_are_rejected(tmp_path: Path, raw: dict) -> None:
    with pytest.raises(ClientConfigError):
        ClientConfig.from_raw(raw, root=tmp_path, env={})


def test_load_from_yaml_section(tmp_path: Path) -> None:
    path = tmp_path / "tgwire.yml"
    path.write_text(
        "tgwire:\n"
        "  bot_token_env: BOT_TOKEN\n"
        "  timeout_seconds: 12.5\n"
        "  cache_dir: state\n"
        "other: ignored\n",
        encoding="utf-8",
    )

    config = load_client_config(path, env={"BOT_TOKEN": "t0k"})

    assert config.bot_token == "t0k"
    assert config.timeout_seconds == 12.5
    assert config.cache_dir == tmp_path.resolve() / "state"


def test_missing_file_uses_defaults(tmp_path: Path) -> None:
    config = load_client_config(tmp_path / "absent.yml", env={})

    assert config.base_url == DEFAULT_BASE_URL


def test_invalid_yaml_is_a_config_error(tmp_path: Path) -> None:
    path = tmp_path / "tgwire.yml"
    path.write_text("tgwire: [unclosed\n", encoding="utf-8")

    with pytest.raises(ClientConfigError, match="Invalid YAML"):
        load_client_config(path, env={})


def test_section_must_be_a_mapping(tmp_path: Path) -> None:
    path = tmp_path / "tgwire.yml"
    path.write_text("tgwire: just-a-string\n", encoding="utf-8")

    with pytest.raises(ClientConfigError):
        load_client_config(path, env={})
