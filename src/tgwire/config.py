from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

DEFAULT_BOT_TOKEN_ENV = "TGWIRE_BOT_TOKEN"
DEFAULT_BASE_URL = "https://api.telegram.org"
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_CACHE_DIR = ".tgwire/cache"
CONFIG_SECTION = "tgwire"


class ClientConfigError(Exception):
    """Raised when tgwire config is invalid."""


@dataclass(frozen=True)
class ClientConfig:
    root: Path
    bot_token_env: str
    bot_token: Optional[str]
    base_url: str
    timeout_seconds: float
    cache_dir: Path
    body_part: Optional[str] = None

    @classmethod
    def from_raw(
        cls,
        raw: Optional[Mapping[str, Any]],
        *,
        root: Path,
        env: Optional[Mapping[str, str]] = None,
    ) -> "ClientConfig":
        cfg: Mapping[str, Any] = raw if isinstance(raw, Mapping) else {}
        source = env if env is not None else os.environ

        bot_token_env = str(cfg.get("bot_token_env", DEFAULT_BOT_TOKEN_ENV)).strip()
        if not bot_token_env:
            raise ClientConfigError("tgwire.bot_token_env must be non-empty")
        bot_token = (source.get(bot_token_env) or "").strip() or None

        base_url = cfg.get("base_url", DEFAULT_BASE_URL)
        if not isinstance(base_url, str) or not base_url.startswith(
            ("http://", "https://")
        ):
            raise ClientConfigError("tgwire.base_url must be an http(s) URL")

        timeout_value = cfg.get("timeout_seconds", DEFAULT_TIMEOUT_SECONDS)
        if isinstance(timeout_value, bool) or not isinstance(timeout_value, (int, float)):
            raise ClientConfigError("tgwire.timeout_seconds must be a number")
        if timeout_value <= 0:
            raise ClientConfigError("tgwire.timeout_seconds must be > 0")

        cache_dir_value = cfg.get("cache_dir", DEFAULT_CACHE_DIR)
        if not isinstance(cache_dir_value, str) or not cache_dir_value.strip():
            raise ClientConfigError("tgwire.cache_dir must be a string path")
        cache_dir = Path(cache_dir_value)
        if not cache_dir.is_absolute():
            cache_dir = root / cache_dir

        multipart_raw = cfg.get("multipart")
        multipart_cfg = multipart_raw if isinstance(multipart_raw, Mapping) else {}
        body_part = multipart_cfg.get("body_part")
        if body_part is not None and (
            not isinstance(body_part, str) or not body_part.strip()
        ):
            raise ClientConfigError(
                "tgwire.multipart.body_part must be a non-empty string or null"
            )

        return cls(
            root=root,
            bot_token_env=bot_token_env,
            bot_token=bot_token,
            base_url=base_url.rstrip("/"),
            timeout_seconds=float(timeout_value),
            cache_dir=cache_dir,
            body_part=body_part.strip() if body_part else None,
        )


def _load_yaml_dict(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ClientConfigError(f"Invalid YAML in {path}: {exc}") from exc
    except OSError as exc:
        raise ClientConfigError(f"Failed to read config file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ClientConfigError(f"Config file must be a mapping: {path}")
    return data


def load_client_config(
    path: Path, *, env: Optional[Mapping[str, str]] = None
) -> ClientConfig:
    """Load the ``tgwire`` section of a YAML file; a missing file means defaults."""
    data = _load_yaml_dict(path)
    section = data.get(CONFIG_SECTION, {})
    if section is not None and not isinstance(section, dict):
        raise ClientConfigError(f"'{CONFIG_SECTION}' must be a mapping in {path}")
    return ClientConfig.from_raw(section, root=path.parent.resolve(), env=env)


__all__ = [
    "ClientConfig",
    "ClientConfigError",
    "load_client_config",
]
