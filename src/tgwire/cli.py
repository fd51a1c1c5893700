"""Command line helpers for inspecting wire payloads."""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any, NoReturn, Optional

import typer

from .client import BotApiClient
from .codec import decode, encode, loads
from .config import ClientConfigError, load_client_config
from .envelope import ProtocolError, decode_response
from .errors import CodecError, TelegramAPIError, TelegramTransportError
from .methods import METHODS, GetMe
from .registry import HIERARCHIES
from .storage import FileCache
from .types import User, type_catalog

app = typer.Typer(add_completion=False)

_ME_CACHE_KEY = "me"


def raise_exit(message: str, *, cause: Optional[BaseException] = None) -> NoReturn:
    typer.echo(message, err=True)
    if cause is not None:
        raise typer.Exit(code=1) from cause
    raise typer.Exit(code=1)


def _read_source(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    try:
        return Path(source).read_text(encoding="utf-8")
    except OSError as exc:
        raise_exit(f"Failed to read {source}: {exc}", cause=exc)


def _to_json(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return encode(value)


@app.callback()
def _root(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logs"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command("hierarchies")
def hierarchies(
    output_json: bool = typer.Option(False, "--json", help="Emit JSON output"),
) -> None:
    """List every discriminated hierarchy and its variant table."""
    rows = [
        {
            "name": hierarchy.name,
            "field": hierarchy.field,
            "by": hierarchy.by,
            "variants": {str(wire): cls for wire, cls in hierarchy.describe()},
        }
        for hierarchy in sorted(HIERARCHIES.values(), key=lambda h: h.name)
    ]
    if output_json:
        typer.echo(json.dumps({"hierarchies": rows}, indent=2))
        return
    for row in rows:
        typer.echo(f"{row['name']} (field={row['field']}, by={row['by']})")
        for wire, cls_name in row["variants"].items():
            typer.echo(f"  {wire} -> {cls_name}")


@app.command("decode")
def decode_command(
    type_name: str = typer.Argument(..., metavar="TYPE", help="Protocol class name"),
    source: str = typer.Argument(..., metavar="FILE", help="JSON file or '-'"),
) -> None:
    """Decode a JSON payload as TYPE and print its normalized wire form."""
    target = type_catalog().get(type_name)
    if target is None:
        raise_exit(f"Unknown type {type_name!r}")
    try:
        result = decode(target, loads(_read_source(source)))
    except CodecError as exc:
        raise_exit(f"Decode failed: {exc}", cause=exc)
    typer.echo(json.dumps(_to_json(result), indent=2, ensure_ascii=False))


@app.command("envelope")
def envelope_command(
    method: str = typer.Argument(..., help="Bot API method name, e.g. sendPhoto"),
    source: str = typer.Argument(..., metavar="FILE", help="JSON file or '-'"),
) -> None:
    """Decode a response envelope for METHOD; exits 2 on a protocol error."""
    request_cls = METHODS.get(method)
    if request_cls is None:
        raise_exit(f"Unknown method {method!r}; known: {', '.join(sorted(METHODS))}")
    try:
        outcome = decode_response(loads(_read_source(source)), request_cls.result)
    except CodecError as exc:
        raise_exit(f"Decode failed: {exc}", cause=exc)
    if isinstance(outcome, ProtocolError):
        payload: dict[str, Any] = {
            "ok": False,
            "error_code": outcome.code,
            "description": outcome.description,
        }
        if outcome.retry_after is not None:
            payload["retry_after"] = outcome.retry_after
        if outcome.migrate_to_chat_id is not None:
            payload["migrate_to_chat_id"] = outcome.migrate_to_chat_id
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        raise typer.Exit(code=2)
    typer.echo(
        json.dumps(
            {"ok": True, "result": _to_json(outcome.result)},
            indent=2,
            ensure_ascii=False,
        )
    )


@app.command("get-me")
def get_me(
    config_path: Path = typer.Option(
        Path("tgwire.yml"), "--config", help="YAML file with a 'tgwire' section"
    ),
    cached: bool = typer.Option(
        False, "--cached", help="Reuse the bot user stored in the cache directory"
    ),
) -> None:
    """Call getMe with the configured bot token and cache the bot user."""
    try:
        config = load_client_config(config_path)
    except ClientConfigError as exc:
        raise_exit(str(exc), cause=exc)
    cache = FileCache(config.cache_dir)
    if cached:
        me = cache.get_entity(_ME_CACHE_KEY, User)
        if me is not None:
            typer.echo(json.dumps(_to_json(me), indent=2, ensure_ascii=False))
            return
    try:
        client = BotApiClient.from_config(config)
    except ValueError as exc:
        raise_exit(str(exc), cause=exc)

    async def _run() -> Any:
        async with client:
            return await client.request(GetMe())

    try:
        me = asyncio.run(_run())
    except (TelegramAPIError, TelegramTransportError, CodecError) as exc:
        raise_exit(f"getMe failed: {exc}", cause=exc)
    cache.put_entity(_ME_CACHE_KEY, me)
    typer.echo(json.dumps(_to_json(me), indent=2, ensure_ascii=False))


def main() -> None:
    """Entrypoint for CLI execution."""
    app()


__all__ = ["app", "main", "raise_exit"]
