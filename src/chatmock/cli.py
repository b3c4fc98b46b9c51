"""ChatMock CLI — run the server and talk to a running instance.

Usage::

    # Start the server (host/port default to CHATMOCK_HOST / CHATMOCK_PORT)
    chatmock serve --port 8080

    # Send a chat message to a running server
    chatmock chat "hello there" --model ollama/llama3.1

    # Show configured upstream providers (credentials redacted)
    chatmock providers
"""

from __future__ import annotations

import asyncio
import json
import sys

import click
import httpx

from chatmock.config import settings


def _default_url() -> str:
    host = settings.chatmock_host
    if host in ("0.0.0.0", "::", ""):
        host = "localhost"
    return f"http://{host}:{settings.chatmock_port}"


@click.group()
def cli():
    """ChatMock — mock chat completions with upstream provider routing."""
    pass


# ── serve ─────────────────────────────────────────────────────────────


@cli.command()
@click.option("--host", default=None, help="Bind address (default: CHATMOCK_HOST).")
@click.option("--port", default=None, type=int, help="Bind port (default: CHATMOCK_PORT).")
@click.option("--reload", is_flag=True, default=False, help="Reload on code changes.")
def serve(host: str | None, port: int | None, reload: bool):
    """Run the ChatMock HTTP server."""
    import uvicorn

    uvicorn.run(
        "chatmock.main:app",
        host=host or settings.chatmock_host,
        port=port or settings.chatmock_port,
        reload=reload,
    )


# ── chat ──────────────────────────────────────────────────────────────


@cli.command()
@click.argument("message")
@click.option("--model", default="", help="Model name; a provider prefix routes upstream.")
@click.option("--url", default=None, help="ChatMock base URL (default: local server).")
@click.option("--raw", is_flag=True, default=False, help="Print the full JSON response.")
def chat(message: str, model: str, url: str | None, raw: bool):
    """Send MESSAGE as a single-turn chat completion."""
    asyncio.run(_chat(message, model, url or _default_url(), raw))


async def _chat(message: str, model: str, url: str, raw: bool) -> None:
    payload = {"model": model, "messages": [{"role": "user", "content": message}]}
    data = await _request("POST", f"{url}/v1/chat/completions", payload)
    if raw:
        click.echo(json.dumps(data, indent=2))
        return
    choices = data.get("choices") or [{}]
    click.echo(choices[0].get("message", {}).get("content", ""))
    usage = data.get("usage", {})
    click.secho(
        f"[{data.get('model', '')}] tokens: {usage.get('prompt_tokens', 0)} prompt, "
        f"{usage.get('completion_tokens', 0)} completion",
        fg="bright_black",
        err=True,
    )


# ── providers ─────────────────────────────────────────────────────────


@cli.command()
@click.option("--url", default=None, help="ChatMock base URL (default: local server).")
def providers(url: str | None):
    """List the upstream providers configured on a running server."""
    data = asyncio.run(_request("GET", f"{url or _default_url()}/v1/providers"))
    items = data.get("providers", [])
    if not items:
        click.echo("No providers configured; all requests are mocked.")
        return
    for p in items:
        flags = [
            key.removeprefix("has_")
            for key in ("has_api_key", "has_access_token", "has_account_id")
            if p.get(key)
        ]
        route = "*" if p.get("route_all") else f"{p.get('model_prefix', '')}*"
        click.echo(
            f"  {p.get('name')}  kind={p.get('kind')}  route={route}  "
            f"url={p.get('base_url')}  creds={','.join(flags) or '-'}"
        )


async def _request(method: str, url: str, payload: dict | None = None) -> dict:
    try:
        async with httpx.AsyncClient(timeout=settings.chatmock_upstream_timeout) as client:
            resp = await client.request(method, url, json=payload)
            resp.raise_for_status()
            return resp.json()
    except httpx.ConnectError:
        click.secho(
            f"Error: Cannot reach ChatMock at {url}.  Is the server running?",
            fg="red",
            err=True,
        )
        sys.exit(1)
    except httpx.HTTPStatusError as exc:
        click.secho(
            f"Error: API returned {exc.response.status_code}: "
            f"{exc.response.text}",
            fg="red",
            err=True,
        )
        sys.exit(1)


# ── Entry point ───────────────────────────────────────────────────────


def main():
    cli()


if __name__ == "__main__":
    main()
