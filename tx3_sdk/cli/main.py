"""
tx3_sdk.cli.main
================

`tx3-trp`: resolve and submit transactions against a TRP server from the
shell. Useful for debugging templates and resolver deployments.

Examples
--------
    $ tx3-trp --endpoint http://localhost:8164 resolve --tir transfer.tir.json \
        --args '{"quantity": 100}'
    $ tx3-trp --env network=preview resolve --tir transfer.tir.json --args @args.json
    $ tx3-trp submit --tx 84a400... --witness ff00...

Configuration
-------------
- Endpoint : `--endpoint` or env `TX3_TRP_ENDPOINT`
- Timeout  : `--timeout` or env `TX3_TRP_TIMEOUT` seconds (default: 30)
- Headers  : repeated `--header KEY=VALUE`
- Env args : repeated `--env KEY=VALUE` (values parsed as JSON when possible)
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
from pydantic import ValidationError

from ..config import ClientOptions
from ..errors import TrpError
from ..trp.client import Client
from ..trp.encoding import WitnessInput
from ..trp.models import TirInfo, TxEnvelope

app = typer.Typer(
    name="tx3-trp",
    help="Resolve and submit transactions through a TRP server.",
    no_args_is_help=True,
    add_completion=False,
)

__all__ = ["app", "main"]


def _print_json(obj: Any) -> None:
    typer.echo(json.dumps(obj, indent=2, ensure_ascii=False))


def _split_pairs(pairs: Optional[List[str]], flag: str) -> Dict[str, str]:
    out: Dict[str, str] = {}
    for item in pairs or []:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"expected KEY=VALUE, got {item!r}", param_hint=flag)
        out[key] = value
    return out


def _json_or_str(value: str) -> Any:
    try:
        return json.loads(value)
    except json.JSONDecodeError:
        return value


def _load_json_arg(value: str, flag: str) -> Any:
    """Inline JSON, or @path to a JSON file."""
    text = value
    if value.startswith("@"):
        path = Path(value[1:])
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise typer.BadParameter(f"cannot read {path}: {e}", param_hint=flag) from e
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise typer.BadParameter(f"invalid JSON: {e}", param_hint=flag) from e


def _client(ctx: typer.Context) -> Client:
    settings = ctx.obj or {}
    if not settings.get("endpoint"):
        raise typer.BadParameter("endpoint is required", param_hint="--endpoint")
    try:
        return Client(ClientOptions(**settings))
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e


@app.callback()
def _root(
    ctx: typer.Context,
    endpoint: Optional[str] = typer.Option(
        None,
        "--endpoint",
        help="TRP server URL.",
        envvar="TX3_TRP_ENDPOINT",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="HTTP timeout in seconds.",
        envvar="TX3_TRP_TIMEOUT",
    ),
    header: Optional[List[str]] = typer.Option(
        None, "--header", "-H", help="Extra HTTP header, KEY=VALUE. Repeatable."
    ),
    env: Optional[List[str]] = typer.Option(
        None, "--env", "-e", help="Env arg forwarded to trp.resolve, KEY=VALUE. Repeatable."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log requests to stderr."),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    ctx.obj = {
        "endpoint": endpoint,
        "headers": _split_pairs(header, "--header"),
        "env_args": {k: _json_or_str(v) for k, v in _split_pairs(env, "--env").items()},
        "timeout": timeout,
    }


@app.command()
def resolve(
    ctx: typer.Context,
    tir: Path = typer.Option(..., "--tir", help="JSON file with {version, content, encoding}."),
    args: str = typer.Option("{}", "--args", help="Args as inline JSON or @file."),
) -> None:
    """Resolve a TIR plus args into a transaction envelope."""
    try:
        tir_info = TirInfo.model_validate(_load_json_arg(f"@{tir}", "--tir"))
    except ValidationError as e:
        raise typer.BadParameter(f"not a TIR descriptor: {e}", param_hint="--tir") from e
    arg_values = _load_json_arg(args, "--args")
    try:
        with _client(ctx) as client:
            envelope = client.resolve(tir_info, arg_values)
    except TrpError as e:
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(1)
    _print_json(envelope.model_dump(mode="json"))


@app.command()
def submit(
    ctx: typer.Context,
    tx: str = typer.Option(..., "--tx", help="Signed transaction, hex."),
    tx_hash: str = typer.Option("", "--hash", help="Transaction hash, hex (informational)."),
    witness: Optional[List[str]] = typer.Option(
        None, "--witness", "-w", help="Hex witness or witness JSON object. Repeatable, order kept."
    ),
) -> None:
    """Submit a signed transaction with its witnesses."""
    try:
        witnesses = [
            WitnessInput.decode(_load_json_arg(w, "--witness")) if w.lstrip().startswith("{") else WitnessInput.from_hex(w)
            for w in witness or []
        ]
        with _client(ctx) as client:
            response = client.submit(TxEnvelope(tx=tx, hash=tx_hash), witnesses)
    except TrpError as e:
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(1)
    _print_json(response.model_dump(mode="json"))


def main() -> None:  # pragma: no cover - console entrypoint
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
