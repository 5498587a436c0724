"""Gravity Inspect - command line access to stored contract state."""
from __future__ import annotations

import json
from pathlib import Path

import click

from gravity_core import ContractState, decode, decode_initialized, encode

from .export import export_states
from .logic import canonical_json, read_dump, verify_account, write_dump


def _fatal(e: Exception) -> None:
    # Fail closed with a single-line reason, no stack trace.
    click.echo(f"FATAL: {e}")
    raise SystemExit(1)


@click.group()
def main():
    pass


@main.command("decode")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--require-initialized", is_flag=True, help="Reject records whose init flag is 0")
def decode_cmd(path: Path, require_initialized: bool):
    try:
        data = read_dump(path)
        state = decode_initialized(data) if require_initialized else decode(data)
    except (OSError, ValueError) as e:
        _fatal(e)
    click.echo(canonical_json(state.to_dict()))


@main.command("encode")
@click.argument("json_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("out", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--hex", "as_hex", is_flag=True, help="Write hex text instead of raw bytes")
def encode_cmd(json_path: Path, out: Path, as_hex: bool):
    try:
        state = ContractState.from_dict(json.loads(json_path.read_text(encoding="utf-8")))
        write_dump(out, encode(state), as_hex=as_hex)
    except (KeyError, TypeError, OSError, ValueError) as e:
        _fatal(e)
    click.echo(f"PASS: {ContractState.LEN} bytes written to {out}")


@main.command("verify")
@click.argument("path", type=click.Path(path_type=Path))
@click.option("--require-initialized", is_flag=True, help="Reject records whose init flag is 0")
def verify_cmd(path: Path, require_initialized: bool):
    result = verify_account(path, require_initialized=require_initialized)
    click.echo(canonical_json(result))
    if result["status"] != "PASS":
        raise SystemExit(1)


@main.command("export")
@click.argument("out", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("paths", nargs=-1, type=click.Path(exists=True, dir_okay=False, path_type=Path))
def export_cmd(out: Path, paths: tuple[Path, ...]):
    try:
        n = export_states(list(paths), out)
    except (OSError, ValueError) as e:
        _fatal(e)
    click.echo(f"PASS: {n} accounts exported to {out}")


if __name__ == "__main__":
    main()
