"""
iparams CLI - inspect and edit a store file.

Usage:
    iparams [--file PATH] get <kind> <key>
    iparams [--file PATH] set <kind> <key> <value>
    iparams [--file PATH] has <key> [--kind <kind>]
    iparams [--file PATH] delete <key> [--kind <kind>]
    iparams [--file PATH] count
    iparams [--file PATH] dump [--json-out]
    iparams [--file PATH] clear [--yes]
"""
from __future__ import annotations

import json
import logging
import sys
from typing import Optional

import click

from .. import __version__
from ..errors import ValueParseError
from ..params import ParamStore
from ..values import ValueKind, get_codec

KIND_CHOICE = click.Choice([kind.name.lower() for kind in ValueKind], case_sensitive=False)


def _store(ctx: click.Context) -> ParamStore:
    return ctx.obj


@click.group()
@click.version_option(version=__version__, prog_name="iparams")
@click.option("--file", "-f", "file_path", default=None, help="Store file (default: configured file name)")
@click.option("--verbose", "-v", is_flag=True, help="Log store activity")
@click.pass_context
def cli(ctx: click.Context, file_path: Optional[str], verbose: bool):
    """iparams - typed key-value settings store."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = ParamStore(file_path)


@cli.command("get")
@click.argument("kind", type=KIND_CHOICE)
@click.argument("key")
@click.pass_context
def get_cmd(ctx: click.Context, kind: str, key: str):
    """Print the value of KEY (created with the default if missing)."""
    codec = get_codec(kind)
    value = _store(ctx).get_value(key, codec.kind)
    click.echo(codec.format(value))


@cli.command("set")
@click.argument("kind", type=KIND_CHOICE)
@click.argument("key")
@click.argument("value")
@click.pass_context
def set_cmd(ctx: click.Context, kind: str, key: str, value: str):
    """Store VALUE (in the kind's text form) under KEY."""
    codec = get_codec(kind)
    try:
        parsed = codec.parse(value)
    except ValueParseError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    _store(ctx).set_value(key, codec.kind, parsed)
    click.echo(f"{codec.tag} '{key}' = {codec.format(parsed)}")


@cli.command("has")
@click.argument("key")
@click.option("--kind", "-k", type=KIND_CHOICE, default=None, help="Only records of this kind")
@click.pass_context
def has_cmd(ctx: click.Context, key: str, kind: Optional[str]):
    """Print whether KEY exists."""
    store = _store(ctx)
    found = store.has_key_of_kind(key, kind) if kind else store.has_key(key)
    click.echo("true" if found else "false")


@cli.command("delete")
@click.argument("key")
@click.option("--kind", "-k", type=KIND_CHOICE, default=None, help="Only delete this kind (default: all kinds)")
@click.pass_context
def delete_cmd(ctx: click.Context, key: str, kind: Optional[str]):
    """Delete KEY."""
    store = _store(ctx)
    if kind:
        store.delete_key_of_kind(key, kind)
    else:
        store.delete_all_keys(key)


@cli.command("count")
@click.pass_context
def count_cmd(ctx: click.Context):
    """Print the number of well-formed records."""
    click.echo(str(_store(ctx).pairs_count()))


@cli.command("dump")
@click.option("--json-out", "json_output", is_flag=True, help="Output as JSON")
@click.pass_context
def dump_cmd(ctx: click.Context, json_output: bool):
    """List well-formed records."""
    store = _store(ctx)
    records = list(store.records.iter_records())

    if json_output:
        click.echo(json.dumps(
            [{"key": r.key, "type": r.type_tag, "value": r.value} for r in records],
            indent=2,
        ))
        return

    if not records:
        click.echo(f"No records in {store.path}")
        return

    click.echo(f"{len(records)} record(s) in {store.path}:\n")
    for r in records:
        click.echo(f"  [{r.type_tag}] {r.key} = {r.value}")


@cli.command("clear")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def clear_cmd(ctx: click.Context, yes: bool):
    """Delete every record."""
    store = _store(ctx)
    if not yes and not click.confirm(f"Delete all records in {store.path}?"):
        click.echo("Aborted.")
        return
    store.delete_all()
    click.echo(f"Cleared {store.path}")


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
