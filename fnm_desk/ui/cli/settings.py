"""
CLI commands for fnm settings and diagnostics.

Thin wrappers over ``fnm_desk.core.stores.settings_store``.
"""

from __future__ import annotations

import asyncio
import json
import sys

import click

from fnm_desk.ui.cli.helpers import fail, get_commands


def _store(ctx: click.Context):
    from fnm_desk.core.stores.settings_store import SettingsStateStore

    return SettingsStateStore(get_commands(ctx))


@click.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def env(ctx: click.Context, as_json: bool) -> None:
    """Show fnm's environment configuration."""
    store = _store(ctx)
    if not asyncio.run(store.load_settings()):
        fail(store.error)

    if as_json:
        click.echo(json.dumps(store.env.model_dump(), indent=2))
        return

    click.secho("⚙️  fnm environment", fg="cyan", bold=True)
    click.echo(f"   Directory:      {store.fnm_dir}")
    click.echo(f"   Mirror:         {store.node_dist_mirror}")
    click.echo(f"   Version files:  {store.version_file_strategy}")
    click.echo(f"   Corepack:       {'on' if store.corepack_enabled else 'off'}")
    click.echo(f"   Engines:        {'on' if store.resolve_engines else 'off'}")
    click.echo(f"   Arch:           {store.arch}")
    click.echo(f"   Log level:      {store.loglevel}")
    click.echo()

    cfg = ctx.obj.get("config")
    click.secho("   Known mirrors:", fg="white", bold=True)
    for option in store.mirror_options:
        marker = " ← active" if option.value == store.node_dist_mirror else ""
        click.echo(f"     • {option.label}: {option.value}{marker}")
    if cfg and cfg.default_mirror and cfg.default_mirror != store.node_dist_mirror:
        click.secho(
            f"   ⚠️  Configured mirror {cfg.default_mirror} is not active "
            "(set FNM_NODE_DIST_MIRROR)",
            fg="yellow",
        )
    click.echo()


@click.command("dir")
@click.option("--open", "open_it", is_flag=True, help="Open the directory in the file manager.")
@click.pass_context
def dir_cmd(ctx: click.Context, open_it: bool) -> None:
    """Print the fnm data directory."""
    store = _store(ctx)

    if open_it:
        if not asyncio.run(store.open_fnm_directory()):
            fail(store.error)
        return

    path = asyncio.run(store.get_fnm_dir())
    if not path:
        click.secho("Could not determine the fnm directory.", fg="yellow")
        sys.exit(1)
    click.echo(path)


@click.command()
@click.pass_context
def doctor(ctx: click.Context) -> None:
    """Report how fnm is located and whether it runs."""
    from fnm_desk.adapters.base import error_message

    try:
        report = asyncio.run(get_commands(ctx).invoke("debug_fnm_lookup"))
    except Exception as e:
        fail(error_message(e))
    click.echo(report)
