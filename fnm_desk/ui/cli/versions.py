"""
CLI commands for Node version management.

Thin wrappers over ``fnm_desk.core.stores.version_store``.
"""

from __future__ import annotations

import asyncio
import json

import click

from fnm_desk.core.models.version import NodeVersion
from fnm_desk.ui.cli.helpers import fail, get_commands


def _store(ctx: click.Context):
    from fnm_desk.core.stores.version_store import VersionStateStore

    return VersionStateStore(get_commands(ctx))


def _render(versions: list[NodeVersion], *, remote: bool = False) -> None:
    for v in versions:
        marker = "*" if v.is_current else " "
        tags = []
        if v.is_default:
            tags.append("default")
        if v.lts_name:
            tags.append(f"({v.lts_name})" if remote else v.lts_name)
        tags.extend(v.aliases)
        if remote and v.is_installed:
            tags.append("✓ installed")
        line = f"   {marker} {v.name:<12} {' '.join(tags)}".rstrip()
        if v.is_current:
            click.secho(line, fg="green", bold=True)
        else:
            click.echo(line)


# ── Observe ─────────────────────────────────────────────────────


@click.command("list")
@click.option("--lts", "lts_only", is_flag=True, help="Only show LTS versions.")
@click.option("--keyword", "-k", default=None, help="Filter by name, LTS name or alias.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def list_cmd(ctx: click.Context, lts_only: bool, keyword: str | None, as_json: bool) -> None:
    """List installed Node versions."""
    store = _store(ctx)
    if not asyncio.run(store.fetch_installed()):
        fail(store.error)

    versions = store.get_filtered_versions("installed", lts_only=lts_only, keyword=keyword)

    if as_json:
        click.echo(json.dumps([v.model_dump() for v in versions], indent=2))
        return

    if not versions:
        click.secho("No installed versions match.", fg="yellow")
        return

    click.secho(f"📦 Installed ({len(versions)}):", fg="cyan", bold=True)
    _render(versions)
    click.echo()


@click.command()
@click.option("--lts", "lts_only", is_flag=True, help="Only list LTS releases.")
@click.option("--keyword", "-k", default=None, help="Filter by name or LTS name.")
@click.option("--latest", is_flag=True, help="Only the newest release of each major.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def remote(
    ctx: click.Context,
    lts_only: bool,
    keyword: str | None,
    latest: bool,
    as_json: bool,
) -> None:
    """List Node versions available for install."""
    from fnm_desk.core.services.version_compare import latest_by_major

    store = _store(ctx)

    async def _load() -> bool:
        # Installed names are needed for the is_installed join
        if not await store.fetch_installed():
            click.secho(f"⚠️  Installed status unknown: {store.error}", fg="yellow")
        return await store.fetch_remote(lts_only=lts_only)

    if not asyncio.run(_load()):
        fail(store.error)

    versions = store.get_filtered_versions("remote", lts_only=lts_only, keyword=keyword)
    if latest:
        versions = latest_by_major(versions)

    if as_json:
        click.echo(json.dumps([v.model_dump() for v in versions], indent=2))
        return

    if not versions:
        click.secho("No remote versions match.", fg="yellow")
        return

    click.secho(f"🌐 Available ({len(versions)}):", fg="cyan", bold=True)
    _render(versions, remote=True)
    click.echo()


# ── Act ─────────────────────────────────────────────────────────


@click.command()
@click.argument("version")
@click.pass_context
def install(ctx: click.Context, version: str) -> None:
    """Install a Node version."""
    store = _store(ctx)
    click.echo(f"⏳ Installing {version}...")
    if not asyncio.run(store.install(version)):
        fail(store.error)
    click.secho(f"✅ Installed {version}", fg="green")
    if store.error:
        click.secho(f"⚠️  {store.error}", fg="yellow")


@click.command()
@click.argument("version")
@click.pass_context
def uninstall(ctx: click.Context, version: str) -> None:
    """Uninstall a Node version."""
    store = _store(ctx)
    if not asyncio.run(store.uninstall(version)):
        fail(store.error)
    click.secho(f"✅ Uninstalled {version}", fg="green")
    if store.error:
        click.secho(f"⚠️  {store.error}", fg="yellow")


@click.command()
@click.argument("version")
@click.pass_context
def use(ctx: click.Context, version: str) -> None:
    """Switch the active Node version."""
    store = _store(ctx)
    if not asyncio.run(store.use(version)):
        fail(store.error)
    click.secho(f"✅ Now using {version}", fg="green")


@click.command()
@click.argument("version")
@click.pass_context
def default(ctx: click.Context, version: str) -> None:
    """Set the default Node version."""
    store = _store(ctx)
    if not asyncio.run(store.set_default(version)):
        fail(store.error)
    click.secho(f"✅ Default set to {version}", fg="green")


@click.command("open")
@click.argument("version")
@click.pass_context
def open_cmd(ctx: click.Context, version: str) -> None:
    """Open a version's install directory."""
    store = _store(ctx)
    if not asyncio.run(store.open_version_directory(version)):
        fail(store.error)
