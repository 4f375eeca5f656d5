"""
fnm-desk — CLI entrypoint.

Usage:
    python -m fnm_desk.main --help
    python -m fnm_desk.main list
    python -m fnm_desk.main remote --lts --latest
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from fnm_desk import __version__
from fnm_desk.core.config.loader import ConfigError, find_config_file, load_config
from fnm_desk.core.observability.logging_config import resolve_level, setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="fnm-desk")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to fnm-desk.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """fnm-desk — manage Node.js versions through fnm."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    try:
        config = load_config(ctx.obj["config_path"])
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)
    ctx.obj["config"] = config

    # ── Logging setup (once, at process start) ──────────────────
    setup_logging(
        level=resolve_level(
            debug=debug,
            verbose=verbose,
            quiet=quiet,
            configured=config.log_level,
        ),
        quiet_third_party=not debug,
    )


@cli.group()
def config() -> None:
    """Configuration commands."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Show the effective fnm-desk.yml configuration."""
    path = ctx.obj.get("config_path") or find_config_file()
    cfg = ctx.obj["config"]

    if as_json:
        click.echo(json.dumps({"path": str(path) if path else None, **cfg.model_dump()}, indent=2))
        return

    click.secho("✅ Configuration is valid", fg="green", bold=True)
    click.echo(f"   File:     {path or '(none, using defaults)'}")
    click.echo(f"   fnm path: {cfg.fnm_path or '(auto-detect)'}")
    click.echo(f"   fnm dir:  {cfg.fnm_dir or '(from fnm env)'}")
    if cfg.default_mirror:
        click.echo(f"   Mirror:   {cfg.default_mirror}")
    click.echo()


# ── Register sub-commands ─────────────────────────────────────────

from fnm_desk.ui.cli.settings import dir_cmd, doctor, env  # noqa: E402
from fnm_desk.ui.cli.versions import (  # noqa: E402
    default,
    install,
    list_cmd,
    open_cmd,
    remote,
    uninstall,
    use,
)

cli.add_command(list_cmd)
cli.add_command(remote)
cli.add_command(install)
cli.add_command(uninstall)
cli.add_command(use)
cli.add_command(default)
cli.add_command(open_cmd)
cli.add_command(env)
cli.add_command(dir_cmd)
cli.add_command(doctor)


if __name__ == "__main__":
    cli()
