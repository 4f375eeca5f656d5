"""Shared helpers for CLI command modules."""

from __future__ import annotations

import sys

import click

from fnm_desk.adapters.base import CommandInterface


def get_commands(ctx: click.Context) -> CommandInterface:
    """Command interface injected in ``ctx.obj``, else the real fnm bridge."""
    commands = ctx.obj.get("commands")
    if commands is None:
        from fnm_desk.adapters.fnm import FnmCommandInterface

        cfg = ctx.obj.get("config")
        commands = FnmCommandInterface(
            fnm_path=cfg.fnm_path if cfg else None,
            fnm_dir=cfg.fnm_dir if cfg else None,
        )
        ctx.obj["commands"] = commands
    return commands


def fail(message: str | None) -> None:
    """Print an error and exit 1."""
    click.secho(f"❌ {message or 'Unknown error'}", fg="red")
    sys.exit(1)
