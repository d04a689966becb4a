"""Main CLI entry point for conlog.

Commands:
    send - Send one message to a syslog collector

Subcommand help:
    conlog COMMAND -h         Show help for a specific command
"""

from __future__ import annotations

__all__ = ["cli"]

import sys

import click

from conlog import __version__

from .commands.send import send


@click.group(
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option("--version", "-v", is_flag=True, help="Show version")
@click.pass_context
def cli(ctx: click.Context, version: bool) -> None:
    """conlog: syslog and file logging for console applications."""
    if version:
        click.echo(f"conlog {__version__}")
        sys.exit(0)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Register commands
cli.add_command(send)


def main() -> None:
    """CLI entry point."""
    cli()
