"""Send command for conlog CLI.

Sends a single message to a syslog collector, for checking that a collector
receives and displays conlog messages.
"""

from __future__ import annotations

__all__ = ["send"]

import click

from conlog.cli.styling import style_error, style_success
from conlog.config import FileLoggingMode
from conlog.constants import DEFAULT_SYSLOG_PORT
from conlog.exceptions import ConlogError
from conlog.syslog_logger import SyslogLogger

SEVERITIES = ("info", "alert", "error", "emergency")


@click.command()
@click.argument("message")
@click.option("--host", "-H", required=True, help="IPv4 address of the syslog collector")
@click.option("--port", "-p", type=int, default=DEFAULT_SYSLOG_PORT, show_default=True, help="Collector UDP port")
@click.option("--app", "app_name", required=True, help="Application name shown in the message")
@click.option(
    "--severity",
    "-s",
    type=click.Choice(SEVERITIES),
    default="info",
    show_default=True,
    help="Syslog severity",
)
@click.option("--detail", "-d", help="Detail line appended to the message")
@click.option("--quiet", "-q", is_flag=True, help="Don't echo the message to the console")
@click.option("--log-file", type=click.Path(dir_okay=False), help="Also append the message to this file")
@click.option("--overwrite", is_flag=True, help="Replace --log-file instead of appending")
def send(
    message: str,
    host: str,
    port: int,
    app_name: str,
    severity: str,
    detail: str | None,
    quiet: bool,
    log_file: str | None,
    overwrite: bool,
) -> None:
    """Send MESSAGE to a syslog collector.

    Examples:
        conlog send -H 10.0.0.5 --app backup "Backup finished"
        conlog send -H 10.0.0.5 --app backup -s error -d "disk full" "Backup failed"
    """
    try:
        logger = SyslogLogger.create(
            host,
            port,
            app_name,
            console_enable=not quiet,
            file_logging=FileLoggingMode.SINGLE_FILE if log_file else FileLoggingMode.DISABLED,
            log_file_name=log_file,
            overwrite=overwrite,
        )
    except ConlogError as e:
        click.echo(style_error(str(e)), err=True)
        raise SystemExit(1) from e

    with logger:
        getattr(logger, f"log_{severity}")(message, detail)

    click.echo(style_success(f"Sent {severity} message to {host}:{port}"), err=True)
