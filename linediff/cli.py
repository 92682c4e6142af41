from __future__ import annotations

import io
import os
import sys
from pathlib import Path

import click

from linediff.cmd_base import Base
from linediff.command import Command

CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 120,
}


def run_cmd(cmd_name: str, *args: str) -> None:
    argv: list[str] = ["linediff", cmd_name, *args]

    # keep "\r\n" from piped input instead of translating it to "\n"
    if isinstance(sys.stdin, io.TextIOWrapper):
        sys.stdin.reconfigure(newline="")

    cmd: Base = Command.execute(
        Path.cwd(),
        os.environ.copy(),
        argv,
        sys.stdin,
        sys.stdout,
        sys.stderr,
    )

    sys.exit(cmd.status)


@click.group(context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click.pass_context
def cli(ctx: click.Context) -> None:
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.option(
    "-f",
    "--format",
    "output_format",
    type=click.Choice(["html", "text", "document"]),
    default=None,
    help="Output format; defaults to output.format from config, then html.",
)
@click.option(
    "--chars",
    is_flag=True,
    default=False,
    help="Request character-level comparison (currently line-level).",
)
@click.option(
    "--stat",
    "show_stat",
    is_flag=True,
    default=False,
    help="Append a count of added and removed lines.",
)
@click.argument("a", type=click.Path(dir_okay=False, allow_dash=True))
@click.argument("b", type=click.Path(dir_okay=False, allow_dash=True))
def compare(
    output_format: str | None, chars: bool, show_stat: bool, a: str, b: str
) -> None:
    """Compare two files line by line. Use '-' to read one side from stdin."""
    cmd_args: list[str] = []

    if output_format is not None:
        cmd_args.append(f"--format={output_format}")
    if chars:
        cmd_args.append("--chars")
    if show_stat:
        cmd_args.append("--stat")

    run_cmd("compare", *cmd_args, a, b)


@cli.command()
@click.option("--local", "scope", flag_value="local", help="Read the local config file.")
@click.option("--global", "scope", flag_value="global", help="Read ~/.linediffconfig.")
@click.option("--system", "scope", flag_value="system", help="Read /etc/linediffconfig.")
@click.option(
    "-f",
    "--file",
    "file_path",
    type=click.Path(dir_okay=False),
    help="Read the given config file.",
)
@click.option("--get-all", is_flag=True, default=False, help="Print every value.")
@click.argument("key")
def config(
    scope: str | None, file_path: str | None, get_all: bool, key: str
) -> None:
    """Print a linediff configuration value."""
    cmd_args: list[str] = []

    if file_path is not None:
        cmd_args.append(f"--file={file_path}")
    elif scope is not None:
        cmd_args.append(f"--{scope}")
    if get_all:
        cmd_args.append("--get-all")

    run_cmd("config", *cmd_args, key)


if __name__ == "__main__":
    cli()
