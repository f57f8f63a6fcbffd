"""Command-line entry point for the pretty printer.

Purpose
-------
Translate flags, environment variables, and an optional ``.env`` file into a
finished :class:`PrettyJsonLogConfig`, then run the pipeline over stdin.

Contents
--------
* :func:`cli` - Click command.
* :func:`main` - test-friendly runner returning an exit code.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Sequence

import click
from rich.errors import StyleSyntaxError
from rich.style import Style

from . import __init__conf__
from . import config as config_module
from .adapters import RichConsoleAdapter
from .domain import Palette, parse_level_styles
from .pretty_json_log import PrettyJsonLog, summary_info

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _build_palette(raw_styles: str | None) -> Palette:
    overrides = parse_level_styles(raw_styles)
    for level, style in overrides.items():
        try:
            Style.parse(style)
        except StyleSyntaxError as exc:
            raise click.BadParameter(f"invalid style for {level}: {exc}", param_hint="--level-styles") from exc
    return Palette().with_level_styles(overrides)


@click.command(context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--time-key", default=None, help="Comma-separated fallback list of time field names.")
@click.option("--level-key", default=None, help="Comma-separated fallback list of level field names.")
@click.option("--message-key", default=None, help="Comma-separated fallback list of message field names.")
@click.option(
    "--time-format",
    default=None,
    help="Display template using {d} (date), {t} (time) and {ms} (milliseconds).",
)
@click.option("--level-styles", default=None, help="Rich style overrides such as 'INFO=green,ERROR=bold red'.")
@click.option("--force-color", is_flag=True, help="Emit ANSI styles even when stdout is not a terminal.")
@click.option("--no-color", is_flag=True, help="Never emit colour.")
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help="Load environment variables from a nearby .env before resolving options.",
)
@click.option("--verbose", "-v", is_flag=True, help="Log diagnostics to stderr.")
@click.option("--info", "show_info", is_flag=True, help="Print package metadata and exit.")
@click.option("--version", "-V", is_flag=True, help="Print the installed version and exit.")
@click.pass_context
def cli(
    ctx: click.Context,
    *,
    time_key: str | None,
    level_key: str | None,
    message_key: str | None,
    time_format: str | None,
    level_styles: str | None,
    force_color: bool,
    no_color: bool,
    use_dotenv: bool,
    verbose: bool,
    show_info: bool,
    version: bool,
) -> None:
    """Pretty-print JSON log lines read from standard input."""

    if version:
        click.echo(__init__conf__.version)
        return
    if show_info:
        click.echo(summary_info(), nl=False)
        return

    _configure_logging(verbose)

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not click.core.ParameterSource.DEFAULT:
        explicit = use_dotenv
    if config_module.should_use_dotenv(explicit=explicit, env_value=os.getenv(config_module.DOTENV_ENV_VAR)):
        config_module.enable_dotenv()

    if force_color and no_color:
        raise click.UsageError("--force-color and --no-color are mutually exclusive")

    settings = config_module.PrettyJsonLogConfig.from_env(
        time_field_key=time_key,
        level_field_key=level_key,
        message_field_key=message_key,
        output_time_fmt=time_format,
    )
    palette = _build_palette(level_styles if level_styles is not None else os.getenv(config_module.ENV_LEVEL_STYLES))
    console = RichConsoleAdapter(force_color=force_color, no_color=no_color)
    PrettyJsonLog(settings, console=console, palette=palette).run()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Click command in a test-friendly manner.

    Parameters
    ----------
    argv:
        Optional sequence of argument strings (defaults to ``sys.argv[1:]``).

    Returns
    -------
    int
        Zero on success, the Click exit code for usage errors.

    Examples
    --------
    >>> main(["--version"])  # doctest: +ELLIPSIS
    0...
    0
    """

    args = list(argv) if argv is not None else None
    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, standalone_mode=False)
    except click.ClickException as error:
        error.show()
        return error.exit_code
    except click.exceptions.Abort:
        return 1
    return 0


__all__ = ["cli", "main"]
