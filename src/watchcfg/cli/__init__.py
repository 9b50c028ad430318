"""CLI module for watchcfg."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from watchcfg.cli.exit_codes import ExitCode

logger = logging.getLogger(__name__)


def _configure_logging(
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
) -> None:
    """Configure logging from CLI options.

    Args:
        log_level: Override log level (debug, info, warning, error).
        log_file: Write logs to this rotating file instead of stderr.
        log_json: Use JSON log format.
    """
    from watchcfg.config.models import LoggingConfig
    from watchcfg.logging import configure_logging

    configure_logging(
        LoggingConfig(
            level=log_level or "warning",
            format="json" if log_json else "text",
            file=log_file,
        )
    )


def _parse_option(option: str) -> tuple[str, object]:
    """Split a KEY=VALUE option, decoding VALUE as JSON when possible.

    A VALUE that is not valid JSON is kept as a plain string, so
    ``-o name=foo`` and ``-o 'name="foo"'`` are equivalent.

    Raises:
        click.BadParameter: If the option has no '=', an empty key, or a value
            nested too deeply to decode.
    """
    name, sep, raw = option.partition("=")
    if not sep or not name:
        raise click.BadParameter(
            f"expected KEY=VALUE, got {option!r}", param_hint="'-o' / '--option'"
        )
    try:
        return name, json.loads(raw)
    except json.JSONDecodeError:
        return name, raw
    except RecursionError:
        raise click.BadParameter(
            f"value for {name} is nested too deeply", param_hint="'-o' / '--option'"
        ) from None


@click.group()
@click.version_option(package_name="watchcfg")
@click.option(
    "--config-file",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Global config file (overrides WATCHMAN_CONFIG_FILE).",
)
@click.option(
    "--no-global",
    is_flag=True,
    default=False,
    help="Do not load the global config file.",
)
@click.option(
    "-o",
    "--option",
    "options",
    multiple=True,
    metavar="KEY=VALUE",
    help="Set an argument-level config value (VALUE is JSON or a string).",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    envvar="WATCHCFG_LOG_LEVEL",
    help="Override log level (default: warning).",
)
@click.option(
    "--log-file",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    envvar="WATCHCFG_LOG_FILE",
    help="Write logs to a rotating file instead of stderr.",
)
@click.option(
    "--log-json",
    is_flag=True,
    default=False,
    help="Use JSON log format.",
)
@click.pass_context
def main(
    ctx: click.Context,
    config_file: Path | None,
    no_global: bool,
    options: tuple[str, ...],
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
) -> None:
    """Inspect the effective configuration of the watch service."""
    from watchcfg.config.service import WatchConfig

    _configure_logging(log_level, log_file, log_json)

    parsed = [_parse_option(option) for option in options]

    config = WatchConfig(load_global=not no_global, config_path=config_file)
    ctx.call_on_close(config.shutdown)
    logger.debug(
        "watchcfg starting: config_file=%s, options=%d",
        config.config_path if config.config_path is not None else "none",
        len(parsed),
    )

    for name, value in parsed:
        try:
            config.set_argument(name, value)
        except (TypeError, ValueError) as e:
            click.echo(f"Error: invalid value for {name}: {e}", err=True)
            ctx.exit(ExitCode.INVALID_ARGUMENT)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config


# Defer import to avoid circular dependency
def _register_commands():
    from watchcfg.cli.query import (
        dump_command,
        get_command,
        root_files_command,
        trouble_url_command,
    )

    main.add_command(get_command)
    main.add_command(root_files_command)
    main.add_command(trouble_url_command)
    main.add_command(dump_command)


_register_commands()
