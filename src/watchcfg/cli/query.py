"""CLI commands for querying effective configuration.

Every command runs inside fail_fast(), so a value of the wrong type
terminates the command with ExitCode.CONFIG_ERROR.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click

from watchcfg.cli.errors import fail_fast
from watchcfg.cli.exit_codes import ExitCode

if TYPE_CHECKING:
    from watchcfg.config.service import WatchConfig

logger = logging.getLogger(__name__)

_MISSING = object()


def _get_config(ctx: click.Context) -> WatchConfig:
    return ctx.obj["config"]


@click.command("get")
@click.argument("key")
@click.option(
    "--root",
    "root_dir",
    type=click.Path(path_type=Path, file_okay=False, exists=True),
    default=None,
    help="Watched root whose .watchmanconfig takes precedence.",
)
@click.option(
    "--type",
    "value_type",
    type=click.Choice(["json", "string", "int", "bool", "double"]),
    default="json",
    show_default=True,
    help="Accessor used to read the value.",
)
@click.option(
    "--default",
    "default",
    default=None,
    help="Printed verbatim when the key is not set.",
)
@click.pass_context
def get_command(
    ctx: click.Context,
    key: str,
    root_dir: Path | None,
    value_type: str,
    default: str | None,
) -> None:
    """Print the effective value of KEY.

    Examples:

        # Raw JSON value
        watchcfg get root_files

        # Type-checked boolean, including a root's .watchmanconfig
        watchcfg get --root ~/src/project --type bool enforce_root_files
    """
    from watchcfg.root import WatchedRoot

    config = _get_config(ctx)
    root = WatchedRoot.from_directory(root_dir) if root_dir is not None else None

    with fail_fast():
        if value_type == "json":
            raw = config.get_json(root, key)
            result: object = raw.to_python() if raw is not None else _MISSING
        elif value_type == "string":
            result = config.get_string(root, key, _MISSING)
        elif value_type == "int":
            result = config.get_int(root, key, _MISSING)
        elif value_type == "bool":
            result = config.get_bool(root, key, _MISSING)
        else:
            result = config.get_double(root, key, _MISSING)

    if result is _MISSING:
        if default is not None:
            click.echo(default)
            return
        click.echo(f"Error: {key} is not set", err=True)
        ctx.exit(ExitCode.KEY_NOT_FOUND)

    if isinstance(result, str) and value_type == "string":
        click.echo(result)
    else:
        click.echo(json.dumps(result))


@click.command("root-files")
@click.option(
    "--json",
    "json_output",
    is_flag=True,
    help="Output in JSON format.",
)
@click.pass_context
def root_files_command(ctx: click.Context, json_output: bool) -> None:
    """Print the effective root markers and enforcing mode.

    Exits with a configuration error when root_files or
    root_restrict_files is not an array of strings.
    """
    config = _get_config(ctx)
    with fail_fast():
        markers, enforcing = config.compute_root_files()

    if json_output:
        click.echo(json.dumps({"root_files": markers, "enforcing": enforcing}))
    elif markers is not None:
        for marker in markers:
            click.echo(marker)
        click.echo(f"enforcing: {'yes' if enforcing else 'no'}")

    if markers is None:
        if not json_output:
            click.echo("Error: invalid root marker configuration", err=True)
        ctx.exit(ExitCode.CONFIG_ERROR)


@click.command("trouble-url")
@click.pass_context
def trouble_url_command(ctx: click.Context) -> None:
    """Print the troubleshooting URL."""
    config = _get_config(ctx)
    with fail_fast():
        click.echo(config.get_trouble_url())


@click.command("dump")
@click.option(
    "--tier",
    type=click.Choice(["argument", "global", "all"]),
    default="all",
    show_default=True,
    help="Which process-wide document to print.",
)
@click.pass_context
def dump_command(ctx: click.Context, tier: str) -> None:
    """Print the argument and/or global documents as JSON.

    An absent document is printed as null.
    """
    from watchcfg.config.store import ConfigTier
    from watchcfg.config.values import document_to_python

    config = _get_config(ctx)
    tiers = list(ConfigTier) if tier == "all" else [ConfigTier(tier)]

    output: dict[str, object] = {}
    with fail_fast():
        for selected in tiers:
            document = config.snapshot(selected)
            output[selected.value] = (
                document_to_python(document) if document is not None else None
            )
    click.echo(json.dumps(output, indent=2, sort_keys=True))
