"""Global config file discovery and loading.

The global config file is located with the following precedence:
1. An explicit path passed by the caller
2. WATCHMAN_CONFIG_FILE environment variable (an empty value disables loading)
3. DEFAULT_CONFIG_FILE (used only when the variable is unset)

Environment variables:
- WATCHMAN_CONFIG_FILE: Path to the global JSON config file
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path

from watchcfg.config.values import ConfigDocument, document_from_python
from watchcfg.exceptions import ConfigParseError

logger = logging.getLogger(__name__)

CONFIG_FILE_ENV_VAR = "WATCHMAN_CONFIG_FILE"

# Build-time default location of the global config file
DEFAULT_CONFIG_FILE: Path | None = Path("/etc/watchman.json")


def get_global_config_path(env: Mapping[str, str] | None = None) -> Path | None:
    """Get the global config file path.

    Args:
        env: Optional mapping to use instead of os.environ. Useful for testing.

    Returns:
        Path to the config file, or None if loading is disabled.
    """
    environ: Mapping[str, str] = env if env is not None else os.environ
    value = environ.get(CONFIG_FILE_ENV_VAR)
    if value is None:
        return DEFAULT_CONFIG_FILE
    if value == "":
        return None
    return Path(value)


def load_config_file(path: Path) -> ConfigDocument | None:
    """Load a JSON config document.

    Args:
        path: Path to the JSON file.

    Returns:
        Read-only ConfigDocument, or None if the file doesn't exist.

    Raises:
        ConfigParseError: If the file can't be read, isn't valid JSON, or
            its top level is not an object.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigParseError(path, str(e)) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigParseError(
            path, f"{e.msg} at line {e.lineno} column {e.colno}"
        ) from e
    except RecursionError as e:
        raise ConfigParseError(path, "document is nested too deeply") from e

    if not isinstance(data, dict):
        raise ConfigParseError(
            path, f"top-level value must be an object, got {type(data).__name__}"
        )
    try:
        document = document_from_python(data)
    except (TypeError, ValueError) as e:
        raise ConfigParseError(path, str(e)) from e

    logger.debug("Loaded config from %s", path)
    return document


def load_global_config(path: Path | None) -> ConfigDocument | None:
    """Load the global config at startup, never raising.

    A missing file is silently treated as no config. A file that fails to
    load is logged and also treated as no config, so startup continues.

    Args:
        path: Path from get_global_config_path(), or None to skip loading.

    Returns:
        The loaded document, or None.
    """
    if path is None:
        return None
    try:
        return load_config_file(path)
    except ConfigParseError as e:
        logger.error("%s", e)
        return None
