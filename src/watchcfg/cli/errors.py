"""Conversion of fatal configuration errors into process exit."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from watchcfg.cli.exit_codes import ExitCode
from watchcfg.exceptions import ConfigTypeError

logger = logging.getLogger(__name__)


@contextmanager
def fail_fast() -> Iterator[None]:
    """Terminate the process if a config value has the wrong type.

    Logs the mismatch at CRITICAL and raises SystemExit with
    ExitCode.CONFIG_ERROR. Other exceptions propagate unchanged.

    Example:
        with fail_fast():
            markers, enforcing = config.compute_root_files()
    """
    try:
        yield
    except ConfigTypeError as e:
        logger.critical("%s", e)
        raise SystemExit(ExitCode.CONFIG_ERROR) from e
