"""Centralized exit codes for all CLI commands.

Exit code ranges:
    0: Success
    1-9: General errors
    10-19: Configuration and input errors
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for watchcfg CLI commands."""

    # Success (0)
    SUCCESS = 0

    # General errors (1-9)
    GENERAL_ERROR = 1

    # Configuration and input errors (10-19)
    CONFIG_ERROR = 11
    KEY_NOT_FOUND = 12
    INVALID_ARGUMENT = 13
