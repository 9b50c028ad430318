"""Custom exceptions for configuration resolution.

This module provides specific exception types so callers can tell apart
the failure modes of the configuration layer:

- ConfigParseError: the global config file exists but cannot be used.
- ConfigTypeError: a configured value has the wrong kind for its accessor.
  Fatal at the service boundary (see watchcfg.cli.errors.fail_fast).
- ConfigSchemaError: a root marker list is not an array of strings.
"""

from __future__ import annotations

from pathlib import Path


class WatchConfigError(Exception):
    """Base exception for configuration errors.

    All configuration exceptions inherit from this class, allowing callers
    to catch all of them with a single except clause if desired.
    """


class ConfigParseError(WatchConfigError):
    """Raised when a config file exists but cannot be read or parsed.

    Attributes:
        path: The file that failed to load.
        reason: Human-readable description of the failure.
    """

    def __init__(self, path: Path, reason: str) -> None:
        """Initialize the exception.

        Args:
            path: The file that failed to load.
            reason: Description of the failure.
        """
        self.path = path
        self.reason = reason
        super().__init__(f"failed to parse json from {path}: {reason}")


class ConfigTypeError(WatchConfigError):
    """Raised when a configured value has the wrong kind.

    Attributes:
        key: The configuration key that was requested.
        expected: Description of the expected kind (e.g. "a boolean").
        actual: The kind that was found.
    """

    def __init__(self, key: str, expected: str, actual: str) -> None:
        self.key = key
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Expected config value {key} to be {expected}, got {actual}"
        )


class ConfigSchemaError(WatchConfigError):
    """Raised when a structured value does not match its required shape.

    Attributes:
        key: The configuration key that failed validation.
        reason: Description of the mismatch.
    """

    def __init__(self, key: str, reason: str) -> None:
        self.key = key
        self.reason = reason
        super().__init__(f"{key} {reason}")
