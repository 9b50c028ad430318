"""Configuration data models.

This module defines dataclasses for the tool's own runtime options, as
opposed to the watch service configuration documents in values.py.
"""

from dataclasses import dataclass
from pathlib import Path

LOG_LEVELS = ("debug", "info", "warning", "error")
LOG_FORMATS = ("text", "json")


@dataclass(frozen=True)
class LoggingConfig:
    """Logging options for the watchcfg command.

    Attributes:
        level: One of LOG_LEVELS (case-insensitive).
        format: One of LOG_FORMATS (case-insensitive).
        file: Rotating log file; None logs to stderr only.
        include_stderr: Also log to stderr when file is set.
    """

    level: str = "warning"
    format: str = "text"
    file: Path | None = None
    include_stderr: bool = False

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.level.casefold() not in LOG_LEVELS:
            raise ValueError(
                f"level must be one of {', '.join(LOG_LEVELS)}, got {self.level}"
            )
        if self.format.casefold() not in LOG_FORMATS:
            raise ValueError(
                f"format must be one of {', '.join(LOG_FORMATS)}, got {self.format}"
            )
