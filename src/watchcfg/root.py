"""Watched root collaborator.

The configuration layer only needs one thing from a watched root: the
per-root config document, exposed as ``config_file``. Any object with that
attribute satisfies WatchedRootLike. WatchedRoot is a minimal
implementation that reads ``<root>/.watchmanconfig``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from watchcfg.config.loader import load_config_file
from watchcfg.config.values import ConfigDocument
from watchcfg.exceptions import ConfigParseError

logger = logging.getLogger(__name__)

ROOT_CONFIG_FILE_NAME = ".watchmanconfig"


class WatchedRootLike(Protocol):
    """Object exposing an optional per-root config document.

    The owner must keep the document stable for the duration of any
    resolution call that is given the root.
    """

    config_file: ConfigDocument | None


@dataclass(frozen=True)
class WatchedRoot:
    """A watched directory and its parsed .watchmanconfig, if any."""

    path: Path
    config_file: ConfigDocument | None = None

    @classmethod
    def from_directory(cls, path: Path) -> WatchedRoot:
        """Create a root, loading its .watchmanconfig when present.

        A missing file gives a root without a document. A malformed file is
        logged and also gives a root without a document.

        Args:
            path: The root directory.

        Returns:
            WatchedRoot for the directory.
        """
        config_path = path / ROOT_CONFIG_FILE_NAME
        try:
            document = load_config_file(config_path)
        except ConfigParseError as e:
            logger.error("%s", e)
            document = None
        return cls(path=path, config_file=document)
