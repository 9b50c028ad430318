"""Process-wide argument and global configuration documents.

DocumentStore holds the two documents that are shared by every watched
root: values set from command-line arguments and values loaded from the
global config file (or written later via set_global). Both are guarded by
one ReadWriteLock. Writes are rare, so a single lock for both documents
keeps the locking simple at the cost of writers on one tier blocking
readers of the other.
"""

from __future__ import annotations

import logging
from enum import Enum
from types import MappingProxyType
from typing import Any

from watchcfg.config.rwlock import ReadWriteLock
from watchcfg.config.values import ConfigDocument, ConfigValue

logger = logging.getLogger(__name__)


class ConfigTier(Enum):
    """Process-wide precedence tiers held by a DocumentStore."""

    ARGUMENT = "argument"
    GLOBAL = "global"


class DocumentStore:
    """Thread-safe holder of the argument and global documents.

    Documents are created lazily on first write. Returned ConfigValues are
    immutable, so they remain valid after the lock is released.
    """

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._documents: dict[ConfigTier, dict[str, ConfigValue] | None] = {
            ConfigTier.ARGUMENT: None,
            ConfigTier.GLOBAL: None,
        }

    def _set(self, tier: ConfigTier, name: str, value: Any) -> None:
        config_value = ConfigValue.from_python(value)
        with self._lock.exclusive():
            document = self._documents[tier]
            if document is None:
                document = {}
                self._documents[tier] = document
            document[name] = config_value
        logger.debug("Set %s config %s = %s", tier.value, name, config_value.to_json())

    def set_argument(self, name: str, value: Any) -> None:
        """Set a value in the argument tier (last write wins).

        Args:
            name: Configuration key.
            value: ConfigValue or JSON-compatible Python value.
        """
        self._set(ConfigTier.ARGUMENT, name, value)

    def set_global(self, name: str, value: Any) -> None:
        """Set a value in the global tier (last write wins).

        Args:
            name: Configuration key.
            value: ConfigValue or JSON-compatible Python value.
        """
        self._set(ConfigTier.GLOBAL, name, value)

    def replace_global(self, document: ConfigDocument) -> None:
        """Install a freshly loaded global document, replacing any existing one."""
        with self._lock.exclusive():
            self._documents[ConfigTier.GLOBAL] = dict(document)

    def get_raw(self, tier: ConfigTier, name: str) -> ConfigValue | None:
        """Look up a key in one tier.

        Args:
            tier: The tier to read.
            name: Configuration key (case-sensitive).

        Returns:
            The stored value, or None if the tier or key is absent.
        """
        with self._lock.shared():
            document = self._documents[tier]
            if document is None:
                return None
            return document.get(name)

    def snapshot(self, tier: ConfigTier) -> ConfigDocument | None:
        """Return a read-only copy of a tier's document, or None if absent."""
        with self._lock.shared():
            document = self._documents[tier]
            if document is None:
                return None
            return MappingProxyType(dict(document))

    def clear(self) -> None:
        """Release both documents. Safe to call repeatedly."""
        with self._lock.exclusive():
            self._documents[ConfigTier.ARGUMENT] = None
            self._documents[ConfigTier.GLOBAL] = None
