"""Precedence resolution across config tiers.

Precedence (highest to lowest):
1. The watched root's own document (root.config_file)
2. Argument tier (values set from the command line)
3. Global tier (global config file and set_global writes)

The first tier holding the key wins outright; values are never merged
across tiers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from watchcfg.config.store import ConfigTier, DocumentStore
from watchcfg.config.values import ConfigValue

if TYPE_CHECKING:
    from watchcfg.root import WatchedRootLike


def get_json(
    store: DocumentStore,
    root: WatchedRootLike | None,
    name: str,
) -> ConfigValue | None:
    """Return the effective raw value for a key.

    The root document is read without locking; the caller guarantees it is
    not mutated during the call.

    Args:
        store: Holder of the argument and global documents.
        root: Optional watched root whose config_file takes precedence.
        name: Configuration key.

    Returns:
        The first matching value, or None if no tier has the key.
    """
    if root is not None and root.config_file is not None:
        value = root.config_file.get(name)
        if value is not None:
            return value
    value = store.get_raw(ConfigTier.ARGUMENT, name)
    if value is not None:
        return value
    return store.get_raw(ConfigTier.GLOBAL, name)
