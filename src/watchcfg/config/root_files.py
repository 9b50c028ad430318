"""Root marker policy.

Computes the ordered list of filenames whose presence marks a directory as
a project root, and whether watches are restricted to such directories
(enforcing mode).

Sources, in order:
1. root_files: explicit marker list. Enforcing follows enforce_root_files.
2. root_restrict_files: deprecated marker list. Always enforcing.
3. A conservative built-in default. Never enforcing.

.watchmanconfig is placed first in the result. The hidden
_ignore_watchmanconfig flag drops it, but only for sources 2 and 3; an
explicit root_files list always gets it.

A marker list that is not an array of strings is logged and yields no
markers with enforcement off, instead of stopping the service.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, NamedTuple

from pydantic import StrictStr, TypeAdapter, ValidationError

from watchcfg.config.accessors import get_bool
from watchcfg.config.resolver import get_json
from watchcfg.config.store import ConfigTier, DocumentStore
from watchcfg.exceptions import ConfigSchemaError

if TYPE_CHECKING:
    from watchcfg.config.values import ConfigValue

logger = logging.getLogger(__name__)

WATCHMANCONFIG = ".watchmanconfig"
DEFAULT_ROOT_FILES: tuple[str, ...] = (WATCHMANCONFIG, ".hg", ".git", ".svn")

ROOT_FILES_KEY = "root_files"
LEGACY_ROOT_FILES_KEY = "root_restrict_files"
ENFORCE_ROOT_FILES_KEY = "enforce_root_files"
# Undocumented; scheduled for removal. Do not document or rely on it.
IGNORE_WATCHMANCONFIG_KEY = "_ignore_watchmanconfig"

_MARKER_LIST = TypeAdapter(list[StrictStr])


class RootFiles(NamedTuple):
    """Effective root markers and enforcement flag.

    markers is None when the configured list failed validation.
    """

    markers: list[str] | None
    enforcing: bool


def _validate_marker_list(key: str, value: ConfigValue) -> list[str]:
    """Return the value as a fresh list of strings.

    Raises:
        ConfigSchemaError: If the value is not an array of strings.
    """
    try:
        return _MARKER_LIST.validate_python(value.to_python())
    except ValidationError as e:
        first_error = e.errors()[0] if e.errors() else {}
        field = ".".join(str(loc) for loc in first_error.get("loc", []))
        msg = first_error.get("msg", "validation error")
        location = f" (item {field})" if field else ""
        raise ConfigSchemaError(
            key, f"must be an array of strings{location}: {msg}"
        ) from e


def _prepend_watchmanconfig(markers: list[str]) -> list[str]:
    if markers and markers[0] == WATCHMANCONFIG:
        return markers
    return [WATCHMANCONFIG, *markers]


def _source_tier(store: DocumentStore, key: str) -> str:
    """Name the process-wide tier that supplied key, for log messages."""
    if store.get_raw(ConfigTier.ARGUMENT, key) is not None:
        return ConfigTier.ARGUMENT.value
    return ConfigTier.GLOBAL.value


def compute_root_files(store: DocumentStore) -> RootFiles:
    """Compute the effective root markers and enforcing flag.

    Only the argument and global tiers are consulted.

    Args:
        store: Holder of the argument and global documents.

    Returns:
        RootFiles with a new marker list (never a stored value) and the
        enforcing flag. RootFiles(None, False) if a marker list is invalid.

    Raises:
        ConfigTypeError: If enforce_root_files or _ignore_watchmanconfig is
            set to a non-boolean value.
    """
    ignore_watchmanconfig = get_bool(store, None, IGNORE_WATCHMANCONFIG_KEY, False)
    enforcing = get_bool(store, None, ENFORCE_ROOT_FILES_KEY, False)

    value = get_json(store, None, ROOT_FILES_KEY)
    if value is not None:
        try:
            markers = _validate_marker_list(ROOT_FILES_KEY, value)
        except ConfigSchemaError as e:
            logger.error("%s config %s", _source_tier(store, ROOT_FILES_KEY), e)
            return RootFiles(None, False)
        return RootFiles(_prepend_watchmanconfig(markers), enforcing)

    value = get_json(store, None, LEGACY_ROOT_FILES_KEY)
    if value is not None:
        try:
            markers = _validate_marker_list(LEGACY_ROOT_FILES_KEY, value)
        except ConfigSchemaError as e:
            logger.error(
                "deprecated %s config %s", _source_tier(store, LEGACY_ROOT_FILES_KEY), e
            )
            return RootFiles(None, False)
        if not ignore_watchmanconfig:
            markers = _prepend_watchmanconfig(markers)
        return RootFiles(markers, True)

    if ignore_watchmanconfig:
        return RootFiles(list(DEFAULT_ROOT_FILES[1:]), False)
    return RootFiles(list(DEFAULT_ROOT_FILES), False)
