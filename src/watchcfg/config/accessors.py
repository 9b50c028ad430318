"""Typed accessors for effective configuration values.

Each accessor resolves the key through get_json(). An absent key yields the
caller's default unchanged. A present value of the wrong kind raises
ConfigTypeError rather than being coerced or replaced by the default: a
misconfigured value must stop the service (see cli.errors.fail_fast), not be
silently ignored.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from watchcfg.config.resolver import get_json
from watchcfg.exceptions import ConfigTypeError

if TYPE_CHECKING:
    from watchcfg.config.store import DocumentStore
    from watchcfg.root import WatchedRootLike

T = TypeVar("T")

DEFAULT_TROUBLE_URL = "https://facebook.github.io/watchman/docs/troubleshooting.html"


def get_string(
    store: DocumentStore,
    root: WatchedRootLike | None,
    name: str,
    default: T,
) -> str | T:
    """Get a string value.

    Raises:
        ConfigTypeError: If the value is present but not a string.
    """
    value = get_json(store, root, name)
    if value is None:
        return default
    if not value.is_string:
        raise ConfigTypeError(name, "a string", value.kind.value)
    return value.value


def get_int(
    store: DocumentStore,
    root: WatchedRootLike | None,
    name: str,
    default: T,
) -> int | T:
    """Get an integer value.

    Reals are rejected even when integral (3.0 is not an integer).

    Raises:
        ConfigTypeError: If the value is present but not an integer.
    """
    value = get_json(store, root, name)
    if value is None:
        return default
    if not value.is_integer:
        raise ConfigTypeError(name, "an integer", value.kind.value)
    return value.value


def get_bool(
    store: DocumentStore,
    root: WatchedRootLike | None,
    name: str,
    default: T,
) -> bool | T:
    """Get a boolean value.

    Raises:
        ConfigTypeError: If the value is present but not a boolean.
    """
    value = get_json(store, root, name)
    if value is None:
        return default
    if not value.is_boolean:
        raise ConfigTypeError(name, "a boolean", value.kind.value)
    return value.value


def get_double(
    store: DocumentStore,
    root: WatchedRootLike | None,
    name: str,
    default: T,
) -> float | T:
    """Get a numeric value as a float.

    Both integers and reals are accepted.

    Raises:
        ConfigTypeError: If the value is present but not a number.
    """
    value = get_json(store, root, name)
    if value is None:
        return default
    if not value.is_number:
        raise ConfigTypeError(name, "a number", value.kind.value)
    return float(value.value)


def get_trouble_url(store: DocumentStore) -> str:
    """Get the troubleshooting URL shown in user-facing error messages."""
    return get_string(store, None, "troubleshooting_url", DEFAULT_TROUBLE_URL)
