"""Configuration service object.

WatchConfig bundles a DocumentStore with the startup load and shutdown
lifecycle, so consumers receive the service explicitly instead of reaching
for module globals. Tests create isolated instances.

Accessors raise ConfigTypeError on a wrongly typed value; turning that into
a process exit is left to the caller (see watchcfg.cli.errors.fail_fast).
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeVar

from watchcfg.config import accessors
from watchcfg.config.loader import get_global_config_path, load_global_config
from watchcfg.config.resolver import get_json
from watchcfg.config.root_files import RootFiles, compute_root_files
from watchcfg.config.store import ConfigTier, DocumentStore

if TYPE_CHECKING:
    from types import TracebackType

    from watchcfg.config.values import ConfigDocument, ConfigValue
    from watchcfg.root import WatchedRootLike

T = TypeVar("T")


class WatchConfig:
    """Effective configuration for the watch service.

    Example:
        with WatchConfig() as config:
            config.set_argument("enforce_root_files", True)
            markers, enforcing = config.compute_root_files()
    """

    def __init__(
        self,
        *,
        load_global: bool = True,
        config_path: Path | None = None,
        env: Mapping[str, str] | None = None,
    ) -> None:
        """Create the service, optionally loading the global config file.

        Args:
            load_global: If False, start with no global document.
            config_path: Explicit global config path (overrides the
                environment).
            env: Optional mapping to use instead of os.environ.
        """
        self._store = DocumentStore()
        self.config_path: Path | None = None
        if load_global:
            self.config_path = (
                config_path
                if config_path is not None
                else get_global_config_path(env)
            )
            document = load_global_config(self.config_path)
            if document is not None:
                self._store.replace_global(document)

    @property
    def store(self) -> DocumentStore:
        return self._store

    def __enter__(self) -> WatchConfig:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.shutdown()

    def shutdown(self) -> None:
        """Release the argument and global documents. Idempotent."""
        self._store.clear()

    # Write API

    def set_argument(self, name: str, value: Any) -> None:
        self._store.set_argument(name, value)

    def set_global(self, name: str, value: Any) -> None:
        self._store.set_global(name, value)

    # Read API

    def get_json(
        self, root: WatchedRootLike | None, name: str
    ) -> ConfigValue | None:
        return get_json(self._store, root, name)

    def get_string(self, root: WatchedRootLike | None, name: str, default: T) -> str | T:
        return accessors.get_string(self._store, root, name, default)

    def get_int(self, root: WatchedRootLike | None, name: str, default: T) -> int | T:
        return accessors.get_int(self._store, root, name, default)

    def get_bool(self, root: WatchedRootLike | None, name: str, default: T) -> bool | T:
        return accessors.get_bool(self._store, root, name, default)

    def get_double(
        self, root: WatchedRootLike | None, name: str, default: T
    ) -> float | T:
        return accessors.get_double(self._store, root, name, default)

    def get_trouble_url(self) -> str:
        return accessors.get_trouble_url(self._store)

    def compute_root_files(self) -> RootFiles:
        return compute_root_files(self._store)

    def snapshot(self, tier: ConfigTier) -> ConfigDocument | None:
        return self._store.snapshot(tier)
