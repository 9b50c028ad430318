"""Tests for the WatchConfig service object."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

import pytest

from watchcfg.config.root_files import RootFiles
from watchcfg.config.service import WatchConfig
from watchcfg.config.store import ConfigTier
from watchcfg.root import WatchedRoot


class TestStartup:
    """Global config loading at construction."""

    def test_loads_file_from_env(self, write_json: Callable[..., Path]) -> None:
        path = write_json({"settle": 30})
        config = WatchConfig(env={"WATCHMAN_CONFIG_FILE": str(path)})
        assert config.config_path == path
        assert config.get_int(None, "settle", 0) == 30

    def test_explicit_path_overrides_env(
        self, write_json: Callable[..., Path]
    ) -> None:
        env_file = write_json({"settle": 1}, "env.json")
        explicit = write_json({"settle": 2}, "explicit.json")
        config = WatchConfig(
            config_path=explicit, env={"WATCHMAN_CONFIG_FILE": str(env_file)}
        )
        assert config.get_int(None, "settle", 0) == 2

    def test_empty_env_skips_loading(self) -> None:
        config = WatchConfig(env={"WATCHMAN_CONFIG_FILE": ""})
        assert config.config_path is None
        assert config.snapshot(ConfigTier.GLOBAL) is None

    def test_missing_file_leaves_global_absent(self, tmp_path: Path) -> None:
        config = WatchConfig(config_path=tmp_path / "missing.json")
        assert config.snapshot(ConfigTier.GLOBAL) is None

    def test_parse_error_does_not_stop_startup(
        self,
        write_json: Callable[..., Path],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        path = write_json("{broken", raw=True)
        with caplog.at_level(logging.ERROR):
            config = WatchConfig(config_path=path)
        assert config.snapshot(ConfigTier.GLOBAL) is None
        assert "failed to parse json" in caplog.text
        # Writes after a failed load create the document lazily
        config.set_global("settle", 5)
        assert config.get_int(None, "settle", 0) == 5

    @pytest.mark.parametrize("depth", [500, 100_000])
    def test_deeply_nested_file_does_not_stop_startup(
        self,
        write_json: Callable[..., Path],
        caplog: pytest.LogCaptureFixture,
        depth: int,
    ) -> None:
        path = write_json('{"a": ' + "[" * depth + "]" * depth + "}", raw=True)
        with caplog.at_level(logging.ERROR):
            config = WatchConfig(config_path=path)
        assert config.snapshot(ConfigTier.GLOBAL) is None
        assert "failed to parse json" in caplog.text

    def test_unrelated_null_keeps_enforcement(
        self, write_json: Callable[..., Path]
    ) -> None:
        """A null under another key must not disable root restriction."""
        path = write_json({"root_restrict_files": [".git"], "unused": None})
        config = WatchConfig(config_path=path)
        assert config.compute_root_files() == RootFiles(
            [".watchmanconfig", ".git"], True
        )

    def test_load_global_false(self, write_json: Callable[..., Path]) -> None:
        path = write_json({"settle": 30})
        config = WatchConfig(load_global=False, config_path=path)
        assert config.get_int(None, "settle", 0) == 0


class TestServiceApi:
    """The service delegates to the resolution functions."""

    def test_precedence_through_service(
        self,
        config: WatchConfig,
        make_root: Callable[..., WatchedRoot],
    ) -> None:
        config.set_global("name", "global")
        config.set_argument("name", "arg")
        root = make_root({"name": "root"})

        value = config.get_json(root, "name")
        assert value is not None
        assert value.value == "root"
        assert config.get_string(None, "name", "") == "arg"

    def test_accessors(self, config: WatchConfig) -> None:
        config.set_argument("i", 1)
        config.set_argument("b", True)
        config.set_argument("d", 1.5)
        assert config.get_int(None, "i", 0) == 1
        assert config.get_bool(None, "b", False) is True
        assert config.get_double(None, "d", 0.0) == 1.5

    def test_root_files_and_trouble_url(self, config: WatchConfig) -> None:
        config.set_global("root_files", ["a"])
        assert config.compute_root_files().markers == [".watchmanconfig", "a"]
        assert config.get_trouble_url().startswith("https://")

    def test_instances_are_isolated(self) -> None:
        first = WatchConfig(load_global=False)
        second = WatchConfig(load_global=False)
        first.set_global("a", 1)
        assert second.get_json(None, "a") is None


class TestShutdown:
    """Releasing the process-wide documents."""

    def test_shutdown_is_idempotent(self, config: WatchConfig) -> None:
        config.shutdown()
        config.set_argument("a", 1)
        config.shutdown()
        config.shutdown()
        assert config.snapshot(ConfigTier.ARGUMENT) is None

    def test_context_manager_shuts_down(self) -> None:
        with WatchConfig(load_global=False) as config:
            config.set_global("a", 1)
        assert config.snapshot(ConfigTier.GLOBAL) is None
