"""Tests for config loader module."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

import pytest

from watchcfg.config import loader
from watchcfg.config.loader import (
    get_global_config_path,
    load_config_file,
    load_global_config,
)
from watchcfg.exceptions import ConfigParseError


class TestGetGlobalConfigPath:
    """Tests for get_global_config_path function."""

    def test_returns_default_when_env_not_set(self) -> None:
        """Should return the build default when WATCHMAN_CONFIG_FILE is unset."""
        assert get_global_config_path(env={}) == loader.DEFAULT_CONFIG_FILE

    def test_returns_env_path_when_set(self) -> None:
        """Should return env path when WATCHMAN_CONFIG_FILE is set."""
        result = get_global_config_path(env={"WATCHMAN_CONFIG_FILE": "/custom.json"})
        assert result == Path("/custom.json")

    def test_empty_value_disables_loading(self) -> None:
        """An empty WATCHMAN_CONFIG_FILE means no global config at all."""
        assert get_global_config_path(env={"WATCHMAN_CONFIG_FILE": ""}) is None

    def test_no_default_configured(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without a build default an unset variable disables loading."""
        monkeypatch.setattr(loader, "DEFAULT_CONFIG_FILE", None)
        assert get_global_config_path(env={}) is None

    def test_reads_os_environ_by_default(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Should fall back to os.environ when no mapping is injected."""
        monkeypatch.setenv("WATCHMAN_CONFIG_FILE", "/from/environ.json")
        assert get_global_config_path() == Path("/from/environ.json")


class TestLoadConfigFile:
    """Tests for load_config_file function."""

    def test_returns_none_when_file_not_exists(self, tmp_path: Path) -> None:
        """A missing file is not an error."""
        assert load_config_file(tmp_path / "nonexistent.json") is None

    def test_loads_valid_config_file(self, write_json: Callable[..., Path]) -> None:
        """Should load and tag every value."""
        path = write_json({"root_files": [".git"], "settle": 20, "fsevents": True})
        document = load_config_file(path)
        assert document is not None
        assert document["root_files"].to_python() == [".git"]
        assert document["settle"].is_integer
        assert document["fsevents"].is_boolean

    def test_document_is_read_only(self, write_json: Callable[..., Path]) -> None:
        path = write_json({"a": 1})
        document = load_config_file(path)
        assert document is not None
        with pytest.raises(TypeError):
            document["b"] = document["a"]  # type: ignore[index]

    def test_malformed_json_raises(self, write_json: Callable[..., Path]) -> None:
        path = write_json('{"a": ', raw=True)
        with pytest.raises(ConfigParseError) as exc_info:
            load_config_file(path)
        assert exc_info.value.path == path
        assert "failed to parse json from" in str(exc_info.value)

    def test_non_object_top_level_raises(
        self, write_json: Callable[..., Path]
    ) -> None:
        path = write_json(["a", "b"])
        with pytest.raises(ConfigParseError, match="must be an object"):
            load_config_file(path)

    def test_null_value_keeps_document(self, write_json: Callable[..., Path]) -> None:
        """An unrelated null does not discard the other keys."""
        path = write_json({"root_restrict_files": [".git"], "unused": None})
        document = load_config_file(path)
        assert document is not None
        assert document["root_restrict_files"].to_python() == [".git"]
        assert document["unused"].is_null

    def test_deeply_nested_json_raises(self, write_json: Callable[..., Path]) -> None:
        """Nesting too deep for the JSON decoder is a parse error."""
        depth = 100_000
        path = write_json('{"a": ' + "[" * depth + "]" * depth + "}", raw=True)
        with pytest.raises(ConfigParseError, match="nested too deeply"):
            load_config_file(path)

    def test_moderately_nested_json_raises(
        self, write_json: Callable[..., Path]
    ) -> None:
        """Nesting the decoder accepts but values reject is a parse error."""
        depth = 500
        path = write_json('{"a": ' + "[" * depth + "]" * depth + "}", raw=True)
        with pytest.raises(ConfigParseError, match="nest at most"):
            load_config_file(path)

    def test_nan_raises(self, write_json: Callable[..., Path]) -> None:
        path = write_json('{"a": NaN}', raw=True)
        with pytest.raises(ConfigParseError, match="finite"):
            load_config_file(path)

    def test_directory_raises(self, tmp_path: Path) -> None:
        """Paths that exist but cannot be read are parse errors."""
        with pytest.raises(ConfigParseError):
            load_config_file(tmp_path)


class TestLoadGlobalConfig:
    """Tests for the non-raising startup loader."""

    def test_none_path_skips(self) -> None:
        assert load_global_config(None) is None

    def test_missing_file_is_silent(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG):
            assert load_global_config(tmp_path / "missing.json") is None
        assert caplog.records == []

    def test_malformed_file_is_logged(
        self,
        write_json: Callable[..., Path],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        path = write_json("not json", raw=True)
        with caplog.at_level(logging.ERROR):
            assert load_global_config(path) is None
        assert f"failed to parse json from {path}" in caplog.text

    def test_deeply_nested_file_is_logged(
        self,
        write_json: Callable[..., Path],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        depth = 100_000
        path = write_json('{"a": ' + "[" * depth + "]" * depth + "}", raw=True)
        with caplog.at_level(logging.ERROR):
            assert load_global_config(path) is None
        assert "nested too deeply" in caplog.text

    def test_valid_file(self, write_json: Callable[..., Path]) -> None:
        path = write_json({"a": "b"})
        document = load_global_config(path)
        assert document is not None
        assert document["a"].value == "b"
