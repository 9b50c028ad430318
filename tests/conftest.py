"""Shared test fixtures for watchcfg."""

import json
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest

from watchcfg.config import DocumentStore, WatchConfig, document_from_python
from watchcfg.root import WatchedRoot


@pytest.fixture
def store() -> DocumentStore:
    """Return an empty document store."""
    return DocumentStore()


@pytest.fixture
def config() -> Iterator[WatchConfig]:
    """Create a service with no global config file loaded."""
    service = WatchConfig(load_global=False)
    yield service
    service.shutdown()


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes JSON (or raw text) to a file under tmp_path."""

    def _write(data: Any, name: str = "watchman.json", *, raw: bool = False) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(data if raw else json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_root() -> Callable[..., WatchedRoot]:
    """Return a helper building a WatchedRoot with an in-memory document.

    The helper takes the JSON object for the root document, or None for a
    root without one.
    """

    def _make(data: dict[str, Any] | None) -> WatchedRoot:
        document = document_from_python(data) if data is not None else None
        return WatchedRoot(path=Path("/watched"), config_file=document)

    return _make
