"""Shared pytest fixtures for the stackgen test suite.

Provides reusable fixtures for:
- Temporary target directories
- Default and customised ``GenerationRequest`` objects
- External template files
- Recording filesystem primitives for the materializer
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest

from stackgen.scaffolder import GenerationRequest, resolve_request


DEFAULT_PARAMS: dict[str, Any] = {
    "template": "preset:simple",
    "database_port": 27017,
    "http_port": 8080,
    "admin_ui_port": 8081,
    "username": "admin",
    "password": "p455w0rd",
    "api_key": "sample-abcdef",
}


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def target_dir(tmp_path: Path) -> Path:
    """A not-yet-existing project directory inside ``tmp_path``."""
    return tmp_path / "proj"


@pytest.fixture
def external_template(tmp_path: Path) -> Path:
    """An external application template with content no preset contains."""
    path = tmp_path / "templates" / "custom_main.go"
    path.parent.mkdir(parents=True)
    path.write_bytes(b"package main\n\n// custom template \xe2\x9c\x93\nfunc main() {}\n")
    return path


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------

@pytest.fixture
def make_request(target_dir: Path) -> Callable[..., GenerationRequest]:
    """Factory building a request from the defaults plus keyword overrides."""

    def _make(**overrides: Any) -> GenerationRequest:
        params = {"target": target_dir, **DEFAULT_PARAMS, **overrides}
        return resolve_request(**params)

    return _make


@pytest.fixture
def default_request(make_request) -> GenerationRequest:
    """The request produced by the CLI defaults with ``preset:simple``."""
    return make_request()


# ---------------------------------------------------------------------------
# Filesystem primitives
# ---------------------------------------------------------------------------

class RecordingWriter:
    """A ``write_bytes`` primitive that writes for real and can fail on demand."""

    def __init__(self, fail_on: str | None = None, error: OSError | None = None) -> None:
        self.fail_on = fail_on
        self.error = error or PermissionError(13, "Permission denied")
        self.calls: list[Path] = []

    def __call__(self, path: Path, data: bytes, mode: int) -> None:
        self.calls.append(path)
        if self.fail_on is not None and path.name == self.fail_on:
            raise self.error
        path.write_bytes(data)
        path.chmod(mode)


@pytest.fixture
def recording_writer() -> type[RecordingWriter]:
    """The ``RecordingWriter`` class, for tests that configure a failure."""
    return RecordingWriter
