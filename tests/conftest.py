from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest

from runfiles_resolver.global_runfiles import reset_runfiles
from runfiles_resolver.models import DIRECTORY_VAR, MANIFEST_FILE_VAR


@pytest.fixture(autouse=True)
def isolated_runfiles_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep the host's runfiles variables and the process-wide resolver out of tests."""
    monkeypatch.delenv(MANIFEST_FILE_VAR, raising=False)
    monkeypatch.delenv(DIRECTORY_VAR, raising=False)
    reset_runfiles()
    yield
    reset_runfiles()


@pytest.fixture()
def write_manifest(tmp_path: Path):
    """Return a helper that writes manifest text and returns its path."""

    def _write(content: str, name: str = "MANIFEST") -> Path:
        path = tmp_path / name
        path.write_bytes(content.encode("utf-8"))
        return path

    return _write


@pytest.fixture()
def program(tmp_path: Path) -> Path:
    """A fake program path with no co-located runfiles."""
    prog_dir = tmp_path / "bin"
    prog_dir.mkdir()
    prog = prog_dir / "prog"
    prog.write_text("#!/bin/sh\n")
    return prog
