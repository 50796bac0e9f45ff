"""CLI tests for runfiles-resolver commands."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest
from typer.testing import CliRunner

from runfiles_resolver.cli import app


@pytest.fixture
def runner():
    """Create CLI runner."""
    return CliRunner()


@pytest.fixture
def manifest(write_manifest, tmp_path: Path) -> Path:
    return write_manifest(
        "_main/data.txt /abs/data.txt\n"
        "_main/dir /abs/dir\n"
        "_main/__init__.py \n"
        f"_main/tool {sys.executable}\n"
    )


def _base_args(program: Path, manifest: Path) -> list[str]:
    return ["--program", str(program), "--manifest", str(manifest)]


class TestPathCommand:
    def test_prints_locations(self, runner, program, manifest) -> None:
        result = runner.invoke(
            app, [*_base_args(program, manifest), "path", "_main/data.txt", "_main/dir/sub/f"],
        )
        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["/abs/data.txt", "/abs/dir/sub/f"]

    def test_empty_runfile_prints_blank_line(self, runner, program, manifest) -> None:
        result = runner.invoke(app, [*_base_args(program, manifest), "path", "_main/__init__.py"])
        assert result.exit_code == 0
        assert result.stdout == "\n"

    def test_missing_runfile_fails(self, runner, program, manifest) -> None:
        result = runner.invoke(app, [*_base_args(program, manifest), "path", "_main/nope"])
        assert result.exit_code == 1

    def test_invalid_name_fails(self, runner, program, manifest) -> None:
        result = runner.invoke(app, [*_base_args(program, manifest), "path", "a//b"])
        assert result.exit_code == 1

    def test_no_runfiles_found(self, runner, program) -> None:
        result = runner.invoke(app, ["--program", str(program), "path", "a"])
        assert result.exit_code == 1

    def test_directory_option(self, runner, program, tmp_path: Path) -> None:
        result = runner.invoke(
            app, ["--program", str(program), "--directory", str(tmp_path), "path", "ws/f"],
        )
        assert result.exit_code == 0
        assert result.stdout.strip() == str(tmp_path / "ws" / "f")


class TestEnvCommand:
    def test_manifest_env(self, runner, program, manifest) -> None:
        result = runner.invoke(app, [*_base_args(program, manifest), "env"])
        assert result.exit_code == 0
        assert result.stdout.strip() == f"RUNFILES_MANIFEST_FILE={manifest}"

    def test_env_var_default(self, runner, program, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.setenv("RUNFILES_DIR", str(tmp_path))
        result = runner.invoke(app, ["--program", str(program), "env"])
        assert result.exit_code == 0
        assert result.stdout.strip() == f"RUNFILES_DIR={tmp_path}"


class TestExecCommand:
    def test_runs_resolved_runfile_with_env(self, runner, program, manifest) -> None:
        script = "import os, sys; sys.exit(0 if os.environ.get('RUNFILES_MANIFEST_FILE') == sys.argv[1] else 3)"
        result = runner.invoke(
            app,
            [*_base_args(program, manifest), "exec", "--", "_main/tool", "-c", script, str(manifest)],
        )
        assert result.exit_code == 0

    def test_propagates_exit_code(self, runner, program, manifest) -> None:
        result = runner.invoke(
            app,
            [*_base_args(program, manifest), "exec", "--", sys.executable, "-c", "raise SystemExit(5)"],
        )
        assert result.exit_code == 5

    def test_unrunnable_command(self, runner, program, manifest, tmp_path: Path) -> None:
        result = runner.invoke(
            app, [*_base_args(program, manifest), "exec", "--", str(tmp_path / "no-such-binary")],
        )
        assert result.exit_code == 127


class TestManifestCommand:
    def test_lists_entries(self, runner, program, manifest) -> None:
        result = runner.invoke(app, [*_base_args(program, manifest), "manifest"])
        assert result.exit_code == 0
        assert "_main/data.txt" in result.stdout
        assert "(empty)" in result.stdout

    def test_directory_backend_has_no_manifest(self, runner, program, tmp_path: Path) -> None:
        result = runner.invoke(
            app, ["--program", str(program), "--directory", str(tmp_path), "manifest"],
        )
        assert result.exit_code == 1


class TestExecWithDirectoryRunfiles:
    @staticmethod
    def _script(path: Path, exit_code: int) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"#!/bin/sh\nexit {exit_code}\n")
        path.chmod(0o755)
        return path

    @pytest.mark.skipif(sys.platform == "win32", reason="uses a POSIX shell script")
    def test_command_on_path_runs_as_is(self, runner, program, tmp_path: Path, monkeypatch) -> None:
        bin_dir = tmp_path / "on-path"
        self._script(bin_dir / "plain-tool", 0)
        monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")
        runfiles_dir = tmp_path / "rf"
        runfiles_dir.mkdir()

        result = runner.invoke(
            app,
            ["--program", str(program), "--directory", str(runfiles_dir), "exec", "--", "plain-tool"],
        )
        assert result.exit_code == 0

    @pytest.mark.skipif(sys.platform == "win32", reason="uses a POSIX shell script")
    def test_existing_runfile_is_preferred(self, runner, program, tmp_path: Path) -> None:
        runfiles_dir = tmp_path / "rf"
        self._script(runfiles_dir / "ws" / "tool", 4)

        result = runner.invoke(
            app,
            ["--program", str(program), "--directory", str(runfiles_dir), "exec", "--", "ws/tool"],
        )
        assert result.exit_code == 4
