"""Tests for CLI support utilities."""
from pathlib import Path

import pytest
import typer
from rich.console import Console

from berth.cli_support import find_workspace, handle_cli_error, print_success


class TestFindWorkspace:
    """Workspace lookup order."""

    def test_explicit_path(self):
        assert find_workspace("/custom/infra").root == Path("/custom/infra")

    def test_env_variable(self, monkeypatch):
        monkeypatch.setenv("BERTH_WORKSPACE", "/env/infra")
        assert find_workspace().root == Path("/env/infra")

    def test_discovery(self, make_workspace, tmp_path, monkeypatch):
        make_workspace({})
        monkeypatch.chdir(tmp_path)
        assert find_workspace().root == (tmp_path / "infra").resolve()


class TestOutput:
    """Console helpers."""

    def test_handle_cli_error_exits(self):
        console = Console(record=True)
        with pytest.raises(typer.Exit) as exc_info:
            handle_cli_error(ValueError("boom"), console, exit_code=3)
        assert exc_info.value.exit_code == 3
        assert "boom" in console.export_text()

    def test_print_success(self):
        console = Console(record=True)
        print_success(console, "done")
        assert "✓ done" in console.export_text()
