"""Integration tests for CLI functionality."""

import json
import subprocess
import sys
from pathlib import Path

from lineqpad_pkg.cli import main_entry

ROOT = Path(__file__).resolve().parent.parent


def run_cli(*args, stdin=None):
    return subprocess.run(
        [sys.executable, "-m", "lineqpad_pkg.cli", *args],
        capture_output=True,
        text=True,
        input=stdin,
        cwd=ROOT,
        timeout=60,
    )


def test_cli_version():
    """Test --version flag."""
    result = run_cli("--version")
    assert result.returncode == 0
    assert result.stdout.strip() != ""


def test_cli_health_check():
    """Test --health-check command."""
    result = run_cli("--health-check")
    assert result.returncode == 0
    assert "health check" in result.stdout.lower()


def test_cli_eval_human():
    """Test CLI solving with human output."""
    result = run_cli("--eval", "x + y = 10; x - y = 2")
    assert result.returncode == 0
    assert result.stdout.splitlines() == ["x = 6", "y = 4"]


def test_cli_eval_json():
    """Test CLI solving with JSON output."""
    result = run_cli("-e", "x + y = 10; x - y = 2", "--format", "json")
    assert result.returncode == 0
    data = json.loads(result.stdout.strip())
    assert data["ok"] is True
    assert data["solutions"] == {"x": 6.0, "y": 4.0}


def test_cli_eval_error_exit_code():
    result = run_cli("-e", "x = y = 1", "--format", "json")
    assert result.returncode == 1
    data = json.loads(result.stdout.strip())
    assert data["error_code"] == "MULTIPLE_EQUAL_SIGNS"
    assert data["position"] == 6


def test_cli_stdin():
    result = run_cli("-", stdin="a +\nb = 3\na - b = 1\n")
    assert result.returncode == 0
    assert result.stdout.splitlines() == ["a = 2", "b = 1"]


def test_main_entry_file(tmp_path, capsys):
    path = tmp_path / "equations.txt"
    path.write_text("2x + y - z = 8\n-3x - y + 2z = -11\n-2x + y + 2z = -3\n")
    assert main_entry([str(path)]) == 0
    assert capsys.readouterr().out.splitlines() == ["x = 2", "y = 3", "z = -1"]


def test_main_entry_missing_file(tmp_path, capsys):
    assert main_entry([str(tmp_path / "missing.txt")]) == 1
    assert "cannot read" in capsys.readouterr().out


def test_main_entry_precision(capsys):
    from lineqpad_pkg import config

    original = config.OUTPUT_PRECISION
    try:
        assert main_entry(["-p", "3", "-e", "3x = 2"]) == 0
    finally:
        config.OUTPUT_PRECISION = original
    assert capsys.readouterr().out.strip() == "x = 0.667"


def test_repl_solves_on_empty_line(monkeypatch, capsys):
    from lineqpad_pkg.cli import repl_loop

    inputs = iter(["x + y = 10", "x - y = 2", "", "quit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(inputs))
    repl_loop()
    out = capsys.readouterr().out
    assert "x = 6" in out
    assert "y = 4" in out
    assert "Goodbye." in out
