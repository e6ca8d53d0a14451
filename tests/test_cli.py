"""Tests for the shaderperm command-line interface."""

import json
import sys

import pytest
from loguru import logger
from typer.testing import CliRunner

from shaderperm.main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def restore_logger():
    """Put the default stderr sink back after each command replaced it."""
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def shader_file(tmp_path):
    """Create a shader source declaring option pragmas."""
    path = tmp_path / "lit.hlsl"
    path.write_text(
        "#pragma target ps_5_0\n"
        "#pragma option useFog, lights 1..3\n"
        "float4 main() : SV_TARGET { return 0; }\n"
    )
    return path


def test_help():
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "permutations" in result.stdout
    assert "scan" in result.stdout


def test_permutations_plain():
    result = runner.invoke(app, ["permutations", "a, n 1..3"])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        "0: n = 1",
        "1: n = 2",
        "2: a, n = 1",
        "3: a, n = 2",
    ]


def test_permutations_flags():
    result = runner.invoke(app, ["permutations", "a, n 1..3", "--format", "flags"])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["-Dn=1", "-Dn=2", "-Da -Dn=1", "-Da -Dn=2"]


def test_permutations_flag_prefix_from_environment(monkeypatch):
    monkeypatch.setenv("SHADERPERM_FLAG_PREFIX", "/D")
    result = runner.invoke(app, ["permutations", "a", "-f", "flags"])
    assert result.exit_code == 0
    assert "/Da" in result.stdout.splitlines()


def test_permutations_json():
    result = runner.invoke(app, ["permutations", "a, n 1..2", "--format", "json"])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == [
        {"key": 0, "defines": {"n": "1"}},
        {"key": 1, "defines": {"a": None, "n": "1"}},
    ]


def test_permutations_invalid_option():
    result = runner.invoke(app, ["permutations", "foo("])
    assert result.exit_code == 1


def test_permutations_unknown_format():
    result = runner.invoke(app, ["permutations", "a", "--format", "xml"])
    assert result.exit_code == 1


def test_permutations_limit():
    result = runner.invoke(app, ["permutations", "a, b, c", "--limit", "4"])
    assert result.exit_code == 1

    result = runner.invoke(app, ["permutations", "a, b, c", "--limit", "0"])
    assert result.exit_code == 0
    assert len(result.stdout.splitlines()) == 8


def test_count(scenario_text):
    result = runner.invoke(app, ["count", scenario_text])
    assert result.exit_code == 0
    assert "candidates: 48" in result.stdout
    assert "permutations: 13" in result.stdout


def test_count_unknown_log_level(monkeypatch):
    monkeypatch.setenv("SHADERPERM_LOG_LEVEL", "LOUD")
    result = runner.invoke(app, ["count", "a"])
    assert result.exit_code == 0
    assert "permutations: 2" in result.stdout


def test_count_undeclared_option_in_condition():
    result = runner.invoke(app, ["count", "a, b (c)"])
    assert result.exit_code == 1


def test_scan(shader_file):
    result = runner.invoke(app, ["scan", str(shader_file), "--format", "flags"])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        "# target: ps_5_0",
        "# entry: main",
        "-Dlights=1",
        "-Dlights=2",
        "-DuseFog -Dlights=1",
        "-DuseFog -Dlights=2",
    ]


def test_scan_missing_file(tmp_path):
    result = runner.invoke(app, ["scan", str(tmp_path / "missing.hlsl")])
    assert result.exit_code == 1
