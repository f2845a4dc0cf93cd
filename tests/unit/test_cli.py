"""
Unit tests for the neuman command line.

Tests:
- Help output
- Successful runs in both output modes
- Vector dump
- Usage errors for bad options and invalid parameters
"""

import re

import pytest
from click.testing import CliRunner

from equilibrium.cli import main

SCENARIO = ["-kn", "1", "1", "-b", "1", "-s", "0.1", "-d", "0.1", "-r", "10", "-n", "50", "-m", "nystrom", "-e", "4"]


@pytest.fixture
def runner():
    return CliRunner()


def test_help(runner):
    result = runner.invoke(main, ["-h"])

    assert result.exit_code == 0
    assert "T(x, y)" in result.output
    assert "roughgarden kernels" in result.output
    assert "nystrom" in result.output


def test_run_prints_moments(runner):
    result = runner.invoke(main, SCENARIO)

    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert re.fullmatch(r"First moment: \d+\.\d{4}", lines[0])
    assert re.fullmatch(r"C\(0\) = \d+\.\d{4}", lines[1])
    N = float(lines[0].split(":")[1])
    assert 0.0 < N < 9.0


def test_ascetic_prints_first_moment_only(runner):
    result = runner.invoke(main, SCENARIO + ["--ascetic"])

    assert result.exit_code == 0, result.output
    assert len(result.output.splitlines()) == 1
    assert len(result.output.rstrip("\n")) == 15


def test_vector_is_stored(runner, tmp_path):
    path = tmp_path / "C.txt"
    result = runner.invoke(main, SCENARIO + ["-p", str(path)])

    assert result.exit_code == 0, result.output
    lines = path.read_text().splitlines()
    assert len(lines) == 50
    assert lines[1].split()[0] == "0.2000"


def test_vector_in_2d_uses_hankel_nodes(runner, tmp_path):
    path = tmp_path / "C.txt"
    result = runner.invoke(main, SCENARIO + ["-D", "2", "-i", "3000", "-p", str(path)])

    assert result.exit_code == 0, result.output
    radii = [float(line.split()[0]) for line in path.read_text().splitlines()]
    assert len(radii) == 50
    assert 0.0 < radii[0] < 0.2 and radii[-1] < 10.0


def test_autocomputed_radius_and_no_dump(runner, tmp_path):
    with runner.isolated_filesystem(temp_dir=tmp_path):
        result = runner.invoke(main, ["-kc", "1", "1", "-r", "n", "-p", "n", "-n", "20", "-m", "lneuman"])
        assert result.exit_code == 0, result.output
        assert not any(p.is_file() for p in tmp_path.rglob("*"))


@pytest.mark.parametrize(
    "args, message",
    [
        ([], "Missing option '-k'"),
        (["-kx", "1", "1"], "Invalid value for '-k'"),
        (["-kn", "1"], "need 2 parameters"),
        (["-kn", "1", "1", "-b", "0.1", "-d", "0.5"], "not viable"),
        (["-kc", "0", "1"], "must be positive"),
        (["-kn", "1", "1", "-m", "simpson"], "Invalid value for '-m'"),
        (["-kn", "1", "1", "-r", "wide"], "Invalid value for '-r'"),
    ],
)
def test_usage_errors(runner, args, message):
    result = runner.invoke(main, args)

    assert result.exit_code == 2
    assert message in result.output
    assert "for help." in result.output
