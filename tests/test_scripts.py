"""Smoke tests for the command-line scripts."""

import subprocess
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
RUN_NIM = str(ROOT / "scripts" / "run_nim.py")


def run_nim(*args: str) -> subprocess.CompletedProcess[bytes]:
    return subprocess.run([sys.executable, RUN_NIM, *args], capture_output=True, cwd=ROOT)


@pytest.mark.parametrize("script", ["run_nim.py", "run_tournament.py"])
def test_script_help(script: str) -> None:
    """Scripts start up and respond to --help."""
    result = subprocess.run(
        [sys.executable, str(ROOT / "scripts" / script), "--help"], capture_output=True, cwd=ROOT
    )
    assert result.returncode == 0, f"{script} --help failed: {result.stderr.decode()}"


class TestRunNim:
    def test_plays_a_game(self) -> None:
        result = run_nim("perfect", "minimax", "--piles", "1", "2", "--move-time", "0.2")
        assert result.returncode == 0, result.stderr.decode()
        assert "wins after" in result.stdout.decode()

    def test_unknown_agent(self) -> None:
        result = run_nim("perfect", "nobody")
        assert result.returncode == 1
        assert "nobody" in result.stderr.decode()

    @pytest.mark.parametrize("seats", [("perfect", "minimax"), ("minimax", "perfect")])
    def test_perfect_rejects_misere_take_limit(self, seats: tuple[str, str]) -> None:
        """The perfect agent has no oracle for misère play with a take limit."""
        result = run_nim(*seats, "--misere", "--max-take", "2")
        assert result.returncode == 1
        assert "--max-take" in result.stderr.decode()
        assert "Traceback" not in result.stderr.decode()

    def test_search_agents_accept_misere_take_limit(self) -> None:
        result = run_nim(
            "alpha_beta", "minimax", "--piles", "1", "2", "--misere", "--max-take", "2",
            "--move-time", "0.2", "--verbosity", "none",
        )
        assert result.returncode == 0, result.stderr.decode()
