import os
import subprocess
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent.parent


def _env_with_repo() -> dict[str, str]:
    env = os.environ.copy()
    env["PYTHONPATH"] = str(REPO_ROOT)
    env["MPLBACKEND"] = "Agg"
    return env


def _run(*args: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, *args],
        cwd=REPO_ROOT,
        env=_env_with_repo(),
        check=True,
        capture_output=True,
        text=True,
    )


def test_simple_numbers_script_reports_output() -> None:
    result = _run("scripts/train_simple_numbers.py", "--steps", "50")
    assert "Training with 50 steps for: [0.7]" in result.stdout
    assert "Output: [" in result.stdout


def test_xor_script_reports_every_row() -> None:
    result = _run("scripts/train_xor.py", "--draws", "50", "--steps-per-draw", "2")
    assert "Trained 50 draws x 2 steps" in result.stdout
    for row in ("[0.0, 0.0]", "[1.0, 0.0]", "[0.0, 1.0]", "[1.0, 1.0]"):
        assert row in result.stdout


def test_scripts_save_error_plot(tmp_path) -> None:
    plot_path = tmp_path / "errors.png"
    _run("scripts/train_xor.py", "--draws", "20", "--seed", "-1", "--plot", str(plot_path))
    assert plot_path.exists()
