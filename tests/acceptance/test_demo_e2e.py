"""
End-to-end acceptance tests for the rop-demo runner.

Runs the demo as a separate process (python -m rop_demo.main), exactly as the
console script would, and checks the narrated output.

Each test follows Given/When/Then BDD structure in its docstring.

Markers: @pytest.mark.acceptance
"""

from __future__ import annotations

import os
import re
import subprocess
import sys
from pathlib import Path

import pytest

pytestmark = pytest.mark.acceptance

ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


def _run_demo(project_root: Path, **env_overrides: str) -> subprocess.CompletedProcess[str]:
    env = {k: v for k, v in os.environ.items() if not k.startswith("ROP_DEMO_")}
    env["PYTHONPATH"] = os.pathsep.join(
        filter(None, [str(project_root / "src"), env.get("PYTHONPATH", "")])
    )
    env["NO_COLOR"] = "1"
    env.update(env_overrides)
    completed = subprocess.run(
        [sys.executable, "-m", "rop_demo.main"],
        capture_output=True,
        text=True,
        env=env,
        cwd=project_root,
        timeout=60,
        check=False,
    )
    completed.stdout = ANSI_ESCAPE.sub("", completed.stdout)
    return completed


class TestDemoRun:
    def test_all_scenarios_run(self, project_root: Path) -> None:
        """
        GIVEN the default settings
        WHEN the demo runs
        THEN every scenario starts, the process exits 0, and the key outcomes are narrated.
        """
        completed = _run_demo(project_root)

        assert completed.returncode == 0, completed.stderr
        out = completed.stdout
        for scenario in ("bind", "pipe", "negative", "map", "tee", "tee_e", "or_else", "try"):
            assert f"scenario={scenario}" in out
        assert "v=1764" in out
        assert "negative!" in out
        assert "FINAL PROFILE" in out
        assert "invalid email format" in out
        assert "panic: oh no, a panic occurred!" in out
        assert "demo.finished" in out

    def test_selected_scenario_only(self, project_root: Path) -> None:
        """
        GIVEN ROP_DEMO_SCENARIOS='["negative"]'
        WHEN the demo runs
        THEN only the negative scenario is narrated.
        """
        completed = _run_demo(project_root, ROP_DEMO_SCENARIOS='["negative"]')

        assert completed.returncode == 0, completed.stderr
        assert "negative.rejected" in completed.stdout
        assert "FINAL PROFILE" not in completed.stdout

    def test_log_level_filters_info(self, project_root: Path) -> None:
        """
        GIVEN ROP_DEMO_LOG_LEVEL=WARNING
        WHEN the demo runs
        THEN info events are suppressed and warnings remain.
        """
        completed = _run_demo(project_root, ROP_DEMO_LOG_LEVEL="WARNING")

        assert completed.returncode == 0, completed.stderr
        assert "demo.starting" not in completed.stdout
        assert "negative.rejected" in completed.stdout

    def test_invalid_configuration_exits_1(self, project_root: Path) -> None:
        """
        GIVEN a minimum age above the adult age
        WHEN the demo runs
        THEN it exits with status 1 and a fatal configuration message.
        """
        completed = _run_demo(
            project_root,
            ROP_DEMO_AGE_POLICY__MINIMUM_AGE="30",
        )

        assert completed.returncode == 1
        assert "FATAL: Configuration error" in completed.stderr
