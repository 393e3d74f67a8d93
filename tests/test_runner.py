"""Tests for running the Django test command."""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from djtest.config import DjtestConfig
from djtest.runner import build_command, manage_py_path, run_tests


def _completed(returncode: int) -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess([], returncode=returncode)


class TestBuildCommand:
    """Tests for build_command."""

    def test_basic(self, django_project: Path, config: DjtestConfig) -> None:
        command = build_command("app.tests", "", config, django_project)
        assert command == ["python", "manage.py", "test", "app.tests"]

    def test_options_split_like_a_shell(
        self, django_project: Path, config: DjtestConfig
    ) -> None:
        command = build_command(
            "app.tests", "--keepdb --tag 'slow one'", config, django_project
        )
        assert command[4:] == ["--keepdb", "--tag", "slow one"]

    def test_src_manage_py(self, src_project: Path, config: DjtestConfig) -> None:
        assert manage_py_path(src_project, config) == "src/manage.py"
        command = build_command("users.tests", "", config, src_project)
        assert command[1] == "src/manage.py"

    def test_configured_interpreter(self, django_project: Path) -> None:
        config = DjtestConfig(python="python3.12", test_command="test_fast")
        command = build_command("app", "", config, django_project)
        assert command[:3] == ["python3.12", "manage.py", "test_fast"]


class TestRunTests:
    """Tests for run_tests."""

    def test_success_prints_banner(
        self,
        django_project: Path,
        config: DjtestConfig,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        with patch("djtest.runner.subprocess.run", return_value=_completed(0)) as run:
            code = run_tests("app.tests", "--keepdb", config, django_project)
        assert code == 0
        run.assert_called_once()
        assert run.call_args.args[0][-2:] == ["app.tests", "--keepdb"]
        assert run.call_args.kwargs["cwd"] == django_project
        out = capsys.readouterr().out
        assert out.startswith("app.tests\n\n")
        assert ">>> app.tests <<<" in out

    def test_failure_suppresses_banner(
        self,
        django_project: Path,
        config: DjtestConfig,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        with patch("djtest.runner.subprocess.run", return_value=_completed(1)):
            code = run_tests("app.tests", "", config, django_project)
        assert code == 1
        assert ">>>" not in capsys.readouterr().out

    def test_missing_interpreter(
        self, django_project: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        config = DjtestConfig(python="no-such-python")
        with patch(
            "djtest.runner.subprocess.run", side_effect=FileNotFoundError("x")
        ):
            code = run_tests("app.tests", "", config, django_project)
        assert code == 127
        assert "Error" in capsys.readouterr().err
