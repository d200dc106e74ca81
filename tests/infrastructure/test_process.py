"""Tests for shell command execution."""

from pathlib import Path
from unittest.mock import patch

import pytest

from publish_easier.infrastructure.process import CommandError, run_command


class TestRunCommand:
    def test_runs_in_cwd(self, tmp_path: Path) -> None:
        run_command("echo built > out.txt", tmp_path)
        assert (tmp_path / "out.txt").read_text().strip() == "built"

    def test_non_zero_exit_raises(self, tmp_path: Path) -> None:
        with pytest.raises(CommandError) as exc_info:
            run_command("exit 3", tmp_path)
        assert exc_info.value.returncode == 3
        assert exc_info.value.command == "exit 3"
        assert "exit code 3" in str(exc_info.value)

    def test_launch_failure_raises(self, tmp_path: Path) -> None:
        with patch("subprocess.run", side_effect=FileNotFoundError("no shell")):
            with pytest.raises(CommandError) as exc_info:
                run_command("make", tmp_path)
        assert exc_info.value.returncode is None
        assert "could not be started" in str(exc_info.value)

    def test_inherits_environment(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PUBLISH_EASIER_TEST_VALUE", "from-env")
        run_command('echo "$PUBLISH_EASIER_TEST_VALUE" > env.txt', tmp_path)
        assert (tmp_path / "env.txt").read_text().strip() == "from-env"
