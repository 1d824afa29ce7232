"""End-to-end CLI tests (cli/app.py).

Maven preflight and generation are replaced by fakes through the
``fake_service`` fixture; prompts are mocked.

Coverage:
* Usage errors for missing, unknown and value-less flags.
* Verbosity combinations and what reaches the generator.
* Confirmation outcomes.
* Exit-status forwarding through the ``cli()`` error boundary.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock, patch

import pytest

from mvn_quickstart.cli import exit_codes
from mvn_quickstart.cli.app import cli, main
from mvn_quickstart.core.models import Verbosity
from mvn_quickstart.exceptions import (
    USAGE_HINT,
    ExternalToolError,
    MavenHomeNotSetError,
    MissingRequiredOptionError,
    MissingValueError,
    UnknownOptionError,
)
from mvn_quickstart.infra.maven_generator import MavenQuickstartGenerator

_ASK = "mvn_quickstart.cli.confirm_prompt._ask_answer"


def _argv(tmp_path: Path, *extra: str) -> list[str]:
    return ["-a", "foo-app", "-g", "com.example", "-d", str(tmp_path), *extra]


# ---------------------------------------------------------------------------
# Usage errors
# ---------------------------------------------------------------------------

class TestUsageErrors:
    @patch("mvn_quickstart.infra.maven_generator.subprocess.run")
    def test_missing_required_spawns_nothing(self, mock_run: MagicMock) -> None:
        with pytest.raises(MissingRequiredOptionError):
            main(["-v", "2.0"])
        mock_run.assert_not_called()

    def test_unknown_option(self) -> None:
        with pytest.raises(UnknownOptionError, match="-z"):
            main(["-a", "app", "-g", "g", "-z"])

    def test_missing_value(self) -> None:
        with pytest.raises(MissingValueError, match="-a"):
            main(["-g", "com.example", "-a"])

    def test_usage_errors_carry_help_hint(self) -> None:
        with pytest.raises(UnknownOptionError) as exc_info:
            main(["--nope"])
        assert exc_info.value.hint == USAGE_HINT


# ---------------------------------------------------------------------------
# Generation pipeline
# ---------------------------------------------------------------------------

class TestGenerate:
    def test_confirmed_standard_project(
        self, fake_service: Any, standard_generator: Any, tmp_path: Path,
    ) -> None:
        with patch(_ASK, return_value="y") as mock_ask:
            code = main(_argv(tmp_path))

        assert code == exit_codes.SUCCESS
        mock_ask.assert_called_once()
        (request,) = standard_generator.requests
        assert request.package_name == "foo.app"
        assert request.target_directory == tmp_path.resolve()
        assert request.verbosity is Verbosity.NORMAL

    def test_base_pom_ignores_package(
        self,
        fake_service: Any,
        standard_generator: Any,
        base_pom_generator: Any,
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = main(_argv(tmp_path, "-b", "-p", "com.ignored", "-q"))

        assert code == exit_codes.SUCCESS
        assert standard_generator.requests == []
        (request,) = base_pom_generator.requests
        assert request.package_name is None
        assert "com.ignored" not in capsys.readouterr().err

    def test_directory_created(
        self, fake_service: Any, standard_generator: Any, tmp_path: Path,
    ) -> None:
        target = tmp_path / "new" / "projects"
        main(["-a", "app", "-g", "g", "-d", str(target), "-m"])
        assert target.is_dir()
        assert standard_generator.requests[0].target_directory == target.resolve()

    def test_declined_exits_zero_without_generating(
        self, fake_service: Any, standard_generator: Any, tmp_path: Path,
    ) -> None:
        with patch(_ASK, return_value="n"):
            code = main(_argv(tmp_path))
        assert code == exit_codes.SUCCESS
        assert standard_generator.requests == []

    def test_invalid_answers_reprompt_then_proceed(
        self, fake_service: Any, standard_generator: Any, tmp_path: Path,
    ) -> None:
        with patch(_ASK, side_effect=["ok", "sure", "y"]) as mock_ask:
            main(_argv(tmp_path))
        assert mock_ask.call_count == 3
        assert len(standard_generator.requests) == 1


# ---------------------------------------------------------------------------
# Verbosity modes
# ---------------------------------------------------------------------------

class TestVerbosityModes:
    def test_quiet_shows_summary_skips_confirmation(
        self,
        fake_service: Any,
        standard_generator: Any,
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        with patch(_ASK) as mock_ask:
            code = main(_argv(tmp_path, "-q"))

        assert code == exit_codes.SUCCESS
        mock_ask.assert_not_called()
        assert "Project to generate" in capsys.readouterr().err
        request = standard_generator.requests[0]
        assert request.verbosity is Verbosity.QUIET
        assert "-q" not in MavenQuickstartGenerator().build_command(request)

    def test_mute_is_silent(
        self,
        fake_service: Any,
        standard_generator: Any,
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        with patch(_ASK) as mock_ask:
            code = main(_argv(tmp_path, "-m"))

        assert code == exit_codes.SUCCESS
        mock_ask.assert_not_called()
        assert capsys.readouterr().err == ""
        assert standard_generator.requests[0].verbosity is Verbosity.MUTE

    def test_mute_and_debug_debug_wins(
        self,
        fake_service: Any,
        standard_generator: Any,
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        with patch(_ASK) as mock_ask:
            code = main(_argv(tmp_path, "-m", "-D"))

        assert code == exit_codes.SUCCESS
        mock_ask.assert_not_called()
        assert "Project to generate" not in capsys.readouterr().err
        request = standard_generator.requests[0]
        assert request.verbosity is Verbosity.DEBUG
        argv = MavenQuickstartGenerator().build_command(request)
        assert "-X" in argv
        assert "-q" not in argv


# ---------------------------------------------------------------------------
# Preflight
# ---------------------------------------------------------------------------

class TestPreflight:
    @patch("mvn_quickstart.infra.maven_detector.shutil.which", return_value="/usr/bin/mvn")
    def test_missing_home_aborts_before_prompt(
        self,
        _mock_which: MagicMock,
        monkeypatch: pytest.MonkeyPatch,
        archetype_cache: Path,
        tmp_path: Path,
    ) -> None:
        monkeypatch.delenv("M2_HOME", raising=False)
        with patch(_ASK) as mock_ask:
            with pytest.raises(MavenHomeNotSetError):
                main(_argv(tmp_path))
        mock_ask.assert_not_called()


# ---------------------------------------------------------------------------
# cli() error boundary
# ---------------------------------------------------------------------------

class TestErrorBoundary:
    def _run(self, monkeypatch: pytest.MonkeyPatch, *argv: str) -> int:
        monkeypatch.setattr(sys, "argv", ["mvn-quickstart", *argv])
        with pytest.raises(SystemExit) as exc_info:
            cli()
        code = exc_info.value.code
        assert isinstance(code, int)
        return code

    @patch("mvn_quickstart.infra.maven_generator.subprocess.run")
    def test_missing_options_exit_one(
        self,
        mock_run: MagicMock,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert self._run(monkeypatch) == exit_codes.GENERAL_ERROR
        mock_run.assert_not_called()
        err = capsys.readouterr().err
        assert "Missing required option" in err
        assert "-h" in err

    def test_unknown_option_exit_one(self, monkeypatch: pytest.MonkeyPatch) -> None:
        assert self._run(monkeypatch, "-x") == exit_codes.GENERAL_ERROR

    def test_help_exit_zero(self, monkeypatch: pytest.MonkeyPatch) -> None:
        assert self._run(monkeypatch, "-h") == exit_codes.SUCCESS

    def test_success(
        self, fake_service: Any, monkeypatch: pytest.MonkeyPatch, tmp_path: Path,
    ) -> None:
        assert self._run(monkeypatch, *_argv(tmp_path, "-q")) == exit_codes.SUCCESS

    def test_maven_status_forwarded(
        self,
        fake_service: Any,
        standard_generator: Any,
        monkeypatch: pytest.MonkeyPatch,
        tmp_path: Path,
    ) -> None:
        standard_generator.returncode = 2
        assert self._run(monkeypatch, *_argv(tmp_path, "-q")) == 2

    def test_maven_status_forwarded_in_main(
        self, fake_service: Any, standard_generator: Any, tmp_path: Path,
    ) -> None:
        standard_generator.returncode = 3
        with pytest.raises(ExternalToolError) as exc_info:
            main(_argv(tmp_path, "-m"))
        assert exc_info.value.returncode == 3

    def test_keyboard_interrupt(
        self, fake_service: Any, monkeypatch: pytest.MonkeyPatch, tmp_path: Path,
    ) -> None:
        with patch(_ASK, return_value=None):
            assert self._run(monkeypatch, *_argv(tmp_path)) == exit_codes.KEYBOARD_INTERRUPT

    def test_unexpected_error(
        self, fake_service: Any, monkeypatch: pytest.MonkeyPatch, tmp_path: Path,
    ) -> None:
        with patch(_ASK, side_effect=RuntimeError("boom")):
            assert self._run(monkeypatch, *_argv(tmp_path)) == exit_codes.UNEXPECTED_ERROR

    def test_target_directory_is_a_file_exit_one(
        self,
        fake_service: Any,
        standard_generator: Any,
        monkeypatch: pytest.MonkeyPatch,
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        existing = tmp_path / "notes.txt"
        existing.write_text("x")

        code = self._run(monkeypatch, "-a", "app", "-g", "g", "-d", str(existing), "-q")

        assert code == exit_codes.GENERAL_ERROR
        assert standard_generator.requests == []
        assert "Unexpected error" not in capsys.readouterr().err

    def test_maven_killed_by_signal(
        self,
        fake_service: Any,
        standard_generator: Any,
        monkeypatch: pytest.MonkeyPatch,
        tmp_path: Path,
    ) -> None:
        standard_generator.returncode = -15
        assert self._run(monkeypatch, *_argv(tmp_path, "-q")) == 143
