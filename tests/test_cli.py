"""Tests for the demonstration entry point (cli/app.py).

Coverage:

* Row construction for built-in and user-supplied examples
* Rich and plain rendering
* ``--verbose`` logging
* The ``cli()`` error boundary and its exit codes
"""

from __future__ import annotations

import logging
import sys

import pytest

from record_parse.cli import app as app_module
from record_parse.cli import exit_codes
from record_parse.cli.app import build_rows, describe, main, run_policy
from record_parse.cli.console import configure_logging
from record_parse.core.models import Record
from record_parse.exceptions import EmptyNameError, RecordParseError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.table", None)
    monkeypatch.setitem(sys.modules, "rich.logging", None)


# ---------------------------------------------------------------------------
# Row construction
# ---------------------------------------------------------------------------

class TestBuildRows:
    def test_builtin_examples(self) -> None:
        rows = build_rows([])
        assert rows == [
            ("Mark,20", "default", "Record(name='Mark', age=20)"),
            ("Gerald,70", "default", "Record(name='Gerald', age=70)"),
            ("Mark,20", "strict", "Record(name='Mark', age=20)"),
        ]

    def test_user_texts_run_under_both_policies(self) -> None:
        rows = build_rows([",1"])
        assert rows == [
            (",1", "default", "Record(name='John', age=30)"),
            (",1", "strict", "EmptyNameError: name must not be empty"),
        ]

    def test_describe_error(self) -> None:
        assert describe(EmptyNameError()) == "EmptyNameError: name must not be empty"

    def test_describe_record(self) -> None:
        assert describe(Record(name="Ann", age=1)) == "Record(name='Ann', age=1)"

    def test_unknown_policy(self) -> None:
        with pytest.raises(RecordParseError, match="Unknown policy"):
            run_policy("Mark,20", "lenient")


# ---------------------------------------------------------------------------
# main()
# ---------------------------------------------------------------------------

class TestMain:
    def test_no_args_renders_builtin_examples(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = main([])
        assert code == exit_codes.SUCCESS
        assert "Gerald" in capsys.readouterr().err

    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    def test_help_works_without_rich(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _hide_rich(monkeypatch)
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_plain_output_without_rich(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        _hide_rich(monkeypatch)
        code = main(["Mark,20", ",1"])
        assert code == exit_codes.SUCCESS
        err = capsys.readouterr().err
        assert "record-parse demo" in err
        assert "Record(name='Mark', age=20)" in err
        assert "EmptyNameError" in err

    def test_verbose_logs_fallback(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        _hide_rich(monkeypatch)
        main(["-v", "Mark,twenty"])
        assert "Falling back to default record" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# Error boundary
# ---------------------------------------------------------------------------

class TestCliBoundary:
    def test_success_exit_code(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(app_module, "main", lambda: exit_codes.SUCCESS)
        with pytest.raises(SystemExit) as exc_info:
            app_module.cli()
        assert exc_info.value.code == exit_codes.SUCCESS

    def test_known_error_exit_code(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        def _boom() -> int:
            raise RecordParseError("bad thing", hint="do this")

        monkeypatch.setattr(app_module, "main", _boom)
        with pytest.raises(SystemExit) as exc_info:
            app_module.cli()
        assert exc_info.value.code == exit_codes.GENERAL_ERROR
        err = capsys.readouterr().err
        assert "bad thing" in err
        assert "do this" in err

    def test_keyboard_interrupt_exit_code(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def _interrupt() -> int:
            raise KeyboardInterrupt

        monkeypatch.setattr(app_module, "main", _interrupt)
        with pytest.raises(SystemExit) as exc_info:
            app_module.cli()
        assert exc_info.value.code == exit_codes.KEYBOARD_INTERRUPT

    def test_unexpected_error_exit_code(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def _crash() -> int:
            raise RuntimeError("kaboom")

        monkeypatch.setattr(app_module, "main", _crash)
        with pytest.raises(SystemExit) as exc_info:
            app_module.cli()
        assert exc_info.value.code == exit_codes.UNEXPECTED_ERROR


# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

class TestConfigureLogging:
    def test_quiet_installs_nothing(self) -> None:
        package_logger = logging.getLogger("record_parse")
        before = list(package_logger.handlers)
        configure_logging(False)
        assert package_logger.handlers == before

    def test_repeated_verbose_installs_one_handler(
        self, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        _hide_rich(monkeypatch)
        package_logger = logging.getLogger("record_parse")
        before = len(package_logger.handlers)
        configure_logging(True)
        configure_logging(True)
        assert len(package_logger.handlers) == before + 1
        assert package_logger.level == logging.DEBUG
