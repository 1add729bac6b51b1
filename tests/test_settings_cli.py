"""Tests for settings, CLI argument handling and logging setup."""

import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from taskboard.__main__ import build_settings, main, parse_args
from taskboard.cli.output import error, info
from taskboard.config import Settings
from taskboard.errors import BoardStorageError
from taskboard.logging import setup_logging
from taskboard.models import SortOrder


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("STATE_FILE", "SEED_DEMO", "SORT_ORDER", "ITEMS_PORT"):
            monkeypatch.delenv(f"TASKBOARD_{name}", raising=False)

        settings = Settings()

        assert settings.state_file is None
        assert settings.seed_demo is True
        assert settings.sort_order is SortOrder.NEWEST
        assert settings.items_port == 3000

    def test_environment_overrides(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv("TASKBOARD_STATE_FILE", str(tmp_path / "board.yaml"))
        monkeypatch.setenv("TASKBOARD_SORT_ORDER", "oldest")
        monkeypatch.setenv("TASKBOARD_SEED_DEMO", "false")

        settings = Settings()

        assert settings.state_file == tmp_path / "board.yaml"
        assert settings.sort_order is SortOrder.OLDEST
        assert settings.seed_demo is False


class TestCli:
    def test_flags_override_settings(self, tmp_path: Path):
        args = parse_args(
            [
                "--state-file",
                str(tmp_path / "b.yaml"),
                "--sort",
                "oldest",
                "--no-demo",
                "--port",
                "8080",
                "-vv",
            ]
        )

        settings = build_settings(args)

        assert settings.state_file == tmp_path / "b.yaml"
        assert settings.sort_order is SortOrder.OLDEST
        assert settings.seed_demo is False
        assert settings.items_port == 8080
        assert settings.verbose == 2

    def test_invalid_sort_rejected(self):
        with pytest.raises(SystemExit):
            parse_args(["--sort", "random"])

    def test_serve_items_runs_web_service(self, tmp_path: Path):
        db = tmp_path / "items.db"
        with patch("taskboard.web.serve") as serve, patch("taskboard.app.run") as run:
            main(["--serve-items", "--items-db", str(db), "--host", "0.0.0.0", "--port", "5001"])

        serve.assert_called_once_with(db, "0.0.0.0", 5001)
        run.assert_not_called()

    def test_sticky_flag_selects_start_screen(self):
        with patch("taskboard.app.run") as run:
            main(["--sticky"])

        assert run.call_args.kwargs["start_screen"] == "sticky"

    def test_storage_error_exits_nonzero(self, capsys):
        with patch("taskboard.app.run", side_effect=BoardStorageError("bad file")):
            with pytest.raises(SystemExit) as exc_info:
                main([])

        assert exc_info.value.code == 1
        assert "bad file" in capsys.readouterr().err


class TestLogging:
    @pytest.fixture(autouse=True)
    def reset_logger(self):
        logger = logging.getLogger("taskboard")
        handlers = list(logger.handlers)
        yield
        for handler in logger.handlers[:]:
            if handler not in handlers:
                handler.close()
                logger.removeHandler(handler)

    def test_no_logging_by_default(self):
        before = list(logging.getLogger("taskboard").handlers)
        setup_logging(0, None)
        assert logging.getLogger("taskboard").handlers == before

    def test_log_file(self, tmp_path: Path):
        log_file = tmp_path / "logs" / "taskboard.log"

        setup_logging(0, log_file)
        logging.getLogger("taskboard.services").info("hello from test")

        for handler in logging.getLogger("taskboard").handlers:
            handler.flush()
        assert "hello from test" in log_file.read_text()

    def test_startup_line_names_state_location(self, tmp_path: Path):
        log_file = tmp_path / "taskboard.log"

        setup_logging(0, log_file, tmp_path / "board.yaml")

        for handler in logging.getLogger("taskboard").handlers:
            handler.flush()
        content = log_file.read_text()
        assert "level=INFO" in content
        assert f"state={tmp_path / 'board.yaml'}" in content


class TestOutput:
    def test_info_with_detail(self, capsys):
        info("Item service on http://127.0.0.1:3000", "(items.db)")
        assert capsys.readouterr().out == "• Item service on http://127.0.0.1:3000 (items.db)\n"

    def test_error_goes_to_stderr(self, capsys):
        error("bad file")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "✗ bad file\n"
