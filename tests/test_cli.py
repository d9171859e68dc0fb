"""
Tests for the command-line interface.
"""

import json
import logging

import pytest

from liftsize.cli.main import cli, create_parser
from liftsize.config import get_settings
from liftsize.logging_config import UVICORN_LOGGERS, build_logging_config, resolve_level


@pytest.fixture(autouse=True)
def restore_logging():
    """cli() reconfigures logging; put it back after each test."""
    names = ("", "liftsize", *UVICORN_LOGGERS)
    saved = {name: (logging.getLogger(name).handlers[:], logging.getLogger(name).level) for name in names}
    yield
    for name, (handlers, level) in saved.items():
        logger = logging.getLogger(name)
        logger.handlers[:] = handlers
        logger.setLevel(level)


class TestParser:
    def test_estimate_defaults(self):
        args = create_parser().parse_args(["estimate"])

        assert args.stops == 2
        assert args.load == 400.0
        assert args.travel == 4.0
        assert args.input is None


class TestEstimateCommand:
    def test_prints_json_report(self, capsys):
        code = cli(["estimate", "--stops", "3", "--load", "450", "--travel", "6"])

        assert code == 0
        data = json.loads(capsys.readouterr().out)
        assert data["ok"] is True
        assert data["inputs"]["stops"] == 3

    def test_writes_output_file(self, tmp_path):
        out = tmp_path / "report.json"

        code = cli(["estimate", "--output", str(out)])

        assert code == 0
        data = json.loads(out.read_text())
        assert data["masses"]["counterweight_kg"] == 656

    def test_reads_request_file(self, tmp_path, capsys):
        request = tmp_path / "request.json"
        request.write_text(json.dumps({"stops": 2, "rated_load_kg": 500, "travel_m": 10}))

        code = cli(["estimate", "--input", str(request)])

        assert code == 0
        data = json.loads(capsys.readouterr().out)
        assert data["performance"]["rated_speed_mps"] == 0.45

    def test_invalid_inputs_exit_nonzero(self, capsys):
        code = cli(["estimate", "--stops", "1"])

        assert code == 1
        data = json.loads(capsys.readouterr().out)
        assert data["ok"] is False

    def test_bad_json_file(self, tmp_path):
        request = tmp_path / "request.json"
        request.write_text("{not json")

        assert cli(["estimate", "--input", str(request)]) == 1

    def test_readable_output(self, capsys):
        code = cli(["estimate", "--readable"])

        assert code == 0
        out = capsys.readouterr().out
        assert "Ropes: 4 x 8 mm" in out
        assert "Warnings:" in out


class TestOtherCommands:
    def test_make_example(self, tmp_path):
        out = tmp_path / "example.json"

        assert cli(["make-example", "--output", str(out)]) == 0
        data = json.loads(out.read_text())
        assert set(data) == {"stops", "rated_load_kg", "travel_m"}

    def test_summarize(self, tmp_path, capsys):
        report = tmp_path / "report.json"
        cli(["estimate", "--output", str(report)])
        capsys.readouterr()

        assert cli(["summarize", "--input", str(report)]) == 0
        assert "Top beam: 10.10 kN" in capsys.readouterr().out

    def test_summarize_error_report(self, tmp_path, capsys):
        report = tmp_path / "report.json"
        report.write_text(json.dumps({"ok": False, "errors": ["stops must be >= 2."]}))

        assert cli(["summarize", "--input", str(report)]) == 0
        assert "stops must be >= 2." in capsys.readouterr().out

    def test_no_command_prints_help(self, capsys):
        assert cli([]) == 0
        assert "usage" in capsys.readouterr().out.lower()

    def test_version(self):
        with pytest.raises(SystemExit) as exc:
            cli(["--version"])
        assert exc.value.code == 0


class TestLogging:
    def test_resolve_level_names(self):
        assert resolve_level("debug") == logging.DEBUG
        assert resolve_level("WARNING") == logging.WARNING
        assert resolve_level("chatty") == logging.INFO

    def test_resolve_level_from_settings(self, monkeypatch):
        monkeypatch.setenv("LIFTSIZE_LOG_LEVEL", "ERROR")
        get_settings.cache_clear()
        try:
            assert resolve_level() == logging.ERROR
        finally:
            get_settings.cache_clear()

    def test_third_party_loggers_stay_quiet(self):
        config = build_logging_config(logging.DEBUG)

        assert config["loggers"]["liftsize"]["level"] == logging.DEBUG
        assert config["root"]["level"] == logging.WARNING

    def test_cli_applies_log_level(self, tmp_path):
        out = tmp_path / "example.json"

        assert cli(["--log-level", "DEBUG", "make-example", "--output", str(out)]) == 0

        assert logging.getLogger("liftsize").level == logging.DEBUG
