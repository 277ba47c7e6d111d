# backend/tests/test_logging.py
from loguru import logger

from backend.app.core.logging_config import setup_logging


def test_info_goes_to_stdout_only(capsys):
    setup_logging()
    logger.info("myservice started on :8080")

    captured = capsys.readouterr()
    assert captured.err == ""
    lines = captured.out.splitlines()
    assert len(lines) == 1
    assert lines[0].endswith("| INFO  | myservice started on :8080")


def test_level_filters_lower_records(capsys):
    setup_logging(level="WARNING")
    logger.info("hidden")
    logger.error("server failed: boom")

    captured = capsys.readouterr()
    assert "hidden" not in captured.out
    assert "server failed: boom" in captured.out
    assert captured.err == ""
