import io
import logging
import re

import pytest

from logging_config import FallbackFileHandler, configure_file_logging

LINE_PATTERN = r"\[\d{{4}}-\d{{2}}-\d{{2}} \d{{2}}:\d{{2}}:\d{{2}}\] \[{level}\] {message}"


@pytest.fixture
def isolated_logger():
    logger = logging.getLogger("tests.logging_config")
    logger.setLevel(logging.INFO)
    logger.propagate = False
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True


def test_file_lines_use_bracketed_format(tmp_path, isolated_logger):
    log_file = tmp_path / "feeder.log"
    configure_file_logging(str(log_file), logger=isolated_logger)

    isolated_logger.info("Feeder motor stopped.")
    isolated_logger.warning("Invalid line in config file: x")
    isolated_logger.error("Motor run failed!")

    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert re.fullmatch(
        LINE_PATTERN.format(level="INFO", message=re.escape("Feeder motor stopped.")),
        lines[0],
    )
    assert re.fullmatch(
        LINE_PATTERN.format(
            level="WARN", message=re.escape("Invalid line in config file: x")
        ),
        lines[1],
    )
    assert re.fullmatch(
        LINE_PATTERN.format(level="ERROR", message=re.escape("Motor run failed!")),
        lines[2],
    )


def test_file_is_appended(tmp_path, isolated_logger):
    log_file = tmp_path / "feeder.log"
    log_file.write_text("previous run\n", encoding="utf-8")
    configure_file_logging(str(log_file), logger=isolated_logger)

    isolated_logger.info("next run")

    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "previous run"
    assert lines[1].endswith("next run")


def test_unavailable_file_falls_back_and_reports_once(tmp_path, isolated_logger):
    handler = configure_file_logging(
        str(tmp_path / "missing" / "feeder.log"), logger=isolated_logger
    )
    assert isinstance(handler, FallbackFileHandler)
    fallback = io.StringIO()
    handler.fallback_stream = fallback

    isolated_logger.info("first message")
    isolated_logger.error("second message")

    output = fallback.getvalue()
    assert output.count("Could not open log file") == 1
    assert "first message" in output
    assert "[ERROR] second message" in output


class _BrokenStream:
    def write(self, _text):
        raise OSError("disk full")

    def flush(self):
        pass

    def close(self):
        pass


def test_write_failure_after_open_is_reported_once(tmp_path, isolated_logger):
    handler = configure_file_logging(str(tmp_path / "feeder.log"), logger=isolated_logger)
    fallback = io.StringIO()
    handler.fallback_stream = fallback
    isolated_logger.info("written to file")
    handler.stream.close()
    handler.stream = _BrokenStream()

    isolated_logger.warning("after disk filled")
    isolated_logger.error("still failing")

    output = fallback.getvalue()
    assert output.count("Could not write to log file") == 1
    assert "Could not open log file" not in output
    assert "[WARN] after disk filled" in output
    assert "[ERROR] still failing" in output
