import logging

from evtrack.config import Config
from evtrack.common.logger import LoggerFactory


def test_logger_is_cached():
    first = LoggerFactory().get_logger(logger_name="test-cached")
    second = LoggerFactory().get_logger(logger_name="test-cached")
    assert first is second
    assert len(first.handlers) == 1


def test_logger_writes_file(tmp_path):
    log_file = tmp_path / "nested" / "tracker.log"
    logger = LoggerFactory().get_logger(logger_name="test-file", log_file=log_file.as_posix(), log_level=logging.DEBUG)
    assert logger.level == logging.DEBUG
    logger.info("hello")
    for handler in logger.handlers:
        handler.flush()
    assert "hello" in log_file.read_text()
    assert "|INFO    |test-file:" in log_file.read_text()


def test_relative_log_file_goes_under_log_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(Config, "LOG_DIR", tmp_path.as_posix())
    logger = LoggerFactory().get_logger(logger_name="test-relative", log_file="tracker.log")
    logger.warning("relative")
    for handler in logger.handlers:
        handler.flush()
    assert "relative" in (tmp_path / "tracker.log").read_text()
