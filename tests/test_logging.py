"""Tests for the logging helpers."""

import logging
import uuid

from htmlsoup import Soup
from htmlsoup.utils.logging import (
    ROOT_LOGGER_NAME,
    LogFormatter,
    OperationTimer,
    level_value,
    log_exception,
    setup_logging,
)


def component_name():
    return f"test{uuid.uuid4().hex[:8]}"


def make_record(level=logging.WARNING, msg="something happened"):
    return logging.LogRecord("htmlsoup.test", level, __file__, 1, msg, None, None)


def test_logger_name():
    component = component_name()
    logger = setup_logging(component=component)
    assert logger.name == f"{ROOT_LOGGER_NAME}.{component}"


def test_handlers_are_not_duplicated():
    component = component_name()
    first = setup_logging(component=component)
    second = setup_logging(component=component)
    assert first is second
    assert len(second.handlers) == 1


def test_console_level():
    logger = setup_logging(component=component_name(), console_level="warning")
    assert logger.level == logging.WARNING
    assert logger.handlers[0].level == logging.WARNING


def test_file_handler(tmp_path):
    log_file = tmp_path / "logs" / "htmlsoup.log"
    logger = setup_logging(log_file=str(log_file), component=component_name())

    assert len(logger.handlers) == 2
    assert logger.level == logging.DEBUG

    logger.debug("written to file only")
    for handler in logger.handlers:
        handler.flush()
    assert "written to file only" in log_file.read_text()

    for handler in logger.handlers:
        handler.close()


def test_colored_formatter():
    formatter = LogFormatter(colored=True, fmt="[%(levelname)s] %(message)s")
    formatter.colored = True
    output = formatter.format(make_record())
    assert "\033[33mWARNING\033[0m" in output
    assert output.endswith("something happened")


def test_plain_formatter():
    formatter = LogFormatter(colored=False, fmt="[%(levelname)s] %(message)s")
    assert formatter.format(make_record()) == "[WARNING] something happened"


def test_log_exception(caplog):
    logger = logging.getLogger("htmlsoup.test.exceptions")
    try:
        raise ValueError("bad value")
    except ValueError as e:
        with caplog.at_level(logging.ERROR, logger=logger.name):
            log_exception(logger, e, "While testing")

    assert "While testing: bad value" in caplog.text
    assert caplog.records[0].exc_info[0] is ValueError


def test_level_value():
    assert level_value("error", logging.INFO) == logging.ERROR
    assert level_value("verbose", logging.INFO) == logging.INFO


def test_operation_timer(caplog):
    logger = logging.getLogger("htmlsoup.test.timer")
    with caplog.at_level(logging.DEBUG, logger=logger.name):
        with OperationTimer(logger, "parse") as timer:
            pass

    assert timer.elapsed >= 0
    assert "parse took" in caplog.text


def test_parse_is_timed(caplog):
    with caplog.at_level(logging.DEBUG, logger="htmlsoup.dom.tree_builder"):
        Soup("<p>x</p>")

    assert "html5lib parse took" in caplog.text
    assert "tree conversion took" in caplog.text
