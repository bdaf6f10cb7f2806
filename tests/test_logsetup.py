import logging

import pytest

from latren.logsetup import DEFAULT_PATTERN, LogLevel, init_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def _record(message, level=logging.INFO, name="latren.test"):
    return logging.LogRecord(name, level, __file__, 1, message, None, None)


def test_default_pattern_layout():
    handler = init_logging()
    output = handler.formatter.format(_record("hello"))
    assert output[0] + output[9:] == "[] info       hello"
    assert output[1:9].replace(":", "").isdigit()
    assert output[3] == output[6] == ":"


def test_explicit_default_pattern_matches_default():
    handler = init_logging(DEFAULT_PATTERN)
    output = handler.formatter.format(_record("hello"))
    assert output[9:] == "] info       hello"


def test_logger_name_and_message():
    handler = init_logging("%n: %v")
    assert handler.formatter.format(_record("hi", name="mylog")) == "mylog: hi"


def test_right_aligned_width():
    handler = init_logging("%5l|%v")
    assert handler.formatter.format(_record("x")) == " info|x"


def test_literal_percent_and_level_initial():
    handler = init_logging("%L 100%% %v")
    assert handler.formatter.format(_record("done", level=logging.WARNING)) == "W 100% done"


def test_debug_level_lowers_root_level():
    logging.getLogger().setLevel(logging.WARNING)
    handler = init_logging("%v", LogLevel.DEBUG)
    root = logging.getLogger()
    assert handler in root.handlers
    assert root.level == logging.DEBUG
    assert handler.formatter.format(_record("dbg", level=logging.DEBUG)) == "dbg"


def test_default_level_keeps_root_level():
    logging.getLogger().setLevel(logging.ERROR)
    handler = init_logging("%v", LogLevel.DEFAULT)
    root = logging.getLogger()
    assert handler in root.handlers
    assert root.level == logging.ERROR
    assert handler.formatter.format(_record("err", level=logging.ERROR)) == "err"


def test_repeated_init_replaces_handler():
    first = init_logging("%v")
    second = init_logging("%v")
    handlers = logging.getLogger().handlers
    assert second in handlers
    assert first not in handlers


def test_handler_writes_formatted_output(capsys):
    init_logging("<%v>")
    logging.getLogger().setLevel(logging.INFO)
    logging.getLogger("latren.test").info("ping")
    assert "<ping>" in capsys.readouterr().out