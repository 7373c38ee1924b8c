import logging

import pytest

from termgrid.logger import OFF, TRACE, RioFormatter, _RioHandler, setup_logging


def _record(name, level, msg, *args):
    return logging.LogRecord(name, level, __file__, 1, msg, args, None)


@pytest.fixture
def restore_root():
    root = logging.getLogger()
    level = root.level
    handlers = list(root.handlers)
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)


def test_format_info_line():
    line = RioFormatter().format(_record("termgrid.grid", logging.INFO, "hello"))
    assert line == "\x1b[35m[INFO]\x1b[0m \x1b[34mtermgrid.grid\x1b[0m hello\0"


def test_format_uses_short_warning_name_and_args():
    line = RioFormatter().format(_record("t", logging.WARNING, "n=%d", 3))
    assert line.startswith("\x1b[35m[WARN]\x1b[0m")
    assert line.endswith(" n=3\0")


def test_format_trace_level():
    line = RioFormatter().format(_record("t", TRACE, "x"))
    assert "[TRACE]" in line


@pytest.mark.parametrize(
    "name, expected",
    [
        ("debug", logging.DEBUG),
        ("INFO", logging.INFO),
        ("warn", logging.WARNING),
        ("error", logging.ERROR),
        ("trace", TRACE),
        ("off", OFF),
        ("nonsense", OFF),
    ],
)
def test_setup_logging_levels(restore_root, name, expected):
    assert setup_logging(name) == expected
    assert restore_root.level == expected


def test_setup_logging_writes_to_stdout(restore_root, capsys):
    setup_logging("info")
    logging.getLogger("termgrid.test").info("ready")
    logging.getLogger("termgrid.test").debug("hidden")
    out = capsys.readouterr().out
    assert "\x1b[34mtermgrid.test\x1b[0m ready\0" in out
    assert "hidden" not in out


def test_setup_logging_replaces_previous_handler(restore_root, capsys):
    assert setup_logging("info") == logging.INFO
    assert setup_logging("debug") == logging.DEBUG
    ours = [h for h in restore_root.handlers if isinstance(h, _RioHandler)]
    assert len(ours) == 1
    logging.getLogger("termgrid.once").debug("single")
    out = capsys.readouterr().out
    assert out.count("single") == 1