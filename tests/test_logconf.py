import io
import os

import pytest

from nshkit.logconf import LogConfig, Logger, LogLevel, parse_level


def test_parse_level_ignores_case():
    assert parse_level("debug") == LogLevel.DEBUG
    assert parse_level("Error") == LogLevel.ERROR


def test_parse_level_unknown():
    assert parse_level("bogus") == LogLevel.DISABLED
    assert parse_level("disabled") == LogLevel.DISABLED


def test_config_parse_domains():
    cfg = LogConfig.parse("net:DEBUG,io,*:WARN")
    assert cfg.domains == {"net": LogLevel.DEBUG, "io": LogLevel.INFO}
    assert cfg.default_level == LogLevel.WARN


def test_config_should_log():
    cfg = LogConfig.parse("net:DEBUG,io,*:WARN")
    assert cfg.should_log(LogLevel.DEBUG, "net")
    assert not cfg.should_log(LogLevel.TRACE, "net")
    assert cfg.should_log(LogLevel.INFO, "io")
    assert not cfg.should_log(LogLevel.DEBUG, "io")
    assert cfg.should_log(LogLevel.WARN, "other")
    assert not cfg.should_log(LogLevel.INFO, "other")


def test_config_unknown_level_entry_ignored():
    cfg = LogConfig.parse("net:loud")
    assert "net" not in cfg.domains
    assert not cfg.should_log(LogLevel.ERROR, "net")


def test_config_first_entry_wins():
    cfg = LogConfig.parse("net:ERROR,net:TRACE")
    assert cfg.domains["net"] == LogLevel.ERROR


def test_logger_writes_line():
    stream = io.StringIO()
    logger = Logger()
    logger.setup(stream, "*:TRACE", False)
    logger.log(LogLevel.INFO, "x", "f.c", 3, "hello")
    out = stream.getvalue()
    assert out.endswith("f.c:3: hello\n")
    assert "INFO" in out
    assert out.startswith(str(os.getpid()))


def test_logger_filters():
    stream = io.StringIO()
    logger = Logger()
    logger.setup(stream, "net:ERROR", False)
    logger.log(LogLevel.WARN, "net", "f.c", 1, "quiet")
    logger.log(LogLevel.ERROR, "io", "f.c", 1, "quiet")
    assert stream.getvalue() == ""


def test_logger_colors():
    stream = io.StringIO()
    logger = Logger()
    logger.setup(stream, "*:TRACE", True)
    logger.log(LogLevel.INFO, "x", "f.c", 3, "hello")
    out = stream.getvalue()
    assert "\x1b[32m" in out
    assert "\x1b[0m" in out
    assert out.endswith("hello\n")


def test_logger_disabled_level_rejected():
    logger = Logger()
    logger.setup(io.StringIO(), "*:TRACE", False)
    with pytest.raises(ValueError):
        logger.log(LogLevel.DISABLED, "x", "f.c", 1, "nope")


def test_logger_setup_twice_warns(capsys):
    first = io.StringIO()
    second = io.StringIO()
    logger = Logger()
    logger.setup(first, "*:TRACE", False)
    logger.setup(second, "*:TRACE", False)
    logger.log(LogLevel.ERROR, "x", "f.c", 1, "msg")
    assert "tried to setup logging twice" in capsys.readouterr().err
    assert second.getvalue() == ""
    assert first.getvalue().endswith("msg\n")


def test_logger_teardown_stops_logging():
    stream = io.StringIO()
    logger = Logger()
    logger.setup(stream, "*:TRACE", False)
    logger.teardown()
    logger.log(LogLevel.ERROR, "x", "f.c", 1, "gone")
    assert stream.getvalue() == ""
    assert not stream.closed


def test_setup_environ_without_debug(capsys):
    logger = Logger()
    logger.setup_environ({})
    assert logger.stream is None
    stream = io.StringIO()
    logger.setup(stream, "*:TRACE", False)
    assert capsys.readouterr().err == ""
    assert logger.stream is stream


def test_setup_environ_logfile(tmp_path):
    path = tmp_path / "log.txt"
    logger = Logger()
    logger.setup_environ({"DEBUG": "core:DEBUG", "LOGFILE": str(path)})
    logger.log(LogLevel.DEBUG, "core", "main.c", 7, "started")
    logger.log(LogLevel.DEBUG, "other", "main.c", 8, "hidden")
    stream = logger.stream
    logger.teardown()
    assert stream.closed
    content = path.read_text()
    assert content.endswith("main.c:7: started\n")
    assert "hidden" not in content


def test_setup_environ_bad_logfile(tmp_path, capsys):
    logger = Logger()
    logger.setup_environ({"DEBUG": "*", "LOGFILE": str(tmp_path / "missing" / "log")})
    assert logger.stream is None
    assert "failed to initialize logger" in capsys.readouterr().err