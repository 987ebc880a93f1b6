"""Basic tests for leveled logger"""

import dataclasses
import inspect
import io
import re

import pytest

from leveled_logger import (
    CloseError,
    LogFlags,
    LogLevel,
    Logger,
    LoggerBuilder,
    LoggerConfig,
    new_logger,
    with_error_log_file,
    with_info_log_file,
    with_level,
    with_log_flags,
)
from leveled_logger.core import logger_config
from leveled_logger.core.log_entry import LogEntry
from leveled_logger.core.log_flags import DEFAULT_FLAGS


class TestLogLevel:
    """Test log level functionality."""

    def test_log_levels(self):
        assert LogLevel.DEBUG < LogLevel.INFO
        assert LogLevel.INFO < LogLevel.WARN
        assert LogLevel.WARN < LogLevel.ERROR
        assert LogLevel.ERROR < LogLevel.FATAL

    def test_from_string(self):
        assert LogLevel.from_string("DEBUG") == LogLevel.DEBUG
        assert LogLevel.from_string("info") == LogLevel.INFO
        assert LogLevel.from_string("warning") == LogLevel.WARN

    def test_from_string_invalid(self):
        with pytest.raises(ValueError):
            LogLevel.from_string("verbose")

    def test_tags(self):
        assert LogLevel.DEBUG.tag == "DEBUG: "
        assert LogLevel.INFO.tag == "INFO : "
        assert LogLevel.WARN.tag == "WARN : "
        assert LogLevel.ERROR.tag == "ERROR: "
        assert LogLevel.FATAL.tag == "FATAL: "
        assert {len(level.tag) for level in LogLevel} == {7}

    def test_coerce(self):
        assert LogLevel.coerce("error") == LogLevel.ERROR
        assert LogLevel.coerce(2) == LogLevel.WARN
        with pytest.raises(ValueError):
            LogLevel.coerce(42)


class TestLogEntry:
    """Test log entry structure."""

    def test_create_entry(self):
        entry = LogEntry(level=LogLevel.INFO, message="Test message")
        assert entry.level == LogLevel.INFO
        assert entry.message == "Test message"
        assert entry.file_name == ""

    def test_non_string_message(self):
        entry = LogEntry(level=LogLevel.DEBUG, message=42)
        assert entry.message == "42"

    def test_to_dict(self):
        entry = LogEntry(level=LogLevel.DEBUG, message="Test")
        data = entry.to_dict()
        assert data["level"] == "DEBUG"
        assert data["message"] == "Test"


class TestLoggerConfig:
    """Test logger configuration."""

    def test_default_config(self):
        config = LoggerConfig.default()
        assert config.min_level == LogLevel.DEBUG
        assert config.info_log_file is None
        assert config.error_log_file is None
        assert config.log_flags == LogFlags.DATE | LogFlags.MICROSECONDS | LogFlags.SHORT_FILE

    def test_debug_config_reports_full_path(self, capsys):
        config = LoggerConfig.debug_config()
        assert config.log_flags & LogFlags.LONG_FILE
        assert not config.log_flags & LogFlags.SHORT_FILE

        Logger(config).info("x")
        assert " " + __file__ + ":" in capsys.readouterr().out

    def test_production_config(self):
        config = LoggerConfig.production_config()
        assert config.min_level == LogLevel.WARN

    def test_config_is_frozen(self):
        config = LoggerConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.min_level = LogLevel.ERROR

    def test_level_name_is_coerced(self):
        config = LoggerConfig(min_level="warn")
        assert config.min_level is LogLevel.WARN

    def test_invalid_flags(self):
        with pytest.raises(ValueError):
            LoggerConfig(log_flags=1 << 12)
        with pytest.raises(ValueError):
            LoggerConfig(log_flags=-1)


class TestOptions:
    """Test option functions and the builder."""

    def test_last_option_wins(self):
        logger = new_logger(with_level(LogLevel.ERROR), with_level(LogLevel.INFO))
        assert logger.level == LogLevel.INFO

    def test_options_record_destinations(self):
        info, err = io.StringIO(), io.StringIO()
        logger = new_logger(
            with_info_log_file(info),
            with_error_log_file(err),
            with_log_flags(LogFlags.NONE),
        )
        assert logger.config.info_log_file is info
        assert logger.config.error_log_file is err
        assert logger.config.log_flags == LogFlags.NONE

    def test_builder_pattern(self):
        logger = (LoggerBuilder()
            .with_level(LogLevel.WARN)
            .with_log_flags(LogFlags.SHORT_FILE)
            .build())

        assert logger.level == LogLevel.WARN
        assert logger.config.log_flags == LogFlags.SHORT_FILE

    def test_builder_raw_option(self):
        def quiet(options):
            options.level = LogLevel.FATAL

        logger = LoggerBuilder().with_option(quiet).build()
        assert logger.level == LogLevel.FATAL

    def test_explicit_default_level(self):
        assert new_logger(default_level=LogLevel.WARN).level == LogLevel.WARN
        assert LoggerBuilder(default_level=LogLevel.ERROR).build().level == LogLevel.ERROR

    def test_default_level_read_at_construction(self, monkeypatch, capsys):
        monkeypatch.setattr(logger_config, "DEFAULT_LEVEL", LogLevel.ERROR)
        logger = new_logger()
        assert logger.level == LogLevel.ERROR

        monkeypatch.setattr(logger_config, "DEFAULT_LEVEL", LogLevel.DEBUG)
        assert logger.level == LogLevel.ERROR
        logger.info("hidden")
        assert capsys.readouterr().out == ""
        assert new_logger().level == LogLevel.DEBUG


class TestLogger:
    """Test main logger functionality."""

    def test_create_logger(self):
        logger = Logger()
        assert logger.level == LogLevel.DEBUG
        assert logger.depth == 0
        logger.close()

    def test_default_routing(self, capsys):
        logger = new_logger(with_log_flags(LogFlags.NONE))
        logger.info("to stdout")
        logger.error("to stderr")

        captured = capsys.readouterr()
        assert captured.out == "INFO : to stdout\n"
        assert captured.err == "ERROR: to stderr\n"

    def test_console_groups(self, capsys):
        logger = new_logger(with_log_flags(LogFlags.NONE))
        logger.debug("d")
        logger.info("i")
        logger.warn("w")
        logger.error("e")

        captured = capsys.readouterr()
        assert captured.out == "DEBUG: d\nINFO : i\n"
        assert captured.err == "WARN : w\nERROR: e\n"

    def test_below_threshold_dropped(self, capsys):
        info, err = io.StringIO(), io.StringIO()
        logger = new_logger(
            with_level(LogLevel.WARN),
            with_info_log_file(info),
            with_error_log_file(err),
            with_log_flags(LogFlags.NONE),
        )
        logger.debug("x")
        logger.info("x")
        logger.debugln("x")
        logger.infof("%s", "x")
        logger.info_depth(0, "x")
        logger.error("y")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "ERROR: y\n"
        assert info.getvalue() == ""
        assert err.getvalue() == "ERROR: y\n"

    def test_warn_threshold_scenario(self, capsys):
        err = io.StringIO()
        logger = new_logger(
            with_level(LogLevel.WARN),
            with_error_log_file(err),
            with_log_flags(LogFlags.NONE),
        )
        logger.debug("x")
        logger.warn("w")
        logger.error("y")

        assert err.getvalue() == "WARN : w\nERROR: y\n"
        captured = capsys.readouterr()
        assert "x" not in captured.out + captured.err

    def test_message_forms(self, capsys):
        logger = new_logger(with_log_flags(LogFlags.NONE))
        logger.info("a", 1, None)
        logger.infoln("a", 1, None)
        logger.infof("%s=%d", "n", 3)
        logger.infof("100% sure")

        assert capsys.readouterr().out == (
            "INFO : a1None\n"
            "INFO : a 1 None\n"
            "INFO : n=3\n"
            "INFO : 100% sure\n"
        )

    def test_generic_log(self, capsys):
        logger = new_logger(with_log_flags(LogFlags.NONE))
        logger.log(LogLevel.WARN, "generic")
        assert capsys.readouterr().err == "WARN : generic\n"

    def test_enabled_for(self):
        logger = new_logger(with_level(LogLevel.INFO))
        assert not logger.enabled_for(LogLevel.DEBUG)
        assert logger.enabled_for(LogLevel.INFO)
        assert logger.enabled_for(LogLevel.FATAL)

    def test_default_header(self, capsys):
        logger = new_logger()
        line = _lineno() + 1
        logger.info("hello")

        out = capsys.readouterr().out
        pattern = (
            r"INFO : \d{4}/\d{2}/\d{2} \d{2}:\d{2}:\d{2}\.\d{6} "
            r"test_logger\.py:%d: hello\n" % line
        )
        assert re.fullmatch(pattern, out)

    def test_set_depth_rejects_negative(self):
        logger = new_logger()
        with pytest.raises(ValueError):
            logger.set_depth(-1)
        logger.set_depth(2)
        assert logger.depth == 2

    def test_writer_failure_does_not_stop_group(self, capsys):
        class Broken:
            def write(self, text):
                raise OSError("disk full")

        logger = new_logger(with_info_log_file(Broken()), with_log_flags(LogFlags.NONE))
        logger.info("still printed")

        captured = capsys.readouterr()
        assert captured.out == "INFO : still printed\n"
        assert "Writer error" in captured.err
        assert "disk full" in captured.err


def _lineno():
    """Line number of the calling statement."""
    return inspect.currentframe().f_back.f_lineno


class TestClose:
    """Test resource release."""

    class Destination:
        def __init__(self, fail=False):
            self.fail = fail
            self.closed = False
            self.lines = []

        def write(self, text):
            self.lines.append(text)

        def close(self):
            self.closed = True
            if self.fail:
                raise OSError("cannot close")

    def test_close_success(self):
        info, err = self.Destination(), self.Destination()
        logger = new_logger(with_info_log_file(info), with_error_log_file(err))
        logger.close()
        assert info.closed and err.closed

    def test_close_aggregates_failures(self, capsys):
        bad, good = self.Destination(fail=True), self.Destination()
        logger = new_logger(with_info_log_file(bad), with_error_log_file(good))

        with pytest.raises(CloseError) as exc_info:
            logger.close()

        assert good.closed
        assert [dest for dest, _ in exc_info.value.failures] == [bad]
        assert "Failed to close log" in capsys.readouterr().err

    def test_close_twice_is_noop(self):
        bad = self.Destination(fail=True)
        logger = new_logger(with_info_log_file(bad))
        with pytest.raises(CloseError):
            logger.close()
        logger.close()

    def test_destination_without_close_not_owned(self):
        logger = new_logger(with_info_log_file(_WriteOnly()))
        assert logger._closers == []
        logger.close()

    def test_console_streams_not_closed(self, capsys):
        logger = new_logger(with_log_flags(LogFlags.NONE))
        logger.close()
        logger.info("after close")
        assert capsys.readouterr().out == "INFO : after close\n"

    def test_context_manager(self):
        dest = self.Destination()
        with new_logger(with_info_log_file(dest), with_log_flags(LogFlags.NONE)) as logger:
            logger.info("inside")
        assert dest.closed
        assert dest.lines == ["INFO : inside\n"]


class _WriteOnly:
    def write(self, text):
        pass


class TestFatal:
    """Test the fatal path."""

    def test_fatal_writes_closes_and_exits(self, capsys):
        err = TestClose.Destination()
        logger = new_logger(with_error_log_file(err), with_log_flags(LogFlags.NONE))

        with pytest.raises(SystemExit) as exc_info:
            logger.fatal("boom")

        assert exc_info.value.code == 1
        assert err.lines == ["FATAL: boom\n"]
        assert err.closed
        assert capsys.readouterr().err == "FATAL: boom\n"

    def test_fatal_variants_exit(self, capsys):
        logger = new_logger(with_log_flags(LogFlags.NONE))
        with pytest.raises(SystemExit):
            logger.fatalf("code %d", 7)
        with pytest.raises(SystemExit):
            logger.fatalln("a", "b")
        with pytest.raises(SystemExit):
            logger.fatal_depth(0, "c")
        assert capsys.readouterr().err == "FATAL: code 7\nFATAL: a b\nFATAL: c\n"

    def test_fatal_exits_even_when_close_fails(self, capsys):
        bad = TestClose.Destination(fail=True)
        logger = new_logger(with_error_log_file(bad), with_log_flags(LogFlags.NONE))

        with pytest.raises(SystemExit) as exc_info:
            logger.fatal("boom")

        assert exc_info.value.code == 1
        assert "Failed to close log" in capsys.readouterr().err

    def test_default_flags_value(self):
        assert DEFAULT_FLAGS == LogFlags.DATE | LogFlags.MICROSECONDS | LogFlags.SHORT_FILE
