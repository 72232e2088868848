"""Tests for reporters."""

import logging

from mtime_cache.reporting import LoggingReporter, RecordingReporter


class TestLoggingReporter:
    def test_failure_logged_as_warning(self, caplog):
        reporter = LoggingReporter()
        with caplog.at_level(logging.DEBUG, logger="mtime_cache.reporting"):
            reporter.report("cache.write_failed", entry="/c/a.ts", error="denied")
        record = caplog.records[-1]
        assert record.levelno == logging.WARNING
        assert "cache.write_failed" in record.getMessage()
        assert "entry=/c/a.ts" in record.getMessage()

    def test_routine_events_logged_as_debug(self, caplog):
        reporter = LoggingReporter()
        with caplog.at_level(logging.DEBUG, logger="mtime_cache.reporting"):
            reporter.report("cache.hit", source="/p/a.ts")
        assert caplog.records[-1].levelno == logging.DEBUG

    def test_custom_logger(self, caplog):
        log = logging.getLogger("build.cache")
        reporter = LoggingReporter(log)
        with caplog.at_level(logging.DEBUG, logger="build.cache"):
            reporter.report("cache.miss", source="/p/a.ts")
        assert caplog.records[-1].name == "build.cache"


class TestRecordingReporter:
    def test_records_events(self):
        reporter = RecordingReporter()
        reporter.report("cache.miss", source="/p/a.ts")
        reporter.report("cache.write", entry="/c/a.ts")
        assert reporter.names() == ["cache.miss", "cache.write"]
        assert reporter.events[0][1] == {"source": "/p/a.ts"}
