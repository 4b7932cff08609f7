"""
Tests for the library logger.
"""

import re

from rubber.logging import Logger, get_logger, log, set_enabled, is_enabled


class TestLogger:

    def test_disabled_by_default(self, capsys):
        logger = Logger()
        logger.log("hidden")
        assert capsys.readouterr().out == ""

    def test_enabled_writes_timestamped_line(self, capsys):
        logger = Logger(enabled=True)
        logger("[TEST] hello")
        out = capsys.readouterr().out
        assert re.match(r"^\[\s*\d+\.\d{3}s\] \[TEST\] hello\n$", out)

    def test_elapsed_increases(self):
        logger = Logger()
        first = logger.elapsed
        assert logger.elapsed >= first >= 0.0


class TestGlobalLogger:

    def test_singleton(self):
        assert get_logger() is get_logger()

    def test_toggle(self, capsys):
        assert not is_enabled()
        set_enabled(True)
        try:
            assert is_enabled()
            log("[TEST] on")
        finally:
            set_enabled(False)
        log("[TEST] off")
        out = capsys.readouterr().out
        assert "[TEST] on" in out
        assert "[TEST] off" not in out
