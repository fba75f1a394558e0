"""
Unit tests for logging into a curses window.
"""

import curses
import logging

from curses_log_handler import CursesLogHandler


class FakeWindow:
    """Just enough of a curses window to log into."""

    def __init__(self, fail_with=None):
        self.lines = []
        self.refreshes = 0
        self.fail_with = fail_with

    def addstr(self, text):
        if self.fail_with is not None:
            raise self.fail_with
        self.lines.append(text)

    def refresh(self):
        self.refreshes += 1


def make_record(message):
    return logging.LogRecord("global", logging.INFO, __file__, 1, message,
                             None, None)


class TestCursesLogHandler:
    """Test cases for CursesLogHandler."""

    def test_emit_writes_formatted_line(self):
        window = FakeWindow()
        handler = CursesLogHandler(window)
        handler.setFormatter(logging.Formatter("%(levelname)s-%(message)s"))

        handler.emit(make_record("raining 'A'"))

        assert window.lines == ["\nINFO-raining 'A'"]
        assert window.refreshes == 1

    def test_curses_errors_go_to_handle_error(self, monkeypatch):
        handled = []
        handler = CursesLogHandler(FakeWindow(fail_with=curses.error("full")))
        monkeypatch.setattr(handler, "handleError", handled.append)

        record = make_record("too much text")
        handler.emit(record)

        assert handled == [record]
