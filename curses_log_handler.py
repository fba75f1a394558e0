import curses
import logging

# log handling in curses


class CursesLogHandler(logging.Handler):
    """Writes log records into a curses window, one per line. The window
    should have scrollok() set or it'll stop accepting text once full."""

    def __init__(self, screen):
        logging.Handler.__init__(self)
        self.screen = screen

    def emit(self, record):
        try:
            msg = self.format(record)
            try:
                self.screen.addstr("\n%s" % msg)
            except UnicodeEncodeError:
                # terminal can't show it, e.g. a CJK rain character
                self.screen.addstr(
                    "\n%s" % msg.encode("ascii", "backslashreplace").decode())
            self.screen.refresh()
        except (curses.error, ValueError):
            self.handleError(record)
