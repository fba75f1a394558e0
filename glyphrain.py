import argparse
import curses
import logging

import pygame

from curses_log_handler import CursesLogHandler
from profiler import Profiler
from pygdisplay.rain import RainPygDrawable
from pygdisplay.rain import SCREENX
from pygdisplay.rain import SCREENY
from pygdisplay.screen import PygScreen
from rain_engine.drop import Direction
from rain_engine.drop import is_glyph
from rain_engine.rain import Rain
from scheduler.scheduler import Scheduler

logger = logging.getLogger("global")

FPS = 60
DEFAULT_CHARACTER = "|"
LOG_FORMAT = '%(asctime)s-%(name)s-%(levelname)s-%(message)s'


def _character(text):
    if not is_glyph(text):
        raise argparse.ArgumentTypeError(
            "expected a single character, got %r" % text)
    return text


def _direction(text):
    try:
        return Direction.parse(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def _positive_int(text):
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError("expected a positive number, got %s"
                                         % text)
    return value


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Animated rain made out of a single character")
    parser.add_argument("--character", type=_character,
                        default=DEFAULT_CHARACTER,
                        help="glyph every drop shows (default %(default)r)")
    parser.add_argument("--direction", type=_direction, default=Direction.TOP,
                        help="'top' to fall and fade, 'bottom' to rise "
                             "(default top)")
    parser.add_argument("--width", type=_positive_int, default=SCREENX)
    parser.add_argument("--height", type=_positive_int, default=SCREENY)
    parser.add_argument("--fps", type=_positive_int, default=FPS)
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for reproducible drops")
    parser.add_argument("--font", default=None,
                        help="system font name (default pygame's own font)")
    parser.add_argument("--profile", action='store_true',
                        help="log frame loop timings")
    parser.add_argument("--plain-log", action='store_true',
                        help="log to stderr instead of a curses console")
    return parser.parse_args(argv)


def setup_logging(handler):
    logger.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.handlers = [handler]


def run(args):
    """Open the rain window and run the frame loop until it's closed"""
    rain = Rain(args.character, args.direction, seed=args.seed)
    logger.info("raining %r from the %s (seed %r)", rain.character,
                rain.direction.value, args.seed)

    animation_scheduler = Scheduler()
    animation_scheduler.start()

    drawable = RainPygDrawable(rain, width=args.width, height=args.height,
                               font_name=args.font,
                               clock=animation_scheduler.clock)
    pyg_screen = PygScreen()

    profiler = Profiler()
    profiler.enabled = args.profile

    try:
        pyg_screen.display_with_drawable(drawable)
        drawable.schedule(animation_scheduler)
        animation_scheduler.print_state()
        frame_clock = pygame.time.Clock()

        while not drawable.closed:
            profiler.avg("loop start")

            animation_scheduler.tick()
            profiler.avg("animation scheduler")

            pyg_screen.draw_loop()
            profiler.avg("draw")

            frame_clock.tick(args.fps)
    except KeyboardInterrupt:
        logger.info("interrupted, stopping rain")
    finally:
        animation_scheduler.clear()
        animation_scheduler.stop()
        pyg_screen.close()


def main_loop(window, args):
    # the terminal becomes a log console while the rain runs in its own
    # pygame window
    window.scrollok(1)
    window.addstr("~^~^~ Rain ~^~^~\n")
    window.addstr("Close the rain window (or Ctrl-C) to quit\n")
    window.refresh()

    setup_logging(CursesLogHandler(window))
    run(args)


def main(argv=None):
    args = parse_args(argv)
    if args.plain_log:
        setup_logging(logging.StreamHandler())
        run(args)
    else:
        curses.wrapper(main_loop, args)


if __name__ == '__main__':
    main()
