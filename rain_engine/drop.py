"""A single rain drop: one glyph with its own randomized look and timing.

A drop is a value object. Everything about it is drawn once when it's
created, and its position/opacity at any moment is a pure function of how
long it has been on screen, so nothing needs to tick it to keep it honest.
"""

import logging
import random
from collections import namedtuple
from enum import Enum

import regex

logger = logging.getLogger("global")

FONT_SIZE_RANGE = (30.0, 50.0)
PADDING_RANGE = (0.0, 360.0)
DURATION_RANGE = (12.0, 14.0)

LEADING = "leading"
TRAILING = "trailing"

AT_REST = "at_rest"
ANIMATING = "animating"

_GRAPHEME = regex.compile(r"\X")


def is_glyph(text):
    """True if text is exactly one user-perceived character (grapheme
    cluster), e.g. 'A', '雨' or an emoji with a variation selector"""
    if not isinstance(text, str) or "\n" in text or "\r" in text:
        return False
    return _GRAPHEME.fullmatch(text) is not None


class Direction(Enum):
    TOP = "top"
    BOTTOM = "bottom"

    @classmethod
    def parse(cls, text):
        """Direction from its name, e.g. 'top' or 'Bottom'"""
        try:
            return cls(str(text).strip().lower())
        except ValueError:
            choices = ", ".join(direction.value for direction in cls)
            raise ValueError("unknown direction %r (expected one of: %s)"
                             % (text, choices)) from None


# (initial opacity, final opacity, initial offset, final offset)
# TOP deliberately overshoots [0, 1] on opacity; the renderer clamps.
_DIRECTION_CONSTANTS = {
    Direction.TOP: (2.0, -0.5, -510.0, 500.0),
    Direction.BOTTOM: (1.0, 1.0, 500.0, -510.0),
}

DropFrame = namedtuple("DropFrame", ["offset_y", "opacity"])

DropVisualState = namedtuple("DropVisualState", [
    "font_size",
    "initial_opacity",
    "final_opacity",
    "initial_offset_y",
    "final_offset_y",
    "horizontal_padding",
    "padding_edge",
    "duration",
    "delay",
])


def _lerp(start, end, progress):
    return start + (end - start) * progress


class Drop:
    """One drop in the rain.

    Attributes:
        character: the glyph to draw.
        direction: TOP (falls and fades out) or BOTTOM (rises, opaque).
        index: position of the drop in its rain. Sets the start delay and
            which side the horizontal padding goes on.
        state: DropVisualState drawn once at creation.
        appeared_at: clock time the drop first appeared, None while at rest.
    """

    def __init__(self, character, direction, index, rng=None):
        if not isinstance(direction, Direction):
            raise TypeError("direction must be a Direction, got %r"
                            % (direction,))
        if index < 0:
            raise ValueError("drop index must be >= 0, got %d" % index)

        if rng is None:
            rng = random.Random()

        self.character = character
        self.direction = direction
        self.index = index
        self.appeared_at = None

        initial_opacity, final_opacity, initial_offset, final_offset = \
            _DIRECTION_CONSTANTS[direction]

        self.state = DropVisualState(
            font_size=rng.uniform(*FONT_SIZE_RANGE),
            initial_opacity=initial_opacity,
            final_opacity=final_opacity,
            initial_offset_y=initial_offset,
            final_offset_y=final_offset,
            horizontal_padding=rng.uniform(*PADDING_RANGE),
            padding_edge=LEADING if index % 2 == 0 else TRAILING,
            duration=rng.uniform(*DURATION_RANGE),
            delay=float(index),
        )

    def __repr__(self):
        return "Drop(%r, %s, index=%d)" % (
            self.character, self.direction.name, self.index)

    @property
    def horizontal_offset(self):
        """How far the padding pushes the glyph off center.

        Padding widens the glyph's box on one side and the box stays
        centered, so the glyph itself moves by half the padding, right for
        leading padding and left for trailing.
        """
        half = self.state.horizontal_padding / 2
        return half if self.state.padding_edge == LEADING else -half

    @property
    def status(self):
        return AT_REST if self.appeared_at is None else ANIMATING

    def appear(self, now):
        """Start animating. Only the first call counts."""
        if self.appeared_at is not None:
            logger.debug("%r already appeared, ignoring", self)
            return
        self.appeared_at = now

    def at_rest_frame(self):
        return DropFrame(self.state.initial_offset_y,
                         self.state.initial_opacity)

    def progress_at(self, elapsed):
        """Normalized (0 to 1) progress through the current loop, or None
        while still waiting out the start delay"""
        state = self.state
        if elapsed < state.delay:
            return None
        return ((elapsed - state.delay) % state.duration) / state.duration

    def frame_at(self, elapsed):
        """Offset and opacity 'elapsed' seconds after the drop appeared.

        Loops forever without reversing: each cycle snaps back to the
        initial values and interpolates linearly towards the final ones.
        """
        progress = self.progress_at(elapsed)
        if progress is None:
            return self.at_rest_frame()

        state = self.state
        return DropFrame(
            _lerp(state.initial_offset_y, state.final_offset_y, progress),
            _lerp(state.initial_opacity, state.final_opacity, progress))

    def frame(self, now):
        if self.appeared_at is None:
            return self.at_rest_frame()
        return self.frame_at(now - self.appeared_at)
