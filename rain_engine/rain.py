import logging
import random

from rain_engine.drop import Direction
from rain_engine.drop import Drop
from rain_engine.drop import is_glyph

logger = logging.getLogger("global")

DROP_COUNT = 25


class Rain:
    """A curtain of drops all showing the same character.

    The rain itself holds no random state. Each drop gets its own random
    source: derived from 'seed' when one is given (so a run can be
    replayed exactly), otherwise seeded by the OS.

    Attributes:
        character: glyph every drop shows.
        direction: Direction all drops move in.
        drops: the DROP_COUNT drops, in index order.
    """

    def __init__(self, character, direction=Direction.TOP, seed=None):
        if not is_glyph(character):
            raise ValueError("rain needs a single character to draw, got %r"
                             % (character,))
        if not isinstance(direction, Direction):
            raise TypeError("direction must be a Direction, got %r"
                            % (direction,))

        self.character = character
        self.direction = direction
        self.seed = seed

        seeder = random.Random(seed) if seed is not None else None
        self.drops = []
        for index in range(DROP_COUNT):
            if seeder is not None:
                rng = random.Random(seeder.getrandbits(64))
            else:
                rng = random.Random()
            self.drops.append(Drop(character, direction, index, rng=rng))

        logger.debug("created %r", self)

    def __repr__(self):
        return "Rain(%r, %s, seed=%r)" % (
            self.character, self.direction.name, self.seed)

    def __len__(self):
        return len(self.drops)

    def __iter__(self):
        return iter(self.drops)

    def appear(self, now):
        for drop in self.drops:
            drop.appear(now)

    def frames_at(self, elapsed):
        """Frame of every drop 'elapsed' seconds after the rain appeared"""
        return [drop.frame_at(elapsed) for drop in self.drops]
