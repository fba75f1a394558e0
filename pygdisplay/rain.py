import logging
import time

import pygame
from pygame.locals import *

from color import alpha_for_opacity
from color import make_color
from rain_tasks import DropAnimationTask

logger = logging.getLogger("global")

SCREENX = 800
SCREENY = 900
GLYPHCOLOR = make_color(255, 255, 255)
BACKGROUNDCOLOR = make_color(0, 0, 0)
CAPTION = "Rain"


class RainPygDrawable:
    """Draws a Rain in a pygame window.

    Every drop becomes a GlyphSprite backed by a DropAnimationTask. The
    tasks do nothing until schedule() hands them to a scheduler, which is
    the point the drops 'appear' and start falling (or rising). After that
    the draw loop only has to copy each task's latest frame onto its sprite.

    Drop offsets are measured from the middle of the window, so with the
    default height the drops start and end just out of view.
    """

    def __init__(self, rain, width=SCREENX, height=SCREENY, font_name=None,
                 color=GLYPHCOLOR, background=BACKGROUNDCOLOR,
                 clock=time.time):
        self.rain = rain
        self.width = width
        self.height = height
        self.font_name = font_name
        self.color = color
        self.background = background
        self.clock = clock
        self.glyphs = []
        self.started = False
        self.closed = False
        self.__fonts = {}
        self.__screen = None
        self.__background = None
        self.__displaygroup = None

    def __repr__(self):
        return "RainPygDrawable(%r, %dx%d)" % (self.rain, self.width,
                                               self.height)

    def start(self):
        self.started = True
        self.closed = False
        self.__screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption(CAPTION)
        self.__background = pygame.Surface(self.__screen.get_rect().size)
        self.__background.fill(self.background)
        self.__screen.blit(self.__background, (0, 0))
        pygame.display.flip()

        self.__displaygroup = pygame.sprite.RenderUpdates()

        center = (self.width / 2, self.height / 2)
        self.glyphs = []
        for drop in self.rain:
            task = DropAnimationTask(drop, clock=self.clock)
            glyph = GlyphSprite(task, self.glyph_image(drop), center)
            glyph.add(self.__displaygroup)
            self.glyphs.append(glyph)

        logger.info("rain window open with %d drops", len(self.glyphs))

    def schedule(self, scheduler):
        """Start every drop's animation on 'scheduler'"""
        for glyph in self.glyphs:
            scheduler.add(glyph.task)

    def draw_loop(self):
        if not self.started or self.closed:
            return
        for event in pygame.event.get():
            if event.type == QUIT:
                logger.info("rain window closed")
                self.closed = True
                return

        self.__displaygroup.clear(self.__screen, self.__background)

        self.__displaygroup.update()

        pygame.display.update(self.__displaygroup.draw(self.__screen))

    def stop(self):
        """Tear down: end every drop's animation"""
        for glyph in self.glyphs:
            glyph.task.end()
        self.started = False

    def font(self, size):
        """Font for a (rounded) point size. Fonts are cached since drops
        often round to the same size"""
        size = int(round(size))
        if size not in self.__fonts:
            if self.font_name:
                self.__fonts[size] = pygame.font.SysFont(self.font_name, size)
            else:
                self.__fonts[size] = pygame.font.Font(None, size)
        return self.__fonts[size]

    def glyph_image(self, drop):
        return self.font(drop.state.font_size).render(
            drop.character, True, self.color)


class GlyphSprite(pygame.sprite.Sprite):
    """One drop on screen. Mirrors its task's latest frame: vertical
    offset from the window center plus the drop's fixed horizontal
    offset, and opacity as surface alpha"""

    def __init__(self, task, image, center):
        pygame.sprite.Sprite.__init__(self)
        self.task = task
        self.image = image
        self.rect = self.image.get_rect()
        self.center = center
        self.update()

    def update(self):
        drop = self.task.drop
        frame = self.task.frame
        self.image.set_alpha(alpha_for_opacity(frame.opacity))
        centerx, centery = self.center
        self.rect.center = (round(centerx + drop.horizontal_offset),
                            round(centery + frame.offset_y))
