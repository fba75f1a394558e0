import logging

import pygame

logger = logging.getLogger("global")


class PygScreen:
    """Owns the pygame session and forwards draw loops to whatever
    drawable is currently on screen"""

    def __init__(self):
        self.__drawable = None

    @property
    def drawable(self):
        return self.__drawable

    def display_with_drawable(self, pygdrawable):
        pygame.init()
        self.__drawable = pygdrawable
        self.__drawable.start()
        logger.info("displaying %r", pygdrawable)

    def draw_loop(self):
        if self.__drawable is not None:
            self.__drawable.draw_loop()

    def close(self):
        if self.__drawable is not None:
            self.__drawable.stop()
            self.__drawable = None
        pygame.quit()
        logger.info("pygame shut down")
