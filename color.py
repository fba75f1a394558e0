import pygame

"""Color utilities

Colors are pygame.Color values so they can go straight into font.render()
and Surface.fill(). Opacity follows the usual 0 (invisible) to 1 (opaque)
convention, but callers are allowed to hand us anything: the rain's
falling drops start at 2 and end at -0.5, and it's up to us to clamp.
> white = make_color(255, 255, 255)
> faded = with_opacity(white, 0.5)
> print(faded.a)
"""

"""Color Constructors"""


def make_color(r, g, b, a=255):
    """color creation"""
    return pygame.Color(r, g, b, a)


"""Color Helpers"""


def alpha_for_opacity(opacity):
    """0-255 alpha for an opacity, clamped so out of range values saturate
    instead of wrapping"""
    return int(round(max(0.0, min(1.0, opacity)) * 255))


def with_opacity(color, opacity):
    """copy of color with alpha set from opacity"""
    color = pygame.Color(color)
    color.a = alpha_for_opacity(opacity)
    return color
