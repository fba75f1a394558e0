"""Scheduler tasks that drive the rain"""

import time

from scheduler.scheduler import Task


class DropAnimationTask(Task):
    """Plays one drop's animation on a scheduler.

    Starting the task is the moment the drop 'appears'. Each tick samples
    the drop at the time since then, and the result is left in
    'frame' for whoever draws the drop. The animation loops forever, so
    the task only finishes when end() is called (e.g. the window closed).

    Attributes:
        drop: the Drop being animated.
        frame: latest DropFrame; the drop's at-rest frame until ticked.
        clock: should match the scheduler's clock so appeared_at lines up
            with the times the scheduler ticks us with.
    """

    def __init__(self, drop, clock=time.time):
        self.drop = drop
        self.clock = clock
        self.frame = drop.at_rest_frame()
        self.__finished = False

    def __repr__(self):
        return "DropAnimationTask(%r)" % (self.drop,)

    def start(self):
        """ Task implementation """
        self.drop.appear(self.clock())

    def tick(self, time):
        """ Task implementation """
        self.frame = self.drop.frame_at(time)

    def is_finished(self, time):
        """ Task implementation """
        return self.__finished

    def end(self):
        """ Call to stop animating the drop """
        self.__finished = True
