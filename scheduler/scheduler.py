import logging
import time
from abc import ABC, abstractmethod

logger = logging.getLogger("global")


class Task(ABC):
    """A time-based task, e.g. one drop's animation.

    A task is scheduled to tick once per scheduler loop until done. For
    each tick, the task is given the time since it started.
    """

    @abstractmethod
    def start(self):
        pass

    @abstractmethod
    def tick(self, time):
        """A task 'tick'. 'time' is seconds since task start"""
        pass

    @abstractmethod
    def is_finished(self, time):
        """Tasks should return true when finished. Will be scheduled
        for removal once true"""
        pass


class _TaskWrapper:
    """Extra state kept about a task once it's been scheduled.

    Attributes:
        task: Task being wrapped.
        start_time: Scheduler clock time when the task was started.
    """

    def __init__(self, task, start_time):
        self.task = task
        self.start_time = start_time

    def __repr__(self):
        return "%r (started %.3f)" % (self.task, self.start_time)


class Scheduler:
    """Tick-based task runner. The run loop calls tick() every frame and
    each task is ticked with the seconds elapsed since it was added.

    Attributes:
        task_wrappers: wrappers for every task currently scheduled.
        clock: zero-argument callable returning the current time in
            seconds. Swap it out to drive the scheduler by hand.
    """

    def __init__(self, clock=time.time):
        self.task_wrappers = []
        self.clock = clock
        self.__started = False

    @property
    def started(self):
        return self.__started

    def start(self):
        self.__started = True

    def stop(self):
        self.__started = False

    def add(self, task):
        """Add and start a task. Tasks are ticked in the order they were
        added"""
        self.task_wrappers.append(_TaskWrapper(task, self.clock()))
        task.start()

    def clear(self):
        """Remove all tasks from the scheduler"""
        self.task_wrappers.clear()

    def tick(self):
        """Called by the run loop only. Removes finished tasks and ticks
        the rest"""
        if not self.__started:
            return

        now = self.clock()

        self.task_wrappers = [
            task_wrapper for task_wrapper in self.task_wrappers
            if not task_wrapper.task.is_finished(now - task_wrapper.start_time)
        ]

        for task_wrapper in self.task_wrappers:
            task_wrapper.task.tick(now - task_wrapper.start_time)

    def print_state(self):
        """Logs scheduler state (e.g. active tasks)"""
        logger.info("scheduler state: %d task(s)", len(self.task_wrappers))
        for task_wrapper in self.task_wrappers:
            logger.info(" %r", task_wrapper)
