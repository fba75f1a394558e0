"""
Unit tests for driving drops from the scheduler.
"""

import random

import pytest

from rain_engine.drop import ANIMATING
from rain_engine.drop import AT_REST
from rain_engine.drop import Direction
from rain_engine.drop import Drop
from rain_tasks import DropAnimationTask
from scheduler.scheduler import Scheduler


@pytest.fixture
def drop():
    return Drop("A", Direction.TOP, 2, rng=random.Random(21))


class TestDropAnimationTask:
    """Test cases for DropAnimationTask."""

    def test_frame_is_at_rest_before_start(self, drop, clock):
        task = DropAnimationTask(drop, clock=clock)
        assert task.frame == drop.at_rest_frame()
        assert drop.status == AT_REST

    def test_start_makes_drop_appear(self, drop, clock):
        task = DropAnimationTask(drop, clock=clock)
        task.start()
        assert drop.status == ANIMATING
        assert drop.appeared_at == clock.now

    def test_tick_samples_drop(self, drop, clock):
        task = DropAnimationTask(drop, clock=clock)
        task.start()
        task.tick(7.25)
        assert task.frame == drop.frame_at(7.25)

    def test_never_finishes_until_ended(self, drop, clock):
        task = DropAnimationTask(drop, clock=clock)
        assert not task.is_finished(0)
        assert not task.is_finished(1e6)
        task.end()
        assert task.is_finished(0)

    def test_runs_on_scheduler(self, drop, clock):
        scheduler = Scheduler(clock=clock)
        scheduler.start()
        task = DropAnimationTask(drop, clock=clock)
        scheduler.add(task)

        clock.advance(1.0)
        scheduler.tick()
        # still waiting out the 2s delay
        assert task.frame == drop.at_rest_frame()

        clock.advance(4.0)
        scheduler.tick()
        assert task.frame == drop.frame(clock.now)
        assert task.frame.offset_y > -510

        task.end()
        clock.advance(1.0)
        scheduler.tick()
        assert scheduler.task_wrappers == []
