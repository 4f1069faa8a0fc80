"""Tests for the simulated millisecond scheduler."""

import pytest

from arcade_brawl.core.scheduler import Scheduler


class TestOneShotTimers:
    """call_later behaviour."""

    def test_fires_when_due(self, scheduler):
        fired = []
        scheduler.call_later(100, lambda: fired.append(scheduler.now))

        scheduler.advance(99)
        assert fired == []

        scheduler.advance(1)
        assert fired == [100]

    def test_cancelled_timer_never_fires(self, scheduler):
        fired = []
        handle = scheduler.call_later(50, lambda: fired.append(True))
        handle.cancel()

        scheduler.advance(100)
        assert fired == []
        assert not handle.active

    def test_same_instant_fires_in_scheduling_order(self, scheduler):
        order = []
        scheduler.call_later(10, lambda: order.append('a'))
        scheduler.call_later(10, lambda: order.append('b'))
        scheduler.call_later(5, lambda: order.append('c'))

        scheduler.advance(10)
        assert order == ['c', 'a', 'b']

    def test_timer_scheduled_inside_callback(self, scheduler):
        fired = []
        scheduler.call_later(10, lambda: scheduler.call_later(
            10, lambda: fired.append(scheduler.now)))

        scheduler.advance(25)
        assert fired == [20]
        assert scheduler.now == 25


class TestPeriodicTasks:
    """add_periodic ordering and cadence."""

    def test_runs_every_period(self, scheduler):
        runs = []
        scheduler.add_periodic('tick', 50, lambda: runs.append(scheduler.now))

        scheduler.advance(200)
        assert runs == [50, 100, 150, 200]

    def test_registration_order_at_same_instant(self, scheduler):
        order = []
        scheduler.add_periodic('first', 100, lambda: order.append('first'))
        scheduler.add_periodic('second', 100, lambda: order.append('second'))
        scheduler.add_periodic('third', 50, lambda: order.append('third'))

        scheduler.advance(100)
        assert order == ['third', 'first', 'second', 'third']

    def test_one_shot_before_periodic_at_same_instant(self, scheduler):
        order = []
        scheduler.add_periodic('task', 100, lambda: order.append('task'))
        scheduler.call_later(100, lambda: order.append('timer'))

        scheduler.advance(100)
        assert order == ['timer', 'task']

    def test_non_positive_period_rejected(self, scheduler):
        with pytest.raises(ValueError):
            scheduler.add_periodic('bad', 0, lambda: None)

        task = scheduler.add_periodic('ok', 10, lambda: None)
        with pytest.raises(ValueError):
            task.set_period(-5)

    def test_cancelled_task_stops(self, scheduler):
        runs = []
        task = scheduler.add_periodic('tick', 10, lambda: runs.append(1))

        scheduler.advance(30)
        task.cancel()
        scheduler.advance(30)
        assert len(runs) == 3


class TestPauseAndStop:
    """pause freezes the clock, stop ends it."""

    def test_pause_freezes_clock(self, scheduler):
        fired = []
        scheduler.call_later(100, lambda: fired.append(scheduler.now))

        scheduler.advance(60)
        scheduler.pause()
        scheduler.advance(500)
        assert scheduler.now == 60
        assert fired == []

        scheduler.resume()
        scheduler.advance(40)
        assert fired == [100]

    def test_no_catch_up_after_resume(self, scheduler):
        runs = []
        scheduler.add_periodic('tick', 50, lambda: runs.append(scheduler.now))

        scheduler.pause()
        scheduler.advance(1000)
        scheduler.resume()
        scheduler.advance(50)
        assert runs == [50]

    def test_stop_drops_everything(self, scheduler):
        fired = []
        scheduler.call_later(10, lambda: fired.append('timer'))
        scheduler.add_periodic('tick', 5, lambda: fired.append('tick'))

        scheduler.stop()
        scheduler.advance(100)
        late = scheduler.call_later(1, lambda: fired.append('late'))
        scheduler.advance(100)

        assert fired == []
        assert late.cancelled
        assert scheduler.pending() == 0

    def test_stop_inside_callback_halts_advance(self, scheduler):
        fired = []
        scheduler.call_later(10, scheduler.stop)
        scheduler.call_later(20, lambda: fired.append('after'))

        scheduler.advance(100)
        assert fired == []
        assert scheduler.now == 10
        assert scheduler.is_stopped


def test_fresh_scheduler_starts_at_zero():
    scheduler = Scheduler()
    assert scheduler.now == 0
    assert not scheduler.is_paused
    assert scheduler.tasks == []
