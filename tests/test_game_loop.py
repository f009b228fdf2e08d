from __future__ import annotations

import pytest

from pong.game_loop import FrameLoop

INTERVAL = 0.016


class _Counter:
    def __init__(self) -> None:
        self.n = 0

    def __call__(self) -> None:
        self.n += 1


def test_inactive_loop_never_steps() -> None:
    step = _Counter()
    loop = FrameLoop(step, INTERVAL)
    assert loop.advance(1.0) == 0
    assert step.n == 0


def test_one_step_per_completed_interval() -> None:
    step = _Counter()
    loop = FrameLoop(step, INTERVAL)
    loop.start()
    assert loop.advance(0.010) == 0
    assert loop.advance(0.010) == 1
    assert loop.advance(INTERVAL * 3) == 3
    assert step.n == 4


def test_step_size_is_independent_of_elapsed_time() -> None:
    calls: list[int] = []
    loop = FrameLoop(lambda: calls.append(1), INTERVAL)
    loop.start()
    loop.advance(0.5)
    # 0.5s of wall time is just a count of whole intervals
    assert len(calls) == int(0.5 / INTERVAL)


def test_cancel_lets_in_flight_wait_finish_with_one_step() -> None:
    step = _Counter()
    loop = FrameLoop(step, INTERVAL)
    loop.start()
    loop.advance(0.008)
    loop.cancel()
    assert loop.active and loop.cancel_pending
    assert loop.advance(0.5) == 1
    assert step.n == 1
    assert not loop.active
    assert loop.advance(0.5) == 0


def test_restart_while_cancel_pending_keeps_single_task() -> None:
    step = _Counter()
    loop = FrameLoop(step, INTERVAL)
    loop.start()
    loop.advance(0.008)
    loop.cancel()
    loop.start()
    assert not loop.cancel_pending
    assert loop.advance(0.009) == 1
    assert loop.advance(INTERVAL) == 1
    assert loop.active


def test_cancel_on_idle_loop_is_harmless() -> None:
    loop = FrameLoop(_Counter(), INTERVAL)
    loop.cancel()
    assert not loop.active
    assert not loop.cancel_pending


@pytest.mark.parametrize("interval", [0.0, -0.016])
def test_rejects_non_positive_interval(interval: float) -> None:
    with pytest.raises(ValueError):
        FrameLoop(_Counter(), interval)
