"""Simulation state: one ball, two static paddles, and read-only snapshots."""

from __future__ import annotations

from dataclasses import dataclass

from .ball import Ball, step
from .paddle import Paddle


@dataclass(frozen=True)
class BallSnapshot:
    x: float
    y: float
    dx: float
    dy: float


@dataclass(frozen=True)
class PaddleSnapshot:
    width: float
    height: float
    position: float


@dataclass(frozen=True)
class Snapshot:
    """Detached copy of the simulation taken between steps."""

    ball: BallSnapshot
    left: PaddleSnapshot
    right: PaddleSnapshot
    tick: int


def _paddle_snapshot(paddle: Paddle) -> PaddleSnapshot:
    return PaddleSnapshot(paddle.width, paddle.height, paddle.position)


class Simulation:
    def __init__(self, ball: Ball | None = None, left: Paddle | None = None, right: Paddle | None = None):
        self.ball = ball if ball is not None else Ball()
        self.left = left if left is not None else Paddle()
        self.right = right if right is not None else Paddle()
        self.tick = 0

    def step(self) -> Ball:
        self.tick += 1
        return step(self.ball, self.left, self.right)

    def snapshot(self) -> Snapshot:
        b = self.ball
        return Snapshot(
            ball=BallSnapshot(b.x, b.y, b.dx, b.dy),
            left=_paddle_snapshot(self.left),
            right=_paddle_snapshot(self.right),
            tick=self.tick,
        )
