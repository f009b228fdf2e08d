from __future__ import annotations

from .config import (
    BALL_SIZE,
    FIELD_HEIGHT,
    FIELD_WIDTH,
    SPAWN_DX,
    SPAWN_DY,
    SPAWN_X,
    SPAWN_Y,
)
from .paddle import Paddle


class Ball:
    def __init__(self, x=SPAWN_X, y=SPAWN_Y, dx=SPAWN_DX, dy=SPAWN_DY):
        self.x = float(x)
        self.y = float(y)
        # Velocities in units per frame tick
        self.dx = float(dx)
        self.dy = float(dy)
        self.size = BALL_SIZE

    def state(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.dx, self.dy)

    def _wall_bounce(self):
        # Reflect only; the ball may overshoot the wall for a tick
        if self.y <= 0 or self.y >= FIELD_HEIGHT:
            self.dy = -self.dy

    def _paddle_bounce(self, left: Paddle, right: Paddle) -> None:
        if self.x <= left.position + left.width and left.spans(self.y):
            self.dx = -self.dx
        if self.x >= right.position - right.width and right.spans(self.y):
            self.dx = -self.dx

    def out_of_bounds(self) -> bool:
        return self.x <= 0 or self.x >= FIELD_WIDTH

    def advance(self, left: Paddle, right: Paddle) -> None:
        # Move
        self.x += self.dx
        self.y += self.dy

        # Walls
        self._wall_bounce()

        # Paddles
        self._paddle_bounce(left, right)

        # Exit past either side wins over any bounce above
        if self.out_of_bounds():
            self.reset()

    def reset(self) -> None:
        self.x = SPAWN_X
        self.y = SPAWN_Y
        self.dx = SPAWN_DX
        self.dy = SPAWN_DY

    def __repr__(self):
        return f"Ball(x={self.x}, y={self.y}, dx={self.dx}, dy={self.dy})"


def step(ball: Ball, left: Paddle, right: Paddle) -> Ball:
    """Advance ``ball`` by one frame tick against both paddles and return it."""
    ball.advance(left, right)
    return ball
