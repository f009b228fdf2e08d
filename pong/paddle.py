from __future__ import annotations

from .config import PADDLE_HEIGHT, PADDLE_WIDTH


class Paddle:
    def __init__(self, width: float = PADDLE_WIDTH, height: float = PADDLE_HEIGHT, position: float = 0.0):
        self.width = float(width)
        self.height = float(height)
        # Vertical offset along its side; nothing moves it yet
        self.position = float(position)

    def spans(self, y: float) -> bool:
        return self.position <= y <= self.position + self.height

    def __repr__(self):
        return f"Paddle(width={self.width}, height={self.height}, position={self.position})"
