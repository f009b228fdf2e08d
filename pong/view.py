"""Screen descriptions per game state and the pygame renderer that draws them."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

from .config import BALL_SIZE, BLACK, BUTTON_FILL, BUTTON_HOVER, GRAY, WHITE
from .simulation import Snapshot
from .state import Event, GameState

BUTTON_W, BUTTON_H = 160, 44
BUTTON_GAP = 16


@dataclass(frozen=True)
class Button:
    label: str
    event: Event


@dataclass(frozen=True)
class ViewModel:
    title: str
    title_size: int
    background: tuple
    buttons: tuple
    field: Snapshot | None = None


def view_model(state: GameState, snapshot: Snapshot | None = None) -> ViewModel:
    """Map a game state (and the latest snapshot while playing) to a screen."""
    if state is GameState.TITLE_SCREEN:
        return ViewModel("Pong Game", 32, BLACK, (Button("Start Game", Event.START),))
    if state is GameState.PLAYING:
        return ViewModel(
            "Pong Game is Playing",
            24,
            GRAY,
            (Button("Pause", Event.PAUSE), Button("Quit", Event.QUIT)),
            field=snapshot,
        )
    return ViewModel(
        "Game Paused", 24, GRAY, (Button("Resume", Event.RESUME), Button("Quit", Event.QUIT))
    )


class Renderer:
    """Draws a ViewModel onto a pygame surface and hit-tests its buttons."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        if not pygame.font.get_init():
            pygame.font.init()
        self._fonts = {}
        self.button_font = pygame.font.SysFont("Arial", 22)

    def _font(self, size: int):
        if size not in self._fonts:
            self._fonts[size] = pygame.font.SysFont("Arial", size)
        return self._fonts[size]

    def _title_y(self, view: ViewModel) -> int:
        # Playing keeps the header at the top so the field stays clear
        return 40 if view.field is not None else self.height // 2 - 60

    def button_rects(self, view: ViewModel) -> list:
        n = len(view.buttons)
        total = n * BUTTON_W + (n - 1) * BUTTON_GAP
        left = (self.width - total) // 2
        top = self._title_y(view) + 36
        return [
            (pygame.Rect(left + i * (BUTTON_W + BUTTON_GAP), top, BUTTON_W, BUTTON_H), b)
            for i, b in enumerate(view.buttons)
        ]

    def button_at(self, view: ViewModel, pos) -> Event | None:
        for rect, button in self.button_rects(view):
            if rect.collidepoint(pos):
                return button.event
        return None

    def render(self, screen, view: ViewModel, mouse_pos=None):
        screen.fill(view.background)

        # Field & entities
        if view.field is not None:
            snap = view.field
            left, right, ball = snap.left, snap.right, snap.ball
            pygame.draw.rect(screen, WHITE, (0, int(left.position), int(left.width), int(left.height)))
            pygame.draw.rect(
                screen,
                WHITE,
                (int(self.width - right.width), int(right.position), int(right.width), int(right.height)),
            )
            pygame.draw.rect(screen, WHITE, (int(ball.x), int(ball.y), BALL_SIZE, BALL_SIZE))

        # Header
        title = self._font(view.title_size).render(view.title, True, WHITE)
        screen.blit(title, title.get_rect(center=(self.width // 2, self._title_y(view))))

        # Buttons
        for rect, button in self.button_rects(view):
            hover = mouse_pos is not None and rect.collidepoint(mouse_pos)
            pygame.draw.rect(screen, BUTTON_HOVER if hover else BUTTON_FILL, rect, border_radius=22)
            label = self.button_font.render(button.label, True, WHITE)
            screen.blit(label, label.get_rect(center=rect.center))
