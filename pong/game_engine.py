"""Game engine: routes input into the state machine and drives physics and rendering."""

from __future__ import annotations

import logging

import pygame

from .config import FIELD_HEIGHT, FIELD_WIDTH, FRAME_INTERVAL
from .game_loop import FrameLoop
from .simulation import Simulation
from .state import AudioCues, Event, GameState, GameStateMachine
from .view import Renderer, view_model

logger = logging.getLogger(__name__)


# ----------------- Game Engine -----------------
class GameEngine:
    def __init__(self, width=FIELD_WIDTH, height=FIELD_HEIGHT, cues: AudioCues | None = None, interval=FRAME_INTERVAL):
        self.width = width
        self.height = height

        # Entities
        self.simulation = Simulation()

        # State & physics loop
        self.machine = GameStateMachine(cues)
        self.loop = FrameLoop(self.simulation.step, interval)
        self.machine.add_listener(self._on_state_change)

        # UI (built on first render so headless runs never touch fonts)
        self.renderer = None
        self._mouse_pos = None

        self.request_quit = False

    @property
    def state(self) -> GameState:
        return self.machine.state

    def _on_state_change(self, old, new):
        if new is GameState.PLAYING:
            self.loop.start()
        elif old is GameState.PLAYING:
            self.loop.cancel()

    def dispatch(self, event) -> GameState:
        return self.machine.transition(event)

    def snapshot(self):
        return self.simulation.snapshot()

    # ---------- Input ----------
    def _key_event(self, key):
        if key in (pygame.K_RETURN, pygame.K_SPACE):
            return Event.START if self.state is GameState.TITLE_SCREEN else Event.RESUME
        if key == pygame.K_p:
            return Event.PAUSE
        if key in (pygame.K_q, pygame.K_BACKSPACE):
            return Event.QUIT
        return None

    def handle_input(self, events):
        for event in events:
            if event.type == pygame.QUIT:
                self.request_quit = True
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.request_quit = True
                    continue
                game_event = self._key_event(event.key)
                if game_event is not None:
                    self.dispatch(game_event)
            elif event.type == pygame.MOUSEMOTION:
                self._mouse_pos = event.pos
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if self.renderer is None:
                    continue
                game_event = self.renderer.button_at(self._current_view(), event.pos)
                if game_event is not None:
                    self.dispatch(game_event)

    # ---------- Update ----------
    def update(self, dt: float) -> int:
        return self.loop.advance(dt)

    # ---------- Render ----------
    def _current_view(self):
        snapshot = self.snapshot() if self.state is GameState.PLAYING else None
        return view_model(self.state, snapshot)

    def render(self, screen):
        if self.renderer is None:
            self.renderer = Renderer(self.width, self.height)
        self.renderer.render(screen, self._current_view(), self._mouse_pos)
