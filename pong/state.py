"""Title/playing/paused state machine and the audio cues it fires."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable

logger = logging.getLogger(__name__)


class GameState(Enum):
    TITLE_SCREEN = "title_screen"
    PLAYING = "playing"
    PAUSED = "paused"


class Event(Enum):
    START = "start"
    PAUSE = "pause"
    RESUME = "resume"
    QUIT = "quit"


def _noop() -> None:
    return None


@dataclass
class AudioCues:
    """Zero-argument callbacks fired on transitions. Results are ignored."""

    play_button_sound: Callable[[], object] = _noop
    start_music: Callable[[], object] = _noop
    stop_music: Callable[[], object] = _noop


# (from, event) -> (to, play button sound first, music cue after the change)
_TRANSITIONS = {
    (GameState.TITLE_SCREEN, Event.START): (GameState.PLAYING, True, "start_music"),
    (GameState.PLAYING, Event.PAUSE): (GameState.PAUSED, False, "stop_music"),
    (GameState.PAUSED, Event.RESUME): (GameState.PLAYING, True, "start_music"),
    (GameState.PLAYING, Event.QUIT): (GameState.TITLE_SCREEN, True, "stop_music"),
    (GameState.PAUSED, Event.QUIT): (GameState.TITLE_SCREEN, True, "stop_music"),
}

StateListener = Callable[[GameState, GameState], None]


class GameStateMachine:
    def __init__(self, cues: AudioCues | None = None):
        self.cues = cues if cues is not None else AudioCues()
        self.state = GameState.TITLE_SCREEN
        self._listeners: list[StateListener] = []

    def add_listener(self, listener: StateListener) -> None:
        self._listeners.append(listener)

    def can(self, event: Event | str) -> bool:
        return (self.state, Event(event)) in _TRANSITIONS

    def transition(self, event: Event | str) -> GameState:
        """Apply ``event`` and return the resulting state.

        Pairs missing from the transition table leave the state untouched
        and fire nothing.
        """
        event = Event(event)
        entry = _TRANSITIONS.get((self.state, event))
        if entry is None:
            logger.debug(f"Ignoring {event.value} while {self.state.value}")
            return self.state

        target, button_sound, music_cue = entry
        if button_sound:
            self.cues.play_button_sound()

        previous = self.state
        self.state = target
        logger.info(f"{previous.value} -> {target.value} ({event.value})")
        for listener in list(self._listeners):
            listener(previous, target)

        getattr(self.cues, music_cue)()
        return self.state

    def start(self) -> GameState:
        return self.transition(Event.START)

    def pause(self) -> GameState:
        return self.transition(Event.PAUSE)

    def resume(self) -> GameState:
        return self.transition(Event.RESUME)

    def quit(self) -> GameState:
        return self.transition(Event.QUIT)
