from __future__ import annotations

import pytest

from pong.state import AudioCues, Event, GameState, GameStateMachine


class _Recorder:
    def __init__(self) -> None:
        self.calls: list[str] = []

    def cues(self) -> AudioCues:
        return AudioCues(
            play_button_sound=lambda: self.calls.append("button"),
            start_music=lambda: self.calls.append("music_on"),
            stop_music=lambda: self.calls.append("music_off"),
        )


def _machine_in(state: GameState) -> tuple[GameStateMachine, _Recorder]:
    rec = _Recorder()
    machine = GameStateMachine(rec.cues())
    if state is not GameState.TITLE_SCREEN:
        machine.start()
    if state is GameState.PAUSED:
        machine.pause()
    rec.calls.clear()
    return machine, rec


def test_initial_state_is_title_screen() -> None:
    assert GameStateMachine().state is GameState.TITLE_SCREEN


@pytest.mark.parametrize(
    "state, event, expected",
    [
        (GameState.TITLE_SCREEN, Event.START, GameState.PLAYING),
        (GameState.PLAYING, Event.PAUSE, GameState.PAUSED),
        (GameState.PAUSED, Event.RESUME, GameState.PLAYING),
        (GameState.PLAYING, Event.QUIT, GameState.TITLE_SCREEN),
        (GameState.PAUSED, Event.QUIT, GameState.TITLE_SCREEN),
    ],
)
def test_valid_transitions(state: GameState, event: Event, expected: GameState) -> None:
    machine, _ = _machine_in(state)
    assert machine.transition(event) is expected
    assert machine.state is expected


@pytest.mark.parametrize(
    "state, event",
    [
        (GameState.TITLE_SCREEN, Event.PAUSE),
        (GameState.TITLE_SCREEN, Event.RESUME),
        (GameState.TITLE_SCREEN, Event.QUIT),
        (GameState.PLAYING, Event.START),
        (GameState.PLAYING, Event.RESUME),
        (GameState.PAUSED, Event.START),
        (GameState.PAUSED, Event.PAUSE),
    ],
)
def test_other_events_are_silent_no_ops(state: GameState, event: Event) -> None:
    machine, rec = _machine_in(state)
    assert machine.can(event) is False
    assert machine.transition(event) is state
    assert rec.calls == []


@pytest.mark.parametrize(
    "state, action, expected",
    [
        (GameState.TITLE_SCREEN, "start", ["button", "music_on"]),
        (GameState.PLAYING, "pause", ["music_off"]),
        (GameState.PAUSED, "resume", ["button", "music_on"]),
        (GameState.PLAYING, "quit", ["button", "music_off"]),
        (GameState.PAUSED, "quit", ["button", "music_off"]),
    ],
)
def test_cues_fire_in_order(state: GameState, action: str, expected: list[str]) -> None:
    machine, rec = _machine_in(state)
    getattr(machine, action)()
    assert rec.calls == expected


def test_state_changes_between_button_sound_and_music() -> None:
    seen: list[tuple[str, GameState]] = []
    machine = GameStateMachine()
    machine.cues = AudioCues(
        play_button_sound=lambda: seen.append(("button", machine.state)),
        start_music=lambda: seen.append(("music_on", machine.state)),
    )
    machine.start()
    assert seen == [("button", GameState.TITLE_SCREEN), ("music_on", GameState.PLAYING)]


def test_pause_twice_matches_pause_once() -> None:
    machine, rec = _machine_in(GameState.PLAYING)
    machine.pause()
    once = (machine.state, list(rec.calls))
    machine.pause()
    assert (machine.state, rec.calls) == once


def test_cue_return_values_are_ignored() -> None:
    machine = GameStateMachine(AudioCues(play_button_sound=lambda: "ignored", start_music=lambda: 42))
    assert machine.start() is GameState.PLAYING


def test_transition_accepts_event_names() -> None:
    machine = GameStateMachine()
    assert machine.transition("start") is GameState.PLAYING
    assert machine.transition("pause") is GameState.PAUSED


def test_unknown_event_name_raises() -> None:
    with pytest.raises(ValueError):
        GameStateMachine().transition("jump")


def test_listeners_see_effective_transitions_only() -> None:
    changes: list[tuple[GameState, GameState]] = []
    machine = GameStateMachine()
    machine.add_listener(lambda old, new: changes.append((old, new)))
    machine.pause()
    machine.start()
    machine.start()
    machine.quit()
    assert changes == [
        (GameState.TITLE_SCREEN, GameState.PLAYING),
        (GameState.PLAYING, GameState.TITLE_SCREEN),
    ]
