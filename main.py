"""Entry point: pygame window (or a headless run) around the game engine."""

from __future__ import annotations

import argparse
import logging
import os
from dataclasses import dataclass

import pygame

from pong.config import FIELD_HEIGHT, FIELD_WIDTH, FPS, FRAME_INTERVAL
from pong.game_engine import GameEngine
from pong.sound import SoundManager
from pong.state import AudioCues

logger = logging.getLogger(__name__)

DEFAULT_HEADLESS_FRAMES = 600


@dataclass
class RunConfig:
    headless: bool
    frames: int
    mute: bool
    fps: int
    log_level: str


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Pong")
    parser.add_argument("--mute", action="store_true", help="Disable button sound and music")
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Run without a window: start a game and step it --frames times",
    )
    parser.add_argument(
        "--frames",
        type=int,
        default=None,
        help=f"Headless: number of frames to run (default: {DEFAULT_HEADLESS_FRAMES})",
    )
    parser.add_argument("--fps", type=int, default=FPS, help="Render frame rate cap")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging level",
    )
    return parser


def _parse_args(args: argparse.Namespace) -> RunConfig:
    if args.frames is not None and not args.headless:
        raise ValueError("--frames requires --headless")
    frames = DEFAULT_HEADLESS_FRAMES if args.frames is None else args.frames
    if frames < 0:
        raise ValueError(f"--frames must be non-negative, got {frames}")
    if args.fps <= 0:
        raise ValueError(f"--fps must be positive, got {args.fps}")

    return RunConfig(
        headless=args.headless,
        frames=frames,
        mute=args.mute,
        fps=args.fps,
        log_level=args.log_level,
    )


def _make_cues(mute: bool) -> AudioCues:
    if mute:
        return AudioCues()
    sfx = SoundManager(base_dir=os.path.dirname(os.path.abspath(__file__)))
    return sfx.cues()


def run_headless(frames: int) -> GameEngine:
    engine = GameEngine(cues=AudioCues())
    engine.dispatch("start")
    for _ in range(frames):
        engine.update(FRAME_INTERVAL)
    snap = engine.snapshot()
    logger.info(
        f"Ran {snap.tick} steps: ball at ({snap.ball.x:.1f}, {snap.ball.y:.1f}) "
        f"moving ({snap.ball.dx:+.0f}, {snap.ball.dy:+.0f})"
    )
    return engine


def run_window(config: RunConfig) -> None:
    # Initialize pygame/Start application
    pygame.init()
    screen = pygame.display.set_mode((FIELD_WIDTH, FIELD_HEIGHT))
    pygame.display.set_caption("Pong")

    clock = pygame.time.Clock()
    engine = GameEngine(FIELD_WIDTH, FIELD_HEIGHT, cues=_make_cues(config.mute))

    running = True
    while running:
        dt = clock.tick(config.fps) / 1000.0  # seconds since last frame

        # Handle input & update game state
        engine.handle_input(pygame.event.get())
        engine.update(dt)

        # Render
        engine.render(screen)
        pygame.display.flip()

        if engine.request_quit:
            running = False

    pygame.quit()


def main(argv: list[str] | None = None) -> None:
    config = _parse_args(_build_parser().parse_args(argv))
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if config.headless:
        run_headless(config.frames)
    else:
        run_window(config)


if __name__ == "__main__":
    main()
