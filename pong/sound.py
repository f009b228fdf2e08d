from __future__ import annotations

import logging
import math
import os
import struct
import wave

import pygame

from .state import AudioCues

logger = logging.getLogger(__name__)

SAMPLE_RATE = 22050
# Looping background phrase: (frequency Hz, duration ms)
MUSIC_NOTES = [(262, 180), (330, 180), (392, 180), (523, 240), (392, 180), (330, 180)]


class SoundManager:
    """
    Button click and background music. Generates tiny .wav files on first run
    into <base_dir>/assets and loads them. Without a usable mixer every call
    is a no-op.
    """
    def __init__(self, base_dir: str):
        self.base_dir = base_dir
        self.assets_dir = os.path.join(self.base_dir, "assets")
        self._music_channel = None

        # Paths
        self.button_path = os.path.join(self.assets_dir, "button.wav")
        self.music_path = os.path.join(self.assets_dir, "music.wav")

        # Generate if missing; an unwritable base_dir means no audio at all
        try:
            os.makedirs(self.assets_dir, exist_ok=True)
            if not os.path.exists(self.button_path):
                self._generate_tones(self.button_path, [(880, 60)], volume=0.40)
            if not os.path.exists(self.music_path):
                self._generate_tones(self.music_path, MUSIC_NOTES, volume=0.25)
        except OSError as e:
            logger.warning(f"Audio disabled, could not write sound assets to '{self.assets_dir}': {e}")
            self.snd_button = None
            self.snd_music = None
            return

        # Safe mixer init
        if not pygame.mixer.get_init():
            try:
                pygame.mixer.init()
            except pygame.error as e:
                logger.warning(f"Audio disabled, mixer unavailable: {e}")

        # Load sounds (None if mixer unavailable)
        self.snd_button = self._load(self.button_path)
        self.snd_music = self._load(self.music_path)

    def _generate_tones(self, path, notes, volume=0.5, sample_rate=SAMPLE_RATE):
        with wave.open(path, "w") as wf:
            wf.setnchannels(1)      # mono
            wf.setsampwidth(2)      # 16-bit
            wf.setframerate(sample_rate)
            for freq, duration_ms in notes:
                n_samples = int(sample_rate * (duration_ms / 1000.0))
                frames = bytearray()
                for i in range(n_samples):
                    # sine with linear fade-out per note
                    t = i / sample_rate
                    amp = volume * (1.0 - i / n_samples)
                    sample = int(amp * 32767 * math.sin(2 * math.pi * freq * t))
                    frames += struct.pack("<h", sample)
                wf.writeframes(bytes(frames))
        logger.debug(f"Generated {path}")

    def _load(self, path):
        if not pygame.mixer.get_init():
            return None
        try:
            return pygame.mixer.Sound(path)
        except (pygame.error, FileNotFoundError) as e:
            logger.warning(f"Could not load sound '{path}': {e}")
            return None

    @property
    def music_playing(self) -> bool:
        return self._music_channel is not None

    def play_button(self) -> None:
        if self.snd_button is not None:
            self.snd_button.play()

    def start_music(self) -> None:
        if self.snd_music is None or self._music_channel is not None:
            return
        self._music_channel = self.snd_music.play(loops=-1)

    def stop_music(self) -> None:
        if self._music_channel is None:
            return
        self._music_channel.stop()
        self._music_channel = None

    def cues(self) -> AudioCues:
        return AudioCues(
            play_button_sound=self.play_button,
            start_music=self.start_music,
            stop_music=self.stop_music,
        )
