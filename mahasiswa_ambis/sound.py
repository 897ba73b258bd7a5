"""Game sound effects and music, played through the pygame mixer when available."""

from __future__ import annotations

import os
from enum import Enum
from os import PathLike
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

MIXER_CHANNELS = 8


class Sound(Enum):
    """Every sound of the game, named by the file it is loaded from."""

    MENU = "sound_menu.wav"
    JUMP = "jump.ogg"
    EAT = "eat.ogg"
    COIN = "coin.ogg"
    CAT = "cat.ogg"
    BOOK = "book.ogg"
    GAMEOVER = "GameOver.ogg"
    COMPLETE = "StageComplete.ogg"

    @property
    def filename(self) -> str:
        return self.value

    @property
    def looped(self) -> bool:
        """Whether the sound repeats until it is stopped."""
        return self is Sound.MENU

    @property
    def instanced(self) -> bool:
        """Whether the sound has a single voice that is not restarted while busy."""
        return self in _INSTANCED


_INSTANCED = frozenset(
    {Sound.MENU, Sound.EAT, Sound.BOOK, Sound.GAMEOVER, Sound.COMPLETE}
)


class SoundManager:
    """Plays and stops the game's sounds.

    With ``audio=False``, or when no audio device can be opened, sounds are
    tracked but nothing is heard.
    """

    def __init__(self, asset_dir: str | PathLike = ".", audio: bool = True) -> None:
        self.asset_dir = Path(asset_dir)
        self.history: list[Sound] = []
        self._looping: set[Sound] = set()
        self._channels: dict[Sound, pygame.mixer.Channel] = {}
        self._samples: dict[Sound, pygame.mixer.Sound] = (
            self._load_samples() if audio else {}
        )

    def _load_samples(self) -> dict[Sound, pygame.mixer.Sound]:
        try:
            pygame.mixer.init()
            pygame.mixer.set_num_channels(MIXER_CHANNELS)
        except pygame.error:
            return {}
        samples = {}
        for sound in Sound:
            try:
                samples[sound] = pygame.mixer.Sound(str(self.asset_dir / sound.filename))
            except (pygame.error, FileNotFoundError):
                continue
        return samples

    def _busy(self, sound: Sound) -> bool:
        if sound in self._looping:
            return True
        channel = self._channels.get(sound)
        return channel is not None and channel.get_busy()

    @property
    def playing(self) -> frozenset[Sound]:
        """The single-voice sounds that are currently running."""
        return frozenset(sound for sound in Sound if self._busy(sound))

    def play(self, sound: Sound) -> None:
        """Start ``sound``; a single-voice sound already running is left alone."""
        if sound.instanced and self._busy(sound):
            return
        self.history.append(sound)
        if sound.looped:
            self._looping.add(sound)
        sample = self._samples.get(sound)
        if sample is None:
            return
        channel = sample.play(loops=-1 if sound.looped else 0)
        if sound.instanced and channel is not None:
            self._channels[sound] = channel

    def stop(self, sound: Sound) -> None:
        """Stop a single-voice sound if it is running."""
        self._looping.discard(sound)
        channel = self._channels.pop(sound, None)
        if channel is not None:
            channel.stop()