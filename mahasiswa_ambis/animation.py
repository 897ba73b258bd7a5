"""Rendering of decoded GIF frames into RGBA images, with timed lookup."""

from __future__ import annotations

import math
from dataclasses import dataclass
from os import PathLike
from typing import BinaryIO

from .gif import Frame, GifAnimation, load_raw

_BLACK = (0, 0, 0)


@dataclass(frozen=True)
class RenderedAnimation:
    """Frames as RGBA bytes of ``width * height * 4`` with their durations."""

    width: int
    height: int
    frames: tuple[bytes, ...]
    durations: tuple[int, ...]  # in hundredths of a second
    loop: int = 0

    @property
    def duration(self) -> int:
        """Total length in hundredths of a second."""
        return sum(self.durations)

    def frame(self, index: int) -> bytes:
        return self.frames[index]

    def frame_duration(self, index: int) -> float:
        """Duration of one frame in seconds."""
        return self.durations[index] / 100.0

    def frame_at(self, seconds: float) -> bytes:
        """The frame shown ``seconds`` into the endlessly repeating animation."""
        total = self.duration / 100.0
        if total > 0:
            seconds = math.fmod(seconds, total)
        elapsed = 0.0
        for image, centis in zip(self.frames, self.durations):
            elapsed += centis / 100.0
            if seconds < elapsed:
                return image
        return self.frames[0]


def _draw(canvas: bytearray, gif: GifAnimation, frame: Frame) -> None:
    palette = frame.palette or gif.palette
    bitmap = frame.bitmap
    for row in range(bitmap.h):
        y = frame.yoff + row
        if y >= gif.height:
            break
        line = bitmap.data[row * bitmap.w:(row + 1) * bitmap.w]
        for col, index in enumerate(line):
            x = frame.xoff + col
            if x >= gif.width:
                break
            if index == frame.transparent_index:
                continue
            red, green, blue = palette[index] if index < len(palette) else _BLACK
            offset = (y * gif.width + x) * 4
            canvas[offset:offset + 4] = bytes((red, green, blue, 255))


def render_frames(gif: GifAnimation) -> list[bytes]:
    """Render every frame onto its own transparent canvas of the screen size.

    Each canvas starts cleared, so the previous frame's disposal leaves
    nothing to undo and only the frame's own opaque pixels are drawn.
    """
    rendered = []
    for frame in gif.frames:
        canvas = bytearray(gif.width * gif.height * 4)
        _draw(canvas, gif, frame)
        rendered.append(bytes(canvas))
    return rendered


def load_animation_from(stream: BinaryIO) -> RenderedAnimation:
    """Decode and render a GIF read from ``stream``."""
    gif = load_raw(stream)
    return RenderedAnimation(
        width=gif.width,
        height=gif.height,
        frames=tuple(render_frames(gif)),
        durations=tuple(frame.duration for frame in gif.frames),
        loop=gif.loop,
    )


def load_animation(path: str | PathLike) -> RenderedAnimation:
    """Decode and render the GIF file at ``path``."""
    with open(path, "rb") as stream:
        return load_animation_from(stream)