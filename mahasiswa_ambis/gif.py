"""Reader for GIF87a and GIF89a files into indexed frames."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import BinaryIO

from .gifbitmap import IndexedBitmap
from .lzw import DecodeError, lzw_decode

RGB = tuple[int, int, int]

DISPOSE_NONE = 0
DISPOSE_KEEP = 1
DISPOSE_BACKGROUND = 2
DISPOSE_PREVIOUS = 3


class GifError(ValueError):
    """Raised when a GIF file is malformed or truncated."""


@dataclass
class Frame:
    """One image of an animation with its graphic-control settings."""

    bitmap: IndexedBitmap
    palette: list[RGB] = field(default_factory=list)
    xoff: int = 0
    yoff: int = 0
    duration: int = 0  # in hundredths of a second
    disposal_method: int = DISPOSE_NONE
    transparent_index: int = -1


@dataclass
class GifAnimation:
    """A decoded GIF: logical screen size, global palette and frames."""

    width: int
    height: int
    palette: list[RGB] = field(default_factory=list)
    background_index: int = 0
    loop: int = 0
    frames: list[Frame] = field(default_factory=list)


def _byte(stream: BinaryIO) -> int:
    data = stream.read(1)
    if not data:
        raise GifError("unexpected end of GIF data")
    return data[0]


def _u16(stream: BinaryIO) -> int:
    data = stream.read(2)
    if len(data) != 2:
        raise GifError("unexpected end of GIF data")
    return int.from_bytes(data, "little")


def _palette_size(flags: int) -> int:
    return 1 << ((flags & 7) + 1) if flags & 0x80 else 0


def read_palette(stream: BinaryIO, count: int) -> list[RGB]:
    """Read ``count`` RGB triples."""
    data = stream.read(count * 3)
    if len(data) != count * 3:
        raise GifError("truncated colour table")
    return [tuple(data[start:start + 3]) for start in range(0, len(data), 3)]


def deinterlace(bitmap: IndexedBitmap) -> None:
    """Reorder rows stored in GIF interlaced order into top-to-bottom order."""
    ordered = IndexedBitmap(bitmap.w, bitmap.h)
    source_row = 0
    for start, step in ((0, 8), (4, 8), (2, 4), (1, 2)):
        for y in range(start, bitmap.h, step):
            bitmap.blit(ordered, 0, source_row, 0, y, bitmap.w, 1)
            source_row += 1
    ordered.blit(bitmap, 0, 0, 0, 0, bitmap.w, bitmap.h)


def _read_extension(stream: BinaryIO, gif: GifAnimation, control: dict) -> None:
    kind = _byte(stream)
    size = _byte(stream)
    if kind == 0xF9:
        if size != 4:
            raise GifError("graphic control extension must have size 4")
        flags = _byte(stream)
        control["disposal_method"] = (flags >> 2) & 7
        control["duration"] = _u16(stream)
        if flags & 1:
            control["transparent_index"] = _byte(stream)
        else:
            stream.read(1)
            control["transparent_index"] = -1
        size = _byte(stream)
    elif kind == 0xFF and size == 11:
        name = stream.read(11)
        size = _byte(stream)
        if name == b"NETSCAPE2.0" and size == 3:
            sub_id = _byte(stream)
            gif.loop = _u16(stream)
            if sub_id != 1:
                gif.loop = 0
            size = _byte(stream)
    while size:
        stream.read(size)
        size = _byte(stream)


def _read_image(stream: BinaryIO, control: dict) -> Frame:
    xoff = _u16(stream)
    yoff = _u16(stream)
    width = _u16(stream)
    height = _u16(stream)
    bitmap = IndexedBitmap(width, height)
    flags = _byte(stream)
    palette = read_palette(stream, _palette_size(flags))
    try:
        lzw_decode(stream, bitmap)
    except DecodeError as exc:
        raise GifError(str(exc)) from exc
    if flags & 0x40:
        deinterlace(bitmap)
    return Frame(bitmap=bitmap, palette=palette, xoff=xoff, yoff=yoff, **control)


def _fresh_control() -> dict:
    return {"duration": 0, "disposal_method": DISPOSE_NONE, "transparent_index": -1}


def load_raw(stream: BinaryIO) -> GifAnimation:
    """Parse a GIF from ``stream`` up to its trailer."""
    if stream.read(6) not in (b"GIF87a", b"GIF89a"):
        raise GifError("not a GIF file")

    width = _u16(stream)
    height = _u16(stream)
    flags = _byte(stream)
    background_index = _byte(stream)
    stream.read(1)  # pixel aspect ratio
    gif = GifAnimation(
        width=width,
        height=height,
        palette=read_palette(stream, _palette_size(flags)),
        background_index=background_index,
    )

    control = _fresh_control()
    while True:
        block = _byte(stream)
        if block == 0x2C:
            gif.frames.append(_read_image(stream, control))
            control = _fresh_control()
        elif block == 0x21:
            _read_extension(stream, gif, control)
        elif block == 0x3B:
            return gif