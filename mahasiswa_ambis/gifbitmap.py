"""Palette-indexed bitmaps used while decoding GIF images."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class IndexedBitmap:
    """A ``w`` by ``h`` grid of 8-bit palette indices stored row by row."""

    w: int
    h: int
    data: bytearray | None = None

    def __post_init__(self) -> None:
        if self.w < 0 or self.h < 0:
            raise ValueError(f"invalid bitmap size {self.w}x{self.h}")
        size = self.w * self.h
        if self.data is None:
            self.data = bytearray(size)
        else:
            self.data = bytearray(self.data)
            if len(self.data) != size:
                raise ValueError(
                    f"bitmap data holds {len(self.data)} bytes, expected {size}"
                )

    def blit(
        self,
        target: IndexedBitmap,
        xf: int,
        yf: int,
        xt: int,
        yt: int,
        w: int,
        h: int,
    ) -> None:
        """Copy a ``w`` by ``h`` block from (xf, yf) here to (xt, yt) in ``target``.

        The block is clipped against both bitmaps; overlapping copies within
        one bitmap behave as if the source were copied out first.
        """
        if w <= 0 or h <= 0:
            return

        # Source clipping.
        if xf < 0:
            w += xf
            xt -= xf
            xf = 0
        if yf < 0:
            h += yf
            yt -= yf
            yf = 0
        w = min(w, self.w - xf)
        h = min(h, self.h - yf)

        # Destination clipping.
        if xt < 0:
            w += xt
            xf -= xt
            xt = 0
        if yt < 0:
            h += yt
            yf -= yt
            yt = 0
        w = min(w, target.w - xt)
        h = min(h, target.h - yt)

        if w <= 0 or h <= 0:
            return

        rows = [
            bytes(self.data[(yf + row) * self.w + xf:(yf + row) * self.w + xf + w])
            for row in range(h)
        ]
        for row, chunk in enumerate(rows):
            start = (yt + row) * target.w + xt
            target.data[start:start + w] = chunk