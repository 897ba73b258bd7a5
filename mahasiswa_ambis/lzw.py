"""Decoder for the variable-width LZW data of GIF image blocks."""

from __future__ import annotations

from typing import BinaryIO

from .gifbitmap import IndexedBitmap

MAX_BITS = 12
MAX_CODES = 1 << MAX_BITS


class DecodeError(ValueError):
    """Raised when GIF image data cannot be decoded."""


class _CodeReader:
    """Reads least-significant-bit-first codes spread over GIF sub-blocks."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._block = b""
        self._bit = 0

    def _next_block(self) -> None:
        size = self._stream.read(1)
        if not size:
            raise DecodeError("unexpected end of image data")
        if size[0] == 0:
            raise DecodeError("image data ended before the end code")
        block = self._stream.read(size[0])
        if len(block) != size[0]:
            raise DecodeError("truncated image data block")
        self._block = block
        self._bit = 0

    def read(self, width: int) -> int:
        code = 0
        for bit in range(width):
            if self._bit >= len(self._block) * 8:
                self._next_block()
            byte = self._block[self._bit >> 3]
            if (byte >> (self._bit & 7)) & 1:
                code |= 1 << bit
            self._bit += 1
        return code


def lzw_decode(stream: BinaryIO, bitmap: IndexedBitmap) -> None:
    """Decode one image's LZW data from ``stream`` into ``bitmap.data``.

    The stream is left just after the last sub-block the decoder needed.
    """
    first = stream.read(1)
    if not first:
        raise DecodeError("missing LZW minimum code size")
    root_bits = first[0]
    if root_bits >= MAX_BITS:
        raise DecodeError(f"invalid LZW minimum code size {root_bits}")

    prefix = [0] * MAX_CODES
    suffix = list(range(MAX_CODES))
    length = [0] * MAX_CODES

    clear_marker = 1 << root_bits
    end_marker = clear_marker + 1
    n = clear_marker + 2
    bit_size = root_bits + 1

    reader = _CodeReader(stream)
    out = bitmap.data
    out_pos = 0

    prev = reader.read(bit_size)
    while True:
        code = reader.read(bit_size)
        if code == clear_marker:
            bit_size = root_bits + 1
            n = clear_marker + 2
            prev = code
            continue
        if code == end_marker:
            break

        # A code not yet in the table repeats the previous string.
        c = code if code < n else prev

        out_pos += length[c]
        if out_pos >= len(out):
            raise DecodeError("image data overflows the bitmap")
        index = out_pos
        while True:
            out[index] = suffix[c] & 0xFF
            if not length[c]:
                break
            c = prefix[c]
            index -= 1
        out_pos += 1

        if code >= n:
            if out_pos >= len(out):
                raise DecodeError("image data overflows the bitmap")
            out[out_pos] = suffix[c] & 0xFF
            out_pos += 1

        if prev != clear_marker and n < MAX_CODES:
            prefix[n] = prev
            length[n] = length[prev] + 1
            suffix[n] = suffix[c]
            n += 1

        if n == 1 << bit_size and bit_size < MAX_BITS:
            bit_size += 1

        prev = code