"""IPv6 text parsing with '::' compression."""

from __future__ import annotations

import string

from subnetkit.raw import Raw

_MAX_PIECES = 8
_MAX_PIECE_SIZE = 4
_HEX_DIGITS = frozenset(string.hexdigits)


def parse6(text: str) -> Raw:
    """Parse colon-separated hexadecimal groups; raise ValueError if malformed."""

    def fail() -> ValueError:
        return ValueError(f"malformed IPv6 address: {text!r}")

    if not text:
        raise fail()

    pieces = [0] * _MAX_PIECES
    index = 0
    compress: int | None = None
    pos = 0
    end = len(text)

    if text[0] == ":":
        if end == 1 or text[1] != ":":
            raise fail()
        pos = 2
        index += 1
        compress = index

    while pos != end:
        if index == _MAX_PIECES:
            raise fail()

        if text[pos] == ":":
            if compress is not None:
                raise fail()
            pos += 1
            index += 1
            compress = index
            continue

        value = 0
        length = 0
        while length < _MAX_PIECE_SIZE and pos != end and text[pos] in _HEX_DIGITS:
            value = value * 16 + int(text[pos], 16)
            pos += 1
            length += 1

        if pos != end:
            if text[pos] != ":":
                raise fail()
            pos += 1
            if pos == end:
                raise fail()

        pieces[index] = value
        index += 1

    if compress is not None:
        swaps = index - compress
        index = _MAX_PIECES - 1
        while index != 0 and swaps > 0:
            other = compress + swaps - 1
            pieces[index], pieces[other] = pieces[other], pieces[index]
            index -= 1
            swaps -= 1
    elif index != _MAX_PIECES:
        raise fail()

    return Raw.from_ipv6(b"".join(piece.to_bytes(2, "big") for piece in pieces))