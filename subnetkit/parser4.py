"""Strict dotted-quad IPv4 parsing."""

from __future__ import annotations

import re

from subnetkit.raw import Raw

_MAX_INPUT_LENGTH = len("xxx.xxx.xxx.xxx")
_OCTET = r"(0|[1-9][0-9]{0,2})"
_PATTERN = re.compile(r"\.".join([_OCTET] * 4))


def parse4(text: str) -> Raw:
    """Parse four decimal octets without leading zeros; raise ValueError otherwise."""
    if len(text) > _MAX_INPUT_LENGTH:
        raise ValueError(f"malformed IPv4 address: {text!r}")
    match = _PATTERN.fullmatch(text)
    if match is None:
        raise ValueError(f"malformed IPv4 address: {text!r}")
    octets = [int(part) for part in match.groups()]
    if any(octet > 255 for octet in octets):
        raise ValueError(f"malformed IPv4 address: {text!r}")
    return Raw.from_ipv4(bytes(octets))