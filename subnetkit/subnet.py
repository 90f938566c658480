"""IPv4 and IPv6 subnets with containment checks across the mapped space."""

from __future__ import annotations

import enum
import re
import socket

from subnetkit.parser4 import parse4
from subnetkit.parser6 import parse6
from subnetkit.raw import SIZE_IPV6, Raw

IPV6_MAX_PREFIX = 128
IPV4_MAX_PREFIX = 32
IPV4_PREFIX_OFFSET = IPV6_MAX_PREFIX - IPV4_MAX_PREFIX

_MIN_IPV4_LENGTH = len("x.x.x.x")
_MAPPED_MIN_PREFIX = 96
_MAPPED_PREFIX = bytes(10) + b"\xff\xff"
_ULONG_BITS = 64
_ULONG_MAX = (1 << _ULONG_BITS) - 1
_PREFIX_PATTERN = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]+)")


class Protocol(enum.Enum):
    """Address family a subnet was parsed as."""

    NONE = socket.AF_UNSPEC
    IPV4 = socket.AF_INET
    IPV6 = socket.AF_INET6


class Flags(enum.Flag):
    """Families a subnet takes part in; mapped subnets match both."""

    NONE = 0
    IPV4 = 1 << 0
    IPV6 = 1 << 1
    MAPPED = 1 << 2


def _parse_prefix(text: str) -> int:
    """Read a leading unsigned decimal number the way strtoul-style parsing does."""
    match = _PREFIX_PATTERN.match(text)
    if match is None:
        raise ValueError(f"invalid subnet prefix: {text!r}")
    sign, digits = match.groups()
    value = int(digits)
    if value > _ULONG_MAX:
        raise ValueError(f"subnet prefix is out of range: {text!r}")
    if sign == "-":
        value = (-value) % (1 << _ULONG_BITS)
    return value


def _prefix_mask(prefix: int) -> int:
    return ((1 << prefix) - 1) << (IPV6_MAX_PREFIX - prefix)


class Subnet:
    """An address with a prefix length, stored in the IPv6 space."""

    __slots__ = ("_addr", "_mask", "_prefix", "_proto", "_flags")

    def __init__(self, text: str | None = None) -> None:
        self._addr = Raw()
        self._mask = Raw()
        self._prefix = 0
        self._proto = Protocol.NONE
        self._flags = Flags.NONE
        if text is not None:
            self._suggest(text)
            self._parse(self._split(text))

    def empty(self) -> bool:
        """True when nothing has been parsed."""
        return self._proto is Protocol.NONE

    def v4(self) -> bool:
        return self._proto is Protocol.IPV4

    def v6(self) -> bool:
        return self._proto is Protocol.IPV6

    def addr4(self) -> bytes:
        """The IPv4 part of the network address, four packed bytes."""
        return self._addr.addr4()

    def addr6(self) -> bytes:
        """The network address, sixteen packed bytes."""
        return self._addr.addr6()

    def mask4(self) -> bytes:
        return self._mask.addr4()

    def mask6(self) -> bytes:
        return self._mask.addr6()

    def cidr(self) -> int:
        """Prefix length in the subnet's own family."""
        if self._proto is Protocol.IPV6:
            return self._prefix
        return self._prefix - IPV4_PREFIX_OFFSET

    def belongs(self, parent: Subnet) -> bool:
        """True if this subnet lies inside ``parent``."""
        return parent.contains(self)

    def contains(self, child: Subnet) -> bool:
        """True if ``child`` lies inside this subnet."""
        mask = int(self._mask)
        return (
            child._prefix >= self._prefix
            and bool(child._flags & self._flags)
            and (int(child._addr) & mask) == (int(self._addr) & mask)
        )

    def dump(self) -> str:
        """Hex of the address followed by the mask in braces."""
        return f"{self._addr.dump()}{{{self._mask.dump()}}}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Subnet):
            return NotImplemented
        return self._addr == other._addr and self._prefix == other._prefix

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Subnet):
            return NotImplemented
        return self._addr < other._addr or self._prefix < other._prefix

    def __hash__(self) -> int:
        return hash((self._addr, self._prefix))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.dump()!r}, prefix={self._prefix})"

    def _suggest(self, text: str) -> None:
        dot = len(text) >= _MIN_IPV4_LENGTH and "." in text[:4]
        self._proto = Protocol.IPV4 if dot else Protocol.IPV6
        self._prefix = IPV4_MAX_PREFIX if dot else IPV6_MAX_PREFIX

    def _split(self, text: str) -> str:
        address, slash, cidr = text.partition("/")
        if slash:
            self._prefix = _parse_prefix(cidr)
        return address

    def _parse(self, text: str) -> None:
        if self._proto is Protocol.IPV4:
            self._parse4(text)
        else:
            self._parse6(text)

    def _parse4(self, text: str) -> None:
        if self._prefix > IPV4_MAX_PREFIX:
            raise ValueError("subnet prefix for IPv4 is out of range")
        self._addr = parse4(text)
        self._flags |= Flags.IPV4
        self._prefix += IPV4_PREFIX_OFFSET
        self._flags |= Flags.MAPPED
        self._apply_mask()

    def _parse6(self, text: str) -> None:
        if self._prefix > IPV6_MAX_PREFIX:
            raise ValueError("subnet prefix for IPv6 is out of range")
        self._addr = parse6(text)
        self._flags |= Flags.IPV6
        if self._prefix >= _MAPPED_MIN_PREFIX and self._addr.packed[:12] == _MAPPED_PREFIX:
            self._prefix = IPV6_MAX_PREFIX
            self._flags |= Flags.MAPPED
        self._apply_mask()

    def _apply_mask(self) -> None:
        mask = _prefix_mask(self._prefix)
        self._mask = Raw(mask.to_bytes(SIZE_IPV6, "big"))
        self._addr = Raw((int(self._addr) & mask).to_bytes(SIZE_IPV6, "big"))


class Address(Subnet):
    """A single host address; a prefix suffix is not accepted."""

    __slots__ = ()

    def __init__(self, text: str | None = None) -> None:
        super().__init__()
        if text is not None:
            self._suggest(text)
            self._parse(text)