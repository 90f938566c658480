"""A 16-byte address container shared by IPv4 and IPv6 values."""

from __future__ import annotations

from dataclasses import dataclass

SIZE_IPV6 = 16
SIZE_IPV4 = 4

# RFC 4038 prefix used to embed an IPv4 address in the IPv6 space.
_MAPPED_PREFIX = bytes(10) + b"\xff\xff"


@dataclass(frozen=True, eq=False)
class Raw:
    """Sixteen bytes in network order; IPv4 values are stored IPv4-mapped."""

    packed: bytes = bytes(SIZE_IPV6)

    def __post_init__(self) -> None:
        data = bytes(self.packed)
        if len(data) != SIZE_IPV6:
            raise ValueError(f"raw address must be {SIZE_IPV6} bytes, got {len(data)}")
        object.__setattr__(self, "packed", data)

    @classmethod
    def from_ipv4(cls, value: int | bytes) -> Raw:
        """Build an IPv4-mapped value from a 32-bit number or four packed bytes."""
        if isinstance(value, int):
            if not 0 <= value < 1 << 32:
                raise ValueError("IPv4 value is out of range")
            value = value.to_bytes(SIZE_IPV4, "big")
        data = bytes(value)
        if len(data) != SIZE_IPV4:
            raise ValueError(f"IPv4 address must be {SIZE_IPV4} bytes, got {len(data)}")
        return cls(_MAPPED_PREFIX + data)

    @classmethod
    def from_ipv6(cls, data: bytes) -> Raw:
        """Build a value from sixteen packed bytes."""
        return cls(bytes(data))

    def addr4(self) -> bytes:
        """The last four bytes, where an IPv4 address lives."""
        return self.packed[SIZE_IPV6 - SIZE_IPV4:]

    def addr6(self) -> bytes:
        """All sixteen bytes."""
        return self.packed

    def dump(self) -> str:
        """Upper-case hexadecimal of every byte."""
        return self.packed.hex().upper()

    def _qwords(self) -> tuple[int, int]:
        return (
            int.from_bytes(self.packed[:8], "little"),
            int.from_bytes(self.packed[8:], "little"),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Raw):
            return NotImplemented
        return self.packed == other.packed

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Raw):
            return NotImplemented
        mine, theirs = self._qwords(), other._qwords()
        return mine[0] < theirs[0] or mine[1] < theirs[1]

    def __hash__(self) -> int:
        return hash(self.packed)

    def __bytes__(self) -> bytes:
        return self.packed

    def __int__(self) -> int:
        return int.from_bytes(self.packed, "big")