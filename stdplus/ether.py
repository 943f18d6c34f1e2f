"""Ethernet (MAC) addresses."""

from __future__ import annotations

import string
from typing import Iterable, Iterator

from stdplus.hashing import hash_multi

_LEN = 6
_HEX_DIGITS = frozenset(string.hexdigits)


def _parse_octet(text: str) -> int:
    if not text or not set(text) <= _HEX_DIGITS:
        raise ValueError(f"Invalid hex octet: {text!r}")
    value = int(text, 16)
    if value > 0xFF:
        raise ValueError(f"Octet out of range: {text!r}")
    return value


class EtherAddr:
    """A six-octet Ethernet address; missing trailing octets are zero."""

    __slots__ = ("_octets",)

    def __init__(self, octets: Iterable[int] | bytes = ()) -> None:
        values = bytes(octets) if isinstance(octets, EtherAddr) else bytes(list(octets))
        if len(values) > _LEN:
            raise ValueError(f"an Ethernet address has {_LEN} octets, got {len(values)}")
        self._octets = values.ljust(_LEN, b"\0")

    @classmethod
    def from_str(cls, text: str) -> EtherAddr:
        """Parse ``aa:bb:cc:dd:ee:ff`` or the twelve-digit form without colons."""
        if len(text) == 12 and ":" not in text:
            return cls(_parse_octet(text[i:i + 2]) for i in range(0, 12, 2))
        octets = []
        rest = text
        for _ in range(_LEN - 1):
            part, sep, rest = rest.partition(":")
            octets.append(_parse_octet(part))
            if not sep or not rest:
                raise ValueError("Missing mac data")
        octets.append(_parse_octet(rest))
        return cls(octets)

    def is_multicast(self) -> bool:
        """Whether the group bit of the first octet is set."""
        return bool(self._octets[0] & 1)

    def is_unicast(self) -> bool:
        """Neither the all-zero address nor a multicast address."""
        return any(self._octets) and not self.is_multicast()

    def __str__(self) -> str:
        return ":".join(f"{octet:02x}" for octet in self._octets)

    def __repr__(self) -> str:
        return f"EtherAddr.from_str({str(self)!r})"

    def __bytes__(self) -> bytes:
        return self._octets

    def __iter__(self) -> Iterator[int]:
        return iter(self._octets)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, EtherAddr):
            return self._octets == other._octets
        return NotImplemented

    def __hash__(self) -> int:
        return hash_multi(*self._octets)