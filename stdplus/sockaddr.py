"""Socket addresses for IPv4, IPv6 and UNIX domain sockets.

Each address converts to and from its raw ``sockaddr`` bytes and to and
from its textual form: ``1.2.3.4:80``, ``[::1]:80`` and ``unix:/path``.
"""

from __future__ import annotations

import ipaddress
import socket
import struct
from dataclasses import dataclass
from typing import Union

__all__ = [
    "SockAddrBuf",
    "Sock4Addr",
    "Sock6Addr",
    "SockUAddr",
    "SockInAddr",
    "SockAnyAddr",
    "sock_in_addr_from_buf",
    "sock_any_addr_from_buf",
    "parse_sock_in_addr",
    "parse_sock_any_addr",
]

_FAMILY = struct.Struct("=H")
_PORT_MAX = 0xFFFF
_SCOPE_MAX = 0xFFFFFFFF
_SOCKADDR_IN_LEN = 16
_SOCKADDR_IN6_LEN = 28
_SUN_PATH_LEN = 108
_UNIX_PREFIX = "unix:"


def _parse_port(text: str) -> int:
    if not text or not (text.isascii() and text.isdigit()):
        raise ValueError(f"Invalid port: {text!r}")
    value = int(text, 10)
    if value > _PORT_MAX:
        raise ValueError(f"Port out of range: {text!r}")
    return value


def _check_port(port: int) -> int:
    if not isinstance(port, int) or not 0 <= port <= _PORT_MAX:
        raise ValueError(f"Invalid port: {port!r}")
    return port


@dataclass(frozen=True)
class SockAddrBuf:
    """Raw ``sockaddr`` bytes, as passed to or returned by socket calls."""

    data: bytes = b""

    MAX_LEN = 128

    def __post_init__(self) -> None:
        data = bytes(self.data)
        if len(data) > self.MAX_LEN:
            raise ValueError(
                f"sockaddr of {len(data)} bytes exceeds {self.MAX_LEN}"
            )
        object.__setattr__(self, "data", data)

    @property
    def family(self) -> int:
        """The address family stored in the first field."""
        return _FAMILY.unpack(self.data[:2].ljust(2, b"\0"))[0]

    @property
    def length(self) -> int:
        """Number of meaningful bytes."""
        return len(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __bytes__(self) -> bytes:
        return self.data


@dataclass(frozen=True)
class Sock4Addr:
    """An IPv4 address and port."""

    addr: ipaddress.IPv4Address
    port: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "addr", ipaddress.IPv4Address(self.addr))
        _check_port(self.port)

    @classmethod
    def _from_buf_unchecked(cls, buf: SockAddrBuf) -> Sock4Addr:
        if buf.length != _SOCKADDR_IN_LEN:
            raise ValueError("Sock4Addr fromBuf")
        (port,) = struct.unpack("!H", buf.data[2:4])
        return cls(ipaddress.IPv4Address(buf.data[4:8]), port)

    @classmethod
    def from_buf(cls, buf: SockAddrBuf) -> Sock4Addr:
        """Decode a ``sockaddr_in``; raises ValueError on any mismatch."""
        if buf.family != socket.AF_INET:
            raise ValueError("Sock4Addr fromBuf")
        return cls._from_buf_unchecked(buf)

    @classmethod
    def from_str(cls, text: str) -> Sock4Addr:
        """Parse ``a.b.c.d:port``."""
        head, sep, port = text.rpartition(":")
        if not sep:
            raise ValueError("Invalid string for Sock4Addr")
        return cls(ipaddress.IPv4Address(head), _parse_port(port))

    def sockaddr(self) -> bytes:
        """The ``sockaddr_in`` bytes."""
        return (
            _FAMILY.pack(socket.AF_INET)
            + struct.pack("!H", self.port)
            + self.addr.packed
            + bytes(8)
        )

    def sockaddr_len(self) -> int:
        """Size of a ``sockaddr_in``."""
        return _SOCKADDR_IN_LEN

    def buf(self) -> SockAddrBuf:
        """The address as a :class:`SockAddrBuf`."""
        return SockAddrBuf(self.sockaddr())

    def __str__(self) -> str:
        return f"{self.addr}:{self.port}"


@dataclass(frozen=True)
class Sock6Addr:
    """An IPv6 address, port and scope id."""

    addr: ipaddress.IPv6Address
    port: int
    scope: int = 0

    def __post_init__(self) -> None:
        addr = ipaddress.IPv6Address(self.addr)
        object.__setattr__(self, "addr", ipaddress.IPv6Address(addr.packed))
        _check_port(self.port)
        if not isinstance(self.scope, int) or not 0 <= self.scope <= _SCOPE_MAX:
            raise ValueError(f"Invalid scope: {self.scope!r}")

    @classmethod
    def _from_buf_unchecked(cls, buf: SockAddrBuf) -> Sock6Addr:
        if buf.length != _SOCKADDR_IN6_LEN:
            raise ValueError("Sock6Addr fromBuf")
        (port,) = struct.unpack("!H", buf.data[2:4])
        (scope,) = struct.unpack("=I", buf.data[24:28])
        return cls(ipaddress.IPv6Address(buf.data[8:24]), port, scope)

    @classmethod
    def from_buf(cls, buf: SockAddrBuf) -> Sock6Addr:
        """Decode a ``sockaddr_in6``; raises ValueError on any mismatch."""
        if buf.family != socket.AF_INET6:
            raise ValueError("Sock6Addr fromBuf")
        return cls._from_buf_unchecked(buf)

    @classmethod
    def from_str(cls, text: str) -> Sock6Addr:
        """Parse ``[addr]:port``; the scope is always zero."""
        head, sep, port = text.rpartition(":")
        if not sep:
            raise ValueError("Invalid string for Sock6Addr")
        if len(head) < 2 or not head.startswith("[") or not head.endswith("]"):
            raise ValueError("Invalid string for Sock6Addr")
        inner = head[1:-1]
        if "%" in inner:
            raise ValueError("Invalid string for Sock6Addr")
        return cls(ipaddress.IPv6Address(inner), _parse_port(port), 0)

    def sockaddr(self) -> bytes:
        """The ``sockaddr_in6`` bytes."""
        return (
            _FAMILY.pack(socket.AF_INET6)
            + struct.pack("!HI", self.port, 0)
            + self.addr.packed
            + struct.pack("=I", self.scope)
        )

    def sockaddr_len(self) -> int:
        """Size of a ``sockaddr_in6``."""
        return _SOCKADDR_IN6_LEN

    def buf(self) -> SockAddrBuf:
        """The address as a :class:`SockAddrBuf`."""
        return SockAddrBuf(self.sockaddr())

    def __str__(self) -> str:
        return f"[{self.addr}]:{self.port}"


def _encode(text: str) -> bytes:
    return text.encode("utf-8", "surrogateescape")


def _decode(data: bytes) -> str:
    return data.decode("utf-8", "surrogateescape")


class SockUAddr:
    """A UNIX domain socket path.

    Abstract socket names start with ``@`` (or a NUL, which is stored as
    ``@``); on the wire their first byte is NUL and they carry no
    terminator, while filesystem paths are NUL-terminated.
    """

    __slots__ = ("_path",)

    MAX_LEN = _SUN_PATH_LEN

    def __init__(self, path: str = "") -> None:
        raw = _encode(path)
        if raw:
            abstract = raw[:1] in (b"@", b"\0")
            if len(raw) >= self.MAX_LEN + (1 if abstract else 0):
                raise ValueError("Socket path too long")
            if not abstract and b"\0" in raw:
                raise ValueError("Null bytes in non-abtract path")
            if abstract:
                raw = b"@" + raw[1:]
        self._path = raw

    @classmethod
    def _from_raw(cls, raw: bytes) -> SockUAddr:
        obj = cls.__new__(cls)
        obj._path = raw
        return obj

    @classmethod
    def _from_buf_unchecked(cls, buf: SockAddrBuf) -> SockUAddr:
        if buf.length < _FAMILY.size:
            raise ValueError("SockUAddr fromBuf")
        raw = buf.data[_FAMILY.size:]
        if not raw:
            return cls._from_raw(b"")
        if raw[0] == 0:
            return cls._from_raw(b"@" + raw[1:])
        return cls._from_raw(raw[:-1])

    @classmethod
    def from_buf(cls, buf: SockAddrBuf) -> SockUAddr:
        """Decode a ``sockaddr_un``; raises ValueError on any mismatch."""
        if buf.family != socket.AF_UNIX:
            raise ValueError("SockUAddr fromBuf")
        return cls._from_buf_unchecked(buf)

    @classmethod
    def from_str(cls, text: str) -> SockUAddr:
        """Parse a path, with or without a leading ``unix:``."""
        if text.startswith(_UNIX_PREFIX):
            text = text[len(_UNIX_PREFIX):]
        return cls(text)

    def path(self) -> str:
        """The path, with ``@`` marking an abstract name."""
        return _decode(self._path)

    def _is_abstract(self) -> bool:
        return self._path[:1] == b"@"

    def sockaddr(self) -> bytes:
        """The full ``sockaddr_un`` bytes, zero padded."""
        body = b"\0" + self._path[1:] if self._is_abstract() else self._path
        return _FAMILY.pack(socket.AF_UNIX) + body.ljust(self.MAX_LEN, b"\0")

    def sockaddr_len(self) -> int:
        """Number of meaningful ``sockaddr_un`` bytes."""
        terminator = 1 if self._path and not self._is_abstract() else 0
        return _FAMILY.size + len(self._path) + terminator

    def buf(self) -> SockAddrBuf:
        """The address as a :class:`SockAddrBuf`."""
        return SockAddrBuf(self.sockaddr()[: self.sockaddr_len()])

    def __str__(self) -> str:
        return _UNIX_PREFIX + self.path()

    def __repr__(self) -> str:
        return f"SockUAddr({self.path()!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SockUAddr):
            return self._path == other._path
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._path)


SockInAddr = Union[Sock4Addr, Sock6Addr]
SockAnyAddr = Union[Sock4Addr, Sock6Addr, SockUAddr]


def sock_in_addr_from_buf(buf: SockAddrBuf) -> SockInAddr:
    """Decode an IPv4 or IPv6 ``sockaddr`` according to its family."""
    if buf.family == socket.AF_INET:
        return Sock4Addr._from_buf_unchecked(buf)
    if buf.family == socket.AF_INET6:
        return Sock6Addr._from_buf_unchecked(buf)
    raise ValueError("Unknown SockInAddr")


def sock_any_addr_from_buf(buf: SockAddrBuf) -> SockAnyAddr:
    """Decode an IPv4, IPv6 or UNIX ``sockaddr`` according to its family."""
    if buf.family == socket.AF_UNIX:
        return SockUAddr._from_buf_unchecked(buf)
    if buf.family in (socket.AF_INET, socket.AF_INET6):
        return sock_in_addr_from_buf(buf)
    raise ValueError("Unknown SockInAddr")


def parse_sock_in_addr(text: str) -> SockInAddr:
    """Parse ``[v6]:port`` or ``v4:port``."""
    if text.startswith("["):
        return Sock6Addr.from_str(text)
    return Sock4Addr.from_str(text)


def parse_sock_any_addr(text: str) -> SockAnyAddr:
    """Parse ``[v6]:port``, ``unix:path`` or ``v4:port``."""
    if text.startswith("["):
        return Sock6Addr.from_str(text)
    if text.startswith(_UNIX_PREFIX):
        return SockUAddr.from_str(text)
    return Sock4Addr.from_str(text)