"""Helpers for combined hashing, mixed-type equality, printing, signal masks, string buffers and views, Ethernet and socket addresses."""

__version__ = "0.1.0"

__all__ = [
    "ether",
    "hashing",
    "printing",
    "signals",
    "sockaddr",
    "strbuf",
    "variant",
    "zstring_view",
]