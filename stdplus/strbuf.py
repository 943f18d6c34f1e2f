"""A growable string buffer with a small inline capacity."""

from __future__ import annotations

DEFAULT_INLINE_SIZE = 127


class StrBuf:
    """Append-only character buffer.

    Text up to ``inline_size`` characters is held inline; beyond that the
    buffer switches to dynamic storage and grows its capacity by half of
    the required length each time it runs out.
    """

    __slots__ = ("_chars", "_inline_size", "_capacity", "_dynamic")

    def __init__(self, data: str = "", inline_size: int = DEFAULT_INLINE_SIZE) -> None:
        if inline_size < 0:
            raise ValueError(f"inline size must not be negative: {inline_size}")
        self._chars: list[str] = []
        self._inline_size = inline_size
        self._capacity = inline_size
        self._dynamic = False
        if data:
            self.append(data)

    def _reserve(self, newlen: int) -> None:
        if newlen <= self._capacity:
            return
        self._capacity = newlen + (newlen >> 1)
        self._dynamic = True

    def append(self, data: str | StrBuf) -> None:
        """Append the characters of ``data``."""
        if isinstance(data, StrBuf):
            data = str(data)
        if not isinstance(data, str):
            raise TypeError(f"expected str, got {type(data).__name__}")
        self._reserve(len(self._chars) + len(data))
        self._chars.extend(data)

    def push(self, char: str) -> None:
        """Append a single character."""
        if not isinstance(char, str):
            raise TypeError(f"expected str, got {type(char).__name__}")
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        self.append(char)

    def shrink(self, amount: int) -> None:
        """Drop ``amount`` characters from the end."""
        if amount < 0 or amount > len(self._chars):
            raise ValueError(f"cannot shrink {len(self._chars)} characters by {amount}")
        del self._chars[len(self._chars) - amount:]

    def clear(self) -> None:
        """Remove all characters, keeping the current storage."""
        self._chars.clear()

    def is_dynamic(self) -> bool:
        """Whether the buffer has outgrown its inline storage."""
        return self._dynamic

    def capacity(self) -> int:
        """Number of characters the current storage can hold."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._chars)

    def __str__(self) -> str:
        return "".join(self._chars)

    def __repr__(self) -> str:
        return f"StrBuf({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StrBuf):
            return self._chars == other._chars
        if isinstance(other, str):
            return str(self) == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]