"""A read-only string view that is guaranteed to be NUL-terminable."""

from __future__ import annotations

from functools import total_ordering
from typing import Iterator, Union

NPOS = -1
"""Returned by the search methods when nothing is found."""

_TextLike = Union[str, "ZStringView"]


def _coerce(value: object) -> str | None:
    if isinstance(value, ZStringView):
        return value._text
    if isinstance(value, str):
        return value
    return None


def _require_text(value: object) -> str:
    text = _coerce(value)
    if text is None:
        raise TypeError(f"expected str or ZStringView, got {type(value).__name__}")
    return text


def _check_pos(pos: int) -> None:
    if pos < 0:
        raise ValueError(f"position must not be negative: {pos}")


@total_ordering
class ZStringView:
    """Immutable text that holds no embedded NUL character.

    Such text can always be handed on with a single terminating NUL, so
    the view never needs to be copied to obtain a C-style string.
    """

    __slots__ = ("_text",)

    def __init__(self, text: _TextLike = "") -> None:
        if isinstance(text, ZStringView):
            self._text: str = text._text
            return
        if not isinstance(text, str):
            raise TypeError(f"expected str or ZStringView, got {type(text).__name__}")
        if "\0" in text:
            raise ValueError("string contains an embedded NUL character")
        self._text = text

    def c_str(self) -> str:
        """The text followed by its terminating NUL character."""
        return self._text + "\0"

    def at(self, pos: int) -> str:
        """The character at ``pos``; raises IndexError when out of range."""
        if not 0 <= pos < len(self._text):
            raise IndexError(f"position {pos} out of range for length {len(self._text)}")
        return self._text[pos]

    def substr(self, pos: int = 0, count: int | None = None) -> str:
        """Up to ``count`` characters starting at ``pos`` (all by default)."""
        _check_pos(pos)
        if pos > len(self._text):
            raise IndexError(f"position {pos} out of range for length {len(self._text)}")
        if count is None:
            return self._text[pos:]
        if count < 0:
            raise ValueError(f"count must not be negative: {count}")
        return self._text[pos:pos + count]

    def suffix(self, pos: int = 0) -> ZStringView:
        """The view of everything from ``pos`` to the end."""
        _check_pos(pos)
        if pos > len(self._text):
            raise IndexError(f"position {pos} out of range for length {len(self._text)}")
        return ZStringView(self._text[pos:])

    def compare(self, other: _TextLike) -> int:
        """-1, 0 or 1 as this text sorts before, equal to or after ``other``."""
        text = _require_text(other)
        return (self._text > text) - (self._text < text)

    def starts_with(self, prefix: _TextLike) -> bool:
        """Whether the text begins with ``prefix``."""
        return self._text.startswith(_require_text(prefix))

    def ends_with(self, suffix: _TextLike) -> bool:
        """Whether the text ends with ``suffix``."""
        return self._text.endswith(_require_text(suffix))

    def find(self, needle: _TextLike, pos: int = 0) -> int:
        """Index of the first ``needle`` at or after ``pos``, else NPOS."""
        _check_pos(pos)
        return self._text.find(_require_text(needle), pos)

    def rfind(self, needle: _TextLike, pos: int | None = None) -> int:
        """Index of the last ``needle`` starting at or before ``pos``, else NPOS."""
        text = _require_text(needle)
        if pos is None:
            return self._text.rfind(text)
        _check_pos(pos)
        return self._text.rfind(text, 0, pos + len(text))

    def _last_index(self, pos: int | None) -> int:
        if pos is None or pos >= len(self._text):
            return len(self._text) - 1
        _check_pos(pos)
        return pos

    def find_first_of(self, chars: _TextLike, pos: int = 0) -> int:
        """First index at or after ``pos`` whose character is in ``chars``."""
        _check_pos(pos)
        wanted = set(_require_text(chars))
        return next(
            (i for i in range(pos, len(self._text)) if self._text[i] in wanted), NPOS
        )

    def find_last_of(self, chars: _TextLike, pos: int | None = None) -> int:
        """Last index at or before ``pos`` whose character is in ``chars``."""
        wanted = set(_require_text(chars))
        end = self._last_index(pos)
        return next((i for i in range(end, -1, -1) if self._text[i] in wanted), NPOS)

    def find_first_not_of(self, chars: _TextLike, pos: int = 0) -> int:
        """First index at or after ``pos`` whose character is not in ``chars``."""
        _check_pos(pos)
        unwanted = set(_require_text(chars))
        return next(
            (i for i in range(pos, len(self._text)) if self._text[i] not in unwanted),
            NPOS,
        )

    def find_last_not_of(self, chars: _TextLike, pos: int | None = None) -> int:
        """Last index at or before ``pos`` whose character is not in ``chars``."""
        unwanted = set(_require_text(chars))
        end = self._last_index(pos)
        return next(
            (i for i in range(end, -1, -1) if self._text[i] not in unwanted), NPOS
        )

    def __len__(self) -> int:
        return len(self._text)

    def __getitem__(self, index: int | slice) -> str:
        return self._text[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"ZStringView({self._text!r})"

    def __format__(self, spec: str) -> str:
        return format(self._text, spec)

    def __eq__(self, other: object) -> bool:
        text = _coerce(other)
        if text is None:
            return NotImplemented
        return self._text == text

    def __lt__(self, other: object) -> bool:
        text = _coerce(other)
        if text is None:
            return NotImplemented
        return self._text < text

    def __hash__(self) -> int:
        return hash(self._text)