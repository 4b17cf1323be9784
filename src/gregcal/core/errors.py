from __future__ import annotations

from typing import Any, Tuple


class GregcalError(Exception):
    """Base error."""


class RangeError(GregcalError, ValueError):
    """Raised when a calendar component falls outside its valid range."""

    def __init__(self, name: str, value: int, low: int, high: int):
        self.name = name
        self.value = value
        self.low = low
        self.high = high
        super().__init__(f"{name} {value} is out of range [{low}, {high}]")

    @property
    def bounds(self) -> Tuple[int, int]:
        return (self.low, self.high)


class FormatError(GregcalError, ValueError):
    """Base class for template compilation errors."""

    def _key(self) -> Tuple[Any, ...]:
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__,) + self._key())

    def __repr__(self) -> str:
        return f"{type(self).__name__}{self._key()!r}"


class InvalidChar(FormatError):
    """Unexpected character inside a field, either as a code or in the field body."""

    def __init__(self, char: str, after_colon: bool, pos: int):
        self.char = char
        self.after_colon = after_colon
        self.pos = pos
        where = "field code" if after_colon else "field body"
        super().__init__(f"invalid character {char!r} as {where} at offset {pos}")

    def _key(self) -> Tuple[Any, ...]:
        return (self.char, self.after_colon, self.pos)


class OpenCurlyBrace(FormatError):
    """A field opened at `open_pos` is never closed."""

    def __init__(self, open_pos: int):
        self.open_pos = open_pos
        super().__init__(f"unterminated field opened at offset {open_pos}")

    def _key(self) -> Tuple[Any, ...]:
        return (self.open_pos,)


class CloseCurlyBrace(FormatError):
    """A lone '}' that is not part of a '}}' escape."""

    def __init__(self, close_pos: int):
        self.close_pos = close_pos
        super().__init__(f"unmatched '}}' at offset {close_pos} (use '}}}}' for a literal brace)")

    def _key(self) -> Tuple[Any, ...]:
        return (self.close_pos,)


class MissingField(FormatError):
    """A field closed without a field code."""

    def __init__(self, open_pos: int, close_pos: int):
        self.open_pos = open_pos
        self.close_pos = close_pos
        super().__init__(f"field at offsets {open_pos}..{close_pos} has no field code")

    def _key(self) -> Tuple[Any, ...]:
        return (self.open_pos, self.close_pos)
