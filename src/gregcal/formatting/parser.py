"""
gregcal.formatting.parser
-------------------------
Single-pass template compiler.

    "{:Y}-{:M}-{:D}"  ->  [Year, Literal(4, 5), MonthName, Literal(9, 10), Day]

Literal runs are kept as (start, end) offsets into the template and are
only sliced out when rendering. Adjacent literal characters are merged into
one Literal; the escapes "{{" and "}}" each produce their own one-character
Literal pointing at one of the two braces.

Field syntax:  "{" ":" [[fill] align [width]] code "}"
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, TextIO, Tuple

from ..core.date import Date
from ..core.errors import CloseCurlyBrace, InvalidChar, MissingField, OpenCurlyBrace
from .fields import (
    Alignment,
    Arguments,
    Day,
    Field,
    Literal,
    MonthName,
    MonthNumber,
    NumArguments,
    TextArguments,
    WeekdayName,
    Year,
    YearDayNumber,
    YearOfCentury,
)
from .render import render, render_into

log = logging.getLogger(__name__)

# Widths beyond this are rejected at parse time.
MAX_WIDTH = 2 ** 16

_ALIGN_CHARS = {a.value: a for a in Alignment}

# code -> constructor taking the parsed Arguments
FIELD_CODES: Dict[str, Callable[[Arguments], Field]] = {
    "Y": lambda a: Year(NumArguments(a)),
    "y": lambda a: YearOfCentury(NumArguments(a)),
    "M": lambda a: MonthName(True, TextArguments(a)),
    "m": lambda a: MonthName(False, TextArguments(a)),
    "n": lambda a: MonthNumber(NumArguments(a)),
    "D": lambda a: Day(NumArguments(a)),
    "j": lambda a: YearDayNumber(NumArguments(a)),
    "E": lambda a: WeekdayName(True, TextArguments(a)),
    "e": lambda a: WeekdayName(False, TextArguments(a)),
}


@dataclass(frozen=True)
class DateFormat:
    """A compiled template. Holds its source string so Literal spans stay resolvable."""
    template: str
    fields: Tuple[Field, ...]

    @classmethod
    def parse(cls, template: str) -> "DateFormat":
        """Compile `template`, raising the first FormatError encountered."""
        fields = FormatParser(template).parse()
        log.debug("compiled template %r into %d field(s)", template, len(fields))
        return cls(template, tuple(fields))

    def render(self, when: Date) -> str:
        return render(self, when)

    def render_into(self, when: Date, out: TextIO) -> None:
        render_into(self, when, out)

    def literal_text(self) -> List[str]:
        """Text of every Literal field, in order (handy for debugging)."""
        return [f.text(self.template) for f in self.fields if isinstance(f, Literal)]


class FormatParser:
    def __init__(self, template: str):
        self.template = template
        self.fields: List[Field] = []
        self.anchor: Optional[int] = None
        self._pos = 0

    def _next(self) -> Optional[Tuple[int, str]]:
        if self._pos >= len(self.template):
            return None
        pos = self._pos
        self._pos += 1
        return pos, self.template[pos]

    def _peek(self) -> Optional[str]:
        if self._pos >= len(self.template):
            return None
        return self.template[self._pos]

    def _collect_up_to_anchor(self, position: Optional[int]) -> None:
        if self.anchor is not None:
            end = len(self.template) if position is None else position
            self.fields.append(Literal(self.anchor, end))
            self.anchor = None

    def parse(self) -> List[Field]:
        while True:
            nxt = self._next()
            if nxt is None:
                break
            pos, c = nxt

            if c == "{":
                self._collect_up_to_anchor(pos)
                self.fields.append(self._parse_field(pos))
            elif c == "}":
                if self._peek() != "}":
                    raise CloseCurlyBrace(pos)
                self._next()
                self._collect_up_to_anchor(pos)
                self.fields.append(Literal(pos, pos + 1))
            elif self.anchor is None:
                self.anchor = pos

        # Literal characters after the last field.
        self._collect_up_to_anchor(None)
        return self.fields

    def _parse_field(self, open_pos: int) -> Field:
        nxt = self._next()
        if nxt is None:
            raise OpenCurlyBrace(open_pos)
        pos, c = nxt

        if c == "{":
            return Literal(pos, pos + 1)
        if c == "}":
            raise MissingField(open_pos, pos)
        if c != ":":
            raise InvalidChar(c, False, pos)

        field = self._parse_code(open_pos)

        nxt = self._next()
        if nxt is None:
            raise OpenCurlyBrace(open_pos)
        pos, c = nxt
        if c != "}":
            raise InvalidChar(c, False, pos)
        return field

    def _parse_code(self, open_pos: int) -> Field:
        """Parse `[[fill] align [width]] code` following the colon."""
        nxt = self._next()
        if nxt is None:
            raise OpenCurlyBrace(open_pos)
        pos, c = nxt

        alignment: Optional[Alignment] = None
        pad_char: Optional[str] = None

        if self._peek() in _ALIGN_CHARS:
            pad_char = c
            alignment = _ALIGN_CHARS[self._peek()]
            self._next()
        elif c in _ALIGN_CHARS:
            alignment = _ALIGN_CHARS[c]
        elif c in FIELD_CODES:
            return FIELD_CODES[c](Arguments())
        else:
            raise InvalidChar(c, True, pos)

        width: Optional[int] = None
        while True:
            nxt = self._next()
            if nxt is None:
                raise OpenCurlyBrace(open_pos)
            pos, c = nxt
            if c not in "0123456789":
                break
            width = (width or 0) * 10 + int(c)
            if width > MAX_WIDTH:
                raise InvalidChar(c, True, pos)

        if c not in FIELD_CODES:
            raise InvalidChar(c, True, pos)
        return FIELD_CODES[c](Arguments(alignment=alignment, width=width, pad_char=pad_char))


def parse(template: str) -> DateFormat:
    return DateFormat.parse(template)
