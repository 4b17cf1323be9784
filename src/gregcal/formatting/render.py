from __future__ import annotations

import io
from typing import TYPE_CHECKING, Iterable, TextIO

from ..core.date import Date
from .fields import Field

if TYPE_CHECKING:
    from .parser import DateFormat


def render_fields(template: str, fields: Iterable[Field], when: Date, out: TextIO) -> None:
    for field in fields:
        field.format(template, when, out)


def render_into(fmt: "DateFormat", when: Date, out: TextIO) -> None:
    """Write `when` rendered through `fmt` to `out`. Errors from `out` propagate."""
    render_fields(fmt.template, fmt.fields, when, out)


def render(fmt: "DateFormat", when: Date) -> str:
    # Writing to an in-memory buffer cannot fail.
    out = io.StringIO()
    render_into(fmt, when, out)
    return out.getvalue()
