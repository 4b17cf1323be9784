from __future__ import annotations
from typing import Any, Dict

from ..core.calendar import days_in_month as _days_in_month
from ..core.date import Date
from .registry import register_attribute

def jdn(when: Date) -> Dict[str, Any]:
    return {"jdn": when.jdn}

def iso_week(when: Date) -> Dict[str, Any]:
    # The ISO week belongs to the year containing its Thursday.
    thursday = when + (4 - int(when.weekday))
    week = (thursday.yearday - 1) // 7 + 1
    return {"iso_year": thursday.year, "iso_week": week, "iso_weekday": int(when.weekday)}

def quarter(when: Date) -> Dict[str, Any]:
    return {"quarter": (int(when.month) - 1) // 3 + 1}

def leap_year(when: Date) -> Dict[str, Any]:
    return {"leap_year": when.is_leap_year()}

def days_in_month(when: Date) -> Dict[str, Any]:
    return {"days_in_month": _days_in_month(when.year, when.month)}

register_attribute("jdn", jdn)
register_attribute("iso_week", iso_week)
register_attribute("quarter", quarter)
register_attribute("leap_year", leap_year)
register_attribute("days_in_month", days_in_month)
