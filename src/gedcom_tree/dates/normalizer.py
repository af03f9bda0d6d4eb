# src/gedcom_tree/dates/normalizer.py

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from typing import Callable, List, Optional, Tuple, Union


# ---------------------------------------------------------------------------
# Month helpers
# ---------------------------------------------------------------------------

MONTHS = {
    "JAN": 1,
    "FEB": 2,
    "MAR": 3,
    "APR": 4,
    "MAY": 5,
    "JUN": 6,
    "JUL": 7,
    "AUG": 8,
    "SEP": 9,
    "OCT": 10,
    "NOV": 11,
    "DEC": 12,
}

MONTH_NAMES = {num: abbr.title() for abbr, num in MONTHS.items()}


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ParsedDate:
    """A date that matched one of the accepted input shapes."""
    raw: str
    canonical: str
    point: date

    @property
    def display(self) -> str:
        return self.canonical


@dataclass(frozen=True)
class UnparsedDate:
    """A date string that matched no accepted shape; displayable only."""
    raw: str

    @property
    def display(self) -> str:
        return self.raw


NormalizedDate = Union[ParsedDate, UnparsedDate]


# ---------------------------------------------------------------------------
# Accepted input shapes, tried in order (first match wins)
# ---------------------------------------------------------------------------

_DAY = r"(\d{1,2})"
_MON = r"([A-Za-z]{3})"
_YEAR = r"(\d{4})"

Shape = Tuple[str, "re.Pattern[str]", Callable[..., Tuple[int, int, int]]]


def _build_shapes(today: date) -> List[Shape]:
    return [
        (
            "day-month-year",
            re.compile(rf"^{_DAY}\s+{_MON}\s+{_YEAR}$"),
            lambda d, m, y: (int(y), _month(m), int(d)),
        ),
        (
            "month-year",
            re.compile(rf"^{_MON}\s+{_YEAR}$"),
            lambda m, y: (int(y), _month(m), 1),
        ),
        (
            "year",
            re.compile(rf"^{_YEAR}$"),
            lambda y: (int(y), 1, 1),
        ),
        (
            # No year given: the current year is assumed.
            "day-month",
            re.compile(rf"^{_DAY}\s+{_MON}$"),
            lambda d, m: (today.year, _month(m), int(d)),
        ),
        (
            "month-day-year",
            re.compile(rf"^{_MON}\s+{_DAY},\s*{_YEAR}$"),
            lambda m, d, y: (int(y), _month(m), int(d)),
        ),
    ]


def _month(token: str) -> int:
    # 0 is rejected later by date()
    return MONTHS.get(token.upper(), 0)


def _match_shapes(text: str, today: date) -> Optional[date]:
    for _name, pattern, to_ymd in _build_shapes(today):
        match = pattern.match(text)
        if match is None:
            continue
        year, month, day = to_ymd(*match.groups())
        try:
            return date(year, month, day)
        except ValueError:
            # e.g. 31 FEB 1900 or an unknown month token; the shape
            # matched, so no later shape can match either.
            return None
    return None


def canonical_form(point: date) -> str:
    """Render a point in time as ``Mon DD, YYYY`` (e.g. ``Jan 05, 1900``)."""
    return f"{MONTH_NAMES[point.month]} {point.day:02d}, {point.year:04d}"


# ---------------------------------------------------------------------------
# Main public API
# ---------------------------------------------------------------------------

def normalize_date(raw: Optional[str], today: Optional[date] = None) -> NormalizedDate:
    """
    Parse a free-text date into ParsedDate or UnparsedDate.

    Accepted shapes, tried in this order:
        - '1 JAN 1900'    (day-month-year)
        - 'JAN 1900'      (month-year, day 1 assumed)
        - '1900'          (year only, 1 January assumed)
        - '1 JAN'         (day-month, current year assumed)
        - 'Jan 1, 1900'   (month-day-year, also the canonical output shape)

    Never raises. Anything else comes back as UnparsedDate carrying the
    original string.
    """
    s = "" if raw is None else str(raw).strip()
    if not s:
        return UnparsedDate(raw=s)

    point = _match_shapes(s, today or date.today())
    if point is None:
        return UnparsedDate(raw=s)

    return ParsedDate(raw=s, canonical=canonical_form(point), point=point)


def format_date(raw: Optional[str], today: Optional[date] = None) -> Optional[str]:
    """
    Display form of a DATE value.

    Empty input gives None; unparseable input is returned unchanged.
    """
    if raw is None or not str(raw).strip():
        return None
    return normalize_date(raw, today=today).display


def resolve_point(raw: Optional[str], today: Optional[date] = None) -> Optional[date]:
    """Return the point in time for ``raw``, or None when it does not parse."""
    parsed = normalize_date(raw, today=today)
    if isinstance(parsed, ParsedDate):
        return parsed.point
    return None


def whole_years_between(start: date, end: date) -> int:
    years = end.year - start.year
    if (end.month, end.day) < (start.month, start.day):
        years -= 1
    return years


def calculate_age(
    birth: Optional[str],
    death: Optional[str] = None,
    today: Optional[date] = None,
) -> Optional[int]:
    """
    Whole elapsed years from ``birth`` to ``death`` (or ``today``).

    Returns None when birth is missing or unparseable, or when a death date
    is present but unparseable.
    """
    today = today or date.today()

    if not birth:
        return None
    start = resolve_point(birth, today=today)
    if start is None:
        return None

    if death:
        end = resolve_point(death, today=today)
        if end is None:
            return None
    else:
        end = today

    return whole_years_between(start, end)
