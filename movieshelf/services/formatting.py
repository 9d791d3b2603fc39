"""Display formatters shared by the record shapers."""

from __future__ import annotations

import calendar
import random
from collections.abc import Sized
from datetime import date, datetime
from typing import Any, Iterable, TypeVar

T = TypeVar("T")

_SHORT_GENRES = {"Science Fiction": "Sci-Fi"}
_OVERVIEW_MAX_WORDS = 31
_OVERVIEW_KEEP_WORDS = 30


def parse_date(raw: str | date | None) -> date | None:
    """Parse a TMDb ``YYYY-MM-DD`` string; None when missing or malformed."""

    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    if not raw or not isinstance(raw, str):
        return None
    try:
        return datetime.fromisoformat(raw[:10]).date()
    except ValueError:
        return None


def get_year(raw: str | date | None) -> int | None:
    parsed = parse_date(raw)
    return parsed.year if parsed else None


def format_date(raw: str | date | None) -> str:
    parsed = parse_date(raw)
    return parsed.isoformat() if parsed else ""


def format_full_date(raw: str | date | None) -> str:
    """``1999-03-07`` -> ``7 March 1999``."""

    parsed = parse_date(raw)
    if not parsed:
        return ""
    return f"{parsed.day} {calendar.month_name[parsed.month]} {parsed.year}"


def format_minutes(minutes: int | None) -> str:
    """Runtime in minutes to ``2h 3m`` (or ``2h`` on the hour)."""

    if minutes is None:
        return "?"
    try:
        hours, rest = divmod(int(minutes), 60)
    except (TypeError, ValueError):
        return "?"
    if rest == 0:
        return f"{hours}h"
    return f"{hours}h {rest}m"


def format_currency(amount: int | float | str | None) -> str:
    if amount is None or amount == "":
        return "0"
    if isinstance(amount, str):
        try:
            value: int | float = float(amount.replace(",", ""))
        except ValueError:
            return "?"
    else:
        value = amount
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return f"${value:,}"


def handle_null(value: Any, if_null: T, result: T) -> T:
    """Pick ``if_null`` for None, zero or empty values, ``result`` otherwise."""

    if value is None or value == 0:
        return if_null
    if isinstance(value, Sized) and len(value) == 0:
        return if_null
    return result


def _short_genre_name(genre: dict[str, Any]) -> str:
    name = genre.get("name") or ""
    return _SHORT_GENRES.get(name, name)


def get_short_genre(genres: list[dict[str, Any]] | None) -> str:
    if not genres:
        return ""
    return "/".join(_short_genre_name(genre) for genre in genres[:2])


def get_short_overview(overview: str | None) -> str:
    if not overview:
        return ""
    words = overview.split(" ")
    if len(words) > _OVERVIEW_MAX_WORDS:
        return " ".join(words[:_OVERVIEW_KEEP_WORDS]) + "..."
    return overview


def production_list(companies: Iterable[dict[str, Any]] | None) -> str:
    return ", ".join(company.get("name") or "" for company in companies or [])


def get_age(birthdate: str | date | None, *, today: date | None = None) -> int | None:
    born = parse_date(birthdate)
    if not born:
        return None
    today = today or date.today()
    return today.year - born.year


def now() -> datetime:
    return datetime.now()


def one_month_before(today: date | None = None) -> date:
    """Same day one month earlier, clamped to the end of a shorter month."""

    today = today or date.today()
    year, month = (today.year, today.month - 1) if today.month > 1 else (today.year - 1, 12)
    day = min(today.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def random_number(low: int, high: int) -> int:
    return random.randint(low, high)
