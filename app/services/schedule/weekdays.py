"""
Weekday matching for the free-text "preferred day" field.

Students type things like "Lunes", "miérc." or "lunes por la tarde". The
input is lowercased, stripped of Spanish accents and matched by prefix
against a fixed alias table.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple, Union

UNSCHEDULED = "unscheduled"
UNSCHEDULED_LABEL = "Sin día"

_ACCENTS = str.maketrans("áéíóú", "aeiou")


@dataclass(frozen=True)
class WeekDay:
    value: int  # Sunday=0 ... Saturday=6
    label: str
    aliases: Tuple[str, ...]


# Calendar order, Monday first
WEEK_DAYS: Tuple[WeekDay, ...] = (
    WeekDay(1, "Lunes", ("lunes", "lun", "mon")),
    WeekDay(2, "Martes", ("martes", "mar", "tue")),
    WeekDay(3, "Miércoles", ("miercoles", "mie", "wed")),
    WeekDay(4, "Jueves", ("jueves", "jue", "thu")),
    WeekDay(5, "Viernes", ("viernes", "vie", "fri")),
    WeekDay(6, "Sábado", ("sabado", "sab", "sat")),
    WeekDay(0, "Domingo", ("domingo", "dom", "sun")),
)


@dataclass(frozen=True)
class DayMatch:
    """Result of parsing a day string: a weekday, or unscheduled."""
    weekday: Optional[WeekDay] = None

    @property
    def key(self) -> Union[int, str]:
        return self.weekday.value if self.weekday else UNSCHEDULED

    @property
    def label(self) -> str:
        return self.weekday.label if self.weekday else UNSCHEDULED_LABEL


def sanitize_day(value: str) -> str:
    return value.lower().translate(_ACCENTS).strip()


def match_day(value: Optional[str]) -> Optional[WeekDay]:
    """First weekday with an alias the input starts with, or None."""
    if not value:
        return None
    normalized = sanitize_day(value)
    if not normalized:
        return None
    for day in WEEK_DAYS:
        if any(normalized.startswith(alias) for alias in day.aliases):
            return day
    return None


def parse_day(value: Optional[str]) -> DayMatch:
    return DayMatch(match_day(value))


def weekday_for_date(value: date) -> WeekDay:
    # date.weekday() is Monday=0, which is also the WEEK_DAYS order
    return WEEK_DAYS[value.weekday()]


def calendar_position(day: WeekDay) -> int:
    """Monday=0 ... Sunday=6."""
    return WEEK_DAYS.index(day)
