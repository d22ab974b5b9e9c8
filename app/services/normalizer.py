"""
Shapes persisted records into what the frontend consumes.

- timetable enum codes (TEN, SIXTEEN, EIGHTEEN) become display strings
- classes nested under months are flattened and tagged with the month label
- student lists are ordered by preferred day, then slot, then name
"""

import math
import unicodedata
from typing import Iterable, List, Optional, Tuple, Union

from app.models.student import Timetable
from app.schemas.ceramic_class import ClassListing
from app.schemas.student import ClassRead, ClassWithMonth, MonthRead, StudentRead
from app.services.schedule.weekdays import calendar_position, match_day

TIMETABLE_MAP = {
    "TEN": "10:00",
    "SIXTEEN": "16:00",
    "EIGHTEEN": "18:30",
}

TIMETABLE_ORDER = ["10:00", "16:00", "18:30"]


def timetable_name_to_value(name: Union[Timetable, str, None]) -> Optional[str]:
    """Enum code -> display string, None when unknown."""
    if isinstance(name, Timetable):
        name = name.name
    if not name:
        return None
    return TIMETABLE_MAP.get(name)


def timetable_value_to_name(value: Optional[str]) -> Optional[str]:
    """Display string -> enum code, None when unknown."""
    if not value:
        return None
    for name, slot in TIMETABLE_MAP.items():
        if slot == value:
            return name
    return None


def capitalize_name(raw: str) -> str:
    """Upper-case the first letter, leading blanks dropped.

    " ana " -> "Ana ", and a blank name is stored as "".
    """
    if not raw.strip():
        return raw.strip()
    name = raw.lstrip()
    return name[0].upper() + name[1:]


def day_rank(day: Optional[str]) -> float:
    weekday = match_day(day)
    if weekday is None:
        return math.inf
    return calendar_position(weekday)


def timetable_rank(value: Optional[str]) -> float:
    if value in TIMETABLE_ORDER:
        return TIMETABLE_ORDER.index(value)
    return math.inf


def collate_name(name: str) -> str:
    """Accent- and case-insensitive form, so "Ángela" sorts next to "Angela"."""
    decomposed = unicodedata.normalize("NFKD", name)
    return "".join(c for c in decomposed if not unicodedata.combining(c)).casefold()


def student_sort_key(student) -> Tuple[float, float, str, str]:
    # Raw name last keeps the order total when collated names tie
    return (
        day_rank(student.day),
        timetable_rank(student.timetable),
        collate_name(student.name),
        student.name,
    )


def sort_students(students: Iterable[StudentRead]) -> List[StudentRead]:
    return sorted(students, key=student_sort_key)


def map_student(record) -> StudentRead:
    """ORM student with months and classes loaded -> StudentRead."""
    months = [
        MonthRead(
            id=month.id,
            label=month.label,
            student_id=month.student_id,
            created_at=month.created_at,
            updated_at=month.updated_at,
            classes=[ClassRead.model_validate(cls) for cls in month.classes],
        )
        for month in record.months
    ]

    classes = [
        ClassWithMonth(**cls.model_dump(), month_label=month.label)
        for month in months
        for cls in month.classes
    ]

    return StudentRead(
        id=record.id,
        name=record.name,
        birthday=record.birthday,
        telephone=record.telephone,
        day=record.day,
        timetable=timetable_name_to_value(record.timetable),
        created_at=record.created_at,
        updated_at=record.updated_at,
        months=months,
        classes=classes,
    )


def map_class_listing(record) -> ClassListing:
    """ORM class with month and student loaded -> ClassListing."""
    data = ClassRead.model_validate(record).model_dump()
    return ClassListing(
        **data,
        month_label=record.month.label,
        student_id=record.month.student_id,
        student_name=record.month.student.name,
    )
