"""
Calendar grouping: weekday -> time slot -> students.

Every student ends up in exactly one day bucket (or one per class when
grouping by class). Unmatched days go to the trailing "unscheduled" bucket
and blank times to "Sin horario", nothing is dropped.
"""

import math
import re
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Iterable, List, Optional, Union

from app.services.schedule.weekdays import (
    UNSCHEDULED,
    UNSCHEDULED_LABEL,
    WEEK_DAYS,
    DayMatch,
    parse_day,
    weekday_for_date,
)

NO_SCHEDULE_LABEL = "Sin horario"

TIME_REGEX = re.compile(r"(\d{1,2}):(\d{1,2})")


@dataclass
class CalendarEntry:
    student_id: int
    student: str
    day: DayMatch
    time: str
    class_name: Optional[str] = None
    class_date: Optional[date] = None


@dataclass
class TimeSlot:
    time: str
    entries: List[CalendarEntry] = field(default_factory=list)


@dataclass
class DayBucket:
    key: Union[int, str]
    label: str
    slots: List[TimeSlot] = field(default_factory=list)


def parse_time_to_minutes(time: str) -> float:
    """Minutes since midnight of the first H:MM found, infinity if none."""
    match = TIME_REGEX.search(time or "")
    if not match:
        return math.inf
    hours, minutes = int(match.group(1)), int(match.group(2))
    return hours * 60 + minutes


def slot_label(time: Optional[str]) -> str:
    time = (time or "").strip()
    return time or NO_SCHEDULE_LABEL


def build_entries(students: Iterable, by_class: bool = False) -> List[CalendarEntry]:
    """
    One entry per student from its preferred day and timetable.

    With by_class, a student with classes gets one entry per class instead:
    dated classes use the weekday and hour of their date, undated ones fall
    back to the student's preferences.
    """
    entries = []
    for student in students:
        preferred_day = parse_day(student.day)
        preferred_time = slot_label(student.timetable)

        if not by_class or not student.classes:
            entries.append(CalendarEntry(
                student_id=student.id,
                student=student.name,
                day=preferred_day,
                time=preferred_time,
            ))
            continue

        for cls in student.classes:
            if cls.class_day:
                day = DayMatch(weekday_for_date(cls.class_day))
                time = cls.class_day.strftime("%H:%M")
                class_date = cls.class_day.date()
            else:
                day, time, class_date = preferred_day, preferred_time, None
            entries.append(CalendarEntry(
                student_id=student.id,
                student=student.name,
                day=day,
                time=time,
                class_name=cls.class_name,
                class_date=class_date,
            ))
    return entries


def group_entries(entries: Iterable[CalendarEntry]) -> List[DayBucket]:
    by_day: Dict[Union[int, str], Dict[str, TimeSlot]] = {}
    for entry in entries:
        slots = by_day.setdefault(entry.day.key, {})
        slots.setdefault(entry.time, TimeSlot(entry.time)).entries.append(entry)

    buckets = [DayBucket(day.value, day.label) for day in WEEK_DAYS]
    if UNSCHEDULED in by_day:
        buckets.append(DayBucket(UNSCHEDULED, UNSCHEDULED_LABEL))

    for bucket in buckets:
        slots = by_day.get(bucket.key, {}).values()
        # sorted() is stable, equal minutes keep first-seen order
        bucket.slots = sorted(slots, key=lambda slot: parse_time_to_minutes(slot.time))
    return buckets


def group_students(students: Iterable, by_class: bool = False) -> List[DayBucket]:
    return group_entries(build_entries(students, by_class=by_class))
