"""
Tests for the calendar grouping (weekday -> time slot -> students).

The property that matters: every student shows up exactly once (or once per
class when grouping by class), whatever its day or time looks like.
"""

import math
from datetime import datetime
from decimal import Decimal

import pytest

from app.schemas.student import ClassWithMonth, StudentRead
from app.services.schedule.calendar import (
    NO_SCHEDULE_LABEL,
    build_entries,
    group_students,
    parse_time_to_minutes,
)


def student(id, name="Ana", day=None, timetable=None, classes=()):
    return StudentRead(id=id, name=name, day=day, timetable=timetable, classes=list(classes))


def ceramic_class(id, class_day=None, class_name="Torno"):
    return ClassWithMonth(
        id=id,
        class_name=class_name,
        class_day=class_day,
        class_price=Decimal("12000"),
        month_id=1,
        month_label="Marzo",
    )


def bucket(buckets, key):
    return next(b for b in buckets if b.key == key)


class TestParseTimeToMinutes:
    @pytest.mark.parametrize(
        "text,minutes",
        [
            ("10:00", 600),
            ("18:30", 1110),
            ("clase 9:05 hs", 545),
            ("clase 9:5 hs", 545),
            ("de 16:00 a 18:00", 960),
        ],
    )
    def test_first_match(self, text, minutes):
        assert parse_time_to_minutes(text) == minutes

    @pytest.mark.parametrize("text", ["sin horario", "", "a la tarde"])
    def test_no_match_is_infinity(self, text):
        assert parse_time_to_minutes(text) == math.inf


class TestGroupStudents:
    def test_matched_and_unscheduled(self):
        first = student(1, day="miercoles", timetable="10:00")
        second = student(2, day="desconocido", timetable="")

        buckets = group_students([first, second])

        wednesday = bucket(buckets, 3)
        assert wednesday.label == "Miércoles"
        assert [(s.time, [e.student_id for e in s.entries]) for s in wednesday.slots] == [("10:00", [1])]

        assert buckets[-1].key == "unscheduled"
        assert [(s.time, [e.student_id for e in s.entries]) for s in buckets[-1].slots] == [
            (NO_SCHEDULE_LABEL, [2])
        ]

    def test_weekdays_in_calendar_order_without_unscheduled(self):
        buckets = group_students([student(1, day="Lunes", timetable="16:00")])
        assert [b.label for b in buckets] == [
            "Lunes", "Martes", "Miércoles", "Jueves", "Viernes", "Sábado", "Domingo",
        ]
        assert buckets[0].slots[0].entries[0].student_id == 1
        assert all(not b.slots for b in buckets[1:])

    def test_slots_ordered_by_time_with_unparseable_last(self):
        students = [
            student(1, day="Lunes", timetable=None),
            student(2, day="Lunes", timetable="18:30"),
            student(3, day="lun", timetable="10:00"),
            student(4, day="Lunes", timetable="18:30"),
        ]
        monday = group_students(students)[0]
        assert [s.time for s in monday.slots] == ["10:00", "18:30", NO_SCHEDULE_LABEL]
        assert [e.student_id for e in monday.slots[1].entries] == [2, 4]

    def test_time_is_trimmed(self):
        monday = group_students([student(1, day="Lunes", timetable="  16:00 ")])[0]
        assert monday.slots[0].time == "16:00"

    def test_no_student_is_dropped(self):
        students = [
            student(1, day="Lunes", timetable="10:00"),
            student(2),
            student(3, day="???", timetable="a la tarde"),
            student(4, day="domingo"),
            student(5, day="martes por la noche", timetable="18:30"),
        ]
        buckets = group_students(students)
        grouped = sorted(
            entry.student_id
            for b in buckets
            for slot in b.slots
            for entry in slot.entries
        )
        assert grouped == [1, 2, 3, 4, 5]

    def test_empty_input(self):
        buckets = group_students([])
        assert len(buckets) == 7
        assert all(not b.slots for b in buckets)


class TestGroupByClass:
    def test_dated_class_uses_its_own_day_and_hour(self):
        # 2026-03-05 is a Thursday
        s = student(1, day="Lunes", timetable="10:00", classes=[
            ceramic_class(10, class_day=datetime(2026, 3, 5, 18, 30)),
        ])
        entries = build_entries([s], by_class=True)
        assert len(entries) == 1
        assert entries[0].day.label == "Jueves"
        assert entries[0].time == "18:30"
        assert entries[0].class_name == "Torno"
        assert entries[0].class_date.isoformat() == "2026-03-05"

    def test_undated_class_falls_back_to_preferences(self):
        s = student(1, day="Lunes", timetable="10:00", classes=[ceramic_class(10)])
        monday = group_students([s], by_class=True)[0]
        assert monday.slots[0].time == "10:00"
        assert monday.slots[0].entries[0].class_name == "Torno"

    def test_one_entry_per_class_and_students_without_classes_kept(self):
        with_classes = student(1, classes=[ceramic_class(10), ceramic_class(11)])
        without = student(2, day="Martes")
        entries = build_entries([with_classes, without], by_class=True)
        assert [e.student_id for e in entries] == [1, 1, 2]
        assert entries[0].day.key == "unscheduled"
