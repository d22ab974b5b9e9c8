"""
Tests for the record normalizer.

Covers the timetable code mapping, name capitalization, list ordering and
the flattening of month classes into the student shape.
"""

import math
from datetime import datetime
from decimal import Decimal
from types import SimpleNamespace

import pytest

from app.models.student import Timetable
from app.schemas.student import StudentRead
from app.services.normalizer import (
    TIMETABLE_MAP,
    capitalize_name,
    day_rank,
    map_class_listing,
    map_student,
    sort_students,
    timetable_name_to_value,
    timetable_rank,
    timetable_value_to_name,
)


def student(id, name, day=None, timetable=None) -> StudentRead:
    return StudentRead(id=id, name=name, day=day, timetable=timetable)


def class_record(id, month_id, **fields):
    values = dict(
        id=id,
        class_name="Torno",
        class_day=None,
        class_price=Decimal("12000"),
        class_paid=False,
        assistance=False,
        oven_name=None,
        oven_price=None,
        oven_paid=False,
        material_name=None,
        material_price=None,
        material_paid=False,
        month_id=month_id,
        created_at=None,
        updated_at=None,
    )
    values.update(fields)
    return SimpleNamespace(**values)


class TestTimetableMapping:
    @pytest.mark.parametrize("code", sorted(TIMETABLE_MAP))
    def test_code_round_trip(self, code):
        assert timetable_value_to_name(timetable_name_to_value(code)) == code

    @pytest.mark.parametrize("value", sorted(TIMETABLE_MAP.values()))
    def test_value_round_trip(self, value):
        assert timetable_name_to_value(timetable_value_to_name(value)) == value

    def test_accepts_enum_members(self):
        assert timetable_name_to_value(Timetable.EIGHTEEN) == "18:30"

    @pytest.mark.parametrize("code", [None, "", "NINE", "10:00"])
    def test_unknown_code_is_none(self, code):
        assert timetable_name_to_value(code) is None

    @pytest.mark.parametrize("value", [None, "", "10:30", "TEN"])
    def test_unknown_value_is_none(self, value):
        assert timetable_value_to_name(value) is None


class TestCapitalizeName:
    def test_leading_blanks_dropped_and_first_letter_upper(self):
        assert capitalize_name(" ana ") == "Ana "

    def test_rest_of_name_untouched(self):
        assert capitalize_name("maría josé") == "María josé"

    def test_blank_name_stored_trimmed(self):
        assert capitalize_name("   ") == ""

    def test_already_capitalized(self):
        assert capitalize_name("Ana") == "Ana"


class TestRanks:
    def test_day_rank_monday_first_sunday_last(self):
        assert day_rank("Lunes") == 0
        assert day_rank("miércoles") == 2
        assert day_rank("Domingo") == 6

    @pytest.mark.parametrize("day", [None, "", "desconocido"])
    def test_unknown_day_ranks_last(self, day):
        assert day_rank(day) == math.inf

    def test_timetable_rank(self):
        assert [timetable_rank(v) for v in ("10:00", "16:00", "18:30")] == [0, 1, 2]
        assert timetable_rank(None) == math.inf
        assert timetable_rank("12:00") == math.inf


class TestSortStudents:
    def test_day_then_timetable_then_name(self):
        students = [
            student(1, "Zoe", day="Martes", timetable="10:00"),
            student(2, "Bea", day="Lunes", timetable="18:30"),
            student(3, "Ana", day="Lunes", timetable="16:00"),
        ]
        assert [s.id for s in sort_students(students)] == [3, 2, 1]

    def test_unmatched_day_and_missing_timetable_sort_last(self):
        students = [
            student(1, "Ana", day="desconocido", timetable="10:00"),
            student(2, "Bea"),
            student(3, "Caro", day="Domingo"),
            student(4, "Dani", day="Domingo", timetable="18:30"),
        ]
        assert [s.id for s in sort_students(students)] == [4, 3, 1, 2]

    def test_name_breaks_ties_ignoring_case(self):
        students = [student(1, "bea", day="Lunes"), student(2, "Ana", day="Lunes")]
        assert [s.name for s in sort_students(students)] == ["Ana", "bea"]

    def test_accented_names_sort_with_their_base_letter(self):
        students = [
            student(1, "Zoe", day="Lunes"),
            student(2, "Ángela", day="Lunes"),
            student(3, "Bruno", day="Lunes"),
        ]
        assert [s.name for s in sort_students(students)] == ["Ángela", "Bruno", "Zoe"]

    def test_names_equal_once_collated_still_ordered(self):
        students = [student(1, "Ángela", day="Lunes"), student(2, "Angela", day="Lunes")]
        assert [s.id for s in sort_students(students)] == [2, 1]
        assert [s.id for s in sort_students(reversed(students))] == [2, 1]

    def test_sorting_twice_is_identical(self):
        students = [
            student(1, "Caro", day="viernes"),
            student(2, "Ana", day="lun", timetable="16:00"),
            student(3, "Bea"),
            student(4, "Ana", day="Lunes", timetable="16:00"),
        ]
        once = sort_students(students)
        assert sort_students(once) == once
        assert sort_students(students) == once


class TestMapStudent:
    def test_flattens_classes_with_month_label(self):
        record = SimpleNamespace(
            id=7,
            name="Ana",
            birthday=None,
            telephone="1155550101",
            day="Lunes",
            timetable=Timetable.SIXTEEN,
            created_at=datetime(2026, 3, 1),
            updated_at=datetime(2026, 3, 1),
            months=[
                SimpleNamespace(id=1, label="Marzo", student_id=7, created_at=None, updated_at=None,
                                classes=[class_record(10, 1), class_record(11, 1, class_paid=True)]),
                SimpleNamespace(id=2, label="Abril", student_id=7, created_at=None, updated_at=None,
                                classes=[class_record(12, 2)]),
            ],
        )

        result = map_student(record)

        assert result.timetable == "16:00"
        assert result.telephone == "1155550101"
        assert [m.label for m in result.months] == ["Marzo", "Abril"]
        assert [(c.id, c.month_label) for c in result.classes] == [
            (10, "Marzo"),
            (11, "Marzo"),
            (12, "Abril"),
        ]
        assert result.classes[1].class_paid is True

    def test_student_without_months(self):
        record = SimpleNamespace(id=1, name="Bea", birthday=None, telephone=None, day=None,
                                 timetable=None, created_at=None, updated_at=None, months=[])
        result = map_student(record)
        assert result.timetable is None
        assert result.months == []
        assert result.classes == []

    def test_class_listing_carries_student(self):
        month = SimpleNamespace(label="Marzo", student_id=3, student=SimpleNamespace(name="Ana"))
        record = class_record(5, 1, month=month)
        listing = map_class_listing(record)
        assert listing.month_label == "Marzo"
        assert listing.student_id == 3
        assert listing.student_name == "Ana"
