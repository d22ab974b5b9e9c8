from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import get_db
from app.core.exceptions import MonthNotFound, StudentNotFound
from app.schemas.calendar import DayBucketRead
from app.schemas.ceramic_class import ClassCreate
from app.schemas.student import (
    DashboardStats,
    MonthCreate,
    MonthRead,
    StudentCreate,
    StudentRead,
    StudentSummary,
    StudentUpdate,
)
from app.services.normalizer import map_student, sort_students
from app.services.schedule.calendar import group_students
from app.services.student import student as crud_student
from app.services.student.summary import dashboard_stats, summarize_student, totals_for

router = APIRouter()


def _list_students(db: Session, search: Optional[str]) -> List[StudentRead]:
    search = search.strip() if search else None
    students = crud_student.get_students(db, search=search)
    return sort_students(map_student(s) for s in students)


@router.get("/", response_model=List[StudentRead])
def get_students(
    search: Optional[str] = None,
    db: Session = Depends(get_db)
):
    """
    List students ordered by preferred day, timetable and name

    - **search**: case-insensitive fragment of the name (optional)
    """
    return _list_students(db, search)


@router.get("/stats", response_model=DashboardStats)
def get_stats(
    search: Optional[str] = None,
    db: Session = Depends(get_db)
):
    """
    Totals for the dashboard cards, over the filtered list when **search** is given
    """
    if search and search.strip():
        return totals_for(_list_students(db, search))
    return dashboard_stats(db)


@router.get("/calendar", response_model=List[DayBucketRead])
def get_calendar(
    search: Optional[str] = None,
    by_class: bool = False,
    db: Session = Depends(get_db)
):
    """
    Students grouped by weekday and time slot

    - **by_class**: place each dated class on its own day and hour instead
      of the student's preferred day
    """
    buckets = group_students(_list_students(db, search), by_class=by_class)
    return [DayBucketRead.model_validate(bucket) for bucket in buckets]


@router.get("/{student_id}", response_model=StudentRead)
def get_student(
    student_id: int,
    db: Session = Depends(get_db)
):
    """
    Student detail with months and classes
    """
    student = crud_student.get_student(db, student_id=student_id)
    if not student:
        raise StudentNotFound(student_id)
    return map_student(student)


@router.get("/{student_id}/summary", response_model=StudentSummary)
def get_student_summary(
    student_id: int,
    db: Session = Depends(get_db)
):
    """
    Paid / pending class counts and amounts
    """
    student = crud_student.get_student(db, student_id=student_id)
    if not student:
        raise StudentNotFound(student_id)
    return summarize_student(map_student(student))


@router.post("/", response_model=StudentRead, status_code=status.HTTP_201_CREATED)
def create_student(
    student: StudentCreate,
    db: Session = Depends(get_db)
):
    """
    Create a student

    - **name**: required, first letter is capitalized
    - **birthday**, **telephone**, **day**: optional
    - **timetable**: one of 10:00, 16:00, 18:30 (optional)
    """
    return map_student(crud_student.create_student(db=db, student=student))


@router.put("/{student_id}", response_model=StudentRead)
def update_student(
    student_id: int,
    student: StudentUpdate,
    db: Session = Depends(get_db)
):
    """
    Update a student, only the fields sent are changed
    """
    updated_student = crud_student.update_student(db=db, student_id=student_id, student=student)
    if not updated_student:
        raise StudentNotFound(student_id)
    return map_student(updated_student)


@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_student(
    student_id: int,
    db: Session = Depends(get_db)
):
    """
    Delete a student with all of its months and classes
    """
    if not crud_student.delete_student(db=db, student_id=student_id):
        raise StudentNotFound(student_id)
    return None


@router.post("/{student_id}/months", response_model=MonthRead, status_code=status.HTTP_201_CREATED)
def add_month(
    student_id: int,
    month: MonthCreate,
    db: Session = Depends(get_db)
):
    """
    Open a billing month for the student
    """
    db_month = crud_student.add_month(db=db, student_id=student_id, month=month)
    if not db_month:
        raise StudentNotFound(student_id)
    return MonthRead(
        id=db_month.id,
        label=db_month.label,
        student_id=db_month.student_id,
        created_at=db_month.created_at,
        updated_at=db_month.updated_at,
    )


@router.post("/{student_id}/classes", response_model=StudentRead, status_code=status.HTTP_201_CREATED)
def add_class(
    student_id: int,
    ceramic_class: ClassCreate,
    db: Session = Depends(get_db)
):
    """
    Add a class to one of the student's months

    - **month_id**: must belong to the student
    - **class_price**: number or numeric string, not negative
    - **oven_*** / **material_***: optional extras
    """
    student = crud_student.add_class(db=db, student_id=student_id, ceramic_class=ceramic_class)
    if not student:
        raise MonthNotFound(ceramic_class.month_id, student_id)
    return map_student(student)
