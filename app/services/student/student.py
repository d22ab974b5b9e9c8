import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload, selectinload

from app.models.ceramic_class import CeramicClass
from app.models.month import Month
from app.models.student import Student, Timetable
from app.schemas.ceramic_class import ClassCreate, ClassUpdate
from app.schemas.student import MonthCreate, StudentCreate, StudentUpdate
from app.services.normalizer import capitalize_name, timetable_value_to_name

logger = logging.getLogger(__name__)

# Sending null for these means "leave as is"
_KEEP_WHEN_NULL = {"class_day", "class_paid", "assistance", "oven_paid", "material_paid"}


def _with_classes(query):
    return query.options(selectinload(Student.months).selectinload(Month.classes))


def _timetable_code(value: Optional[str]) -> Optional[Timetable]:
    name = timetable_value_to_name(value)
    return Timetable[name] if name else None


# =============================================================================
# STUDENTS
# =============================================================================

def get_student(db: Session, student_id: int) -> Optional[Student]:
    """Get one student (months and classes loaded) by ID"""
    return _with_classes(db.query(Student)).filter(Student.id == student_id).first()


def get_students(db: Session, search: Optional[str] = None) -> List[Student]:
    """List students, optionally filtered by a case-insensitive name fragment"""
    query = _with_classes(db.query(Student))
    if search:
        # % and _ in the fragment match literally
        pattern = search.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        query = query.filter(Student.name.ilike(f"%{pattern}%", escape="\\"))
    return query.all()


def create_student(db: Session, student: StudentCreate) -> Student:
    db_student = Student(
        name=capitalize_name(student.name),
        birthday=student.birthday,
        telephone=student.telephone,
        day=student.day,
        timetable=_timetable_code(student.timetable),
    )
    db.add(db_student)
    db.commit()
    db.refresh(db_student)
    logger.info(f"Created student {db_student.id} ({db_student.name})")
    return db_student


def update_student(db: Session, student_id: int, student: StudentUpdate) -> Optional[Student]:
    """Update the fields that were sent, leave the rest untouched"""
    db_student = get_student(db, student_id)
    if not db_student:
        return None

    changes = student.model_dump(exclude_unset=True)
    if changes.get("name") is not None:
        db_student.name = capitalize_name(changes["name"])
    if changes.get("birthday") is not None:
        db_student.birthday = changes["birthday"]
    for field in ("telephone", "day"):
        if field in changes:
            setattr(db_student, field, changes[field])
    if "timetable" in changes:
        db_student.timetable = _timetable_code(changes["timetable"])

    db.commit()
    db.refresh(db_student)
    logger.info(f"Updated student {student_id}: {sorted(changes)}")
    return db_student


def delete_student(db: Session, student_id: int) -> bool:
    """
    Delete a student together with its months and classes.

    Classes, then months, then the student, all in one transaction.
    """
    month_ids = select(Month.id).where(Month.student_id == student_id)
    try:
        classes = (
            db.query(CeramicClass)
            .filter(CeramicClass.month_id.in_(month_ids))
            .delete(synchronize_session=False)
        )
        months = (
            db.query(Month)
            .filter(Month.student_id == student_id)
            .delete(synchronize_session=False)
        )
        deleted = (
            db.query(Student)
            .filter(Student.id == student_id)
            .delete(synchronize_session=False)
        )
        db.commit()
    except Exception:
        db.rollback()
        raise

    if deleted:
        logger.info(f"Deleted student {student_id} with {months} months and {classes} classes")
    return bool(deleted)


# =============================================================================
# MONTHS
# =============================================================================

def add_month(db: Session, student_id: int, month: MonthCreate) -> Optional[Month]:
    """Open a billing month for a student, None when the student does not exist"""
    if not db.query(Student.id).filter(Student.id == student_id).first():
        return None

    db_month = Month(label=month.label.strip(), student_id=student_id)
    db.add(db_month)
    db.commit()
    db.refresh(db_month)
    logger.info(f"Added month {db_month.id} ({db_month.label}) to student {student_id}")
    return db_month


def get_student_month(db: Session, student_id: int, month_id: int) -> Optional[Month]:
    return (
        db.query(Month)
        .filter(Month.id == month_id, Month.student_id == student_id)
        .first()
    )


# =============================================================================
# CLASSES
# =============================================================================

def add_class(db: Session, student_id: int, ceramic_class: ClassCreate) -> Optional[Student]:
    """
    Add a class to one of the student's months.

    Returns the refreshed student, or None when the month does not belong
    to that student.
    """
    month = get_student_month(db, student_id, ceramic_class.month_id)
    if not month:
        return None

    db_class = CeramicClass(
        class_name=ceramic_class.class_name,
        assistance=ceramic_class.assistance or False,
        class_price=ceramic_class.class_price,
        class_day=ceramic_class.class_day,
        class_paid=ceramic_class.class_paid or False,
        oven_name=ceramic_class.oven_name,
        oven_price=ceramic_class.oven_price,
        oven_paid=ceramic_class.oven_paid or False,
        material_name=ceramic_class.material_name,
        material_price=ceramic_class.material_price,
        material_paid=ceramic_class.material_paid or False,
        month_id=month.id,
    )
    db.add(db_class)
    db.commit()
    logger.info(f"Added class {db_class.id} to month {month.id} of student {student_id}")

    # Drop cached relationships so the new class shows up
    db.expire_all()
    return get_student(db, student_id)


def get_class(db: Session, class_id: int) -> Optional[CeramicClass]:
    return db.query(CeramicClass).filter(CeramicClass.id == class_id).first()


def get_classes(db: Session) -> List[CeramicClass]:
    """Every class, newest first, with month and student loaded"""
    return (
        db.query(CeramicClass)
        .options(joinedload(CeramicClass.month).joinedload(Month.student))
        .order_by(CeramicClass.created_at.desc(), CeramicClass.id.desc())
        .all()
    )


def update_class(db: Session, class_id: int, ceramic_class: ClassUpdate) -> Optional[CeramicClass]:
    """Name and price always change, the other fields only when sent"""
    db_class = get_class(db, class_id)
    if not db_class:
        return None

    changes = ceramic_class.model_dump(exclude_unset=True)
    db_class.class_name = ceramic_class.class_name
    db_class.class_price = ceramic_class.class_price
    for field, value in changes.items():
        if field in ("class_name", "class_price"):
            continue
        if value is None and field in _KEEP_WHEN_NULL:
            continue
        setattr(db_class, field, value)

    db.commit()
    db.refresh(db_class)
    logger.info(f"Updated class {class_id}: {sorted(changes)}")
    return db_class


def delete_class(db: Session, class_id: int) -> bool:
    db_class = get_class(db, class_id)
    if not db_class:
        return False
    db.delete(db_class)
    db.commit()
    logger.info(f"Deleted class {class_id}")
    return True
