from decimal import Decimal
from typing import Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models.ceramic_class import CeramicClass
from app.models.student import Student
from app.schemas.student import DashboardStats, StudentRead, StudentSummary


def summarize_student(student: StudentRead) -> StudentSummary:
    """Class counts and amounts for one student. Only class prices are added up."""
    paid = [cls for cls in student.classes if cls.class_paid]
    total_amount = sum((cls.class_price for cls in student.classes), Decimal("0"))
    paid_amount = sum((cls.class_price for cls in paid), Decimal("0"))
    return StudentSummary(
        student_id=student.id,
        total_classes=len(student.classes),
        paid=len(paid),
        pending=len(student.classes) - len(paid),
        total_amount=total_amount,
        paid_amount=paid_amount,
        pending_amount=total_amount - paid_amount,
    )


def dashboard_stats(db: Session) -> DashboardStats:
    return DashboardStats(
        total_students=db.query(func.count(Student.id)).scalar() or 0,
        total_classes=db.query(func.count(CeramicClass.id)).scalar() or 0,
    )


def totals_for(students: Sequence[StudentRead]) -> DashboardStats:
    """Same figures as dashboard_stats, over an already loaded list"""
    return DashboardStats(
        total_students=len(students),
        total_classes=sum(len(student.classes) for student in students),
    )
