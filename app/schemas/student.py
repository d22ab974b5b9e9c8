from datetime import date, datetime
from decimal import Decimal
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Display values accepted from and returned to the frontend
TimetableSlot = Literal["10:00", "16:00", "18:30"]


def blank_to_none(value):
    """Forms send empty strings for untouched optional inputs."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


# =============================================================================
# INPUT
# =============================================================================

class StudentBase(BaseModel):
    name: str = Field(min_length=1)
    birthday: Optional[date] = None
    telephone: Optional[str] = None
    day: Optional[str] = None
    timetable: Optional[TimetableSlot] = None

    @field_validator("birthday", "timetable", mode="before")
    @classmethod
    def empty_strings_to_none(cls, v):
        return blank_to_none(v)


class StudentCreate(StudentBase):
    pass


class StudentUpdate(StudentBase):
    """Every field is optional, only the ones sent are changed."""
    name: Optional[str] = Field(default=None, min_length=1)


class MonthCreate(BaseModel):
    label: str = Field(min_length=1)


# =============================================================================
# OUTPUT
# =============================================================================

class ClassRead(BaseModel):
    id: int
    class_name: str
    class_day: Optional[datetime] = None
    class_price: Decimal
    class_paid: bool = False
    assistance: bool = False
    oven_name: Optional[str] = None
    oven_price: Optional[Decimal] = None
    oven_paid: bool = False
    material_name: Optional[str] = None
    material_price: Optional[Decimal] = None
    material_paid: bool = False
    month_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ClassWithMonth(ClassRead):
    month_label: str


class MonthRead(BaseModel):
    id: int
    label: str
    student_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    classes: List[ClassRead] = []

    model_config = ConfigDict(from_attributes=True)


class StudentRead(BaseModel):
    id: int
    name: str
    birthday: Optional[date] = None
    telephone: Optional[str] = None
    day: Optional[str] = None
    timetable: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    months: List[MonthRead] = []
    classes: List[ClassWithMonth] = []


class StudentSummary(BaseModel):
    student_id: int
    total_classes: int
    paid: int
    pending: int
    total_amount: Decimal
    paid_amount: Decimal
    pending_amount: Decimal


class DashboardStats(BaseModel):
    total_students: int
    total_classes: int
