from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from app.schemas.student import ClassWithMonth, blank_to_none


class ClassBase(BaseModel):
    class_name: str = Field(min_length=1)
    class_price: Decimal = Field(ge=0)
    class_day: Optional[datetime] = None
    class_paid: Optional[bool] = None
    assistance: Optional[bool] = None
    oven_name: Optional[str] = None
    oven_price: Optional[Decimal] = Field(default=None, ge=0)
    oven_paid: Optional[bool] = None
    material_name: Optional[str] = None
    material_price: Optional[Decimal] = Field(default=None, ge=0)
    material_paid: Optional[bool] = None

    @field_validator("class_day", "oven_price", "material_price", mode="before")
    @classmethod
    def empty_strings_to_none(cls, v):
        return blank_to_none(v)


class ClassCreate(ClassBase):
    month_id: int = Field(gt=0)


class ClassUpdate(ClassBase):
    pass


class ClassListing(ClassWithMonth):
    student_id: int
    student_name: str
