import enum

from sqlalchemy import Column, Date, DateTime, Enum, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.core.database import Base


class Timetable(enum.Enum):
    """Preferred session slot. The database keeps the member name."""
    TEN = "10:00"
    SIXTEEN = "16:00"
    EIGHTEEN = "18:30"


class Student(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    birthday = Column(Date, nullable=True)
    telephone = Column(String, nullable=True)
    day = Column(String, nullable=True)
    timetable = Column(Enum(Timetable, name="timetable"), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    months = relationship("Month", back_populates="student", order_by="Month.id")
