from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.core.database import Base


class Month(Base):
    """Billing period grouping the classes of one student."""
    __tablename__ = "months"

    id = Column(Integer, primary_key=True, index=True)
    label = Column(String, nullable=False)
    student_id = Column(Integer, ForeignKey("students.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    student = relationship("Student", back_populates="months")
    classes = relationship("CeramicClass", back_populates="month", order_by="CeramicClass.id")
