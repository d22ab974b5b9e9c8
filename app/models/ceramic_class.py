from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.core.database import Base


class CeramicClass(Base):
    __tablename__ = "classes"

    id = Column(Integer, primary_key=True, index=True)
    class_name = Column(String, nullable=False)
    class_day = Column(DateTime, nullable=True)
    class_price = Column(Numeric(10, 2), nullable=False)
    class_paid = Column(Boolean, nullable=False, default=False)
    assistance = Column(Boolean, nullable=False, default=False)

    # --- EXTRAS ---
    oven_name = Column(String, nullable=True)
    oven_price = Column(Numeric(10, 2), nullable=True)
    oven_paid = Column(Boolean, nullable=False, default=False)
    material_name = Column(String, nullable=True)
    material_price = Column(Numeric(10, 2), nullable=True)
    material_paid = Column(Boolean, nullable=False, default=False)

    month_id = Column(Integer, ForeignKey("months.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    month = relationship("Month", back_populates="classes")
