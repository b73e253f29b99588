from __future__ import annotations
from datetime import date
from enum import Enum
from sqlalchemy import Date, String, ForeignKey, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship
from core.database import Base

class Gender(str, Enum):
    male = "male"
    female = "female"
    other = "other"

class Employee(Base):
    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(primary_key=True)

    first_name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    last_name:  Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    email:      Mapped[str] = mapped_column(String(255), nullable=False)
    date_of_birth: Mapped[date] = mapped_column(Date(), nullable=False)

    gender: Mapped[Gender] = mapped_column(SAEnum(Gender, name="employee_gender"), nullable=False)

    department_id: Mapped[int | None] = mapped_column(ForeignKey("departments.id"), nullable=True, index=True)
    photo_path:    Mapped[str | None] = mapped_column(String(500), nullable=True)

    department = relationship("Department")
