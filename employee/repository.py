from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from core.database import storage_guard
from .models import Employee, Gender


class EmployeeRepository(ABC):
    """Port for employee persistence.

    Contract:
    - get(), update() and delete() return None when no row has the id (no exception)
    - add() assigns the id; callers never choose it
    - a department_id that matches no department surfaces as BadRequestError
    - any other failure of the underlying store surfaces as StorageFaultError
    """

    @abstractmethod
    def list_all(self) -> List[Employee]: ...

    @abstractmethod
    def get(self, employee_id: int) -> Optional[Employee]: ...

    @abstractmethod
    def add(self, fields: Dict[str, Any]) -> Employee: ...

    @abstractmethod
    def update(self, employee_id: int, fields: Dict[str, Any]) -> Optional[Employee]:
        """Overwrite the given fields on an existing row."""

    @abstractmethod
    def delete(self, employee_id: int) -> Optional[Employee]:
        """Remove the row and return it as it was before removal."""

    @abstractmethod
    def search(self, name: Optional[str], gender: Optional[Gender]) -> List[Employee]:
        """Case-insensitive substring match on first or last name, exact match on gender.

        A None name or gender disables that filter.
        """


class SqlEmployeeRepository(EmployeeRepository):
    def __init__(self, db: Session):
        self.db = db

    @storage_guard("Error retrieving data from the database")
    def list_all(self) -> List[Employee]:
        statement = select(Employee).order_by(Employee.id.asc())
        return list(self.db.scalars(statement))

    @storage_guard("Error retrieving data from the database")
    def get(self, employee_id: int) -> Optional[Employee]:
        return self.db.get(Employee, employee_id)

    @storage_guard("Error creating data", integrity_message="unknown department")
    def add(self, fields: Dict[str, Any]) -> Employee:
        db_employee = Employee(**fields)
        self.db.add(db_employee)
        self.db.commit()
        self.db.refresh(db_employee)
        return db_employee

    @storage_guard("Error updating data", integrity_message="unknown department")
    def update(self, employee_id: int, fields: Dict[str, Any]) -> Optional[Employee]:
        db_employee = self.db.get(Employee, employee_id)
        if not db_employee:
            return None
        for k, v in fields.items():
            setattr(db_employee, k, v)
        self.db.commit()
        self.db.refresh(db_employee)
        return db_employee

    @storage_guard("Error deleting data")
    def delete(self, employee_id: int) -> Optional[Employee]:
        db_employee = self.db.get(Employee, employee_id)
        if not db_employee:
            return None
        self.db.delete(db_employee)
        self.db.commit()
        return db_employee

    @storage_guard("Error retrieving data from the database")
    def search(self, name: Optional[str], gender: Optional[Gender]) -> List[Employee]:
        statement = select(Employee)
        if name:
            # autoescape keeps % and _ in the query literal
            statement = statement.where(or_(
                Employee.first_name.icontains(name, autoescape=True),
                Employee.last_name.icontains(name, autoescape=True),
            ))
        if gender is not None:
            statement = statement.where(Employee.gender == gender)
        return list(self.db.scalars(statement.order_by(Employee.id.asc())))
