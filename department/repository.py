from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from core.database import storage_guard
from .models import Department


class DepartmentRepository(ABC):
    """Read-only access to departments."""

    @abstractmethod
    def list_all(self) -> List[Department]: ...

    @abstractmethod
    def get(self, department_id: int) -> Optional[Department]:
        """Return the department, or None if it does not exist."""


class SqlDepartmentRepository(DepartmentRepository):
    def __init__(self, db: Session):
        self.db = db

    @storage_guard("Error retrieving data from the database")
    def list_all(self) -> List[Department]:
        return list(self.db.scalars(select(Department).order_by(Department.name.asc())))

    @storage_guard("Error retrieving data from the database")
    def get(self, department_id: int) -> Optional[Department]:
        return self.db.get(Department, department_id)
