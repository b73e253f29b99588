import logging
from typing import List, Optional

from .models import Employee, Gender
from .repository import EmployeeRepository
from .schema import EmployeeCreatePayload, EmployeeUpdatePayload

logger = logging.getLogger(__name__)


class EmployeeStore:
    """CRUD and search over employees.

    Holds no state of its own; every call goes straight to the injected
    repository. StorageFaultError raised by the repository propagates as is.
    """

    def __init__(self, repository: EmployeeRepository):
        self.repository = repository

    def get_employees(self) -> List[Employee]:
        return self.repository.list_all()

    def get_employee(self, employee_id: int) -> Optional[Employee]:
        return self.repository.get(employee_id)

    def add_employee(self, employee: EmployeeCreatePayload) -> Employee:
        # an id on the payload is never honoured
        created = self.repository.add(employee.model_dump(exclude={"id"}))
        logger.info("employee created", extra={"employee_id": created.id})
        return created

    def update_employee(self, employee: EmployeeUpdatePayload) -> Optional[Employee]:
        fields = employee.model_dump(exclude={"id"})
        updated = self.repository.update(employee.id, fields)
        if updated is None:
            logger.info("update skipped, employee missing", extra={"employee_id": employee.id})
            return None
        logger.info("employee updated", extra={"employee_id": employee.id})
        return updated

    def delete_employee(self, employee_id: int) -> Optional[Employee]:
        deleted = self.repository.delete(employee_id)
        if deleted is not None:
            logger.info("employee deleted", extra={"employee_id": employee_id})
        return deleted

    def search_employees(self, name: Optional[str] = None, gender: Optional[Gender] = None) -> List[Employee]:
        name = name.strip() if name else None
        return self.repository.search(name or None, gender)
