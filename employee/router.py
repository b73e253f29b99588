from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.orm import Session

from core.database import get_db
from core.errors import BadRequestError, NotFoundError
from .models import Gender
from .repository import SqlEmployeeRepository
from .schema import EmployeeSchema, EmployeeCreatePayload, EmployeeUpdatePayload
from .service import EmployeeStore

employee_router = APIRouter(prefix="/employees", tags=["Employees"])


def get_employee_store(db: Session = Depends(get_db)) -> EmployeeStore:
    return EmployeeStore(SqlEmployeeRepository(db))

# List all employees
@employee_router.get("", response_model=list[EmployeeSchema])
def list_employees(store: EmployeeStore = Depends(get_employee_store)):
    return store.get_employees()

# Search by name and/or gender, registered before /{employee_id}
@employee_router.get("/search", response_model=list[EmployeeSchema])
def search_employees(
    name: Optional[str] = Query(None),
    gender: Optional[Gender] = Query(None),
    store: EmployeeStore = Depends(get_employee_store),
):
    result = store.search_employees(name, gender)
    if not result:
        raise NotFoundError("no employees match the search")
    return result

# Get employee by id
@employee_router.get("/{employee_id}", response_model=EmployeeSchema)
def employee_detail(employee_id: int, store: EmployeeStore = Depends(get_employee_store)):
    obj = store.get_employee(employee_id)
    if not obj:
        raise NotFoundError("employee not found")
    return obj

# Create employee
@employee_router.post("", response_model=EmployeeSchema, status_code=status.HTTP_201_CREATED)
def employee_post(
    payload: EmployeeCreatePayload,
    request: Request,
    response: Response,
    store: EmployeeStore = Depends(get_employee_store),
):
    created = store.add_employee(payload)
    response.headers["Location"] = str(request.url_for("employee_detail", employee_id=created.id))
    return created

# Update employee, full overwrite
@employee_router.put("/{employee_id}", response_model=EmployeeSchema)
def employee_put(employee_id: int, payload: EmployeeUpdatePayload, store: EmployeeStore = Depends(get_employee_store)):
    if payload.id != employee_id:
        raise BadRequestError("employee id mismatch")
    updated = store.update_employee(payload)
    if not updated:
        raise NotFoundError("employee not found")
    return updated

# Delete employee, answers with the removed record
@employee_router.delete("/{employee_id}", response_model=EmployeeSchema)
def employee_delete(employee_id: int, store: EmployeeStore = Depends(get_employee_store)):
    deleted = store.delete_employee(employee_id)
    if not deleted:
        raise NotFoundError("employee not found")
    return deleted
