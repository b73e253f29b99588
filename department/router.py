from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.database import get_db
from core.errors import NotFoundError
from .repository import DepartmentRepository, SqlDepartmentRepository
from .schema import DepartmentSchema

department_router = APIRouter(prefix="/departments", tags=["Departments"])


def get_department_repository(db: Session = Depends(get_db)) -> DepartmentRepository:
    return SqlDepartmentRepository(db)

# List all departments
@department_router.get("", response_model=list[DepartmentSchema])
def list_departments(repo: DepartmentRepository = Depends(get_department_repository)):
    return repo.list_all()

# Get department by id
@department_router.get("/{department_id}", response_model=DepartmentSchema)
def department_detail(department_id: int, repo: DepartmentRepository = Depends(get_department_repository)):
    obj = repo.get(department_id)
    if not obj:
        raise NotFoundError("department not found")
    return obj
