from datetime import date
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from .models import Gender


class EmployeeSchema(BaseModel):
    id: int
    first_name: str
    last_name: str
    email: str
    date_of_birth: date
    gender: Gender
    department_id: Optional[int] = None
    photo_path: Optional[str] = None
    model_config = ConfigDict(from_attributes=True)

# PUBLIC payload for POST, the id is assigned by the store
class EmployeeCreatePayload(BaseModel):
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: str = Field(min_length=3, max_length=255)
    date_of_birth: date
    gender: Gender
    department_id: Optional[int] = None
    photo_path: Optional[str] = Field(None, max_length=500)
    model_config = ConfigDict(extra="forbid")

# PUBLIC payload for PUT, full overwrite of every field but the id
class EmployeeUpdatePayload(EmployeeCreatePayload):
    id: int
