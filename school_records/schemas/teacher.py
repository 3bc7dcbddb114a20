from pydantic import BaseModel, Field
from typing import Optional

from school_records.schemas.common import Email, EntityOut


class TeacherCreate(BaseModel):
    first_name: str = Field(..., min_length=2, max_length=50)
    last_name: str = Field(..., min_length=2, max_length=50)
    email: Email
    phone: Optional[str] = Field(default=None, max_length=20)
    department_id: int


class TeacherUpdate(BaseModel):
    first_name: Optional[str] = Field(default=None, min_length=2, max_length=50)
    last_name: Optional[str] = Field(default=None, min_length=2, max_length=50)
    email: Optional[Email] = None
    phone: Optional[str] = Field(default=None, max_length=20)
    department_id: Optional[int] = None


class TeacherOut(EntityOut):
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    department_id: int
