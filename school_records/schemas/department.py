from pydantic import BaseModel, Field
from typing import Optional

from school_records.schemas.common import EntityOut


class DepartmentCreate(BaseModel):
    name: str = Field(..., min_length=2, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)


class DepartmentUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=2, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)


class DepartmentOut(EntityOut):
    name: str
    description: Optional[str] = None
