from pydantic import BaseModel, Field
from typing import Optional

from school_records.schemas.common import EntityOut


class CourseCreate(BaseModel):
    name: str = Field(..., min_length=2, max_length=100)
    code: str = Field(..., min_length=2, max_length=20)
    description: Optional[str] = Field(default=None, max_length=500)
    credits: int
    department_id: int
    teacher_id: int


class CourseUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=2, max_length=100)
    code: Optional[str] = Field(default=None, min_length=2, max_length=20)
    description: Optional[str] = Field(default=None, max_length=500)
    credits: Optional[int] = None
    department_id: Optional[int] = None
    teacher_id: Optional[int] = None


class CourseOut(EntityOut):
    name: str
    code: str
    description: Optional[str] = None
    credits: int
    department_id: int
    teacher_id: int
