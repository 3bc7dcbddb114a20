from pydantic import BaseModel
from datetime import date as date_type
from typing import Optional

from school_records.schemas.common import EntityOut


class AttendanceCreate(BaseModel):
    student_id: int
    course_id: int
    date: str  # YYYY-MM-DD
    status: str  # present / absent / late


class AttendanceUpdate(BaseModel):
    status: Optional[str] = None


class AttendanceOut(EntityOut):
    student_id: int
    course_id: int
    date: date_type
    status: str
