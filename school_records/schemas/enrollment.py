from datetime import date
from pydantic import BaseModel

from school_records.schemas.common import EntityOut


class EnrollmentCreate(BaseModel):
    student_id: int
    course_id: int
    enrollment_date: str  # YYYY-MM-DD


class EnrollmentOut(EntityOut):
    student_id: int
    course_id: int
    enrollment_date: date
