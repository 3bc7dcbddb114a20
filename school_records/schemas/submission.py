from pydantic import BaseModel
from typing import Optional

from school_records.schemas.common import EntityOut, UTCDateTime


class SubmissionCreate(BaseModel):
    student_id: int
    homework_id: int
    submission_date: Optional[str] = None  # RFC 3339, по умолчанию текущее время


class SubmissionGrade(BaseModel):
    student_id: int
    homework_id: int
    score: float


class SubmissionOut(EntityOut):
    student_id: int
    homework_id: int
    submission_date: Optional[UTCDateTime] = None
    score: Optional[float] = None
    status: str
