from pydantic import BaseModel, Field
from typing import Optional

from school_records.schemas.common import EntityOut, UTCDateTime


class ExamCreate(BaseModel):
    title: str = Field(..., min_length=2, max_length=200)
    course_id: int
    exam_date: str  # RFC 3339
    duration: int  # минуты
    max_score: float


class ExamUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=2, max_length=200)
    exam_date: Optional[str] = None
    duration: Optional[int] = None
    max_score: Optional[float] = None


class ExamOut(EntityOut):
    title: str
    course_id: int
    exam_date: UTCDateTime
    duration: int
    max_score: float
