from pydantic import BaseModel
from typing import Optional

from school_records.schemas.common import EntityOut


class GradeCreate(BaseModel):
    student_id: int
    exam_id: int
    score: float


class GradeUpdate(BaseModel):
    score: Optional[float] = None


class GradeOut(EntityOut):
    student_id: int
    exam_id: int
    score: float


class StudentAverage(BaseModel):
    student_id: int
    average: float


class ExamAverage(BaseModel):
    exam_id: int
    average: float
