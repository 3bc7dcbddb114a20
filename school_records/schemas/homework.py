from pydantic import BaseModel, Field
from typing import Optional

from school_records.schemas.common import EntityOut, UTCDateTime


class HomeworkCreate(BaseModel):
    title: str = Field(..., min_length=2, max_length=200)
    description: Optional[str] = Field(default=None, max_length=1000)
    course_id: int
    due_date: str  # RFC 3339
    max_score: float


class HomeworkUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=2, max_length=200)
    description: Optional[str] = Field(default=None, max_length=1000)
    due_date: Optional[str] = None
    max_score: Optional[float] = None


class HomeworkOut(EntityOut):
    title: str
    description: Optional[str] = None
    course_id: int
    due_date: UTCDateTime
    max_score: float
