from datetime import date
from pydantic import BaseModel, Field
from typing import Optional

from school_records.schemas.common import Email, EntityOut


class StudentCreate(BaseModel):
    first_name: str = Field(..., min_length=2, max_length=50)
    last_name: str = Field(..., min_length=2, max_length=50)
    email: Email
    phone: Optional[str] = Field(default=None, max_length=20)
    date_of_birth: str  # YYYY-MM-DD
    enrollment_date: str  # YYYY-MM-DD


class StudentUpdate(BaseModel):
    first_name: Optional[str] = Field(default=None, min_length=2, max_length=50)
    last_name: Optional[str] = Field(default=None, min_length=2, max_length=50)
    email: Optional[Email] = None
    phone: Optional[str] = Field(default=None, max_length=20)
    date_of_birth: Optional[str] = None
    enrollment_date: Optional[str] = None


class StudentOut(EntityOut):
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    date_of_birth: date
    enrollment_date: date
