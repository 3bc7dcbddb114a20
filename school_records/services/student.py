import logging
from typing import List

from school_records.core.errors import ConflictError, ValidationError
from school_records.crud.student import CRUDStudent
from school_records.db.models.student import Student
from school_records.schemas.student import StudentCreate, StudentOut, StudentUpdate
from school_records.services.base import (
    clamp_limit,
    clamp_offset,
    parse_date,
    supplied,
    unique_guard,
)

logger = logging.getLogger(__name__)

EMAIL_MAX_LENGTH = 100


class StudentService:
    def __init__(self, students: CRUDStudent):
        self.students = students

    def _check_email(self, email: str, own_id: int = None) -> None:
        if len(email) > EMAIL_MAX_LENGTH:
            raise ValidationError(f"email must be at most {EMAIL_MAX_LENGTH} characters")
        existing = self.students.get_by_email(email)
        if existing is not None and existing.id != own_id:
            logger.warning("Student email already taken: %s", email)
            raise ConflictError("student with this email already exists")

    def create(self, req: StudentCreate) -> StudentOut:
        date_of_birth = parse_date(req.date_of_birth, "date_of_birth")
        enrollment_date = parse_date(req.enrollment_date, "enrollment_date")
        self._check_email(req.email)

        student = Student(
            first_name=req.first_name,
            last_name=req.last_name,
            email=req.email,
            phone=req.phone,
            date_of_birth=date_of_birth,
            enrollment_date=enrollment_date,
        )
        with unique_guard("student with this email already exists"):
            student = self.students.create(student)
        logger.info("Student created: id=%s", student.id)
        return StudentOut.model_validate(student)

    def get(self, id: int) -> StudentOut:
        return StudentOut.model_validate(self.students.get(id))

    def list(self, limit: int, offset: int) -> List[StudentOut]:
        rows = self.students.get_all(clamp_limit(limit), clamp_offset(offset))
        return [StudentOut.model_validate(s) for s in rows]

    def search(self, query: str, limit: int) -> List[StudentOut]:
        return [StudentOut.model_validate(s) for s in self.students.search(query, clamp_limit(limit))]

    def enrolled_before(self, before: str) -> List[StudentOut]:
        day = parse_date(before, "date")
        return [StudentOut.model_validate(s) for s in self.students.get_enrolled_before(day)]

    def update(self, id: int, req: StudentUpdate) -> StudentOut:
        changes = supplied(
            req,
            required=("first_name", "last_name", "email", "date_of_birth", "enrollment_date"),
        )
        for field in ("date_of_birth", "enrollment_date"):
            if field in changes:
                changes[field] = parse_date(changes[field], field)

        student = self.students.get(id)
        if "email" in changes:
            self._check_email(changes["email"], own_id=student.id)

        for field, value in changes.items():
            setattr(student, field, value)
        with unique_guard("student with this email already exists"):
            student = self.students.update(student)
        logger.info("Student updated: id=%s fields=%s", id, sorted(changes))
        return StudentOut.model_validate(student)

    def delete(self, id: int) -> None:
        self.students.get(id)
        self.students.delete(id)
        logger.info("Student deleted: id=%s", id)
