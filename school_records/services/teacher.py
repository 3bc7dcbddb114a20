import logging
from typing import List

from school_records.core.errors import ConflictError, ValidationError
from school_records.crud.department import CRUDDepartment
from school_records.crud.teacher import CRUDTeacher
from school_records.db.models.teacher import Teacher
from school_records.schemas.teacher import TeacherCreate, TeacherOut, TeacherUpdate
from school_records.services.base import (
    clamp_limit,
    clamp_offset,
    require,
    supplied,
    unique_guard,
)

logger = logging.getLogger(__name__)

EMAIL_MAX_LENGTH = 100


class TeacherService:
    def __init__(self, teachers: CRUDTeacher, departments: CRUDDepartment):
        self.teachers = teachers
        self.departments = departments

    def _check_email(self, email: str, own_id: int = None) -> None:
        if len(email) > EMAIL_MAX_LENGTH:
            raise ValidationError(f"email must be at most {EMAIL_MAX_LENGTH} characters")
        existing = self.teachers.get_by_email(email)
        if existing is not None and existing.id != own_id:
            logger.warning("Teacher email already taken: %s", email)
            raise ConflictError("teacher with this email already exists")

    def create(self, req: TeacherCreate) -> TeacherOut:
        require(self.departments, req.department_id, "department")
        self._check_email(req.email)

        teacher = Teacher(
            first_name=req.first_name,
            last_name=req.last_name,
            email=req.email,
            phone=req.phone,
            department_id=req.department_id,
        )
        with unique_guard("teacher with this email already exists"):
            teacher = self.teachers.create(teacher)
        logger.info("Teacher created: id=%s", teacher.id)
        return TeacherOut.model_validate(teacher)

    def get(self, id: int) -> TeacherOut:
        return TeacherOut.model_validate(self.teachers.get(id))

    def list(self, limit: int, offset: int) -> List[TeacherOut]:
        rows = self.teachers.get_all(clamp_limit(limit), clamp_offset(offset))
        return [TeacherOut.model_validate(t) for t in rows]

    def by_department(self, department_id: int) -> List[TeacherOut]:
        return [TeacherOut.model_validate(t) for t in self.teachers.get_by_department(department_id)]

    def update(self, id: int, req: TeacherUpdate) -> TeacherOut:
        changes = supplied(req, required=("first_name", "last_name", "email", "department_id"))
        teacher = self.teachers.get(id)

        if "department_id" in changes:
            require(self.departments, changes["department_id"], "department")
        if "email" in changes:
            self._check_email(changes["email"], own_id=teacher.id)

        for field, value in changes.items():
            setattr(teacher, field, value)
        with unique_guard("teacher with this email already exists"):
            teacher = self.teachers.update(teacher)
        logger.info("Teacher updated: id=%s fields=%s", id, sorted(changes))
        return TeacherOut.model_validate(teacher)

    def delete(self, id: int) -> None:
        self.teachers.get(id)
        self.teachers.delete(id)
        logger.info("Teacher deleted: id=%s", id)
