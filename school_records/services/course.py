import logging
from typing import List

from school_records.core.errors import ConflictError
from school_records.crud.course import CRUDCourse
from school_records.crud.department import CRUDDepartment
from school_records.crud.teacher import CRUDTeacher
from school_records.db.models.course import Course
from school_records.schemas.course import CourseCreate, CourseOut, CourseUpdate
from school_records.services.base import (
    check_range,
    clamp_limit,
    clamp_offset,
    require,
    supplied,
    unique_guard,
)

logger = logging.getLogger(__name__)

MIN_CREDITS, MAX_CREDITS = 1, 6


class CourseService:
    def __init__(self, courses: CRUDCourse, departments: CRUDDepartment, teachers: CRUDTeacher):
        self.courses = courses
        self.departments = departments
        self.teachers = teachers

    def _check_code(self, code: str, own_id: int = None) -> None:
        existing = self.courses.get_by_code(code)
        if existing is not None and existing.id != own_id:
            logger.warning("Course code already taken: %s", code)
            raise ConflictError("course with this code already exists")

    def create(self, req: CourseCreate) -> CourseOut:
        check_range(req.credits, MIN_CREDITS, MAX_CREDITS, "credits")
        require(self.departments, req.department_id, "department")
        require(self.teachers, req.teacher_id, "teacher")
        self._check_code(req.code)

        course = Course(
            name=req.name,
            code=req.code,
            description=req.description,
            credits=req.credits,
            department_id=req.department_id,
            teacher_id=req.teacher_id,
        )
        with unique_guard("course with this code already exists"):
            course = self.courses.create(course)
        logger.info("Course created: id=%s code=%s", course.id, course.code)
        return CourseOut.model_validate(course)

    def get(self, id: int) -> CourseOut:
        return CourseOut.model_validate(self.courses.get(id))

    def list(self, limit: int, offset: int) -> List[CourseOut]:
        rows = self.courses.get_all(clamp_limit(limit), clamp_offset(offset))
        return [CourseOut.model_validate(c) for c in rows]

    def by_department(self, department_id: int) -> List[CourseOut]:
        return [CourseOut.model_validate(c) for c in self.courses.get_by_department(department_id)]

    def by_teacher(self, teacher_id: int) -> List[CourseOut]:
        return [CourseOut.model_validate(c) for c in self.courses.get_by_teacher(teacher_id)]

    def update(self, id: int, req: CourseUpdate) -> CourseOut:
        changes = supplied(
            req,
            required=("name", "code", "credits", "department_id", "teacher_id"),
        )
        if "credits" in changes:
            check_range(changes["credits"], MIN_CREDITS, MAX_CREDITS, "credits")

        course = self.courses.get(id)
        if "department_id" in changes:
            require(self.departments, changes["department_id"], "department")
        if "teacher_id" in changes:
            require(self.teachers, changes["teacher_id"], "teacher")
        if "code" in changes:
            self._check_code(changes["code"], own_id=course.id)

        for field, value in changes.items():
            setattr(course, field, value)
        with unique_guard("course with this code already exists"):
            course = self.courses.update(course)
        logger.info("Course updated: id=%s fields=%s", id, sorted(changes))
        return CourseOut.model_validate(course)

    def delete(self, id: int) -> None:
        self.courses.get(id)
        self.courses.delete(id)
        logger.info("Course deleted: id=%s", id)
