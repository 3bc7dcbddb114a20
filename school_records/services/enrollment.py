import logging
from typing import List

from school_records.core.errors import ConflictError
from school_records.crud.course import CRUDCourse
from school_records.crud.enrollment import CRUDEnrollment
from school_records.crud.student import CRUDStudent
from school_records.db.models.enrollment import Enrollment
from school_records.schemas.enrollment import EnrollmentCreate, EnrollmentOut
from school_records.services.base import (
    clamp_limit,
    clamp_offset,
    parse_date,
    require,
    unique_guard,
)

logger = logging.getLogger(__name__)


class EnrollmentService:
    def __init__(self, enrollments: CRUDEnrollment, students: CRUDStudent, courses: CRUDCourse):
        self.enrollments = enrollments
        self.students = students
        self.courses = courses

    def enroll(self, req: EnrollmentCreate) -> EnrollmentOut:
        enrollment_date = parse_date(req.enrollment_date, "enrollment_date")
        require(self.students, req.student_id, "student")
        require(self.courses, req.course_id, "course")

        if self.enrollments.get_by_student_and_course(req.student_id, req.course_id) is not None:
            logger.warning(
                "Student %s already enrolled in course %s", req.student_id, req.course_id
            )
            raise ConflictError("student already enrolled in this course")

        enrollment = Enrollment(
            student_id=req.student_id,
            course_id=req.course_id,
            enrollment_date=enrollment_date,
        )
        with unique_guard("student already enrolled in this course"):
            enrollment = self.enrollments.create(enrollment)
        logger.info("Enrollment created: id=%s", enrollment.id)
        return EnrollmentOut.model_validate(enrollment)

    def get(self, id: int) -> EnrollmentOut:
        return EnrollmentOut.model_validate(self.enrollments.get(id))

    def list(self, limit: int, offset: int) -> List[EnrollmentOut]:
        rows = self.enrollments.get_all(clamp_limit(limit), clamp_offset(offset))
        return [EnrollmentOut.model_validate(e) for e in rows]

    def by_student(self, student_id: int) -> List[EnrollmentOut]:
        return [EnrollmentOut.model_validate(e) for e in self.enrollments.get_by_student(student_id)]

    def by_course(self, course_id: int) -> List[EnrollmentOut]:
        return [EnrollmentOut.model_validate(e) for e in self.enrollments.get_by_course(course_id)]

    def enrolled_after(self, after: str) -> List[EnrollmentOut]:
        day = parse_date(after, "date")
        return [EnrollmentOut.model_validate(e) for e in self.enrollments.get_enrolled_after(day)]

    def unenroll(self, id: int) -> None:
        self.enrollments.get(id)
        self.enrollments.delete(id)
        logger.info("Enrollment deleted: id=%s", id)
