import logging
from typing import List

from school_records.core.errors import ValidationError
from school_records.crud.attendance import CRUDAttendance
from school_records.crud.course import CRUDCourse
from school_records.crud.student import CRUDStudent
from school_records.db.models.attendance import Attendance, ATTENDANCE_STATUSES
from school_records.schemas.attendance import AttendanceCreate, AttendanceOut, AttendanceUpdate
from school_records.services.base import (
    check_choice,
    clamp_limit,
    clamp_offset,
    parse_date,
    require,
    supplied,
)

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(self, attendance: CRUDAttendance, students: CRUDStudent, courses: CRUDCourse):
        self.attendance = attendance
        self.students = students
        self.courses = courses

    def create(self, req: AttendanceCreate) -> AttendanceOut:
        day = parse_date(req.date, "date")
        check_choice(req.status, ATTENDANCE_STATUSES, "status")
        require(self.students, req.student_id, "student")
        require(self.courses, req.course_id, "course")

        record = self.attendance.create(Attendance(
            student_id=req.student_id,
            course_id=req.course_id,
            date=day,
            status=req.status,
        ))
        logger.info("Attendance recorded: id=%s status=%s", record.id, record.status)
        return AttendanceOut.model_validate(record)

    def get(self, id: int) -> AttendanceOut:
        return AttendanceOut.model_validate(self.attendance.get(id))

    def list(self, limit: int, offset: int) -> List[AttendanceOut]:
        rows = self.attendance.get_all(clamp_limit(limit), clamp_offset(offset))
        return [AttendanceOut.model_validate(a) for a in rows]

    def by_student(self, student_id: int) -> List[AttendanceOut]:
        return [AttendanceOut.model_validate(a) for a in self.attendance.get_by_student(student_id)]

    def by_course(self, course_id: int) -> List[AttendanceOut]:
        return [AttendanceOut.model_validate(a) for a in self.attendance.get_by_course(course_id)]

    def by_student_and_course(self, student_id: int, course_id: int) -> List[AttendanceOut]:
        rows = self.attendance.get_by_student_and_course(student_id, course_id)
        return [AttendanceOut.model_validate(a) for a in rows]

    def by_date_range(self, start: str, end: str) -> List[AttendanceOut]:
        start_day = parse_date(start, "start")
        end_day = parse_date(end, "end")
        if start_day > end_day:
            raise ValidationError("start must not be after end")
        rows = self.attendance.get_by_date_range(start_day, end_day)
        return [AttendanceOut.model_validate(a) for a in rows]

    def update(self, id: int, req: AttendanceUpdate) -> AttendanceOut:
        changes = supplied(req, required=("status",))
        if "status" in changes:
            check_choice(changes["status"], ATTENDANCE_STATUSES, "status")

        record = self.attendance.get(id)
        for field, value in changes.items():
            setattr(record, field, value)
        record = self.attendance.update(record)
        logger.info("Attendance updated: id=%s fields=%s", id, sorted(changes))
        return AttendanceOut.model_validate(record)

    def delete(self, id: int) -> None:
        self.attendance.get(id)
        self.attendance.delete(id)
        logger.info("Attendance deleted: id=%s", id)
