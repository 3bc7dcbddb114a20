from datetime import date
from typing import List

from sqlalchemy.orm import Session

from school_records.crud.base import CRUDBase
from school_records.db.models.attendance import Attendance


class CRUDAttendance(CRUDBase[Attendance]):
    entity_name = "attendance"

    def __init__(self, db: Session):
        super().__init__(Attendance, db)

    def get_by_student(self, student_id: int) -> List[Attendance]:
        return self.find_by(student_id=student_id)

    def get_by_course(self, course_id: int) -> List[Attendance]:
        return self.find_by(course_id=course_id)

    def get_by_student_and_course(self, student_id: int, course_id: int) -> List[Attendance]:
        return self.find_by(student_id=student_id, course_id=course_id)

    def get_by_date_range(self, start: date, end: date) -> List[Attendance]:
        return self.find_in_range("date", start, end)
