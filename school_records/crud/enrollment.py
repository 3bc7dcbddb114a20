from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from school_records.crud.base import CRUDBase
from school_records.db.models.enrollment import Enrollment


class CRUDEnrollment(CRUDBase[Enrollment]):
    entity_name = "enrollment"

    def __init__(self, db: Session):
        super().__init__(Enrollment, db)

    def get_by_student(self, student_id: int) -> List[Enrollment]:
        return self.find_by(student_id=student_id)

    def get_by_course(self, course_id: int) -> List[Enrollment]:
        return self.find_by(course_id=course_id)

    def get_by_student_and_course(self, student_id: int, course_id: int) -> Optional[Enrollment]:
        return self.find_one_by(student_id=student_id, course_id=course_id)

    def get_enrolled_after(self, after: date) -> List[Enrollment]:
        return self._all(
            self._live().filter(Enrollment.enrollment_date > after).order_by(Enrollment.id)
        )
