from datetime import datetime
from typing import List

from sqlalchemy.orm import Session

from school_records.crud.base import CRUDBase
from school_records.db.models.exam import Exam


class CRUDExam(CRUDBase[Exam]):
    entity_name = "exam"

    def __init__(self, db: Session):
        super().__init__(Exam, db)

    def get_by_course(self, course_id: int) -> List[Exam]:
        return self.find_by(course_id=course_id)

    def get_upcoming(self, now: datetime, limit: int) -> List[Exam]:
        return self._all(
            self._live()
            .filter(Exam.exam_date > now)
            .order_by(Exam.exam_date.asc(), Exam.id)
            .limit(limit)
        )

    def get_by_date_range(self, start: datetime, end: datetime) -> List[Exam]:
        return self.find_in_range("exam_date", start, end)
