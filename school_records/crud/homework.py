from datetime import datetime
from typing import List

from sqlalchemy.orm import Session

from school_records.crud.base import CRUDBase
from school_records.db.models.homework import Homework


class CRUDHomework(CRUDBase[Homework]):
    entity_name = "homework"

    def __init__(self, db: Session):
        super().__init__(Homework, db)

    def get_by_course(self, course_id: int) -> List[Homework]:
        return self.find_by(course_id=course_id)

    def get_upcoming(self, now: datetime, limit: int) -> List[Homework]:
        return self._all(
            self._live()
            .filter(Homework.due_date > now)
            .order_by(Homework.due_date.asc(), Homework.id)
            .limit(limit)
        )

    def get_overdue(self, now: datetime) -> List[Homework]:
        return self._all(
            self._live()
            .filter(Homework.due_date < now)
            .order_by(Homework.due_date.desc(), Homework.id)
        )
