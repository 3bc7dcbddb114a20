from datetime import date
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from school_records.crud.base import CRUDBase
from school_records.db.models.student import Student


class CRUDStudent(CRUDBase[Student]):
    entity_name = "student"

    def __init__(self, db: Session):
        super().__init__(Student, db)

    def get_by_email(self, email: str) -> Optional[Student]:
        return self.find_one_by(email=email)

    def search(self, query: str, limit: int) -> List[Student]:
        pattern = f"%{query}%"
        return self._all(
            self._live()
            .filter(or_(
                Student.first_name.ilike(pattern),
                Student.last_name.ilike(pattern),
                Student.email.ilike(pattern),
            ))
            .order_by(Student.id)
            .limit(limit)
        )

    def get_enrolled_before(self, before: date) -> List[Student]:
        return self._all(
            self._live().filter(Student.enrollment_date < before).order_by(Student.id)
        )
