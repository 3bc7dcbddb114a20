from typing import List, Optional

from sqlalchemy.orm import Session

from school_records.crud.base import CRUDBase
from school_records.db.models.teacher import Teacher


class CRUDTeacher(CRUDBase[Teacher]):
    entity_name = "teacher"

    def __init__(self, db: Session):
        super().__init__(Teacher, db)

    def get_by_email(self, email: str) -> Optional[Teacher]:
        return self.find_one_by(email=email)

    def get_by_department(self, department_id: int) -> List[Teacher]:
        return self.find_by(department_id=department_id)
