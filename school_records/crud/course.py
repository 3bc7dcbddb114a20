from typing import List, Optional

from sqlalchemy.orm import Session

from school_records.crud.base import CRUDBase
from school_records.db.models.course import Course


class CRUDCourse(CRUDBase[Course]):
    entity_name = "course"

    def __init__(self, db: Session):
        super().__init__(Course, db)

    def get_by_code(self, code: str) -> Optional[Course]:
        return self.find_one_by(code=code)

    def get_by_department(self, department_id: int) -> List[Course]:
        return self.find_by(department_id=department_id)

    def get_by_teacher(self, teacher_id: int) -> List[Course]:
        return self.find_by(teacher_id=teacher_id)
