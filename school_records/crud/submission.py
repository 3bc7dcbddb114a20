from typing import List, Optional

from sqlalchemy.orm import Session

from school_records.crud.base import CRUDBase
from school_records.db.models.submission import Submission


class CRUDSubmission(CRUDBase[Submission]):
    entity_name = "submission"

    def __init__(self, db: Session):
        super().__init__(Submission, db)

    def get_by_student(self, student_id: int) -> List[Submission]:
        return self.find_by(student_id=student_id)

    def get_by_homework(self, homework_id: int) -> List[Submission]:
        return self.find_by(homework_id=homework_id)

    def get_by_student_and_homework(self, student_id: int, homework_id: int) -> Optional[Submission]:
        return self.find_one_by(student_id=student_id, homework_id=homework_id)

    def get_by_status(self, status: str) -> List[Submission]:
        return self.find_by(status=status)

    def get_pending_by_student(self, student_id: int) -> List[Submission]:
        return self.find_by(student_id=student_id, status="pending")
