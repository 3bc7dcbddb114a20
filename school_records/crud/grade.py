from typing import List

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from school_records.crud.base import CRUDBase
from school_records.db.models.grade import Grade


class CRUDGrade(CRUDBase[Grade]):
    entity_name = "grade"

    def __init__(self, db: Session):
        super().__init__(Grade, db)

    def get_by_student(self, student_id: int) -> List[Grade]:
        return self.find_by(student_id=student_id)

    def get_by_exam(self, exam_id: int) -> List[Grade]:
        return self.find_by(exam_id=exam_id)

    def _average(self, *criteria) -> float:
        try:
            avg = (
                self.db.query(func.avg(Grade.score))
                .filter(Grade.deleted_at.is_(None), *criteria)
                .scalar()
            )
        except SQLAlchemyError as e:
            raise self._fail("average") from e
        # AVG по пустому набору даёт NULL
        return float(avg) if avg is not None else 0.0

    def get_student_average(self, student_id: int) -> float:
        return self._average(Grade.student_id == student_id)

    def get_exam_average(self, exam_id: int) -> float:
        return self._average(Grade.exam_id == exam_id)
