import logging
from typing import List

from school_records.core.errors import ValidationError
from school_records.crud.exam import CRUDExam
from school_records.crud.grade import CRUDGrade
from school_records.crud.student import CRUDStudent
from school_records.db.models.grade import Grade
from school_records.schemas.grade import GradeCreate, GradeOut, GradeUpdate
from school_records.services.base import (
    check_range,
    clamp_limit,
    clamp_offset,
    require,
    supplied,
)

logger = logging.getLogger(__name__)


class GradeService:
    def __init__(self, grades: CRUDGrade, students: CRUDStudent, exams: CRUDExam):
        self.grades = grades
        self.students = students
        self.exams = exams

    def _check_max_score(self, score: float, exam_id: int) -> None:
        exam = self.exams.find_one_by(id=exam_id)
        if exam is not None and score > exam.max_score:
            raise ValidationError(f"score must be at most {exam.max_score:g}")

    def create(self, req: GradeCreate) -> GradeOut:
        check_range(req.score, 0, None, "score")
        require(self.students, req.student_id, "student")
        require(self.exams, req.exam_id, "exam")
        self._check_max_score(req.score, req.exam_id)

        grade = self.grades.create(Grade(
            student_id=req.student_id,
            exam_id=req.exam_id,
            score=req.score,
        ))
        logger.info("Grade created: id=%s", grade.id)
        return GradeOut.model_validate(grade)

    def get(self, id: int) -> GradeOut:
        return GradeOut.model_validate(self.grades.get(id))

    def list(self, limit: int, offset: int) -> List[GradeOut]:
        rows = self.grades.get_all(clamp_limit(limit), clamp_offset(offset))
        return [GradeOut.model_validate(g) for g in rows]

    def by_student(self, student_id: int) -> List[GradeOut]:
        return [GradeOut.model_validate(g) for g in self.grades.get_by_student(student_id)]

    def by_exam(self, exam_id: int) -> List[GradeOut]:
        return [GradeOut.model_validate(g) for g in self.grades.get_by_exam(exam_id)]

    def student_average(self, student_id: int) -> float:
        # нет оценок: 0, а не ошибка
        return self.grades.get_student_average(student_id)

    def exam_average(self, exam_id: int) -> float:
        return self.grades.get_exam_average(exam_id)

    def update(self, id: int, req: GradeUpdate) -> GradeOut:
        changes = supplied(req, required=("score",))
        if "score" in changes:
            check_range(changes["score"], 0, None, "score")

        grade = self.grades.get(id)
        if "score" in changes:
            self._check_max_score(changes["score"], grade.exam_id)
            grade.score = changes["score"]
        grade = self.grades.update(grade)
        logger.info("Grade updated: id=%s fields=%s", id, sorted(changes))
        return GradeOut.model_validate(grade)

    def delete(self, id: int) -> None:
        self.grades.get(id)
        self.grades.delete(id)
        logger.info("Grade deleted: id=%s", id)
