import logging
from typing import Callable, List

from school_records.core.errors import ValidationError
from school_records.crud.course import CRUDCourse
from school_records.crud.exam import CRUDExam
from school_records.db.base import utcnow
from school_records.db.models.exam import Exam
from school_records.schemas.exam import ExamCreate, ExamOut, ExamUpdate
from school_records.services.base import (
    check_range,
    clamp_limit,
    clamp_offset,
    parse_timestamp,
    require,
    supplied,
)

logger = logging.getLogger(__name__)

MIN_DURATION, MAX_DURATION = 15, 300
MIN_MAX_SCORE, MAX_MAX_SCORE = 1, 1000


class ExamService:
    def __init__(self, exams: CRUDExam, courses: CRUDCourse, clock: Callable = utcnow):
        self.exams = exams
        self.courses = courses
        self.clock = clock

    def create(self, req: ExamCreate) -> ExamOut:
        exam_date = parse_timestamp(req.exam_date, "exam_date")
        check_range(req.duration, MIN_DURATION, MAX_DURATION, "duration")
        check_range(req.max_score, MIN_MAX_SCORE, MAX_MAX_SCORE, "max_score")
        require(self.courses, req.course_id, "course")

        exam = self.exams.create(Exam(
            title=req.title,
            course_id=req.course_id,
            exam_date=exam_date,
            duration=req.duration,
            max_score=req.max_score,
        ))
        logger.info("Exam created: id=%s course_id=%s", exam.id, exam.course_id)
        return ExamOut.model_validate(exam)

    def get(self, id: int) -> ExamOut:
        return ExamOut.model_validate(self.exams.get(id))

    def list(self, limit: int, offset: int) -> List[ExamOut]:
        rows = self.exams.get_all(clamp_limit(limit), clamp_offset(offset))
        return [ExamOut.model_validate(e) for e in rows]

    def by_course(self, course_id: int) -> List[ExamOut]:
        return [ExamOut.model_validate(e) for e in self.exams.get_by_course(course_id)]

    def upcoming(self, limit: int = None) -> List[ExamOut]:
        """Экзамены строго после текущего момента, по возрастанию даты."""
        rows = self.exams.get_upcoming(self.clock(), clamp_limit(limit))
        return [ExamOut.model_validate(e) for e in rows]

    def by_date_range(self, start: str, end: str) -> List[ExamOut]:
        start_at = parse_timestamp(start, "start")
        end_at = parse_timestamp(end, "end")
        if start_at > end_at:
            raise ValidationError("start must not be after end")
        return [ExamOut.model_validate(e) for e in self.exams.get_by_date_range(start_at, end_at)]

    def update(self, id: int, req: ExamUpdate) -> ExamOut:
        changes = supplied(req, required=("title", "exam_date", "duration", "max_score"))
        if "exam_date" in changes:
            changes["exam_date"] = parse_timestamp(changes["exam_date"], "exam_date")
        if "duration" in changes:
            check_range(changes["duration"], MIN_DURATION, MAX_DURATION, "duration")
        if "max_score" in changes:
            check_range(changes["max_score"], MIN_MAX_SCORE, MAX_MAX_SCORE, "max_score")

        exam = self.exams.get(id)
        for field, value in changes.items():
            setattr(exam, field, value)
        exam = self.exams.update(exam)
        logger.info("Exam updated: id=%s fields=%s", id, sorted(changes))
        return ExamOut.model_validate(exam)

    def delete(self, id: int) -> None:
        self.exams.get(id)
        self.exams.delete(id)
        logger.info("Exam deleted: id=%s", id)
