import logging
from typing import Callable, List

from school_records.core.errors import ConflictError, NotFoundError, ValidationError
from school_records.crud.homework import CRUDHomework
from school_records.crud.student import CRUDStudent
from school_records.crud.submission import CRUDSubmission
from school_records.db.base import utcnow
from school_records.db.models.submission import Submission
from school_records.schemas.submission import SubmissionCreate, SubmissionGrade, SubmissionOut
from school_records.services.base import (
    check_range,
    clamp_limit,
    clamp_offset,
    parse_timestamp,
    require,
    unique_guard,
)

logger = logging.getLogger(__name__)


class SubmissionService:
    def __init__(
        self,
        submissions: CRUDSubmission,
        students: CRUDStudent,
        homework: CRUDHomework,
        clock: Callable = utcnow,
    ):
        self.submissions = submissions
        self.students = students
        self.homework = homework
        self.clock = clock

    def submit(self, req: SubmissionCreate) -> SubmissionOut:
        if req.submission_date is not None:
            submitted_at = parse_timestamp(req.submission_date, "submission_date")
        else:
            submitted_at = self.clock()
        require(self.students, req.student_id, "student")
        require(self.homework, req.homework_id, "homework")

        if self.submissions.get_by_student_and_homework(req.student_id, req.homework_id) is not None:
            logger.warning(
                "Homework %s already submitted by student %s", req.homework_id, req.student_id
            )
            raise ConflictError("homework already submitted")

        submission = Submission(
            student_id=req.student_id,
            homework_id=req.homework_id,
            submission_date=submitted_at,
            status="submitted",
        )
        with unique_guard("homework already submitted"):
            submission = self.submissions.create(submission)
        logger.info("Homework submitted: id=%s", submission.id)
        return SubmissionOut.model_validate(submission)

    def grade(self, req: SubmissionGrade) -> SubmissionOut:
        """Ставит оценку существующей сдаче; новую запись не создаёт."""
        check_range(req.score, 0, None, "score")
        submission = self.submissions.get_by_student_and_homework(req.student_id, req.homework_id)
        if submission is None:
            raise NotFoundError("submission not found")

        hw = self.homework.find_one_by(id=submission.homework_id)
        if hw is not None and req.score > hw.max_score:
            raise ValidationError(f"score must be at most {hw.max_score:g}")

        submission.score = req.score
        submission.status = "graded"
        submission = self.submissions.update(submission)
        logger.info("Submission graded: id=%s score=%s", submission.id, submission.score)
        return SubmissionOut.model_validate(submission)

    def get(self, id: int) -> SubmissionOut:
        return SubmissionOut.model_validate(self.submissions.get(id))

    def list(self, limit: int, offset: int) -> List[SubmissionOut]:
        rows = self.submissions.get_all(clamp_limit(limit), clamp_offset(offset))
        return [SubmissionOut.model_validate(s) for s in rows]

    def by_student(self, student_id: int) -> List[SubmissionOut]:
        return [SubmissionOut.model_validate(s) for s in self.submissions.get_by_student(student_id)]

    def by_homework(self, homework_id: int) -> List[SubmissionOut]:
        return [SubmissionOut.model_validate(s) for s in self.submissions.get_by_homework(homework_id)]

    def pending_by_student(self, student_id: int) -> List[SubmissionOut]:
        rows = self.submissions.get_pending_by_student(student_id)
        return [SubmissionOut.model_validate(s) for s in rows]

    def delete(self, id: int) -> None:
        self.submissions.get(id)
        self.submissions.delete(id)
        logger.info("Submission deleted: id=%s", id)
