import logging
from typing import Callable, List

from school_records.crud.course import CRUDCourse
from school_records.crud.homework import CRUDHomework
from school_records.db.base import utcnow
from school_records.db.models.homework import Homework
from school_records.schemas.homework import HomeworkCreate, HomeworkOut, HomeworkUpdate
from school_records.services.base import (
    check_range,
    clamp_limit,
    clamp_offset,
    parse_timestamp,
    require,
    supplied,
)

logger = logging.getLogger(__name__)

MIN_MAX_SCORE, MAX_MAX_SCORE = 1, 1000


class HomeworkService:
    def __init__(self, homework: CRUDHomework, courses: CRUDCourse, clock: Callable = utcnow):
        self.homework = homework
        self.courses = courses
        self.clock = clock

    def create(self, req: HomeworkCreate) -> HomeworkOut:
        due_date = parse_timestamp(req.due_date, "due_date")
        check_range(req.max_score, MIN_MAX_SCORE, MAX_MAX_SCORE, "max_score")
        require(self.courses, req.course_id, "course")

        hw = self.homework.create(Homework(
            title=req.title,
            description=req.description,
            course_id=req.course_id,
            due_date=due_date,
            max_score=req.max_score,
        ))
        logger.info("Homework created: id=%s course_id=%s", hw.id, hw.course_id)
        return HomeworkOut.model_validate(hw)

    def get(self, id: int) -> HomeworkOut:
        return HomeworkOut.model_validate(self.homework.get(id))

    def list(self, limit: int, offset: int) -> List[HomeworkOut]:
        rows = self.homework.get_all(clamp_limit(limit), clamp_offset(offset))
        return [HomeworkOut.model_validate(h) for h in rows]

    def by_course(self, course_id: int) -> List[HomeworkOut]:
        return [HomeworkOut.model_validate(h) for h in self.homework.get_by_course(course_id)]

    def upcoming(self, limit: int = None) -> List[HomeworkOut]:
        rows = self.homework.get_upcoming(self.clock(), clamp_limit(limit))
        return [HomeworkOut.model_validate(h) for h in rows]

    def overdue(self) -> List[HomeworkOut]:
        return [HomeworkOut.model_validate(h) for h in self.homework.get_overdue(self.clock())]

    def update(self, id: int, req: HomeworkUpdate) -> HomeworkOut:
        changes = supplied(req, required=("title", "due_date", "max_score"))
        if "due_date" in changes:
            changes["due_date"] = parse_timestamp(changes["due_date"], "due_date")
        if "max_score" in changes:
            check_range(changes["max_score"], MIN_MAX_SCORE, MAX_MAX_SCORE, "max_score")

        hw = self.homework.get(id)
        for field, value in changes.items():
            setattr(hw, field, value)
        hw = self.homework.update(hw)
        logger.info("Homework updated: id=%s fields=%s", id, sorted(changes))
        return HomeworkOut.model_validate(hw)

    def delete(self, id: int) -> None:
        self.homework.get(id)
        self.homework.delete(id)
        logger.info("Homework deleted: id=%s", id)
