# school_records/db/models/submission.py
from sqlalchemy import Column, Integer, Float, ForeignKey, DateTime, Enum, Index
from school_records.db.base import Base, EntityMixin, LIVE_ROWS

# pending → submitted → graded
SUBMISSION_STATUSES = ("pending", "submitted", "graded")


class Submission(EntityMixin, Base):
    """Сдача домашнего задания студентом (таблица students_homework)."""
    __tablename__ = "students_homework"

    student_id = Column(Integer, ForeignKey("students.id"), nullable=False, index=True)
    homework_id = Column(Integer, ForeignKey("homework.id"), nullable=False, index=True)

    submission_date = Column(DateTime, nullable=True)
    score = Column(Float, nullable=True)
    status = Column(
        Enum(*SUBMISSION_STATUSES, name="submission_status"),
        nullable=False,
        default="pending",
    )

    __table_args__ = (
        Index("uq_students_homework_pair", "student_id", "homework_id", unique=True,
              sqlite_where=LIVE_ROWS, postgresql_where=LIVE_ROWS),
    )
