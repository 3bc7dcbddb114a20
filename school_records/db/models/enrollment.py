# school_records/db/models/enrollment.py
from sqlalchemy import Column, Integer, Date, ForeignKey, Index
from school_records.db.base import Base, EntityMixin, LIVE_ROWS


class Enrollment(EntityMixin, Base):
    """Запись студента на курс (таблица student_courses)."""
    __tablename__ = "student_courses"

    student_id = Column(Integer, ForeignKey("students.id"), nullable=False, index=True)
    course_id = Column(Integer, ForeignKey("courses.id"), nullable=False, index=True)
    enrollment_date = Column(Date, nullable=False)

    __table_args__ = (
        Index("uq_student_courses_pair", "student_id", "course_id", unique=True,
              sqlite_where=LIVE_ROWS, postgresql_where=LIVE_ROWS),
    )
