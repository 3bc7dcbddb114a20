from sqlalchemy import Column, Integer, Float, String, ForeignKey, DateTime
from school_records.db.base import Base, EntityMixin


class Exam(EntityMixin, Base):
    __tablename__ = "exams"

    title = Column(String(200), nullable=False)
    course_id = Column(Integer, ForeignKey("courses.id"), nullable=False, index=True)
    exam_date = Column(DateTime, nullable=False, index=True)  # UTC
    duration = Column(Integer, nullable=False)  # минуты, 15..300
    max_score = Column(Float, nullable=False, default=100)
