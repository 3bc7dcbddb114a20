from sqlalchemy import Column, Integer, Float, ForeignKey
from school_records.db.base import Base, EntityMixin


class Grade(EntityMixin, Base):
    __tablename__ = "grades"

    student_id = Column(Integer, ForeignKey("students.id"), nullable=False, index=True)
    exam_id = Column(Integer, ForeignKey("exams.id"), nullable=False, index=True)
    score = Column(Float, nullable=False)
