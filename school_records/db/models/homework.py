from sqlalchemy import Column, Integer, Float, String, Text, ForeignKey, DateTime
from school_records.db.base import Base, EntityMixin


class Homework(EntityMixin, Base):
    __tablename__ = "homework"

    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    course_id = Column(Integer, ForeignKey("courses.id"), nullable=False, index=True)
    due_date = Column(DateTime, nullable=False, index=True)  # UTC
    max_score = Column(Float, nullable=False, default=100)
