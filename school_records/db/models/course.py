from sqlalchemy import Column, Integer, String, Text, ForeignKey, Index
from school_records.db.base import Base, EntityMixin, LIVE_ROWS


class Course(EntityMixin, Base):
    __tablename__ = "courses"

    name = Column(String(100), nullable=False)
    code = Column(String(20), nullable=False)
    description = Column(Text, nullable=True)
    credits = Column(Integer, nullable=False, default=3)  # 1..6
    department_id = Column(Integer, ForeignKey("departments.id"), nullable=False, index=True)
    teacher_id = Column(Integer, ForeignKey("teachers.id"), nullable=False, index=True)

    __table_args__ = (
        Index("uq_courses_code", "code", unique=True,
              sqlite_where=LIVE_ROWS, postgresql_where=LIVE_ROWS),
    )
