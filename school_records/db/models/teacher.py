from sqlalchemy import Column, Integer, String, ForeignKey, Index
from school_records.db.base import Base, EntityMixin, LIVE_ROWS


class Teacher(EntityMixin, Base):
    __tablename__ = "teachers"

    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    email = Column(String(100), nullable=False)
    phone = Column(String(20), nullable=True)
    department_id = Column(Integer, ForeignKey("departments.id"), nullable=False, index=True)

    __table_args__ = (
        Index("uq_teachers_email", "email", unique=True,
              sqlite_where=LIVE_ROWS, postgresql_where=LIVE_ROWS),
    )
