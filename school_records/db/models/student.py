from sqlalchemy import Column, String, Date, Index
from school_records.db.base import Base, EntityMixin, LIVE_ROWS


class Student(EntityMixin, Base):
    __tablename__ = "students"

    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    email = Column(String(100), nullable=False)
    phone = Column(String(20), nullable=True)
    date_of_birth = Column(Date, nullable=False)
    enrollment_date = Column(Date, nullable=False)

    __table_args__ = (
        Index("uq_students_email", "email", unique=True,
              sqlite_where=LIVE_ROWS, postgresql_where=LIVE_ROWS),
    )
