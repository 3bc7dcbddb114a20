# school_records/db/models/attendance.py
from sqlalchemy import Column, Integer, Date, ForeignKey, Enum
from school_records.db.base import Base, EntityMixin

# Статус посещения:
# "present": присутствовал
# "absent": отсутствовал
# "late": опоздал
ATTENDANCE_STATUSES = ("present", "absent", "late")


class Attendance(EntityMixin, Base):
    __tablename__ = "attendances"

    student_id = Column(Integer, ForeignKey("students.id"), nullable=False, index=True)
    course_id = Column(Integer, ForeignKey("courses.id"), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)  # например, 2025-09-15
    status = Column(
        Enum(*ATTENDANCE_STATUSES, name="attendance_status"),
        nullable=False,
        default="present",
    )
