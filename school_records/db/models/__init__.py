from school_records.db.base import Base
from school_records.db.models.department import Department
from school_records.db.models.teacher import Teacher
from school_records.db.models.student import Student
from school_records.db.models.course import Course
from school_records.db.models.enrollment import Enrollment
from school_records.db.models.attendance import Attendance, ATTENDANCE_STATUSES
from school_records.db.models.homework import Homework
from school_records.db.models.submission import Submission, SUBMISSION_STATUSES
from school_records.db.models.exam import Exam
from school_records.db.models.grade import Grade

__all__ = [
    "Base",
    "Department",
    "Teacher",
    "Student",
    "Course",
    "Enrollment",
    "Attendance",
    "Homework",
    "Submission",
    "Exam",
    "Grade",
    "ATTENDANCE_STATUSES",
    "SUBMISSION_STATUSES",
]
