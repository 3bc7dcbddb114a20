from school_records.services.department import DepartmentService
from school_records.services.teacher import TeacherService
from school_records.services.student import StudentService
from school_records.services.course import CourseService
from school_records.services.enrollment import EnrollmentService
from school_records.services.attendance import AttendanceService
from school_records.services.homework import HomeworkService
from school_records.services.submission import SubmissionService
from school_records.services.exam import ExamService
from school_records.services.grade import GradeService

__all__ = [
    "DepartmentService",
    "TeacherService",
    "StudentService",
    "CourseService",
    "EnrollmentService",
    "AttendanceService",
    "HomeworkService",
    "SubmissionService",
    "ExamService",
    "GradeService",
]
