from school_records.crud.base import CRUDBase
from school_records.crud.department import CRUDDepartment
from school_records.crud.teacher import CRUDTeacher
from school_records.crud.student import CRUDStudent
from school_records.crud.course import CRUDCourse
from school_records.crud.enrollment import CRUDEnrollment
from school_records.crud.attendance import CRUDAttendance
from school_records.crud.homework import CRUDHomework
from school_records.crud.submission import CRUDSubmission
from school_records.crud.exam import CRUDExam
from school_records.crud.grade import CRUDGrade

__all__ = [
    "CRUDBase",
    "CRUDDepartment",
    "CRUDTeacher",
    "CRUDStudent",
    "CRUDCourse",
    "CRUDEnrollment",
    "CRUDAttendance",
    "CRUDHomework",
    "CRUDSubmission",
    "CRUDExam",
    "CRUDGrade",
]
