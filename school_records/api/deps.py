# school_records/api/deps.py
"""
Зависимости FastAPI: сессия БД на запрос и сборка сервисов.

Каждый сервис получает свои store явно через конструктор, глобального
состояния кроме фабрики сессий нет.
"""
from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from school_records.crud import (
    CRUDAttendance,
    CRUDCourse,
    CRUDDepartment,
    CRUDEnrollment,
    CRUDExam,
    CRUDGrade,
    CRUDHomework,
    CRUDStudent,
    CRUDSubmission,
    CRUDTeacher,
)
from school_records.db.session import SessionLocal
from school_records.services import (
    AttendanceService,
    CourseService,
    DepartmentService,
    EnrollmentService,
    ExamService,
    GradeService,
    HomeworkService,
    StudentService,
    SubmissionService,
    TeacherService,
)


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_department_service(db: Session = Depends(get_db)) -> DepartmentService:
    return DepartmentService(CRUDDepartment(db))


def get_teacher_service(db: Session = Depends(get_db)) -> TeacherService:
    return TeacherService(CRUDTeacher(db), CRUDDepartment(db))


def get_student_service(db: Session = Depends(get_db)) -> StudentService:
    return StudentService(CRUDStudent(db))


def get_course_service(db: Session = Depends(get_db)) -> CourseService:
    return CourseService(CRUDCourse(db), CRUDDepartment(db), CRUDTeacher(db))


def get_enrollment_service(db: Session = Depends(get_db)) -> EnrollmentService:
    return EnrollmentService(CRUDEnrollment(db), CRUDStudent(db), CRUDCourse(db))


def get_attendance_service(db: Session = Depends(get_db)) -> AttendanceService:
    return AttendanceService(CRUDAttendance(db), CRUDStudent(db), CRUDCourse(db))


def get_homework_service(db: Session = Depends(get_db)) -> HomeworkService:
    return HomeworkService(CRUDHomework(db), CRUDCourse(db))


def get_submission_service(db: Session = Depends(get_db)) -> SubmissionService:
    return SubmissionService(CRUDSubmission(db), CRUDStudent(db), CRUDHomework(db))


def get_exam_service(db: Session = Depends(get_db)) -> ExamService:
    return ExamService(CRUDExam(db), CRUDCourse(db))


def get_grade_service(db: Session = Depends(get_db)) -> GradeService:
    return GradeService(CRUDGrade(db), CRUDStudent(db), CRUDExam(db))
