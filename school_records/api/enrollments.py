from fastapi import APIRouter, Depends, Query, status

from school_records.api.deps import get_enrollment_service
from school_records.services.base import clamp_limit, clamp_offset
from school_records.schemas.common import ListOut, Message, PageOut
from school_records.schemas.enrollment import EnrollmentCreate, EnrollmentOut
from school_records.services.enrollment import EnrollmentService

router = APIRouter()


@router.post("/", response_model=EnrollmentOut, status_code=status.HTTP_201_CREATED)
def enroll_student(
    enrollment_in: EnrollmentCreate,
    service: EnrollmentService = Depends(get_enrollment_service),
):
    return service.enroll(enrollment_in)


@router.get("/", response_model=PageOut[EnrollmentOut])
def read_enrollments(
    limit: int = 10,
    offset: int = 0,
    service: EnrollmentService = Depends(get_enrollment_service),
):
    data = service.list(limit, offset)
    return {"data": data, "count": len(data), "limit": clamp_limit(limit), "offset": clamp_offset(offset)}


@router.get("/enrolled-after", response_model=ListOut[EnrollmentOut])
def read_enrollments_after(
    date: str = Query(..., description="YYYY-MM-DD"),
    service: EnrollmentService = Depends(get_enrollment_service),
):
    data = service.enrolled_after(date)
    return {"data": data, "count": len(data)}


@router.get("/student/{student_id}", response_model=ListOut[EnrollmentOut])
def read_enrollments_by_student(
    student_id: int,
    service: EnrollmentService = Depends(get_enrollment_service),
):
    data = service.by_student(student_id)
    return {"data": data, "count": len(data)}


@router.get("/course/{course_id}", response_model=ListOut[EnrollmentOut])
def read_enrollments_by_course(
    course_id: int,
    service: EnrollmentService = Depends(get_enrollment_service),
):
    data = service.by_course(course_id)
    return {"data": data, "count": len(data)}


@router.get("/{enrollment_id}", response_model=EnrollmentOut)
def read_enrollment(enrollment_id: int, service: EnrollmentService = Depends(get_enrollment_service)):
    return service.get(enrollment_id)


@router.delete("/{enrollment_id}", response_model=Message)
def unenroll_student(enrollment_id: int, service: EnrollmentService = Depends(get_enrollment_service)):
    service.unenroll(enrollment_id)
    return {"message": "enrollment deleted successfully"}
