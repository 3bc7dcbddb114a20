from fastapi import APIRouter, Depends, Query, status

from school_records.api.deps import get_attendance_service
from school_records.services.base import clamp_limit, clamp_offset
from school_records.schemas.attendance import AttendanceCreate, AttendanceOut, AttendanceUpdate
from school_records.schemas.common import ListOut, Message, PageOut
from school_records.services.attendance import AttendanceService

router = APIRouter()


@router.post("/", response_model=AttendanceOut, status_code=status.HTTP_201_CREATED)
def create_attendance_record(
    record: AttendanceCreate,
    service: AttendanceService = Depends(get_attendance_service),
):
    return service.create(record)


@router.get("/", response_model=PageOut[AttendanceOut])
def read_attendance(
    limit: int = 10,
    offset: int = 0,
    service: AttendanceService = Depends(get_attendance_service),
):
    data = service.list(limit, offset)
    return {"data": data, "count": len(data), "limit": clamp_limit(limit), "offset": clamp_offset(offset)}


# Все записи за период (границы включительно)
@router.get("/range", response_model=ListOut[AttendanceOut])
def read_attendance_in_range(
    start: str = Query(..., description="YYYY-MM-DD"),
    end: str = Query(..., description="YYYY-MM-DD"),
    service: AttendanceService = Depends(get_attendance_service),
):
    data = service.by_date_range(start, end)
    return {"data": data, "count": len(data)}


@router.get("/student/{student_id}", response_model=ListOut[AttendanceOut])
def read_attendance_by_student(
    student_id: int,
    service: AttendanceService = Depends(get_attendance_service),
):
    data = service.by_student(student_id)
    return {"data": data, "count": len(data)}


@router.get("/course/{course_id}", response_model=ListOut[AttendanceOut])
def read_attendance_by_course(
    course_id: int,
    service: AttendanceService = Depends(get_attendance_service),
):
    data = service.by_course(course_id)
    return {"data": data, "count": len(data)}


@router.get("/student/{student_id}/course/{course_id}", response_model=ListOut[AttendanceOut])
def read_attendance_by_student_and_course(
    student_id: int,
    course_id: int,
    service: AttendanceService = Depends(get_attendance_service),
):
    data = service.by_student_and_course(student_id, course_id)
    return {"data": data, "count": len(data)}


@router.get("/{record_id}", response_model=AttendanceOut)
def read_attendance_record(record_id: int, service: AttendanceService = Depends(get_attendance_service)):
    return service.get(record_id)


# Обновить статус посещения
@router.put("/{record_id}", response_model=AttendanceOut)
def update_attendance_record(
    record_id: int,
    record: AttendanceUpdate,
    service: AttendanceService = Depends(get_attendance_service),
):
    return service.update(record_id, record)


@router.delete("/{record_id}", response_model=Message)
def delete_attendance_record(record_id: int, service: AttendanceService = Depends(get_attendance_service)):
    service.delete(record_id)
    return {"message": "attendance deleted successfully"}
