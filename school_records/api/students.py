# school_records/api/students.py
from fastapi import APIRouter, Depends, Query, status

from school_records.api.deps import get_student_service
from school_records.services.base import clamp_limit, clamp_offset
from school_records.schemas.common import ListOut, Message, PageOut
from school_records.schemas.student import StudentCreate, StudentOut, StudentUpdate
from school_records.services.student import StudentService

router = APIRouter()


@router.post("/", response_model=StudentOut, status_code=status.HTTP_201_CREATED)
def create_student(student_in: StudentCreate, service: StudentService = Depends(get_student_service)):
    return service.create(student_in)


@router.get("/", response_model=PageOut[StudentOut])
def read_students(
    limit: int = 10,
    offset: int = 0,
    service: StudentService = Depends(get_student_service),
):
    data = service.list(limit, offset)
    return {"data": data, "count": len(data), "limit": clamp_limit(limit), "offset": clamp_offset(offset)}


@router.get("/search", response_model=ListOut[StudentOut])
def search_students(
    q: str = Query(..., min_length=1, description="Часть имени, фамилии или email"),
    limit: int = 10,
    service: StudentService = Depends(get_student_service),
):
    data = service.search(q, limit)
    return {"data": data, "count": len(data)}


@router.get("/enrolled-before", response_model=ListOut[StudentOut])
def read_students_enrolled_before(
    date: str = Query(..., description="YYYY-MM-DD"),
    service: StudentService = Depends(get_student_service),
):
    data = service.enrolled_before(date)
    return {"data": data, "count": len(data)}


@router.get("/{student_id}", response_model=StudentOut)
def read_student(student_id: int, service: StudentService = Depends(get_student_service)):
    return service.get(student_id)


@router.put("/{student_id}", response_model=StudentOut)
def update_student(
    student_id: int,
    student_in: StudentUpdate,
    service: StudentService = Depends(get_student_service),
):
    return service.update(student_id, student_in)


@router.delete("/{student_id}", response_model=Message)
def delete_student(student_id: int, service: StudentService = Depends(get_student_service)):
    service.delete(student_id)
    return {"message": "student deleted successfully"}
