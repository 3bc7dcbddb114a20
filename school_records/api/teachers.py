from fastapi import APIRouter, Depends, status

from school_records.api.deps import get_teacher_service
from school_records.services.base import clamp_limit, clamp_offset
from school_records.schemas.common import ListOut, Message, PageOut
from school_records.schemas.teacher import TeacherCreate, TeacherOut, TeacherUpdate
from school_records.services.teacher import TeacherService

router = APIRouter()


@router.post("/", response_model=TeacherOut, status_code=status.HTTP_201_CREATED)
def create_teacher(teacher_in: TeacherCreate, service: TeacherService = Depends(get_teacher_service)):
    return service.create(teacher_in)


@router.get("/", response_model=PageOut[TeacherOut])
def read_teachers(
    limit: int = 10,
    offset: int = 0,
    service: TeacherService = Depends(get_teacher_service),
):
    data = service.list(limit, offset)
    return {"data": data, "count": len(data), "limit": clamp_limit(limit), "offset": clamp_offset(offset)}


@router.get("/department/{dept_id}", response_model=ListOut[TeacherOut])
def read_teachers_by_department(dept_id: int, service: TeacherService = Depends(get_teacher_service)):
    data = service.by_department(dept_id)
    return {"data": data, "count": len(data)}


@router.get("/{teacher_id}", response_model=TeacherOut)
def read_teacher(teacher_id: int, service: TeacherService = Depends(get_teacher_service)):
    return service.get(teacher_id)


@router.put("/{teacher_id}", response_model=TeacherOut)
def update_teacher(
    teacher_id: int,
    teacher_in: TeacherUpdate,
    service: TeacherService = Depends(get_teacher_service),
):
    return service.update(teacher_id, teacher_in)


@router.delete("/{teacher_id}", response_model=Message)
def delete_teacher(teacher_id: int, service: TeacherService = Depends(get_teacher_service)):
    service.delete(teacher_id)
    return {"message": "teacher deleted successfully"}
