from fastapi import APIRouter, Depends, status

from school_records.api.deps import get_homework_service
from school_records.services.base import clamp_limit, clamp_offset
from school_records.schemas.common import ListOut, Message, PageOut
from school_records.schemas.homework import HomeworkCreate, HomeworkOut, HomeworkUpdate
from school_records.services.homework import HomeworkService

router = APIRouter()


@router.post("/", response_model=HomeworkOut, status_code=status.HTTP_201_CREATED)
def create_homework(hw_in: HomeworkCreate, service: HomeworkService = Depends(get_homework_service)):
    return service.create(hw_in)


@router.get("/", response_model=PageOut[HomeworkOut])
def read_homework(
    limit: int = 10,
    offset: int = 0,
    service: HomeworkService = Depends(get_homework_service),
):
    data = service.list(limit, offset)
    return {"data": data, "count": len(data), "limit": clamp_limit(limit), "offset": clamp_offset(offset)}


@router.get("/upcoming", response_model=ListOut[HomeworkOut])
def read_upcoming_homework(limit: int = 10, service: HomeworkService = Depends(get_homework_service)):
    data = service.upcoming(limit)
    return {"data": data, "count": len(data)}


@router.get("/overdue", response_model=ListOut[HomeworkOut])
def read_overdue_homework(service: HomeworkService = Depends(get_homework_service)):
    data = service.overdue()
    return {"data": data, "count": len(data)}


@router.get("/course/{course_id}", response_model=ListOut[HomeworkOut])
def read_homework_by_course(course_id: int, service: HomeworkService = Depends(get_homework_service)):
    data = service.by_course(course_id)
    return {"data": data, "count": len(data)}


@router.get("/{homework_id}", response_model=HomeworkOut)
def read_homework_item(homework_id: int, service: HomeworkService = Depends(get_homework_service)):
    return service.get(homework_id)


@router.put("/{homework_id}", response_model=HomeworkOut)
def update_homework(
    homework_id: int,
    hw_in: HomeworkUpdate,
    service: HomeworkService = Depends(get_homework_service),
):
    return service.update(homework_id, hw_in)


@router.delete("/{homework_id}", response_model=Message)
def delete_homework(homework_id: int, service: HomeworkService = Depends(get_homework_service)):
    service.delete(homework_id)
    return {"message": "homework deleted successfully"}
