from fastapi import APIRouter, Depends, status

from school_records.api.deps import get_course_service
from school_records.services.base import clamp_limit, clamp_offset
from school_records.schemas.common import ListOut, Message, PageOut
from school_records.schemas.course import CourseCreate, CourseOut, CourseUpdate
from school_records.services.course import CourseService

router = APIRouter()


@router.post("/", response_model=CourseOut, status_code=status.HTTP_201_CREATED)
def create_course(course_in: CourseCreate, service: CourseService = Depends(get_course_service)):
    return service.create(course_in)


@router.get("/", response_model=PageOut[CourseOut])
def read_courses(
    limit: int = 10,
    offset: int = 0,
    service: CourseService = Depends(get_course_service),
):
    data = service.list(limit, offset)
    return {"data": data, "count": len(data), "limit": clamp_limit(limit), "offset": clamp_offset(offset)}


@router.get("/department/{dept_id}", response_model=ListOut[CourseOut])
def read_courses_by_department(dept_id: int, service: CourseService = Depends(get_course_service)):
    data = service.by_department(dept_id)
    return {"data": data, "count": len(data)}


@router.get("/teacher/{teacher_id}", response_model=ListOut[CourseOut])
def read_courses_by_teacher(teacher_id: int, service: CourseService = Depends(get_course_service)):
    data = service.by_teacher(teacher_id)
    return {"data": data, "count": len(data)}


@router.get("/{course_id}", response_model=CourseOut)
def read_course(course_id: int, service: CourseService = Depends(get_course_service)):
    return service.get(course_id)


@router.put("/{course_id}", response_model=CourseOut)
def update_course(
    course_id: int,
    course_in: CourseUpdate,
    service: CourseService = Depends(get_course_service),
):
    return service.update(course_id, course_in)


@router.delete("/{course_id}", response_model=Message)
def delete_course(course_id: int, service: CourseService = Depends(get_course_service)):
    service.delete(course_id)
    return {"message": "course deleted successfully"}
