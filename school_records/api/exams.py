from fastapi import APIRouter, Depends, Query, status

from school_records.api.deps import get_exam_service
from school_records.services.base import clamp_limit, clamp_offset
from school_records.schemas.common import ListOut, Message, PageOut
from school_records.schemas.exam import ExamCreate, ExamOut, ExamUpdate
from school_records.services.exam import ExamService

router = APIRouter()


@router.post("/", response_model=ExamOut, status_code=status.HTTP_201_CREATED)
def create_exam(exam_in: ExamCreate, service: ExamService = Depends(get_exam_service)):
    return service.create(exam_in)


@router.get("/", response_model=PageOut[ExamOut])
def read_exams(
    limit: int = 10,
    offset: int = 0,
    service: ExamService = Depends(get_exam_service),
):
    data = service.list(limit, offset)
    return {"data": data, "count": len(data), "limit": clamp_limit(limit), "offset": clamp_offset(offset)}


@router.get("/upcoming", response_model=ListOut[ExamOut])
def read_upcoming_exams(limit: int = 10, service: ExamService = Depends(get_exam_service)):
    data = service.upcoming(limit)
    return {"data": data, "count": len(data)}


@router.get("/range", response_model=ListOut[ExamOut])
def read_exams_in_range(
    start: str = Query(..., description="RFC 3339"),
    end: str = Query(..., description="RFC 3339"),
    service: ExamService = Depends(get_exam_service),
):
    data = service.by_date_range(start, end)
    return {"data": data, "count": len(data)}


@router.get("/course/{course_id}", response_model=ListOut[ExamOut])
def read_exams_by_course(course_id: int, service: ExamService = Depends(get_exam_service)):
    data = service.by_course(course_id)
    return {"data": data, "count": len(data)}


@router.get("/{exam_id}", response_model=ExamOut)
def read_exam(exam_id: int, service: ExamService = Depends(get_exam_service)):
    return service.get(exam_id)


@router.put("/{exam_id}", response_model=ExamOut)
def update_exam(exam_id: int, exam_in: ExamUpdate, service: ExamService = Depends(get_exam_service)):
    return service.update(exam_id, exam_in)


@router.delete("/{exam_id}", response_model=Message)
def delete_exam(exam_id: int, service: ExamService = Depends(get_exam_service)):
    service.delete(exam_id)
    return {"message": "exam deleted successfully"}
