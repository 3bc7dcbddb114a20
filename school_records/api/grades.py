from fastapi import APIRouter, Depends, status

from school_records.api.deps import get_grade_service
from school_records.services.base import clamp_limit, clamp_offset
from school_records.schemas.common import ListOut, Message, PageOut
from school_records.schemas.grade import ExamAverage, GradeCreate, GradeOut, GradeUpdate, StudentAverage
from school_records.services.grade import GradeService

router = APIRouter()


@router.post("/", response_model=GradeOut, status_code=status.HTTP_201_CREATED)
def create_grade(grade_in: GradeCreate, service: GradeService = Depends(get_grade_service)):
    return service.create(grade_in)


@router.get("/", response_model=PageOut[GradeOut])
def read_grades(
    limit: int = 10,
    offset: int = 0,
    service: GradeService = Depends(get_grade_service),
):
    data = service.list(limit, offset)
    return {"data": data, "count": len(data), "limit": clamp_limit(limit), "offset": clamp_offset(offset)}


@router.get("/student/{student_id}", response_model=ListOut[GradeOut])
def read_grades_by_student(student_id: int, service: GradeService = Depends(get_grade_service)):
    data = service.by_student(student_id)
    return {"data": data, "count": len(data)}


@router.get("/student/{student_id}/average", response_model=StudentAverage)
def read_student_average(student_id: int, service: GradeService = Depends(get_grade_service)):
    return {"student_id": student_id, "average": service.student_average(student_id)}


@router.get("/exam/{exam_id}", response_model=ListOut[GradeOut])
def read_grades_by_exam(exam_id: int, service: GradeService = Depends(get_grade_service)):
    data = service.by_exam(exam_id)
    return {"data": data, "count": len(data)}


@router.get("/exam/{exam_id}/average", response_model=ExamAverage)
def read_exam_average(exam_id: int, service: GradeService = Depends(get_grade_service)):
    return {"exam_id": exam_id, "average": service.exam_average(exam_id)}


@router.get("/{grade_id}", response_model=GradeOut)
def read_grade(grade_id: int, service: GradeService = Depends(get_grade_service)):
    return service.get(grade_id)


@router.put("/{grade_id}", response_model=GradeOut)
def update_grade(grade_id: int, grade_in: GradeUpdate, service: GradeService = Depends(get_grade_service)):
    return service.update(grade_id, grade_in)


@router.delete("/{grade_id}", response_model=Message)
def delete_grade(grade_id: int, service: GradeService = Depends(get_grade_service)):
    service.delete(grade_id)
    return {"message": "grade deleted successfully"}
