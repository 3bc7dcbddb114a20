from fastapi import APIRouter, Depends, status

from school_records.api.deps import get_submission_service
from school_records.services.base import clamp_limit, clamp_offset
from school_records.schemas.common import ListOut, Message, PageOut
from school_records.schemas.submission import SubmissionCreate, SubmissionGrade, SubmissionOut
from school_records.services.submission import SubmissionService

router = APIRouter()


@router.post("/", response_model=SubmissionOut, status_code=status.HTTP_201_CREATED)
def submit_homework(
    submission_in: SubmissionCreate,
    service: SubmissionService = Depends(get_submission_service),
):
    return service.submit(submission_in)


# Оценка существующей сдачи, новая запись не создаётся
@router.post("/grade", response_model=SubmissionOut)
def grade_submission(
    grade_in: SubmissionGrade,
    service: SubmissionService = Depends(get_submission_service),
):
    return service.grade(grade_in)


@router.get("/", response_model=PageOut[SubmissionOut])
def read_submissions(
    limit: int = 10,
    offset: int = 0,
    service: SubmissionService = Depends(get_submission_service),
):
    data = service.list(limit, offset)
    return {"data": data, "count": len(data), "limit": clamp_limit(limit), "offset": clamp_offset(offset)}


@router.get("/student/{student_id}", response_model=ListOut[SubmissionOut])
def read_submissions_by_student(
    student_id: int,
    service: SubmissionService = Depends(get_submission_service),
):
    data = service.by_student(student_id)
    return {"data": data, "count": len(data)}


@router.get("/student/{student_id}/pending", response_model=ListOut[SubmissionOut])
def read_pending_submissions(
    student_id: int,
    service: SubmissionService = Depends(get_submission_service),
):
    data = service.pending_by_student(student_id)
    return {"data": data, "count": len(data)}


@router.get("/homework/{homework_id}", response_model=ListOut[SubmissionOut])
def read_submissions_by_homework(
    homework_id: int,
    service: SubmissionService = Depends(get_submission_service),
):
    data = service.by_homework(homework_id)
    return {"data": data, "count": len(data)}


@router.get("/{submission_id}", response_model=SubmissionOut)
def read_submission(submission_id: int, service: SubmissionService = Depends(get_submission_service)):
    return service.get(submission_id)


@router.delete("/{submission_id}", response_model=Message)
def delete_submission(submission_id: int, service: SubmissionService = Depends(get_submission_service)):
    service.delete(submission_id)
    return {"message": "submission deleted successfully"}
