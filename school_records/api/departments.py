from fastapi import APIRouter, Depends, Query, status

from school_records.api.deps import get_department_service
from school_records.services.base import clamp_limit, clamp_offset
from school_records.schemas.common import ListOut, Message, PageOut
from school_records.schemas.department import DepartmentCreate, DepartmentOut, DepartmentUpdate
from school_records.services.department import DepartmentService

router = APIRouter()


@router.post("/", response_model=DepartmentOut, status_code=status.HTTP_201_CREATED)
def create_department(
    dept_in: DepartmentCreate,
    service: DepartmentService = Depends(get_department_service),
):
    return service.create(dept_in)


@router.get("/", response_model=PageOut[DepartmentOut])
def read_departments(
    limit: int = 10,
    offset: int = 0,
    service: DepartmentService = Depends(get_department_service),
):
    data = service.list(limit, offset)
    return {"data": data, "count": len(data), "limit": clamp_limit(limit), "offset": clamp_offset(offset)}


# /search объявлен раньше /{dept_id}, иначе FastAPI примет "search" за id
@router.get("/search", response_model=ListOut[DepartmentOut])
def search_departments(
    q: str = Query(..., min_length=1),
    service: DepartmentService = Depends(get_department_service),
):
    data = service.search(q)
    return {"data": data, "count": len(data)}


@router.get("/{dept_id}", response_model=DepartmentOut)
def read_department(dept_id: int, service: DepartmentService = Depends(get_department_service)):
    return service.get(dept_id)


@router.put("/{dept_id}", response_model=DepartmentOut)
def update_department(
    dept_id: int,
    dept_in: DepartmentUpdate,
    service: DepartmentService = Depends(get_department_service),
):
    return service.update(dept_id, dept_in)


@router.delete("/{dept_id}", response_model=Message)
def delete_department(dept_id: int, service: DepartmentService = Depends(get_department_service)):
    service.delete(dept_id)
    return {"message": "department deleted successfully"}
