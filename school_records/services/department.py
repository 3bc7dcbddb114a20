import logging
from typing import List

from school_records.crud.department import CRUDDepartment
from school_records.db.models.department import Department
from school_records.schemas.department import DepartmentCreate, DepartmentOut, DepartmentUpdate
from school_records.services.base import clamp_limit, clamp_offset, supplied

logger = logging.getLogger(__name__)


class DepartmentService:
    def __init__(self, departments: CRUDDepartment):
        self.departments = departments

    def create(self, req: DepartmentCreate) -> DepartmentOut:
        dept = self.departments.create(Department(name=req.name, description=req.description))
        logger.info("Department created: id=%s", dept.id)
        return DepartmentOut.model_validate(dept)

    def get(self, id: int) -> DepartmentOut:
        return DepartmentOut.model_validate(self.departments.get(id))

    def list(self, limit: int, offset: int) -> List[DepartmentOut]:
        rows = self.departments.get_all(clamp_limit(limit), clamp_offset(offset))
        return [DepartmentOut.model_validate(d) for d in rows]

    def search(self, name: str) -> List[DepartmentOut]:
        return [DepartmentOut.model_validate(d) for d in self.departments.search(name)]

    def update(self, id: int, req: DepartmentUpdate) -> DepartmentOut:
        changes = supplied(req, required=("name",))
        dept = self.departments.get(id)
        for field, value in changes.items():
            setattr(dept, field, value)
        dept = self.departments.update(dept)
        logger.info("Department updated: id=%s fields=%s", id, sorted(changes))
        return DepartmentOut.model_validate(dept)

    def delete(self, id: int) -> None:
        self.departments.get(id)
        self.departments.delete(id)
        logger.info("Department deleted: id=%s", id)
