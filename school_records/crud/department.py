from typing import List

from sqlalchemy.orm import Session

from school_records.crud.base import CRUDBase
from school_records.db.models.department import Department


class CRUDDepartment(CRUDBase[Department]):
    entity_name = "department"

    def __init__(self, db: Session):
        super().__init__(Department, db)

    def search(self, name: str) -> List[Department]:
        return self._all(
            self._live().filter(Department.name.ilike(f"%{name}%")).order_by(Department.id)
        )
