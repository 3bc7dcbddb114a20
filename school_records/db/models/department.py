from sqlalchemy import Column, String, Text
from school_records.db.base import Base, EntityMixin


class Department(EntityMixin, Base):
    __tablename__ = "departments"

    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
