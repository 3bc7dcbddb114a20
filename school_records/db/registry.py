# school_records/db/registry.py
"""
Реестр связей между таблицами.

Кто на кого ссылается берётся из ForeignKey в моделях, порядок создания
таблиц берётся у SQLAlchemy (sort_tables_and_constraints): родитель всегда
раньше детей, а при равенстве действует DECLARED_ORDER.
"""
import logging
from typing import Dict, List, Tuple

from sqlalchemy.engine import Engine
from sqlalchemy.schema import sort_tables_and_constraints

from school_records.db.base import Base
from school_records.db import models  # noqa: F401  (регистрирует таблицы в metadata)

logger = logging.getLogger(__name__)

# При равенстве по зависимостям таблицы идут в этом порядке
DECLARED_ORDER = (
    "departments",
    "teachers",
    "students",
    "courses",
    "attendances",
    "homework",
    "exams",
    "grades",
    "student_courses",
    "students_homework",
)


def references(metadata=Base.metadata) -> Dict[str, Tuple[str, ...]]:
    """Таблица -> кортеж таблиц, на которые она ссылается."""
    result = {}
    for name, table in metadata.tables.items():
        targets = sorted({fk.column.table.name for fk in table.foreign_keys} - {name})
        result[name] = tuple(targets)
    return result


def _rank(name: str) -> Tuple[int, str]:
    if name in DECLARED_ORDER:
        return DECLARED_ORDER.index(name), name
    return len(DECLARED_ORDER), name


def creation_order(metadata=Base.metadata) -> List[str]:
    tables = sorted(metadata.tables.values(), key=lambda t: _rank(t.name))
    # объявленный порядок задаёт группировку; если он спорит с FK, это тоже цикл
    declared = [metadata.tables[name] for name in DECLARED_ORDER if name in metadata.tables]
    chain = list(zip(declared, declared[1:]))

    result = sort_tables_and_constraints(tables, extra_dependencies=chain)
    # последний элемент (None, [...]): FK, которые не удалось упорядочить из-за цикла
    _, cyclic = result[-1]
    if cyclic:
        involved = sorted({fkc.table.name for fkc in cyclic})
        raise ValueError(f"Cyclic references between tables: {involved}")
    return [table.name for table, _ in result[:-1]]


def init_db(engine: Engine, metadata=Base.metadata) -> List[str]:
    """Создаёт недостающие таблицы в порядке зависимостей."""
    order = creation_order(metadata)
    for name in order:
        metadata.tables[name].create(bind=engine, checkfirst=True)
    logger.info("Database schema ready: %s", ", ".join(order))
    return order


REFERENCES = references()
