# school_records/db/base.py
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, text
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Условие для частичных уникальных индексов: удалённые записи не занимают ключ
LIVE_ROWS = text("deleted_at IS NULL")


def utcnow() -> datetime:
    """Текущее время в UTC без tzinfo (так оно хранится в БД)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class EntityMixin:
    """Общие колонки всех таблиц: id, метки времени и мягкое удаление."""

    id = Column(Integer, primary_key=True, index=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)
    deleted_at = Column(DateTime, nullable=True, index=True)  # None: запись жива
