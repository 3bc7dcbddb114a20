# school_records/db/__init__.py
# Этот файл гарантирует, что все модели импортированы при первом импорте school_records.db

from school_records.db.base import Base
from school_records.db import models  # noqa: F401

__all__ = ["Base", "models"]
