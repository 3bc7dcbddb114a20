# school_records/services/base.py
"""
Общие правила сервисного слоя: разбор дат, проверки диапазонов и перечислений,
проверки ссылок и уникальности, частичные обновления.

Сервис является единственным местом, где ошибки классифицируются
(ValidationError / ReferenceNotFoundError / ConflictError / NotFoundError).
"""
import logging
import re
from contextlib import contextmanager
from datetime import date, datetime, timedelta, timezone
from typing import Any, Dict, Iterable, Optional

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError

from school_records.core.config import settings
from school_records.core.errors import (
    ConflictError,
    ReferenceNotFoundError,
    StorageError,
    ValidationError,
)
from school_records.crud.base import CRUDBase

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"
RFC3339_RE = re.compile(
    r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})[Tt]"
    r"(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})(?:\.(?P<fraction>\d{1,9}))?"
    r"(?P<zone>[Zz]|[+-]\d{2}:\d{2})",
    re.ASCII,
)


def parse_date(value: str, field: str) -> date:
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except (TypeError, ValueError):
        raise ValidationError(f"invalid {field} format, use YYYY-MM-DD")


def parse_timestamp(value: str, field: str) -> datetime:
    """RFC 3339 -> naive UTC (так время хранится в БД)."""
    match = RFC3339_RE.fullmatch(value) if isinstance(value, str) else None
    if match is None:
        raise ValidationError(f"invalid {field} format, use RFC 3339 (e.g. 2006-01-02T15:04:05Z)")
    # дробная часть до наносекунд, Python хранит только микросекунды
    fraction = (match["fraction"] or "")[:6].ljust(6, "0")
    try:
        if match["zone"] in ("Z", "z"):
            tz = timezone.utc
        else:
            sign = -1 if match["zone"][0] == "-" else 1
            tz = timezone(sign * timedelta(hours=int(match["zone"][1:3]), minutes=int(match["zone"][4:6])))
        parsed = datetime(
            int(match["year"]), int(match["month"]), int(match["day"]),
            int(match["hour"]), int(match["minute"]), int(match["second"]),
            int(fraction), tzinfo=tz,
        ).astimezone(timezone.utc)
    except (ValueError, OverflowError):
        raise ValidationError(f"invalid {field}: {value} is not a valid date and time")
    return parsed.replace(tzinfo=None)


def check_range(value, low, high, field: str) -> None:
    if value is None:
        raise ValidationError(f"{field} is required")
    if low is not None and value < low:
        raise ValidationError(f"{field} must be at least {low}")
    if high is not None and value > high:
        raise ValidationError(f"{field} must be at most {high}")


def check_choice(value: str, choices: Iterable[str], field: str) -> None:
    choices = tuple(choices)
    if value not in choices:
        raise ValidationError(f"{field} must be one of: {', '.join(choices)}")


def clamp_limit(limit: Optional[int]) -> int:
    if limit is None or limit <= 0:
        return settings.DEFAULT_PAGE_SIZE
    return min(limit, settings.MAX_PAGE_SIZE)


def clamp_offset(offset: Optional[int]) -> int:
    return max(offset or 0, 0)


def supplied(req: BaseModel, required: Iterable[str] = ()) -> Dict[str, Any]:
    """
    Поля, которые клиент действительно передал в запросе на обновление.

    Отсутствующее поле != поле со значением; явный null допустим только
    для nullable-колонок, для остальных (required) это ошибка.
    """
    changes = req.model_dump(exclude_unset=True)
    for field in required:
        if field in changes and changes[field] is None:
            raise ValidationError(f"{field} cannot be null")
    return changes


def require(store: CRUDBase, id: int, name: str) -> None:
    if not store.exists(id):
        raise ReferenceNotFoundError(f"{name} not found")


@contextmanager
def unique_guard(message: str):
    """Нарушение уникального индекса при записи -> ConflictError."""
    try:
        yield
    except StorageError as e:
        if isinstance(e.__cause__, IntegrityError):
            logger.warning("Unique constraint rejected write: %s", message)
            raise ConflictError(message) from e
        raise
