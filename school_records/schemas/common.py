from datetime import datetime, timezone
from typing import Annotated, Generic, List, TypeVar

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, PlainSerializer

T = TypeVar("T")


def _as_rfc3339(value: datetime) -> str:
    # в БД лежит naive UTC
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def _check_email(value: str) -> str:
    """
    Проверяет адрес, но возвращает его как есть.

    EmailStr нормализует домен к нижнему регистру, а уникальность email
    регистрозависимая, поэтому храним ровно то, что прислал клиент.
    """
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(f"value is not a valid email address: {e}")
    return value


UTCDateTime = Annotated[datetime, PlainSerializer(_as_rfc3339, return_type=str, when_used="json")]
Email = Annotated[str, AfterValidator(_check_email)]


class EntityOut(BaseModel):
    id: int
    created_at: UTCDateTime
    updated_at: UTCDateTime

    class Config:
        from_attributes = True


class ListOut(BaseModel, Generic[T]):
    data: List[T]
    count: int


class PageOut(ListOut[T], Generic[T]):
    limit: int
    offset: int


class Message(BaseModel):
    message: str
