# school_records/core/errors.py
"""
Классификация ошибок сервисного слоя.

Store только оборачивает ошибки БД в StorageError, сервисы классифицируют,
API переводит класс ошибки в HTTP-статус (см. school_records/main.py).
"""


class SchoolRecordsError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(SchoolRecordsError):
    """Некорректный или выходящий за диапазон ввод."""
    status_code = 400


class ReferenceNotFoundError(SchoolRecordsError):
    """Внешний ключ указывает на несуществующую (или удалённую) запись."""
    status_code = 400


class ConflictError(SchoolRecordsError):
    """Нарушение уникальности: email, код курса, пара студент/курс и т.п."""
    status_code = 409


class NotFoundError(SchoolRecordsError):
    status_code = 404


class StorageError(SchoolRecordsError):
    status_code = 500
