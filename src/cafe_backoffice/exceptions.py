"""Доменные ошибки CRUD-слоя."""


class BackofficeError(Exception):
    """Базовая ошибка приложения."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotFoundError(BackofficeError):
    """Запись не найдена."""

    def __init__(self, entity: str, key: object) -> None:
        super().__init__(f"{entity} not found: {key}")
        self.entity = entity
        self.key = key


class ConflictError(BackofficeError):
    """Уникальный ключ занят или запись в конфликтующем состоянии."""


class InvalidInputError(BackofficeError):
    """Данные прошли схему, но применить их нельзя."""
