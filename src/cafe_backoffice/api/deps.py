from typing import Optional, Type, TypeVar

from fastapi import Header
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

SchemaT = TypeVar("SchemaT", bound=BaseModel)


async def get_actor(x_employee_login: Optional[str] = Header(None)) -> Optional[str]:
    """
    Кто выполняет действие, для журнала. Заголовок необязательный.
    """
    return x_employee_login.strip() if x_employee_login and x_employee_login.strip() else None


def validate_payload(schema: Type[SchemaT], data: dict) -> SchemaT:
    """
    Валидация данных, собранных вручную (multipart-формы).
    Ошибки отдаются так же, как ошибки обычного тела запроса (400).
    """
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False)) from None
