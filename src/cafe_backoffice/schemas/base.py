import enum

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class Weekday(str, enum.Enum):
    monday = "monday"
    tuesday = "tuesday"
    wednesday = "wednesday"
    thursday = "thursday"
    friday = "friday"
    saturday = "saturday"
    sunday = "sunday"


class CamelModel(BaseModel):
    """
    Базовая схема API: поля в JSON в camelCase (totalPrice, pricePerUnit),
    внутри snake_case. Принимаются оба варианта имён.
    """

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
