"""
Pagination — Метаданные постраничного ответа

Docs: https://www.eventbrite.com/developer/v3/api_overview/pagination/#ebapi-paginated-responses

Все endpoint'ы, возвращающие несколько объектов, отдают постраничные ответы:
список объектов лежит под ключом ресурса (events, attendees, ...), рядом
лежит ключ pagination. Извлечение списка и обход страниц остаются задачей
вызывающего кода.
"""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, Field


def _null_to_zero(value: Any) -> Any:
    return 0 if value is None else value


def _null_to_false(value: Any) -> Any:
    return False if value is None else value


# null на wire равнозначен отсутствию поля
Count = Annotated[int, BeforeValidator(_null_to_zero)]
Flag = Annotated[bool, BeforeValidator(_null_to_false)]


class Pagination(BaseModel):
    """
    Envelope пагинации.

    Отсутствующее поле или null означает нулевое значение (0 / False), не ошибку.
    page_count == ceil(object_count / page_size) является свойством данных сервера,
    здесь не проверяется. has_more_items является единственным источником истины
    для решения о следующем запросе.
    """

    object_count: Count = Field(0, description="Общее число объектов")
    page_number: Count = Field(0, description="Номер текущей страницы")
    page_size: Count = Field(0, description="Размер страницы")
    page_count: Count = Field(0, description="Число страниц")
    has_more_items: Flag = Field(False, description="Есть ли следующие страницы")

    model_config = {"frozen": True, "extra": "ignore"}
