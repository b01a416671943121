"""
Errors — Ошибки слоя сериализации и модель ошибки Eventbrite API

Docs: https://www.eventbrite.com/developer/v3/api_overview/errors/#ebapi-errors

Три независимых вида ошибок:
- Error: успешно декодированное тело ответа с non-2xx статусом (значение, не исключение)
- DecodeError: структурно некорректный payload или некорректный временной литерал
- TemporalFormatError: ошибка standalone-кодеков Date/DateTime

Ошибки транспорта (сеть, таймауты) в этом слое не моделируются.
"""

from typing import Any

from pydantic import BaseModel, Field


# =============================================================================
# API ERROR ENVELOPE
# =============================================================================


class Error(BaseModel):
    """
    Тело ответа Eventbrite API с ошибкой (HTTP 4xx/5xx).

    Docs: https://www.eventbrite.com/developer/v3/api_overview/errors/#ebapi-errors

    Immutable значение (frozen=True). Конструирование не имеет побочных эффектов.
    - error: константный ключ ошибки (например, VENUE_AND_ONLINE), на него
      следует опираться в обработке, он не зависит от локали
    - error_description: техническое описание для разработчика
    - status_code: дублирует HTTP статус ответа
    """

    error: str | None = Field(None, description="Машиночитаемый ключ ошибки")
    error_description: str | None = Field(
        None, description="Человекочитаемое описание (не для конечных пользователей)"
    )
    status_code: int | None = Field(None, description="HTTP статус ответа")

    model_config = {"frozen": True, "extra": "ignore"}

    @property
    def message(self) -> str:
        """
        Человекочитаемое представление ошибки.

        Returns:
            "Eventbrite API: [Status code - <status_code>] <error_description>"
        """
        status = self.status_code if self.status_code is not None else 0
        return f"Eventbrite API: [Status code - {status}] {self.error_description or ''}"

    def __str__(self) -> str:
        return self.message


class APIError(Exception):
    """Non-2xx ответ Eventbrite API. Несёт декодированный Error."""

    def __init__(self, error: Error) -> None:
        super().__init__(error.message)
        self.error = error

    @property
    def key(self) -> str | None:
        return self.error.error

    @property
    def status_code(self) -> int | None:
        return self.error.status_code


# =============================================================================
# DECODE ERRORS
# =============================================================================


class TemporalFormatError(ValueError):
    """Литерал даты/времени не соответствует фиксированному wire-формату."""

    def __init__(self, value: str, reason: str) -> None:
        super().__init__(f"malformed temporal literal {value!r}: {reason}")
        self.value = value
        self.reason = reason


class DecodeError(ValueError):
    """
    Payload не удалось декодировать в целевой тип.

    Attributes:
        model: Имя целевого типа
        path: Путь к первому проблемному полю ("profile.birth_date",
            "barcodes.0.created"); пустая строка для ошибок уровня документа
        errors: Список ошибок pydantic (ValidationError.errors())
    """

    def __init__(self, model: str, path: str, detail: str, errors: list[dict[str, Any]] | None = None) -> None:
        location = f" at '{path}'" if path else ""
        super().__init__(f"cannot decode {model}{location}: {detail}")
        self.model = model
        self.path = path
        self.detail = detail
        self.errors = errors or []
