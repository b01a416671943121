"""
Temporal — Кодеки дат и времени Eventbrite

Docs: https://www.eventbrite.com/developer/v3/response_formats/basic/

Три независимых типа с фиксированным wire-форматом:
- Date: только дата, ровно "YYYY-MM-DD"
- DateTime: UTC instant, ровно "YYYY-MM-DDTHH:MM:SSZ" (без долей секунды)
- DatetimeTz: триплет строк timezone/utc/local, передаётся как есть

Декодеры никогда не пишут в лог и не печатают ошибку: некорректный литерал
всегда поднимает TemporalFormatError, решение принимает вызывающий код.
"""

import re
from datetime import date, datetime, timezone
from typing import Annotated, Any, Final

from pydantic import BaseModel, BeforeValidator, Field, PlainSerializer
from pydantic_core import PydanticCustomError

from .errors import TemporalFormatError


# =============================================================================
# CONSTANTS
# =============================================================================

DATE_FORMAT: Final[str] = "%Y-%m-%d"
DATETIME_FORMAT: Final[str] = "%Y-%m-%dT%H:%M:%SZ"

# strptime принимает "2023-5-1", поэтому точная форма проверяется отдельно
_DATE_LAYOUT: Final = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
_DATETIME_LAYOUT: Final = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z", re.ASCII)

# Тип pydantic-ошибки для некорректного литерала (по нему codec отличает
# временные ошибки от структурных)
TEMPORAL_ERROR_TYPE: Final[str] = "temporal_format"

# JSON-значение не строка: структурная ошибка, lenient-режим её не деградирует
TEMPORAL_TYPE_ERROR_TYPE: Final[str] = "temporal_type"


# =============================================================================
# HELPERS
# =============================================================================


def _to_text(raw: bytes | str) -> str:
    """Приводит wire-значение к строке и снимает кавычки JSON-строки."""
    if isinstance(raw, (bytes, bytearray, memoryview)):
        try:
            raw = bytes(raw).decode("utf-8")
        except UnicodeDecodeError as e:
            raise TemporalFormatError(repr(raw), "not valid UTF-8") from e
    if not isinstance(raw, str):
        raise TemporalFormatError(repr(raw), "expected a string")
    return raw.strip('"')


def _parse(text: str, layout: re.Pattern[str], fmt: str) -> datetime:
    if layout.fullmatch(text) is None:
        raise TemporalFormatError(text, f"does not match layout {fmt}")
    try:
        return datetime.strptime(text, fmt)
    except ValueError as e:
        raise TemporalFormatError(text, str(e)) from e


# =============================================================================
# DATE
# =============================================================================


def decode_date(raw: bytes | str) -> date:
    """
    Декодирование wire-литерала даты.

    Args:
        raw: '"2023-05-01"' (JSON-строка) или '2023-05-01'

    Returns:
        datetime.date

    Raises:
        TemporalFormatError: Если литерал не соответствует YYYY-MM-DD
            или не является корректной календарной датой
    """
    return _parse(_to_text(raw), _DATE_LAYOUT, DATE_FORMAT).date()


def encode_date(value: date) -> bytes:
    """Кодирование даты в wire-форму (JSON-строка в кавычках)."""
    return f'"{format_date(value)}"'.encode("utf-8")


def format_date(value: date) -> str:
    if isinstance(value, datetime):
        value = _as_utc(value).date()
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


# =============================================================================
# DATETIME
# =============================================================================


def decode_datetime(raw: bytes | str) -> datetime:
    """
    Декодирование wire-литерала UTC datetime.

    Доли секунды и смещения, отличные от 'Z', отклоняются.

    Returns:
        tz-aware datetime в UTC

    Raises:
        TemporalFormatError: Если литерал не соответствует YYYY-MM-DDTHH:MM:SSZ
    """
    parsed = _parse(_to_text(raw), _DATETIME_LAYOUT, DATETIME_FORMAT)
    return parsed.replace(tzinfo=timezone.utc)


def encode_datetime(value: datetime) -> bytes:
    """Кодирование datetime в wire-форму (JSON-строка в кавычках)."""
    return f'"{format_datetime(value)}"'.encode("utf-8")


def format_datetime(value: datetime) -> str:
    value = _as_utc(value)
    return (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}Z"
    )


def _as_utc(value: datetime) -> datetime:
    # naive datetime считается UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# =============================================================================
# PYDANTIC INTEGRATION
# =============================================================================


def _temporal_error(e: TemporalFormatError) -> PydanticCustomError:
    return PydanticCustomError(
        TEMPORAL_ERROR_TYPE,
        "Malformed temporal literal '{value}': {reason}",
        {"value": e.value, "reason": e.reason},
    )


def _type_error(value: Any) -> PydanticCustomError:
    return PydanticCustomError(
        TEMPORAL_TYPE_ERROR_TYPE,
        "Temporal value must be a JSON string, got {kind}",
        {"kind": type(value).__name__},
    )


def _validate_date(value: Any) -> Any:
    """Before-validator для Date: wire-строка декодируется, date пропускается."""
    if isinstance(value, datetime):
        return _as_utc(value).date()
    if value is None or isinstance(value, date):
        return value
    if not isinstance(value, (str, bytes, bytearray)):
        raise _type_error(value)
    try:
        return decode_date(value)
    except TemporalFormatError as e:
        raise _temporal_error(e) from e


def _validate_datetime(value: Any) -> Any:
    """Before-validator для DateTime: wire-строка декодируется, datetime приводится к UTC."""
    if isinstance(value, datetime):
        return _as_utc(value)
    if value is None:
        return value
    if not isinstance(value, (str, bytes, bytearray)):
        raise _type_error(value)
    try:
        return decode_datetime(value)
    except TemporalFormatError as e:
        raise _temporal_error(e) from e


Date = Annotated[
    date,
    BeforeValidator(_validate_date),
    PlainSerializer(format_date, return_type=str),
]
"""Дата без времени суток; wire-форма ровно YYYY-MM-DD."""

DateTime = Annotated[
    datetime,
    BeforeValidator(_validate_datetime),
    PlainSerializer(format_datetime, return_type=str),
]
"""UTC instant; wire-форма ровно YYYY-MM-DDTHH:MM:SSZ."""


# =============================================================================
# DATETIME WITH TIMEZONE
# =============================================================================


class DatetimeTz(BaseModel):
    """
    Datetime с часовым поясом.

    Docs: https://www.eventbrite.com/developer/v3/response_formats/basic/#ebapi-datetime-with-timezone

    Комбинация IANA timezone и двух datetime (UTC и локального).
    Все три поля непрозрачные строки: не парсятся, арифметика между ними
    не выполняется.
    """

    timezone: str | None = Field(None, description="Идентификатор IANA Time Zone Database")
    utc: str | None = Field(None, description="Время в UTC")
    local: str | None = Field(None, description="Локальное время в указанном timezone")

    model_config = {"frozen": True, "extra": "ignore"}


def decode_datetime_tz(raw: bytes | str) -> DatetimeTz:
    """Декодирование объекта datetime-with-timezone из JSON."""
    return DatetimeTz.model_validate_json(raw)


def encode_datetime_tz(value: DatetimeTz) -> bytes:
    return value.model_dump_json(exclude_unset=True).encode("utf-8")
