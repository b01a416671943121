"""
Codec — Точка входа слоя сериализации

decode: wire bytes → типизированное значение
encode: типизированное значение → wire bytes

Политика для некорректных временных литералов:
- STRICT (по умолчанию): декодирование всего документа прерывается DecodeError
  с путём к полю
- LENIENT: поле заменяется на None, в DecodeResult попадает DecodeWarning

Структурные ошибки (невалидный JSON, скаляр вместо объекта/массива) всегда
прерывают декодирование, независимо от политики. Ошибки не логируются и не
подавляются, всё возвращается вызывающему коду.

Для envelope-моделей (Error, Pagination, Currency, ...) можно включить
проверку JSON Schema контракта: contract=True или Codec(validate_contracts=True).
"""

import json
import logging
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from functools import lru_cache
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from .contracts.validators import check_contract
from .core.errors import APIError, DecodeError, Error
from .core.temporal import TEMPORAL_ERROR_TYPE, encode_date, encode_datetime

if TYPE_CHECKING:
    from .config import Settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


# =============================================================================
# POLICY & RESULT
# =============================================================================


class DecodePolicy(str, Enum):
    """Политика обработки некорректных временных литералов."""

    STRICT = "strict"
    LENIENT = "lenient"


@dataclass(frozen=True)
class DecodeWarning:
    """Поле, заменённое на None в lenient-режиме."""

    path: str
    value: Any
    reason: str


@dataclass(frozen=True)
class DecodeResult(Generic[T]):
    """Декодированное значение и предупреждения lenient-режима."""

    value: T
    warnings: tuple[DecodeWarning, ...] = ()

    @property
    def degraded(self) -> bool:
        return bool(self.warnings)


# =============================================================================
# HELPERS
# =============================================================================


@lru_cache(maxsize=None)
def _adapter(model: Any) -> TypeAdapter:
    return TypeAdapter(model)


def _model_name(model: Any) -> str:
    return getattr(model, "__name__", repr(model))


def _format_loc(loc: tuple[int | str, ...]) -> str:
    return ".".join(str(part) for part in loc)


def _decode_error(model: Any, exc: ValidationError) -> DecodeError:
    errors = exc.errors(include_url=False)
    first = errors[0]
    return DecodeError(
        model=_model_name(model),
        path=_format_loc(first["loc"]),
        detail=first["msg"],
        errors=errors,
    )


def _check_contract(data: bytes | str, model: Any) -> None:
    try:
        payload = json.loads(data)
    except json.JSONDecodeError as e:
        raise DecodeError(model=_model_name(model), path="", detail=f"invalid JSON: {e.msg}") from e
    check_contract(payload, model)
    logger.debug("%s payload satisfies its contract", _model_name(model))


def _clear(payload: Any, loc: tuple[int | str, ...]) -> None:
    """Заменяет значение по пути loc на None (payload: свежий результат json.loads)."""
    target = payload
    for part in loc[:-1]:
        target = target[part]
    target[loc[-1]] = None


# =============================================================================
# DECODE / ENCODE
# =============================================================================


def decode(data: bytes | str, model: type[T], *, contract: bool = False) -> T:
    """
    Декодирование wire bytes в типизированное значение (STRICT).

    Args:
        data: JSON документ (UTF-8)
        model: Целевой тип (модель, Date, DateTime, tuple[Model, ...], ...)
        contract: Дополнительно проверить сырой JSON против контракта модели

    Returns:
        Immutable значение целевого типа

    Raises:
        DecodeError: Структурная ошибка или некорректный временной литерал
    """
    try:
        value = _adapter(model).validate_json(data)
    except ValidationError as e:
        raise _decode_error(model, e) from e
    if contract:
        _check_contract(data, model)
    logger.debug("Decoded %s from %d bytes", _model_name(model), len(data))
    return value


def decode_lenient(
    data: bytes | str, model: type[T], *, contract: bool = False
) -> DecodeResult[T]:
    """
    Декодирование с деградацией некорректных временных полей до None.

    Некорректный литерал на верхнем уровне документа (нет охватывающей
    сущности) и любые структурные ошибки по-прежнему поднимают DecodeError.
    Нарушение контракта (contract=True) не деградирует и тоже поднимает DecodeError.

    Returns:
        DecodeResult: значение и предупреждения по заменённым полям
    """
    adapter = _adapter(model)
    if contract:
        _check_contract(data, model)
    try:
        return DecodeResult(value=adapter.validate_json(data))
    except ValidationError as e:
        errors = e.errors(include_url=False)
        temporal = [err for err in errors if err["type"] == TEMPORAL_ERROR_TYPE]
        if len(temporal) != len(errors) or any(not err["loc"] for err in temporal):
            raise _decode_error(model, e) from e

    payload = json.loads(data)
    warnings = []
    for err in temporal:
        _clear(payload, err["loc"])
        ctx = err.get("ctx", {})
        warnings.append(
            DecodeWarning(
                path=_format_loc(err["loc"]),
                value=ctx.get("value", err["input"]),
                reason=ctx.get("reason", err["msg"]),
            )
        )

    try:
        value = adapter.validate_python(payload)
    except ValidationError as e:
        raise _decode_error(model, e) from e
    logger.debug(
        "Decoded %s leniently, %d field(s) degraded", _model_name(model), len(warnings)
    )
    return DecodeResult(value=value, warnings=tuple(warnings))


def encode(value: Any) -> bytes:
    """
    Кодирование значения в wire bytes.

    Для моделей выводятся только поля, пришедшие из payload или переданные
    в конструктор, поэтому encode(decode(b)) сохраняет набор ключей b.

    Raises:
        TypeError: Если тип значения не поддерживается
    """
    if isinstance(value, BaseModel):
        return value.model_dump_json(exclude_unset=True).encode("utf-8")
    if isinstance(value, datetime):
        return encode_datetime(value)
    if isinstance(value, date):
        return encode_date(value)
    if isinstance(value, (tuple, list)) and all(isinstance(item, BaseModel) for item in value):
        return b"[" + b",".join(encode(item) for item in value) + b"]"
    raise TypeError(f"cannot encode value of type {type(value).__name__}")


# =============================================================================
# API ERRORS
# =============================================================================


def decode_error(data: bytes | str, *, contract: bool = False) -> Error:
    """Декодирование тела ответа с ошибкой в Error."""
    return decode(data, Error, contract=contract)


def check_response(status_code: int, body: bytes | str, *, contract: bool = False) -> None:
    """
    Проверка статуса ответа.

    При 2xx ничего не происходит. Иначе тело декодируется в Error и поднимается
    APIError. Если в теле нет status_code, используется HTTP статус.

    Raises:
        APIError: Non-2xx ответ
        DecodeError: Тело ответа не является JSON-объектом ошибки
    """
    if 200 <= status_code < 300:
        return
    error = decode_error(body, contract=contract)
    if error.status_code is None:
        error = error.model_copy(update={"status_code": status_code})
    raise APIError(error)


# =============================================================================
# CODEC
# =============================================================================


class Codec:
    """
    Codec с фиксированной политикой декодирования и проверкой контрактов.

    Stateless: один экземпляр безопасно использовать из любого числа потоков.
    """

    def __init__(
        self,
        policy: DecodePolicy = DecodePolicy.STRICT,
        validate_contracts: bool = False,
    ) -> None:
        self.policy = DecodePolicy(policy)
        self.validate_contracts = validate_contracts

    @classmethod
    def from_settings(cls, settings: "Settings") -> "Codec":
        return cls(
            policy=settings.decode_policy,
            validate_contracts=settings.validate_contracts,
        )

    def decode(self, data: bytes | str, model: type[T]) -> DecodeResult[T]:
        if self.policy is DecodePolicy.LENIENT:
            return decode_lenient(data, model, contract=self.validate_contracts)
        return DecodeResult(value=decode(data, model, contract=self.validate_contracts))

    def encode(self, value: Any) -> bytes:
        return encode(value)

    def check_response(self, status_code: int, body: bytes | str) -> None:
        check_response(status_code, body, contract=self.validate_contracts)
