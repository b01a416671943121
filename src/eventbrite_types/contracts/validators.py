"""
Contracts — JSON Schema контракты wire-объектов Eventbrite

Модели толерантны: любое поле может отсутствовать или быть null. Контракт
добавляет поверх этого ограничения значений, которые модель не проверяет:
- error: status_code из диапазона 4xx/5xx
- pagination: счётчики неотрицательны
- currency: код валюты ISO 4217 (три заглавные буквы)
- datetime_tz, multipart_text: строковые поля остаются строками

Проверка включается явно (decode(..., contract=True) или
Codec(validate_contracts=True)) и выполняется по сырому JSON документу
до построения значения. Нарушение поднимает DecodeError с путём к полю.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Final, Iterator

from jsonschema import Draft202012Validator, SchemaError, ValidationError
from jsonschema.exceptions import best_match

from ..core.errors import DecodeError, Error
from ..core.pagination import Pagination
from ..core.temporal import DatetimeTz
from ..core.values import Currency, MultipartText


SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

CONTRACT_ERROR_TYPE: Final[str] = "contract"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик схем контрактов.

    Каждая схема проходит meta-validation один раз; скомпилированные
    Draft202012Validator кэшируются на экземпляре загрузчика.
    """

    def __init__(self, schema_dir: Path | None = None):
        self.schema_dir = schema_dir or SCHEMA_DIR
        if not self.schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self.schema_dir}")
        self._validators: dict[str, Draft202012Validator] = {}

    def load_schema(self, name: str) -> dict[str, Any]:
        """
        Raises:
            FileNotFoundError: Нет файла <name>.json
            ValueError: Схема не проходит meta-validation
        """
        return self.validator(name).schema

    def validator(self, name: str) -> Draft202012Validator:
        cached = self._validators.get(name)
        if cached is not None:
            return cached

        path = self.schema_dir / f"{name}.json"
        if not path.is_file():
            raise FileNotFoundError(f"Schema not found: {path}")
        schema = json.loads(path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {path.name}: {e.message}") from e

        validator = Draft202012Validator(schema)
        self._validators[name] = validator
        return validator


@lru_cache(maxsize=1)
def default_loader() -> SchemaLoader:
    """Загрузчик схем из package data (один на процесс)."""
    return SchemaLoader()


# =============================================================================
# MODEL → CONTRACT
# =============================================================================

CONTRACTS: Final[dict[type, str]] = {
    Error: "error",
    Pagination: "pagination",
    DatetimeTz: "datetime_tz",
    Currency: "currency",
    MultipartText: "multipart_text",
}


def contract_for(model: Any) -> str | None:
    """Имя контракта для модели или None, если контракта нет."""
    return CONTRACTS.get(model)


def iter_violations(payload: Any, model: Any) -> Iterator[ValidationError]:
    """Все нарушения контракта модели в сыром payload (пусто, если контракта нет)."""
    name = contract_for(model)
    if name is None:
        return iter(())
    return default_loader().validator(name).iter_errors(payload)


def check_contract(payload: Any, model: Any) -> None:
    """
    Проверка сырого JSON значения против контракта модели.

    Args:
        payload: Результат json.loads
        model: Целевая модель (Error, Pagination, ...); для моделей без
            контракта проверка ничего не делает

    Raises:
        DecodeError: Нарушение контракта. path указывает на поле, errors
            содержит все нарушения в формате ошибок pydantic
    """
    violations = list(iter_violations(payload, model))
    if not violations:
        return

    first = best_match(violations)
    errors = [
        {
            "type": CONTRACT_ERROR_TYPE,
            "loc": tuple(v.absolute_path),
            "msg": v.message,
            "input": v.instance,
        }
        for v in violations
    ]
    raise DecodeError(
        model=model.__name__,
        path=".".join(str(part) for part in first.absolute_path),
        detail=f"violates {contract_for(model)} contract: {first.message}",
        errors=errors,
    )


def is_valid(payload: Any, model: Any) -> bool:
    return next(iter_violations(payload, model), None) is None
