"""
Config — Настройки слоя сериализации из окружения

Переменные окружения (и .env файла):
- EVENTBRITE_DECODE_POLICY: strict (по умолчанию) | lenient
- EVENTBRITE_VALIDATE_CONTRACTS: проверять JSON Schema контракты (по умолчанию нет)
- EVENTBRITE_LOG_LEVEL: уровень логгера пакета (по умолчанию WARNING)

Некорректное значение поднимает RuntimeError при загрузке, а не при первом
декодировании.
"""

import logging
import os
from dataclasses import dataclass
from typing import Final

from dotenv import load_dotenv

from .codec import DecodePolicy

PACKAGE_LOGGER: Final[str] = "eventbrite_types"

_TRUE: Final = frozenset({"1", "true", "yes", "on"})
_FALSE: Final = frozenset({"", "0", "false", "no", "off"})


@dataclass(slots=True)
class Settings:
    """Настройки декодирования и логирования."""

    decode_policy: DecodePolicy = DecodePolicy.STRICT
    validate_contracts: bool = False
    log_level: str = "WARNING"


def _env_flag(name: str) -> bool:
    raw = os.getenv(name, "").strip().lower()
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    raise RuntimeError(f"{name} must be a boolean flag, got {raw!r}")


def load_settings(env_file: str | None = None) -> Settings:
    """
    Загрузка настроек из окружения.

    Args:
        env_file: Путь к .env файлу; без него load_dotenv ищет .env сам.
            Уже выставленные переменные окружения не перезаписываются.

    Raises:
        RuntimeError: Значение переменной не распознано
    """
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()

    raw_policy = os.getenv("EVENTBRITE_DECODE_POLICY", DecodePolicy.STRICT.value).strip().lower()
    try:
        policy = DecodePolicy(raw_policy)
    except ValueError:
        raise RuntimeError(
            f"EVENTBRITE_DECODE_POLICY must be one of "
            f"{', '.join(p.value for p in DecodePolicy)}, got {raw_policy!r}"
        ) from None

    log_level = os.getenv("EVENTBRITE_LOG_LEVEL", "WARNING").strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise RuntimeError(f"EVENTBRITE_LOG_LEVEL is not a logging level: {log_level!r}")

    return Settings(
        decode_policy=policy,
        validate_contracts=_env_flag("EVENTBRITE_VALIDATE_CONTRACTS"),
        log_level=log_level,
    )


def configure_logging(settings: Settings) -> None:
    """Применяет уровень из настроек к логгеру пакета."""
    logging.getLogger(PACKAGE_LOGGER).setLevel(settings.log_level)


__all__ = ["PACKAGE_LOGGER", "Settings", "configure_logging", "load_settings"]
