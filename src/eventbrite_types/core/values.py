"""
Values — Составные value-типы Eventbrite

Docs: https://www.eventbrite.com/developer/v3/response_formats/basic/

Структурное отображение wire-ключей на типизированные поля.
Все поля опциональны, отсутствие ключа никогда не является ошибкой.
"""

from pydantic import BaseModel, Field


# ISO 3166 alpha-2 код страны
CountryCode = str

# ISO 4217 трёхбуквенный код валюты
CurrencyCode = str


# =============================================================================
# MONEY & TEXT
# =============================================================================


class Currency(BaseModel):
    """
    Денежная сумма.

    Docs: https://www.eventbrite.com/developer/v3/response_formats/basic/#ebapi-currency

    display это артефакт форматирования, обратно в value не парсится.
    """

    currency: CurrencyCode | None = Field(None, description="ISO 4217 код валюты")
    # int сохраняется как int (2500), дробное значение как float
    value: int | float | None = Field(None, description="Сумма")
    display: str | None = Field(None, description="Локализованная строка для отображения")

    model_config = {"frozen": True, "extra": "ignore"}


class MultipartText(BaseModel):
    """
    Поле с HTML и текстовой версией (название и описание события и т.п.).

    Docs: https://www.eventbrite.com/developer/v3/response_formats/basic/#ebapi-multipart-text

    html: исходный HTML (должен быть санитизирован, но осторожно с DOM),
    text: версия без разметки. Синхронизация между ними не проверяется.
    """

    text: str | None = Field(None, description="Текст без разметки")
    html: str | None = Field(None, description="Исходный HTML")

    model_config = {"frozen": True, "extra": "ignore"}


# =============================================================================
# GEOGRAPHY
# =============================================================================


class Address(BaseModel):
    """
    Адрес в едином для всех стран формате.

    Docs: https://www.eventbrite.com/developer/v3/response_formats/basic/#ebapi-address
    """

    address_1: str | None = Field(None, description="Улица/адрес (часть 1)")
    address_2: str | None = Field(None, description="Улица/адрес (часть 2)")
    city: str | None = Field(None, description="Город")
    region: str | None = Field(None, description="ISO 3166-2 код региона")
    postal_code: str | None = Field(None, description="Почтовый индекс")
    country: CountryCode | None = Field(None, description="ISO 3166-1 код страны")
    latitude: str | None = Field(None, description="Широта")
    longitude: str | None = Field(None, description="Долгота")
    localized_address_display: str | None = Field(
        None, description="Адрес, отформатированный для страны адреса"
    )
    localized_area_display: str | None = Field(
        None, description="Область, отформатированная для страны адреса"
    )
    localized_multi_line_address_display: tuple[str, ...] | None = Field(
        None, description="Многострочный адрес, одна строка на элемент (порядок сохраняется)"
    )

    model_config = {"frozen": True, "extra": "ignore"}


class Country(BaseModel):
    """
    Страна.

    Docs: https://www.eventbrite.com/developer/v3/response_formats/system/#ebapi-countries
    """

    code: CountryCode | None = Field(None, description="ISO 3166 код страны")
    label: str | None = Field(None, description="Название страны")

    model_config = {"frozen": True, "extra": "ignore"}


class Region(BaseModel):
    """
    Регион страны.

    Docs: https://www.eventbrite.com/developer/v3/response_formats/system/#ebapi-region
    """

    country_code: CountryCode | None = Field(None, description="Код страны региона")
    code: str | None = Field(None, description="ISO 3166 код региона")
    label: str | None = Field(None, description="Название региона")

    model_config = {"frozen": True, "extra": "ignore"}


class Timezone(BaseModel):
    """Часовой пояс."""

    id: str | None = Field(None, description="Идентификатор timezone")
    timezone: str | None = Field(None, description="Идентификатор IANA Time Zone Database")
    label: str | None = Field(None, description="Локализованное название")

    model_config = {"frozen": True, "extra": "ignore"}


# =============================================================================
# MEDIA
# =============================================================================


class Image(BaseModel):
    """
    Изображение.

    Docs: https://www.eventbrite.com/developer/v3/response_formats/image/#ebapi-image
    """

    id: str | None = Field(None, description="ID изображения")
    url: str | None = Field(None, description="URL изображения")

    model_config = {"frozen": True, "extra": "ignore"}
