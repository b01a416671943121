"""
Event — Событие и связанные с ним ресурсы

Docs: https://www.eventbrite.com/developer/v3/response_formats/event/

Ресурсы: Event, Venue, Organizer, TicketClass, EventDisplaySettings.

Связи "ID + опционально развёрнутый объект": venue_id/venue, organizer_id/organizer,
category_id/category, subcategory_id/subcategory, logo_id/logo, event_id/event.
ID и развёрнутый объект являются независимыми полями: присутствовать может
любое из них, оба или ни одного (expansion зависит от запроса).
"""

from typing import Optional

from pydantic import BaseModel, Field

from ..core.temporal import DateTime, DatetimeTz
from ..core.values import Address, Currency, CurrencyCode, Image, MultipartText
from .category import Category, SubCategory


# =============================================================================
# VENUE & ORGANIZER
# =============================================================================


class Venue(BaseModel):
    """
    Место проведения события.

    Docs: https://www.eventbrite.com/developer/v3/response_formats/venue/#ebapi-venue
    """

    id: str | None = Field(None, description="ID площадки")
    name: str | None = Field(None, description="Название площадки")
    address: Address | None = Field(None, description="Адрес площадки")
    latitude: str | None = Field(None, description="Широта")
    longitude: str | None = Field(None, description="Долгота")

    model_config = {"frozen": True, "extra": "ignore"}


class Organizer(BaseModel):
    """
    Сущность, отображаемая как владелец событий. Имя и контакты.

    Docs: https://www.eventbrite.com/developer/v3/response_formats/organizer/#ebapi-std:format-organizer
    """

    id: str | None = Field(None, description="ID организатора")
    name: str | None = Field(None, description="Имя организатора")
    description: MultipartText | None = Field(
        None, description="Описание (может быть длинным и с форматированием)"
    )
    url: str | None = Field(None, description="URL страницы организатора на Eventbrite")

    model_config = {"frozen": True, "extra": "ignore"}


# =============================================================================
# DISPLAY SETTINGS
# =============================================================================


class EventDisplaySettings(BaseModel):
    """
    Настройки отображения страницы события.

    Docs: https://www.eventbrite.com/developer/v3/endpoints/events/#ebapi-get-events-id-display-settings
    """

    show_start_date: bool | None = Field(None, description="Показывать дату начала")
    show_end_date: bool | None = Field(None, description="Показывать дату окончания")
    show_start_end_time: bool | None = Field(None, description="Показывать время начала и окончания")
    show_timezone: bool | None = Field(None, description="Показывать timezone события")
    show_map: bool | None = Field(None, description="Показывать карту площадки")
    show_remaining: bool | None = Field(None, description="Показывать число оставшихся билетов")
    show_organizer_facebook: bool | None = Field(None, description="Ссылка на Facebook организатора")
    show_organizer_twitter: bool | None = Field(None, description="Ссылка на Twitter организатора")
    show_facebook_friends_going: bool | None = Field(
        None, description="Показывать друзей из Facebook, которые идут"
    )
    show_attendee_list: bool | None = Field(None, description="Показывать список участников")

    model_config = {"frozen": True, "extra": "ignore"}


# =============================================================================
# TICKET CLASS
# =============================================================================


class TicketClass(BaseModel):
    """
    Один из типов билетов события.

    Docs: https://www.eventbrite.com/developer/v3/response_formats/event/#ebapi-ticket-class

    Бизнес-правила (minimum_quantity <= maximum_quantity и т.п.) не проверяются.
    Поля quantity_total/quantity_sold/hidden/sales_* видны только владельцу события.
    """

    id: str | None = Field(None, description="ID типа билета")
    name: str | None = Field(None, description="Название")
    description: str | None = Field(None, description="Описание")

    # Цена
    cost: Currency | None = Field(None, description="Отображаемая цена (только платные)")
    fee: Currency | None = Field(None, description="Отображаемый сбор (только платные)")
    donation: bool | None = Field(None, description="Билет-пожертвование")
    free: bool | None = Field(None, description="Бесплатный билет")
    include_fee: bool | None = Field(None, description="Сбор включён в отображаемую цену")
    split_fee: bool | None = Field(
        None, description="Платёжный сбор включён, сбор Eventbrite показан отдельно"
    )

    # Количество
    minimum_quantity: int | None = Field(None, description="Минимум билетов в заказе")
    maximum_quantity: int | None = Field(None, description="Максимум билетов в заказе")
    quantity_total: int | None = Field(None, description="Всего билетов к продаже")
    quantity_sold: int | None = Field(None, description="Продано и подтверждено")

    # Окно продаж
    sales_start: str | None = Field(None, description="Начало продаж")
    sales_end: str | None = Field(None, description="Окончание продаж")
    sales_start_after: str | None = Field(
        None, description="ID типа билета, после распродажи которого стартуют продажи"
    )

    # Видимость
    hidden: bool | None = Field(None, description="Скрыт от публики")
    hide_description: bool | None = Field(None, description="Скрывать описание на странице события")
    auto_hide: bool | None = Field(None, description="Скрывать, когда не в продаже")
    auto_hide_before: str | None = Field(None, description="Переопределение начала auto hide")
    auto_hide_after: str | None = Field(None, description="Переопределение окончания auto hide")

    # Связь с событием
    event_id: str | None = Field(None, description="ID события")
    event: Optional["Event"] = Field(None, description="Развёрнутое событие (expansion)")

    model_config = {"frozen": True, "extra": "ignore"}


# =============================================================================
# EVENT
# =============================================================================


class Event(BaseModel):
    """
    Событие Eventbrite.

    Docs: https://www.eventbrite.com/developer/v3/response_formats/event/#ebapi-std:format-event

    Immutable модель (frozen=True):
    - Идентификация и тексты (id, name, description, url)
    - Время (start, end как DatetimeTz; created, changed как DateTime)
    - Статус и параметры публикации
    - Связанные ресурсы по схеме ID + expansion
    """

    # Идентификация
    id: str | None = Field(None, description="ID события")
    name: MultipartText | None = Field(None, description="Название")
    summary: str | None = Field(None, description="Краткое описание")
    description: MultipartText | None = Field(None, description="Описание")
    url: str | None = Field(None, description="URL страницы события")

    # Время
    start: DatetimeTz | None = Field(None, description="Начало события")
    end: DatetimeTz | None = Field(None, description="Окончание события")
    created: DateTime | None = Field(None, description="Когда событие создано")
    changed: DateTime | None = Field(None, description="Когда событие изменено")
    published: DateTime | None = Field(None, description="Когда событие опубликовано")

    # Параметры
    status: str | None = Field(None, description="draft, live, started, ended, completed, canceled")
    currency: CurrencyCode | None = Field(None, description="ISO 4217 валюта события")
    capacity: int | None = Field(None, description="Вместимость")
    online_event: bool | None = Field(None, description="Онлайн-событие без площадки")
    listed: bool | None = Field(None, description="Публично в поиске")
    shareable: bool | None = Field(None, description="Показывать кнопки шаринга")
    invite_only: bool | None = Field(None, description="Только по приглашению")
    is_free: bool | None = Field(None, description="Все билеты бесплатные")
    locale: str | None = Field(None, description="Локаль события")

    # Связанные ресурсы
    venue_id: str | None = Field(None, description="ID площадки")
    venue: Venue | None = Field(None, description="Развёрнутая площадка")
    organizer_id: str | None = Field(None, description="ID организатора")
    organizer: Organizer | None = Field(None, description="Развёрнутый организатор")
    category_id: str | None = Field(None, description="ID категории")
    category: Category | None = Field(None, description="Развёрнутая категория")
    subcategory_id: str | None = Field(None, description="ID подкатегории")
    subcategory: SubCategory | None = Field(None, description="Развёрнутая подкатегория")
    format_id: str | None = Field(None, description="ID формата события")
    logo_id: str | None = Field(None, description="ID логотипа")
    logo: Image | None = Field(None, description="Развёрнутый логотип")
    ticket_classes: tuple[TicketClass, ...] | None = Field(
        None, description="Типы билетов (expansion)"
    )
    display_settings: EventDisplaySettings | None = Field(
        None, description="Настройки отображения (expansion)"
    )

    model_config = {"frozen": True, "extra": "ignore"}


TicketClass.model_rebuild()
