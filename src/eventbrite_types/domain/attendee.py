"""
Attendee — Участник события и заказ

Docs: https://www.eventbrite.com/developer/v3/response_formats/attendee/

Attendee объекты приватные и доступны только владельцу события.

Attendee несёт event_id/order_id И опционально развёрнутые event/order.
Эти поля независимы и никогда не схлопываются в одно: ID может присутствовать
без expansion. Вложенные profile/team это опциональные собственные значения,
addresses/answers/barcodes это упорядоченные кортежи ([] отличается от отсутствия).
"""

from typing import Optional

from pydantic import BaseModel, Field, JsonValue

from ..core.temporal import Date, DateTime
from ..core.values import Address, Currency
from .event import Event


# =============================================================================
# ATTENDEE SUB-RESOURCES
# =============================================================================


class AttendeeProfile(BaseModel):
    """
    Персональные данные участника.

    Docs: https://www.eventbrite.com/developer/v3/response_formats/attendee/#ebapi-std:format-attendee-profile

    name предпочтительнее first_name/last_name: совместимо с не-западными именами.
    """

    name: str | None = Field(None, description="Имя участника")
    email: str | None = Field(None, description="Email")
    first_name: str | None = Field(None, description="Имя")
    last_name: str | None = Field(None, description="Фамилия")
    prefix: str | None = Field(None, description="Обращение (Mr., Mrs., ...)")
    suffix: str | None = Field(None, description="Суффикс (Jr, Sr)")
    age: int | None = Field(None, description="Возраст")
    job_title: str | None = Field(None, description="Должность")
    company: str | None = Field(None, description="Компания")
    website: str | None = Field(None, description="Сайт")
    blog: str | None = Field(None, description="Блог")
    gender: str | None = Field(None, description="Пол")
    birth_date: Date | None = Field(None, description="Дата рождения")
    cell_phone: str | None = Field(None, description="Мобильный телефон в формате участника")

    model_config = {"frozen": True, "extra": "ignore"}


class AttendeeAddress(BaseModel):
    """
    Адреса участника (все опциональны).

    Docs: https://www.eventbrite.com/developer/v3/response_formats/attendee/#ebapi-attendee-addresses
    """

    home: Address | None = Field(None, description="Домашний адрес")
    ship: Address | None = Field(None, description="Адрес доставки")
    work: Address | None = Field(None, description="Рабочий адрес")

    model_config = {"frozen": True, "extra": "ignore"}


class AttendeeAnswer(BaseModel):
    """
    Ответ на кастомный вопрос.

    Docs: https://www.eventbrite.com/developer/v3/response_formats/attendee/#ebapi-attendee-answers
    """

    question_id: str | None = Field(None, description="ID вопроса")
    question: str | None = Field(None, description="Текст вопроса")
    type: str | None = Field(None, description="multiple_choice или text")
    answer: str | None = Field(None, description="Ответ участника")

    model_config = {"frozen": True, "extra": "ignore"}


class AttendeeBarcode(BaseModel):
    """
    Штрихкод входа (обычно один на участника).

    Docs: https://www.eventbrite.com/developer/v3/response_formats/attendee/#ebapi-attendee-barcodes

    barcode равен null, если организатор отключил печатные билеты.
    """

    barcode: str | None = Field(None, description="Содержимое штрихкода")
    status: str | None = Field(None, description="unused, used или refunded")
    created: DateTime | None = Field(None, description="Когда штрихкод создан")
    changed: DateTime | None = Field(None, description="Когда штрихкод изменён")

    model_config = {"frozen": True, "extra": "ignore"}


class AttendeeTeam(BaseModel):
    """
    Команда участника (если в событии настроены команды).

    Docs: https://www.eventbrite.com/developer/v3/response_formats/attendee/#ebapi-attendee-team
    """

    id: str | None = Field(None, description="ID команды")
    name: str | None = Field(None, description="Название команды")
    date_joined: DateTime | None = Field(None, description="Когда участник вступил")
    event_id: str | None = Field(None, description="ID события команды")

    model_config = {"frozen": True, "extra": "ignore"}


class AttendeeCosts(BaseModel):
    """Стоимость билета участника или заказа."""

    base_price: Currency | None = Field(None, description="Базовая цена")
    eventbrite_fee: Currency | None = Field(None, description="Сбор Eventbrite")
    gross: Currency | None = Field(None, description="Итого")
    payment_fee: Currency | None = Field(None, description="Платёжный сбор")
    tax: Currency | None = Field(None, description="Налог")

    model_config = {"frozen": True, "extra": "ignore"}


# =============================================================================
# ATTENDEE
# =============================================================================


class Attendee(BaseModel):
    """
    Участник события (одна регистрация).

    Immutable модель (frozen=True):
    - Время (created, changed)
    - Вложенные ресурсы (profile, addresses, answers, barcodes, team)
    - Статусы (checked_in, cancelled, refunded, status)
    - Связи event_id/event и order_id/order
    - Недокументированные поля как непрозрачный JSON (affiliate,
      promotional_code, assigned_number)
    """

    id: str | None = Field(None, description="ID участника")
    created: DateTime | None = Field(None, description="Когда участник создан (заказ размещён)")
    changed: DateTime | None = Field(None, description="Когда участник изменён")
    ticket_class_id: str | None = Field(None, description="ID типа билета")
    ticket_class_name: str | None = Field(None, description="Название типа билета на момент регистрации")
    quantity: int | None = Field(None, description="Число билетов")
    costs: AttendeeCosts | None = Field(None, description="Стоимость для участника")

    # Вложенные ресурсы
    profile: AttendeeProfile | None = Field(None, description="Профиль участника")
    addresses: tuple[AttendeeAddress, ...] | None = Field(None, description="Адреса")
    answers: tuple[AttendeeAnswer, ...] | None = Field(None, description="Ответы на вопросы")
    barcodes: tuple[AttendeeBarcode, ...] | None = Field(None, description="Штрихкоды")
    team: AttendeeTeam | None = Field(None, description="Команда")

    # Статусы
    checked_in: bool | None = Field(None, description="Отмечен на входе")
    cancelled: bool | None = Field(None, description="Отменён")
    refunded: bool | None = Field(None, description="Возвращён")
    status: str | None = Field(None, description="Статус (будет удалён из API)")

    # Связи
    event_id: str | None = Field(None, description="ID события")
    event: Event | None = Field(None, description="Развёрнутое событие (expansion)")
    order_id: str | None = Field(None, description="ID заказа")
    order: Optional["Order"] = Field(None, description="Развёрнутый заказ (expansion)")
    guestlist_id: str | None = Field(None, description="ID гостевого списка, null если не гость")
    invited_by: str | None = Field(None, description="Кем приглашён, null если не гость")

    # Недокументированные поля
    affiliate: JsonValue = Field(None, description="Код партнёра")
    promotional_code: JsonValue = Field(None, description="Применённый промокод")
    assigned_number: JsonValue = Field(None, description="Стартовый номер (забеги)")

    model_config = {"frozen": True, "extra": "ignore"}


# =============================================================================
# ORDER
# =============================================================================


class Order(BaseModel):
    """
    Заказ: одна покупка, содержащая одного или нескольких участников.

    Docs: https://www.eventbrite.com/developer/v3/response_formats/order/#ebapi-std:format-order
    """

    id: str | None = Field(None, description="ID заказа")
    created: DateTime | None = Field(None, description="Когда заказ создан")
    changed: DateTime | None = Field(None, description="Когда заказ изменён")
    name: str | None = Field(None, description="Имя покупателя")
    first_name: str | None = Field(None, description="Имя")
    last_name: str | None = Field(None, description="Фамилия")
    email: str | None = Field(None, description="Email покупателя")
    status: str | None = Field(None, description="Статус заказа")
    time_remaining: int | None = Field(None, description="Секунд до истечения незавершённого заказа")
    costs: AttendeeCosts | None = Field(None, description="Стоимость заказа")

    # Связи
    event_id: str | None = Field(None, description="ID события")
    event: Event | None = Field(None, description="Развёрнутое событие (expansion)")
    attendees: tuple[Attendee, ...] | None = Field(None, description="Участники (expansion)")

    model_config = {"frozen": True, "extra": "ignore"}


Attendee.model_rebuild()
