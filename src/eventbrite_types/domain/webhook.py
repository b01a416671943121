"""
Webhook и TrackingBeacon — интеграционные ресурсы аккаунта
"""

from pydantic import BaseModel, Field, JsonValue


class Webhook(BaseModel):
    """Webhook аккаунта."""

    id: str | None = Field(None, description="ID webhook")
    endpoint_url: str | None = Field(None, description="URL, на который отправляются данные")
    actions: str | None = Field(
        None, description="Действие или комбинация действий, запускающих webhook"
    )

    model_config = {"frozen": True, "extra": "ignore"}


class TrackingBeacon(BaseModel):
    """
    Tracking pixel организатора на страницах событий.

    Docs: https://www.eventbrite.com/developer/v3/response_formats/tracking_beacon/#ebapi-tracking-beacon

    Ровно один из event_id / user_id задаёт, где загружается pixel:
    на одном событии или на всех событиях пользователя. Здесь это не проверяется.
    """

    id: str | None = Field(None, description="ID tracking beacon")
    tracking_type: str | None = Field(
        None,
        description=(
            "Тип: Facebook Pixel, Twitter Ads, AdWords, Google Analytics, "
            "Simple Image Pixel, Adroll iPixel"
        ),
    )
    event_id: str | None = Field(None, description="ID события")
    user_id: str | None = Field(None, description="ID пользователя")
    pixel_id: str | None = Field(None, description="ID, выданный третьей стороной")
    # Формат не документирован
    triggers: JsonValue = Field(None, description="Где срабатывает pixel")

    model_config = {"frozen": True, "extra": "ignore"}
