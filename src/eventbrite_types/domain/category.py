"""
Category — Двухуровневая таксономия событий

Docs: https://www.eventbrite.com/developer/v3/response_formats/event/#ebapi-category

Category владеет упорядоченным списком SubCategory, SubCategory держит
обратную ссылку parent_category. Обратная ссылка не владеющая: при декодировании
Category она собирается копированием скалярных полей уже разобранной внешней
Category, вложенный wire-объект повторно не декодируется. Поэтому декодирование
линейно по размеру payload и всегда завершается.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# SUBCATEGORY
# =============================================================================


class SubCategory(BaseModel):
    """
    Более узкая категория внутри Category.

    Docs: https://www.eventbrite.com/developer/v3/response_formats/event/#ebapi-subcategory
    """

    id: str | None = Field(None, description="ID подкатегории")
    name: str | None = Field(None, description="Название подкатегории")
    parent_category: Optional["Category"] = Field(
        None, description="Категория-родитель (только если есть в payload)"
    )

    model_config = {"frozen": True, "extra": "ignore"}


# =============================================================================
# CATEGORY
# =============================================================================


class Category(BaseModel):
    """
    Общая категория события (vertical), например "Music" или "Endurance".

    Docs: https://www.eventbrite.com/developer/v3/response_formats/event/#ebapi-category
    """

    id: str | None = Field(None, description="ID категории")
    name: str | None = Field(None, description="Название категории")
    name_localized: str | None = Field(
        None, description="Название, локализованное в текущую локаль (если есть)"
    )
    short_name: str | None = Field(None, description="Короткое название для сайдбаров")
    short_name_localized: str | None = Field(None, description="Локализованное короткое название")
    sub_categories: tuple[SubCategory, ...] | None = Field(
        None, description="Подкатегории (только на некоторых endpoint'ах)"
    )

    model_config = {"frozen": True, "extra": "ignore"}

    @model_validator(mode="wrap")
    @classmethod
    def link_parent_categories(cls, data: Any, handler) -> "Category":
        """
        Восстановление обратных ссылок SubCategory.parent_category.

        parent_category вырезается из payload подкатегорий до валидации
        и после неё подставляется копией скалярных полей внешней Category.
        Входные данные вызывающего кода не изменяются.
        """
        if not isinstance(data, dict) or not isinstance(data.get("sub_categories"), list):
            return handler(data)

        linked: list[bool] = []
        stripped: list[Any] = []
        for raw in data["sub_categories"]:
            has_parent = isinstance(raw, dict) and "parent_category" in raw
            if has_parent:
                raw = {k: v for k, v in raw.items() if k != "parent_category"}
            linked.append(has_parent)
            stripped.append(raw)

        category = handler({**data, "sub_categories": stripped})
        if not any(linked):
            return category

        parent = category.scalar_copy()
        sub_categories = tuple(
            sub.model_copy(update={"parent_category": parent}) if has_parent else sub
            for sub, has_parent in zip(category.sub_categories, linked)
        )
        return category.model_copy(update={"sub_categories": sub_categories})

    def scalar_copy(self) -> "Category":
        """Копия только скалярных полей (без sub_categories), с тем же набором set-полей."""
        fields_set = self.model_fields_set - {"sub_categories"}
        return Category.model_construct(
            _fields_set=fields_set,
            **{name: getattr(self, name) for name in fields_set},
        )


SubCategory.model_rebuild()
