"""Category value object for grouping products."""

import threading
from typing import ClassVar

from protean.exceptions import ValidationError
from pydantic import BaseModel, ConfigDict, field_validator


def normalize_name(name: str) -> str:
    """Trim and capitalize: first character upper, the remainder lower.

    This is not title-casing, ``"home GARDEN"`` becomes ``"Home garden"``.
    """
    name = name.strip()
    return name[:1].upper() + name[1:].lower()


class Category(BaseModel):
    """Canonical, case-normalized label shared by products.

    Two categories are equal when their normalized names are equal. Use
    :meth:`of` to obtain instances; it hands back the same object for the
    same normalized name.
    """

    model_config = ConfigDict(frozen=True)

    name: str

    _registry: ClassVar[dict[str, "Category"]] = {}
    _registry_lock: ClassVar[threading.Lock] = threading.Lock()

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, value: str) -> str:
        normalized = normalize_name(value)
        if not normalized:
            raise ValueError("Category name can't be blank")
        return normalized

    @classmethod
    def of(cls, name: str | None) -> "Category":
        if name is None:
            raise ValidationError({"name": ["Category name can't be null"]})
        if not isinstance(name, str):
            raise ValidationError({"name": [f"Category name must be a string, got {type(name).__name__}"]})

        normalized = normalize_name(name)
        if not normalized:
            raise ValidationError({"name": ["Category name can't be blank"]})

        with cls._registry_lock:
            category = cls._registry.get(normalized)
            if category is None:
                category = cls(name=normalized)
                cls._registry[normalized] = category
            return category

    def __str__(self) -> str:
        return self.name
