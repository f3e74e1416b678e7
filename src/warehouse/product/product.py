"""Product entity: the common base of every product kind held in a warehouse."""

from abc import ABC, abstractmethod
from decimal import Decimal
from uuid import UUID, uuid4

from protean.exceptions import ValidationError

from warehouse.category.category import Category
from warehouse.shared.money import ZERO, to_decimal


def coerce_id(value) -> UUID:
    """Accept a ``UUID`` or its string form."""
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError:
        raise ValidationError({"id": [f"Invalid product id: {value!r}"]}) from None


def non_negative(value, field: str, message: str) -> Decimal:
    """Convert ``value`` to ``Decimal`` and reject ``None`` or negatives."""
    if value is None:
        raise ValidationError({field: [message]})
    amount = to_decimal(value, field)
    if amount < ZERO:
        raise ValidationError({field: [message]})
    return amount


class Product(ABC):
    """A uniquely identified product with a name, a category and a price.

    Only the price is mutable, and only through :meth:`set_price`, which
    re-validates it.
    """

    def __init__(self, name: str, category: Category, price, id: UUID | str | None = None):
        if not name or not str(name).strip():
            raise ValidationError({"name": ["Product name can't be blank"]})
        if not isinstance(category, Category):
            raise ValidationError({"category": ["Category is required"]})

        self._id = coerce_id(id) if id is not None else uuid4()
        self._name = str(name).strip()
        self._category = category
        self._price = non_negative(price, "price", "Price cannot be negative.")

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def category(self) -> Category:
        return self._category

    @property
    def price(self) -> Decimal:
        return self._price

    def set_price(self, new_price) -> None:
        self._price = non_negative(new_price, "price", "Price cannot be negative.")

    @abstractmethod
    def details(self) -> str:
        """Human-readable, kind-specific description."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id}, name={self._name!r}, price={self._price})"
