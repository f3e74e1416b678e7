"""Food products: perishable and shippable."""

from datetime import date, datetime
from decimal import Decimal

from protean.exceptions import ValidationError

from warehouse.category.category import Category
from warehouse.product.capabilities import Perishable, Shippable
from warehouse.product.product import Product, non_negative

# Shipping rule: cost = weight * 50
COST_PER_KG = Decimal("50")


class FoodProduct(Product, Perishable, Shippable):
    def __init__(self, name: str, category: Category, price, expiration_date: date, weight, id=None):
        super().__init__(name=name, category=category, price=price, id=id)

        if not isinstance(expiration_date, date):
            raise ValidationError({"expiration_date": ["Expiration date is required"]})

        if isinstance(expiration_date, datetime):
            expiration_date = expiration_date.date()

        self._expiration_date = expiration_date
        self._weight = non_negative(weight, "weight", "Weight cannot be negative.")

    @property
    def expiration_date(self) -> date:
        return self._expiration_date

    @property
    def weight(self) -> Decimal:
        return self._weight

    def shipping_cost(self) -> Decimal:
        return self._weight * COST_PER_KG

    def details(self) -> str:
        return f"Food: {self.name}, Expires: {self._expiration_date.isoformat()}"
