"""Electronics products: shippable, with a warranty."""

from decimal import Decimal

from protean.exceptions import ValidationError

from warehouse.category.category import Category
from warehouse.product.capabilities import Shippable
from warehouse.product.product import Product, non_negative

# Shipping rule: base 79, plus 49 when heavier than 5 kg
BASE_SHIPPING_COST = Decimal("79")
HEAVY_SURCHARGE = Decimal("49")
HEAVY_WEIGHT_KG = Decimal("5")


class ElectronicsProduct(Product, Shippable):
    def __init__(self, name: str, category: Category, price, warranty_months: int, weight, id=None):
        super().__init__(name=name, category=category, price=price, id=id)

        if isinstance(warranty_months, bool) or not isinstance(warranty_months, int):
            raise ValidationError({"warranty_months": ["Warranty months must be an integer."]})
        if warranty_months < 0:
            raise ValidationError({"warranty_months": ["Warranty months cannot be negative."]})

        self._warranty_months = warranty_months
        self._weight = non_negative(weight, "weight", "Weight cannot be negative.")

    @property
    def warranty_months(self) -> int:
        return self._warranty_months

    @property
    def weight(self) -> Decimal:
        return self._weight

    def shipping_cost(self) -> Decimal:
        cost = BASE_SHIPPING_COST
        if self._weight > HEAVY_WEIGHT_KG:
            cost += HEAVY_SURCHARGE
        return cost

    def details(self) -> str:
        return f"Electronics: {self.name}, Warranty: {self._warranty_months} months"
