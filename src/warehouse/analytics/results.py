"""Result records returned by the warehouse analytics."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from warehouse.product.product import Product
from warehouse.shared.money import ZERO


@dataclass(frozen=True)
class ShippingGroup:
    """A set of shippable products packed together under a weight cap."""

    products: tuple = ()
    total_weight: Decimal = field(init=False)
    total_shipping_cost: Decimal = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "products", tuple(self.products))
        object.__setattr__(
            self,
            "total_weight",
            sum((p.weight for p in self.products if p.weight is not None), ZERO),
        )
        object.__setattr__(
            self,
            "total_shipping_cost",
            sum((p.shipping_cost() for p in self.products), ZERO),
        )

    def __len__(self) -> int:
        return len(self.products)


@dataclass(frozen=True)
class InventoryValidation:
    high_value_percentage: float
    category_diversity: int
    high_value_warning: bool
    minimum_diversity: bool

    @classmethod
    def evaluate(
        cls,
        high_value_percentage: float,
        category_diversity: int,
        warning_percent: float = 70.0,
        min_diversity: int = 2,
    ) -> InventoryValidation:
        return cls(
            high_value_percentage=high_value_percentage,
            category_diversity=category_diversity,
            high_value_warning=high_value_percentage > warning_percent,
            minimum_diversity=category_diversity >= min_diversity,
        )


@dataclass(frozen=True)
class InventoryStatistics:
    total_products: int
    total_value: Decimal
    average_price: Decimal
    expired_count: int
    category_count: int
    most_expensive_product: Product | None
    cheapest_product: Product | None
