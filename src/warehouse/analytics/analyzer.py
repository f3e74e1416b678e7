"""Warehouse analytics: filters, statistics, discounts and shipping groups.

Every operation takes a fresh snapshot of the warehouse, computes its result
from that snapshot and keeps nothing between calls. Dates are resolved
against an injectable clock so results are reproducible in tests.
"""

from collections import defaultdict
from collections.abc import Callable
from datetime import date, timedelta
from decimal import Decimal

from protean.exceptions import ValidationError

from warehouse.analytics.results import InventoryStatistics, InventoryValidation, ShippingGroup
from warehouse.analytics.shipping import pack_first_fit_decreasing
from warehouse.category.category import Category
from warehouse.config import WarehouseSettings
from warehouse.inventory.warehouse import Warehouse
from warehouse.product.capabilities import Perishable, Shippable, is_expired, is_perishable_shippable
from warehouse.product.product import Product
from warehouse.shared.money import ZERO, divide, round_half_up, to_decimal
from warehouse.utils.logging import get_logger

logger = get_logger(__name__)

# Days until expiration -> price multiplier
DISCOUNT_TIERS: dict[int, Decimal] = {
    0: Decimal("0.50"),
    1: Decimal("0.70"),
    2: Decimal("0.85"),
    3: Decimal("0.85"),
}


class WarehouseAnalyzer:
    """Read-only analytics over a :class:`Warehouse`."""

    def __init__(
        self,
        warehouse: Warehouse,
        clock: Callable[[], date] = date.today,
        settings: WarehouseSettings | None = None,
    ):
        if warehouse is None:
            raise ValidationError({"warehouse": ["Warehouse cannot be null."]})
        self.warehouse = warehouse
        self.clock = clock
        self.settings = settings or WarehouseSettings()

    def _today(self, today: date | None) -> date:
        return today if today is not None else self.clock()

    # --- Search and filter --------------------------------------------------

    def find_products_in_category(self, category: Category) -> list[Product]:
        """Products in ``category``, in reverse snapshot order."""
        if category is None:
            raise ValidationError({"category": ["Category cannot be null."]})

        result = [p for p in self.warehouse.all() if p.category == category]
        result.reverse()
        return result

    def find_products_in_price_range(self, min_price, max_price) -> list[Product]:
        """Products priced within ``[min_price, max_price]``."""
        low = to_decimal(min_price, "min_price")
        high = to_decimal(max_price, "max_price")
        return [p for p in self.warehouse.all() if low <= p.price <= high]

    def find_products_expiring_within_days(self, days: int, today: date | None = None) -> list[Product]:
        """Perishables expiring between today and ``today + days``, both inclusive."""
        if days is None or days < 0:
            raise ValidationError({"days": ["Days must be zero or positive."]})

        start = self._today(today)
        end = start + timedelta(days=days)
        return [
            p
            for p in self.warehouse.all()
            if isinstance(p, Perishable) and p.expiration_date is not None and start <= p.expiration_date <= end
        ]

    def search_products_by_name(self, term: str) -> list[Product]:
        """Case-insensitive substring match on product names."""
        if term is None:
            raise ValidationError({"term": ["Search term cannot be null."]})

        needle = term.casefold()
        return [p for p in self.warehouse.all() if needle in p.name.casefold()]

    def find_products_above_price(self, threshold) -> list[Product]:
        """Products priced strictly above ``threshold``."""
        limit = to_decimal(threshold, "threshold")
        return [p for p in self.warehouse.all() if p.price > limit]

    # --- Analytics ----------------------------------------------------------

    def weighted_average_price_by_category(self) -> dict[Category, Decimal]:
        """Weight-weighted average price per category.

        Only shippable members with a positive weight count towards the
        weighted average. A category without any such member falls back to
        the plain mean price of all its members.
        """
        by_category: dict[Category, list[Product]] = defaultdict(list)
        for product in self.warehouse.all():
            by_category[product.category].append(product)

        result: dict[Category, Decimal] = {}
        for category, items in by_category.items():
            weighted_sum = ZERO
            weight_sum = ZERO
            for product in items:
                if not isinstance(product, Shippable):
                    continue
                weight = product.weight if product.weight is not None else ZERO
                if weight > ZERO:
                    weighted_sum += product.price * weight
                    weight_sum += weight

            if weight_sum > ZERO:
                result[category] = divide(weighted_sum, weight_sum)
            else:
                total = sum((p.price for p in items), ZERO)
                result[category] = divide(total, len(items))

        logger.debug("weighted_averages_computed", categories=len(result))
        return result

    def expiration_based_discounts(self, today: date | None = None) -> dict[Product, Decimal]:
        """Price of every product after expiration discounts.

        Dated perishable-and-shippable products expiring today pay 50%,
        tomorrow 70%, in two or three days 85%. Anything else, including
        already expired items, keeps its price.
        """
        today = self._today(today)
        result: dict[Product, Decimal] = {}
        discounted = 0

        for product in self.warehouse.all():
            price = product.price
            if is_perishable_shippable(product):
                multiplier = DISCOUNT_TIERS.get((product.expiration_date - today).days)
                if multiplier is not None:
                    price = round_half_up(price * multiplier)
                    discounted += 1
            result[product] = price

        logger.debug("expiration_discounts_computed", products=len(result), discounted=discounted)
        return result

    def validate_inventory_constraints(self, high_value_threshold=None) -> InventoryValidation:
        """Share of high-value products and category diversity.

        The threshold defaults to the configured high-value threshold.
        """
        items = self.warehouse.all()
        if not items:
            return self._validation(0.0, 0)

        threshold = to_decimal(
            high_value_threshold if high_value_threshold is not None else self.settings.high_value_threshold,
            "high_value_threshold",
        )
        high_value_count = sum(1 for p in items if p.price >= threshold)
        percentage = (high_value_count * 100.0) / len(items)
        diversity = len({p.category for p in items})

        validation = self._validation(percentage, diversity)
        if validation.high_value_warning:
            logger.warning(
                "high_value_concentration",
                warehouse=self.warehouse.name,
                percentage=percentage,
                threshold=str(threshold),
            )
        return validation

    def _validation(self, percentage: float, diversity: int) -> InventoryValidation:
        return InventoryValidation.evaluate(
            percentage,
            diversity,
            warning_percent=self.settings.high_value_warning_percent,
            min_diversity=self.settings.min_category_diversity,
        )

    def inventory_statistics(self, today: date | None = None) -> InventoryStatistics:
        """Counts, totals and extremes of the current inventory."""
        today = self._today(today)
        items = self.warehouse.all()
        total_products = len(items)

        total_value = sum((p.price for p in items), ZERO)
        average_price = ZERO if total_products == 0 else divide(total_value, total_products)
        expired_count = sum(1 for p in items if is_perishable_shippable(p) and is_expired(p, today))
        category_count = len({p.category for p in items})

        # max()/min() return the first extreme encountered
        most_expensive = max(items, key=lambda p: p.price, default=None)
        cheapest = min(items, key=lambda p: p.price, default=None)

        return InventoryStatistics(
            total_products=total_products,
            total_value=total_value,
            average_price=average_price,
            expired_count=expired_count,
            category_count=category_count,
            most_expensive_product=most_expensive,
            cheapest_product=cheapest,
        )

    def optimize_shipping_groups(self, max_weight_per_group) -> list[ShippingGroup]:
        """Group shippable products first-fit-decreasing under a weight cap."""
        groups = pack_first_fit_decreasing(self.warehouse.shippable_products(), max_weight_per_group)
        logger.debug(
            "shipping_groups_optimized",
            warehouse=self.warehouse.name,
            groups=len(groups),
            max_weight=str(max_weight_per_group),
        )
        return groups

    def total_shipping_cost(self) -> Decimal:
        """Sum of the shipping quotes of every shippable product."""
        return sum((p.shipping_cost() for p in self.warehouse.shippable_products()), ZERO)
