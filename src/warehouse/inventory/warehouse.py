"""Warehouse: the authoritative in-memory collection of products.

Products are keyed by id. Every mutation and every snapshot read happens under
a single re-entrant lock, so concurrent callers see atomic add/remove/update
operations and consistent snapshots. Analytics work on snapshots returned by
:meth:`Warehouse.all` and may be stale relative to later writes.
"""

import threading
from collections import defaultdict
from datetime import date
from uuid import UUID

from protean.exceptions import ObjectNotFoundError, ValidationError

from warehouse.category.category import Category
from warehouse.product.capabilities import Perishable, Shippable, is_expired
from warehouse.product.product import Product, coerce_id
from warehouse.utils.logging import get_logger

logger = get_logger(__name__)


class Warehouse:
    """Mapping of product id to product with last-write-wins semantics."""

    def __init__(self, name: str = "DefaultWarehouse"):
        self.name = name
        self._products: dict[UUID, Product] = {}
        self._lock = threading.RLock()

    def add(self, product: Product) -> None:
        """Add ``product``, replacing any product with the same id."""
        if product is None:
            raise ValidationError({"product": ["Product cannot be null."]})
        if not isinstance(product, Product):
            raise ValidationError({"product": [f"Expected a Product, got {type(product).__name__}"]})

        with self._lock:
            replaced = product.id in self._products
            self._products[product.id] = product

        logger.info(
            "product_added",
            warehouse=self.name,
            product_id=str(product.id),
            category=product.category.name,
            replaced=replaced,
        )

    def remove(self, product_id: UUID | str) -> None:
        """Remove a product. Removing an unknown id does nothing."""
        with self._lock:
            removed = self._products.pop(coerce_id(product_id), None)

        if removed is not None:
            logger.info("product_removed", warehouse=self.name, product_id=str(removed.id))
        else:
            logger.debug("product_remove_skipped", warehouse=self.name, product_id=str(product_id))

    def get(self, product_id: UUID | str) -> Product | None:
        with self._lock:
            return self._products.get(coerce_id(product_id))

    def all(self) -> list[Product]:
        """Snapshot of the current products. Changing it never affects the warehouse."""
        with self._lock:
            return list(self._products.values())

    def update_price(self, product_id: UUID | str, new_price) -> None:
        """Set a new price on an existing product.

        Raises ``ObjectNotFoundError`` when the id is unknown and
        ``ValidationError`` when the product rejects the price.
        """
        with self._lock:
            product = self._products.get(coerce_id(product_id))
            if product is None:
                raise ObjectNotFoundError({"_entity": [f"Product not found with id: {product_id}"]})
            old_price = product.price
            product.set_price(new_price)

        logger.info(
            "product_price_updated",
            warehouse=self.name,
            product_id=str(product.id),
            old_price=str(old_price),
            new_price=str(product.price),
        )

    def grouped_by_category(self) -> dict[Category, tuple[Product, ...]]:
        """Products per category. Empty warehouse gives an empty dict."""
        groups: dict[Category, list[Product]] = defaultdict(list)
        for product in self.all():
            groups[product.category].append(product)
        return {category: tuple(products) for category, products in groups.items()}

    def expired_products(self, today: date | None = None) -> list[Product]:
        """Perishable products whose expiration date is before ``today``."""
        today = today or date.today()
        return [p for p in self.all() if isinstance(p, Perishable) and is_expired(p, today)]

    def shippable_products(self) -> list[Product]:
        return [p for p in self.all() if isinstance(p, Shippable)]

    def clear(self) -> None:
        with self._lock:
            count = len(self._products)
            self._products.clear()
        logger.info("warehouse_cleared", warehouse=self.name, removed=count)

    def is_empty(self) -> bool:
        with self._lock:
            return not self._products

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def __contains__(self, product_id) -> bool:
        try:
            return self.get(product_id) is not None
        except ValidationError:
            return False
