"""Shared fixtures for the warehouse tests."""

from datetime import date, timedelta
from decimal import Decimal

import pytest
from warehouse.analytics.analyzer import WarehouseAnalyzer
from warehouse.category.category import Category
from warehouse.config import WarehouseSettings
from warehouse.inventory.warehouse import Warehouse
from warehouse.product.electronics import ElectronicsProduct
from warehouse.product.food import FoodProduct
from warehouse.product.product import Product


class Crate(Product):
    """Shippable by shape only: does not inherit the Shippable protocol."""

    def __init__(self, name, category, price, weight=None, flat_cost="5"):
        super().__init__(name=name, category=category, price=price)
        self._weight = Decimal(weight) if weight is not None else None
        self._flat_cost = Decimal(flat_cost)

    @property
    def weight(self):
        return self._weight

    def shipping_cost(self):
        return self._flat_cost

    def details(self):
        return f"Crate: {self.name}"


class GiftCard(Product):
    """Neither perishable nor shippable."""

    def details(self):
        return f"Gift card: {self.name}"


class Flowers(Product):
    """Perishable but not shippable; declares the members structurally."""

    def __init__(self, name, category, price, expiration_date):
        super().__init__(name=name, category=category, price=price)
        self._expiration_date = expiration_date

    @property
    def expiration_date(self):
        return self._expiration_date

    def details(self):
        return f"Flowers: {self.name}"


class Sourdough(Product):
    """Perishable and shippable by shape only, with nothing beyond the bare members."""

    def __init__(self, name, category, price, expiration_date, weight):
        super().__init__(name=name, category=category, price=price)
        self._expiration_date = expiration_date
        self._weight = Decimal(weight)

    @property
    def expiration_date(self):
        return self._expiration_date

    @property
    def weight(self):
        return self._weight

    def shipping_cost(self):
        return self._weight * 10

    def details(self):
        return f"Sourdough: {self.name}"


# ---------------------------------------------------------------------------
# Scalar fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def today():
    return date(2025, 6, 15)


@pytest.fixture()
def settings():
    return WarehouseSettings(name="TestWarehouse")


# ---------------------------------------------------------------------------
# Warehouse fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def warehouse(settings):
    return Warehouse(name=settings.name)


@pytest.fixture()
def analyzer(warehouse, today, settings):
    return WarehouseAnalyzer(warehouse, clock=lambda: today, settings=settings)


# ---------------------------------------------------------------------------
# Product factories
# ---------------------------------------------------------------------------
@pytest.fixture()
def make_food(today):
    def _make(name="Milk", category="Dairy", price="10.00", expires_in=10, weight="1.0", **kwargs):
        return FoodProduct(
            name=name,
            category=Category.of(category),
            price=Decimal(price),
            expiration_date=today + timedelta(days=expires_in),
            weight=Decimal(weight),
            **kwargs,
        )

    return _make


@pytest.fixture()
def make_electronics():
    def _make(name="Laptop", category="Electronics", price="999.00", warranty_months=24, weight="2.0", **kwargs):
        return ElectronicsProduct(
            name=name,
            category=Category.of(category),
            price=Decimal(price),
            warranty_months=warranty_months,
            weight=Decimal(weight),
            **kwargs,
        )

    return _make


@pytest.fixture()
def make_crate():
    def _make(name="Crate", category="Furniture", price="50.00", weight=None, flat_cost="5"):
        return Crate(name=name, category=Category.of(category), price=Decimal(price), weight=weight, flat_cost=flat_cost)

    return _make


@pytest.fixture()
def make_gift_card():
    def _make(name="Gift card", category="Vouchers", price="25.00"):
        return GiftCard(name=name, category=Category.of(category), price=Decimal(price))

    return _make


@pytest.fixture()
def make_flowers(today):
    def _make(name="Roses", category="Garden", price="15.00", expires_in=1):
        return Flowers(
            name=name,
            category=Category.of(category),
            price=Decimal(price),
            expiration_date=today + timedelta(days=expires_in),
        )

    return _make


@pytest.fixture()
def make_sourdough(today):
    def _make(name="Sourdough", category="Bakery", price="100.00", expires_in=0, weight="1.0"):
        return Sourdough(
            name=name,
            category=Category.of(category),
            price=Decimal(price),
            expiration_date=today + timedelta(days=expires_in),
            weight=weight,
        )

    return _make
