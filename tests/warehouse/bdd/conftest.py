"""Shared BDD fixtures and step definitions for the warehouse."""

from datetime import timedelta
from decimal import Decimal

import pytest
from protean.exceptions import ObjectNotFoundError, ValidationError
from pytest_bdd import given, parsers, then
from warehouse.category.category import Category
from warehouse.product.electronics import ElectronicsProduct
from warehouse.product.food import FoodProduct


# ---------------------------------------------------------------------------
# Scalar fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def products():
    """Products added by Given steps, keyed by name."""
    return {}


@pytest.fixture()
def error():
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("an empty warehouse")
def _(warehouse):
    assert warehouse.is_empty()


@given(parsers.cfparse('a food product "{name}" priced {price} weighing {weight} kg expiring in {days:d} days'))
def _(warehouse, products, today, name, price, weight, days):
    product = FoodProduct(
        name=name,
        category=Category.of("Dairy"),
        price=Decimal(price),
        expiration_date=today + timedelta(days=days),
        weight=Decimal(weight),
    )
    warehouse.add(product)
    products[name] = product


@given(parsers.cfparse('an electronics product "{name}" priced {price} weighing {weight} kg'))
def _(warehouse, products, name, price, weight):
    product = ElectronicsProduct(
        name=name,
        category=Category.of("Electronics"),
        price=Decimal(price),
        warranty_months=12,
        weight=Decimal(weight),
    )
    warehouse.add(product)
    products[name] = product


# ---------------------------------------------------------------------------
# Then steps (shared)
# ---------------------------------------------------------------------------
@then("the action fails with a validation error")
def _(error):
    assert error["exc"] is not None, "Expected a validation error but none was raised"
    assert isinstance(error["exc"], ValidationError)


@then("the action fails with a not found error")
def _(error):
    assert error["exc"] is not None, "Expected a not found error but none was raised"
    assert isinstance(error["exc"], ObjectNotFoundError)


@then(parsers.cfparse("the product count is {count:d}"))
def _(warehouse, count):
    assert len(warehouse) == count
