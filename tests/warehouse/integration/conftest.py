"""Fixtures for the HTTP integration tests."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from warehouse.api import analytics_router, product_router, register_exception_handlers


@pytest.fixture()
def client(warehouse, analyzer):
    app = FastAPI()
    app.include_router(product_router)
    app.include_router(analytics_router)
    register_exception_handlers(app)
    app.state.warehouse = warehouse
    app.state.analyzer = analyzer
    return TestClient(app)


@pytest.fixture()
def add_product(client):
    """POST /products and return the new product id."""

    def _add(**overrides):
        payload = {
            "kind": "food",
            "name": "Milk",
            "category": "dairy",
            "price": "10.00",
            "weight": "1.0",
            "expiration_date": "2025-06-25",
        }
        payload.update(overrides)
        response = client.post("/products", json=payload)
        assert response.status_code == 201, response.text
        return response.json()["product_id"]

    return _add
