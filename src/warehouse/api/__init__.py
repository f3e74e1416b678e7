"""Warehouse domain API package."""

from warehouse.api.errors import register_exception_handlers
from warehouse.api.routes import analytics_router, product_router

__all__ = ["analytics_router", "product_router", "register_exception_handlers"]
