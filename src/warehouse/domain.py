"""Warehouse bounded context: in-memory inventory and its analytics.

Composition root. Each call to :func:`create_warehouse` builds an independent
store, so tests and applications own the lifetime of their inventory.
"""

from datetime import date

from warehouse.config import WarehouseSettings, load_settings
from warehouse.utils.logging import configure_logging, get_logger

configure_logging(log_file_prefix="warehouse")

logger = get_logger(__name__)


def create_warehouse(settings: WarehouseSettings | None = None):
    """Build an empty warehouse named after ``settings``."""
    from warehouse.inventory.warehouse import Warehouse

    settings = settings or load_settings()
    return Warehouse(name=settings.name)


def create_analyzer(warehouse, settings: WarehouseSettings | None = None, clock=date.today):
    """Build an analyzer reading from ``warehouse``."""
    from warehouse.analytics.analyzer import WarehouseAnalyzer

    return WarehouseAnalyzer(warehouse, clock=clock, settings=settings or load_settings())
