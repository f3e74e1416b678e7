"""Warehouse settings, read from the environment."""

import os
from decimal import Decimal

from pydantic import BaseModel, Field


class WarehouseSettings(BaseModel):
    """Tunable thresholds for the inventory analytics."""

    name: str = "DefaultWarehouse"
    high_value_threshold: Decimal = Field(default=Decimal("1000"), ge=0)
    high_value_warning_percent: float = Field(default=70.0, ge=0.0, le=100.0)
    min_category_diversity: int = Field(default=2, ge=0)


_ENV_FIELDS = {
    "name": "WAREHOUSE_NAME",
    "high_value_threshold": "WAREHOUSE_HIGH_VALUE_THRESHOLD",
    "high_value_warning_percent": "WAREHOUSE_HIGH_VALUE_WARNING_PERCENT",
    "min_category_diversity": "WAREHOUSE_MIN_CATEGORY_DIVERSITY",
}


def load_settings(**overrides) -> WarehouseSettings:
    """Build settings from ``WAREHOUSE_*`` variables; keyword overrides win."""
    values = {field: os.environ[var] for field, var in _ENV_FIELDS.items() if os.environ.get(var)}
    values.update(overrides)
    return WarehouseSettings(**values)
