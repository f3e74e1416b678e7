"""Optional product capabilities.

A product kind may be perishable, shippable, both or neither. Analytics code
discovers capabilities with ``isinstance`` checks against these protocols and
never looks at the concrete kind, so a new kind only has to provide the
members below to take part.
"""

from datetime import date
from decimal import Decimal
from typing import Protocol, runtime_checkable


@runtime_checkable
class Perishable(Protocol):
    """A product that goes off after its expiration date."""

    @property
    def expiration_date(self) -> date | None: ...


@runtime_checkable
class Shippable(Protocol):
    """A product with a weight in kilograms that can quote its shipping cost."""

    @property
    def weight(self) -> Decimal | None: ...

    def shipping_cost(self) -> Decimal: ...


def is_expired(product: Perishable, today: date | None = None) -> bool:
    """True when the expiration date is strictly before ``today``.

    Products without an expiration date never expire.
    """
    expiration_date = product.expiration_date
    if expiration_date is None:
        return False
    return expiration_date < (today or date.today())


def is_perishable_shippable(product) -> bool:
    """Dated products that are both perishable and shippable.

    Expiration discounts and the expired count apply only to this group.
    """
    return (
        isinstance(product, Perishable)
        and isinstance(product, Shippable)
        and product.expiration_date is not None
    )
