"""First-fit-decreasing packing of shippable products into weight-capped groups."""

from collections.abc import Iterable
from decimal import Decimal

from protean.exceptions import ValidationError

from warehouse.analytics.results import ShippingGroup
from warehouse.shared.money import ZERO, to_decimal


def _weight_of(product) -> Decimal:
    return product.weight if product.weight is not None else ZERO


def pack_first_fit_decreasing(items: Iterable, max_weight_per_group) -> list[ShippingGroup]:
    """Pack ``items`` into groups whose total weight stays within the cap.

    Items are sorted heaviest first (ties keep their input order) and each goes
    into the first group with room for it; otherwise it opens a new group. An
    item heavier than the cap on its own ends up alone in its group. Missing
    weights count as zero.
    """
    if max_weight_per_group is None:
        raise ValidationError({"max_weight_per_group": ["Max weight per group must be positive."]})
    cap = to_decimal(max_weight_per_group, "max_weight_per_group")
    if cap <= ZERO:
        raise ValidationError({"max_weight_per_group": ["Max weight per group must be positive."]})

    ordered = sorted(items, key=_weight_of, reverse=True)

    bins: list[list] = []
    loads: list[Decimal] = []
    for item in ordered:
        weight = _weight_of(item)
        for index, load in enumerate(loads):
            if load + weight <= cap:
                bins[index].append(item)
                loads[index] = load + weight
                break
        else:
            bins.append([item])
            loads.append(weight)

    return [ShippingGroup(products=tuple(members)) for members in bins]
