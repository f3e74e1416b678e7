"""Tests for first-fit-decreasing shipping groups."""

from collections import Counter
from decimal import Decimal

import pytest
from protean.exceptions import ValidationError
from warehouse.analytics.results import ShippingGroup
from warehouse.analytics.shipping import pack_first_fit_decreasing


def _names(groups):
    return [[p.name for p in group.products] for group in groups]


class TestShippingGroupValidation:
    @pytest.mark.parametrize("cap", [None, 0, Decimal("0"), Decimal("-1")])
    def test_non_positive_cap_rejected(self, analyzer, cap):
        with pytest.raises(ValidationError) as exc:
            analyzer.optimize_shipping_groups(cap)
        assert "Max weight per group must be positive." in str(exc.value)


class TestFirstFitDecreasing:
    def test_group_composition(self, warehouse, analyzer, make_electronics):
        for name, weight in [("B", "3"), ("A", "6"), ("C", "5"), ("D", "2"), ("E", "4")]:
            warehouse.add(make_electronics(name=name, weight=weight))

        groups = analyzer.optimize_shipping_groups(Decimal("10"))
        assert _names(groups) == [["A", "E"], ["C", "B", "D"]]
        assert [g.total_weight for g in groups] == [Decimal("10"), Decimal("10")]

    def test_groups_respect_cap(self, warehouse, analyzer, make_food):
        for i, weight in enumerate(["1.5", "2.25", "0.75", "3", "2", "1", "4.5"]):
            warehouse.add(make_food(name=f"Item {i}", weight=weight))

        cap = Decimal("5")
        for group in analyzer.optimize_shipping_groups(cap):
            assert group.total_weight <= cap

    def test_oversized_item_gets_its_own_group(self, warehouse, analyzer, make_electronics):
        warehouse.add(make_electronics(name="Fridge", weight="40"))
        warehouse.add(make_electronics(name="Phone", weight="0.3"))

        groups = analyzer.optimize_shipping_groups(Decimal("10"))
        assert _names(groups) == [["Fridge"], ["Phone"]]

    def test_equal_weights_keep_snapshot_order(self, warehouse, analyzer, make_electronics):
        for name in ["First", "Second", "Third"]:
            warehouse.add(make_electronics(name=name, weight="4"))

        groups = analyzer.optimize_shipping_groups(Decimal("8"))
        assert _names(groups) == [["First", "Second"], ["Third"]]

    def test_members_match_shippable_products_exactly(
        self, warehouse, analyzer, make_food, make_electronics, make_gift_card
    ):
        shippables = [make_food(name=f"F{i}", weight=str(i + 1)) for i in range(5)]
        shippables.append(make_electronics(weight="7"))
        for product in [*shippables, make_gift_card()]:
            warehouse.add(product)

        groups = analyzer.optimize_shipping_groups(Decimal("8"))
        packed = Counter(p for group in groups for p in group.products)
        assert packed == Counter(shippables)

    def test_deterministic(self, warehouse, analyzer, make_food):
        for i, weight in enumerate(["2", "3", "2", "5", "1", "3"]):
            warehouse.add(make_food(name=f"Item {i}", weight=weight))

        first = analyzer.optimize_shipping_groups(Decimal("6"))
        second = analyzer.optimize_shipping_groups(Decimal("6"))
        assert _names(first) == _names(second)

    def test_missing_weight_counts_as_zero(self, warehouse, analyzer, make_crate, make_electronics):
        warehouse.add(make_electronics(name="Full", weight="10"))
        warehouse.add(make_crate(name="Unweighed", weight=None))

        groups = analyzer.optimize_shipping_groups(Decimal("10"))
        assert _names(groups) == [["Full", "Unweighed"]]
        assert groups[0].total_weight == Decimal("10")

    def test_group_totals(self, warehouse, analyzer, make_food, make_electronics):
        warehouse.add(make_food(name="Milk", weight="1.2"))
        warehouse.add(make_electronics(name="Printer", weight="6"))

        groups = analyzer.optimize_shipping_groups(Decimal("20"))
        assert len(groups) == 1
        assert groups[0].total_weight == Decimal("7.2")
        assert groups[0].total_shipping_cost == Decimal("188.0")

    def test_no_shippables_no_groups(self, warehouse, analyzer, make_gift_card):
        warehouse.add(make_gift_card())
        assert analyzer.optimize_shipping_groups(Decimal("5")) == []

    def test_string_cap_accepted(self, make_electronics):
        groups = pack_first_fit_decreasing([make_electronics(weight="1")], "2.5")
        assert len(groups) == 1


class TestShippingGroup:
    def test_products_are_a_tuple(self, make_electronics):
        group = ShippingGroup(products=[make_electronics()])
        assert isinstance(group.products, tuple)
        assert len(group) == 1

    def test_empty_group_totals(self):
        group = ShippingGroup()
        assert group.total_weight == Decimal("0")
        assert group.total_shipping_cost == Decimal("0")


class TestTotalShippingCost:
    def test_sums_every_shippable_quote(self, warehouse, analyzer, make_food, make_electronics, make_gift_card):
        warehouse.add(make_food(name="Milk", weight="1.2"))
        warehouse.add(make_electronics(name="Printer", weight="6"))
        warehouse.add(make_gift_card())

        assert analyzer.total_shipping_cost() == Decimal("188.00")

    def test_empty_warehouse(self, analyzer):
        assert analyzer.total_shipping_cost() == Decimal("0")
