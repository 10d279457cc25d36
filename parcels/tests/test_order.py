"""
Unit Tests for Order Totals and Volume Discounts

Run with: pytest parcels/tests/test_order.py -v
"""

import dataclasses

import pytest

from parcels import Dimensions, Order, Parcel, ParcelType, ShippingSpeed, Weight


def make_parcel(length: float, width: float, height: float, weight_kg: float = 0.5) -> Parcel:
    """Helper to build a parcel from raw numbers."""
    return Parcel(Dimensions(length, width, height), Weight(weight_kg))


def small(weight_kg: float = 0.5) -> Parcel:
    return make_parcel(5.0, 5.0, 5.0, weight_kg)


def medium(weight_kg: float = 0.5) -> Parcel:
    return make_parcel(20.0, 20.0, 20.0, weight_kg)


def large(weight_kg: float = 0.5) -> Parcel:
    return make_parcel(60.0, 20.0, 20.0, weight_kg)


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def two_parcels() -> list[Parcel]:
    """One Medium (800) and one Small (300) parcel."""
    return [
        make_parcel(4.0, 3.0, 26.0),
        make_parcel(4.0, 3.0, 8.0),
    ]


@pytest.fixture
def six_parcels() -> list[Parcel]:
    """
    Three Medium and three Small parcels.

    Mediums cost 1800 (8 kg), 800, 800: every 3rd free -> the 1800 one.
    Three Smalls are below the every-4th rule.
    """
    return [
        medium(1.0),
        small(),
        medium(8.0),
        small(),
        medium(2.0),
        small(),
    ]


# =============================================================================
# TOTAL COST TESTS
# =============================================================================

class TestTotals:
    """Tests for partial total and speed multiplier."""

    def test_speedy_shipping_doubles_cost(self, two_parcels):
        order = Order(two_parcels, ShippingSpeed.SPEEDY)
        assert order.partial_total_cost() == 1100
        assert order.total_cost() == 2200

    def test_normal_shipping_costs_the_same(self, two_parcels):
        order = Order(two_parcels, ShippingSpeed.NORMAL)
        assert order.partial_total_cost() == 1100
        assert order.discount() == 0
        assert order.total_cost() == 1100

    def test_partial_total_ignores_parcel_order(self, six_parcels):
        forward = Order(six_parcels, ShippingSpeed.NORMAL)
        backward = Order(list(reversed(six_parcels)), ShippingSpeed.NORMAL)
        assert forward.partial_total_cost() == backward.partial_total_cost() == 4300
        assert forward.discount() == backward.discount()

    def test_empty_order(self):
        order = Order([], ShippingSpeed.SPEEDY)
        assert order.partial_total_cost() == 0
        assert order.discount() == 0
        assert order.total_cost() == 0

    def test_multiplier_applies_after_discount(self, six_parcels):
        """(4300 - 1800) * 2, not 4300 * 2 - 1800."""
        order = Order(six_parcels, ShippingSpeed.SPEEDY)
        assert order.total_cost() == 5000


# =============================================================================
# DISCOUNT TESTS
# =============================================================================

class TestDiscount:
    """Tests for every-Nth-parcel-free volume discounts."""

    def test_every_third_medium_free(self, six_parcels):
        order = Order(six_parcels, ShippingSpeed.NORMAL)
        assert order.discount() == -1800
        assert order.total_cost() == 2500

    def test_most_expensive_medium_is_free(self, six_parcels):
        order = Order(six_parcels, ShippingSpeed.NORMAL)
        assert order.free_positions() == [2]
        assert order.free_parcels() == [six_parcels[2]]

    def test_every_fourth_small_free(self):
        parcels = [small(), small(2.0), small(), small()]  # 300, 500, 300, 300
        order = Order(parcels, ShippingSpeed.NORMAL)
        assert order.discount() == -500

    def test_groups_discounted_independently(self):
        parcels = [small(), small(2.0), small(), small(), medium(), medium(), medium()]
        order = Order(parcels, ShippingSpeed.NORMAL)
        # Small: 500 free; Medium: one of three 800s free
        assert order.discount() == -1300
        assert order.total_cost() == (1400 + 2400) - 1300

    def test_below_threshold_no_discount(self):
        order = Order([small(), small(), small(), medium(), medium()], ShippingSpeed.NORMAL)
        assert order.discount() == 0

    def test_multiple_free_parcels_in_group(self):
        """Seven mediums: floor(7 / 3) = 2 most expensive are free."""
        weights = [0.5, 4.0, 0.5, 6.0, 0.5, 0.5, 5.0]   # 4.0->1000, 6.0->1400, 5.0->1200
        order = Order([medium(w) for w in weights], ShippingSpeed.NORMAL)
        assert order.discount() == -(1400 + 1200)
        assert order.free_positions() == [3, 6]

    @pytest.mark.parametrize("make", [large, lambda: make_parcel(120.0, 1.0, 1.0), lambda: small(55.0)])
    def test_types_without_rule_never_discounted(self, make):
        order = Order([make() for _ in range(12)], ShippingSpeed.NORMAL)
        assert order.discount() == 0
        assert order.free_parcels() == []

    def test_heavy_small_parcels_are_not_small_group(self):
        """Heavy parcels do not count towards the Small group."""
        parcels = [small(), small(), small(), small(55.0)]
        assert parcels[3].parcel_type == ParcelType.HEAVY
        assert Order(parcels, ShippingSpeed.NORMAL).discount() == 0

    def test_tied_costs_free_one_parcel(self):
        order = Order([medium(), medium(), medium()], ShippingSpeed.NORMAL)
        assert order.discount() == -800
        assert len(order.free_parcels()) == 1

    def test_discount_is_non_positive(self, six_parcels):
        for parcels in ([], six_parcels, [small()] * 9):
            assert Order(parcels, ShippingSpeed.NORMAL).discount() <= 0


# =============================================================================
# ORDER VALUE TESTS
# =============================================================================

class TestOrderValue:
    """Tests for Order immutability and construction."""

    def test_parcels_kept_in_order(self, six_parcels):
        order = Order(six_parcels, ShippingSpeed.NORMAL)
        assert list(order.parcels) == six_parcels

    def test_caller_list_changes_do_not_leak(self, two_parcels):
        order = Order(two_parcels, ShippingSpeed.NORMAL)
        two_parcels.append(small())
        assert len(order.parcels) == 2
        assert order.partial_total_cost() == 1100

    def test_immutable(self, two_parcels):
        order = Order(two_parcels, ShippingSpeed.NORMAL)
        with pytest.raises(dataclasses.FrozenInstanceError):
            order.shipping_speed = ShippingSpeed.SPEEDY

    def test_speed_accepts_value(self, two_parcels):
        order = Order(two_parcels, "Speedy")
        assert order.shipping_speed is ShippingSpeed.SPEEDY
        assert order.total_cost() == 2200

    def test_queries_are_idempotent(self, six_parcels):
        order = Order(six_parcels, ShippingSpeed.SPEEDY)
        first = (order.partial_total_cost(), order.discount(), order.total_cost())
        second = (order.partial_total_cost(), order.discount(), order.total_cost())
        assert first == second == (4300, -1800, 5000)
