"""Tests for shipping tier resolution."""

from decimal import Decimal

import pytest

from storefront.core.exceptions import ShippingCatalogError
from storefront.services.shipping import effective_tier, resolve_shipping, shipping_options


class TestResolveShipping:
    def test_selected_tier_used(self, tiers):
        selection = resolve_shipping(Decimal("30"), tiers, "express")

        assert selection.effective.id == "express"
        assert selection.selected_id == "express"
        assert not selection.is_overridden

    def test_threshold_reverts_to_default(self, tiers):
        """Free shipping below its minimum bills standard; the selection stays free."""
        selection = resolve_shipping(Decimal("30"), tiers, "free")

        assert selection.effective.id == "standard"
        assert selection.selected_id == "free"
        assert selection.is_overridden

    def test_threshold_met(self, tiers):
        selection = resolve_shipping(Decimal("50"), tiers, "free")
        assert selection.effective.id == "free"

    def test_crossing_threshold_downward_keeps_selection(self, tiers):
        """Recomputing after the subtotal drops flips only the effective tier."""
        above = resolve_shipping(Decimal("80"), tiers, "free")
        below = resolve_shipping(Decimal("49.99"), tiers, above.selected_id)

        assert above.effective.id == "free"
        assert below.effective.id == "standard"
        assert below.selected_id == "free"

    def test_unknown_selection_falls_back_to_first(self, tiers):
        selection = resolve_shipping(Decimal("100"), tiers, "overnight")

        assert selection.effective.id == "standard"
        assert selection.selected_id == "overnight"

    def test_default_is_catalog_order_not_cheapest(self, tiers):
        reordered = (tiers[1], tiers[0], tiers[2])
        assert effective_tier(Decimal("10"), reordered, "free").id == "express"

    def test_accepts_plain_numbers(self, tiers):
        assert effective_tier(30, tiers, "free").id == "standard"

    def test_empty_catalog(self):
        with pytest.raises(ShippingCatalogError):
            resolve_shipping(Decimal("10"), (), "standard")


class TestShippingOptions:
    def test_rows_in_catalog_order(self, tiers):
        options = shipping_options(Decimal("30"), tiers, "express")

        assert [option.tier.id for option in options] == ["standard", "express", "free"]
        assert [option.selected for option in options] == [False, True, False]

    def test_ineligible_tier_hint(self, tiers):
        free = shipping_options(Decimal("30"), tiers, "standard")[2]

        assert not free.eligible
        assert free.qualification_hint == "Spend $50.00 to qualify"
        assert free.price_display == "Free"

    def test_qualified_hint(self, tiers):
        free = shipping_options(Decimal("50"), tiers, "standard")[2]

        assert free.eligible
        assert free.qualification_hint == "Qualified"

    def test_tier_without_minimum_has_no_hint(self, tiers):
        standard = shipping_options(Decimal("30"), tiers, "standard")[0]

        assert standard.eligible
        assert standard.qualification_hint is None
        assert standard.price_display == "$4.99"
