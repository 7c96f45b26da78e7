"""Unit tests for the ledger's aggregation queries."""

import pytest

from ims.domain.exceptions import InsufficientStockError, ValidationError
from ims.domain.model.reports import FinancialOverview, TopSeller
from tests.fakes import build_services


def _stocked():
    _, inventory, ledger = build_services()
    inventory.add("Widget", 10, 2.5)
    inventory.add("Gadget", 5, 10.0)
    inventory.add("Gizmo", 8, 1.0)
    return inventory, ledger


class TestFinancialOverview:

    def test_empty_ledger(self):
        _, _, ledger = build_services()
        assert ledger.financial_overview() == FinancialOverview(0.0, 0.0)

    def test_after_sales(self):
        inventory, ledger = _stocked()
        ledger.record_sale([(1, 3), (2, 1)])
        ledger.record_sale([(3, 2)])

        overview = ledger.financial_overview()

        assert overview.total_sales == 19.5
        # 7 * 2.5 + 4 * 10.0 + 6 * 1.0
        assert overview.inventory_value == 63.5

    def test_total_sales_equals_sum_of_records(self):
        inventory, ledger = _stocked()
        for lines in ([(1, 1)], [(2, 2), (3, 1)], [(1, 4)]):
            ledger.record_sale(lines)

        total_sales, _ = ledger.financial_overview()
        assert total_sales == sum(record.total_amount for record in ledger.get_sales())

    def test_rejected_sale_not_counted(self):
        inventory, ledger = _stocked()
        with pytest.raises(InsufficientStockError):
            ledger.record_sale([(1, 1), (2, 50)])
        assert ledger.financial_overview().total_sales == 0.0

    def test_total_sales_survives_price_change(self):
        inventory, ledger = _stocked()
        ledger.record_sale([(1, 2)])
        inventory.update(1, price=100.0)
        assert ledger.financial_overview().total_sales == 5.0


class TestTopSellingItems:

    def test_ranked_by_cumulative_quantity(self):
        inventory, ledger = _stocked()
        ledger.record_sale([(1, 2), (2, 1)])
        ledger.record_sale([(3, 5), (1, 1)])

        assert ledger.get_top_selling_items(3) == [
            TopSeller("Gizmo", 5),
            TopSeller("Widget", 3),
            TopSeller("Gadget", 1),
        ]

    def test_truncated_to_n(self):
        inventory, ledger = _stocked()
        ledger.record_sale([(1, 2), (2, 1), (3, 5)])
        assert ledger.get_top_selling_items(1) == [("Gizmo", 5)]

    def test_zero_yields_empty(self):
        inventory, ledger = _stocked()
        ledger.record_sale([(1, 2)])
        assert ledger.get_top_selling_items(0) == []

    def test_n_larger_than_names_yields_all(self):
        inventory, ledger = _stocked()
        ledger.record_sale([(1, 2), (2, 1)])
        assert len(ledger.get_top_selling_items(10)) == 2

    def test_ties_keep_first_seen_order(self):
        inventory, ledger = _stocked()
        ledger.record_sale([(2, 2)])
        ledger.record_sale([(1, 2), (3, 2)])

        names = [seller.name for seller in ledger.get_top_selling_items(3)]
        assert names == ["Gadget", "Widget", "Gizmo"]

    def test_grouped_by_name_not_id(self):
        inventory, ledger = _stocked()
        twin = inventory.add("Widget", 5, 3.0)
        ledger.record_sale([(1, 1), (twin, 2)])

        assert ledger.get_top_selling_items(5) == [("Widget", 3)]

    def test_name_captured_at_sale_time(self):
        inventory, ledger = _stocked()
        ledger.record_sale([(1, 1)])
        inventory.update(1, name="Renamed")
        ledger.record_sale([(1, 1)])

        assert ledger.get_top_selling_items(5) == [("Widget", 1), ("Renamed", 1)]

    def test_negative_n_rejected(self):
        _, ledger = _stocked()
        with pytest.raises(ValidationError, match="cannot be negative"):
            ledger.get_top_selling_items(-1)
