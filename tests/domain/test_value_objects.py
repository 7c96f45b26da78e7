"""Unit tests for domain value objects."""

import math

import pytest

from ims.domain.exceptions import ValidationError
from ims.domain.model.value_objects import ItemName, Price, Quantity, require_int


# ── ItemName ─────────────────────────────────────────────────────────────────


class TestItemName:

    def test_valid_name(self):
        assert ItemName("Widget").value == "Widget"

    def test_surrounding_whitespace_trimmed(self):
        assert ItemName("  Widget  ").value == "Widget"

    def test_empty_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            ItemName("")

    def test_whitespace_only_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            ItemName("   \t")

    def test_non_string_rejected(self):
        with pytest.raises(ValidationError, match="must be a string"):
            ItemName(42)


# ── Price ────────────────────────────────────────────────────────────────────


class TestPrice:

    def test_float_price(self):
        assert Price(2.5).amount == 2.5

    def test_int_coerced_to_float(self):
        price = Price(10)
        assert price.amount == 10.0
        assert isinstance(price.amount, float)

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="greater than zero"):
            Price(0)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="greater than zero"):
            Price(-1.5)

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="finite"):
            Price(math.nan)

    def test_infinity_rejected(self):
        with pytest.raises(ValidationError, match="finite"):
            Price(math.inf)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be a number"):
            Price(True)

    def test_parse_text(self):
        assert Price.parse("19.99") == 19.99

    def test_parse_passes_numbers_through(self):
        assert Price.parse(2.5) == 2.5

    def test_parse_does_not_range_check(self):
        assert Price.parse("-1") == -1.0

    def test_parse_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid price"):
            Price.parse("ten")


# ── require_int ──────────────────────────────────────────────────────────────


class TestRequireInt:

    def test_int_returned(self):
        assert require_int(7, "Item ID") == 7

    @pytest.mark.parametrize("value", [True, "1", 1.0, [1], None])
    def test_non_int_rejected(self, value):
        with pytest.raises(ValidationError, match="Item ID must be an integer"):
            require_int(value, "Item ID")


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(-3)

    def test_float_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(2.0)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(True)
