"""Unit tests for the Item aggregate."""

import pytest

from pim.domain.exceptions import ValidationError
from pim.domain.model.item import Item
from pim.domain.model.value_objects import Money


def _lamp(quantity: int = 5) -> Item:
    return Item.create(
        name="Brass Table Lamp",
        vendor="Arteriors",
        category="Lighting",
        cost=Money.of("150.00"),
        price=Money.of("285.00"),
        quantity=quantity,
    )


class TestItemCreate:

    def test_defaults(self):
        item = _lamp()
        assert item.id is None
        assert item.bwd_price == Money.zero()
        assert item.quantity == 5

    def test_name_required(self):
        with pytest.raises(ValidationError, match="name is required") as info:
            Item.create("  ", "V", "C", Money.of("1"), Money.of("2"))
        assert info.value.field == "name"

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            _lamp(quantity=-1)


class TestItemStock:

    def test_adjust_down(self):
        item = _lamp(10)
        assert item.adjust_stock(-3) == 7

    def test_adjust_floors_at_zero(self):
        item = _lamp(2)
        assert item.adjust_stock(-5) == 0
        assert item.quantity == 0

    def test_adjust_up_has_no_ceiling(self):
        item = _lamp(2)
        assert item.adjust_stock(100) == 102


class TestItemChanges:

    def test_partial_edit(self):
        item = _lamp()
        item.apply_changes({"price": "300.00", "quantity": 9})
        assert item.price == Money.of("300.00")
        assert item.quantity == 9
        assert item.name == "Brass Table Lamp"

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError, match="Unknown item field 'sku'"):
            _lamp().apply_changes({"sku": "X"})

    def test_negative_quantity_edit_rejected(self):
        with pytest.raises(ValidationError):
            _lamp().apply_changes({"quantity": -2})


class TestItemSearch:

    @pytest.mark.parametrize("needle", ["brass", "LIGHT", "arter"])
    def test_matches_name_category_vendor(self, needle):
        assert _lamp().matches(needle)

    def test_no_match(self):
        assert not _lamp().matches("sofa")
