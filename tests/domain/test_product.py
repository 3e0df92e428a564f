"""Unit tests for the Product aggregate."""

import pytest

from oms.domain.exceptions import InsufficientStock, ValidationError
from oms.domain.model.product import Product
from oms.domain.model.value_objects import Money
from tests.factories import make_product


class TestProductCreate:

    def test_create_strips_fields(self):
        p = Product.create(" Widget ", Money.of("3.00"), 4, description=" d ", category=" c ")
        assert p.id is None
        assert (p.name, p.description, p.category) == ("Widget", "d", "c")
        assert p.stock == 4

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            Product.create("  ", Money.of("1"), 1)

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="non-negative"):
            Product.create("Widget", Money.of("1"), -1)


class TestDecrementStock:

    def test_decrements(self):
        p = make_product(stock=10)
        p.decrement_stock(3)
        assert p.stock == 7

    def test_can_drain_to_zero(self):
        p = make_product(stock=3)
        p.decrement_stock(3)
        assert p.stock == 0

    def test_more_than_stock_rejected(self):
        p = make_product(product_id=9, name="Widget", stock=2)
        with pytest.raises(InsufficientStock) as info:
            p.decrement_stock(3)
        assert (info.value.product_id, info.value.requested, info.value.available) == (9, 3, 2)
        assert p.stock == 2

    def test_non_positive_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            make_product().decrement_stock(0)
