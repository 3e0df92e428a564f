"""Integration tests for the CreateOrder use case.

Uses the in-memory fake unit of work — no file I/O.
"""

from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal

import pytest

from oms.application.create_order import CreateOrderHandler
from oms.application.dto import OrderItemSpec
from oms.domain.exceptions import (
    InsufficientStock,
    ProductNotFound,
    UnknownPrincipal,
    ValidationError,
)
from oms.domain.model.order import OrderStatus
from oms.domain.model.user import Principal, Role
from oms.domain.model.value_objects import Money
from tests.factories import ALICE, make_product, make_store
from tests.fakes import FakeUnitOfWork


def _setup(products=None):
    store = make_store(products)
    return CreateOrderHandler(FakeUnitOfWork(store)), store


class TestCreateOrderHappyPath:

    def test_scenario_three_of_p(self):
        handler, store = _setup()

        dto = handler.handle(ALICE, [OrderItemSpec(3, 3)])

        assert dto.total == "15.00"
        assert dto.status == "PENDING"
        assert len(dto.details) == 1
        assert dto.details[0].subtotal == "15.00"
        assert store.products[3].stock == 7

    def test_then_oversized_order_rejected(self):
        handler, store = _setup()
        handler.handle(ALICE, [OrderItemSpec(3, 3)])

        with pytest.raises(InsufficientStock) as info:
            handler.handle(ALICE, [OrderItemSpec(3, 8)])

        assert info.value.product_id == 3
        assert (info.value.requested, info.value.available) == (8, 7)
        assert store.products[3].stock == 7
        assert len(store.orders) == 1

    def test_total_is_sum_of_subtotals(self):
        handler, store = _setup()
        dto = handler.handle(ALICE, [OrderItemSpec(1, 3), OrderItemSpec(2, 5)])

        assert dto.total == "170.00"
        order = store.orders[dto.id]
        assert order.total == Money.of("170.00")
        assert order.total.amount == sum(line.subtotal.amount for line in order.lines)
        for line in order.lines:
            assert line.subtotal == line.unit_price * line.quantity.value

    def test_stock_conservation_with_repeated_product(self):
        handler, store = _setup()
        handler.handle(ALICE, [OrderItemSpec(1, 3), OrderItemSpec(2, 1), OrderItemSpec(1, 4)])

        assert store.products[1].stock == 100 - 7
        assert store.products[2].stock == 50 - 1

    def test_order_owned_by_principal(self):
        handler, store = _setup()
        dto = handler.handle(ALICE, [OrderItemSpec(1, 1)])

        assert dto.client.email == ALICE.email
        assert store.orders[dto.id].owner_id == 1
        assert store.orders[dto.id].status == OrderStatus.PENDING

    def test_persists_order_and_lines(self):
        handler, store = _setup()
        dto = handler.handle(ALICE, [OrderItemSpec(1, 1), OrderItemSpec(2, 2)])

        saved = store.orders[dto.id]
        assert [line.id for line in saved.lines] == [1, 2]
        assert [d.id for d in dto.details] == [1, 2]

    def test_sequential_ids(self):
        handler, _ = _setup()
        dto1 = handler.handle(ALICE, [OrderItemSpec(1, 1)])
        dto2 = handler.handle(ALICE, [OrderItemSpec(2, 1)])
        assert dto2.id == dto1.id + 1

    def test_wire_shape(self):
        handler, _ = _setup()
        payload = handler.handle(ALICE, [OrderItemSpec(1, 2)]).to_dict()

        assert set(payload) == {"id", "createdAt", "total", "client", "details", "status"}
        assert payload["client"] == {"id": 1, "name": "Alice", "email": ALICE.email, "role": "CLIENT"}
        assert payload["details"][0]["product"]["stock"] == 98
        assert payload["details"][0]["subtotal"] == "30.00"
        assert len(payload["createdAt"]) == len("2026-01-01T00:00:00+00:00")


class TestCreateOrderPriceLock:

    def test_price_snapshot_at_creation(self):
        handler, store = _setup()
        dto = handler.handle(ALICE, [OrderItemSpec(1, 1)])

        store.products[1].price = Money.of("99.99")

        saved = store.orders[dto.id]
        assert saved.total == Money.of("15.00")
        assert saved.lines[0].unit_price == Money.of("15.00")


class TestCreateOrderAtomicity:

    def test_unknown_product_leaves_everything_untouched(self):
        handler, store = _setup()

        with pytest.raises(ProductNotFound):
            handler.handle(ALICE, [OrderItemSpec(1, 1), OrderItemSpec(999, 1)])

        assert store.orders == {}
        assert store.products[1].stock == 100
        assert store.commits == 0

    def test_insufficient_later_line_leaves_earlier_stock(self):
        handler, store = _setup()

        with pytest.raises(InsufficientStock):
            handler.handle(ALICE, [OrderItemSpec(1, 5), OrderItemSpec(3, 11)])

        assert store.products[1].stock == 100
        assert store.orders == {}


class TestCreateOrderValidation:

    def test_unknown_principal_rejected(self):
        handler, store = _setup()
        ghost = Principal(email="ghost@example.com", role=Role.CLIENT)

        with pytest.raises(UnknownPrincipal):
            handler.handle(ghost, [OrderItemSpec(1, 1)])

        assert store.products[1].stock == 100

    @pytest.mark.parametrize("qty", [0, -1])
    def test_non_positive_quantity_rejected(self, qty):
        handler, store = _setup()
        with pytest.raises(ValidationError, match="must be positive"):
            handler.handle(ALICE, [OrderItemSpec(1, qty)])
        assert store.commits == 0

    def test_empty_order_rejected(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="at least one item"):
            handler.handle(ALICE, [])

    def test_too_many_lines_rejected(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="Maximum 50 items"):
            handler.handle(ALICE, [OrderItemSpec(1, 1)] * 51)


class TestCreateOrderConcurrency:

    def test_no_oversell(self):
        store = make_store([make_product(1, "Widget", "2.50", 10)])

        def place(_):
            handler = CreateOrderHandler(FakeUnitOfWork(store))
            try:
                handler.handle(ALICE, [OrderItemSpec(1, 3)])
                return True
            except InsufficientStock:
                return False

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(place, range(8)))

        assert results.count(True) == 3
        assert results.count(False) == 5
        assert store.products[1].stock == 1
        assert len(store.orders) == 3
        assert sum(o.total.amount for o in store.orders.values()) == Decimal("22.50")
