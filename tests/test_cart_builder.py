"""
Tests for the cart state machine and stock validation.
"""
from decimal import Decimal

import pytest

from shop.domain.errors import (
    EmptyCartError,
    InsufficientStockError,
    InvalidQuantityError,
    InvalidStateError,
    ProductNotFoundError,
)
from shop.services.cart_builder import CartBuilder, CartState


@pytest.fixture
def builder(catalog):
    return CartBuilder(catalog)


class TestTransitions:

    def test_initial_state(self, builder):
        assert builder.state == CartState.BROWSING
        assert builder.cart.is_empty
        assert builder.pending is None

    def test_select_then_quantity(self, builder, laptop):
        product = builder.select("P001")
        assert product is laptop
        assert builder.state == CartState.SELECTING
        assert builder.pending is laptop

        cart = builder.choose_quantity(2)
        assert builder.state == CartState.BROWSING
        assert cart.quantity_of("P001") == 2

    def test_cancel_selection(self, builder):
        builder.select("P001")
        builder.cancel_selection()
        assert builder.state == CartState.BROWSING
        assert builder.cart.is_empty

    def test_select_unknown_product(self, builder):
        with pytest.raises(ProductNotFoundError):
            builder.select("NOPE")
        assert builder.state == CartState.BROWSING

    def test_quantity_without_selection(self, builder):
        with pytest.raises(InvalidStateError):
            builder.choose_quantity(1)

    def test_finish_requires_items(self, builder):
        with pytest.raises(EmptyCartError):
            builder.finish()
        assert builder.state == CartState.BROWSING

    def test_finish(self, builder):
        builder.add("P002", 1)
        cart = builder.finish()
        assert builder.state == CartState.REVIEWING
        assert cart.quantity_of("P002") == 1

    def test_reviewing_is_terminal(self, builder):
        builder.add("P002", 1)
        builder.finish()
        with pytest.raises(InvalidStateError):
            builder.add("P002", 1)
        with pytest.raises(InvalidStateError):
            builder.finish()


class TestMerging:

    def test_same_product_is_merged(self, builder):
        builder.add("P002", 2)
        builder.add("P002", 3)
        assert list(builder.cart.lines) == ["P002"]
        assert builder.cart.quantity_of("P002") == 5

    def test_lines_keep_insertion_order(self, builder):
        builder.add("P003", 1)
        builder.add("P002", 1)
        builder.add("P003", 1)
        assert list(builder.cart.lines) == ["P003", "P002"]

    def test_total(self, builder):
        builder.add("P002", 2)
        builder.add("P003", 1)
        assert builder.cart.total == Decimal("49.50") * 2 + Decimal("129.99")


class TestStockValidation:

    def test_example_scenario(self, builder):
        before = builder.cart
        with pytest.raises(InsufficientStockError) as exc:
            builder.add("P001", 5)
        assert (exc.value.product_id, exc.value.requested, exc.value.available) == ("P001", 5, 3)
        assert builder.cart == before
        assert builder.state == CartState.BROWSING

    def test_existing_quantity_counts(self, builder):
        builder.add("P001", 2)
        before = builder.cart
        with pytest.raises(InsufficientStockError) as exc:
            builder.add("P001", 2)
        assert exc.value.requested == 4
        assert exc.value.available == 3
        assert builder.cart == before
        assert builder.cart.quantity_of("P001") == 2

    def test_exact_stock_is_allowed(self, builder):
        builder.add("P001", 3)
        assert builder.cart.quantity_of("P001") == 3

    def test_stock_is_read_on_every_add(self, builder, catalog):
        builder.add("P004", 1)
        catalog.reserve_stock("P004", 1)
        with pytest.raises(InsufficientStockError) as exc:
            builder.add("P004", 1)
        assert exc.value.available == 1

    @pytest.mark.parametrize("quantity", [0, -3])
    def test_invalid_quantity(self, builder, quantity):
        before = builder.cart
        with pytest.raises(InvalidQuantityError):
            builder.add("P002", quantity)
        assert builder.cart == before
        assert builder.state == CartState.BROWSING

    def test_never_exceeds_stock(self, builder, catalog):
        for product_id, qty in [("P001", 1), ("P001", 1), ("P001", 5), ("P004", 3), ("P001", 1), ("P001", 1)]:
            try:
                builder.add(product_id, qty)
            except InsufficientStockError:
                pass
            for pid, line in builder.cart.lines.items():
                assert line.quantity <= catalog.get(pid).stock
        assert builder.cart.quantity_of("P001") == 3
        assert builder.cart.quantity_of("P004") == 0
