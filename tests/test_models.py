import pytest
from pydantic import ValidationError

from pos_cart.models import (
    Cart,
    CartResponse,
    Discount,
    PaymentResponse,
    PaymentState,
    PaymentStatus,
)


def test_cart_parses_all_fields(sample_cart):
    cart = Cart.model_validate(sample_cart)

    assert len(cart.items) == 2
    first, second = cart.items
    assert first.id == "1"
    assert first.productId == "p1"
    assert first.quantity == 2
    assert first.weight is None
    assert second.weight == 0.25
    assert second.sku == "CHOC-250"
    assert cart.discount == Discount(type="percentage", value=10.0)
    assert cart.tax.rate == 7.0
    assert cart.customer.name == "Alice"
    assert cart.notes == "gift wrap"
    assert cart.total == pytest.approx(16.85)
    assert cart.lastUpdated == "2024-01-01T00:00:00Z"


def test_cart_helpers(sample_cart):
    cart = Cart.model_validate(sample_cart)

    assert not cart.is_empty
    assert cart.item_count == 3
    assert cart.discount.is_percentage

    empty = Cart(total=0.0, lastUpdated="2024-01-01T00:00:00Z")
    assert empty.is_empty
    assert empty.item_count == 0


def test_records_are_immutable(sample_cart):
    cart = Cart.model_validate(sample_cart)

    with pytest.raises(ValidationError):
        cart.total = 0.0
    with pytest.raises(ValidationError):
        cart.items[0].quantity = 5


def test_unknown_keys_are_ignored(sample_cart):
    sample_cart["terminalId"] = "T1"
    sample_cart["items"][0]["colour"] = "red"

    cart = Cart.model_validate(sample_cart)

    assert cart.items[0].name == "Gummy"


def test_quantity_must_be_integer(sample_cart):
    sample_cart["items"][0]["quantity"] = 1.5

    with pytest.raises(ValidationError):
        Cart.model_validate(sample_cart)


def test_cart_response_unwrap_only_on_success(sample_cart):
    ok = CartResponse.model_validate({"success": True, "cart": sample_cart, "timestamp": "t"})
    failed = CartResponse.model_validate(
        {"success": False, "cart": sample_cart, "error": "terminal offline"}
    )

    assert ok.unwrap() is ok.cart
    assert failed.unwrap() is None
    assert failed.error == "terminal offline"


def test_payment_response_unwrap(sample_payment):
    ok = PaymentResponse.model_validate({"success": True, "paymentStatus": sample_payment})

    assert ok.unwrap().transactionId == "tx-42"
    assert PaymentResponse.model_validate({"success": False}).unwrap() is None
    assert PaymentResponse.model_validate({"success": True}).unwrap() is None


@pytest.mark.parametrize(
    "status,state",
    [
        ("idle", PaymentState.IDLE),
        ("processing", PaymentState.PROCESSING),
        ("completed", PaymentState.COMPLETED),
        ("failed", PaymentState.FAILED),
        ("refunded", None),
    ],
)
def test_payment_state(status, state):
    payment = PaymentStatus(status=status)

    assert payment.state == state
    assert payment.is_completed == (state == PaymentState.COMPLETED)
    assert payment.is_failed == (state == PaymentState.FAILED)
