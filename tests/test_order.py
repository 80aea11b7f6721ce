from unittest.mock import MagicMock, call

import pytest

from showtimes.errors import UseCaseError
from showtimes.models import (
    AddressInfoResponse,
    Cart,
    CartTotal,
    CheckoutDetails,
    CombinedOrderDetails,
    ItemDetails,
    OrderFromCart,
    OrderIncoming,
    OrderSuccessResponse,
    Page,
    PaymentDetails,
)
from showtimes.order import OrderUseCase
from showtimes.pdf import PdfDocument


@pytest.fixture
def repos():
    return {
        "order": MagicMock(),
        "wallet": MagicMock(),
        "cart": MagicMock(),
        "user": MagicMock(),
        "payment": MagicMock(),
    }


@pytest.fixture
def usecase(repos):
    return OrderUseCase(
        repos["order"], repos["wallet"], repos["cart"], repos["user"], repos["payment"]
    )


def _owned(repos, status, payment_status="not paid", user_id=5):
    order = repos["order"]
    order.user_order_relationship.return_value = user_id
    order.get_shipment_status.return_value = status
    order.get_payment_status.return_value = payment_status
    order.get_product_details_from_orders.return_value = ["p"]
    order.get_final_price_order.return_value = 99.5


def test_checkout_collects_details(usecase, repos):
    addresses = [AddressInfoResponse(id=1, name="Home")]
    payments = [PaymentDetails(id=1, payment_name="COD")]
    items = [Cart(product_id=3, product_name="Watch", quantity=1, total_price=50)]
    repos["user"].get_all_address.return_value = addresses
    repos["order"].get_all_payment_option.return_value = payments
    repos["cart"].display_cart.return_value = items
    repos["cart"].get_total_price.return_value = CartTotal("ann", 50.0, 45.0)

    result = usecase.checkout(7)

    assert result == CheckoutDetails(addresses, payments, items, 45.0)
    repos["user"].get_all_address.assert_called_once_with(7)


def test_order_items_places_order(usecase, repos):
    items = [Cart(product_id=3, quantity=2), Cart(product_id=4, quantity=1)]
    repos["cart"].check_cart.return_value = True
    repos["user"].address_exist.return_value = True
    repos["payment"].payment_exist.return_value = True
    repos["cart"].display_cart.return_value = items
    repos["cart"].total_amount_in_cart.return_value = 120.0
    repos["order"].order_items.return_value = 11
    brief = OrderSuccessResponse(order_id=11, shipment_status="pending")
    repos["order"].get_brief_order_details.return_value = brief

    result = usecase.order_items(OrderFromCart(payment_id=1, address_id=2), 5)

    assert result == brief
    body = OrderIncoming(user_id=5, payment_id=1, address_id=2)
    repos["order"].order_items.assert_called_once_with(body, 120.0)
    repos["order"].add_order_products.assert_called_once_with(11, items)
    repos["order"].update_order.assert_called_once_with(11)
    calls = [c.args for c in repos["cart"].update_cart_after_order.call_args_list]
    assert calls == [(5, 3, 2), (5, 4, 1)]


@pytest.mark.parametrize(
    "cart_ok, address_ok, payment_ok, message",
    [
        (False, True, True, "cart empty can't order"),
        (True, False, True, "address does not exist"),
        (True, True, False, "payment method doesnot exist"),
    ],
)
def test_order_items_rejects(usecase, repos, cart_ok, address_ok, payment_ok, message):
    repos["cart"].check_cart.return_value = cart_ok
    repos["user"].address_exist.return_value = address_ok
    repos["payment"].payment_exist.return_value = payment_ok
    with pytest.raises(UseCaseError, match=message):
        usecase.order_items(OrderFromCart(1, 2), 5)
    repos["order"].order_items.assert_not_called()


def test_get_order_details_passes_through(usecase, repos):
    repos["order"].get_order_details.return_value = ["x"]
    assert usecase.get_order_details(1, 2, 3) == ["x"]
    repos["order"].get_order_details.assert_called_once_with(1, 2, 3)


def test_cancel_orders_wrong_user(usecase, repos):
    _owned(repos, "processing", user_id=9)
    with pytest.raises(UseCaseError, match="the order is done by its user"):
        usecase.cancel_orders(1, 5)


@pytest.mark.parametrize(
    "status, message",
    [
        ("pending", "this order is in pending, so no point in cancelling"),
        ("return", "this order is in return, so no point in cancelling"),
        ("cancelled", "the order is already cancelled, you can return it"),
        ("Delivered", "the order is delivered, you can return it"),
    ],
)
def test_cancel_orders_refused(usecase, repos, status, message):
    _owned(repos, status)
    with pytest.raises(UseCaseError) as info:
        usecase.cancel_orders(1, 5)
    assert str(info.value) == message
    repos["order"].cancel_orders.assert_not_called()


@pytest.mark.parametrize("payment_status", ["paid", "PAID"])
def test_cancel_paid_order_refunds(usecase, repos, payment_status):
    _owned(repos, "processing", payment_status)
    result = usecase.cancel_orders(1, 5)
    assert result is None
    assert repos["wallet"].add_to_wallet.call_args_list == [call(5, 99.5)]
    assert repos["order"].cancel_orders.call_args_list == [call(1)]
    assert repos["order"].update_quantity_of_product.call_args_list == [call(["p"])]


def test_cancel_unpaid_order_no_refund(usecase, repos):
    _owned(repos, "processing", "not paid")
    result = usecase.cancel_orders(1, 5)
    assert result is None
    assert repos["wallet"].add_to_wallet.call_count == 0
    assert repos["order"].cancel_orders.call_args_list == [call(1)]


def test_get_all_orders_admin_page_zero_is_first(usecase, repos):
    repos["order"].get_all_orders_admin.return_value = ["o"]
    page = Page(page=0, size=10)
    assert usecase.get_all_orders_admin(page) == ["o"]
    repos["order"].get_all_orders_admin.assert_called_once_with(0, 10)
    assert page.page == 0


def test_get_all_orders_admin_offset(usecase, repos):
    repos["order"].get_all_orders_admin.return_value = ["third page"]
    result = usecase.get_all_orders_admin(Page(page=3, size=10))
    assert result == ["third page"]
    assert repos["order"].get_all_orders_admin.call_args_list == [call(20, 10)]


@pytest.mark.parametrize(
    "status, message",
    [
        ("cancelled", "the order is cancelled,cannot approve it"),
        ("pending", "the order is pending, cannot approve it"),
        ("delivered", "this item is already delivered"),
    ],
)
def test_approve_order_refused(usecase, repos, status, message):
    repos["order"].get_shipment_status.return_value = status
    with pytest.raises(UseCaseError) as info:
        usecase.approve_order(1)
    assert str(info.value) == message


@pytest.mark.parametrize(
    "status, method",
    [
        ("processing", "approve_order"),
        ("shipped", "approve_cod_paid"),
        ("returned", "approve_cod_return"),
    ],
)
def test_approve_order_steps(usecase, repos, status, method):
    repos["order"].get_shipment_status.return_value = status
    result = usecase.approve_order(4)
    assert result is None
    names = [c[0] for c in repos["order"].method_calls]
    assert names == ["get_shipment_status", method]
    assert getattr(repos["order"], method).call_args_list == [call(4)]


def test_approve_order_other_status_does_nothing(usecase, repos):
    repos["order"].get_shipment_status.return_value = "on hold"
    result = usecase.approve_order(4)
    assert result is None
    assert [c[0] for c in repos["order"].method_calls] == ["get_shipment_status"]


def test_cancel_from_admin_invalid_id(usecase):
    with pytest.raises(UseCaseError, match="invalid order id"):
        usecase.cancel_order_from_admin(0)


def test_cancel_from_admin_missing(usecase, repos):
    repos["order"].check_order_id.return_value = False
    with pytest.raises(UseCaseError, match="order does not exist"):
        usecase.cancel_order_from_admin(3)


def test_cancel_from_admin_lookup_failure(usecase, repos):
    repos["order"].check_order_id.side_effect = RuntimeError("db down")
    with pytest.raises(UseCaseError, match="order does not exist"):
        usecase.cancel_order_from_admin(3)


@pytest.mark.parametrize(
    "status, message",
    [
        ("cancelled", "the order is already cancelled"),
        ("deliverd", "the order is delivered cannot be cancelled"),
    ],
)
def test_cancel_from_admin_refused(usecase, repos, status, message):
    repos["order"].check_order_id.return_value = True
    repos["order"].get_shipment_status.return_value = status
    with pytest.raises(UseCaseError) as info:
        usecase.cancel_order_from_admin(3)
    assert str(info.value) == message


def test_cancel_from_admin_restocks(usecase, repos):
    repos["order"].check_order_id.return_value = True
    repos["order"].get_shipment_status.return_value = "processing"
    repos["order"].get_product_details_from_orders.return_value = ["stock"]
    result = usecase.cancel_order_from_admin(3)
    assert result is None
    assert repos["order"].cancel_orders.call_args_list == [call(3)]
    assert repos["order"].update_stock_of_product.call_args_list == [call(["stock"])]


def test_return_order_negative_id(usecase):
    with pytest.raises(UseCaseError, match="invalid order id"):
        usecase.return_order(-1, 5)


def test_return_order_wrong_user(usecase, repos):
    _owned(repos, "delivered", user_id=8)
    with pytest.raises(UseCaseError) as info:
        usecase.return_order(1, 5)
    assert str(info.value) == "this order is not done by the  user"


@pytest.mark.parametrize(
    "status, message",
    [
        ("cancelled", "the order is cancelled, cannot return it"),
        ("pending", "the order is pending, cannot return it"),
        ("processing", "the order is processing cannot return it"),
        ("returned", "the order is returned,cannot return it"),
        ("shipped", "the order is shipped ,cannot return it"),
    ],
)
def test_return_order_refused(usecase, repos, status, message):
    _owned(repos, status)
    with pytest.raises(UseCaseError) as info:
        usecase.return_order(1, 5)
    assert str(info.value) == message


@pytest.mark.parametrize(
    "payment_type, method",
    [(1, "return_order_cod"), (2, "return_order_razor_pay")],
)
def test_return_delivered_order_refunds(usecase, repos, payment_type, method):
    _owned(repos, "delivered")
    repos["order"].get_payment_type.return_value = payment_type
    result = usecase.return_order(1, 5)
    assert result is None
    assert getattr(repos["order"], method).call_args_list == [call(1)]
    assert repos["wallet"].add_to_wallet.call_args_list == [call(5, 99.5)]


def test_return_unknown_payment_type_no_refund(usecase, repos):
    _owned(repos, "delivered")
    repos["order"].get_payment_type.return_value = 3
    result = usecase.return_order(1, 5)
    assert result is None
    assert repos["wallet"].add_to_wallet.call_count == 0
    assert repos["order"].return_order_cod.call_count == 0


def test_print_invoice_invalid_id(usecase):
    with pytest.raises(UseCaseError, match="enter a valid order id"):
        usecase.print_invoice(0)


def test_print_invoice_not_delivered(usecase, repos):
    repos["order"].get_detailed_order_through_id.return_value = CombinedOrderDetails(
        shipment_status="shipped"
    )
    repos["order"].get_items_by_order_id.return_value = []
    with pytest.raises(UseCaseError) as info:
        usecase.print_invoice(2)
    assert str(info.value) == "wait for the invoice until the product is received"


def test_print_invoice_delivered(usecase, repos):
    repos["order"].get_detailed_order_through_id.return_value = CombinedOrderDetails(
        name="Ann",
        house_name="Rose Villa",
        street="Main",
        city="Kochi",
        state="Kerala",
        final_price=15.0,
        shipment_status="delivered",
    )
    repos["order"].get_items_by_order_id.return_value = [
        ItemDetails(product_name="Watch", price=10.0, quantity=2)
    ]

    pdf = usecase.print_invoice(2)

    assert isinstance(pdf, PdfDocument)
    assert pdf.page_count == 1
    data = pdf.output()
    assert data.startswith(b"%PDF-1.3")
    assert b"(Invoice) Tj" in data
    assert b"(Name: Ann) Tj" in data
    assert b"(Watch) Tj" in data
    assert b"($15.00) Tj" in data