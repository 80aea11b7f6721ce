"""Order use cases: checkout, placing, cancelling, returning and invoicing orders."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from showtimes.errors import (
    ERR_DELIVER_INVOICE,
    ERR_DELIVERED_ALREADY,
    ERR_DELIVERED_ALREADY_CANCEL,
    ERR_INVALID_ORDER_ID,
    UseCaseError,
)
from showtimes.models import (
    CheckoutDetails,
    CombinedOrderDetails,
    FullOrderDetails,
    OrderFromCart,
    OrderIncoming,
    OrderSuccessResponse,
    Page,
)
from showtimes.pdf import PdfDocument

PAYMENT_TYPE_COD = 1
PAYMENT_TYPE_RAZORPAY = 2


def _money(amount: float) -> str:
    return f"${amount:.2f}"


class OrderUseCase:
    """Rules for a user's orders and the admin's handling of them.

    ``order_repository`` provides get_all_payment_option, order_items,
    add_order_products, update_order, get_brief_order_details,
    get_order_details, user_order_relationship,
    get_product_details_from_orders, get_shipment_status, get_payment_status,
    get_final_price_order, cancel_orders, update_quantity_of_product,
    get_all_orders_admin, approve_order, approve_cod_paid, approve_cod_return,
    check_order_id, update_stock_of_product, get_payment_type,
    return_order_cod, return_order_razor_pay, get_detailed_order_through_id
    and get_items_by_order_id. ``wallet_repository`` provides add_to_wallet.
    ``cart_repository`` provides display_cart, get_total_price, check_cart,
    total_amount_in_cart and update_cart_after_order. ``user_repository``
    provides get_all_address and address_exist. ``payment_repository``
    provides payment_exist.
    """

    def __init__(
        self,
        order_repository: Any,
        wallet_repository: Any,
        cart_repository: Any,
        user_repository: Any,
        payment_repository: Any,
    ) -> None:
        self.order_repository = order_repository
        self.wallet_repository = wallet_repository
        self.cart_repository = cart_repository
        self.user_repository = user_repository
        self.payment_repository = payment_repository

    def checkout(self, user_id: int) -> CheckoutDetails:
        addresses = self.user_repository.get_all_address(user_id)
        payment_methods = self.order_repository.get_all_payment_option()
        cart_items = self.cart_repository.display_cart(user_id)
        grand_total = self.cart_repository.get_total_price(user_id)
        return CheckoutDetails(
            address_info_response=addresses,
            payment_method=payment_methods,
            cart=cart_items,
            total_price=grand_total.final_price,
        )

    def order_items(
        self, order_from_cart: OrderFromCart, user_id: int
    ) -> OrderSuccessResponse:
        """Turn the user's cart into an order and empty the ordered items out of it."""
        order_body = OrderIncoming(
            user_id=user_id,
            payment_id=int(order_from_cart.payment_id),
            address_id=int(order_from_cart.address_id),
        )
        if not self.cart_repository.check_cart(user_id):
            raise UseCaseError("cart empty can't order")
        if not self.user_repository.address_exist(order_body):
            raise UseCaseError("address does not exist")
        if not self.payment_repository.payment_exist(order_body):
            raise UseCaseError("payment method doesnot exist")

        cart_items = self.cart_repository.display_cart(order_body.user_id)
        total = self.cart_repository.total_amount_in_cart(order_body.user_id)
        order_id = self.order_repository.order_items(order_body, total)
        self.order_repository.add_order_products(order_id, cart_items)
        self.order_repository.update_order(order_id)
        for item in cart_items:
            self.cart_repository.update_cart_after_order(
                user_id, int(item.product_id), item.quantity
            )
        return self.order_repository.get_brief_order_details(order_id)

    def get_order_details(
        self, user_id: int, page: int, count: int
    ) -> list[FullOrderDetails]:
        return self.order_repository.get_order_details(user_id, page, count)

    def cancel_orders(self, order_id: int, user_id: int) -> None:
        """Cancel a user's order, refunding a paid one to the wallet."""
        owner = self.order_repository.user_order_relationship(order_id, user_id)
        if owner != user_id:
            raise UseCaseError("the order is done by its user")

        products = self.order_repository.get_product_details_from_orders(order_id)
        shipment_status = self.order_repository.get_shipment_status(order_id)
        payment_status = self.order_repository.get_payment_status(order_id)

        if shipment_status in ("pending", "returned", "return"):
            raise UseCaseError(
                f"this order is in {shipment_status}, so no point in cancelling"
            )
        if shipment_status == "cancelled":
            raise UseCaseError("the order is already cancelled, you can return it")
        if shipment_status == "Delivered":
            raise UseCaseError(ERR_DELIVERED_ALREADY)
        if payment_status in ("paid", "PAID"):
            amount = self.order_repository.get_final_price_order(order_id)
            self.wallet_repository.add_to_wallet(user_id, amount)

        self.order_repository.cancel_orders(order_id)
        self.order_repository.update_quantity_of_product(products)

    def get_all_orders_admin(self, page: Page) -> list[CombinedOrderDetails]:
        number = page.page or 1
        offset = (number - 1) * page.size
        return self.order_repository.get_all_orders_admin(offset, page.size)

    def approve_order(self, order_id: int) -> None:
        """Move an order one step along its shipment."""
        status = self.order_repository.get_shipment_status(order_id)
        if status == "cancelled":
            raise UseCaseError("the order is cancelled,cannot approve it")
        if status == "pending":
            raise UseCaseError("the order is pending, cannot approve it")
        if status == "delivered":
            raise UseCaseError("this item is already delivered")
        if status == "processing":
            self.order_repository.approve_order(order_id)
        elif status == "shipped":
            self.order_repository.approve_cod_paid(order_id)
        elif status == "returned":
            self.order_repository.approve_cod_return(order_id)

    def cancel_order_from_admin(self, order_id: int) -> None:
        if order_id <= 0:
            raise UseCaseError(ERR_INVALID_ORDER_ID)
        try:
            exists = self.order_repository.check_order_id(order_id)
        except Exception as exc:
            raise UseCaseError("order does not exist") from exc
        if not exists:
            raise UseCaseError("order does not exist")

        products = self.order_repository.get_product_details_from_orders(order_id)
        status = self.order_repository.get_shipment_status(order_id)
        if status == "cancelled":
            raise UseCaseError("the order is already cancelled")
        if status == "deliverd":
            raise UseCaseError(ERR_DELIVERED_ALREADY_CANCEL)
        self.order_repository.cancel_orders(order_id)
        self.order_repository.update_stock_of_product(products)

    def return_order(self, order_id: int, user_id: int) -> None:
        """Return a delivered order and credit its price to the user's wallet."""
        if order_id < 0:
            raise UseCaseError(ERR_INVALID_ORDER_ID)
        owner = self.order_repository.user_order_relationship(order_id, user_id)
        if owner != user_id:
            raise UseCaseError("this order is not done by the  user")

        status = self.order_repository.get_shipment_status(order_id)
        payment_type = self.order_repository.get_payment_type(order_id)
        refusals = {
            "cancelled": "the order is cancelled, cannot return it",
            "pending": "the order is pending, cannot return it",
            "processing": "the order is processing cannot return it",
            "returned": "the order is returned,cannot return it",
            "shipped": "the order is shipped ,cannot return it",
        }
        if status in refusals:
            raise UseCaseError(refusals[status])

        amount = self.order_repository.get_final_price_order(order_id)
        if status != "delivered":
            return
        if payment_type == PAYMENT_TYPE_COD:
            self.order_repository.return_order_cod(order_id)
        elif payment_type == PAYMENT_TYPE_RAZORPAY:
            self.order_repository.return_order_razor_pay(order_id)
        else:
            return
        self.wallet_repository.add_to_wallet(user_id, amount)

    def print_invoice(self, order_id: int) -> PdfDocument:
        """Lay out the invoice of a delivered order."""
        if order_id < 1:
            raise UseCaseError("enter a valid order id")
        order = self.order_repository.get_detailed_order_through_id(order_id)
        items = self.order_repository.get_items_by_order_id(order_id)
        if order.shipment_status != "delivered":
            raise UseCaseError(ERR_DELIVER_INVOICE)

        pdf = PdfDocument()
        pdf.add_page()

        pdf.set_font("Arial", "B", 30)
        pdf.set_text_color(31, 73, 125)
        pdf.cell(0, 20, "Invoice")
        pdf.ln(20)

        pdf.set_font("Arial", "I", 14)
        pdf.set_text_color(51, 51, 51)
        pdf.cell(0, 10, "Customer Details")
        pdf.ln(10)
        customer_details = (
            "Name: " + order.name,
            "House Name: " + order.house_name,
            "Street: " + order.street,
            "State: " + order.state,
            "City: " + order.city,
        )
        for detail in customer_details:
            pdf.cell(0, 10, detail)
            pdf.ln(10)
        pdf.ln(10)

        pdf.set_font("Arial", "B", 16)
        pdf.set_fill_color(217, 217, 217)
        pdf.set_text_color(0, 0, 0)
        for heading in ("Item", "Price", "Quantity", "Final Price"):
            pdf.cell(40, 10, heading, "1", 0, "C", True)
        pdf.ln(10)

        pdf.set_font("Arial", "", 12)
        pdf.set_fill_color(255, 255, 255)
        for item in items:
            pdf.cell(40, 10, item.product_name, "1", 0, "L", True)
            pdf.cell(40, 10, _money(item.price), "1", 0, "C", True)
            pdf.cell(40, 10, str(item.quantity), "1", 0, "C", True)
            pdf.cell(40, 10, _money(item.price * item.quantity), "1", 0, "C", True)
            pdf.ln(10)
        pdf.ln(10)

        total_price = sum(item.price * item.quantity for item in items)
        summary = (
            ("Total Price:", total_price),
            ("Offer Applied:", total_price - order.final_price),
            ("Final Amount:", order.final_price),
        )
        for label, amount in summary:
            pdf.set_font("Arial", "B", 16)
            pdf.set_fill_color(217, 217, 217)
            pdf.cell(120, 10, label, "1", 0, "R", True)
            pdf.cell(40, 10, _money(amount), "1", 0, "C", True)
            pdf.ln(10)

        pdf.set_font("Arial", "I", 12)
        stamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        pdf.cell(0, 10, "Generated by Watch Hive India Pvt Ltd. - " + stamp)
        pdf.ln(10)
        return pdf