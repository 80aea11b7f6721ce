"""Payment method and online payment use cases."""

from __future__ import annotations

from typing import Any, Callable

from showtimes.errors import ERR_ALREADY_PAID, UseCaseError
from showtimes.models import CombinedOrderDetails, NewPaymentMethod, PaymentDetails

OrderGateway = Callable[[str, str, dict], dict]


class PaymentUseCase:
    """Rules for payment methods and paying orders through the gateway.

    ``payment_repository`` provides payment_method_id,
    check_if_payment_method_already_exists, add_payment_method,
    add_razor_pay_details, get_payment_status and update_payment_details.
    ``order_repository`` provides get_order and
    get_detailed_order_through_id. ``config`` carries razorpay_key_id and
    razorpay_key_secret. ``order_gateway`` is called with the key id, the
    key secret and the order data, and returns the gateway's order as a
    mapping holding its ``id``.
    """

    def __init__(
        self,
        payment_repository: Any,
        order_repository: Any,
        config: Any,
        order_gateway: OrderGateway,
    ) -> None:
        self.payment_repository = payment_repository
        self.order_repository = order_repository
        self.config = config
        self.order_gateway = order_gateway

    def payment_method_id(self, order_id: int) -> int:
        return self.payment_repository.payment_method_id(order_id)

    def add_payment_method(self, payment: NewPaymentMethod) -> PaymentDetails:
        if self.payment_repository.check_if_payment_method_already_exists(
            payment.payment_name
        ):
            raise UseCaseError("payment method already exists")
        return self.payment_repository.add_payment_method(payment)

    def make_payment_razorpay(
        self, order_id: int, user_id: int
    ) -> tuple[CombinedOrderDetails, str]:
        """Open a gateway order for an order; return its details and gateway id.

        If the gateway refuses the order, empty details and an empty id come
        back.
        """
        if order_id <= 0 or user_id <= 0:
            raise UseCaseError("please provide valid IDs")
        try:
            order = self.order_repository.get_order(order_id)
        except Exception as exc:
            raise UseCaseError(
                "error in getting order details through order id" + str(exc)
            ) from exc

        data = {
            "amount": int(order.final_price) * 100,
            "currency": "INR",
            "receipt": "some_receipt_id",
        }
        try:
            body = self.order_gateway(
                self.config.razorpay_key_id, self.config.razorpay_key_secret, data
            )
        except Exception:
            return CombinedOrderDetails(), ""

        gateway_order_id = str(body["id"])
        self.payment_repository.add_razor_pay_details(order_id, gateway_order_id)
        details = self.order_repository.get_detailed_order_through_id(int(order.id))
        return details, gateway_order_id

    def save_payment_details(self, payment_id: str, razor_id: str, order_id: str) -> None:
        if self.payment_repository.get_payment_status(order_id):
            raise UseCaseError(ERR_ALREADY_PAID)
        self.payment_repository.update_payment_details(razor_id, payment_id)