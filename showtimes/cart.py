"""Cart use cases: adding, listing, updating and removing cart items."""

from __future__ import annotations

from typing import Any

from showtimes.errors import ERR_LIMIT_EXCEEDS, ERR_OUT_OF_STOCK, UseCaseError
from showtimes.models import AddCart, CartResponse, RemoveFromCart

MAX_QUANTITY_PER_PRODUCT = 20


class CartUseCase:
    """Rules for a user's shopping cart.

    ``cart_repository`` provides check_stock, quantity_of_product_in_cart,
    add_to_cart, total_price_for_product_in_cart, update_cart,
    update_product_quantity_cart, remove_from_cart, check_cart, display_cart
    and get_total_price. ``product_repository`` provides
    check_product_available and get_price_of_product.
    """

    def __init__(self, cart_repository: Any, product_repository: Any) -> None:
        self.cart_repository = cart_repository
        self.product_repository = product_repository

    def _response(self, user_id: int) -> CartResponse:
        items = self.cart_repository.display_cart(user_id)
        total = self.cart_repository.get_total_price(user_id)
        return CartResponse(
            user_name=total.user_name, total_price=total.total_price, cart=items
        )

    def _ensure_available(self, product_id: int) -> None:
        if not self.product_repository.check_product_available(product_id):
            raise UseCaseError("product is not available")

    def add_to_cart(self, cart: AddCart) -> CartResponse:
        """Add a quantity of a product, merging with what is already in the cart.

        When the stock is short of the quantity asked for, an empty response
        is returned and the cart is left untouched.
        """
        if cart.product_id < 1 or cart.user_id < 1:
            raise UseCaseError("invalid product id or user id")
        if cart.quantity < 1:
            raise UseCaseError("quantity must be greater")
        self._ensure_available(cart.product_id)
        stock = self.cart_repository.check_stock(cart.product_id)
        if stock < cart.quantity:
            return CartResponse()
        price = self.product_repository.get_price_of_product(cart.product_id)

        in_cart = self.cart_repository.quantity_of_product_in_cart(
            cart.user_id, cart.product_id
        )
        if in_cart + cart.quantity > MAX_QUANTITY_PER_PRODUCT:
            raise UseCaseError(ERR_LIMIT_EXCEEDS)

        final_price = price * cart.quantity
        if in_cart == 0:
            self.cart_repository.add_to_cart(
                cart.user_id, cart.product_id, cart.quantity, final_price
            )
        else:
            current_total = self.cart_repository.total_price_for_product_in_cart(
                cart.user_id, cart.product_id
            )
            self.cart_repository.update_cart(
                in_cart + cart.quantity,
                current_total + final_price,
                cart.user_id,
                cart.product_id,
            )
        return self._response(cart.user_id)

    def list_cart_items(self, user_id: int) -> CartResponse:
        return self._response(user_id)

    def update_product_quantity_cart(self, cart: AddCart) -> CartResponse:
        """Set the quantity of a product already in the cart."""
        if cart.quantity < 1 or cart.product_id < 1:
            raise UseCaseError("invalid product id or quantity")
        self._ensure_available(cart.product_id)
        stock = self.cart_repository.check_stock(cart.product_id)
        if stock < cart.quantity:
            raise UseCaseError(ERR_OUT_OF_STOCK)
        if cart.quantity > MAX_QUANTITY_PER_PRODUCT:
            raise UseCaseError(ERR_LIMIT_EXCEEDS)
        self.cart_repository.update_product_quantity_cart(cart)
        return self._response(cart.user_id)

    def remove_from_cart(self, cart: RemoveFromCart) -> CartResponse:
        """Remove a product; an empty response comes back once the cart is gone."""
        if cart.product_id < 1:
            raise UseCaseError("product id cannot be empty")
        self.cart_repository.remove_from_cart(cart)
        if not self.cart_repository.check_cart(cart.user_id):
            return CartResponse()
        return self._response(cart.user_id)