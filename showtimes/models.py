"""Data carried between the shop's use cases and their callers."""

from __future__ import annotations

from dataclasses import dataclass, field

# Admin


@dataclass
class AdminLogin:
    email: str = ""
    password: str = ""


@dataclass
class AdminDetailsResponse:
    id: int = 0
    name: str = ""
    email: str = ""


@dataclass
class UpdateBlock:
    id: int = 0
    blocked: bool = False


@dataclass
class Admin:
    id: int = 0
    name: str = ""
    email: str = ""
    password: str = ""


@dataclass
class TokenAdmin:
    admin: AdminDetailsResponse = field(default_factory=AdminDetailsResponse)
    access_token: str = ""


@dataclass
class DashBoardUser:
    total_users: int = 0
    blocked_user: int = 0


@dataclass
class DashBoardProduct:
    total_products: int = 0
    out_of_stock_product: int = 0


@dataclass
class DashBoardOrder:
    completed_order: int = 0
    pending_order: int = 0
    cancelled_order: int = 0
    total_order: int = 0
    total_order_item: int = 0


@dataclass
class DashBoardRevenue:
    today_revenue: float = 0.0
    month_revenue: float = 0.0
    year_revenue: float = 0.0


@dataclass
class DashBoardAmount:
    credited_amount: float = 0.0
    pending_amount: float = 0.0


@dataclass
class CompleteAdminDashboard:
    dashboard_user: DashBoardUser = field(default_factory=DashBoardUser)
    dashboard_product: DashBoardProduct = field(default_factory=DashBoardProduct)
    dashboard_revenue: DashBoardRevenue = field(default_factory=DashBoardRevenue)
    dashboard_order: DashBoardOrder = field(default_factory=DashBoardOrder)
    dashboard_amount: DashBoardAmount = field(default_factory=DashBoardAmount)


@dataclass
class SalesReport:
    total_sales: float = 0.0
    total_orders: int = 0
    completed_orders: int = 0
    pending_orders: int = 0
    returned_orders: int = 0
    cancelled_orders: int = 0
    trending_product: str = ""


# Cart


@dataclass
class Cart:
    product_id: int = 0
    product_name: str = ""
    quantity: float = 0.0
    total_price: float = 0.0


@dataclass
class CartResponse:
    user_name: str = ""
    total_price: float = 0.0
    cart: list[Cart] = field(default_factory=list)


@dataclass
class CartTotal:
    user_name: str = ""
    total_price: float = 0.0
    final_price: float = 0.0


@dataclass
class AddCart:
    user_id: int = 0
    product_id: int = 0
    quantity: int = 0


@dataclass
class RemoveFromCart:
    user_id: int = 0
    product_id: int = 0


# Category


@dataclass
class Category:
    id: int = 0
    category: str = ""


@dataclass
class SetNewName:
    current: str = ""
    new: str = ""


# Offers


@dataclass
class ProductOfferResp:
    product_id: int = 0
    offer_name: str = ""
    discount_percentage: int = 0


@dataclass
class CategoryOfferResp:
    category_id: int = 0
    offer_name: str = ""
    discount_percentage: int = 0


# Payment


@dataclass
class PaymentDetails:
    id: int = 0
    payment_name: str = ""


@dataclass
class NewPaymentMethod:
    payment_name: str = ""


# User


@dataclass
class UserDetailsResponse:
    id: int = 0
    name: str = ""
    email: str = ""
    phone: str = ""


@dataclass
class TokenUsers:
    users: UserDetailsResponse = field(default_factory=UserDetailsResponse)
    token: str = ""


@dataclass
class UserDetailsAtAdmin:
    id: int = 0
    name: str = ""
    email: str = ""
    phone: str = ""
    blocked: bool = False


@dataclass
class AddressInfoResponse:
    id: int = 0
    name: str = ""
    house_name: str = ""
    street: str = ""
    city: str = ""
    state: str = ""
    phone: str = ""
    pin: str = ""


# Orders


@dataclass
class CheckoutDetails:
    address_info_response: list[AddressInfoResponse] = field(default_factory=list)
    payment_method: list[PaymentDetails] = field(default_factory=list)
    cart: list[Cart] = field(default_factory=list)
    total_price: float = 0.0


@dataclass
class OrderFromCart:
    payment_id: int = 0
    address_id: int = 0


@dataclass
class OrderSuccessResponse:
    order_id: int = 0
    shipment_status: str = ""


@dataclass
class OrderDetails:
    order_id: int = 0
    final_price: float = 0.0
    shipment_status: str = ""
    payment_status: str = ""


@dataclass
class OrderIncoming:
    user_id: int = 0
    payment_id: int = 0
    address_id: int = 0


@dataclass
class OrderProductDetails:
    product_id: int = 0
    product_name: str = ""
    quantity: int = 0
    total_price: float = 0.0


@dataclass
class FullOrderDetails:
    order_details: OrderDetails = field(default_factory=OrderDetails)
    order_product_details: list[OrderProductDetails] = field(default_factory=list)


@dataclass
class OrderProducts:
    product_id: str = ""
    stock: int = 0


@dataclass
class CombinedOrderDetails:
    order_id: str = ""
    final_price: float = 0.0
    shipment_status: str = ""
    payment_status: str = ""
    name: str = ""
    email: str = ""
    phone: str = ""
    house_name: str = ""
    street: str = ""
    city: str = ""
    state: str = ""
    pin: str = ""


@dataclass
class Page:
    page: int = 0
    size: int = 0


@dataclass
class OrderDetailsAdmin:
    total_amount: float = 0.0
    product_name: str = ""


@dataclass
class ItemDetails:
    product_name: str = ""
    final_price: float = 0.0
    price: float = 0.0
    total: float = 0.0
    quantity: int = 0


# OTP


@dataclass
class OTPData:
    phone_number: str = ""


@dataclass
class VerifyData:
    phone_number: str = ""
    code: str = ""


# Products


@dataclass
class ProductResponse:
    id: int = 0
    category_id: int = 0
    product_name: str = ""
    color: str = ""
    stock: int = 0
    price: int = 0
    url: str = ""


@dataclass
class AddProducts:
    id: int = 0
    category_id: int = 0
    product_name: str = ""
    color: str = ""
    stock: int = 0
    price: float = 0.0
    image: str = ""


@dataclass
class ProductUserResponse:
    id: int = 0
    category_id: int = 0
    category: str = ""
    product_name: str = ""
    color: str = ""
    price: int = 0
    url: str = ""


@dataclass
class ProductEdit:
    id: int = 0
    category_id: int = 0
    product_name: str = ""
    color: str = ""
    stock: int = 0
    price: float = 0.0


# Wallet


@dataclass
class WalletAmount:
    amount: float = 0.0


@dataclass
class WalletHistory:
    id: int = 0
    order_id: int = 0
    description: str = ""
    amount: float = 0.0
    is_credited: bool = False