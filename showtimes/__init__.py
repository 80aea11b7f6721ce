"""Business rules for an online watch shop: carts, orders, offers, payments, wallets and reports."""

__version__ = "0.1.0"