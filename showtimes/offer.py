"""Product and category offer use cases."""

from __future__ import annotations

from typing import Any

from showtimes.errors import UseCaseError
from showtimes.models import CategoryOfferResp, ProductOfferResp


class OfferUseCase:
    """Rules for adding, listing and expiring offers.

    ``repository`` provides add_product_offer, add_category_offer,
    get_product_offer, get_category_offer, expire_product_offer and
    expire_category_offer.
    """

    def __init__(self, repository: Any) -> None:
        self.repository = repository

    def add_product_offer(self, product_offer: ProductOfferResp) -> None:
        try:
            self.repository.add_product_offer(product_offer)
        except Exception as exc:
            raise UseCaseError("error in adding product offer") from exc

    def add_category_offer(self, category_offer: CategoryOfferResp) -> None:
        try:
            self.repository.add_category_offer(category_offer)
        except Exception as exc:
            raise UseCaseError("error in adding category offer") from exc

    def get_product_offer(self) -> list[Any]:
        return self.repository.get_product_offer()

    def get_category_offer(self) -> list[Any]:
        return self.repository.get_category_offer()

    def expire_product_offer(self, offer_id: int) -> None:
        self.repository.expire_product_offer(offer_id)

    def expire_category_offer(self, offer_id: int) -> None:
        self.repository.expire_category_offer(offer_id)