"""Product inventory use cases."""

from __future__ import annotations

from typing import Any

from showtimes.errors import UseCaseError
from showtimes.models import (
    AddProducts,
    ProductEdit,
    ProductResponse,
    ProductUserResponse,
)


class ProductUseCase:
    """Rules for adding, listing, editing and restocking products.

    ``repository`` provides add_products, list_products, edit_product,
    delete_products, check_products and update_products. ``helper``
    provides add_image_to_aws_s3, which stores an uploaded file and returns
    its URL.
    """

    def __init__(self, repository: Any, helper: Any) -> None:
        self.repository = repository
        self.helper = helper

    def add_products(self, product: AddProducts, file: Any) -> ProductResponse:
        if product.category_id < 0 or product.price < 0 or product.stock < 0:
            raise UseCaseError("enter valid values")
        url = self.helper.add_image_to_aws_s3(file)
        return self.repository.add_products(product, url)

    def list_products(self, page_no: int, page_size: int) -> list[ProductUserResponse]:
        """Return one page of products; a failed lookup gives an empty page."""
        offset = (page_no - 1) * page_size
        try:
            return self.repository.list_products(page_size, offset)
        except Exception:
            return []

    def edit_product(self, product: ProductEdit) -> ProductUserResponse:
        if (
            product.id <= 0
            or product.category_id <= 0
            or product.price <= 0
            or product.stock <= 0
        ):
            raise UseCaseError("enter valid values")
        if product.product_name == "":
            raise UseCaseError("product name cannot be empty")
        if product.color == "":
            raise UseCaseError("color cannot be empty")
        return self.repository.edit_product(product)

    def delete_products(self, product_id: str) -> None:
        self.repository.delete_products(product_id)

    def update_products(self, product_id: int, stock: int) -> ProductResponse:
        if not self.repository.check_products(product_id):
            raise UseCaseError("there is no inventory as you mentioned")
        return self.repository.update_products(product_id, stock)