"""Category use cases."""

from __future__ import annotations

import re
from typing import Any

from showtimes.errors import UseCaseError
from showtimes.models import Category

_INTEGER = re.compile(r"[+-]?\d+")


class CategoryUseCase:
    """Rules for managing product categories.

    ``repository`` provides is_category_exist, add_category, get_categories,
    check_category, update_category and delete_category.
    """

    def __init__(self, repository: Any) -> None:
        self.repository = repository

    def add_category(self, category: Category) -> Category:
        if category.category == "":
            raise UseCaseError("category name not valid")
        if self.repository.is_category_exist(category.category):
            raise UseCaseError("category already exist")
        return self.repository.add_category(category)

    def get_categories(self) -> list[Category]:
        return self.repository.get_categories()

    def update_category(self, current: str, new: str) -> Category:
        if not self.repository.check_category(current):
            raise UseCaseError("there is no category as you mentioned")
        return self.repository.update_category(current, new)

    def delete_category(self, category_id: str) -> None:
        if not _INTEGER.fullmatch(category_id):
            raise UseCaseError("string  conversion invalid")
        self.repository.delete_category(int(category_id))