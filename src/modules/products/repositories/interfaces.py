"""Product repository interface.

Extends ``IRepository[Product]`` with the name look-up required by the
unique-name rule and with offset paging.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from django.core.paginator import Page

    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product entity."""

    @abstractmethod
    def get_by_name(self, name: str) -> Optional["Product"]:
        """Retrieve a product by its exact name."""

    @abstractmethod
    def page(self, number: int, size: int) -> "Page":
        """Return the 1-based page ``number`` of ``size`` products.

        A page past the end is returned empty rather than raising.
        """
