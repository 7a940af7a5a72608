"""Product domain exceptions.

Raised by the handler, service and repository layers when a request
cannot be satisfied.  ``modules.core.exception_handler`` maps each class
to its HTTP status and response body.
"""

from __future__ import annotations

from typing import Any


class ProductError(Exception):
    """Base class for product domain errors."""


class ProductNotFound(ProductError):
    """No product exists with the requested ID."""

    def __init__(self, product_id: Any) -> None:
        self.product_id = product_id
        super().__init__(f"product with id {product_id} was not found")


class ProductAlreadyExists(ProductError):
    """A product with the same name already exists."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"product with name '{name}' already exists")


class NoProductsFound(ProductError):
    """The store holds no products at all."""

    def __init__(self) -> None:
        super().__init__("no products found")


class EmptyProductPage(ProductError):
    """The requested page lies past the last populated page."""

    def __init__(self, page: int) -> None:
        self.page = page
        super().__init__(f"no products on page {page}")


class InvalidPageNumber(ProductError):
    """The page index is not a non-negative integer."""

    def __init__(self, raw_page: Any = None) -> None:
        self.raw_page = raw_page
        super().__init__("invalid page number")
