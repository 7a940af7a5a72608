"""Product service layer (Use Cases).

Orchestrates the Product use-cases, delegating persistence to the
injected ``IProductRepository``.  The service keeps no state of its own:
every call reads from and writes to the store.

Rules enforced here:
- Product names are unique (fast-path check; the DB constraint,
  translated by the repository, is the authority).
- Update and delete require the product to exist.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog
from django.db import transaction

from modules.products.constants import PRODUCT_PAGE_SIZE
from modules.products.exceptions import ProductAlreadyExists, ProductNotFound
from modules.products.models import Product

if TYPE_CHECKING:
    from django.core.paginator import Page

    from modules.products.dtos import CreateProductDTO, UpdateProductDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product(self, dto: CreateProductDTO) -> Product:
        """Create a new product after enforcing the unique-name rule.

        Raises:
            ProductAlreadyExists: if the name is already taken.
        """
        log = logger.bind(name=dto.name)

        if self._repo.get_by_name(dto.name):
            log.warning("product.duplicate_name")
            raise ProductAlreadyExists(dto.name)

        product = Product(
            name=dto.name,
            description=dto.description,
            price=dto.price,
        )
        product = self._repo.save(product)
        log.info("product.created", product_id=product.id)
        return product

    @transaction.atomic
    def update_product(self, dto: UpdateProductDTO) -> Product:
        """Replace the fields of the product identified by ``dto.id``.

        Raises:
            ProductNotFound: if the product does not exist.
            ProductAlreadyExists: if another product owns the new name.
        """
        product = self.get_product(dto.id)
        log = logger.bind(product_id=dto.id)

        owner = self._repo.get_by_name(dto.name)
        if owner is not None and owner.id != product.id:
            log.warning("product.duplicate_name", name=dto.name)
            raise ProductAlreadyExists(dto.name)

        product.name = dto.name
        product.description = dto.description
        product.price = dto.price

        product = self._repo.save(product)
        log.info("product.updated")
        return product

    @transaction.atomic
    def delete_product(self, id: int) -> None:
        """Delete a product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        self.get_product(id)
        self._repo.delete(id)
        logger.info("product.deleted", product_id=id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> List[Product]:
        """Return every product, ordered by ID."""
        return self._repo.list()

    def list_page(self, index: int) -> Page:
        """Return the zero-based page ``index`` of ``PRODUCT_PAGE_SIZE`` products."""
        return self._repo.page(index + 1, PRODUCT_PAGE_SIZE)

    def find_product(self, id: int) -> Optional[Product]:
        return self._repo.get_by_id(id)

    def get_product(self, id: int) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(id)
        return product
