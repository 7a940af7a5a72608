"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API and
``django.core.paginator``.  Look-ups follow the Null Object pattern:
missing rows come back as ``None``, and the Service Layer decides how
to translate them.  The one exception is a UNIQUE violation on
``name``, which is translated into ``ProductAlreadyExists`` here since
the database constraint is the authority for that rule.
"""

from __future__ import annotations

from typing import List, Optional

import structlog

from django.core.paginator import EmptyPage, Page, Paginator
from django.db import IntegrityError, transaction

from modules.products.exceptions import ProductAlreadyExists
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a product by primary key, ``None`` when absent."""
        return Product.objects.filter(id=id).first()

    def get_by_name(self, name: str) -> Optional[Product]:
        return Product.objects.filter(name=name).first()

    def list(self) -> List[Product]:
        return list(Product.objects.all())

    def page(self, number: int, size: int) -> Page:
        paginator = Paginator(Product.objects.all(), size)
        try:
            return paginator.page(number)
        except EmptyPage:
            return Page([], number, paginator)

    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product.

        Raises:
            ProductAlreadyExists: if another product already owns the name.
        """
        try:
            with transaction.atomic():
                entity.save()
        except IntegrityError as exc:
            taken = (
                Product.objects.filter(name=entity.name).exclude(pk=entity.pk).exists()
            )
            if taken:
                logger.warning("product.name_conflict", name=entity.name)
                raise ProductAlreadyExists(entity.name) from exc
            raise
        return entity

    @transaction.atomic
    def delete(self, id: int) -> bool:
        """Delete a product by ID.

        Returns ``True`` if the product was found and deleted,
        ``False`` if no product exists with the given ID.
        """
        deleted, _ = Product.objects.filter(id=id).delete()
        return deleted > 0
