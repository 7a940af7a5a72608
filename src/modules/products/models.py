"""Product model with unique name and price control.

Rules implemented:
- Name is required, between 2 and 20 characters and unique (DB UNIQUE).
- Price cannot be negative (validator + DB check constraint).
"""

from __future__ import annotations

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.core.validators import MinLengthValidator, MinValueValidator
from django.db import models

from modules.core.models import TimestampedModel
from modules.products.constants import (
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
    PRICE_DECIMAL_PLACES,
    PRICE_MAX_DIGITS,
)


class Product(TimestampedModel):
    """Product record.

    ``unique=True`` on ``name`` creates a UNIQUE INDEX: the database is
    the authority for name uniqueness, even under concurrent creates.
    """

    name = models.CharField(
        max_length=NAME_MAX_LENGTH,
        unique=True,
        validators=[MinLengthValidator(NAME_MIN_LENGTH)],
    )
    description = models.CharField(max_length=255, blank=True, default="")
    price = models.DecimalField(
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
        default=Decimal("0.00"),
        validators=[MinValueValidator(Decimal("0.00"))],
    )

    class Meta:
        db_table = "products"
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gte=0),
                name="products_price_non_negative",
            ),
        ]

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def clean(self) -> None:
        super().clean()
        if self.price is not None and self.price < 0:
            raise ValidationError({"price": "Price cannot be negative."})

    def __str__(self) -> str:
        return f"{self.id} - {self.name}"
