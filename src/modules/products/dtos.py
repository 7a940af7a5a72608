"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (Views) and the
Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for full product updates (carries ``id``).
- ``ProductReferenceDTO``: input for operations that only need ``id``.

Validation failures are raised as ``pydantic.ValidationError``; the
view turns each error into one ``"Field '<name>' <message>"`` entry.
"""

from __future__ import annotations

from decimal import Decimal
from typing import List

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from modules.products.constants import (
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
    PRICE_DECIMAL_PLACES,
    PRICE_MAX_DIGITS,
)


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class ProductPayloadDTO(BaseModel):
    """Fields shared by create and update payloads.

    Validates:
    - ``name`` is non-empty and between 2 and 20 characters.
    - ``price`` is non-negative and fits DECIMAL(10, 2).
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="", validate_default=True)
    description: str = Field(default="", max_length=255)
    price: Decimal = Field(
        default=Decimal("0.00"),
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
    )

    @field_validator("name")
    @classmethod
    def name_must_fit_length(cls, v: str) -> str:
        if not v:
            raise PydanticCustomError("name_empty", "must not be empty")
        if not NAME_MIN_LENGTH <= len(v) <= NAME_MAX_LENGTH:
            raise PydanticCustomError(
                "name_length",
                "size must be between {min} and {max}",
                {"min": NAME_MIN_LENGTH, "max": NAME_MAX_LENGTH},
            )
        return v

    @field_validator("price")
    @classmethod
    def price_must_be_non_negative(cls, v: Decimal) -> Decimal:
        if v < 0:
            raise PydanticCustomError("price_negative", "must not be negative")
        return v


class CreateProductDTO(ProductPayloadDTO):
    """Immutable DTO for product creation requests."""


class UpdateProductDTO(ProductPayloadDTO):
    """Immutable DTO for product update requests.

    Replaces every payload field of the product identified by ``id``.
    """

    id: int


class ProductReferenceDTO(BaseModel):
    """Immutable DTO identifying an existing product (delete requests)."""

    model_config = ConfigDict(frozen=True)

    id: int


# ---------------------------------------------------------------------------
# Error formatting
# ---------------------------------------------------------------------------


def field_errors(exc: ValidationError) -> List[str]:
    """Render a pydantic ``ValidationError`` as one message per field."""
    messages: List[str] = []
    seen = set()
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "body"
        if field in seen:
            continue
        seen.add(field)
        messages.append(f"Field '{field}' {error['msg']}")
    return messages
