"""Product DRF serializers for API output.

The serializers operate at the Interface layer (API Views).  Input is
validated by the Pydantic DTOs in ``dtos.py``; these classes only shape
responses.
"""

from __future__ import annotations

from django.core.paginator import Page
from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "description",
            "price",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class ProductPageSerializer(serializers.Serializer):
    """Serializes a ``django.core.paginator.Page`` of products.

    ``number`` is zero-based, matching the index used in the URL.
    """

    content = ProductSerializer(source="object_list", many=True, read_only=True)
    number = serializers.SerializerMethodField()
    size = serializers.IntegerField(source="paginator.per_page", read_only=True)
    total_elements = serializers.IntegerField(source="paginator.count", read_only=True)
    total_pages = serializers.IntegerField(source="paginator.num_pages", read_only=True)
    number_of_elements = serializers.SerializerMethodField()
    first = serializers.SerializerMethodField()
    last = serializers.SerializerMethodField()

    def get_number(self, page: Page) -> int:
        return page.number - 1

    def get_number_of_elements(self, page: Page) -> int:
        return len(page.object_list)

    def get_first(self, page: Page) -> bool:
        return not page.has_previous()

    def get_last(self, page: Page) -> bool:
        return not page.has_next()
