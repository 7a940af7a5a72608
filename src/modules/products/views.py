"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet mounted
under ``/api/v1/producto-service/``.  Field validation failures are
answered here with a 400 before any service call; every other failure
is raised and translated by ``modules.core.exception_handler``.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.products.constants import (
    PRODUCT_CREATED_MESSAGE,
    PRODUCT_DELETED_MESSAGE,
    PRODUCT_UPDATED_MESSAGE,
)
from modules.products.dtos import (
    CreateProductDTO,
    ProductReferenceDTO,
    UpdateProductDTO,
    field_errors,
)
from modules.products.exceptions import (
    EmptyProductPage,
    InvalidPageNumber,
    NoProductsFound,
    ProductNotFound,
)
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductPageSerializer, ProductSerializer
from modules.products.services import ProductService


def _is_index(raw: Any) -> bool:
    return isinstance(raw, str) and raw.isascii() and raw.isdigit()


class ProductViewSet(GenericViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    All ORM access goes through the service/repository layer.
    """

    queryset = Product.objects.all()
    serializer_class = ProductSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    # ------------------------------------------------------------------
    # List / Page / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /productos"""
        products = self._service.list_products()
        if not products:
            raise NoProductsFound()
        return Response(ProductSerializer(products, many=True).data)

    def page(self, request: Request, page: str | None = None) -> Response:
        """GET /producto/page/{page}"""
        if not _is_index(page):
            raise InvalidPageNumber(page)
        index = int(page)

        result = self._service.list_page(index)
        if not result.object_list:
            raise EmptyProductPage(index)
        return Response(ProductPageSerializer(result).data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /productos/{pk}"""
        if not _is_index(pk):
            raise ProductNotFound(pk)
        product = self._service.find_product(int(pk))
        if product is None:
            raise ProductNotFound(pk)
        return Response(ProductSerializer(product).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /productos"""
        try:
            dto = CreateProductDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return Response(
                {"errors": field_errors(exc)},
                status=status.HTTP_400_BAD_REQUEST,
            )

        product = self._service.create_product(dto)
        return Response(
            {
                "message": PRODUCT_CREATED_MESSAGE,
                "product": ProductSerializer(product).data,
            },
            status=status.HTTP_201_CREATED,
        )

    def update(self, request: Request) -> Response:
        """PUT /productos"""
        try:
            dto = UpdateProductDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return Response(
                {"errors": field_errors(exc)},
                status=status.HTTP_400_BAD_REQUEST,
            )

        product = self._service.update_product(dto)
        return Response(
            {
                "message": PRODUCT_UPDATED_MESSAGE,
                "product": ProductSerializer(product).data,
            }
        )

    def destroy(self, request: Request) -> Response:
        """DELETE /productos"""
        try:
            dto = ProductReferenceDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return Response(
                {"errors": field_errors(exc)},
                status=status.HTTP_400_BAD_REQUEST,
            )

        self._service.delete_product(dto.id)
        return Response({"message": PRODUCT_DELETED_MESSAGE})
