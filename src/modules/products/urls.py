"""Product URL configuration.

Routes are declared explicitly because the collection endpoint also
takes PUT/DELETE with the product ID in the request body.
"""

from __future__ import annotations

from django.urls import path

from modules.products.views import ProductViewSet

product_collection = ProductViewSet.as_view(
    {"get": "list", "post": "create", "put": "update", "delete": "destroy"}
)
product_detail = ProductViewSet.as_view({"get": "retrieve"})
product_page = ProductViewSet.as_view({"get": "page"})

urlpatterns = [
    path("productos", product_collection, name="product-list"),
    path("productos/<str:pk>", product_detail, name="product-detail"),
    path("producto/page/<str:page>", product_page, name="product-page"),
]
