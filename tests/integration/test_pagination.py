"""Integration tests for GET /producto/page/{page}."""

from __future__ import annotations

import pytest

pytestmark = pytest.mark.integration

PAGE_URL = "/api/v1/producto-service/producto/page"


@pytest.fixture()
def product_batch(make_product):
    """Nine products: two full pages of four and one page of one."""
    return [make_product(name=f"Product {idx:02d}") for idx in range(9)]


class TestPagination:
    def test_first_page(self, api_client, product_batch):
        response = api_client.get(f"{PAGE_URL}/0")
        assert response.status_code == 200
        data = response.json()
        assert [p["name"] for p in data["content"]] == [
            "Product 00",
            "Product 01",
            "Product 02",
            "Product 03",
        ]
        assert data["number"] == 0
        assert data["size"] == 4
        assert data["total_elements"] == 9
        assert data["total_pages"] == 3
        assert data["first"] is True
        assert data["last"] is False

    def test_last_partial_page(self, api_client, product_batch):
        response = api_client.get(f"{PAGE_URL}/2")
        assert response.status_code == 200
        data = response.json()
        assert [p["name"] for p in data["content"]] == ["Product 08"]
        assert data["number_of_elements"] == 1
        assert data["last"] is True

    @pytest.mark.parametrize("count", [1, 4])
    def test_page_zero_with_few_products(self, api_client, make_product, count):
        for idx in range(count):
            make_product(name=f"Product {idx}")
        response = api_client.get(f"{PAGE_URL}/0")
        assert response.status_code == 200
        assert len(response.json()["content"]) == count

    def test_page_past_the_end_returns_404(self, api_client, product_batch):
        response = api_client.get(f"{PAGE_URL}/3")
        assert response.status_code == 404
        assert response.json() == {"message": "no products on page 3"}

    def test_empty_store_page_zero_returns_404(self, api_client):
        response = api_client.get(f"{PAGE_URL}/0")
        assert response.status_code == 404
        assert response.json() == {"message": "no products on page 0"}

    @pytest.mark.parametrize("page", ["abc", "-1", "1.5", "%201"])
    def test_malformed_page_returns_400(self, api_client, page):
        response = api_client.get(f"{PAGE_URL}/{page}")
        assert response.status_code == 400
        assert response.json() == {"message": "invalid page number"}
