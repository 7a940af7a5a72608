"""Integration tests for error responses produced by the exception handler."""

import sqlite3

import pytest
from django.db import OperationalError

from modules.products.repositories.django_repository import ProductDjangoRepository

pytestmark = pytest.mark.integration

PRODUCTS_URL = "/api/v1/producto-service/productos"


def _raise_db_error(*args, **kwargs):
    try:
        raise sqlite3.OperationalError("database is locked")
    except sqlite3.OperationalError as exc:
        raise OperationalError("database is locked") from exc


class TestDataAccessErrors:
    def test_list_storage_failure_returns_500(self, api_client, monkeypatch):
        monkeypatch.setattr(ProductDjangoRepository, "list", _raise_db_error)

        response = api_client.get(PRODUCTS_URL)

        assert response.status_code == 500
        assert response.json() == {
            "message": "database access error",
            "error": "database is locked: database is locked",
        }

    def test_create_storage_failure_returns_500(self, api_client, monkeypatch):
        monkeypatch.setattr(ProductDjangoRepository, "save", _raise_db_error)

        response = api_client.post(PRODUCTS_URL, {"name": "Widget"}, format="json")

        assert response.status_code == 500
        assert response.json()["message"] == "database access error"


class TestUnexpectedErrors:
    def test_unclassified_error_returns_500(self, api_client, monkeypatch):
        def _boom(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr(ProductDjangoRepository, "get_by_id", _boom)

        response = api_client.get(f"{PRODUCTS_URL}/1")

        assert response.status_code == 500
        assert response.json() == {"error": "unexpected error: boom", "status": 500}


class TestFrameworkErrors:
    def test_method_not_allowed_has_structured_body(self, api_client):
        response = api_client.patch(PRODUCTS_URL, {}, format="json")
        assert response.status_code == 405
        data = response.json()
        assert data["status"] == 405
        assert "error" in data

    def test_non_json_body_is_rejected(self, api_client):
        response = api_client.post(
            PRODUCTS_URL, data="name=Widget", content_type="text/plain"
        )
        assert response.status_code == 415
        assert response.json()["status"] == 415
