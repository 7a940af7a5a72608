import pytest

from config.settings import mask_sensitive_data

pytestmark = pytest.mark.unit


class TestSensitiveDataMasking:
    def test_password_masked(self):
        event_dict = {"event": "test", "data": "password='s3cret123'"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "s3cret123" not in result["data"]
        assert "***MASKED***" in result["data"]

    def test_token_masked(self):
        event_dict = {"event": "test", "header": "token=abc123xyz"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "abc123xyz" not in result["header"]
        assert "***MASKED***" in result["header"]

    def test_authorization_masked_case_insensitive(self):
        event_dict = {"event": "test", "header": "Authorization: Bearer-xyz"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "Bearer-xyz" not in result["header"]

    def test_key_name_is_kept(self):
        event_dict = {"event": "test", "data": "secret=hunter2"}
        result = mask_sensitive_data(None, None, event_dict)
        assert result["data"] == "secret=***MASKED***"

    def test_non_sensitive_data_unchanged(self):
        event_dict = {"event": "product.created", "name": "Widget", "product_id": 7}
        result = mask_sensitive_data(None, None, event_dict)
        assert result["name"] == "Widget"
        assert result["product_id"] == 7
        assert result["event"] == "product.created"
