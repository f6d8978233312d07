"""
Tests for JSON helpers.
"""
from datetime import UTC, datetime
from decimal import Decimal

from subscription_service.utils.json_helpers import convert_decimal_in_dict, json_body


def test_convert_decimal_in_dict_nested():
    """Test decimals and datetimes are converted at any depth."""
    moment = datetime(2026, 1, 2, 3, 4, 5, tzinfo=UTC)
    data = {"price": Decimal("9.99"), "rows": [{"fee": Decimal("0.5")}, "text"], "at": moment}

    assert convert_decimal_in_dict(data) == {
        "price": 9.99,
        "rows": [{"fee": 0.5}, "text"],
        "at": "2026-01-02T03:04:05+00:00",
    }


def test_json_body_object(app):
    """Test a JSON object body is returned as a dict."""
    with app.test_request_context("/", method="POST", json={"name": "Gold"}):
        assert json_body() == {"name": "Gold"}


def test_json_body_rejects_non_objects(app):
    """Test arrays, invalid JSON and missing bodies are treated as absent."""
    with app.test_request_context("/", method="POST", json=["name"]):
        assert json_body() is None
    with app.test_request_context("/", method="POST", data="{oops", content_type="application/json"):
        assert json_body() is None
    with app.test_request_context("/", method="POST"):
        assert json_body() is None
