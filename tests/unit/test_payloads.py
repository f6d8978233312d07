"""
Tests for payload validators.
"""
import itertools

import pytest

from subscription_service.validation import (
    validate_editable_values,
    validate_gateway_config,
    validate_payment_submission,
    validate_plan_creation,
    validate_plan_update,
    validate_regional_prices,
    validate_usage_submission,
)
from subscription_service.validation.payloads import is_number


@pytest.fixture
def valid_plan():
    return {
        "name": "Gold",
        "price": 10,
        "duration": "monthly",
        "type": "individual",
        "max_elections": 5,
        "max_voters_per_election": 100,
    }


def test_validate_plan_creation_accepts_valid_plan(valid_plan):
    """Test a complete plan has no violations."""
    assert validate_plan_creation(valid_plan) == []


def test_validate_plan_creation_reports_every_violation():
    """Test all problems are reported together, in field order."""
    errors = validate_plan_creation({"price": -5, "duration": "weekly"})

    assert errors == [
        "Valid plan name required",
        "Valid price required",
        "Valid duration required",
        "Valid type required",
        "Valid max_elections required",
        "Valid max_voters_per_election required",
    ]


@pytest.mark.parametrize("field, value, message", [
    ("name", "   ", "Valid plan name required"),
    ("name", 42, "Valid plan name required"),
    ("price", 0, "Valid price required"),
    ("price", "10", "Valid price required"),
    ("price", True, "Valid price required"),
    ("duration", "weekly", "Valid duration required"),
    ("type", "team", "Valid type required"),
    ("max_elections", "5", "Valid max_elections required"),
    ("max_voters_per_election", None, "Valid max_voters_per_election required"),
])
def test_validate_plan_creation_single_violation(valid_plan, field, value, message):
    """Test each rule in isolation."""
    valid_plan[field] = value

    assert validate_plan_creation(valid_plan) == [message]


@pytest.mark.parametrize("duration", ["monthly", "3months", "6months", "yearly", "paygo"])
def test_validate_plan_creation_accepts_every_duration(valid_plan, duration):
    """Test all billing durations are allowed."""
    valid_plan["duration"] = duration

    assert validate_plan_creation(valid_plan) == []


def test_validate_plan_creation_accepts_zero_capacity(valid_plan):
    """Test zero counts are numbers and therefore valid."""
    valid_plan["max_elections"] = 0

    assert validate_plan_creation(valid_plan) == []


def test_validate_plan_update_only_checks_present_fields():
    """Test a partial update is checked field by field."""
    assert validate_plan_update({"price": 12.5}) == []
    assert validate_plan_update({"price": -1, "type": "organization"}) == ["Valid price required"]


def test_validate_plan_update_type_checks():
    """Test booleans, integers and text fields are type-checked."""
    errors = validate_plan_update({
        "is_active": "yes",
        "processing_fee_enabled": 1,
        "display_order": 1.5,
        "description": 3,
    })

    assert errors == [
        "is_active must be boolean",
        "processing_fee_enabled must be boolean",
        "display_order must be an integer",
        "description must be string",
    ]


def test_validate_editable_values_accepts_valid_values():
    """Test well-formed editable values pass."""
    assert validate_editable_values({
        "max_elections": 10,
        "max_voters_per_election": None,
        "processing_fee_mandatory": True,
        "processing_fee_type": "fixed",
        "processing_fee_fixed_amount": 0,
        "processing_fee_percentage": None,
    }) == []


def test_validate_editable_values_reports_violations():
    """Test every malformed editable value is reported."""
    errors = validate_editable_values({
        "max_elections": "ten",
        "processing_fee_mandatory": None,
        "processing_fee_type": "tiered",
        "processing_fee_fixed_amount": -1,
        "processing_fee_percentage": 101,
    })

    assert errors == [
        "max_elections must be a number",
        "processing_fee_mandatory must be boolean",
        "processing_fee_type must be one of: fixed, percentage",
        "processing_fee_fixed_amount must be a non-negative number",
        "processing_fee_percentage must be a number between 0 and 100",
    ]


def test_validate_editable_values_unhashable_fee_type():
    """Test a list as fee type is reported, not raised."""
    assert validate_editable_values({"processing_fee_type": ["fixed"]}) == [
        "processing_fee_type must be one of: fixed, percentage"
    ]


def test_validate_payment_submission_accepts_valid_payment():
    """Test a complete payment has no violations."""
    payload = {"amount": 10, "currency": "USD", "country_code": "DE", "planId": 1, "payment_method": "card"}

    assert validate_payment_submission(payload) == []


def test_validate_payment_submission_reports_every_violation():
    """Test all payment problems are reported together."""
    errors = validate_payment_submission({"amount": 0, "currency": "", "payment_method": "cheque"})

    assert errors == [
        "Valid amount required",
        "Valid currency required",
        "Valid country_code required",
        "Plan ID required",
        "Invalid payment method",
    ]


def test_validate_payment_submission_payment_method_optional():
    """Test the payment method may be left out."""
    payload = {"amount": 5.5, "currency": "EUR", "country_code": "FR", "planId": 3}

    assert validate_payment_submission(payload) == []


def test_validate_gateway_config_non_boolean_flag():
    """Test a string flag is reported as not boolean."""
    errors = validate_gateway_config(
        {"gateway_type": "stripe", "stripe_enabled": True, "paddle_enabled": "yes"}, "EU"
    )

    assert errors == ["paddle_enabled must be boolean"]


def test_validate_gateway_config_reports_every_violation():
    """Test all gateway config problems are reported together."""
    errors = validate_gateway_config(
        {"recommendation_reason": 5, "split_percentage": 150}, ""
    )

    assert errors == [
        "Region required",
        "Gateway type required",
        "stripe_enabled must be boolean",
        "paddle_enabled must be boolean",
        "Recommendation reason must be string",
        "split_percentage must be a number between 0 and 100",
    ]


def test_validate_gateway_config_accepts_split():
    """Test a split config with a percentage passes."""
    payload = {
        "gateway_type": "split_50_50",
        "stripe_enabled": True,
        "paddle_enabled": True,
        "split_percentage": 50,
        "recommendation_reason": "Balance fees",
    }

    assert validate_gateway_config(payload, "region_2") == []


@pytest.mark.parametrize("prices", [None, {}, [10, 20], "region_1"])
def test_validate_regional_prices_requires_mapping(prices):
    """Test the batch must be a non-empty mapping."""
    assert validate_regional_prices(prices) == ["prices must be a non-empty object keyed by region"]


def test_validate_regional_prices_per_region_messages():
    """Test each bad row names its region."""
    errors = validate_regional_prices({
        "region_1": 10,
        "region_2": {"price": 0},
        "region_3": {"price": 5, "currency": ""},
    })

    assert errors == [
        "Valid price required for region region_2",
        "Valid currency required for region region_3",
    ]


@pytest.mark.parametrize("value, expected", [
    (0, True),
    (-3, True),
    (2.5, True),
    (10 ** 400, True),
    (float("nan"), False),
    (float("inf"), False),
    (float("-inf"), False),
    (True, False),
    ("5", False),
    (None, False),
])
def test_is_number(value, expected):
    """Test only finite non-boolean ints and floats count as numbers."""
    assert is_number(value) is expected


def test_validate_plan_creation_ignores_key_order():
    """Test the violations come out in the same order whatever the key order."""
    payload = {"name": " ", "price": float("nan"), "duration": "weekly", "type": "team", "max_elections": "5"}
    expected = validate_plan_creation(payload)

    assert expected == [
        "Valid plan name required",
        "Valid price required",
        "Valid duration required",
        "Valid type required",
        "Valid max_elections required",
        "Valid max_voters_per_election required",
    ]
    for keys in itertools.permutations(payload):
        assert validate_plan_creation({key: payload[key] for key in keys}) == expected


@pytest.mark.parametrize("field", ["currency", "country_code"])
@pytest.mark.parametrize("value", ["", "   ", "\t\n"])
def test_validate_payment_submission_rejects_blank_codes(field, value):
    """Test blank and whitespace-only currency and country codes are refused."""
    payload = {"amount": 10, "currency": "USD", "country_code": "DE", "planId": 1, field: value}

    assert validate_payment_submission(payload) == [f"Valid {field} required"]


def test_validate_usage_submission_defaults():
    """Test an empty usage body means one election created."""
    assert validate_usage_submission({}) == []
    assert validate_usage_submission({"election_id": 42, "quantity": 3.0}) == []


def test_validate_usage_submission_reports_every_violation():
    errors = validate_usage_submission({"quantity": 0, "usage_type": " ", "election_id": True})

    assert errors == [
        "quantity must be a positive integer",
        "usage_type must be a non-empty string",
        "election_id must be a string or an integer",
    ]


@pytest.mark.parametrize("quantity", [1.5, float("inf"), float("nan"), "2", True, -1])
def test_validate_usage_submission_quantity(quantity):
    assert validate_usage_submission({"quantity": quantity}) == ["quantity must be a positive integer"]
