"""
Unit tests for the SubscriptionPlan model.
"""
from decimal import Decimal

import pytest

from subscription_service.models.subscription_plan import (
    PlanDuration,
    PlanType,
    ProcessingFeeType,
    SubscriptionPlan,
)


def _plan(**overrides):
    values = {
        "name": "Gold",
        "type": PlanType.INDIVIDUAL.value,
        "price": Decimal("10.00"),
        "duration": PlanDuration.MONTHLY.value,
        "max_elections": 5,
        "max_voters_per_election": 100,
    }
    values.update(overrides)
    return SubscriptionPlan(**values)


def test_create_subscription_plan(db):
    """Test creating a subscription plan."""
    plan = _plan()
    db.session.add(plan)
    db.session.commit()

    assert plan.id is not None
    assert plan.is_active is True
    assert plan.display_order == 0
    assert plan.processing_fee_enabled is False
    assert plan.processing_fee_mandatory is False
    assert plan.created_at is not None


@pytest.mark.parametrize("duration, days", [
    ("monthly", 30),
    ("3months", 90),
    ("6months", 180),
    ("yearly", 365),
    ("paygo", None),
])
def test_duration_days(duration, days):
    """Test billing period length per duration."""
    assert _plan(duration=duration).duration_days == days


def test_enum_values():
    """Test the enums expose their wire values."""
    assert PlanDuration.values() == ["monthly", "3months", "6months", "yearly", "paygo"]
    assert PlanType.values() == ["individual", "organization"]
    assert ProcessingFeeType.values() == ["fixed", "percentage"]


def test_processing_fee_percentage():
    """Test a mandatory percentage fee is rounded to cents."""
    plan = _plan(
        processing_fee_enabled=True,
        processing_fee_mandatory=True,
        processing_fee_type="percentage",
        processing_fee_percentage=Decimal("2.5"),
    )

    assert plan.calculate_processing_fee(Decimal("19.99")) == Decimal("0.50")


def test_processing_fee_fixed():
    """Test a mandatory fixed fee does not depend on the amount."""
    plan = _plan(
        processing_fee_enabled=True,
        processing_fee_mandatory=True,
        processing_fee_type="fixed",
        processing_fee_fixed_amount=Decimal("1.25"),
    )

    assert plan.calculate_processing_fee(100) == Decimal("1.25")


@pytest.mark.parametrize("enabled, mandatory", [(False, True), (True, False), (False, False)])
def test_processing_fee_not_charged(enabled, mandatory):
    """Test no fee unless the fee is both enabled and mandatory."""
    plan = _plan(
        processing_fee_enabled=enabled,
        processing_fee_mandatory=mandatory,
        processing_fee_type="fixed",
        processing_fee_fixed_amount=Decimal("3"),
    )

    assert plan.calculate_processing_fee(50) == Decimal("0")


def test_apply_fields_leaves_other_columns_untouched(db):
    """Test a partial update only changes the given attributes."""
    plan = _plan(description="Original")
    db.session.add(plan)
    db.session.commit()

    plan.apply_fields({"max_elections": 20, "processing_fee_type": "fixed"})
    db.session.commit()

    reloaded = db.session.get(SubscriptionPlan, plan.id)
    assert reloaded.max_elections == 20
    assert reloaded.processing_fee_type == "fixed"
    assert reloaded.description == "Original"
    assert reloaded.name == "Gold"


def test_to_dict_converts_decimals(db):
    """Test the dict form is JSON ready."""
    plan = _plan()
    db.session.add(plan)
    db.session.commit()

    data = plan.to_dict()
    assert data["price"] == 10.0
    assert isinstance(data["created_at"], str)
    assert data["duration_days"] == 30
