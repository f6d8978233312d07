"""
Tests for pay-as-you-go usage tracking.
"""
from decimal import Decimal

import pytest

from subscription_service.models.subscription_plan import SubscriptionPlan
from subscription_service.models.usage_record import UsageRecord, UsageStatus
from subscription_service.models.user_subscription import UserSubscription
from subscription_service.services.usage_tracking import track_usage, unpaid_usage


@pytest.fixture
def paygo_plan(db):
    plan = SubscriptionPlan(name="Per election", price=Decimal("1.25"), duration="paygo")
    db.session.add(plan)
    db.session.commit()
    return plan


def _subscribe(db, user_id, plan, status="active"):
    db.session.add(UserSubscription(user_id=user_id, plan_id=plan.id, status=status))
    db.session.commit()


def test_track_usage_records_pending_usage(db, paygo_plan):
    """Test a paygo user's use is priced at the plan price."""
    _subscribe(db, "user-1", paygo_plan)

    record = track_usage("user-1", election_id=12, quantity=4)
    db.session.commit()

    assert record.id is not None
    assert record.election_id == "12"
    assert record.usage_type == "election_created"
    assert record.price_per_unit == Decimal("1.25")
    assert record.total_amount == Decimal("5.00")
    assert record.status == UsageStatus.PENDING.value


def test_track_usage_skips_periodic_plans(db, plan):
    _subscribe(db, "user-1", plan)

    assert track_usage("user-1") is None
    assert UsageRecord.query.count() == 0


def test_track_usage_needs_active_subscription(db, paygo_plan):
    """Test canceled or missing subscriptions are not billed."""
    _subscribe(db, "user-1", paygo_plan, status="canceled")

    assert track_usage("user-1") is None
    assert track_usage("user-2") is None


def test_total_unpaid_counts_only_pending(db, paygo_plan):
    """Test paid usage and other users' usage are left out of the total."""
    db.session.add_all([
        UsageRecord(user_id="user-1", plan_id=paygo_plan.id, price_per_unit=1.25, total_amount=1.25),
        UsageRecord(user_id="user-1", plan_id=paygo_plan.id, quantity=2, price_per_unit=1.25, total_amount=2.5),
        UsageRecord(user_id="user-1", plan_id=paygo_plan.id, price_per_unit=1.25, total_amount=1.25,
                    status=UsageStatus.PAID.value),
        UsageRecord(user_id="user-2", plan_id=paygo_plan.id, price_per_unit=1.25, total_amount=1.25),
    ])
    db.session.commit()

    assert UsageRecord.total_unpaid("user-1") == Decimal("3.75")
    assert UsageRecord.total_unpaid("nobody") == Decimal("0.00")

    summary = unpaid_usage("user-1")
    assert summary["count"] == 2
    assert summary["total"] == 3.75
    assert all(item.user_id == "user-1" for item in summary["items"])
