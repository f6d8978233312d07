"""
Pay-as-you-go usage tracking.

Users on a ``paygo`` plan are billed per use instead of per period. Each use
is recorded as pending at the plan's current price.
"""
from decimal import Decimal

from subscription_service import db
from subscription_service.models.subscription_plan import PlanDuration
from subscription_service.models.usage_record import UsageRecord, UsageStatus
from subscription_service.models.user_subscription import UserSubscription


def track_usage(user_id, election_id=None, usage_type='election_created', quantity=1):
    """
    Record a billable use for a pay-as-you-go user without committing.

    Args:
        user_id (str): External user identifier
        election_id (str, optional): Election the use belongs to
        usage_type (str): What was used
        quantity (int): Units used

    Returns:
        UsageRecord or None: None when the user has no active subscription or
            is on a plan billed per period
    """
    subscription = UserSubscription.current_for_user(user_id)
    if subscription is None or subscription.plan is None:
        return None

    plan = subscription.plan
    if plan.duration != PlanDuration.PAYGO.value:
        return None

    price_per_unit = Decimal(str(plan.price))
    record = UsageRecord(
        user_id=user_id,
        plan_id=plan.id,
        election_id=str(election_id) if election_id is not None else None,
        usage_type=usage_type,
        quantity=quantity,
        price_per_unit=price_per_unit,
        total_amount=price_per_unit * quantity,
        status=UsageStatus.PENDING.value,
    )
    db.session.add(record)
    return record


def unpaid_usage(user_id):
    """Pending usage of a user with its total and count."""
    items = UsageRecord.unpaid_for_user(user_id)
    return {
        'items': items,
        'total': float(UsageRecord.total_unpaid(user_id)),
        'count': len(items),
    }
