"""
User subscription model for handling user subscriptions to plans.
"""
import enum
from datetime import UTC, datetime

from sqlalchemy import Index, UniqueConstraint

from subscription_service import db

from .base import BaseModel, as_utc, utcnow


class SubscriptionStatus(enum.Enum):
    """Enum for subscription status values."""
    ACTIVE = "active"
    CANCELED = "canceled"
    EXPIRED = "expired"
    PAST_DUE = "past_due"
    PENDING = "pending"

    @classmethod
    def values(cls):
        """Get all enum values."""
        return [e.value for e in cls]


class UserSubscription(BaseModel):
    """
    User Subscription model linking a platform user to a plan.

    Users live in another service, so ``user_id`` is the external identifier
    carried in the caller's token rather than a foreign key.

    Attributes:
        user_id (str): External user identifier
        plan_id (int): Foreign key to SubscriptionPlan model
        status (str): Current status of the subscription
        gateway_used (str): Payment gateway that billed the subscription
        external_subscription_id (str): Subscription id at the gateway
        payment_type (str): recurring or pay_as_you_go
        start_date (datetime): When the subscription starts
        end_date (datetime): When the subscription ends
        auto_renew (bool): Whether to automatically renew
    """
    __tablename__ = 'user_subscriptions'

    user_id = db.Column(db.String(64), nullable=False)
    plan_id = db.Column(db.Integer, db.ForeignKey('subscription_plans.id'), nullable=False)
    status = db.Column(db.String(20), nullable=False, default=SubscriptionStatus.PENDING.value)
    gateway_used = db.Column(db.String(20), nullable=True)
    external_subscription_id = db.Column(db.String(255), nullable=True)
    payment_type = db.Column(db.String(20), nullable=False, default='recurring')
    start_date = db.Column(db.DateTime, nullable=False, default=utcnow)
    end_date = db.Column(db.DateTime, nullable=True)
    auto_renew = db.Column(db.Boolean, nullable=False, default=True)

    plan = db.relationship('SubscriptionPlan', back_populates='subscriptions')

    __table_args__ = (
        UniqueConstraint('user_id', 'external_subscription_id', name='uix_user_external_subscription'),
        Index('idx_user_subscription_user_status', 'user_id', 'status'),
        Index('idx_user_subscription_status_end_date', 'status', 'end_date'),
    )

    @property
    def is_valid(self):
        """Active and not yet past its end date."""
        if self.status != SubscriptionStatus.ACTIVE.value or self.end_date is None:
            return False
        return as_utc(self.end_date) > datetime.now(UTC)

    @property
    def days_remaining(self):
        """Whole days until the end date, never negative."""
        if self.end_date is None:
            return None
        remaining = as_utc(self.end_date) - datetime.now(UTC)
        return max(remaining.days, 0)

    @classmethod
    def current_for_user(cls, user_id):
        """Most recently created active subscription for a user, if any."""
        return (cls.query
                .filter_by(user_id=user_id, status=SubscriptionStatus.ACTIVE.value)
                .order_by(cls.created_at.desc(), cls.id.desc())
                .first())

    @classmethod
    def valid_for_user(cls, user_id):
        """Active subscription whose end date is still in the future."""
        return (cls.query
                .filter(cls.user_id == user_id,
                        cls.status == SubscriptionStatus.ACTIVE.value,
                        cls.end_date > datetime.now(UTC))
                .order_by(cls.end_date.desc())
                .first())

    @classmethod
    def history_for_user(cls, user_id, limit=10, offset=0):
        """All subscriptions of a user, newest first."""
        return (cls.query
                .filter_by(user_id=user_id)
                .order_by(cls.created_at.desc(), cls.id.desc())
                .limit(limit)
                .offset(offset)
                .all())

    def to_dict(self):
        data = super().to_dict()
        data['plan_name'] = self.plan.name if self.plan else None
        data['days_remaining'] = self.days_remaining
        return data

    def __repr__(self):
        """String representation of the UserSubscription model."""
        return f"<UserSubscription {self.user_id} - plan {self.plan_id} - {self.status}>"
