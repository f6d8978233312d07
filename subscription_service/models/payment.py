"""
Payment records for plan purchases.
"""
import enum

from sqlalchemy import Index

from subscription_service import db

from .base import BaseModel


class PaymentStatus(enum.Enum):
    """Enum for payment status values."""
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    REFUNDED = "refunded"

    @classmethod
    def values(cls):
        """Get all enum values."""
        return [e.value for e in cls]


class Payment(BaseModel):
    """
    A payment a user started for a plan.

    Attributes:
        user_id (str): External user identifier
        plan_id (int): Foreign key to SubscriptionPlan model
        amount (Decimal): Total charged, processing fee included
        processing_fee (Decimal): Fee part of ``amount``
        currency (str): ISO currency code
        gateway (str): stripe or paddle
        payment_method (str): card, paypal, google_pay or apple_pay
        region (str): Pricing region of the payer
        country_code (str): Payer country
        status (str): Payment status
        external_payment_id (str): Identifier assigned by the gateway
    """
    __tablename__ = 'payments'

    user_id = db.Column(db.String(64), nullable=False)
    plan_id = db.Column(db.Integer, db.ForeignKey('subscription_plans.id'), nullable=False)
    amount = db.Column(db.Numeric(10, 2), nullable=False)
    processing_fee = db.Column(db.Numeric(10, 2), nullable=False, default=0)
    currency = db.Column(db.String(3), nullable=False, default='USD')
    gateway = db.Column(db.String(20), nullable=False)
    payment_method = db.Column(db.String(20), nullable=True)
    region = db.Column(db.String(50), nullable=True)
    country_code = db.Column(db.String(2), nullable=True)
    status = db.Column(db.String(20), nullable=False, default=PaymentStatus.PENDING.value)
    external_payment_id = db.Column(db.String(255), nullable=True, unique=True)

    __table_args__ = (
        Index('idx_payment_user_created', 'user_id', 'created_at'),
    )

    @classmethod
    def for_user(cls, user_id, limit=20, offset=0):
        """Payments of a user, newest first."""
        return (cls.query
                .filter_by(user_id=user_id)
                .order_by(cls.created_at.desc(), cls.id.desc())
                .limit(limit)
                .offset(offset)
                .all())

    def __repr__(self):
        return f"<Payment {self.id} - {self.amount} {self.currency} via {self.gateway}>"
