"""
Usage records billed to pay-as-you-go plans.
"""
import enum
from decimal import Decimal

from sqlalchemy import Index

from subscription_service import db

from .base import BaseModel


class UsageStatus(enum.Enum):
    """Enum for usage billing state."""
    PENDING = "pending"
    PAID = "paid"

    @classmethod
    def values(cls):
        """Get all enum values."""
        return [e.value for e in cls]


class UsageRecord(BaseModel):
    """
    One billable action of a user on a pay-as-you-go plan.

    Attributes:
        user_id (str): External user identifier
        plan_id (int): Plan the usage is billed under
        election_id (str): Election the usage belongs to, if any
        usage_type (str): What was used (e.g., "election_created")
        quantity (int): Units used
        price_per_unit (Decimal): Plan price at the time of use
        total_amount (Decimal): quantity x price_per_unit
        status (str): pending until a payment settles it
        payment_id (int): Payment that settled the usage
        paid_at (datetime): When the usage was settled
    """
    __tablename__ = 'usage_records'

    user_id = db.Column(db.String(64), nullable=False)
    plan_id = db.Column(db.Integer, db.ForeignKey('subscription_plans.id'), nullable=False)
    election_id = db.Column(db.String(64), nullable=True)
    usage_type = db.Column(db.String(50), nullable=False, default='election_created')
    quantity = db.Column(db.Integer, nullable=False, default=1)
    price_per_unit = db.Column(db.Numeric(10, 2), nullable=False)
    total_amount = db.Column(db.Numeric(10, 2), nullable=False)
    status = db.Column(db.String(20), nullable=False, default=UsageStatus.PENDING.value)
    payment_id = db.Column(db.Integer, db.ForeignKey('payments.id'), nullable=True)
    paid_at = db.Column(db.DateTime, nullable=True)

    payment = db.relationship('Payment')

    __table_args__ = (
        Index('idx_usage_record_user_status', 'user_id', 'status'),
    )

    @classmethod
    def unpaid_for_user(cls, user_id):
        """Pending usage of a user, newest first."""
        return (cls.query
                .filter_by(user_id=user_id, status=UsageStatus.PENDING.value)
                .order_by(cls.created_at.desc(), cls.id.desc())
                .all())

    @classmethod
    def history_for_user(cls, user_id, limit=50):
        return (cls.query
                .filter_by(user_id=user_id)
                .order_by(cls.created_at.desc(), cls.id.desc())
                .limit(limit)
                .all())

    @classmethod
    def total_unpaid(cls, user_id):
        """Sum of pending usage amounts, zero when there is none."""
        total = (db.session.query(db.func.coalesce(db.func.sum(cls.total_amount), 0))
                 .filter(cls.user_id == user_id, cls.status == UsageStatus.PENDING.value)
                 .scalar())
        return Decimal(str(total)).quantize(Decimal('0.01'))

    def __repr__(self):
        return f"<UsageRecord {self.user_id} - {self.usage_type} x{self.quantity} - {self.status}>"
