"""
Subscription Plan model for managing available subscription plans.
"""
from decimal import Decimal
from enum import Enum

from sqlalchemy import Index

from subscription_service import db

from .base import BaseModel


class PlanDuration(Enum):
    """Enum for plan billing durations."""
    MONTHLY = "monthly"
    THREE_MONTHS = "3months"
    SIX_MONTHS = "6months"
    YEARLY = "yearly"
    PAYGO = "paygo"

    @classmethod
    def values(cls):
        """Get all enum values."""
        return [e.value for e in cls]


class PlanType(Enum):
    """Enum for the audience a plan is sold to."""
    INDIVIDUAL = "individual"
    ORGANIZATION = "organization"

    @classmethod
    def values(cls):
        """Get all enum values."""
        return [e.value for e in cls]


class ProcessingFeeType(Enum):
    """Enum for processing fee calculation modes."""
    FIXED = "fixed"
    PERCENTAGE = "percentage"

    @classmethod
    def values(cls):
        """Get all enum values."""
        return [e.value for e in cls]


DURATION_DAYS = {
    PlanDuration.MONTHLY.value: 30,
    PlanDuration.THREE_MONTHS.value: 90,
    PlanDuration.SIX_MONTHS.value: 180,
    PlanDuration.YEARLY.value: 365,
}


class SubscriptionPlan(BaseModel):
    """
    Subscription Plan model for the election platform's paid tiers.

    Attributes:
        name (str): Plan name (e.g., "Gold")
        type (str): individual or organization
        price (Decimal): Base price of the plan
        duration (str): Billing duration (monthly, 3months, 6months, yearly, paygo)
        max_elections (int): Number of elections the plan allows
        max_voters_per_election (int): Voter cap per election
        processing_fee_enabled (bool): Whether a processing fee applies at all
        processing_fee_mandatory (bool): Whether the fee is charged on every payment
        processing_fee_type (str): fixed or percentage
        processing_fee_fixed_amount (Decimal): Fee for fixed mode
        processing_fee_percentage (Decimal): Fee for percentage mode
    """
    __tablename__ = 'subscription_plans'

    name = db.Column(db.String(100), nullable=False)
    type = db.Column(db.String(20), nullable=False, default=PlanType.INDIVIDUAL.value)
    price = db.Column(db.Numeric(10, 2), nullable=False)
    duration = db.Column(db.String(20), nullable=False, default=PlanDuration.MONTHLY.value)
    description = db.Column(db.Text, nullable=True)
    what_included = db.Column(db.Text, nullable=True)
    what_excluded = db.Column(db.Text, nullable=True)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    display_order = db.Column(db.Integer, nullable=False, default=0)

    max_elections = db.Column(db.Integer, nullable=True)
    max_voters_per_election = db.Column(db.Integer, nullable=True)
    processing_fee_enabled = db.Column(db.Boolean, nullable=False, default=False)
    processing_fee_mandatory = db.Column(db.Boolean, nullable=False, default=False)
    processing_fee_type = db.Column(db.String(20), nullable=True)
    processing_fee_fixed_amount = db.Column(db.Numeric(10, 2), nullable=True)
    processing_fee_percentage = db.Column(db.Numeric(5, 2), nullable=True)

    subscriptions = db.relationship('UserSubscription', back_populates='plan', lazy='dynamic')
    regional_prices = db.relationship(
        'RegionalPrice', back_populates='plan', lazy='dynamic', cascade='all, delete-orphan'
    )

    __table_args__ = (
        Index('idx_subscription_plan_active_order', 'is_active', 'display_order'),
        Index('idx_subscription_plan_type', 'type'),
    )

    @property
    def duration_days(self):
        """Length of one billing period in days; None for pay-as-you-go."""
        return DURATION_DAYS.get(self.duration)

    def calculate_processing_fee(self, amount):
        """
        Processing fee owed on a payment of ``amount``.

        Args:
            amount (Decimal or float): Amount before fees

        Returns:
            Decimal: Fee, zero when the plan does not charge one
        """
        if not (self.processing_fee_enabled and self.processing_fee_mandatory):
            return Decimal('0')
        if self.processing_fee_type == ProcessingFeeType.PERCENTAGE.value:
            percentage = Decimal(str(self.processing_fee_percentage or 0))
            fee = Decimal(str(amount)) * percentage / Decimal('100')
            return fee.quantize(Decimal('0.01'))
        if self.processing_fee_type == ProcessingFeeType.FIXED.value:
            return Decimal(str(self.processing_fee_fixed_amount or 0))
        return Decimal('0')

    def apply_fields(self, fields):
        """
        Set the given attributes and leave every other column untouched.

        Args:
            fields (dict): Column name to new value
        """
        for name, value in fields.items():
            setattr(self, name, value)

    def to_dict(self):
        data = super().to_dict()
        data['duration_days'] = self.duration_days
        return data

    def __repr__(self):
        """String representation of the SubscriptionPlan model."""
        return f"<SubscriptionPlan {self.name} - {self.duration} - ${self.price}>"
