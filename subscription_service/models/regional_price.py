"""
Regional price overrides for subscription plans.
"""
from sqlalchemy import UniqueConstraint

from subscription_service import db

from .base import BaseModel


class RegionalPrice(BaseModel):
    """
    Price of a plan in one pricing region.

    Attributes:
        plan_id (int): Foreign key to SubscriptionPlan model
        region (str): Region code (e.g., "region_1")
        price (Decimal): Price charged in the region
        currency (str): ISO currency code
    """
    __tablename__ = 'regional_prices'

    plan_id = db.Column(db.Integer, db.ForeignKey('subscription_plans.id', ondelete='CASCADE'), nullable=False)
    region = db.Column(db.String(50), nullable=False)
    price = db.Column(db.Numeric(10, 2), nullable=False)
    currency = db.Column(db.String(3), nullable=False, default='USD')

    plan = db.relationship('SubscriptionPlan', back_populates='regional_prices')

    __table_args__ = (
        UniqueConstraint('plan_id', 'region', name='uix_regional_price_plan_region'),
    )

    @classmethod
    def for_plan(cls, plan_id):
        """All regional prices of a plan ordered by region."""
        return cls.query.filter_by(plan_id=plan_id).order_by(cls.region).all()

    @classmethod
    def lookup(cls, plan_id, region):
        """Price of a plan in a region, or None."""
        return cls.query.filter_by(plan_id=plan_id, region=region).first()

    @classmethod
    def upsert(cls, plan_id, region, price, currency):
        """
        Stage an insert or update for one region without committing.

        Returns:
            RegionalPrice: The new or updated row
        """
        row = cls.lookup(plan_id, region)
        if row is None:
            row = cls(plan_id=plan_id, region=region)
            db.session.add(row)
        row.price = price
        row.currency = currency
        return row

    def __repr__(self):
        return f"<RegionalPrice plan {self.plan_id} - {self.region} - {self.price} {self.currency}>"
