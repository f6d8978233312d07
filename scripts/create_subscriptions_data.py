#!/usr/bin/env python
"""
Script to create demo subscriptions and payments for load testing:
- Users spread evenly over the active plans
- A share of subscriptions expiring within a week
- A share of recently canceled subscriptions
- One pending payment per subscription, routed like a real one

Run scripts/seed_data.py first so plans, countries and gateways exist.
"""
import argparse
import random
from datetime import UTC, datetime, timedelta

from faker import Faker

from subscription_service import create_app, db
from subscription_service.models import (
    CountryRegion,
    Payment,
    SubscriptionPlan,
    SubscriptionStatus,
    UserSubscription,
)
from subscription_service.services.gateway_recommendation import (
    RecommendationError,
    recommend_gateway,
    select_gateway,
)

fake = Faker()

EXPIRING_SOON_SHARE = 0.2
RECENTLY_CANCELED_SHARE = 0.1


def create_subscriptions_data(total_users, batch_size=1000):
    """Create ``total_users`` users' subscriptions and payments in batches."""
    plans = SubscriptionPlan.query.filter_by(is_active=True).all()
    countries = [mapping.country_code for mapping in CountryRegion.all_mappings()]
    if not plans or not countries:
        print("Error: No plans or countries found. Run seed_data.py first.")
        return 0

    now = datetime.now(UTC)
    expiring_soon = int(total_users * EXPIRING_SOON_SHARE)
    recently_canceled = int(total_users * RECENTLY_CANCELED_SHARE)
    recommendations = {}
    created = 0

    while created < total_users:
        batch = []
        for _ in range(min(batch_size, total_users - created)):
            user_id = fake.uuid4()
            plan = random.choice(plans)
            country_code = random.choice(countries)

            start_date = now - timedelta(days=random.randint(1, 365))
            days = plan.duration_days or 30
            end_date = start_date + timedelta(days=days)
            status = SubscriptionStatus.ACTIVE.value

            if created < expiring_soon:
                end_date = now + timedelta(days=random.randint(1, 7))
            elif created < expiring_soon + recently_canceled:
                status = SubscriptionStatus.CANCELED.value
            elif end_date < now:
                status = SubscriptionStatus.EXPIRED.value

            if country_code not in recommendations:
                try:
                    recommendations[country_code] = recommend_gateway(country_code)
                except RecommendationError:
                    recommendations[country_code] = None
            recommendation = recommendations[country_code]
            gateway = select_gateway(recommendation) if recommendation else None

            batch.append(UserSubscription(
                user_id=user_id,
                plan_id=plan.id,
                status=status,
                gateway_used=gateway,
                payment_type='pay_as_you_go' if plan.duration_days is None else 'recurring',
                start_date=start_date,
                end_date=end_date,
                auto_renew=status == SubscriptionStatus.ACTIVE.value,
            ))
            if gateway:
                fee = plan.calculate_processing_fee(plan.price)
                batch.append(Payment(
                    user_id=user_id,
                    plan_id=plan.id,
                    amount=plan.price + fee,
                    processing_fee=fee,
                    currency='USD',
                    gateway=gateway,
                    payment_method='card',
                    region=recommendation['region'],
                    country_code=country_code,
                    created_at=start_date,
                ))
            created += 1

        db.session.add_all(batch)
        db.session.commit()
        print(f"Progress: {created / total_users * 100:.2f}% - Created {created} subscriptions")

    return created


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create demo subscriptions and payments")
    parser.add_argument("--users", type=int, default=10_000, help="Number of users to create")
    parser.add_argument("--batch-size", type=int, default=1000, help="Rows committed per batch")
    args = parser.parse_args()

    app = create_app('development')
    with app.app_context():
        total = create_subscriptions_data(args.users, args.batch_size)
        print(f"\nDone. Created {total} subscriptions.")
