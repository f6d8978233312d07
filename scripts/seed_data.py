#!/usr/bin/env python
"""
Seed sample plans, country mappings and regional gateway configuration.
"""
from subscription_service import create_app, db
from subscription_service.models import (
    CountryRegion,
    GatewayType,
    RegionGatewayConfig,
    SubscriptionPlan,
)

SAMPLE_PLANS = [
    {
        'name': 'Pay As You Go', 'type': 'individual', 'price': 1.00, 'duration': 'paygo',
        'max_elections': 1, 'max_voters_per_election': 100, 'display_order': 0,
        'processing_fee_enabled': True, 'processing_fee_mandatory': True,
        'processing_fee_type': 'percentage', 'processing_fee_percentage': 5,
    },
    {
        'name': 'Individual Monthly', 'type': 'individual', 'price': 9.99, 'duration': 'monthly',
        'max_elections': 5, 'max_voters_per_election': 500, 'display_order': 1,
    },
    {
        'name': 'Individual Yearly', 'type': 'individual', 'price': 99.00, 'duration': 'yearly',
        'max_elections': 60, 'max_voters_per_election': 500, 'display_order': 2,
    },
    {
        'name': 'Organization 6 Months', 'type': 'organization', 'price': 249.00, 'duration': '6months',
        'max_elections': 100, 'max_voters_per_election': 10000, 'display_order': 3,
        'processing_fee_enabled': True, 'processing_fee_mandatory': True,
        'processing_fee_type': 'fixed', 'processing_fee_fixed_amount': 2.50,
    },
]

# (country_code, country_name, region)
SAMPLE_COUNTRIES = [
    ('US', 'United States', 'region_1'),
    ('CA', 'Canada', 'region_1'),
    ('DE', 'Germany', 'region_2'),
    ('FR', 'France', 'region_2'),
    ('PL', 'Poland', 'region_3'),
    ('NG', 'Nigeria', 'region_4'),
    ('KE', 'Kenya', 'region_4'),
    ('BR', 'Brazil', 'region_5'),
    ('IN', 'India', 'region_6'),
    ('AU', 'Australia', 'region_7'),
    ('HK', 'Hong Kong', 'region_8'),
]

# region -> (gateway_type, stripe_enabled, paddle_enabled, split_percentage, reason)
SAMPLE_GATEWAYS = {
    'region_1': (GatewayType.STRIPE_ONLY.value, True, False, None, 'Best card coverage in North America'),
    'region_2': (GatewayType.SPLIT_50_50.value, True, True, 50, 'Both gateways handle EU VAT'),
    'region_3': (GatewayType.PADDLE_ONLY.value, False, True, None, 'Merchant of record handles local tax'),
    'region_4': (GatewayType.PADDLE_ONLY.value, False, True, None, 'Wider local card acceptance'),
    'region_5': (GatewayType.SPLIT_50_50.value, True, True, 50, 'Both gateways support local cards'),
    'region_6': (GatewayType.STRIPE_ONLY.value, True, False, None, 'Supports local wallets'),
    'region_7': (GatewayType.STRIPE_ONLY.value, True, False, None, 'Best card coverage in Australasia'),
    'region_8': (GatewayType.PADDLE_ONLY.value, False, True, None, 'Merchant of record handles local tax'),
}


def seed_plans():
    """Create sample plans that don't already exist."""
    existing = {plan.name for plan in SubscriptionPlan.query.all()}
    created = 0
    for values in SAMPLE_PLANS:
        if values['name'] in existing:
            continue
        plan = SubscriptionPlan(is_active=True)
        plan.apply_fields(values)
        db.session.add(plan)
        created += 1
    return created


def seed_countries():
    for country_code, country_name, region in SAMPLE_COUNTRIES:
        CountryRegion.upsert(country_code, country_name, region)
    return len(SAMPLE_COUNTRIES)


def seed_gateways():
    for region, (gateway_type, stripe, paddle, split, reason) in SAMPLE_GATEWAYS.items():
        RegionGatewayConfig.upsert(region, {
            'gateway_type': gateway_type,
            'stripe_enabled': stripe,
            'paddle_enabled': paddle,
            'split_percentage': split,
            'recommendation_reason': reason,
        })
    return len(SAMPLE_GATEWAYS)


if __name__ == "__main__":
    app = create_app()
    with app.app_context():
        plans = seed_plans()
        countries = seed_countries()
        gateways = seed_gateways()
        db.session.commit()
        print(f"Created {plans} plans, mapped {countries} countries, configured {gateways} regions.")
