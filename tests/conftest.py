"""
Pytest configuration and fixtures.
"""
import pytest
from flask_jwt_extended import create_access_token

from subscription_service import create_app
from subscription_service.models.country_region import CountryRegion
from subscription_service.models.gateway_config import GatewayType, RegionGatewayConfig
from subscription_service.models.subscription_plan import SubscriptionPlan


@pytest.fixture(scope="function")
def app():
    """
    Create a Flask application configured for testing.

    Every test gets a fresh in-memory database.

    Returns:
        Flask: The Flask application instance.
    """
    app = create_app('testing')

    with app.app_context():
        from subscription_service import db

        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture(scope="function")
def client(app):
    """
    Create a test client for the Flask application.

    Args:
        app: The Flask application fixture.

    Returns:
        FlaskClient: A test client for the Flask application.
    """
    return app.test_client()


@pytest.fixture(scope="function")
def db(app):
    """
    Fixture for the SQLAlchemy database object.

    Args:
        app: The Flask application fixture.

    Returns:
        SQLAlchemy db: The database object for testing.
    """
    from subscription_service import db as _db
    return _db


def _token(identity, role):
    return create_access_token(identity=identity, additional_claims={"role": role})


@pytest.fixture
def admin_headers(app):
    """Authorization header for an admin."""
    return {"Authorization": f"Bearer {_token('admin-1', 'admin')}"}


@pytest.fixture
def manager_headers(app):
    """Authorization header for a manager."""
    return {"Authorization": f"Bearer {_token('manager-1', 'manager')}"}


@pytest.fixture
def user_headers(app):
    """Authorization header for a regular voter account."""
    return {"Authorization": f"Bearer {_token('user-1', 'user')}"}


@pytest.fixture
def plan(db):
    """A plan with a percentage processing fee."""
    plan = SubscriptionPlan(
        name="Gold",
        type="individual",
        price=10,
        duration="monthly",
        max_elections=5,
        max_voters_per_election=100,
        display_order=1,
        processing_fee_enabled=True,
        processing_fee_mandatory=True,
        processing_fee_type="percentage",
        processing_fee_percentage=10,
    )
    db.session.add(plan)
    db.session.commit()
    return plan


@pytest.fixture
def stripe_region(db):
    """Germany mapped to a Stripe-only region."""
    db.session.add(CountryRegion(country_code="DE", country_name="Germany", region="region_1"))
    db.session.add(RegionGatewayConfig(
        region="region_1",
        gateway_type=GatewayType.STRIPE_ONLY.value,
        stripe_enabled=True,
        paddle_enabled=False,
        recommendation_reason="Best local coverage",
    ))
    db.session.commit()
    return "region_1"
