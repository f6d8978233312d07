"""
Integration tests for admin configuration endpoints.
"""
import pytest

from subscription_service.models.gateway_config import RegionGatewayConfig
from subscription_service.models.subscription_plan import SubscriptionPlan
from subscription_service.models.system_config import SystemConfig

SPLIT_CONFIG = {
    "gateway_type": "split_50_50",
    "stripe_enabled": True,
    "paddle_enabled": True,
    "split_percentage": 60,
    "recommendation_reason": "Compare conversion",
}


def test_list_gateway_configs(client, stripe_region, admin_headers):
    """Test configs include the countries of each region."""
    response = client.get("/api/admin/gateway-config", headers=admin_headers)
    data = response.get_json()

    assert response.status_code == 200
    assert len(data) == 1
    assert data[0]["region"] == "region_1"
    assert data[0]["countries"] == ["DE"]


def test_get_gateway_config(client, stripe_region, manager_headers):
    response = client.get("/api/admin/gateway-config/region_1", headers=manager_headers)

    assert response.status_code == 200
    assert response.get_json()["gateway_type"] == "stripe_only"


def test_get_missing_gateway_config(client, db, manager_headers):
    response = client.get("/api/admin/gateway-config/region_9", headers=manager_headers)

    assert response.status_code == 404
    assert response.get_json()["message"] == "Config not found for region"


def test_set_gateway_config_creates_and_replaces(client, db, stripe_region, admin_headers):
    """Test posting a config replaces the region's routing."""
    response = client.post("/api/admin/gateway-config/region_1", json=SPLIT_CONFIG, headers=admin_headers)
    data = response.get_json()

    assert response.status_code == 200
    assert data["gateway_type"] == "split_50_50"
    assert data["split_percentage"] == 60.0
    assert RegionGatewayConfig.query.count() == 1

    response = client.post("/api/admin/gateway-config/region_2", json=SPLIT_CONFIG, headers=admin_headers)
    assert response.status_code == 200
    assert RegionGatewayConfig.query.count() == 2


def test_set_gateway_config_validation(client, db, admin_headers):
    """Test a non-boolean flag is reported."""
    response = client.post(
        "/api/admin/gateway-config/EU",
        json={"gateway_type": "stripe", "stripe_enabled": True, "paddle_enabled": "yes"},
        headers=admin_headers,
    )

    assert response.status_code == 400
    assert response.get_json()["errors"] == ["paddle_enabled must be boolean"]
    assert RegionGatewayConfig.for_region("EU") is None


def test_gateway_config_requires_role(client, db, user_headers):
    assert client.get("/api/admin/gateway-config", headers=user_headers).status_code == 403


def test_processing_fee_defaults_to_zero(client, db, admin_headers):
    response = client.get("/api/admin/processing-fee", headers=admin_headers)

    assert response.status_code == 200
    assert response.get_json() == {"percentage": 0.0}


def test_set_processing_fee_manager_only(client, db, manager_headers, admin_headers):
    """Test only managers can change the global fee."""
    response = client.post("/api/admin/processing-fee", json={"percentage": 2.9}, headers=admin_headers)
    assert response.status_code == 403

    response = client.post("/api/admin/processing-fee", json={"percentage": 2.9}, headers=manager_headers)
    assert response.status_code == 200
    assert response.get_json() == {"message": "Processing fee updated", "percentage": 2.9}
    assert SystemConfig.get_processing_fee() == 2.9


def test_set_processing_fee_out_of_range(client, db, manager_headers):
    response = client.post("/api/admin/processing-fee", json={"percentage": 150}, headers=manager_headers)

    assert response.status_code == 400
    assert response.get_json()["message"] == "Invalid percentage (0-100)"


@pytest.mark.parametrize("gateway_type", [["stripe_only"], {"x": 1}, "stripe", "STRIPE_ONLY"])
def test_set_gateway_config_rejects_unknown_gateway_type(client, db, admin_headers, gateway_type):
    """Test only the known routing modes can be stored."""
    response = client.post(
        "/api/admin/gateway-config/EU",
        json={**SPLIT_CONFIG, "gateway_type": gateway_type},
        headers=admin_headers,
    )

    assert response.status_code == 400
    assert response.get_json()["errors"] == [
        "Gateway type must be one of: stripe_only, paddle_only, split_50_50"
    ]
    assert RegionGatewayConfig.for_region("EU") is None


def test_admin_plans_include_inactive(client, db, manager_headers):
    """Test the admin listing shows every plan, pay-as-you-go first then by period."""
    db.session.add_all([
        SubscriptionPlan(name="Yearly", price=100, duration="yearly", display_order=1),
        SubscriptionPlan(name="Retired", price=5, duration="monthly", display_order=2, is_active=False),
        SubscriptionPlan(name="Monthly", price=10, duration="monthly", display_order=1),
        SubscriptionPlan(name="Per election", price=2, duration="paygo", display_order=9),
    ])
    db.session.commit()

    response = client.get("/api/admin/plans", headers=manager_headers)
    data = response.get_json()

    assert response.status_code == 200
    assert data["count"] == 4
    assert [p["name"] for p in data["plans"]] == ["Per election", "Monthly", "Retired", "Yearly"]
    assert data["plans"][2]["is_active"] is False


def test_admin_plans_requires_role(client, db, user_headers):
    assert client.get("/api/admin/plans", headers=user_headers).status_code == 403
