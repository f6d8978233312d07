"""
Test configuration module.
"""
import pytest

from subscription_service import create_app
from subscription_service.config.testing_config import TestingConfig
from subscription_service.validation import UnknownFieldPolicy


def test_development_config():
    """Test development configuration."""
    app = create_app('development')
    assert app.config['DEBUG'] is True
    assert app.config['TESTING'] is False
    assert app.config['LOG_LEVEL'] == 'DEBUG'


def test_testing_config():
    """Test testing configuration."""
    app = create_app('testing')
    assert app.config['DEBUG'] is True
    assert app.config['TESTING'] is True
    assert app.config['PLAN_UPDATE_UNKNOWN_FIELDS'] is UnknownFieldPolicy.REJECT
    assert app.config['JWT_ERROR_MESSAGE_KEY'] == 'message'


def test_production_config():
    """Test production configuration."""
    app = create_app('production')
    assert app.config['DEBUG'] is False
    assert app.config['TESTING'] is False
    assert app.config['SESSION_COOKIE_SECURE'] is True


def test_unknown_config_name_falls_back_to_development():
    """Test an unknown configuration name loads development settings."""
    app = create_app('staging')
    assert app.config['DEBUG'] is True
    assert app.config['TESTING'] is False


@pytest.mark.parametrize("value, expected", [
    ("Reject", UnknownFieldPolicy.REJECT),
    (" IGNORE ", UnknownFieldPolicy.IGNORE),
    ("ignore", UnknownFieldPolicy.IGNORE),
])
def test_unknown_field_policy_parsed_at_startup(monkeypatch, value, expected):
    """Test the plan update policy is read case-insensitively when the app is built."""
    monkeypatch.setattr(TestingConfig, "PLAN_UPDATE_UNKNOWN_FIELDS", value)

    app = create_app('testing')

    assert app.config['PLAN_UPDATE_UNKNOWN_FIELDS'] is expected


def test_misspelled_unknown_field_policy_fails_at_startup(monkeypatch):
    """Test a bad policy name stops the app from being built."""
    monkeypatch.setattr(TestingConfig, "PLAN_UPDATE_UNKNOWN_FIELDS", "drop")

    with pytest.raises(ValueError):
        create_app('testing')
