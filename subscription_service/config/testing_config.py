"""
Testing environment configuration module.
"""
import os

from subscription_service.config.base_config import BaseConfig


class TestingConfig(BaseConfig):
    """Testing environment configuration class."""

    TESTING = True
    DEBUG = True

    # In-memory SQLite unless a real test database is provided
    SQLALCHEMY_DATABASE_URI = os.getenv("TEST_DATABASE_URI", "sqlite://")

    JWT_ACCESS_TOKEN_EXPIRES = 300  # 5 minutes
    # Use a predictable key for testing
    JWT_SECRET_KEY = "test-jwt-secret-key-for-testing-only-0123456789"
    PLAN_UPDATE_UNKNOWN_FIELDS = "reject"
