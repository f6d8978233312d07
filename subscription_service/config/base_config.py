"""
Base configuration module with common settings.
"""
import os


class BaseConfig:
    """Base configuration class with common settings."""

    # Flask settings
    SECRET_KEY = os.getenv("SECRET_KEY", "default-dev-key-not-for-production")
    DEBUG = False
    TESTING = False
    # Let flask-jwt-extended errors reach their handlers through Flask-RESTX
    PROPAGATE_EXCEPTIONS = True
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    RESTX_ERROR_404_HELP = False

    # Database settings
    DB_ENGINE = os.getenv("DB_ENGINE", "mysql+pymysql")
    DB_USER = os.getenv("DB_USER", "user")
    DB_PASSWORD = os.getenv("DB_PASSWORD", "password")
    DB_HOST = os.getenv("DB_HOST", "localhost")
    DB_PORT = os.getenv("DB_PORT", "3306")
    DB_NAME = os.getenv("DB_NAME", "subscription_db")

    SQLALCHEMY_DATABASE_URI = os.getenv(
        "SQLALCHEMY_DATABASE_URI",
        f"{DB_ENGINE}://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}",
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # JWT settings
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "default-jwt-key-not-for-production")
    JWT_ACCESS_TOKEN_EXPIRES = int(os.getenv("JWT_ACCESS_TOKEN_EXPIRES", 3600))  # 1 hour
    JWT_ERROR_MESSAGE_KEY = "message"
    JWT_ROLE_CLAIM = os.getenv("JWT_ROLE_CLAIM", "role")

    # Plan update policy for fields the general update endpoint does not know:
    # "reject" fails the request, "ignore" drops them.
    PLAN_UPDATE_UNKNOWN_FIELDS = os.getenv("PLAN_UPDATE_UNKNOWN_FIELDS", "reject")

    DEFAULT_CURRENCY = os.getenv("DEFAULT_CURRENCY", "USD")

    # API settings
    API_TITLE = "Subscription Plan Service"
    API_VERSION = "1.0"
    API_DESCRIPTION = "Subscription plans, regional pricing and payment gateway configuration"
    API_PREFIX = "/api"
