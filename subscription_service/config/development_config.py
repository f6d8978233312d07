"""
Development environment configuration module.
"""
import os

from subscription_service.config.base_config import BaseConfig


class DevelopmentConfig(BaseConfig):
    """Development environment configuration class."""

    DEBUG = True
    SQLALCHEMY_ECHO = True  # Log SQL queries
    LOG_LEVEL = "DEBUG"

    DB_NAME = "subscription_dev_db"
    SQLALCHEMY_DATABASE_URI = os.getenv(
        "DEV_DATABASE_URI", "mysql+pymysql://user:password@db:3306/subscription_dev_db"
    )

    JWT_ACCESS_TOKEN_EXPIRES = 86400  # 24 hours for easier development
