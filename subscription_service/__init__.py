"""
Subscription Plan Service Application Factory.
"""
import importlib
import logging
import os

from dotenv import load_dotenv
from flask import Flask, jsonify
from flask_jwt_extended import JWTManager
from flask_migrate import Migrate
from flask_restx import Api
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

# Initialize extensions
db = SQLAlchemy()
jwt = JWTManager()
migrate = Migrate()

CONFIG_MAPPING = {
    'development': ('subscription_service.config.development_config', 'DevelopmentConfig'),
    'testing': ('subscription_service.config.testing_config', 'TestingConfig'),
    'production': ('subscription_service.config.production_config', 'ProductionConfig'),
}


def create_app(config_name=None):
    """
    Application Factory Pattern implementation.

    Args:
        config_name: Configuration name to use (development, testing, production).

    Returns:
        Flask application instance.
    """
    load_dotenv()

    app = Flask(__name__)

    app_config = config_name or os.getenv("FLASK_ENV", "development")
    if app_config not in CONFIG_MAPPING:
        app_config = 'development'

    module_path, class_name = CONFIG_MAPPING[app_config]
    config_module = importlib.import_module(module_path)
    app.config.from_object(getattr(config_module, class_name))

    app.logger.setLevel(app.config.get('LOG_LEVEL', logging.INFO))
    app.logger.info("Loaded configuration class: %s", class_name)

    # A misspelled policy fails here rather than on the first plan update
    from subscription_service.validation.plan_fields import parse_unknown_field_policy
    app.config['PLAN_UPDATE_UNKNOWN_FIELDS'] = parse_unknown_field_policy(
        app.config.get('PLAN_UPDATE_UNKNOWN_FIELDS', 'reject')
    )

    # Initialize extensions with app
    db.init_app(app)
    jwt.init_app(app)
    migrate.init_app(app, db)

    # Import models to ensure they're registered with SQLAlchemy
    from subscription_service import models  # noqa: F401

    api = Api(
        app,
        version=app.config.get("API_VERSION", "1.0"),
        title=app.config.get("API_TITLE", "Subscription Plan Service"),
        description=app.config.get("API_DESCRIPTION", "Subscription plans, regional pricing and gateway configuration"),
        doc="/api/docs",
        authorizations={
            'Bearer Auth': {
                'type': 'apiKey',
                'in': 'header',
                'name': 'Authorization',
                'description': 'Enter: **Bearer &lt;JWT&gt;**'
            },
        },
        security='Bearer Auth'
    )

    @api.errorhandler(SQLAlchemyError)
    def handle_database_error(error):
        """Persistence failures are never reported as validation problems."""
        db.session.rollback()
        app.logger.exception("Database error: %s", error)
        return {'message': 'Service temporarily unavailable'}, 503

    from subscription_service.api.admin import admin_ns
    from subscription_service.api.payments import payment_ns
    from subscription_service.api.plans import plan_ns
    from subscription_service.api.regions import region_ns
    from subscription_service.api.subscriptions import subscription_ns

    api.add_namespace(plan_ns, path='/api/plans')
    api.add_namespace(subscription_ns, path='/api/subscriptions')
    api.add_namespace(payment_ns, path='/api/payments')
    api.add_namespace(region_ns, path='/api/country-region')
    api.add_namespace(admin_ns, path='/api/admin')

    @app.route('/health')
    def health_check():
        """Health check endpoint to verify the application is running."""
        return jsonify({
            'status': 'healthy',
            'environment': app_config,
            'database_connected': _check_db_connection()
        })

    def _check_db_connection():
        """Check if the database connection is working."""
        try:
            db.session.execute(text('SELECT 1'))
            return True
        except SQLAlchemyError as e:
            app.logger.warning("Database connection error: %s", e)
            return False

    @app.shell_context_processor
    def shell_context():
        return {"app": app, "db": db}

    return app
