"""
Routes for the full plan listing, regional gateway configuration and the
global processing fee.
"""
from flask import current_app
from flask_restx import Resource, fields, marshal

from subscription_service import db
from subscription_service.api.plans.routes import plan_model
from subscription_service.models.country_region import CountryRegion
from subscription_service.models.gateway_config import GatewayType, RegionGatewayConfig
from subscription_service.models.subscription_plan import SubscriptionPlan
from subscription_service.models.system_config import SystemConfig
from subscription_service.utils.auth import MANAGER, PLAN_ADMIN_ROLES, roles_required
from subscription_service.utils.json_helpers import json_body
from subscription_service.validation import ValidationError, validate_gateway_config
from subscription_service.validation.payloads import is_number

from . import admin_ns

gateway_config_model = admin_ns.model('RegionGatewayConfig', {
    'id': fields.Integer(description='Config ID'),
    'region': fields.String(description='Pricing region'),
    'gateway_type': fields.String(description='Routing mode', enum=GatewayType.values()),
    'stripe_enabled': fields.Boolean(description='Stripe may take payments'),
    'paddle_enabled': fields.Boolean(description='Paddle may take payments'),
    'split_percentage': fields.Float(description='Share routed to Stripe in split mode'),
    'recommendation_reason': fields.String(description='Text shown with the recommendation'),
    'countries': fields.List(fields.String, description='Countries mapped to the region'),
    'updated_at': fields.DateTime(description='Last update date'),
})

gateway_config_input_model = admin_ns.model('RegionGatewayConfigInput', {
    'gateway_type': fields.String(required=True, description='Routing mode', enum=GatewayType.values()),
    'stripe_enabled': fields.Boolean(required=True),
    'paddle_enabled': fields.Boolean(required=True),
    'split_percentage': fields.Float(description='Share routed to Stripe in split mode, 0-100'),
    'recommendation_reason': fields.String(description='Text shown with the recommendation'),
})

processing_fee_model = admin_ns.model('ProcessingFee', {
    'percentage': fields.Float(required=True, description='Processing fee percentage, 0-100'),
})


def _with_countries(config):
    """Attach the region's country codes for display."""
    config.countries = [mapping.country_code for mapping in CountryRegion.countries_in(config.region)]
    return config


def _plan_listing_order(plan):
    """Pay-as-you-go first, then shortest period, then display order."""
    return (plan.duration_days is not None, plan.duration_days or 0, plan.display_order or 0, plan.id)


@admin_ns.route('/plans')
class AdminPlanList(Resource):
    """Resource for listing every plan, inactive ones included"""

    @admin_ns.doc('list_all_plans')
    @admin_ns.response(200, 'All plans')
    @roles_required(*PLAN_ADMIN_ROLES)
    def get(self):
        """List all subscription plans, active or not (manager or admin)"""
        plans = sorted(SubscriptionPlan.query.all(), key=_plan_listing_order)
        return {'plans': marshal(plans, plan_model), 'count': len(plans)}


@admin_ns.route('/gateway-config')
class GatewayConfigList(Resource):
    """Resource for listing regional gateway configuration"""

    @admin_ns.doc('list_gateway_configs')
    @admin_ns.response(200, 'Configs', [gateway_config_model])
    @roles_required(*PLAN_ADMIN_ROLES)
    def get(self):
        """List the gateway configuration of every region (manager or admin)"""
        configs = RegionGatewayConfig.query.order_by(RegionGatewayConfig.region).all()
        return marshal([_with_countries(config) for config in configs], gateway_config_model)


@admin_ns.route('/gateway-config/<string:region_id>')
@admin_ns.param('region_id', 'Pricing region')
class GatewayConfigResource(Resource):
    """Resource for one region's gateway configuration"""

    @admin_ns.doc('get_gateway_config')
    @admin_ns.response(200, 'Config', gateway_config_model)
    @admin_ns.response(404, 'Config not found for region')
    @roles_required(*PLAN_ADMIN_ROLES)
    def get(self, region_id):
        """Get the gateway configuration of a region (manager or admin)"""
        config = RegionGatewayConfig.for_region(region_id)
        if config is None:
            admin_ns.abort(404, 'Config not found for region')
        return marshal(_with_countries(config), gateway_config_model)

    @admin_ns.doc('set_gateway_config')
    @admin_ns.expect(gateway_config_input_model)
    @admin_ns.response(200, 'Config saved', gateway_config_model)
    @admin_ns.response(400, 'Validation error')
    @roles_required(*PLAN_ADMIN_ROLES)
    def post(self, region_id):
        """Create or replace the gateway configuration of a region (manager or admin)"""
        data = json_body()
        if data is None:
            return {'message': 'Request body must be a JSON object'}, 400

        errors = validate_gateway_config(data, region_id.strip())
        if errors:
            return ValidationError(errors).to_response()

        if not (isinstance(data['gateway_type'], str) and data['gateway_type'] in GatewayType.values()):
            return ValidationError([
                f"Gateway type must be one of: {', '.join(GatewayType.values())}"
            ]).to_response()

        config = RegionGatewayConfig.upsert(region_id.strip(), data)
        db.session.commit()

        current_app.logger.info("Set gateway config for %s: %s", config.region, config.gateway_type)
        return marshal(_with_countries(config), gateway_config_model)


@admin_ns.route('/processing-fee')
class ProcessingFee(Resource):
    """Resource for the global processing fee"""

    @admin_ns.doc('get_processing_fee')
    @admin_ns.response(200, 'Processing fee', processing_fee_model)
    @roles_required(*PLAN_ADMIN_ROLES)
    def get(self):
        """Get the global processing fee percentage (manager or admin)"""
        return {'percentage': SystemConfig.get_processing_fee()}

    @admin_ns.doc('set_processing_fee')
    @admin_ns.expect(processing_fee_model)
    @admin_ns.response(200, 'Processing fee updated', processing_fee_model)
    @admin_ns.response(400, 'Invalid percentage (0-100)')
    @roles_required(MANAGER)
    def post(self):
        """Set the global processing fee percentage (manager only)"""
        data = json_body() or {}
        percentage = data.get('percentage')
        if not (is_number(percentage) and 0 <= percentage <= 100):
            return {'message': 'Invalid percentage (0-100)'}, 400

        SystemConfig.set_processing_fee(percentage)
        db.session.commit()

        current_app.logger.info("Processing fee set to %s%%", percentage)
        return {'message': 'Processing fee updated', 'percentage': percentage}
