"""
Routes for subscription plans and their regional prices.
"""
from flask import current_app
from flask_restx import Resource, fields, marshal

from subscription_service import db
from subscription_service.models.regional_price import RegionalPrice
from subscription_service.models.subscription_plan import (
    PlanDuration,
    PlanType,
    ProcessingFeeType,
    SubscriptionPlan,
)
from subscription_service.utils.auth import PLAN_ADMIN_ROLES, roles_required
from subscription_service.utils.json_helpers import json_body
from subscription_service.validation import (
    EDITABLE_FIELDS,
    GENERAL_FIELDS,
    InvalidFieldError,
    PlanRequestError,
    ValidationError,
    filter_general_fields,
    route_editable_update,
    route_general_update,
    validate_editable_values,
    validate_plan_creation,
    validate_plan_update,
    validate_regional_prices,
)

from . import plan_ns

PROCESSING_FEE_FIELDS = (
    'processing_fee_mandatory',
    'processing_fee_fixed_amount',
    'processing_fee_type',
    'processing_fee_percentage',
)

# Define the subscription plan model for API
plan_model = plan_ns.model('SubscriptionPlan', {
    'id': fields.Integer(description='Plan ID'),
    'name': fields.String(required=True, description='Plan name'),
    'type': fields.String(required=True, description='Plan audience', enum=PlanType.values()),
    'price': fields.Float(required=True, description='Base price'),
    'duration': fields.String(required=True, description='Billing duration', enum=PlanDuration.values()),
    'duration_days': fields.Integer(description='Days in one billing period, empty for pay-as-you-go'),
    'description': fields.String(description='Plan description'),
    'what_included': fields.String(description='What the plan includes'),
    'what_excluded': fields.String(description='What the plan excludes'),
    'is_active': fields.Boolean(description='Whether the plan is offered', default=True),
    'display_order': fields.Integer(description='Display order', default=0),
    'max_elections': fields.Integer(description='Maximum number of elections'),
    'max_voters_per_election': fields.Integer(description='Maximum voters per election'),
    'processing_fee_enabled': fields.Boolean(description='Whether a processing fee applies'),
    'processing_fee_mandatory': fields.Boolean(description='Whether the processing fee is always charged'),
    'processing_fee_type': fields.String(description='Processing fee mode', enum=ProcessingFeeType.values()),
    'processing_fee_fixed_amount': fields.Float(description='Fixed processing fee'),
    'processing_fee_percentage': fields.Float(description='Percentage processing fee'),
    'created_at': fields.DateTime(description='Creation date'),
    'updated_at': fields.DateTime(description='Last update date'),
})

# Input model for creating plans
plan_input_model = plan_ns.model('PlanInput', {
    'name': fields.String(required=True, description='Plan name'),
    'price': fields.Float(required=True, description='Base price, greater than zero'),
    'duration': fields.String(required=True, description='Billing duration', enum=PlanDuration.values()),
    'type': fields.String(required=True, description='Plan audience', enum=PlanType.values()),
    'max_elections': fields.Integer(required=True, description='Maximum number of elections'),
    'max_voters_per_election': fields.Integer(required=True, description='Maximum voters per election'),
    'description': fields.String(description='Plan description'),
    'what_included': fields.String(description='What the plan includes'),
    'what_excluded': fields.String(description='What the plan excludes'),
    'display_order': fields.Integer(description='Display order', default=0),
    'processing_fee_enabled': fields.Boolean(description='Whether a processing fee applies', default=False),
    'processing_fee_mandatory': fields.Boolean(description='Whether the fee is always charged', default=False),
    'processing_fee_type': fields.String(description='Processing fee mode', enum=ProcessingFeeType.values()),
    'processing_fee_fixed_amount': fields.Float(description='Fixed processing fee'),
    'processing_fee_percentage': fields.Float(description='Percentage processing fee'),
})

# Input model for the general update endpoint
plan_update_model = plan_ns.model('PlanUpdate', {
    name: plan_input_model[name] for name in GENERAL_FIELDS if name in plan_input_model
} | {
    'is_active': fields.Boolean(description='Whether the plan is offered'),
})

# Input model for the editable-fields endpoint
editable_fields_model = plan_ns.model('PlanEditableFields', {
    name: plan_input_model[name] for name in EDITABLE_FIELDS
})

regional_price_model = plan_ns.model('RegionalPrice', {
    'id': fields.Integer(description='Regional price ID'),
    'plan_id': fields.Integer(description='Plan ID'),
    'region': fields.String(description='Region code'),
    'price': fields.Float(description='Price in the region'),
    'currency': fields.String(description='Currency code'),
    'updated_at': fields.DateTime(description='Last update date'),
})

regional_prices_input_model = plan_ns.model('RegionalPricesInput', {
    'prices': fields.Raw(
        required=True,
        description='Region code mapped to a price or to {"price": ..., "currency": ...}',
        example={'region_1': 10, 'region_4': {'price': 4.5, 'currency': 'USD'}},
    ),
})


def _bad_body():
    return {'message': 'Request body must be a JSON object'}, 400


@plan_ns.route('/')
class SubscriptionPlanList(Resource):
    """Resource for listing and creating subscription plans"""

    @plan_ns.doc('list_plans')
    @plan_ns.response(200, 'Active plans', [plan_model])
    def get(self):
        """List active subscription plans in display order"""
        plans = (SubscriptionPlan.query
                 .filter_by(is_active=True)
                 .order_by(SubscriptionPlan.display_order, SubscriptionPlan.id)
                 .all())
        return marshal(plans, plan_model)

    @plan_ns.doc('create_plan')
    @plan_ns.expect(plan_input_model)
    @plan_ns.response(201, 'Plan created', plan_model)
    @plan_ns.response(400, 'Validation error')
    @roles_required(*PLAN_ADMIN_ROLES)
    def post(self):
        """Create a new subscription plan (manager or admin)"""
        data = json_body()
        if data is None:
            return _bad_body()

        fee_fields = {name: data[name] for name in PROCESSING_FEE_FIELDS if name in data}
        extra_fields = {name: data[name] for name in ('description', 'what_included', 'what_excluded',
                                                      'display_order', 'processing_fee_enabled')
                        if name in data}
        errors = (validate_plan_creation(data)
                  + validate_editable_values(fee_fields)
                  + validate_plan_update(extra_fields))
        if errors:
            return ValidationError(errors).to_response()

        plan = SubscriptionPlan(
            name=data['name'].strip(),
            type=data['type'],
            price=data['price'],
            duration=data['duration'],
            max_elections=data['max_elections'],
            max_voters_per_election=data['max_voters_per_election'],
            is_active=True,
        )
        plan.apply_fields(fee_fields)
        plan.apply_fields(extra_fields)

        db.session.add(plan)
        db.session.commit()

        current_app.logger.info("Created subscription plan %s (%s)", plan.id, plan.name)
        return marshal(plan, plan_model), 201


@plan_ns.route('/<int:id>')
@plan_ns.param('id', 'The subscription plan identifier')
class SubscriptionPlanResource(Resource):
    """Resource for individual subscription plan operations"""

    @plan_ns.doc('get_plan')
    @plan_ns.response(200, 'Plan', plan_model)
    @plan_ns.response(404, 'Plan not found')
    def get(self, id):
        """Get a specific subscription plan"""
        plan = db.get_or_404(SubscriptionPlan, id, description='Plan not found')
        return marshal(plan, plan_model)

    @plan_ns.doc('update_plan')
    @plan_ns.expect(plan_update_model)
    @plan_ns.response(200, 'Plan updated', plan_model)
    @plan_ns.response(400, 'Editable fields submitted, unsupported fields or invalid values')
    @plan_ns.response(404, 'Plan not found')
    @roles_required(*PLAN_ADMIN_ROLES)
    def put(self, id):
        """Update general plan attributes (manager or admin)"""
        data = json_body()
        if data is None:
            return _bad_body()

        try:
            route_general_update(data)
            fields_to_set, ignored = filter_general_fields(
                data, current_app.config['PLAN_UPDATE_UNKNOWN_FIELDS']
            )
        except PlanRequestError as e:
            current_app.logger.warning("Rejected update of plan %s: %s", id, e.message)
            return e.to_response()

        if ignored:
            current_app.logger.warning("Ignoring unsupported fields for plan %s: %s", id, ', '.join(ignored))
        if not fields_to_set:
            return {'message': 'No valid fields provided for update'}, 400

        errors = validate_plan_update(fields_to_set)
        if errors:
            return ValidationError(errors).to_response()

        plan = db.get_or_404(SubscriptionPlan, id, description='Plan not found')
        if 'name' in fields_to_set:
            fields_to_set['name'] = fields_to_set['name'].strip()
        plan.apply_fields(fields_to_set)
        db.session.commit()

        current_app.logger.info("Updated plan %s fields: %s", plan.id, ', '.join(fields_to_set))
        return marshal(plan, plan_model)


@plan_ns.route('/<int:id>/editable-fields')
@plan_ns.param('id', 'The subscription plan identifier')
class SubscriptionPlanEditableFields(Resource):
    """Resource for the billing and capacity knobs of a plan"""

    @plan_ns.doc('update_plan_editable_fields')
    @plan_ns.expect(editable_fields_model)
    @plan_ns.response(200, 'Editable fields updated', plan_model)
    @plan_ns.response(400, 'Fields outside the editable set or invalid values')
    @plan_ns.response(404, 'Plan not found')
    @roles_required(*PLAN_ADMIN_ROLES)
    def put(self, id):
        """Update only the editable fields of a plan (manager or admin)"""
        data = json_body()
        if data is None:
            return _bad_body()

        try:
            fields_to_set = route_editable_update(data)
        except InvalidFieldError as e:
            current_app.logger.warning("Rejected editable update of plan %s: %s", id, e.message)
            return e.to_response()

        if not fields_to_set:
            return {'message': 'No valid fields provided for update'}, 400

        errors = validate_editable_values(fields_to_set)
        if errors:
            return ValidationError(errors).to_response()

        plan = db.get_or_404(SubscriptionPlan, id, description='Plan not found')
        plan.apply_fields(fields_to_set)
        db.session.commit()

        current_app.logger.info("Updated plan %s editable fields: %s", plan.id, ', '.join(fields_to_set))
        return marshal(plan, plan_model)


@plan_ns.route('/<int:id>/regional-prices')
@plan_ns.param('id', 'The subscription plan identifier')
class SubscriptionPlanRegionalPrices(Resource):
    """Resource for per-region prices of a plan"""

    @plan_ns.doc('get_plan_regional_prices')
    @plan_ns.response(200, 'Regional prices', [regional_price_model])
    @plan_ns.response(404, 'Plan not found')
    def get(self, id):
        """List the regional prices of a plan"""
        db.get_or_404(SubscriptionPlan, id, description='Plan not found')
        return marshal(RegionalPrice.for_plan(id), regional_price_model)

    @plan_ns.doc('set_plan_regional_prices')
    @plan_ns.expect(regional_prices_input_model)
    @plan_ns.response(200, 'Regional prices updated')
    @plan_ns.response(400, 'Validation error')
    @plan_ns.response(404, 'Plan not found')
    @roles_required(*PLAN_ADMIN_ROLES)
    def post(self, id):
        """Create or replace regional prices in one transaction (manager or admin)"""
        data = json_body()
        if data is None:
            return _bad_body()

        prices = data.get('prices')
        errors = validate_regional_prices(prices)
        if errors:
            return ValidationError(errors).to_response()

        db.get_or_404(SubscriptionPlan, id, description='Plan not found')
        default_currency = current_app.config.get('DEFAULT_CURRENCY', 'USD')

        rows = []
        for region, entry in prices.items():
            if isinstance(entry, dict):
                price, currency = entry['price'], entry.get('currency') or default_currency
            else:
                price, currency = entry, default_currency
            rows.append(RegionalPrice.upsert(id, region, price, currency.upper()))
        db.session.commit()

        current_app.logger.info("Set %d regional prices for plan %s", len(rows), id)
        return {
            'message': 'Regional prices updated',
            'prices': marshal(RegionalPrice.for_plan(id), regional_price_model),
        }
