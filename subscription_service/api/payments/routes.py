"""
Routes for gateway recommendations and payments.
"""
from decimal import Decimal

from flask import current_app, request
from flask_jwt_extended import jwt_required
from flask_restx import Resource, fields, marshal

from subscription_service import db
from subscription_service.models.payment import Payment, PaymentStatus
from subscription_service.models.usage_record import UsageRecord, UsageStatus
from subscription_service.models.subscription_plan import SubscriptionPlan
from subscription_service.services.gateway_recommendation import (
    RecommendationError,
    available_payment_methods,
    recommend_gateway,
    select_gateway,
    supports_payment_method,
)
from subscription_service.services.usage_tracking import track_usage, unpaid_usage
from subscription_service.utils.auth import current_user_id
from subscription_service.utils.json_helpers import json_body
from subscription_service.validation import (
    ValidationError,
    validate_payment_submission,
    validate_usage_submission,
)

from . import payment_ns

# Largest id a MySQL INT primary key can hold
MAX_ROW_ID = 2 ** 31 - 1

gateway_option_model = payment_ns.model('GatewayOption', {
    'gateway': fields.String(description='stripe or paddle'),
    'reason': fields.String(description='Why the gateway is offered'),
    'recommended': fields.Boolean(),
    'split': fields.Boolean(description='Whether payments are split between gateways'),
    'split_percentage': fields.Float(description='Share routed to Stripe'),
    'payment_methods': fields.List(fields.Raw, description='Supported payment methods'),
})

recommendation_model = payment_ns.model('GatewayRecommendation', {
    'country_code': fields.String(),
    'country_name': fields.String(),
    'region': fields.String(),
    'gateway_type': fields.String(),
    'stripe_enabled': fields.Boolean(),
    'paddle_enabled': fields.Boolean(),
    'split_percentage': fields.Float(),
    'recommendation_reason': fields.String(),
    'regional_price': fields.Float(),
    'currency': fields.String(),
    'available_gateways': fields.List(fields.Nested(gateway_option_model)),
})

payment_input_model = payment_ns.model('PaymentInput', {
    'amount': fields.Float(required=True, description='Amount before processing fee'),
    'currency': fields.String(required=True, description='Currency code'),
    'country_code': fields.String(required=True, description='Payer country'),
    'planId': fields.Integer(required=True, description='Plan being paid for'),
    'payment_method': fields.String(description='Payment method',
                                    enum=['card', 'paypal', 'google_pay', 'apple_pay']),
})

payment_model = payment_ns.model('Payment', {
    'id': fields.Integer(description='Payment ID'),
    'user_id': fields.String(description='User ID'),
    'plan_id': fields.Integer(description='Plan ID'),
    'amount': fields.Float(description='Total amount, processing fee included'),
    'processing_fee': fields.Float(description='Processing fee part of the amount'),
    'currency': fields.String(description='Currency code'),
    'gateway': fields.String(description='Gateway the payment is routed to'),
    'payment_method': fields.String(description='Payment method'),
    'region': fields.String(description='Pricing region'),
    'country_code': fields.String(description='Payer country'),
    'status': fields.String(description='Payment status', enum=PaymentStatus.values()),
    'external_payment_id': fields.String(description='Identifier at the gateway'),
    'created_at': fields.DateTime(description='Creation date'),
})


def _as_plan_id(value):
    """Plan id from an int or a string of digits; None for any other shape."""
    if isinstance(value, str) and value.strip().isdecimal():
        value = int(value.strip())
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    if not 0 < value <= MAX_ROW_ID:
        return None
    return value


@payment_ns.route('/gateway-recommendation')
class GatewayRecommendation(Resource):
    """Resource for recommending a payment gateway by country"""

    @payment_ns.doc('get_gateway_recommendation', params={
        'country_code': {'type': 'string', 'description': 'ISO country code', 'required': True},
        'plan_id': {'type': 'integer', 'description': 'Plan to include the regional price of'},
    })
    @payment_ns.response(200, 'Recommendation', recommendation_model)
    @payment_ns.response(400, 'Country code required')
    @payment_ns.response(404, 'Country or gateway config not found')
    def get(self):
        """Recommend payment gateways for a country"""
        country_code = request.args.get('country_code', '').strip()
        if not country_code:
            return {'message': 'Country code required'}, 400

        try:
            recommendation = recommend_gateway(
                country_code,
                plan_id=request.args.get('plan_id', type=int),
                default_currency=current_app.config.get('DEFAULT_CURRENCY', 'USD'),
            )
        except RecommendationError as e:
            payment_ns.abort(404, str(e))

        for option in recommendation['available_gateways']:
            option['payment_methods'] = available_payment_methods(option['gateway'])
        return marshal(recommendation, recommendation_model)


@payment_ns.route('/')
class PaymentList(Resource):
    """Resource for starting payments"""

    @payment_ns.doc('create_payment')
    @payment_ns.expect(payment_input_model)
    @payment_ns.response(201, 'Payment recorded', payment_model)
    @payment_ns.response(400, 'Validation error or no gateway available')
    @payment_ns.response(404, 'Plan or country not found')
    @jwt_required()
    def post(self):
        """Record a pending payment for a plan, priced for the payer's region"""
        data = json_body()
        if data is None:
            return {'message': 'Request body must be a JSON object'}, 400

        errors = validate_payment_submission(data)
        if errors:
            return ValidationError(errors).to_response()

        plan_id = _as_plan_id(data['planId'])
        if plan_id is None:
            return ValidationError(['Plan ID must be an integer']).to_response()
        if len(data['currency'].strip()) != 3:
            return ValidationError(['currency must be a three-letter code']).to_response()

        plan = db.get_or_404(SubscriptionPlan, plan_id, description='Plan not found')

        try:
            recommendation = recommend_gateway(
                data['country_code'], plan_id=plan.id, default_currency=data['currency'].strip().upper()
            )
        except RecommendationError as e:
            payment_ns.abort(404, str(e))

        gateway = select_gateway(recommendation)
        if gateway is None:
            return {'message': 'No payment gateway available for your region'}, 400

        payment_method = data.get('payment_method')
        if payment_method and not supports_payment_method(gateway, payment_method):
            return {'message': f'Payment method {payment_method} is not supported by {gateway}'}, 400

        if recommendation['regional_price'] is not None:
            base_amount = Decimal(str(recommendation['regional_price']))
            currency = recommendation['currency']
        else:
            base_amount = Decimal(str(data['amount']))
            currency = data['currency'].strip().upper()
        processing_fee = plan.calculate_processing_fee(base_amount)

        payment = Payment(
            user_id=current_user_id(),
            plan_id=plan.id,
            amount=base_amount + processing_fee,
            processing_fee=processing_fee,
            currency=currency,
            gateway=gateway,
            payment_method=payment_method,
            region=recommendation['region'],
            country_code=recommendation['country_code'],
            status=PaymentStatus.PENDING.value,
        )
        db.session.add(payment)
        db.session.commit()

        current_app.logger.info(
            "Recorded payment %s for user %s: %s %s via %s",
            payment.id, payment.user_id, payment.amount, payment.currency, payment.gateway,
        )
        return marshal(payment, payment_model), 201


@payment_ns.route('/user')
class UserPayments(Resource):
    """Resource for the caller's payments"""

    @payment_ns.doc('get_user_payments', params={
        'limit': {'type': 'integer', 'default': 20, 'description': 'Maximum number of entries'},
        'offset': {'type': 'integer', 'default': 0, 'description': 'Entries to skip'},
    })
    @payment_ns.response(200, 'Payments', [payment_model])
    @jwt_required()
    def get(self):
        """List the current user's payments, newest first"""
        limit = max(min(request.args.get('limit', 20, type=int), 100), 1)
        offset = max(request.args.get('offset', 0, type=int), 0)
        return marshal(Payment.for_user(current_user_id(), limit=limit, offset=offset), payment_model)


usage_model = payment_ns.model('UsageRecord', {
    'id': fields.Integer(description='Usage record ID'),
    'user_id': fields.String(description='User ID'),
    'plan_id': fields.Integer(description='Plan the usage is billed under'),
    'election_id': fields.String(description='Election the usage belongs to'),
    'usage_type': fields.String(description='What was used'),
    'quantity': fields.Integer(description='Units used'),
    'price_per_unit': fields.Float(description='Price of one unit'),
    'total_amount': fields.Float(description='Amount owed for this usage'),
    'status': fields.String(description='Billing state', enum=UsageStatus.values()),
    'payment_id': fields.Integer(description='Payment that settled the usage'),
    'payment_status': fields.String(attribute=lambda u: u.payment.status if u.payment else None,
                                    description='Status of the settling payment'),
    'external_payment_id': fields.String(attribute=lambda u: u.payment.external_payment_id if u.payment else None,
                                         description='Settling payment at the gateway'),
    'paid_at': fields.DateTime(description='When the usage was settled'),
    'created_at': fields.DateTime(description='When the usage happened'),
})

usage_input_model = payment_ns.model('UsageInput', {
    'election_id': fields.String(description='Election the usage belongs to'),
    'usage_type': fields.String(description='What was used', default='election_created'),
    'quantity': fields.Integer(description='Units used', default=1),
})

unpaid_usage_model = payment_ns.model('UnpaidUsage', {
    'items': fields.List(fields.Nested(usage_model)),
    'total': fields.Float(description='Total owed'),
    'count': fields.Integer(description='Number of pending records'),
})


@payment_ns.route('/track-usage')
class TrackUsage(Resource):
    """Resource for recording pay-as-you-go usage"""

    @payment_ns.doc('track_usage')
    @payment_ns.expect(usage_input_model)
    @payment_ns.response(201, 'Usage tracked')
    @payment_ns.response(200, 'User is billed per period, nothing tracked')
    @payment_ns.response(400, 'Validation error')
    @jwt_required()
    def post(self):
        """Record a billable use for the current user when on a pay-as-you-go plan"""
        data = json_body()
        if data is None:
            return {'message': 'Request body must be a JSON object'}, 400

        errors = validate_usage_submission(data)
        if errors:
            return ValidationError(errors).to_response()

        record = track_usage(
            current_user_id(),
            election_id=data.get('election_id'),
            usage_type=data.get('usage_type', 'election_created').strip(),
            quantity=int(data.get('quantity', 1)),
        )
        if record is None:
            return {'message': 'User is on subscription plan, no usage tracking needed', 'usage': None}

        db.session.commit()
        current_app.logger.info(
            "Tracked usage for user %s: %s x%s = %s", record.user_id, record.usage_type,
            record.quantity, record.total_amount,
        )
        return {'message': 'Usage tracked successfully', 'usage': marshal(record, usage_model)}, 201


@payment_ns.route('/unpaid-usage')
class UnpaidUsage(Resource):
    """Resource for the caller's unbilled usage"""

    @payment_ns.doc('get_unpaid_usage')
    @payment_ns.response(200, 'Unpaid usage', unpaid_usage_model)
    @jwt_required()
    def get(self):
        """List the current user's pending usage with its total"""
        return marshal(unpaid_usage(current_user_id()), unpaid_usage_model)


@payment_ns.route('/usage-history')
class UsageHistory(Resource):
    """Resource for the caller's usage history"""

    @payment_ns.doc('get_usage_history', params={
        'limit': {'type': 'integer', 'default': 50, 'description': 'Maximum number of entries'},
    })
    @payment_ns.response(200, 'Usage history', [usage_model])
    @jwt_required()
    def get(self):
        """List the current user's usage, newest first"""
        limit = max(min(request.args.get('limit', 50, type=int), 100), 1)
        return marshal(UsageRecord.history_for_user(current_user_id(), limit=limit), usage_model)
