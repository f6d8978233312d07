"""
Routes for the current user's subscriptions.
"""
from flask import request
from flask_jwt_extended import jwt_required
from flask_restx import Resource, fields, marshal

from subscription_service.models.user_subscription import SubscriptionStatus, UserSubscription
from subscription_service.utils.auth import current_user_id

from . import subscription_ns

subscription_model = subscription_ns.model('UserSubscription', {
    'id': fields.Integer(description='Subscription ID'),
    'user_id': fields.String(description='User ID'),
    'plan_id': fields.Integer(description='Plan ID'),
    'plan_name': fields.String(attribute=lambda s: s.plan.name if s.plan else None, description='Plan name'),
    'status': fields.String(description='Subscription status', enum=SubscriptionStatus.values()),
    'gateway': fields.String(attribute='gateway_used', description='Payment gateway'),
    'payment_type': fields.String(description='recurring or pay_as_you_go'),
    'external_subscription_id': fields.String(description='Subscription id at the gateway'),
    'start_date': fields.DateTime(description='Start date'),
    'end_date': fields.DateTime(description='End date'),
    'days_remaining': fields.Integer(description='Days until the end date'),
    'auto_renew': fields.Boolean(description='Auto renew'),
    'created_at': fields.DateTime(description='Creation date'),
    'updated_at': fields.DateTime(description='Last update date'),
})

validity_model = subscription_ns.model('SubscriptionValidity', {
    'is_valid': fields.Boolean(description='Whether the user has a valid subscription'),
    'subscription': fields.Nested(subscription_model, allow_null=True),
})


@subscription_ns.route('/current')
class CurrentSubscription(Resource):
    """Resource for the caller's active subscription"""

    @subscription_ns.doc('get_current_subscription')
    @subscription_ns.response(200, 'Active subscription', subscription_model)
    @subscription_ns.response(404, 'No active subscription found')
    @jwt_required()
    def get(self):
        """Get the most recent active subscription of the current user"""
        subscription = UserSubscription.current_for_user(current_user_id())
        if subscription is None:
            subscription_ns.abort(404, 'No active subscription found')
        return marshal(subscription, subscription_model)


@subscription_ns.route('/valid')
class SubscriptionValidity(Resource):
    """Resource for checking subscription validity"""

    @subscription_ns.doc('check_subscription_valid')
    @subscription_ns.response(200, 'Validity', validity_model)
    @jwt_required()
    def get(self):
        """Check whether the current user has an active, unexpired subscription"""
        subscription = UserSubscription.valid_for_user(current_user_id())
        return marshal({'is_valid': subscription is not None, 'subscription': subscription}, validity_model)


@subscription_ns.route('/history')
class SubscriptionHistory(Resource):
    """Resource for the caller's subscription history"""

    @subscription_ns.doc('get_subscription_history', params={
        'limit': {'type': 'integer', 'default': 10, 'description': 'Maximum number of entries'},
        'offset': {'type': 'integer', 'default': 0, 'description': 'Entries to skip'},
    })
    @subscription_ns.response(200, 'Subscription history', [subscription_model])
    @jwt_required()
    def get(self):
        """List the current user's subscriptions, newest first"""
        limit = max(min(request.args.get('limit', 10, type=int), 100), 1)
        offset = max(request.args.get('offset', 0, type=int), 0)
        history = UserSubscription.history_for_user(current_user_id(), limit=limit, offset=offset)
        return marshal(history, subscription_model)
