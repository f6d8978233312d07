"""
Routes for the country to pricing region mapping.
"""
from flask import current_app
from flask_restx import Resource, fields, marshal

from subscription_service import db
from subscription_service.models.country_region import CountryRegion
from subscription_service.utils.auth import PLAN_ADMIN_ROLES, roles_required
from subscription_service.utils.json_helpers import json_body
from subscription_service.validation.payloads import is_text

from . import region_ns

mapping_model = region_ns.model('CountryRegion', {
    'country_code': fields.String(description='ISO country code'),
    'country_name': fields.String(description='Country name'),
    'region': fields.String(description='Pricing region'),
})

mapping_input_model = region_ns.model('CountryRegionInput', {
    'country_code': fields.String(required=True, description='ISO country code'),
    'country_name': fields.String(required=True, description='Country name'),
    'region': fields.String(required=True, description='Pricing region'),
})


@region_ns.route('/region/<string:country_code>')
@region_ns.param('country_code', 'ISO country code')
class RegionByCountry(Resource):
    """Resource for looking up the region of a country"""

    @region_ns.doc('get_region_by_country')
    @region_ns.response(200, 'Mapping', mapping_model)
    @region_ns.response(404, 'Country not found')
    def get(self, country_code):
        """Get the pricing region of a country"""
        mapping = CountryRegion.by_country_code(country_code)
        if mapping is None:
            region_ns.abort(404, 'Country not found')
        return marshal(mapping, mapping_model)


@region_ns.route('/countries/<string:region>')
@region_ns.param('region', 'Pricing region')
class CountriesByRegion(Resource):
    """Resource for listing the countries of a region"""

    @region_ns.doc('get_countries_by_region')
    @region_ns.response(200, 'Countries', [mapping_model])
    def get(self, region):
        """List the countries in a pricing region"""
        return marshal(CountryRegion.countries_in(region), mapping_model)


@region_ns.route('/all')
class AllMappings(Resource):
    """Resource for the full mapping"""

    @region_ns.doc('get_all_mappings')
    @region_ns.response(200, 'Mappings', [mapping_model])
    def get(self):
        """List every country mapping ordered by region"""
        return marshal(CountryRegion.all_mappings(), mapping_model)


@region_ns.route('/add')
class AddMapping(Resource):
    """Resource for adding or moving a country"""

    @region_ns.doc('add_country_mapping')
    @region_ns.expect(mapping_input_model)
    @region_ns.response(201, 'Mapping saved', mapping_model)
    @region_ns.response(400, 'All fields required')
    @roles_required(*PLAN_ADMIN_ROLES)
    def post(self):
        """Map a country to a region, replacing any previous mapping (manager or admin)"""
        data = json_body() or {}
        if not all(is_text(data.get(name)) for name in ('country_code', 'country_name', 'region')):
            return {'message': 'All fields required'}, 400
        if len(data['country_code'].strip()) != 2:
            return {'message': 'country_code must be a two-letter code'}, 400

        mapping = CountryRegion.upsert(data['country_code'].strip(), data['country_name'].strip(),
                                       data['region'].strip())
        db.session.commit()

        current_app.logger.info("Mapped country %s to %s", mapping.country_code, mapping.region)
        return marshal(mapping, mapping_model), 201
