"""
Admin Airport Routes

List, search, create, edit and delete airports.
"""

import logging

from flask import abort, current_app, flash, redirect, render_template, request, url_for

from tripplanner.admin import admin_bp
from tripplanner.auth.decorators import admin_required
from tripplanner.exceptions import ConflictError, NotFoundError, RepositoryError
from tripplanner.repositories import airports_repository
from tripplanner.utils import empty_pagination, paginate, parse_page
from tripplanner.validation import parse_form
from tripplanner.validation.airports import AirportForm, AirportSearch, AirportUpdateForm

logger = logging.getLogger(__name__)

IATA_TAKEN = 'An airport with this IATA code already exists'
ICAO_TAKEN = 'An airport with this ICAO code already exists'


def _form_data(airport):
    """Airport row as the string values the edit form expects."""
    def s(value):
        return '' if value is None else str(value)

    return {
        'iata_code': airport.iata_code,
        'icao_code': s(airport.icao_code),
        'name': airport.name,
        'city': airport.city,
        'state': s(airport.state),
        'country': airport.country,
        'latitude': s(airport.latitude),
        'longitude': s(airport.longitude),
        'elevation': s(airport.elevation),
        'timezone': s(airport.timezone),
    }


def _render_form(airport=None, form_data=None, field_errors=None, message=None, status=200):
    return render_template('admin/airports/form.html',
                           airport=airport,
                           form_data=form_data or {},
                           field_errors=field_errors or {},
                           message=message), status


def _load_airport(airport_id):
    try:
        airport = airports_repository.get_by_id(airport_id)
    except RepositoryError:
        logger.exception('Failed to load airport %s', airport_id)
        abort(500, description='Failed to load airport data')
    if airport is None:
        abort(404, description='Airport not found')
    return airport


@admin_bp.route('/airports')
@admin_required
def list_airports():
    """Airport list with optional search and pagination."""
    per_page = current_app.config['AIRPORTS_PER_PAGE']
    page = parse_page(request.args.get('page'))
    search_query = request.args.get('search', '').strip()
    search_error = None

    if search_query:
        _, errors = parse_form(AirportSearch, {'query': search_query})
        if errors:
            search_error = errors['query']
            search_query = ''

    try:
        if search_query:
            airports = airports_repository.search(search_query)
        else:
            airports = airports_repository.get_all()
    except RepositoryError:
        logger.exception('Failed to load airports')
        return render_template('admin/airports/list.html',
                               airports=[],
                               pagination=empty_pagination(per_page),
                               search_query='',
                               error='Failed to load airports. Please try again.')

    airports, pagination = paginate(airports, page, per_page)
    return render_template('admin/airports/list.html',
                           airports=airports,
                           pagination=pagination,
                           search_query=search_query,
                           error=search_error)


@admin_bp.route('/airports/create', methods=['GET', 'POST'])
@admin_required
def create_airport():
    if request.method == 'GET':
        return _render_form()

    data = request.form.to_dict()
    form, errors = parse_form(AirportForm, data)
    if errors:
        return _render_form(form_data=data, field_errors=errors, status=400)

    try:
        if airports_repository.exists_by_iata_code(form.iata_code):
            return _render_form(form_data=data, field_errors={'iata_code': IATA_TAKEN}, status=400)
        if form.icao_code and airports_repository.exists_by_icao_code(form.icao_code):
            return _render_form(form_data=data, field_errors={'icao_code': ICAO_TAKEN}, status=400)
        airport = airports_repository.create(form.model_dump())
    except RepositoryError:
        logger.exception('Failed to create airport')
        return _render_form(form_data=data, message='Failed to create airport. Please try again.',
                            status=500)

    flash(f'Airport {airport.iata_code} ({airport.name}) created successfully.', 'success')
    return redirect(url_for('admin.list_airports'), code=303)


@admin_bp.route('/airports/<int:airport_id>/edit', methods=['GET', 'POST'])
@admin_required
def edit_airport(airport_id):
    airport = _load_airport(airport_id)

    if request.method == 'GET':
        return _render_form(airport=airport, form_data=_form_data(airport))

    data = request.form.to_dict()
    form, errors = parse_form(AirportUpdateForm, {**data, 'id': airport_id})
    if errors:
        return _render_form(airport=airport, form_data=data, field_errors=errors, status=400)

    try:
        if form.iata_code and airports_repository.exists_by_iata_code(form.iata_code, airport_id):
            return _render_form(airport=airport, form_data=data,
                                field_errors={'iata_code': IATA_TAKEN}, status=400)
        if form.icao_code and airports_repository.exists_by_icao_code(form.icao_code, airport_id):
            return _render_form(airport=airport, form_data=data,
                                field_errors={'icao_code': ICAO_TAKEN}, status=400)
        airport = airports_repository.update(airport_id, form.model_dump(exclude_unset=True, exclude={'id'}))
    except NotFoundError:
        abort(404, description='Airport not found')
    except RepositoryError:
        logger.exception('Failed to update airport %s', airport_id)
        return _render_form(airport=airport, form_data=data,
                            message='Failed to update airport. Please try again.', status=500)

    flash(f'Airport {airport.iata_code} ({airport.name}) updated successfully.', 'success')
    return redirect(url_for('admin.list_airports'), code=303)


@admin_bp.route('/airports/<int:airport_id>/delete', methods=['GET', 'POST'])
@admin_required
def delete_airport(airport_id):
    airport = _load_airport(airport_id)

    if request.method == 'GET':
        return render_template('admin/airports/delete.html', airport=airport)

    code, name = airport.iata_code, airport.name
    try:
        airports_repository.delete(airport_id)
    except NotFoundError:
        abort(404, description='Airport not found')
    except ConflictError:
        abort(400, description='Cannot delete airport: it has associated trip data')
    except RepositoryError:
        logger.exception('Failed to delete airport %s', airport_id)
        return render_template('admin/airports/delete.html', airport=airport,
                               message='Failed to delete airport. Please try again.'), 500

    flash(f'Airport {code} ({name}) deleted successfully.', 'success')
    return redirect(url_for('admin.list_airports'), code=303)
