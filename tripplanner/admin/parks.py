"""
Admin National Park Routes

List, search, create, edit and delete national parks.
"""

import logging

from flask import abort, current_app, flash, redirect, render_template, request, url_for

from tripplanner.admin import admin_bp
from tripplanner.auth.decorators import admin_required
from tripplanner.exceptions import ConflictError, NotFoundError, RepositoryError
from tripplanner.repositories import parks_repository
from tripplanner.utils import empty_pagination, paginate, parse_page
from tripplanner.validation import parse_form
from tripplanner.validation.parks import ParkForm, ParkSearch, ParkUpdateForm

logger = logging.getLogger(__name__)

NAME_TAKEN = 'A park with this name already exists in this state'


def _form_data(park):
    def s(value):
        return '' if value is None else str(value)

    return {
        'name': park.name,
        'state': park.state,
        'description': s(park.description),
        'latitude': s(park.latitude),
        'longitude': s(park.longitude),
        'established_date': park.established_date.isoformat() if park.established_date else '',
        'area': s(park.area),
    }


def _render_form(park=None, form_data=None, field_errors=None, message=None, status=200):
    return render_template('admin/parks/form.html',
                           park=park,
                           form_data=form_data or {},
                           field_errors=field_errors or {},
                           message=message), status


def _load_park(park_id):
    try:
        park = parks_repository.get_by_id(park_id)
    except RepositoryError:
        logger.exception('Failed to load park %s', park_id)
        abort(500, description='Failed to load park data')
    if park is None:
        abort(404, description='Park not found')
    return park


@admin_bp.route('/parks')
@admin_required
def list_parks():
    """Park list with optional search and pagination."""
    per_page = current_app.config['PARKS_PER_PAGE']
    page = parse_page(request.args.get('page'))
    search_query = request.args.get('search', '').strip()
    search_error = None

    if search_query:
        _, errors = parse_form(ParkSearch, {'query': search_query})
        if errors:
            search_error = errors['query']
            search_query = ''

    try:
        if search_query:
            parks = parks_repository.search(search_query)
        else:
            parks = parks_repository.get_all()
    except RepositoryError:
        logger.exception('Failed to load parks')
        return render_template('admin/parks/list.html',
                               parks=[],
                               pagination=empty_pagination(per_page),
                               search_query='',
                               error='Failed to load parks. Please try again.')

    parks, pagination = paginate(parks, page, per_page)
    return render_template('admin/parks/list.html',
                           parks=parks,
                           pagination=pagination,
                           search_query=search_query,
                           error=search_error)


@admin_bp.route('/parks/create', methods=['GET', 'POST'])
@admin_required
def create_park():
    if request.method == 'GET':
        return _render_form()

    data = request.form.to_dict()
    form, errors = parse_form(ParkForm, data)
    if errors:
        return _render_form(form_data=data, field_errors=errors, status=400)

    try:
        if parks_repository.exists_in_state(form.name, form.state):
            return _render_form(form_data=data, field_errors={'name': NAME_TAKEN}, status=400)
        park = parks_repository.create(form.model_dump())
    except RepositoryError:
        logger.exception('Failed to create park')
        return _render_form(form_data=data, message='Failed to create park. Please try again.',
                            status=500)

    flash(f'Park "{park.name}" created successfully.', 'success')
    return redirect(url_for('admin.list_parks'), code=303)


@admin_bp.route('/parks/<int:park_id>/edit', methods=['GET', 'POST'])
@admin_required
def edit_park(park_id):
    park = _load_park(park_id)

    if request.method == 'GET':
        return _render_form(park=park, form_data=_form_data(park))

    data = request.form.to_dict()
    form, errors = parse_form(ParkUpdateForm, {**data, 'id': park_id})
    if errors:
        return _render_form(park=park, form_data=data, field_errors=errors, status=400)

    try:
        if form.name and form.state and parks_repository.exists_in_state(form.name, form.state, park_id):
            return _render_form(park=park, form_data=data, field_errors={'name': NAME_TAKEN}, status=400)
        park = parks_repository.update(park_id, form.model_dump(exclude_unset=True, exclude={'id'}))
    except NotFoundError:
        abort(404, description='Park not found')
    except RepositoryError:
        logger.exception('Failed to update park %s', park_id)
        return _render_form(park=park, form_data=data,
                            message='Failed to update park. Please try again.', status=500)

    flash(f'Park "{park.name}" updated successfully.', 'success')
    return redirect(url_for('admin.list_parks'), code=303)


@admin_bp.route('/parks/<int:park_id>/delete', methods=['GET', 'POST'])
@admin_required
def delete_park(park_id):
    park = _load_park(park_id)

    if request.method == 'GET':
        return render_template('admin/parks/delete.html', park=park)

    name = park.name
    try:
        parks_repository.delete(park_id)
    except NotFoundError:
        abort(404, description='Park not found')
    except ConflictError:
        abort(400, description='Cannot delete park: it has associated trip data')
    except RepositoryError:
        logger.exception('Failed to delete park %s', park_id)
        abort(500, description='Failed to delete park')

    flash(f'Park "{name}" deleted successfully.', 'success')
    return redirect(url_for('admin.list_parks'), code=303)
