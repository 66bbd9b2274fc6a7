"""Qualite admin routes (lecture paginée)."""
from flask import abort, current_app, render_template, request

from admin import bp
from forms import parse_page_request
from repositories.qualite_repository import QualiteRepository
from services.qualite_service import QualiteService

qualite_service = QualiteService(QualiteRepository())


@bp.route('/qualite', methods=['GET'])
def qualite_index():
    """Liste paginée des qualités (?page=0&size=10&sort=name,desc)."""
    try:
        page_request = parse_page_request(
            request.args,
            default_size=current_app.config['ADMIN_PAGE_SIZE'],
        )
        page = qualite_service.get_page(page_request)
    except ValueError as e:
        abort(400, description=str(e))

    return render_template('admin/qualite/index.html', page=page)
