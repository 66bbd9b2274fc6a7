"""Admin blueprint - écrans d'administration (API Layer).

Responsabilité : routes HTTP, lecture des formulaires, messages flash.
La logique métier est déléguée aux services.
"""
from flask import Blueprint, redirect, url_for

bp = Blueprint('admin', __name__, url_prefix='/admin')


@bp.route('')
def home():
    return redirect(url_for('admin.potion_index'))


# Route definitions live in their own modules; importing registers them on bp.
from admin import potion_routes, qualite_routes  # noqa: E402,F401
