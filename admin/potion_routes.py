"""Potion admin routes.

GET  /admin/potion              -> liste
GET  /admin/potion/<id>         -> détail
GET  /admin/potion/create       -> formulaire de création
POST /admin/potion              -> enregistrement
GET  /admin/potion/<id>/edit    -> formulaire de modification
POST /admin/potion/update       -> modification
POST /admin/potion/delete       -> suppression

Une potion introuvable n'est pas interceptée ici : l'erreur remonte jusqu'au
handler global de l'application (page d'erreur générique).
"""
import logging

from flask import abort, redirect, render_template, request, url_for

from admin import bp
from flash_messages import flash_channel
from forms import DeletePotionForm, PotionForm
from repositories.potion_repository import PotionRepository
from services.potion_service import PotionService

potion_service = PotionService(PotionRepository())

logger = logging.getLogger(__name__)


def _redirect_to_index(message):
    flash_channel.push('admin.potion_index', message)
    return redirect(url_for('admin.potion_index'))


@bp.route('/potion', methods=['GET'])
def potion_index():
    """Affiche la liste des potions."""
    potions = potion_service.list_potions()
    return render_template(
        'admin/potion/index.html',
        potions=potions,
        messages=flash_channel.consume(request.endpoint),
        delete_form=DeletePotionForm(),
    )


@bp.route('/potion/<int:potion_id>', methods=['GET'])
def potion_show(potion_id):
    """Affiche le détail d'une potion."""
    potion = potion_service.get_potion(potion_id)
    return render_template('admin/potion/show.html', potion=potion, delete_form=DeletePotionForm())


@bp.route('/potion/create', methods=['GET'])
def potion_create():
    """Affiche le formulaire de création, pré-rempli avec une potion vierge."""
    nouvelle_potion = potion_service.new_potion()
    form = PotionForm(obj=nouvelle_potion)
    return render_template('admin/potion/create.html', nouvellePotion=nouvelle_potion, form=form)


@bp.route('/potion', methods=['POST'])
def potion_store():
    """Enregistre la potion soumise puis redirige vers la liste."""
    form = PotionForm()
    if not form.validate_on_submit():
        logger.info('Rejected potion creation: %s', form.errors)
        return render_template(
            'admin/potion/create.html',
            nouvellePotion=potion_service.new_potion(),
            form=form,
        ), 400

    saved = potion_service.store(form.to_data())
    return _redirect_to_index(f"Enregistrement de {saved.name} réussi")


@bp.route('/potion/<int:potion_id>/edit', methods=['GET'])
def potion_edit(potion_id):
    """Affiche le formulaire de modification d'une potion."""
    potion = potion_service.get_potion(potion_id)
    form = PotionForm(obj=potion)
    return render_template('admin/potion/edit.html', potion=potion, form=form)


@bp.route('/potion/update', methods=['POST'])
def potion_update():
    """Modifie le nom, la description et le soin d'une potion existante."""
    form = PotionForm()
    if not form.validate_on_submit():
        logger.info('Rejected potion update: %s', form.errors)
        potion = potion_service.get_potion(form.id.data)
        return render_template('admin/potion/edit.html', potion=potion, form=form), 400

    saved = potion_service.update(form.to_data())
    return _redirect_to_index(f"Modification de {saved.name} réussie")


@bp.route('/potion/delete', methods=['POST'])
def potion_delete():
    """Supprime la potion dont l'id est passé en paramètre."""
    potion_id = request.form.get('id', type=int)
    if potion_id is None:
        abort(400, description='Parameter "id" is required and must be an integer')

    potion = potion_service.delete(potion_id)
    return _redirect_to_index(f"Suppression de {potion.name} réussie")
