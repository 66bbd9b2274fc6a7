"""Flask CLI commands (``flask --app app seed``)."""
import logging

import click

from models import db, Potion, Qualite

SAMPLE_POTIONS = [
    {'name': 'Potion de soin', 'description': 'Un liquide rouge et sucré',
     'effect_description': 'Rend quelques points de vie', 'heal_amount': 10},
    {'name': 'Grande potion de soin', 'description': 'Un flacon épais, rouge sombre',
     'effect_description': 'Rend beaucoup de points de vie', 'heal_amount': 30},
    {'name': 'Élixir', 'description': 'Une fiole scintillante',
     'effect_description': 'Soigne entièrement le héros', 'heal_amount': 100},
]

SAMPLE_QUALITES = [
    {'name': 'Commun', 'color': '#9d9d9d', 'bonus': 0},
    {'name': 'Rare', 'color': '#0070dd', 'bonus': 1},
    {'name': 'Epique', 'color': '#a335ee', 'bonus': 2},
    {'name': 'Legendaire', 'color': '#ff8000', 'bonus': 3},
]

logger = logging.getLogger(__name__)


def seed_database():
    """Insère les données d'exemple dans les tables vides.

    Returns:
        (nombre de potions insérées, nombre de qualités insérées)
    """
    inserted = [0, 0]
    if Potion.query.count() == 0:
        db.session.add_all(Potion(**row) for row in SAMPLE_POTIONS)
        inserted[0] = len(SAMPLE_POTIONS)
    if Qualite.query.count() == 0:
        db.session.add_all(Qualite(**row) for row in SAMPLE_QUALITES)
        inserted[1] = len(SAMPLE_QUALITES)
    db.session.commit()
    logger.info('Seeded %d potions and %d qualites', *inserted)
    return tuple(inserted)


def register_commands(app):

    @app.cli.command('seed')
    @click.option('--reset', is_flag=True, help='Drop and recreate the tables first.')
    def seed_command(reset):
        """Populate the database with sample potions and qualites."""
        if reset:
            db.session.remove()
            db.drop_all()
            db.create_all()
        potions, qualites = seed_database()
        click.echo(f'{potions} potions, {qualites} qualites inserted')
