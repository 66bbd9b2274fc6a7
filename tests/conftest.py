import pytest

from app import create_app
from models import db, Potion, Qualite
from repositories.potion_repository import PotionRepository
from repositories.qualite_repository import QualiteRepository
from services.potion_service import PotionService


@pytest.fixture(scope="function")
def app():
    """Application on an in-memory database, CSRF disabled."""
    app = create_app({
        'TESTING': True,
        'SECRET_KEY': 'test-secret',
        'SQLALCHEMY_DATABASE_URI': 'sqlite://',
        'WTF_CSRF_ENABLED': False,
    })
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def potion_repository(app):
    return PotionRepository()


@pytest.fixture
def qualite_repository(app):
    return QualiteRepository()


@pytest.fixture
def potion_service(potion_repository):
    return PotionService(potion_repository)


@pytest.fixture
def flamme(app):
    """A stored potion."""
    potion = Potion(name='Flamme', description='Rouge vif',
                    effect_description="Brûle l'ennemi", heal_amount=10)
    db.session.add(potion)
    db.session.commit()
    return potion


@pytest.fixture
def qualites(app):
    rows = [Qualite(name=f'Qualite {i:02d}', color='#000000', bonus=i % 4) for i in range(1, 26)]
    db.session.add_all(rows)
    db.session.commit()
    return rows


def reload(model, entity_id):
    """Re-read a row from the database, bypassing the identity map cache."""
    db.session.expire_all()
    return db.session.get(model, entity_id)


@pytest.fixture(name="reload")
def reload_fixture(app):
    return reload
