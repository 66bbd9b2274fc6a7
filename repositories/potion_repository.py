"""Potion Repository - Gestion de la persistence des potions.

Responsabilité (SRP) : Accès aux données des potions uniquement.
"""
from models import Potion
from repositories.base_repository import SqlAlchemyRepository


class PotionRepository(SqlAlchemyRepository[Potion]):
    """Repository pour la gestion de la persistence des potions."""

    model = Potion
