"""Potion Service - Logique métier de l'administration des potions.

Responsabilité (SRP) : règles des écrans d'administration des potions.
- Création d'une potion vierge pour le formulaire
- Enregistrement (insert-or-update)
- Modification partielle (nom, description, soin)
- PAS d'accès direct DB (utilise PotionRepository)
"""
import logging
from typing import List, Optional

from forms import PotionData
from models import Potion
from repositories.potion_repository import PotionRepository


class PotionService:
    """Service pour l'administration des potions.

    Pattern: Service Layer
    SOLID: DIP (le repository est injecté par le constructeur)
    """

    def __init__(self, potion_repository: PotionRepository = None):
        self.potion_repo = potion_repository or PotionRepository()
        self.logger = logging.getLogger(__name__)

    def list_potions(self) -> List[Potion]:
        """Toutes les potions, dans l'ordre du store."""
        return self.potion_repo.find_all()

    def get_potion(self, potion_id: Optional[int]) -> Potion:
        """Récupère une potion existante.

        Raises:
            EntityNotFoundError: si l'id ne correspond à aucune potion
        """
        return self.potion_repo.get_by_id(potion_id)

    def new_potion(self) -> Potion:
        """Potion vierge (non enregistrée) pour le formulaire de création."""
        return Potion(id=None, name='', description='', effect_description='', heal_amount=0)

    def store(self, data: PotionData) -> Potion:
        """Enregistre une potion soumise.

        Un id fourni suit la sémantique du save : la ligne correspondante est
        remplacée, ou créée avec cet id.
        """
        potion = Potion(
            id=data.id,
            name=data.name,
            description=data.description,
            effect_description=data.effect_description,
            heal_amount=data.heal_amount,
        )
        saved = self.potion_repo.save(potion)
        self.logger.info('Stored potion %s (%s)', saved.id, saved.name)
        return saved

    def update(self, data: PotionData) -> Potion:
        """Modifie une potion existante.

        Seuls le nom, la description et le soin sont recopiés ;
        ``effect_description`` garde sa valeur enregistrée.

        Raises:
            EntityNotFoundError: si ``data.id`` est absent ou inconnu
        """
        potion = self.get_potion(data.id)
        potion.name = data.name
        potion.description = data.description
        potion.heal_amount = data.heal_amount
        saved = self.potion_repo.save(potion)
        self.logger.info('Updated potion %s (%s)', saved.id, saved.name)
        return saved

    def delete(self, potion_id: int) -> Potion:
        """Supprime une potion et la retourne (pour le message de confirmation).

        Raises:
            EntityNotFoundError: si l'id ne correspond à aucune potion
        """
        potion = self.get_potion(potion_id)
        self.potion_repo.delete(potion)
        self.logger.info('Deleted potion %s (%s)', potion_id, potion.name)
        return potion
