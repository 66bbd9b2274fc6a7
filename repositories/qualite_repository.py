"""Qualite Repository - Gestion de la persistence des qualités.

Responsabilité (SRP) : Accès aux données des qualités, lecture paginée.
"""
from models import Qualite
from repositories.base_repository import SqlAlchemyRepository, PageRequest, Page


class QualiteRepository(SqlAlchemyRepository[Qualite]):
    """Repository pour la gestion de la persistence des qualités."""

    model = Qualite
    sortable_fields = ('id', 'name', 'bonus')

    def find_all_paginated(self, page_request: PageRequest) -> Page[Qualite]:
        """Sélectionne toutes les qualités, page par page."""
        return self.find_page(page_request)
