"""Qualite Service - lecture des qualités."""
from typing import List

from models import Qualite
from repositories.base_repository import Page, PageRequest
from repositories.qualite_repository import QualiteRepository


class QualiteService:

    def __init__(self, qualite_repository: QualiteRepository = None):
        self.qualite_repo = qualite_repository or QualiteRepository()

    def get_page(self, page_request: PageRequest) -> Page[Qualite]:
        return self.qualite_repo.find_all_paginated(page_request)

    def list_qualites(self) -> List[Qualite]:
        return self.qualite_repo.find_all()
