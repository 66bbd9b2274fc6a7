"""Base Repository - CRUD générique au-dessus de Flask-SQLAlchemy.

Responsabilité (SRP) : accès aux données d'un modèle.
- find_all / find_by_id / save / delete
- Pagination (PageRequest -> Page)
- Pas de logique métier
"""
import math
from dataclasses import dataclass, field
from typing import Generic, List, Optional, Tuple, Type, TypeVar

from models import db
from errors import EntityNotFoundError

T = TypeVar('T')

MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class PageRequest:
    """Demande de page : index zéro-based, taille, tri optionnel.

    Le tri s'écrit ``"champ"`` ou ``"champ,asc|desc"``.
    """
    page: int = 0
    size: int = 20
    sort: Optional[str] = None

    def __post_init__(self):
        if self.page < 0:
            raise ValueError(f"Page index must not be negative: {self.page}")
        if not 1 <= self.size <= MAX_PAGE_SIZE:
            raise ValueError(f"Page size must be between 1 and {MAX_PAGE_SIZE}: {self.size}")
        if self.sort is not None:
            self.sort_order()

    def sort_order(self) -> Optional[Tuple[str, str]]:
        """Découpe le tri en (champ, direction)."""
        if not self.sort:
            return None
        parts = [p.strip() for p in self.sort.split(',')]
        if len(parts) > 2 or not parts[0]:
            raise ValueError(f"Invalid sort expression: {self.sort!r}")
        direction = parts[1].lower() if len(parts) == 2 else 'asc'
        if direction not in ('asc', 'desc'):
            raise ValueError(f"Invalid sort direction: {parts[1]!r}")
        return parts[0], direction


@dataclass
class Page(Generic[T]):
    """Une page de résultats et les métadonnées nécessaires à la navigation."""
    items: List[T]
    number: int
    size: int
    total_elements: int
    sort: Optional[str] = None
    total_pages: int = field(init=False)

    def __post_init__(self):
        self.total_pages = math.ceil(self.total_elements / self.size) if self.total_elements else 0

    @property
    def has_next(self) -> bool:
        return self.number + 1 < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.number > 0

    @property
    def is_first(self) -> bool:
        return not self.has_previous

    @property
    def is_last(self) -> bool:
        return not self.has_next

    def __iter__(self):
        return iter(self.items)

    def __len__(self):
        return len(self.items)


class SqlAlchemyRepository(Generic[T]):
    """Repository générique pour un modèle SQLAlchemy.

    Pattern: Repository Pattern
    Les sous-classes fixent ``model``, et ``sortable_fields`` si elles sont paginées.
    """

    model: Type[T] = None
    sortable_fields: Tuple[str, ...] = ('id',)

    @property
    def entity_name(self) -> str:
        return self.model.__name__

    def find_all(self) -> List[T]:
        """Récupère toutes les entités, ordre par défaut (clé primaire)."""
        return self.model.query.order_by(self.model.id).all()

    def find_by_id(self, entity_id: Optional[int]) -> Optional[T]:
        """Trouve une entité par son ID."""
        if entity_id is None:
            return None
        return db.session.get(self.model, entity_id)

    def get_by_id(self, entity_id: Optional[int]) -> T:
        """Trouve une entité par son ID.

        Raises:
            EntityNotFoundError: si aucune ligne ne correspond
        """
        entity = self.find_by_id(entity_id)
        if entity is None:
            raise EntityNotFoundError(self.entity_name, entity_id)
        return entity

    def save(self, entity: T) -> T:
        """Sauvegarde ou met à jour une entité (insert-or-update).

        Un id fourni qui correspond à une ligne la remplace ; sinon l'entité est
        insérée. Retourne l'instance persistée, qui n'est pas forcément ``entity``.
        """
        persisted = db.session.merge(entity)
        db.session.commit()
        return persisted

    def delete(self, entity: T) -> None:
        """Supprime définitivement une entité."""
        db.session.delete(entity)
        db.session.commit()

    def count(self) -> int:
        return self.model.query.count()

    def find_page(self, page_request: PageRequest) -> Page[T]:
        """Récupère une page d'entités.

        Args:
            page_request: index (zéro-based), taille et tri

        Returns:
            Page avec les entités et le nombre total d'éléments

        Raises:
            ValueError: si le champ de tri n'est pas autorisé
        """
        query = self.model.query.order_by(*self._order_by(page_request))
        pagination = query.paginate(
            page=page_request.page + 1,
            per_page=page_request.size,
            error_out=False,
        )
        return Page(
            items=list(pagination.items),
            number=page_request.page,
            size=page_request.size,
            total_elements=pagination.total or 0,
            sort=page_request.sort,
        )

    def _order_by(self, page_request: PageRequest):
        order = page_request.sort_order()
        if order is None:
            return [self.model.id.asc()]
        name, direction = order
        if name not in self.sortable_fields:
            raise ValueError(f"Cannot sort {self.entity_name} by {name!r}")
        column = getattr(self.model, name)
        criteria = [column.desc() if direction == 'desc' else column.asc()]
        if name != 'id':
            # Tie-breaker so pages never overlap
            criteria.append(self.model.id.asc())
        return criteria
