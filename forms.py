"""Request parsing: WTForms forms and the data they produce.

Les routes ne manipulent jamais ``request.form`` directement pour les
potions : le formulaire valide les types puis produit un ``PotionData``.
"""
from dataclasses import dataclass
from typing import Optional

from flask_wtf import FlaskForm
from wtforms import IntegerField, StringField, TextAreaField
from wtforms.validators import InputRequired, Length, Optional as OptionalValue

from repositories.base_repository import PageRequest


@dataclass(frozen=True)
class PotionData:
    """Potion validée, telle que soumise par le formulaire."""
    id: Optional[int]
    name: str
    description: str
    effect_description: str
    heal_amount: int


class PotionForm(FlaskForm):
    """Formulaire de création / modification d'une potion."""

    id = IntegerField('Id', validators=[OptionalValue()])
    name = StringField('Nom', validators=[Length(max=100)], default='')
    description = TextAreaField('Description', default='')
    effect_description = TextAreaField("Description de l'effet", default='')
    heal_amount = IntegerField('Soin', validators=[InputRequired()], default=0)

    def to_data(self) -> PotionData:
        return PotionData(
            id=self.id.data,
            name=self.name.data or '',
            description=self.description.data or '',
            effect_description=self.effect_description.data or '',
            heal_amount=self.heal_amount.data,
        )


class DeletePotionForm(FlaskForm):
    """Bouton de suppression : ne porte que le jeton CSRF, l'id est lu par la route."""


def parse_page_request(args, default_size: int = 10) -> PageRequest:
    """Construit un PageRequest depuis les paramètres ``page``, ``size``, ``sort``.

    Raises:
        ValueError: paramètre non entier ou hors bornes
    """
    try:
        page = int(args.get('page', 0))
        size = int(args.get('size', default_size))
    except (TypeError, ValueError):
        raise ValueError("page and size must be integers")
    sort = args.get('sort') or None
    return PageRequest(page=page, size=size, sort=sort)
