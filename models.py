"""Database models for the Spring Aventure administration."""
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()


class Potion(db.Model):
    """Potion consommable par le héros.

    Une potion sans id n'a jamais été enregistrée : l'id est attribué par la
    base lors du premier save.
    """
    __tablename__ = 'potions'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False, default='')
    description = db.Column(db.Text, nullable=False, default='')
    effect_description = db.Column(db.Text, nullable=False, default='')
    heal_amount = db.Column(db.Integer, nullable=False, default=0)

    def __repr__(self):
        return f'<Potion {self.id} {self.name!r}>'

    def to_dict(self):
        """Convert potion to dictionary."""
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'effect_description': self.effect_description,
            'heal_amount': self.heal_amount,
        }


class Qualite(db.Model):
    """Qualité d'un objet (Commun, Rare, Epique...)."""
    __tablename__ = 'qualites'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(50), nullable=False)
    color = db.Column(db.String(20), nullable=False, default='#ffffff')  # Hex code
    bonus = db.Column(db.Integer, nullable=False, default=0)

    def __repr__(self):
        return f'<Qualite {self.id} {self.name!r}>'

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'color': self.color,
            'bonus': self.bonus,
        }
