"""Repository layer - Data Access Objects (DAO) pattern.

Un repository par entité (Potion, Qualite), tous construits sur
SqlAlchemyRepository : find_all, find_by_id, save, delete, pagination.
Ne contient PAS de logique métier.
"""
