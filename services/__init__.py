"""Service layer - Business Logic.

Ce package contient les services qui gèrent la logique métier.
Responsabilité : orchestration, règles métier.
Dépend de repositories (DIP), pas des routes.
"""
