"""Exceptions of the data access layer."""


class EntityNotFoundError(LookupError):
    """Raised when an entity looked up by id does not exist.

    Routes never catch it: the application error handler turns it into a
    generic server error page.
    """

    def __init__(self, entity_name, entity_id):
        self.entity_name = entity_name
        self.entity_id = entity_id
        super().__init__(f'{entity_name} {entity_id} not found')
