class AppError(Exception):
    """Base app error."""


class ValidationError(AppError, ValueError):
    pass


class NotFoundError(AppError):
    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found")
