class EnergyMonitorError(Exception):
    """Base class for errors raised by the entity access services."""


class NotFoundError(EnergyMonitorError):
    """Raised when a referenced entity does not exist."""

    def __init__(self, entity, entity_id):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found")


class ConflictError(EnergyMonitorError):
    """Raised when a write violates a uniqueness or integrity constraint."""

    def __init__(self, message):
        self.message = message
        super().__init__(message)


class PermissionDeniedError(EnergyMonitorError):
    """Raised when the caller does not own the referenced entity."""

    def __init__(self, entity, entity_id):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"Not enough permissions to access this {entity.lower()}")
