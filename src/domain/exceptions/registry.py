class RegistryError(Exception):
    """Base exception for misuse of the entity registry."""


class EntityNotFound(RegistryError):
    """Raised when a vehicle, station or passenger id is not registered."""

    def __init__(self, kind: str, entity_id: str) -> None:
        super().__init__(f"{kind} not found: {entity_id}")
        self.kind = kind
        self.entity_id = entity_id


class DuplicateEntityError(RegistryError):
    """Raised when an id is registered twice for the same kind of entity."""

    def __init__(self, kind: str, entity_id: str) -> None:
        super().__init__(f"{kind} already registered: {entity_id}")
        self.kind = kind
        self.entity_id = entity_id
