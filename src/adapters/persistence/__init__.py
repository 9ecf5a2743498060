from .in_memory_registry_repository import InMemoryRegistryRepository

__all__ = [
    "InMemoryRegistryRepository",
]
