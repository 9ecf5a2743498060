from .registry_repository import IRegistryRepository

__all__ = [
    "IRegistryRepository",
]
