from collections.abc import Callable
from typing import ClassVar

from docpolicy.config.settings import Settings
from docpolicy.database.repositories.issuance_repository import IssuanceRepository
from docpolicy.issuance.base import BaseIssuanceStore
from docpolicy.issuance.memory_store import InMemoryIssuanceStore


class IssuanceStoreFactory:
    """Creates the issuance counter store selected in settings."""

    STORES: ClassVar[dict[str, Callable[[Settings], BaseIssuanceStore]]] = {
        "memory": lambda settings: InMemoryIssuanceStore(),
        "postgres": lambda settings: IssuanceRepository(table=settings.issuance_table),
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseIssuanceStore:
        name = settings.issuance_store.lower()
        builder = cls.STORES.get(name)
        if builder is None:
            raise ValueError(
                f"Unknown issuance store '{name}'. Choose from: {list(cls.STORES)}"
            )
        return builder(settings)
