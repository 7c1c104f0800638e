"""Port interface for Demo persistence."""

from __future__ import annotations

from abc import ABC, abstractmethod

from app.domain.entities.demo import Demo


class DemoRepository(ABC):
    @abstractmethod
    async def get_all(self, search: str | None = None) -> list[Demo]:
        """Return all records, or those whose name contains *search* (any case)."""
        ...

    @abstractmethod
    async def get_by_id(self, demo_id: int) -> Demo | None:
        ...

    @abstractmethod
    async def create(self, demo: Demo) -> Demo:
        """Insert a record whose id was already allocated.

        Raises:
            DuplicateKeyError: if the id is taken.
        """
        ...

    @abstractmethod
    async def update(self, demo_id: int, values: dict[str, object]) -> Demo | None:
        """Set only the columns in *values*, atomically, and return the record.

        Returns None if no record has *demo_id*.
        """
        ...

    @abstractmethod
    async def delete(self, demo_id: int) -> Demo | None:
        """Remove a record and return it, or None if it did not exist."""
        ...

    @abstractmethod
    async def delete_many(self, ids: list[int]) -> int:
        """Remove every record in *ids*; unknown ids are skipped. Returns the count."""
        ...
