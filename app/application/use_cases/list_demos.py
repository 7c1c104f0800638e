"""ListDemosUseCase — all records, optionally filtered by name."""

from __future__ import annotations

from app.application.ports.demo_repo import DemoRepository
from app.domain.entities.demo import Demo


class ListDemosUseCase:
    def __init__(self, demo_repo: DemoRepository):
        self._demos = demo_repo

    async def execute(self, search: str | None = None) -> list[Demo]:
        # "" means no filter, same as an absent query parameter.
        return await self._demos.get_all(search or None)
