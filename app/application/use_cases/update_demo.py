"""UpdateDemoUseCase — full (PUT) or partial (PATCH) update of one record."""

from __future__ import annotations

from app.application.ports.demo_repo import DemoRepository
from app.domain.entities.demo import Demo, update_values
from app.domain.errors import NotFoundError
from app.domain.value_objects.enums import UpdateMode


class UpdateDemoUseCase:
    def __init__(self, demo_repo: DemoRepository):
        self._demos = demo_repo

    async def execute(
        self, demo_id: int, changes: dict[str, object], mode: UpdateMode
    ) -> Demo:
        """Write only the changed columns, in one statement."""
        values = update_values(changes, mode)
        if values:
            updated = await self._demos.update(demo_id, values)
        else:
            # PATCH with nothing to change still reports the record.
            updated = await self._demos.get_by_id(demo_id)

        if updated is None:
            raise NotFoundError(demo_id)
        return updated
