"""CreateDemoUseCase — allocate an id, then insert the record."""

from __future__ import annotations

import logging

from app.application.ports.demo_repo import DemoRepository
from app.application.ports.sequence_allocator import SequenceAllocator
from app.domain.entities.demo import Demo
from app.domain.value_objects.enums import UpdateMode

logger = logging.getLogger(__name__)


class CreateDemoUseCase:
    """Assigns a fresh sequence value as the id of every new Demo."""

    def __init__(
        self,
        allocator: SequenceAllocator,
        demo_repo: DemoRepository,
        sequence_name: str,
    ):
        self._allocator = allocator
        self._demos = demo_repo
        self._sequence_name = sequence_name

    async def execute(self, fields: dict[str, object]) -> Demo:
        """Create a Demo from *fields*.

        Order matters:
        1. Allocate the id (if this raises, nothing is written)
        2. Build the record, missing fields at their defaults
        3. Insert
        """
        demo_id = await self._allocator.next_value(self._sequence_name)
        demo = Demo(id=demo_id).apply_update(fields, UpdateMode.FULL)
        created = await self._demos.create(demo)
        logger.info("Demo %d created", created.id)
        return created
