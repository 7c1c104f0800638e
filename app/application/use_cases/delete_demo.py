"""Single and batch deletion of Demo records."""

from __future__ import annotations

import logging
import re

from app.application.ports.demo_repo import DemoRepository
from app.domain.entities.demo import MAX_ID, MIN_ID, Demo
from app.domain.errors import InvalidInputError, NoneMatchedError, NotFoundError

logger = logging.getLogger(__name__)

_INT_STRING = re.compile(r"\s*-?[0-9]+\s*")


class DeleteDemoUseCase:
    def __init__(self, demo_repo: DemoRepository):
        self._demos = demo_repo

    async def execute(self, demo_id: int) -> Demo:
        deleted = await self._demos.delete(demo_id)
        if deleted is None:
            raise NotFoundError(demo_id)
        logger.info("Demo %d deleted", demo_id)
        return deleted


class BatchDeleteUseCase:
    """Deletes every listed id that exists; unknown ids are silently skipped."""

    def __init__(self, demo_repo: DemoRepository):
        self._demos = demo_repo

    async def execute(self, raw_ids: object) -> int:
        """Delete the records in *raw_ids*.

        Args:
            raw_ids: the ``ids`` value from the request body. Must be a
                non-empty list of integers (integer strings are accepted).

        Returns:
            Number of records removed (always > 0).

        Raises:
            InvalidInputError: *raw_ids* is missing, empty or not all integers.
            NoneMatchedError: none of the ids existed.
        """
        ids = parse_id_list(raw_ids)
        count = await self._demos.delete_many(ids)
        if count == 0:
            raise NoneMatchedError(ids)
        logger.info("Batch delete removed %d of %d requested ids", count, len(ids))
        return count


def parse_id_list(raw_ids: object) -> list[int]:
    """Coerce a JSON ``ids`` value into a de-duplicated list of ints."""
    if not isinstance(raw_ids, list) or not raw_ids:
        raise InvalidInputError("Please provide a non-empty list of ids to delete")

    ids: list[int] = []
    for raw in raw_ids:
        # bool is an int subclass; true/false are not ids.
        if isinstance(raw, bool):
            raise InvalidInputError(f"Invalid id: {raw!r}")
        if isinstance(raw, int):
            value = raw
        elif isinstance(raw, float) and raw.is_integer():
            value = int(raw)
        elif isinstance(raw, str) and _INT_STRING.fullmatch(raw):
            value = int(raw)
        else:
            raise InvalidInputError(f"Invalid id: {raw!r}")
        if not MIN_ID <= value <= MAX_ID:
            raise InvalidInputError(f"Id out of range: {raw!r}")
        if value not in ids:
            ids.append(value)
    return ids
