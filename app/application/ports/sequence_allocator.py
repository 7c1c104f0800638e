"""Port interface for the named sequence allocator."""

from abc import ABC, abstractmethod


class SequenceAllocator(ABC):
    @abstractmethod
    async def next_value(self, name: str) -> int:
        """Atomically increment the named counter and return the NEW value.

        A missing counter is created at 0 and incremented to 1 in the same
        statement. Returned values are strictly increasing per *name* and are
        never reused.

        Raises:
            StorageUnavailableError: if the counter store cannot be reached.
        """
        ...
