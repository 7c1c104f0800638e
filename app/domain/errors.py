"""Domain errors — each carries the HTTP status it is reported with."""


class DemoServiceError(Exception):
    """Base class for every error the service reports to a client."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(DemoServiceError):
    status_code = 404

    def __init__(self, demo_id: int):
        super().__init__("Data not found")
        self.demo_id = demo_id


class NoneMatchedError(DemoServiceError):
    """Batch delete matched no records."""

    status_code = 404

    def __init__(self, ids: list[int]):
        super().__init__("No matching data found to delete")
        self.ids = ids


class InvalidInputError(DemoServiceError):
    status_code = 400


class DuplicateKeyError(DemoServiceError):
    """An insert collided on the primary key (allocator misuse)."""

    def __init__(self, demo_id: int):
        super().__init__(f"Duplicate id {demo_id}")
        self.demo_id = demo_id


class StorageUnavailableError(DemoServiceError):
    """The database is unreachable or not configured."""
