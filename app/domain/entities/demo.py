"""Demo entity — a catalog record keyed by an allocated integer id."""

from dataclasses import dataclass

from app.domain.value_objects.enums import UpdateMode

# Ids are stored as BIGINT.
MIN_ID = -(2**63)
MAX_ID = 2**63 - 1

# Mutable fields and the value each one resets to on a full update.
FIELD_DEFAULTS: dict[str, object] = {
    "name": "",
    "description": "",
    "price": 0.0,
    "category": "",
}


def update_values(changes: dict[str, object], mode: UpdateMode) -> dict[str, object]:
    """Column values an update writes.

    FULL yields every mutable field, the ones missing from *changes* at their
    defaults. PARTIAL yields only the supplied ones, so a concurrent update of
    other fields is never overwritten. Unknown keys and ``id`` are dropped;
    ``None`` means the default.
    """
    values = dict(FIELD_DEFAULTS) if mode == UpdateMode.FULL else {}
    for key, value in changes.items():
        if key in FIELD_DEFAULTS:
            values[key] = FIELD_DEFAULTS[key] if value is None else value
    return values


@dataclass
class Demo:
    id: int | None
    name: str = ""
    description: str = ""
    price: float = 0.0
    category: str = ""

    def apply_update(self, changes: dict[str, object], mode: UpdateMode) -> "Demo":
        """Return a copy of this record with *changes* applied (see update_values)."""
        values = {name: getattr(self, name) for name in FIELD_DEFAULTS}
        values.update(update_values(changes, mode))
        return Demo(id=self.id, **values)
