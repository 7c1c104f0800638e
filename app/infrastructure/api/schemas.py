"""Request bodies for the /demo endpoints.

Field aliases keep the capitalised JSON keys clients already send
(``Name``, ``Price``, ...). Unknown keys are dropped, never stored.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class DemoFieldsIn(BaseModel):
    """Body of POST /demo, PUT /demo/{id} and PATCH /demo/{id}.

    For PATCH only the keys actually present in the body are applied
    (``model_dump(exclude_unset=True)``).
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
        # NaN and infinities cannot be rendered back as JSON.
        allow_inf_nan=False,
    )

    name: str | None = Field(default=None, alias="Name")
    description: str | None = Field(default=None, alias="Description")
    price: float | None = Field(default=None, alias="Price")
    category: str | None = Field(default=None, alias="Category")


class BatchDeleteIn(BaseModel):
    # Validated by BatchDeleteUseCase so bad input maps to InvalidInputError.
    ids: Any = None
