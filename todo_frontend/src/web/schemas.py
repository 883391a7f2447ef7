from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

TITLE_MIN_LENGTH = 1
TITLE_MAX_LENGTH = 100


# PUBLIC_INTERFACE
class TodoCreate(BaseModel):
    """
    Form fields accepted by POST /todos.

    The title is taken as submitted: it is not stripped, so its length bounds
    apply to exactly what ends up in the list.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Buy milk",
            }
        }
    )

    title: str = Field(
        ...,
        description="Text of the todo item",
        min_length=TITLE_MIN_LENGTH,
        max_length=TITLE_MAX_LENGTH,
    )
