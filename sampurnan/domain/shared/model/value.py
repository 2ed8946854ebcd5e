from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Immutable, compared by value. Unknown keys are rejected."""

    model_config = ConfigDict(frozen=True, extra="forbid")
