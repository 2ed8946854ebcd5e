from pydantic import BaseModel, ConfigDict


class Aggregate(BaseModel):
    """Base for records owned by the store. Mutations are re-validated."""

    model_config = ConfigDict(validate_assignment=True)
