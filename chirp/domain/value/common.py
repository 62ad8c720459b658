"""Value object base."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Immutable, compared by value."""

    model_config = ConfigDict(frozen=True)
