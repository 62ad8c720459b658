"""Shared pydantic configuration for post entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable entity base.

    Changes to a post are expressed as store updates or ``model_copy``,
    never by assigning to a loaded instance.
    """

    model_config = ConfigDict(frozen=True)
