"""Base model for domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Frozen pydantic model shared by entities and render nodes.

    Updates go through ``model_copy(update=...)``, which repositories and use
    cases rely on to enrich comments without touching stored rows.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
