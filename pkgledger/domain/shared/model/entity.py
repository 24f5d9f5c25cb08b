from pydantic import BaseModel


class Entity(BaseModel):
    """Base for domain objects with identity."""


class Aggregate(Entity):
    """Consistency boundary persisted as one unit by a repository."""
