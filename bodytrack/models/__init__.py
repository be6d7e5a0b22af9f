"""ORM models - import all so Base.metadata is complete for migrations."""

from bodytrack.models.body_data import BodyData

__all__ = ["BodyData"]
