"""Database models for Drivya Match."""

from drivya.models.base import Base
from drivya.models.organization import MatchExclusionRow, OrganizationRow

__all__ = [
    "Base",
    "MatchExclusionRow",
    "OrganizationRow",
]
