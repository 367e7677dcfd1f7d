"""
Pydantic schemas for badges.
"""
from datetime import datetime

from bacprep.schemas.common import CamelModel


class BadgeCreate(CamelModel):
    name: str
    description: str
    icon: str
    criteria: str


class Badge(BadgeCreate):
    id: int


class UserBadge(CamelModel):
    id: int
    user_id: int
    badge_id: int
    earned_at: datetime


class UserBadgeDetailed(UserBadge):
    """Awarded badge joined with its definition."""

    badge: Badge
