"""
Pydantic schemas for subjects and topics.
"""
from typing import Any, Optional

from bacprep.schemas.common import CamelModel


class SubjectCreate(CamelModel):
    name: str
    description: str
    total_topics: int
    icon: str


class Subject(SubjectCreate):
    id: int


class TopicCreate(CamelModel):
    subject_id: int
    name: str
    description: str
    content: Any
    order: int
    difficulty: Optional[str] = None


class Topic(TopicCreate):
    id: int
