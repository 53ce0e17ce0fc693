"""Shared base for domain entities"""

import uuid
from datetime import datetime, timezone
from sqlmodel import SQLModel


class BaseModel(SQLModel):
    """Base class for all domain entities and value objects"""


def generate_uuid() -> str:
    """Opaque unique identifier for new entities"""
    return uuid.uuid4().hex


def utc_now() -> datetime:
    """Current time as a naive UTC datetime"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_naive_utc(value: datetime) -> datetime:
    """Convert an aware datetime to naive UTC; naive values pass through"""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)
