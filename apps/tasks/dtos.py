"""DTOs and API schemas for Tasks app."""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ninja import Schema
from pydantic import StrictBool


@dataclass(frozen=True)
class TaskDTO:
    """Data Transfer Object for Task - what the store hands back to callers."""
    id: int
    title: str
    completed: bool
    created_at: datetime


class TaskOut(Schema):
    id: int
    title: str
    completed: bool
    created_at: datetime


class TaskCreateIn(Schema):
    # Optional here so a missing title reaches the service's own check
    title: Optional[str] = None


class TaskUpdateIn(Schema):
    """
    Partial update. Read with dict(exclude_unset=True) so an omitted field
    stays distinguishable from an explicit null.
    """
    title: Optional[str] = None
    completed: Optional[StrictBool] = None
