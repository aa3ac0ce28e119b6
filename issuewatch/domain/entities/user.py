"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class User:
    """Core attributes describing an account that can watch issues."""

    id: int
    name: str
    email: str
    is_active: bool = True
    is_admin: bool = False
    created_at: datetime | None = None


__all__ = ["User"]
