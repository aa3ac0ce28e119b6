"""Domain entity representing a code repository."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum


class UnitType(IntEnum):
    """Capability areas of a repository gated by per-user read permission."""

    CODE = 1
    ISSUES = 2
    PULL_REQUESTS = 3
    RELEASES = 4
    WIKI = 5


class AccessMode(IntEnum):
    """Access level a user holds on a repository."""

    NONE = 0
    READ = 1
    WRITE = 2
    ADMIN = 3
    OWNER = 4


@dataclass(frozen=True)
class Repository:
    """Repository containing issues and pull requests."""

    id: int
    owner_id: int
    owner_name: str
    name: str
    description: str = ""
    is_private: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def full_name(self) -> str:
        return f"{self.owner_name}/{self.name}"

    def html_url(self, app_url: str) -> str:
        return f"{app_url}{self.full_name}"

    def api_url(self, app_url: str) -> str:
        return f"{app_url}api/v1/repos/{self.full_name}"


__all__ = ["AccessMode", "Repository", "UnitType"]
