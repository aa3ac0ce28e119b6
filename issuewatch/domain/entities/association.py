"""Explicit resolved/unresolved state for lazily loaded associations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class Unresolved:
    """Marker for an association that has not been loaded yet."""

    _instance: "Unresolved | None" = None

    def __new__(cls) -> "Unresolved":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNRESOLVED"

    def __bool__(self) -> bool:
        return False


UNRESOLVED = Unresolved()


@dataclass(frozen=True)
class Resolved(Generic[T]):
    """An association whose target has been loaded."""

    value: T


Association = Union[Unresolved, Resolved[T]]


def resolved_value(association: "Association[T]") -> T | None:
    """Return the loaded value or ``None`` while unresolved."""

    if isinstance(association, Resolved):
        return association.value
    return None


def is_resolved(association: "Association[T]") -> bool:
    return isinstance(association, Resolved)


__all__ = [
    "Association",
    "Resolved",
    "UNRESOLVED",
    "Unresolved",
    "is_resolved",
    "resolved_value",
]
