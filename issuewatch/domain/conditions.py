"""Typed predicates used to filter notification queries.

A condition is one of :class:`Eq`, :class:`Range`, :class:`In` or
:class:`And`. Conditions refer to :class:`NotificationField` members rather
than column names; the infrastructure layer compiles them into SQL.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Union


class NotificationField(str, Enum):
    """Filterable attributes of a notification record."""

    USER_ID = "user_id"
    REPO_ID = "repo_id"
    ISSUE_ID = "issue_id"
    STATUS = "status"
    UPDATED_AT = "updated_at"


@dataclass(frozen=True)
class Eq:
    field: NotificationField
    value: Any


@dataclass(frozen=True)
class Range:
    """Inclusive range; a ``None`` bound leaves that side open."""

    field: NotificationField
    lower: Any = None
    upper: Any = None


@dataclass(frozen=True)
class In:
    field: NotificationField
    values: tuple[Any, ...]


@dataclass(frozen=True)
class And:
    """Conjunction of conditions. An empty conjunction matches everything."""

    conditions: tuple["Condition", ...] = ()


Condition = Union[Eq, Range, In, And]


def and_(*conditions: Condition | None) -> And:
    """Combine ``conditions`` into a flat :class:`And`, skipping ``None``."""

    flattened: list[Condition] = []
    for condition in conditions:
        if condition is None:
            continue
        if isinstance(condition, And):
            flattened.extend(condition.conditions)
        else:
            flattened.append(condition)
    return And(tuple(flattened))


def in_(field: NotificationField, values: Iterable[Any]) -> In:
    return In(field, tuple(values))


__all__ = [
    "And",
    "Condition",
    "Eq",
    "In",
    "NotificationField",
    "Range",
    "and_",
    "in_",
]
