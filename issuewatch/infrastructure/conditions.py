"""Compile domain predicates into SQLAlchemy expressions."""

from __future__ import annotations

from functools import singledispatch

from sqlalchemy import and_, false, true
from sqlalchemy.sql.elements import ColumnElement

from issuewatch.domain.conditions import And, Condition, Eq, In, NotificationField, Range
from issuewatch.infrastructure.models import NotificationModel
from issuewatch.utils import ensure_app_naive_datetime

_COLUMNS = {
    NotificationField.USER_ID: NotificationModel.user_id,
    NotificationField.REPO_ID: NotificationModel.repo_id,
    NotificationField.ISSUE_ID: NotificationModel.issue_id,
    NotificationField.STATUS: NotificationModel.status,
    NotificationField.UPDATED_AT: NotificationModel.updated_at,
}


def _value(field: NotificationField, value):
    if field is NotificationField.UPDATED_AT:
        return ensure_app_naive_datetime(value)
    if field is NotificationField.STATUS:
        return int(value)
    return value


@singledispatch
def to_clause(condition: Condition) -> ColumnElement[bool]:
    """Return the SQL expression equivalent to ``condition``."""

    raise TypeError(f"Unsupported condition: {condition!r}")


@to_clause.register(Eq)
def _(condition: Eq) -> ColumnElement[bool]:
    return _COLUMNS[condition.field] == _value(condition.field, condition.value)


@to_clause.register(Range)
def _(condition: Range) -> ColumnElement[bool]:
    column = _COLUMNS[condition.field]
    bounds = []
    if condition.lower is not None:
        bounds.append(column >= _value(condition.field, condition.lower))
    if condition.upper is not None:
        bounds.append(column <= _value(condition.field, condition.upper))
    if not bounds:
        return true()
    return and_(*bounds)


@to_clause.register(In)
def _(condition: In) -> ColumnElement[bool]:
    if not condition.values:
        return false()
    column = _COLUMNS[condition.field]
    return column.in_([_value(condition.field, value) for value in condition.values])


@to_clause.register(And)
def _(condition: And) -> ColumnElement[bool]:
    if not condition.conditions:
        return true()
    return and_(*(to_clause(part) for part in condition.conditions))


__all__ = ["to_clause"]
