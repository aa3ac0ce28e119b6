"""Persistence layer for user data."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sqlalchemy.orm import Session

from issuewatch.domain.entities import User
from issuewatch.domain.exceptions import NotFoundError
from issuewatch.infrastructure.models import UserModel


class UserRepository:
    """Read and create user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> User | None:
        model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    def get_or_raise(self, user_id: int) -> User:
        user = self.get(user_id)
        if user is None:
            raise NotFoundError("user", user_id)
        return user

    def list_by_ids(self, user_ids: Iterable[int]) -> Sequence[User]:
        ids = list(user_ids)
        if not ids:
            return []
        query = self.session.query(UserModel).filter(UserModel.id.in_(ids))
        return [self._to_entity(model) for model in query.all()]

    def create(self, user: User) -> User:
        model = UserModel(
            id=user.id or None,
            name=user.name,
            email=user.email,
            is_active=user.is_active,
            is_admin=user.is_admin,
        )
        self.session.add(model)
        self.session.flush()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            name=model.name,
            email=model.email,
            is_active=model.is_active,
            is_admin=model.is_admin,
            created_at=model.created_at,
        )


__all__ = ["UserRepository"]
