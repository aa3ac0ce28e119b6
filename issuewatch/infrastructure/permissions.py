"""Repository unit permission checks."""

from __future__ import annotations

from sqlalchemy.orm import Session

from issuewatch.domain.entities import AccessMode, Repository, UnitType
from issuewatch.infrastructure.models import (
    CollaborationModel,
    RepoUnitModel,
    UserModel,
)


class UnitPermissionChecker:
    """Answer "can this user read this unit of this repository".

    Every call reads the store again; nothing is cached between calls.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def check_unit_user(
        self, repository: Repository, user_id: int, unit_type: UnitType
    ) -> bool:
        user = self.session.get(UserModel, user_id)
        if user is None or not user.is_active:
            return False
        if not self._unit_enabled(repository.id, unit_type):
            return False
        if user.is_admin or repository.owner_id == user_id:
            return True
        return self.access_mode(repository, user_id) >= AccessMode.READ

    def access_mode(self, repository: Repository, user_id: int) -> AccessMode:
        if repository.owner_id == user_id:
            return AccessMode.OWNER
        collaboration = (
            self.session.query(CollaborationModel)
            .filter(CollaborationModel.repo_id == repository.id)
            .filter(CollaborationModel.user_id == user_id)
            .one_or_none()
        )
        if collaboration is not None:
            return AccessMode(collaboration.mode)
        if not repository.is_private:
            return AccessMode.READ
        return AccessMode.NONE

    def _unit_enabled(self, repo_id: int, unit_type: UnitType) -> bool:
        return (
            self.session.query(RepoUnitModel.id)
            .filter(RepoUnitModel.repo_id == repo_id)
            .filter(RepoUnitModel.type == int(unit_type))
            .first()
            is not None
        )


__all__ = ["UnitPermissionChecker"]
