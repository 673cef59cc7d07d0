"""Persistence layer for user data."""

from __future__ import annotations

from sqlalchemy.orm import Session, joinedload

from activity_api.domain.entities import Role, User
from activity_api.infrastructure.models import RoleModel, UserModel


class UserRepository:
    """Provide lookups and creation for site members."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_email(self, email: str) -> User | None:
        model = self._get_model(email=email)
        return self._to_entity(model) if model else None

    def create(
        self, *, name: str, email: str, password_hash: str, role_alias: str
    ) -> User:
        """Insert a member, creating the role on first use."""

        role = self.session.query(RoleModel).filter_by(alias=role_alias).first()
        if role is None:
            role = RoleModel(name=role_alias.title(), alias=role_alias)
            self.session.add(role)
            self.session.flush()

        model = UserModel(
            role_id=role.id,
            name=name,
            email=email,
            password=password_hash,
            is_active=True,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def get_emails(self, user_ids: list[int]) -> dict[int, str]:
        """Return a ``{user_id: email}`` mapping for the known ids."""

        if not user_ids:
            return {}
        rows = (
            self.session.query(UserModel.id, UserModel.email)
            .filter(UserModel.id.in_(user_ids))
            .all()
        )
        return {row.id: row.email for row in rows}

    def _get_model(self, **filters) -> UserModel | None:
        return (
            self.session.query(UserModel)
            .options(joinedload(UserModel.role))
            .filter_by(**filters)
            .first()
        )

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        role = model.role
        return User(
            id=model.id,
            role=Role(id=role.id, name=role.name, alias=role.alias),
            name=model.name,
            email=model.email,
            password=model.password,
            is_active=model.is_active,
            created_at=model.created_at,
        )


__all__ = ["UserRepository"]
