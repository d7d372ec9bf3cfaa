"""SQLAlchemy implementation of user lookup/registration."""

from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fitmaster.models.user import User
from fitmaster.repositories.base import store_errors


class SqlUserRepository:
    def __init__(self, db: AsyncSession):
        self._db = db

    async def get_by_email(self, email: str) -> tuple[uuid.UUID, str] | None:
        with store_errors("load user"):
            result = await self._db.execute(
                select(User.id, User.password_hash).where(User.email == email.lower())
            )
        row = result.one_or_none()
        return (row.id, row.password_hash) if row else None

    async def get(self, user_id: uuid.UUID) -> User | None:
        with store_errors("load user"):
            return await self._db.get(User, user_id)

    async def create(self, email: str, password_hash: str) -> User:
        user = User(email=email.lower(), password_hash=password_hash)
        with store_errors("create user"):
            self._db.add(user)
            await self._db.flush()
            await self._db.refresh(user)
        return user
