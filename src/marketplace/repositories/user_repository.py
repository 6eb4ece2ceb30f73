# src/marketplace/repositories/user_repository.py
from __future__ import annotations

from itertools import count

from marketplace.domain.models import User, UserCreate
from marketplace.domain.ports import UsernameTakenError
from marketplace.repositories.base import AbstractUserRepository


class InMemoryUserRepository(AbstractUserRepository):
    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._ids = count(1)

    async def create(self, payload: UserCreate) -> User:
        if await self.find_by_username(payload.username) is not None:
            raise UsernameTakenError(payload.username)
        user = User(id=next(self._ids), username=payload.username, password=payload.password)
        self._users[user.id] = user
        return user

    async def find_by_id(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    async def find_by_username(self, username: str) -> User | None:
        return next((u for u in self._users.values() if u.username == username), None)
