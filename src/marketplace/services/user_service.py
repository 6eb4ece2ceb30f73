from __future__ import annotations

import logging

from marketplace.domain.models import User, UserCreate
from marketplace.repositories.base import AbstractUserRepository

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, repository: AbstractUserRepository) -> None:
        self._repo = repository

    async def register(self, payload: UserCreate) -> User:
        """
        Registers a new user.

        Raises:
            UsernameTakenError: If the username already exists.
        """
        user = await self._repo.create(payload)
        logger.info("Registered user %s (%s)", user.id, user.username)
        return user

    async def get_user(self, user_id: int) -> User | None:
        return await self._repo.find_by_id(user_id)

    async def get_user_by_username(self, username: str) -> User | None:
        return await self._repo.find_by_username(username)
