"""
Account service - registration and credential checks.

Passwords are hashed with bcrypt before they reach storage and are verified
with bcrypt.checkpw, which compares in constant time.
"""
import asyncio
import logging
from typing import List

import bcrypt

from storefront.exceptions import AuthenticationError, ConflictError
from storefront.models import Order, User, UserCreate, UserPublic
from storefront.storage import StorageInterface

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    """Hash a password using bcrypt."""
    return bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt()).decode('utf-8')


def verify_password(password: str, password_hash: str) -> bool:
    """Verify a password against its hash."""
    try:
        return bcrypt.checkpw(password.encode('utf-8'), password_hash.encode('utf-8'))
    except ValueError:
        # Stored value is not a bcrypt hash.
        return False


def to_public(user: User) -> UserPublic:
    """Drop the password hash from a user record."""
    return UserPublic.model_validate(user.model_dump(exclude={"password"}))


class AccountService:
    """Service for user accounts."""

    def __init__(self, storage: StorageInterface):
        self.storage = storage

    async def register(self, user_data: UserCreate) -> UserPublic:
        """
        Create a user account.

        Args:
            user_data: Registration payload with a plain text password

        Returns:
            The new user without the password hash

        Raises:
            ConflictError: If the email or username is taken
        """
        if await self.storage.get_user_by_email(user_data.email):
            raise ConflictError("Email already exists")
        if await self.storage.get_user_by_username(user_data.username):
            raise ConflictError("Username already exists")

        loop = asyncio.get_running_loop()
        password_hash = await loop.run_in_executor(None, hash_password, user_data.password)
        user = await self.storage.create_user(user_data.model_copy(update={"password": password_hash}))
        logger.info(f"Created user {user.id} with username '{user.username}'")
        return to_public(user)

    async def authenticate(self, email: str, password: str) -> UserPublic:
        """
        Check credentials.

        Raises:
            AuthenticationError: If no account matches
        """
        user = await self.storage.get_user_by_email(email)
        if user is None:
            raise AuthenticationError("Invalid credentials")

        loop = asyncio.get_running_loop()
        if not await loop.run_in_executor(None, verify_password, password, user.password):
            raise AuthenticationError("Invalid credentials")
        return to_public(user)

    async def list_orders(self, user_id: int) -> List[Order]:
        return await self.storage.get_user_orders(user_id)
