from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from typing import Optional
import logging
import uuid
from datetime import datetime, timezone

from app.models.user import User
from app.schemas.user import UserCreate
from app.core.config import settings
from app.core.exceptions import ConflictError
from app.core.security import get_password_hash, verify_password
from app.core.redis_client import redis_service, revoked_token_key
from app.repositories.base import Repository

logger = logging.getLogger(__name__)


class UserService:
    """Service layer for user operations"""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.users = Repository(db, User)

    async def register(self, user_data: UserCreate) -> User:
        """Create a new user; a taken email raises ConflictError"""
        existing_user = await self.get_user_by_email(user_data.email)
        if existing_user:
            raise ConflictError("Email already registered")

        hashed_password = get_password_hash(user_data.password)

        try:
            user = await self.users.add(
                email=user_data.email,
                password_hash=hashed_password,
                full_name=user_data.full_name,
            )
        except IntegrityError as e:
            # Lost a race with a concurrent registration of the same email
            logger.error(f"User creation failed - integrity error: {e}")
            raise ConflictError("Email already registered")

        logger.info(f"User created successfully: {user.email}")
        return user

    async def get_user_by_id(self, user_id: uuid.UUID) -> Optional[User]:
        """Get user by ID"""
        return await self.users.get(user_id)

    async def get_user_by_email(self, email: str) -> Optional[User]:
        """Get user by email"""
        stmt = select(User).where(User.email == email)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def authenticate_user(self, email: str, password: str) -> Optional[User]:
        """Authenticate user with email and password"""
        user = await self.get_user_by_email(email)
        if not user or not user.is_active:
            return None

        if not verify_password(password, user.password_hash):
            return None

        logger.info(f"User authenticated successfully: {email}")
        return user

    async def revoke_tokens(self, user_id: uuid.UUID) -> bool:
        """Revoke every token issued to a user up to now"""
        revoked = await redis_service.set(
            revoked_token_key(user_id),
            str(datetime.now(timezone.utc).timestamp()),
            expire=settings.TOKEN_REVOCATION_TTL_SECONDS,
        )
        if revoked:
            logger.info(f"All tokens revoked for user: {user_id}")
        return revoked

    async def is_token_revoked(self, user_id: uuid.UUID, issued_at: Optional[float]) -> bool:
        """True when the token was issued at or before the user's last logout"""
        revoked_at = await redis_service.get(revoked_token_key(user_id))
        if revoked_at is None:
            return False
        if issued_at is None:
            return True
        return issued_at <= float(revoked_at)


def get_user_service(db: AsyncSession) -> UserService:
    """Dependency to get user service"""
    return UserService(db)
