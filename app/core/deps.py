from fastapi import Depends, HTTPException, status, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
import logging
import uuid

from app.core.database import get_db
from app.core.security import verify_token
from app.core.redis_client import redis_service
from app.core.config import settings
from app.models.user import User
from app.services.user_service import get_user_service

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def _credentials_exception(detail: str = "Could not validate credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncSession = Depends(get_db)
) -> User:
    """Resolve the Bearer token to a user or reject the request"""
    if credentials is None:
        raise _credentials_exception("Not authenticated")

    token_data = verify_token(credentials.credentials)
    if token_data is None:
        raise _credentials_exception()

    try:
        user_id = uuid.UUID(token_data.user_id)
    except ValueError:
        logger.warning(f"Token subject is not a user id: {token_data.user_id}")
        raise _credentials_exception()

    user_service = get_user_service(db)

    # Tokens issued before the user's last logout are revoked
    if await user_service.is_token_revoked(user_id, token_data.issued_at):
        raise _credentials_exception("Token has been revoked")

    user = await user_service.get_user_by_id(user_id)
    if user is None:
        raise _credentials_exception()

    return user


async def get_current_active_user(
    current_user: User = Depends(get_current_user)
) -> User:
    """Get current user, rejecting deactivated accounts"""
    if not current_user.is_active:
        raise _credentials_exception("Inactive user")
    return current_user


class RateLimiter:
    """Fixed-window rate limiting per client address"""

    def __init__(self, scope: str):
        self.scope = scope
        self.max_requests = settings.RATE_LIMIT_MAX_REQUESTS
        self.window_seconds = settings.RATE_LIMIT_WINDOW

    async def __call__(self, request: Request) -> None:
        """Check rate limit for IP address"""
        client_ip = request.client.host if request.client else "unknown"
        key = f"rate_limit:{self.scope}:{client_ip}"

        current_count = await redis_service.increment(key)
        if current_count is None:
            # Redis unavailable; do not block requests
            return

        if current_count == 1:
            await redis_service.expire(key, self.window_seconds)

        if current_count > self.max_requests:
            logger.warning(f"Rate limit exceeded for {client_ip} on {self.scope}")
            raise HTTPException(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                detail="Rate limit exceeded"
            )


# Rate limiter instances
auth_rate_limiter = RateLimiter("auth")
general_rate_limiter = RateLimiter("general")
