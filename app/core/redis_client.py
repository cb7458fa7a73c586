import redis.asyncio as redis
import logging
from typing import Optional

from app.core.config import settings

logger = logging.getLogger(__name__)

# Global Redis client
redis_client: Optional[redis.Redis] = None


async def init_redis() -> None:
    """Initialize Redis connection"""
    global redis_client

    try:
        redis_client = redis.from_url(
            settings.REDIS_URL,
            password=settings.REDIS_PASSWORD,
            db=settings.REDIS_DB,
            decode_responses=True,
            socket_connect_timeout=5,
            socket_timeout=5,
            retry_on_timeout=True,
            health_check_interval=30
        )

        # Test connection
        await redis_client.ping()
        logger.info("Redis connection established successfully")

    except Exception as e:
        logger.error(f"Failed to connect to Redis: {e}")
        raise


async def get_redis() -> redis.Redis:
    """Get Redis client instance"""
    if redis_client is None:
        raise RuntimeError("Redis client not initialized")
    return redis_client


async def close_redis() -> None:
    """Close Redis connection"""
    global redis_client
    if redis_client:
        await redis_client.close()
        redis_client = None
        logger.info("Redis connection closed")


class RedisService:
    """Redis helper for token revocation and rate limiting.

    Every call fails soft: errors are logged and a neutral value is returned,
    so a Redis outage never blocks the CRUD endpoints.
    """

    def __init__(self):
        self.client = None

    async def get_client(self) -> redis.Redis:
        """Get Redis client"""
        if not self.client:
            self.client = await get_redis()
        return self.client

    async def set(self, key: str, value: str, expire: Optional[int] = None) -> bool:
        """Set a key-value pair in Redis"""
        try:
            client = await self.get_client()
            return bool(await client.set(key, value, ex=expire))
        except Exception as e:
            logger.error(f"Redis SET error: {e}")
            return False

    async def get(self, key: str) -> Optional[str]:
        """Get a value from Redis"""
        try:
            client = await self.get_client()
            return await client.get(key)
        except Exception as e:
            logger.error(f"Redis GET error: {e}")
            return None

    async def increment(self, key: str, amount: int = 1) -> Optional[int]:
        """Increment a key's value"""
        try:
            client = await self.get_client()
            return await client.incrby(key, amount)
        except Exception as e:
            logger.error(f"Redis INCR error: {e}")
            return None

    async def expire(self, key: str, seconds: int) -> bool:
        """Set expiration for a key"""
        try:
            client = await self.get_client()
            return bool(await client.expire(key, seconds))
        except Exception as e:
            logger.error(f"Redis EXPIRE error: {e}")
            return False


def revoked_token_key(user_id) -> str:
    return f"blacklist:token:{user_id}"


# Global service instance
redis_service = RedisService()
