"""Redis connection used by the distributed coach lock."""

import logging

import redis.asyncio as redis
from redis.exceptions import RedisError

from train_booking.config import get_settings

settings = get_settings()
logger = logging.getLogger(__name__)

# Created on first use; stays None with the local lock backend
_redis_client: redis.Redis | None = None


async def get_redis() -> redis.Redis:
    """Get the shared Redis client, connecting lazily."""
    global _redis_client
    if _redis_client is None:
        _redis_client = redis.from_url(
            settings.redis_url,
            encoding="utf-8",
            decode_responses=True,
        )
        logger.info(f"Redis client created for {settings.REDIS_HOST}:{settings.REDIS_PORT}")
    return _redis_client


async def redis_status() -> str:
    """Report Redis reachability for the health endpoint."""
    if settings.LOCK_BACKEND != "redis":
        return "unused"
    try:
        client = await get_redis()
        await client.ping()
    except RedisError as e:
        logger.warning(f"Redis ping failed: {e}")
        return "unavailable"
    return "ok"


async def close_redis() -> None:
    """Close the Redis connection if one was opened."""
    global _redis_client
    if _redis_client is not None:
        await _redis_client.aclose()
        _redis_client = None
