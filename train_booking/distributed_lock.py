"""Coach-wide booking lock, in-process or Redis-backed."""

import asyncio
import uuid
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import redis.asyncio as redis

from train_booking.config import get_settings
from train_booking.redis_client import get_redis

settings = get_settings()

COACH_LOCK_KEY = "coach"


class DistributedLockError(Exception):
    """Exception raised when lock acquisition fails."""

    pass


class DistributedLock:
    """
    Redis-based distributed lock implementation.

    Uses SET NX EX pattern for atomic lock acquisition with expiration.
    Released with a Lua script so only the owner can delete the key.
    """

    # Lua script for safe lock release (only release if we own the lock)
    RELEASE_SCRIPT = """
    if redis.call("get", KEYS[1]) == ARGV[1] then
        return redis.call("del", KEYS[1])
    else
        return 0
    end
    """

    def __init__(
        self,
        redis_client: redis.Redis,
        key: str,
        timeout_seconds: int | None = None,
        retry_delay_ms: int | None = None,
        max_retries: int | None = None,
    ):
        """
        Initialize distributed lock.

        Args:
            redis_client: Redis client instance
            key: Lock key name
            timeout_seconds: Lock expiration time in seconds
            retry_delay_ms: Delay between retry attempts in milliseconds
            max_retries: Maximum number of retry attempts
        """
        self.redis = redis_client
        self.key = f"lock:{key}"
        self.timeout_seconds = timeout_seconds or settings.LOCK_TIMEOUT_SECONDS
        self.retry_delay_ms = retry_delay_ms or settings.LOCK_RETRY_DELAY_MS
        self.max_retries = max_retries if max_retries is not None else settings.LOCK_MAX_RETRIES
        self.token: str | None = None
        self._release_script = self.redis.register_script(self.RELEASE_SCRIPT)

    async def acquire(self, blocking: bool = True) -> bool:
        """
        Acquire the lock.

        Args:
            blocking: If True, retry until lock is acquired or max retries reached.
                     If False, try once and return immediately.

        Returns:
            True if lock was acquired, False otherwise.
        """
        self.token = str(uuid.uuid4())
        retries = 0

        while True:
            acquired = await self.redis.set(
                self.key,
                self.token,
                nx=True,
                ex=self.timeout_seconds,
            )

            if acquired:
                return True

            if not blocking or retries >= self.max_retries:
                self.token = None
                return False

            retries += 1
            await asyncio.sleep(self.retry_delay_ms / 1000)

    async def release(self) -> bool:
        """
        Release the lock.

        Returns:
            True if lock was released, False if we didn't own the lock.
        """
        if self.token is None:
            return False

        result = await self._release_script(keys=[self.key], args=[self.token])
        self.token = None
        return bool(result)


@asynccontextmanager
async def distributed_lock(
    redis_client: redis.Redis,
    key: str,
    timeout_seconds: int | None = None,
    blocking: bool = True,
) -> AsyncGenerator[DistributedLock, None]:
    """
    Context manager for distributed lock.

    Usage:
        async with distributed_lock(redis, "coach") as lock:
            # Critical section
            ...

    Raises:
        DistributedLockError: If lock cannot be acquired
    """
    lock = DistributedLock(redis_client, key, timeout_seconds)
    acquired = await lock.acquire(blocking=blocking)

    if not acquired:
        raise DistributedLockError(f"Failed to acquire lock for key: {key}")

    try:
        yield lock
    finally:
        await lock.release()


class LocalCoachLock:
    """Serializes coach mutations within a single process."""

    def __init__(self):
        self._lock = asyncio.Lock()

    @asynccontextmanager
    async def hold(self) -> AsyncGenerator[None, None]:
        async with self._lock:
            yield


class RedisCoachLock:
    """Serializes coach mutations across processes sharing one Redis."""

    def __init__(self, redis_client: redis.Redis, key: str = COACH_LOCK_KEY):
        self.redis = redis_client
        self.key = key

    @asynccontextmanager
    async def hold(self) -> AsyncGenerator[None, None]:
        async with distributed_lock(self.redis, self.key, blocking=True):
            yield


CoachLock = LocalCoachLock | RedisCoachLock

_local_lock: LocalCoachLock | None = None


async def get_coach_lock() -> CoachLock:
    """Get the coach lock for the configured backend."""
    global _local_lock
    if settings.LOCK_BACKEND == "redis":
        return RedisCoachLock(await get_redis())
    if _local_lock is None:
        _local_lock = LocalCoachLock()
    return _local_lock
