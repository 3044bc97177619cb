"""
Credential token storage.

The admin token is set at login, read by the gateway on every request and
cleared at logout. Two backends share the same awaitable interface:

- TokenStore: process-local, lives as long as the store object
- RedisTokenStore: persistent key-value storage shared across processes
"""

from typing import Optional

import redis
import redis.asyncio as aioredis

from payroll_client.core.config import settings
from payroll_client.core.logging import get_logger

logger = get_logger(__name__)


class TokenStore:
    """In-memory token holder keyed by the storage key."""

    def __init__(self, key: str = settings.TOKEN_STORAGE_KEY):
        self.key = key
        self._values: dict[str, str] = {}

    async def get_token(self) -> Optional[str]:
        return self._values.get(self.key) or None

    async def set_token(self, token: str) -> None:
        self._values[self.key] = token

    async def clear_token(self) -> None:
        self._values.pop(self.key, None)


class RedisClient:
    """Shared asyncio Redis connection for token storage."""

    _instance: aioredis.Redis | None = None

    @classmethod
    def get_client(cls) -> aioredis.Redis:
        if cls._instance is None:
            cls._instance = aioredis.Redis(
                host=settings.REDIS_HOST,
                port=settings.REDIS_PORT,
                password=settings.REDIS_PASSWORD or None,
                db=settings.REDIS_DB,
                socket_timeout=settings.REDIS_SOCKET_TIMEOUT,
                socket_connect_timeout=settings.REDIS_SOCKET_TIMEOUT,
                decode_responses=True,
            )
            logger.info(
                f"Token store using Redis at {settings.REDIS_HOST}:{settings.REDIS_PORT}"
                f" (db {settings.REDIS_DB})"
            )
        return cls._instance

    @classmethod
    async def close(cls) -> None:
        if cls._instance is not None:
            await cls._instance.aclose()
            cls._instance = None


class RedisTokenStore(TokenStore):
    """Token held in Redis under the storage key."""

    def __init__(
        self,
        key: str = settings.TOKEN_STORAGE_KEY,
        client: aioredis.Redis | None = None,
    ):
        super().__init__(key)
        self._client = client

    @property
    def client(self) -> aioredis.Redis:
        if self._client is None:
            self._client = RedisClient.get_client()
        return self._client

    async def get_token(self) -> Optional[str]:
        # An unreachable store reads as "no token"; the server decides
        # whether the unauthenticated request is allowed.
        try:
            return await self.client.get(self.key) or None
        except redis.RedisError as e:
            logger.error(f"Token read error: {e}")
            return None

    async def set_token(self, token: str) -> None:
        try:
            await self.client.set(self.key, token)
        except redis.RedisError as e:
            logger.error(f"Token write error: {e}")
            raise

    async def clear_token(self) -> None:
        try:
            await self.client.delete(self.key)
        except redis.RedisError as e:
            logger.error(f"Token delete error: {e}")
            raise


def get_token_store(backend: str | None = None) -> TokenStore:
    """Build the token store selected by TOKEN_BACKEND."""
    backend = (backend or settings.TOKEN_BACKEND).lower()
    if backend == "redis":
        return RedisTokenStore()
    if backend == "memory":
        return TokenStore()
    raise ValueError(f"Unknown token backend: {backend}")
