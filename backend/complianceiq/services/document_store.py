"""Document store — Redis-backed document record CRUD."""

import json
from typing import Optional

import structlog

from complianceiq.config import get_settings

logger = structlog.get_logger()

# Keep the last N uploads in the recent list
RECENT_LIMIT = 100


class DocumentStore:
    """Manages document records in Redis."""

    def __init__(self, redis_client, ttl_seconds: Optional[int] = None):
        self.redis = redis_client
        self.ttl = ttl_seconds or get_settings().DOCUMENT_TTL_SECONDS
        self._prefix = "complianceiq:document:"

    def _key(self, document_id: str) -> str:
        return f"{self._prefix}{document_id}"

    async def create(self, document_id: str, record: dict) -> None:
        """Store a new document record."""
        key = self._key(document_id)
        await self.redis.setex(key, self.ttl, json.dumps(record, default=str))

        # Add to recent documents list
        await self.redis.lpush(f"{self._prefix}recent", document_id)
        await self.redis.ltrim(f"{self._prefix}recent", 0, RECENT_LIMIT - 1)

        logger.info("document_record_created", document_id=document_id)

    async def get(self, document_id: str) -> Optional[dict]:
        """Retrieve a document record."""
        data = await self.redis.get(self._key(document_id))
        if data is None:
            return None
        return json.loads(data)

    async def update(self, document_id: str, updates: dict) -> dict:
        """Apply partial updates to a document record and return the new record."""
        current = await self.get(document_id)
        if current is None:
            raise KeyError(f"Document {document_id} not found")

        current.update(updates)
        await self.redis.setex(self._key(document_id), self.ttl, json.dumps(current, default=str))
        return current

    async def update_status(self, document_id: str, status: str) -> dict:
        """Quick status update."""
        return await self.update(document_id, {"status": status})

    async def list_recent(self, limit: int = 20) -> list[str]:
        """List recent document IDs, newest first."""
        ids = await self.redis.lrange(f"{self._prefix}recent", 0, limit - 1)
        return [i.decode() if isinstance(i, bytes) else i for i in ids]

    async def delete(self, document_id: str) -> None:
        """Delete a document record."""
        await self.redis.delete(self._key(document_id))
        await self.redis.lrem(f"{self._prefix}recent", 0, document_id)
        logger.info("document_record_deleted", document_id=document_id)

    async def exists(self, document_id: str) -> bool:
        """Check if a document record exists."""
        return bool(await self.redis.exists(self._key(document_id)))
