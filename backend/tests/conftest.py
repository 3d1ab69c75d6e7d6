import pytest
from fastapi.testclient import TestClient

from complianceiq.main import app
from complianceiq.samples import COMPLIANT_SOP
from complianceiq.services.document_service import DocumentService
from complianceiq.services.document_store import DocumentStore
from complianceiq.services.rate_limiter import rate_limiter
from complianceiq.validators import ValidationEngine
from complianceiq.validators.rules import clear_cache


class InMemoryRedis:
    """Just enough of the redis.asyncio client for DocumentStore."""

    def __init__(self):
        self.values: dict[str, str] = {}
        self.lists: dict[str, list[str]] = {}

    async def ping(self):
        return True

    async def setex(self, key, ttl, value):
        self.values[key] = value

    async def get(self, key):
        return self.values.get(key)

    async def delete(self, key):
        return 1 if self.values.pop(key, None) is not None else 0

    async def exists(self, key):
        return int(key in self.values)

    async def lpush(self, key, value):
        self.lists.setdefault(key, []).insert(0, value)

    async def ltrim(self, key, start, end):
        self.lists[key] = self.lists.get(key, [])[start:end + 1]

    async def lrange(self, key, start, end):
        return self.lists.get(key, [])[start:end + 1]

    async def lrem(self, key, count, value):
        items = self.lists.get(key, [])
        self.lists[key] = [i for i in items if i != value]


@pytest.fixture
def engine():
    return ValidationEngine()


@pytest.fixture
def compliant_text():
    return COMPLIANT_SOP


@pytest.fixture
def redis_client():
    return InMemoryRedis()


@pytest.fixture
def store(redis_client):
    return DocumentStore(redis_client, ttl_seconds=60)


@pytest.fixture
def document_service(store):
    return DocumentService(store, rules_path="")


@pytest.fixture(autouse=True)
def _reset_shared_state():
    clear_cache()
    rate_limiter.reset()
    yield
    clear_cache()
    rate_limiter.reset()


@pytest.fixture
def client(redis_client, document_service):
    app.state.redis = redis_client
    app.state.document_service = document_service
    return TestClient(app)
