"""
Pytest fixtures - fake Elasticsearch cluster and HTTP client.
No real cluster: the shared client dependency is overridden with an in-memory fake.
"""

import os
import uuid
from types import SimpleNamespace

# Credentials must exist before the app (and its settings) are imported
os.environ.setdefault("API_KEY", "test-api-key")
os.environ.setdefault("API_KEY_ID", "test-api-key-id")
os.environ.setdefault("CLOUD_ID", "test-cloud-id")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from pizza_api.main import app
from pizza_api.search.elasticsearch_client import get_elasticsearch


class FakeResponse(dict):
    """Stands in for ObjectApiResponse: dict access, .body and .meta.status."""

    def __init__(self, body: dict, status: int = 200):
        super().__init__(body)
        self.meta = SimpleNamespace(status=status)

    @property
    def body(self) -> dict:
        return dict(self)


class FakeIndices:
    def __init__(self, es: "FakeElasticsearch"):
        self.es = es
        self.created: list[dict] = []

    async def exists(self, index: str) -> bool:
        self.es._maybe_fail("indices.exists")
        return index in self.es.indices_present

    async def create(self, index: str, mappings: dict):
        self.es.indices_present.add(index)
        self.created.append({"index": index, "mappings": mappings})
        return FakeResponse({"acknowledged": True, "index": index})


class FakeElasticsearch:
    """In-memory cluster: keeps documents in insertion order, assigns ids on index."""

    def __init__(self):
        self.docs: dict[str, dict] = {}
        self.index_status = 201
        self.fail_with: dict[str, Exception] = {}
        self.reachable = True
        self.calls: list[tuple[str, dict]] = []
        self.indices_present: set[str] = set()
        self.indices = FakeIndices(self)

    def _maybe_fail(self, operation: str) -> None:
        if operation in self.fail_with:
            raise self.fail_with[operation]

    async def index(self, index: str, document: dict):
        self.calls.append(("index", {"index": index, "document": document}))
        self._maybe_fail("index")
        doc_id = uuid.uuid4().hex
        if self.index_status == 201:
            self.docs[doc_id] = dict(document)
            result = "created"
        else:
            result = "noop"
        return FakeResponse(
            {"_index": index, "_id": doc_id, "_version": 1, "result": result},
            status=self.index_status,
        )

    async def search(self, index: str, query: dict):
        self.calls.append(("search", {"index": index, "query": query}))
        self._maybe_fail("search")
        hits = [
            {"_index": index, "_id": doc_id, "_score": 1.0, "_source": source}
            for doc_id, source in self.docs.items()
        ]
        return FakeResponse(
            {"took": 1, "hits": {"total": {"value": len(hits), "relation": "eq"}, "hits": hits}}
        )

    async def ping(self) -> bool:
        self._maybe_fail("ping")
        return self.reachable


MARGHERITA = {
    "name": "Margherita",
    "description": "Classic",
    "price": 8.5,
    "ingredients": ["tomato", "mozzarella", "basil"],
}


@pytest.fixture
def fake_es() -> FakeElasticsearch:
    return FakeElasticsearch()


@pytest.fixture
def margherita() -> dict:
    return dict(MARGHERITA, ingredients=list(MARGHERITA["ingredients"]))


@pytest_asyncio.fixture
async def client(fake_es: FakeElasticsearch):
    async def override_get_elasticsearch():
        return fake_es

    app.dependency_overrides[get_elasticsearch] = override_get_elasticsearch
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def make_api_error():
    """Build an elasticsearch.ApiError carrying the given HTTP status."""
    from elastic_transport import ApiResponseMeta, HttpHeaders, NodeConfig
    from elasticsearch import ApiError

    def _make(status: int, message: str = "security_exception") -> ApiError:
        meta = ApiResponseMeta(
            status=status,
            http_version="1.1",
            headers=HttpHeaders(),
            duration=0.0,
            node=NodeConfig("https", "localhost", 443),
        )
        return ApiError(message, meta=meta, body={"error": {"type": message}})

    return _make
