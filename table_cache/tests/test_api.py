import logging

from fastapi import Depends
from fastapi.testclient import TestClient

from table_cache.app.api import create_app, get_table_cache
from table_cache.modules.cache import BoundedEvictionCache
from table_cache.modules.settings import CacheSettings


def test_root_status():
    client = TestClient(create_app(CacheSettings(capacity=2)))
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_cache_stats_reflect_injected_cache():
    cache = BoundedEvictionCache(2)
    app = create_app(cache=cache)
    cache.put("a", 1)
    cache.put("b", 2)
    cache.put("c", 3)
    cache.get("c")

    data = TestClient(app).get("/cache").json()
    assert data["capacity"] == 2
    assert data["size"] == 2
    assert data["keys"] == ["b", "c"]
    assert data["hits"] == 1
    assert data["evictions"] == 1
    assert isinstance(data["pid"], int)


def test_handlers_share_the_app_cache():
    cache = BoundedEvictionCache(3)
    app = create_app(cache=cache)

    @app.post("/tables/{table_id}")
    async def store(table_id: str, c: BoundedEvictionCache = Depends(get_table_cache)):
        c.put(table_id, {"id": table_id})
        return {"size": c.size()}

    @app.get("/tables/{table_id}")
    async def fetch(table_id: str, c: BoundedEvictionCache = Depends(get_table_cache)):
        return c.get(table_id)

    client = TestClient(app)
    assert client.post("/tables/t1").json() == {"size": 1}
    assert client.get("/tables/t1").json() == {"id": "t1"}
    assert cache.contains("t1")


def test_settings_log_level_applied_with_injected_cache():
    create_app(CacheSettings(capacity=2, log_level="WARNING"), cache=BoundedEvictionCache(4))
    assert logging.getLogger("table_cache").level == logging.WARNING
