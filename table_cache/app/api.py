"""FastAPI wiring for the table cache.

The application owns exactly one cache and hands it to handlers through
``Depends(get_table_cache)``. Under a multi-worker server each worker process
builds its own instance, which ``GET /cache`` makes visible through ``pid``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import logging
import os

from fastapi import Depends, FastAPI, Request
from pydantic import BaseModel

from table_cache.modules.cache import BoundedEvictionCache
from table_cache.modules.log import setup_logging
from table_cache.modules.settings import CacheSettings, build_cache


logger = logging.getLogger(__name__)


class CacheStatsOut(BaseModel):
    pid: int
    size: int
    capacity: int
    hits: int
    misses: int
    evictions: int
    keys: List[str] = []


def get_table_cache(request: Request) -> BoundedEvictionCache:
    return request.app.state.table_cache


def create_app(settings: Optional[CacheSettings] = None, cache: Optional[BoundedEvictionCache] = None) -> FastAPI:
    settings = settings or CacheSettings.from_env()
    setup_logging(settings.log_level_value)
    if cache is None:
        cache = build_cache(settings)
    app = FastAPI(title="Table Cache API", version="0.1.0")
    app.state.table_cache = cache
    logger.info("Table cache ready in pid %d (capacity %d)", os.getpid(), cache.capacity)

    @app.get("/")
    async def root() -> Dict[str, Any]:
        return {"status": "ok", "message": "Table Cache API"}

    @app.get("/cache", response_model=CacheStatsOut)
    async def cache_stats(cache: BoundedEvictionCache = Depends(get_table_cache)) -> CacheStatsOut:
        stats = cache.stats()
        return CacheStatsOut(
            pid=os.getpid(),
            size=stats.size,
            capacity=stats.capacity,
            hits=stats.hits,
            misses=stats.misses,
            evictions=stats.evictions,
            keys=list(stats.keys),
        )

    return app


app = create_app()
