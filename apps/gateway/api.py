from __future__ import annotations

import logging
import time

from fastapi import FastAPI, Request, Response

from contentid import supported_algorithms, get_base
from apps.gateway.cid import router as cid_router
from apps.gateway.metrics import (
    CONTENT_TYPE_LATEST,
    REG,
    REQS,
    LAT,
    generate_latest,
)

_log = logging.getLogger(__name__)

app = FastAPI(title="contentid gateway", version="0.1.0")
app.include_router(cid_router)


@app.middleware("http")
async def metrics_mw(request: Request, call_next):
    start = time.perf_counter()
    try:
        resp = await call_next(request)
        return resp
    finally:
        LAT.labels(request.url.path, request.method).observe(time.perf_counter() - start)
        REQS.labels(request.url.path, request.method).inc()


@app.get("/health")
def health():
    return {
        "ok": True,
        "service": "contentid",
        "base": str(get_base()),
        "hashes": [a.value for a in supported_algorithms()],
    }


@app.get("/metrics")
def metrics():
    return Response(content=generate_latest(REG), media_type=CONTENT_TYPE_LATEST)
