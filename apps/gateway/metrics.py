from __future__ import annotations

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

# Single registry used by the gateway app and all its modules
REG = CollectorRegistry(auto_describe=True)

# HTTP request metrics (middleware-owned)
REQS = Counter(
    "contentid_http_requests_total",
    "gateway requests",
    ["path", "method"],
    registry=REG,
)
LAT = Histogram(
    "contentid_http_request_seconds",
    "gateway latency",
    ["path", "method"],
    registry=REG,
)

# CIDs computed, by hash/base and outcome (ok or the error code)
MET_CIDS = Counter(
    "contentid_cids_total",
    "cid computations",
    ["hash", "base", "outcome"],
    registry=REG,
)

__all__ = [
    "REG",
    "REQS",
    "LAT",
    "MET_CIDS",
    "CONTENT_TYPE_LATEST",
    "generate_latest",
]
