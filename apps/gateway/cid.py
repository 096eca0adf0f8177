from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from contentid import (
    CidError,
    HashAlgorithm,
    InvalidBase,
    MalformedCid,
    cid as compute_cid,
    get_base,
    parse_cid,
)
from contentid.multibase import resolve_base
from apps.gateway.metrics import MET_CIDS

_log = logging.getLogger(__name__)

router = APIRouter()


class CidRequest(BaseModel):
    data: Any
    hash: HashAlgorithm = HashAlgorithm.SHA2_256
    base: Optional[str] = None


class ParseRequest(BaseModel):
    cid: str


def _base_label(value: Any) -> str:
    # Fixed label set: base32, base58 or invalid
    try:
        return resolve_base(value).value
    except InvalidBase:
        return "invalid"


def _error(status: int, e: CidError) -> JSONResponse:
    return JSONResponse(status_code=status, content=e.to_dict())


@router.post("/v1/cid")
def create_cid(req: CidRequest):
    """Compute the CIDv1 (raw) of a string or JSON object.

    An explicit `base` in the body is validated up front (client error);
    otherwise the process-wide base applies and a bad value there is a
    server misconfiguration.
    """
    if req.base is not None:
        try:
            resolve_base(req.base)
        except InvalidBase as e:
            MET_CIDS.labels(hash=req.hash.value, base=_base_label(req.base), outcome=e.code).inc()
            return _error(400, e)
    base = req.base if req.base is not None else get_base()
    try:
        out = compute_cid(req.data, req.hash, base=base)
    except InvalidBase as e:
        _log.warning("configured base rejected: %r", base)
        MET_CIDS.labels(hash=req.hash.value, base=_base_label(base), outcome=e.code).inc()
        return _error(500, e)
    except CidError as e:
        _log.info("cid request failed: %s", e.code)
        MET_CIDS.labels(hash=req.hash.value, base=_base_label(base), outcome=e.code).inc()
        return _error(422, e)
    MET_CIDS.labels(hash=req.hash.value, base=_base_label(base), outcome="ok").inc()
    return {"cid": out, "hash": req.hash.value, "base": resolve_base(base).value}


@router.post("/v1/cid/parse")
def parse(req: ParseRequest):
    try:
        info = parse_cid(req.cid)
    except (InvalidBase, MalformedCid) as e:
        return _error(400, e)
    return info.to_dict()
