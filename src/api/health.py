from __future__ import annotations

from fastapi import APIRouter

from src.shared.response import ResponseEnvelope, build_meta


router = APIRouter(tags=["health"])


@router.get("/health")
def health_check() -> ResponseEnvelope[dict]:
    meta = build_meta(source="system", time_window="now")
    return ResponseEnvelope(data={"status": "ok"}, meta=meta)


@router.get("/healthz")
def health_check_liveness() -> ResponseEnvelope[dict]:
    meta = build_meta(source="system", time_window="now")
    return ResponseEnvelope(data={"status": "ok"}, meta=meta)
