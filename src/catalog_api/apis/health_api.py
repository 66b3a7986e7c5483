# coding: utf-8

from typing import Dict  # noqa: F401

from fastapi import APIRouter

router = APIRouter()


@router.get(
    "/api/v1/health",
    tags=["Health"],
    summary="Liveness probe",
)
async def get_health() -> Dict[str, str]:
    return {"status": "ok"}
