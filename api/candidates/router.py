"""
FastAPI router for candidate endpoints.
"""

from __future__ import annotations

from typing import Any

import asyncpg
from fastapi import APIRouter, Depends

from core import db
from core.validation import read_payload

from . import service

router = APIRouter(prefix="/api")


@router.get("/candidates")
async def list_candidates(pool: asyncpg.Pool = Depends(db.get_pool)) -> dict:
    return await service.list_candidates(pool)


@router.get("/candidate/{candidate_id}")
async def get_candidate(candidate_id: int, pool: asyncpg.Pool = Depends(db.get_pool)) -> dict:
    return await service.get_candidate(pool, candidate_id)


@router.post("/candidate")
async def create_candidate(
    payload: dict[str, Any] = Depends(read_payload),
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> dict:
    """
    Create a candidate. `party_id` is optional.
    """
    return await service.create_candidate(pool, payload)


@router.put("/candidate/{candidate_id}")
async def update_candidate_party(
    candidate_id: int,
    payload: dict[str, Any] = Depends(read_payload),
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> dict:
    """
    Change only the candidate's party; `"party_id": null` clears it.
    """
    return await service.update_candidate_party(pool, candidate_id, payload)


@router.delete("/candidate/{candidate_id}")
async def delete_candidate(candidate_id: int, pool: asyncpg.Pool = Depends(db.get_pool)) -> dict:
    return await service.delete_candidate(pool, candidate_id)
