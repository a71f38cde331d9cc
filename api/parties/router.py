"""
FastAPI router for party endpoints. Parties are read-only here apart from delete.
"""

from __future__ import annotations

import asyncpg
from fastapi import APIRouter, Depends

from core import db

from . import service

router = APIRouter(prefix="/api")


@router.get("/parties")
async def list_parties(pool: asyncpg.Pool = Depends(db.get_pool)) -> dict:
    return await service.list_parties(pool)


@router.get("/party/{party_id}")
async def get_party(party_id: int, pool: asyncpg.Pool = Depends(db.get_pool)) -> dict:
    return await service.get_party(pool, party_id)


@router.delete("/party/{party_id}")
async def delete_party(party_id: int, pool: asyncpg.Pool = Depends(db.get_pool)) -> dict:
    """
    Delete a party. Its candidates stay, with `party_id` set to null.
    """
    return await service.delete_party(pool, party_id)
