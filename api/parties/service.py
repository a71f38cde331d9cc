"""
Party request handling.
"""

from __future__ import annotations

import logging

from fastapi import status

from core import db
from core.errors import ApiError

from . import repository

NOT_FOUND_MESSAGE = "Party not found"

logger = logging.getLogger(__name__)


async def list_parties(executor: db.Executor) -> dict:
    try:
        rows = await repository.list_parties(executor)
    except db.QueryError as exc:
        logger.warning("party_query_failed operation=list error=%s", exc.message)
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message) from exc
    return {"message": "success", "data": rows}


async def get_party(executor: db.Executor, party_id: int) -> dict:
    try:
        row = await repository.get_party(executor, party_id)
    except db.QueryError as exc:
        logger.warning("party_query_failed operation=get party_id=%s error=%s", party_id, exc.message)
        raise ApiError(status.HTTP_400_BAD_REQUEST, exc.message) from exc
    return {"message": "success", "data": row}


async def delete_party(executor: db.Executor, party_id: int) -> dict:
    try:
        changes = await repository.delete_party(executor, party_id)
    except db.QueryError as exc:
        logger.warning("party_query_failed operation=delete party_id=%s error=%s", party_id, exc.message)
        raise ApiError(status.HTTP_400_BAD_REQUEST, exc.message) from exc

    if not changes:
        return {"message": NOT_FOUND_MESSAGE}

    logger.info("party_deleted party_id=%s", party_id)
    return {"message": "deleted", "changes": changes, "id": party_id}
