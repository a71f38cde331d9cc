"""
Candidate request handling: validation, one statement, response envelope.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import status

from core import db
from core.errors import ApiError
from core.validation import input_check, parse_model

from . import repository, schemas

NOT_FOUND_MESSAGE = "Candidate not found"

logger = logging.getLogger(__name__)


def _query_failed(exc: db.QueryError, *, operation: str, status_code: int) -> ApiError:
    logger.warning("candidate_query_failed operation=%s error=%s", operation, exc.message)
    return ApiError(status_code, exc.message)


async def list_candidates(executor: db.Executor) -> dict:
    try:
        rows = await repository.list_candidates(executor)
    except db.QueryError as exc:
        raise _query_failed(exc, operation="list", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR) from exc
    return {"message": "success", "data": rows}


async def get_candidate(executor: db.Executor, candidate_id: int) -> dict:
    try:
        row = await repository.get_candidate(executor, candidate_id)
    except db.QueryError as exc:
        raise _query_failed(exc, operation="get", status_code=status.HTTP_400_BAD_REQUEST) from exc
    # No match still answers "success" with null data.
    return {"message": "success", "data": row}


async def create_candidate(executor: db.Executor, payload: dict[str, Any]) -> dict:
    errors = input_check(payload, *schemas.REQUIRED_CREATE_FIELDS)
    if errors:
        raise ApiError(status.HTTP_400_BAD_REQUEST, errors)

    values = dict(payload)
    if values.get("party_id") == "":
        values["party_id"] = None
    candidate = parse_model(schemas.CandidateCreate, values)

    try:
        changes = await repository.create_candidate(
            executor,
            first_name=candidate.first_name,
            last_name=candidate.last_name,
            industry_connected=candidate.industry_connected,
            party_id=candidate.party_id,
        )
    except db.QueryError as exc:
        raise _query_failed(exc, operation="create", status_code=status.HTTP_400_BAD_REQUEST) from exc

    logger.info("candidate_created first_name=%s last_name=%s", candidate.first_name, candidate.last_name)
    return {"message": "success", "data": payload, "changes": changes}


async def update_candidate_party(executor: db.Executor, candidate_id: int, payload: dict[str, Any]) -> dict:
    errors = input_check(
        payload,
        *schemas.REQUIRED_UPDATE_FIELDS,
        nullable=schemas.REQUIRED_UPDATE_FIELDS,
    )
    if errors:
        raise ApiError(status.HTTP_400_BAD_REQUEST, errors)

    values = dict(payload)
    if values.get("party_id") == "":
        values["party_id"] = None
    update = parse_model(schemas.CandidatePartyUpdate, values)

    try:
        changes = await repository.update_candidate_party(executor, candidate_id, party_id=update.party_id)
    except db.QueryError as exc:
        raise _query_failed(exc, operation="update", status_code=status.HTTP_400_BAD_REQUEST) from exc

    if not changes:
        return {"message": NOT_FOUND_MESSAGE}

    logger.info("candidate_party_updated candidate_id=%s party_id=%s", candidate_id, update.party_id)
    return {"message": "success", "data": payload, "changes": changes}


async def delete_candidate(executor: db.Executor, candidate_id: int) -> dict:
    try:
        changes = await repository.delete_candidate(executor, candidate_id)
    except db.QueryError as exc:
        raise _query_failed(exc, operation="delete", status_code=status.HTTP_400_BAD_REQUEST) from exc

    if not changes:
        return {"message": NOT_FOUND_MESSAGE}

    logger.info("candidate_deleted candidate_id=%s", candidate_id)
    return {"message": "deleted", "changes": changes, "id": candidate_id}
