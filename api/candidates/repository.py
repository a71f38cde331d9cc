"""
Candidate persistence (raw SQL).
"""

from __future__ import annotations

from core import db

_SELECT_WITH_PARTY = """
    SELECT candidates.id,
           candidates.first_name,
           candidates.last_name,
           candidates.industry_connected,
           candidates.party_id,
           parties.name AS party_name
    FROM candidates
    LEFT JOIN parties ON candidates.party_id = parties.id
"""


async def list_candidates(executor: db.Executor) -> list[dict]:
    return await db.fetch_all(executor, _SELECT_WITH_PARTY)


async def get_candidate(executor: db.Executor, candidate_id: int) -> dict | None:
    return await db.fetch_one(
        executor,
        _SELECT_WITH_PARTY + "WHERE candidates.id = $1",
        candidate_id,
    )


async def create_candidate(
    executor: db.Executor,
    *,
    first_name: str,
    last_name: str,
    industry_connected: bool,
    party_id: int | None = None,
) -> int:
    return await db.execute(
        executor,
        """
        INSERT INTO candidates (first_name, last_name, industry_connected, party_id)
        VALUES ($1, $2, $3, $4)
        """,
        first_name,
        last_name,
        industry_connected,
        party_id,
    )


async def update_candidate_party(
    executor: db.Executor,
    candidate_id: int,
    *,
    party_id: int | None,
) -> int:
    return await db.execute(
        executor,
        """
        UPDATE candidates
        SET party_id = $1
        WHERE id = $2
        """,
        party_id,
        candidate_id,
    )


async def delete_candidate(executor: db.Executor, candidate_id: int) -> int:
    return await db.execute(
        executor,
        """
        DELETE FROM candidates
        WHERE id = $1
        """,
        candidate_id,
    )
