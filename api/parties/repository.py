"""
Party persistence (raw SQL).
"""

from __future__ import annotations

from core import db


async def list_parties(executor: db.Executor) -> list[dict]:
    return await db.fetch_all(executor, "SELECT * FROM parties")


async def get_party(executor: db.Executor, party_id: int) -> dict | None:
    return await db.fetch_one(
        executor,
        """
        SELECT *
        FROM parties
        WHERE id = $1
        """,
        party_id,
    )


async def delete_party(executor: db.Executor, party_id: int) -> int:
    # candidates.party_id is ON DELETE SET NULL, see db/schema.sql.
    return await db.execute(
        executor,
        """
        DELETE FROM parties
        WHERE id = $1
        """,
        party_id,
    )
