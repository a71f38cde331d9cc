"""
Pydantic schemas for candidate write endpoints.

Presence is checked first by `core.validation.input_check`; these models only
coerce form/JSON values into the types the driver expects.
"""

from __future__ import annotations

from pydantic import BaseModel

REQUIRED_CREATE_FIELDS = ("first_name", "last_name", "industry_connected")
REQUIRED_UPDATE_FIELDS = ("party_id",)


class CandidateCreate(BaseModel):
    first_name: str
    last_name: str
    industry_connected: bool
    party_id: int | None = None


class CandidatePartyUpdate(BaseModel):
    # Explicit null clears the affiliation.
    party_id: int | None
