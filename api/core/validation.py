"""
Request payload helpers: body parsing and required-field checks.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from fastapi import Request, status
from pydantic import BaseModel, ValidationError

from .errors import ApiError

ModelT = TypeVar("ModelT", bound=BaseModel)


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def input_check(payload: Any, *required_fields: str, nullable: Iterable[str] = ()) -> list[str]:
    """
    Return one "<field> is required" message per missing field.

    A field in `nullable` only needs its key to be present.
    """
    allow_null = set(nullable)
    if not isinstance(payload, Mapping):
        return [f"{field} is required" for field in required_fields]

    errors: list[str] = []
    for field in required_fields:
        if field not in payload:
            errors.append(f"{field} is required")
        elif field not in allow_null and _is_blank(payload[field]):
            errors.append(f"{field} is required")
    return errors


def parse_model(model: type[ModelT], payload: Mapping[str, Any]) -> ModelT:
    """
    Coerce a checked payload into `model`, rejecting bad values with a 400.
    """
    try:
        return model.model_validate(dict(payload))
    except ValidationError as exc:
        messages = [
            f"{'.'.join(str(loc) for loc in err['loc']) or 'body'}: {err['msg']}"
            for err in exc.errors()
        ]
        raise ApiError(status.HTTP_400_BAD_REQUEST, messages) from exc


async def read_payload(request: Request) -> dict[str, Any]:
    """
    FastAPI dependency returning the request body as a dict.

    Accepts JSON and URL-encoded forms. An empty or unparsable body yields `{}`
    so the required-field check reports what is missing.
    """
    content_type = request.headers.get("content-type", "").split(";", 1)[0].strip().lower()
    if content_type in ("application/x-www-form-urlencoded", "multipart/form-data"):
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}

    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        data = json.loads(raw)
    except ValueError:
        raise ApiError(status.HTTP_400_BAD_REQUEST, ["body is not valid JSON"])
    return data if isinstance(data, dict) else {}
