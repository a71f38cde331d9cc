"""
API error type rendered as the `{"error": ...}` envelope.
"""

from __future__ import annotations

from typing import Union

ErrorBody = Union[str, list[str]]


class ApiError(Exception):
    def __init__(self, status_code: int, error: ErrorBody):
        super().__init__(error if isinstance(error, str) else "; ".join(error))
        self.status_code = status_code
        self.error = error

    def to_response(self) -> dict:
        return {"error": self.error}
