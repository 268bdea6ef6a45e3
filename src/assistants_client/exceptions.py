from __future__ import annotations

from typing import Optional


class AssistantsError(Exception):
    """Raised for any failure building, sending or decoding an API request."""

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"{self.message} (status {self.status_code})"
        return self.message
