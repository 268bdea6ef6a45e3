from __future__ import annotations

import logging
from typing import Any, Dict, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from .exceptions import AssistantsError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def extract_error_message(response: httpx.Response) -> str:
    """Pull a human readable message out of an error response."""
    try:
        data = response.json()
    except ValueError:
        data = None

    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if isinstance(error, str) and error:
            return error
        if data.get("message"):
            return str(data["message"])

    text = response.text.strip()
    if text:
        return text
    return response.reason_phrase or f"HTTP {response.status_code}"


def require_id(value: str, name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        logger.warning("Rejected empty %s", name)
        raise AssistantsError(f"{name} must be a non-empty string")
    return value


def dump_request(model: BaseModel) -> Dict[str, Any]:
    """Serialize a request model to a JSON-ready dict before any I/O happens."""
    try:
        return model.model_dump(mode="json", exclude_none=True)
    except (PydanticSerializationError, TypeError, ValueError) as exc:
        logger.warning("Unable to encode %s: %s", type(model).__name__, exc)
        raise AssistantsError(f"Unable to encode request body: {exc}") from exc


def parse_response(model: Type[ModelT], response: httpx.Response) -> ModelT:
    """Decode a successful response body into ``model``.

    Undecodable JSON and bodies that fail validation both raise
    ``AssistantsError`` carrying the response's status code.
    """
    try:
        data = response.json()
    except ValueError as exc:
        logger.warning(
            "%s %s returned a body that is not JSON",
            response.request.method,
            response.request.url,
        )
        raise AssistantsError(
            f"Invalid response: {exc}", status_code=response.status_code
        ) from exc

    try:
        return model.model_validate(data)
    except ValidationError as exc:
        logger.warning(
            "%s %s returned an invalid %s: %s",
            response.request.method,
            response.request.url,
            model.__name__,
            exc,
        )
        raise AssistantsError(
            f"Invalid response: {exc}", status_code=response.status_code
        ) from exc
