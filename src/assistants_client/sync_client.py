from __future__ import annotations

import logging
import os
from types import TracebackType
from typing import Any, Dict, Optional

import httpx

from .exceptions import AssistantsError
from .messages import Message, MessageRequest
from .runs import CreateRunRequest, Run, ToolOutputsRequest
from .threads import ModifyThreadRequest, Thread, ThreadDeleted
from .types import Headers, ResponseHook
from .utils import (
    dump_request,
    extract_error_message,
    parse_response,
    require_id,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.openai.com/v1"
BETA_HEADERS: Headers = {"OpenAI-Beta": "assistants=v1"}


def _headers(api_key: str, organization: Optional[str] = None) -> Dict[str, str]:
    headers = {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {api_key}",
    }
    if organization:
        headers["OpenAI-Organization"] = organization
    return headers


def _resolve_api_key(api_key: Optional[str]) -> str:
    if api_key is None:
        api_key = os.environ.get("OPENAI_API_KEY", "")
    if not api_key.strip():
        raise AssistantsError("API key must be a non-empty string")
    return api_key


def _resolve_organization(organization: Optional[str]) -> Optional[str]:
    if organization is None:
        organization = os.environ.get("OPENAI_ORG_ID") or None
    return organization


class AssistantsClient:
    """Synchronous assistants API client."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        organization: Optional[str] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
        response_hook: Optional[ResponseHook] = None,
    ) -> None:
        self._api_key = _resolve_api_key(api_key)
        self._organization = _resolve_organization(organization)
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client = httpx.Client(timeout=timeout, transport=transport)
        self._response_hook = response_hook

    def __enter__(self) -> "AssistantsClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def _request(
        self,
        method: str,
        endpoint: str,
        json: Optional[Dict[str, Any]] = None,
        headers: Optional[Headers] = None,
    ) -> httpx.Response:
        url = f"{self._base_url}{endpoint}"
        request_headers = _headers(self._api_key, self._organization)
        if headers:
            request_headers.update(headers)

        logger.debug("%s %s", method, url)
        try:
            response = self._client.request(
                method=method,
                url=url,
                json=json,
                headers=request_headers,
                timeout=self._timeout,
            )
            if self._response_hook:
                self._response_hook(response)
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            logger.warning("%s %s timed out", method, url)
            raise AssistantsError("Request timeout") from exc
        except httpx.HTTPStatusError as exc:
            message = extract_error_message(exc.response)
            logger.warning(
                "%s %s failed with status %s: %s",
                method,
                url,
                exc.response.status_code,
                message,
            )
            raise AssistantsError(message, status_code=exc.response.status_code) from exc
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise AssistantsError(f"Network error: {exc}") from exc
        return response

    # Message methods
    def create_message(self, thread_id: str, request: MessageRequest) -> Message:
        """Add a message to a thread."""
        require_id(thread_id, "Thread ID")
        payload = dump_request(request.message)
        response = self._request("POST", f"/threads/{thread_id}/messages", json=payload)
        return parse_response(Message, response)

    # Run methods
    def create_run(self, thread_id: str, request: CreateRunRequest) -> Run:
        """Start a run of an assistant on a thread."""
        require_id(thread_id, "Thread ID")
        payload = dump_request(request)
        response = self._request(
            "POST", f"/threads/{thread_id}/runs", json=payload, headers=BETA_HEADERS
        )
        return parse_response(Run, response)

    def retrieve_run(self, thread_id: str, run_id: str) -> Run:
        """Fetch the current state of a run."""
        require_id(thread_id, "Thread ID")
        require_id(run_id, "Run ID")
        response = self._request(
            "GET", f"/threads/{thread_id}/runs/{run_id}", headers=BETA_HEADERS
        )
        return parse_response(Run, response)

    def submit_tool_outputs(
        self,
        thread_id: str,
        run_id: str,
        request: ToolOutputsRequest,
    ) -> Run:
        """Send tool call results back to a run waiting on them."""
        require_id(thread_id, "Thread ID")
        require_id(run_id, "Run ID")
        payload = dump_request(request)
        response = self._request(
            "POST",
            f"/threads/{thread_id}/runs/{run_id}/submit_tool_outputs",
            json=payload,
            headers=BETA_HEADERS,
        )
        return parse_response(Run, response)

    # Thread methods
    def retrieve_thread(self, thread_id: str) -> Thread:
        require_id(thread_id, "Thread ID")
        response = self._request("GET", f"/threads/{thread_id}")
        return parse_response(Thread, response)

    def modify_thread(self, thread_id: str, request: ModifyThreadRequest) -> Thread:
        require_id(thread_id, "Thread ID")
        payload = dump_request(request)
        response = self._request("POST", f"/threads/{thread_id}", json=payload)
        return parse_response(Thread, response)

    def delete_thread(self, thread_id: str) -> ThreadDeleted:
        require_id(thread_id, "Thread ID")
        response = self._request("DELETE", f"/threads/{thread_id}")
        return parse_response(ThreadDeleted, response)
