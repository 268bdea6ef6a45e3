from typing import Any, Dict, List, Optional

import httpx

BASE_URL = "https://api.test/v1"


class Recorder:
    """Serves canned responses and remembers every request it saw."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.status_code = 200
        self.body: Any = {}

    def reply(self, body: Any, status_code: int = 200) -> None:
        self.body = body
        self.status_code = status_code

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.body, (bytes, str)):
            return httpx.Response(self.status_code, content=self.body)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def run_payload(**overrides: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "id": "run_1",
        "object": "thread.run",
        "created_at": 1699063290,
        "thread_id": "thread_1",
        "assistant_id": "asst_1",
        "status": "queued",
        "expires_at": 1699063890,
        "model": "gpt-4",
        "instructions": "You are a helpful assistant.",
        "tools": [{"type": "code_interpreter"}],
        "file_ids": [],
        "metadata": {},
    }
    payload.update(overrides)
    return payload


def message_payload(content: Optional[list] = None) -> Dict[str, Any]:
    return {
        "id": "msg_1",
        "object": "thread.message",
        "created_at": 1699017614,
        "thread_id": "thread_1",
        "role": "user",
        "content": content or [
            {"type": "text", "text": {"value": "How does AI work?", "annotations": []}}
        ],
        "file_ids": [],
        "assistant_id": None,
        "run_id": None,
        "metadata": {},
    }
