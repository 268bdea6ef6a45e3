"""Message types and models for the assistants client."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class Message(BaseModel):
    """A message within a thread."""

    id: str
    object: str = "thread.message"
    created_at: int = 0
    thread_id: str = ""
    role: str = ""  # "user" or "assistant"
    # Content parts are passed through untouched.
    content: List[Any] = Field(default_factory=list)
    assistant_id: Optional[str] = None
    run_id: Optional[str] = None
    file_ids: List[str] = Field(default_factory=list)
    metadata: Dict[str, Any] = Field(default_factory=dict)


class ThreadMessage(BaseModel):
    """Payload for a message to add to a thread."""

    role: str
    content: str
    file_ids: Optional[List[str]] = None
    metadata: Optional[Dict[str, Any]] = None


class MessageRequest(BaseModel):
    """Request to create a message; the wrapped payload is what goes on the wire."""

    message: ThreadMessage
