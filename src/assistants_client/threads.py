"""Thread types and models for the assistants client."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class Thread(BaseModel):
    """Represents a conversation thread."""

    id: str
    object: str = "thread"
    created_at: int = 0
    metadata: Dict[str, Any] = Field(default_factory=dict)


class ModifyThreadRequest(BaseModel):
    """Fields that can be changed on an existing thread."""

    metadata: Optional[Dict[str, Any]] = None


class ThreadDeleted(BaseModel):
    """Response from deleting a thread."""

    id: str
    object: str = "thread.deleted"
    deleted: bool = False
