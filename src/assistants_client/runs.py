"""Run types and models for the assistants client."""

from enum import Enum
from typing import Any, Dict, FrozenSet, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class RunStatus(str, Enum):
    """Statuses a run moves through on the server."""

    QUEUED = "queued"
    IN_PROGRESS = "in_progress"
    REQUIRES_ACTION = "requires_action"
    CANCELLING = "cancelling"
    CANCELLED = "cancelled"
    FAILED = "failed"
    COMPLETED = "completed"
    EXPIRED = "expired"


TERMINAL_STATUSES: FrozenSet[str] = frozenset(
    {
        RunStatus.CANCELLED.value,
        RunStatus.FAILED.value,
        RunStatus.COMPLETED.value,
        RunStatus.EXPIRED.value,
    }
)


class Function(BaseModel):
    """Function invocation requested by a run. Arguments are a raw JSON string."""

    name: str = ""
    arguments: str = ""


class RunToolCall(BaseModel):
    id: str = ""
    type: str = "function"
    function: Function = Field(default_factory=Function)


class SubmitToolOutputs(BaseModel):
    tool_calls: List[RunToolCall] = Field(default_factory=list)


class RequiredAction(BaseModel):
    type: str = "submit_tool_outputs"
    submit_tool_outputs: SubmitToolOutputs = Field(default_factory=SubmitToolOutputs)


class RunTool(BaseModel):
    """A tool the assistant used for the run."""

    # Tool definitions carry type-specific fields (e.g. "function").
    model_config = ConfigDict(extra="allow")

    type: str = ""


class LastError(BaseModel):
    code: str = ""
    message: str = ""


class Run(BaseModel):
    """One execution of an assistant over a thread."""

    id: str
    object: str = "thread.run"
    created_at: int = 0
    thread_id: str = ""
    assistant_id: str = ""
    status: str = ""
    required_action: Optional[RequiredAction] = None
    last_error: Optional[LastError] = None
    expires_at: Optional[int] = None
    started_at: Optional[int] = None
    cancelled_at: Optional[int] = None
    failed_at: Optional[int] = None
    completed_at: Optional[int] = None
    model: str = ""
    instructions: Optional[str] = None
    tools: List[RunTool] = Field(default_factory=list)
    file_ids: List[str] = Field(default_factory=list)
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES

    @property
    def tool_calls(self) -> List[RunToolCall]:
        """Tool calls waiting for outputs, empty unless the run requires action."""
        if self.status != RunStatus.REQUIRES_ACTION.value or self.required_action is None:
            return []
        return list(self.required_action.submit_tool_outputs.tool_calls)


class CreateRunRequest(BaseModel):
    assistant_id: str


class ToolOutputs(BaseModel):
    """Output for one tool call, submitted back to a run."""

    tool_call_id: Optional[str] = None
    output: Optional[str] = None


class ToolOutputsRequest(BaseModel):
    tool_outputs: List[ToolOutputs]
