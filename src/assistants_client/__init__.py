"""Python client for the assistants threads, messages and runs API."""

from importlib.metadata import version

from .client import AssistantsClient, AsyncAssistantsClient
from .exceptions import AssistantsError
from .messages import (
    Message,
    MessageRequest,
    ThreadMessage,
)
from .runs import (
    TERMINAL_STATUSES,
    CreateRunRequest,
    Function,
    LastError,
    RequiredAction,
    Run,
    RunStatus,
    RunTool,
    RunToolCall,
    SubmitToolOutputs,
    ToolOutputs,
    ToolOutputsRequest,
)
from .threads import (
    ModifyThreadRequest,
    Thread,
    ThreadDeleted,
)

__version__ = version("assistants-client")

__all__ = [
    "AssistantsClient",
    "AsyncAssistantsClient",
    "AssistantsError",
    # Message types
    "Message",
    "MessageRequest",
    "ThreadMessage",
    # Run types
    "Run",
    "RunStatus",
    "TERMINAL_STATUSES",
    "RequiredAction",
    "SubmitToolOutputs",
    "RunToolCall",
    "Function",
    "RunTool",
    "LastError",
    "CreateRunRequest",
    "ToolOutputs",
    "ToolOutputsRequest",
    # Thread types
    "Thread",
    "ModifyThreadRequest",
    "ThreadDeleted",
    "__version__",
]
