from .async_client import AsyncAssistantsClient
from .sync_client import AssistantsClient

__all__ = ["AssistantsClient", "AsyncAssistantsClient"]
