import os
from abc import ABC, abstractmethod

from mobile_chat.components.endpoints.endpoints import EndpointBase
from mobile_chat.entities.chat import (
    ChatHistoryEntry,
    ChatMessageResult,
    DeleteChatResult,
    ImageUpload,
)


class ChatApiServiceInterface(ABC):
    """Interface for the chat backend's HTTP API."""

    @abstractmethod
    def resolve_base(self) -> EndpointBase:
        pass

    @abstractmethod
    async def check_reachability(self) -> bool:
        """Return False only when no server is answering."""
        pass

    @abstractmethod
    async def send_message(
        self,
        prompt: str,
        image: ImageUpload | str | os.PathLike[str] | None = None,
    ) -> ChatMessageResult:
        pass

    @abstractmethod
    async def get_chat_history(self) -> list[ChatHistoryEntry]:
        pass

    @abstractmethod
    async def delete_chat(self, chat_id: int) -> DeleteChatResult:
        pass

    @abstractmethod
    async def is_authenticated(self) -> bool:
        pass

    @abstractmethod
    async def logout(self) -> None:
        pass

    @abstractmethod
    async def close(self) -> None:
        pass
