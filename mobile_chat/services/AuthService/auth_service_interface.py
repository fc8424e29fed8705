from abc import ABC, abstractmethod

BASE_HEADERS: dict[str, str] = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


class AuthServiceInterface(ABC):
    """Owns credential acquisition, refresh and invalidation for the chat client."""

    @abstractmethod
    async def get_valid_auth_headers(self) -> dict[str, str] | None:
        """
        Return headers carrying a valid credential, refreshing it if needed.

        Returns None when no usable session exists. That is a normal outcome
        and must not raise.
        """
        pass

    @abstractmethod
    async def is_authenticated(self) -> bool:
        pass

    @abstractmethod
    async def logout(self) -> None:
        """Invalidate the local session state."""
        pass
