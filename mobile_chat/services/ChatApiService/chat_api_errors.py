from __future__ import annotations


class ChatApiError(Exception):
    """Base error for every failure surfaced by the chat API client."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class AuthRequiredError(ChatApiError):
    def __init__(self) -> None:
        super().__init__("Authentication required. Please login again.")


class NotFoundError(ChatApiError):
    """A missing chat and one the user may not access look the same."""

    def __init__(self) -> None:
        super().__init__("Chat not found or access denied.")


class RequestFailedError(ChatApiError):
    def __init__(self, message: str, status_code: int, body: str = "") -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class RequestTimeoutError(ChatApiError):
    def __init__(self, timeout: float) -> None:
        self.timeout = timeout
        super().__init__("Request timed out. Please try again.")


class CommunicationError(ChatApiError):
    def __init__(self, cause: BaseException, message: str | None = None) -> None:
        self.cause = cause
        super().__init__(message or f"Failed to communicate with server: {cause}")
