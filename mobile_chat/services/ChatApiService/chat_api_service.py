"""
Async HTTP client for the chat backend.

Provides a small, fixed surface over the backend routes:
- check_reachability(): Probe whether a server is answering at all
- send_message(): Post a prompt, optionally with an image attachment
- get_chat_history(): Fetch the user's chats with absolute image URLs
- delete_chat(): Delete a single chat
- is_authenticated() / logout(): Delegated to the auth service

Every failure is surfaced as a ChatApiError subclass; nothing is retried.
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol, runtime_checkable

import httpx

from mobile_chat.components.endpoints.endpoints import EndpointBase
from mobile_chat.entities.chat import (
    ChatHistoryEntry,
    ChatMessageResult,
    DeleteChatResult,
    ImageUpload,
)
from mobile_chat.services.AuthService.auth_service_interface import (
    BASE_HEADERS,
    AuthServiceInterface,
)
from mobile_chat.services.ChatApiService.chat_api_errors import (
    AuthRequiredError,
    ChatApiError,
    CommunicationError,
    NotFoundError,
    RequestFailedError,
    RequestTimeoutError,
)
from mobile_chat.services.ChatApiService.chat_api_service_interface import (
    ChatApiServiceInterface,
)

_UNAVAILABLE_STATUSES = frozenset({502, 503, 504})


@runtime_checkable
class AsyncHttpClientProtocol(Protocol):
    """Protocol for async HTTP clients (httpx.AsyncClient or mocks)."""

    async def get(
        self, url: str, *, headers: Any = None, timeout: Any = None
    ) -> Any: ...
    async def post(
        self,
        url: str,
        *,
        headers: Any = None,
        files: Any = None,
        timeout: Any = None,
    ) -> Any: ...
    async def delete(
        self, url: str, *, headers: Any = None, timeout: Any = None
    ) -> Any: ...


class HeaderMode(str, Enum):
    AUTHENTICATED = "authenticated"
    ANONYMOUS = "anonymous"


@dataclass(frozen=True)
class ResolvedHeaders:
    mode: HeaderMode
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def is_authenticated(self) -> bool:
        return self.mode is HeaderMode.AUTHENTICATED


async def resolve_headers(auth_service: AuthServiceInterface) -> ResolvedHeaders:
    """
    Ask the auth service for credentials, falling back to the baseline pair.

    An absent session is not an error here: the request goes out anonymous and
    the server decides with a 401.
    """
    auth_headers = await auth_service.get_valid_auth_headers()
    if auth_headers:
        return ResolvedHeaders(HeaderMode.AUTHENTICATED, dict(auth_headers))
    return ResolvedHeaders(HeaderMode.ANONYMOUS, dict(BASE_HEADERS))


def parse_error_message(body: str | bytes | None) -> str | None:
    """
    Extract the ``error`` field from a JSON error body.

    Returns None when the body is empty, not JSON, not an object, or has no
    ``error`` field.
    """
    if not body:
        return None
    try:
        data = json.loads(body)
    except (TypeError, ValueError):
        return None
    if not isinstance(data, dict) or data.get("error") is None:
        return None
    return str(data["error"])


def absolutize_image_url(entry: ChatHistoryEntry, media_base: str) -> ChatHistoryEntry:
    """Prefix a server-relative ``image`` path with the media base, in place."""
    image = entry.get("image")
    if image is not None and str(image) and not str(image).startswith("http"):
        entry["image"] = f"{media_base}{image}"
    return entry


class ChatApiService(ChatApiServiceInterface):
    """
    HTTP client for the chat backend.

    Timeouts (seconds) apply per call and bound the whole exchange:
        reachability_timeout: reachability probe (default 5)
        read_timeout: history fetch and chat deletion (default 10)
        send_timeout: message send, including any attachment (default 30)
    """

    def __init__(
        self,
        endpoints: EndpointBase,
        auth_service: AuthServiceInterface,
        logger: logging.Logger | None = None,
        http_client: AsyncHttpClientProtocol | None = None,
        reachability_timeout: float = 5.0,
        read_timeout: float = 10.0,
        send_timeout: float = 30.0,
    ) -> None:
        self.endpoints = endpoints
        self.auth_service = auth_service
        self.logger = logger or logging.getLogger("chat_api_client")
        self.reachability_timeout = reachability_timeout
        self.read_timeout = read_timeout
        self.send_timeout = send_timeout

        self._owns_client = http_client is None
        self._client: AsyncHttpClientProtocol = http_client or httpx.AsyncClient()

        self.logger.info(
            "ChatApiService initialized: api_base=%s media_base=%s",
            self.endpoints.api_base,
            self.endpoints.media_base,
        )

    def resolve_base(self) -> EndpointBase:
        return self.endpoints

    def _url(self, path: str) -> str:
        return f"{self.endpoints.api_base}{path}"

    @contextmanager
    def _translate_errors(self, operation: str, timeout: float) -> Iterator[None]:
        try:
            yield
        except ChatApiError:
            raise
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            self.logger.error("%s timed out after %ss", operation, timeout)
            raise RequestTimeoutError(timeout) from e
        except Exception as e:
            self.logger.error("Error during %s: %s", operation, e)
            raise CommunicationError(e) from e

    async def check_reachability(self) -> bool:
        try:
            response = await asyncio.wait_for(
                self._client.get(
                    self._url("/chat-history/"),
                    headers=dict(BASE_HEADERS),
                    timeout=self.reachability_timeout,
                ),
                timeout=self.reachability_timeout,
            )
        except Exception as e:
            self.logger.error("Server not reachable: %s", e)
            return False

        reachable = response.status_code not in _UNAVAILABLE_STATUSES
        self.logger.debug(
            "Reachability probe: status=%s reachable=%s",
            response.status_code,
            reachable,
        )
        return reachable

    def _load_image(self, image: ImageUpload | str | os.PathLike[str]) -> ImageUpload:
        if isinstance(image, ImageUpload):
            return image
        try:
            return ImageUpload.from_path(image)
        except OSError as e:
            self.logger.error("Error adding image to request: %s", e)
            raise CommunicationError(e, f"Failed to process image: {e}") from e

    async def send_message(
        self,
        prompt: str,
        image: ImageUpload | str | os.PathLike[str] | None = None,
    ) -> ChatMessageResult:
        with self._translate_errors("send message", self.send_timeout):
            resolved = await resolve_headers(self.auth_service)
            # The transport sets the multipart boundary itself.
            headers = {
                name: value
                for name, value in resolved.headers.items()
                if name.lower() != "content-type"
            }
            if not resolved.is_authenticated:
                self.logger.debug("No session available, sending message anonymously")

            # A filename-less part keeps the body multipart even without an image.
            files: list[tuple[str, Any]] = [
                ("prompt", (None, prompt.encode("utf-8")))
            ]
            if image is not None:
                upload = self._load_image(image)
                files.append(
                    ("image", (upload.file_name, upload.content, upload.mime_type))
                )
                self.logger.debug("Added image to request: %s", upload.file_name)

            response = await asyncio.wait_for(
                self._client.post(
                    self._url("/chat/"),
                    headers=headers,
                    files=files,
                    timeout=self.send_timeout,
                ),
                timeout=self.send_timeout,
            )
            self.logger.debug("Message response: status=%s", response.status_code)

            if response.status_code == 200:
                return response.json()
            if response.status_code == 401:
                raise AuthRequiredError()

            self.logger.warning(
                "Send message failed with status %s", response.status_code
            )
            raise RequestFailedError(
                f"Failed to send message: {response.text}",
                status_code=response.status_code,
                body=response.text,
            )

    async def get_chat_history(self) -> list[ChatHistoryEntry]:
        with self._translate_errors("get chat history", self.read_timeout):
            resolved = await resolve_headers(self.auth_service)
            if not resolved.is_authenticated:
                self.logger.debug("No session available, fetching history anonymously")

            response = await asyncio.wait_for(
                self._client.get(
                    self._url("/chat-history/"),
                    headers=resolved.headers,
                    timeout=self.read_timeout,
                ),
                timeout=self.read_timeout,
            )

            if response.status_code == 200:
                data = response.json()
                if not isinstance(data, list):
                    raise ValueError(
                        f"Expected a JSON array of chats, got {type(data).__name__}"
                    )
                return [
                    absolutize_image_url(entry, self.endpoints.media_base)
                    if isinstance(entry, dict)
                    else entry
                    for entry in data
                ]
            if response.status_code == 401:
                raise AuthRequiredError()

            raise self._status_error(response, "Failed to load chat history")

    async def delete_chat(self, chat_id: int) -> DeleteChatResult:
        with self._translate_errors("delete chat", self.read_timeout):
            resolved = await resolve_headers(self.auth_service)
            if not resolved.is_authenticated:
                self.logger.debug("No session available, deleting chat anonymously")

            response = await asyncio.wait_for(
                self._client.delete(
                    self._url(f"/chat/{chat_id}/delete/"),
                    headers=resolved.headers,
                    timeout=self.read_timeout,
                ),
                timeout=self.read_timeout,
            )

            if response.status_code == 204:
                self.logger.debug("Chat deleted successfully: %s", chat_id)
                return {"success": True, "message": "Chat deleted successfully"}
            if response.status_code == 401:
                raise AuthRequiredError()
            if response.status_code == 404:
                raise NotFoundError()

            raise self._status_error(response, "Failed to delete chat")

    def _status_error(self, response: Any, default_message: str) -> RequestFailedError:
        message = parse_error_message(response.text) or default_message
        self.logger.warning(
            "Request failed with status %s: %s", response.status_code, message
        )
        return RequestFailedError(
            f"{message} ({response.status_code})",
            status_code=response.status_code,
            body=response.text,
        )

    async def is_authenticated(self) -> bool:
        return await self.auth_service.is_authenticated()

    async def logout(self) -> None:
        await self.auth_service.logout()

    async def close(self) -> None:
        """Close the HTTP client if we own it."""
        if self._owns_client and hasattr(self._client, "aclose"):
            await self._client.aclose()  # type: ignore[union-attr]

    async def __aenter__(self) -> ChatApiService:
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()
