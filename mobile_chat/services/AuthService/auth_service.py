import logging

from mobile_chat.services.AuthService.auth_service_interface import (
    BASE_HEADERS,
    AuthServiceInterface,
)


class TokenAuthService(AuthServiceInterface):
    """Session authority backed by a single bearer access token."""

    def __init__(
        self,
        access_token: str | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.logger = logger or logging.getLogger("auth_service")
        self._access_token: str | None = (access_token or "").strip() or None

    def set_token(self, access_token: str) -> None:
        token = access_token.strip()
        if not token:
            raise ValueError("Access token must not be empty")
        self._access_token = token
        self.logger.info("Access token updated")

    async def get_valid_auth_headers(self) -> dict[str, str] | None:
        if self._access_token is None:
            return None
        return {**BASE_HEADERS, "Authorization": f"Bearer {self._access_token}"}

    async def is_authenticated(self) -> bool:
        return self._access_token is not None

    async def logout(self) -> None:
        self._access_token = None
        self.logger.info("Session cleared")
