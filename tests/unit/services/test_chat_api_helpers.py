"""
Unit tests for the request helpers shared by ChatApiService.
"""

from unittest.mock import AsyncMock

import pytest

from mobile_chat.entities.chat import ImageUpload, guess_image_mime_type
from mobile_chat.services.AuthService.auth_service_interface import (
    AuthServiceInterface,
)
from mobile_chat.services.ChatApiService.chat_api_service import (
    HeaderMode,
    absolutize_image_url,
    parse_error_message,
    resolve_headers,
)


class TestParseErrorMessage:
    def test_returns_error_field(self) -> None:
        assert parse_error_message('{"error": "Quota exceeded"}') == "Quota exceeded"

    def test_accepts_bytes(self) -> None:
        assert parse_error_message(b'{"error": "Bad prompt"}') == "Bad prompt"

    def test_non_string_error_is_stringified(self) -> None:
        assert parse_error_message('{"error": 42}') == "42"

    @pytest.mark.parametrize(
        "body",
        [
            None,
            "",
            "<html>502 Bad Gateway</html>",
            "[1, 2, 3]",
            '"just a string"',
            '{"detail": "no error key"}',
            '{"error": null}',
            "{truncated",
        ],
    )
    def test_returns_none_when_no_message(self, body) -> None:
        assert parse_error_message(body) is None


class TestAbsolutizeImageUrl:
    def test_relative_path_gets_media_base(self) -> None:
        entry = {"id": 1, "image": "/media/chat_images/a.png"}

        result = absolutize_image_url(entry, "https://chat.example.com")

        assert result is entry
        assert entry["image"] == "https://chat.example.com/media/chat_images/a.png"

    @pytest.mark.parametrize("image", ["http://host/a.png", "https://cdn/a.jpg"])
    def test_absolute_urls_are_untouched(self, image: str) -> None:
        entry = {"image": image}

        absolutize_image_url(entry, "https://chat.example.com")

        assert entry["image"] == image

    @pytest.mark.parametrize("entry", [{}, {"image": ""}, {"image": None}])
    def test_missing_or_empty_image_is_untouched(self, entry: dict) -> None:
        before = dict(entry)

        absolutize_image_url(entry, "https://chat.example.com")

        assert entry == before


class TestResolveHeaders:
    @pytest.mark.asyncio
    async def test_authenticated_when_session_exists(self) -> None:
        auth = AsyncMock(spec=AuthServiceInterface)
        auth.get_valid_auth_headers.return_value = {
            "Accept": "application/json",
            "Authorization": "Bearer abc",
        }

        resolved = await resolve_headers(auth)

        assert resolved.mode is HeaderMode.AUTHENTICATED
        assert resolved.is_authenticated is True
        assert resolved.headers["Authorization"] == "Bearer abc"

    @pytest.mark.asyncio
    async def test_anonymous_when_no_session(self) -> None:
        auth = AsyncMock(spec=AuthServiceInterface)
        auth.get_valid_auth_headers.return_value = None

        resolved = await resolve_headers(auth)

        assert resolved.mode is HeaderMode.ANONYMOUS
        assert resolved.is_authenticated is False
        assert resolved.headers == {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    @pytest.mark.asyncio
    async def test_returned_headers_are_a_copy(self) -> None:
        auth_headers = {"Authorization": "Bearer abc"}
        auth = AsyncMock(spec=AuthServiceInterface)
        auth.get_valid_auth_headers.return_value = auth_headers

        resolved = await resolve_headers(auth)
        resolved.headers["X-Extra"] = "1"

        assert "X-Extra" not in auth_headers


class TestImageUpload:
    @pytest.mark.parametrize(
        ("file_name", "expected"),
        [
            ("photo.png", "image/png"),
            ("PHOTO.PNG", "image/png"),
            ("photo.jpg", "image/jpeg"),
            ("photo.jpeg", "image/jpeg"),
            ("photo.gif", "image/jpeg"),
            ("archive.png.zip", "image/jpeg"),
            ("no_extension", "image/jpeg"),
        ],
    )
    def test_mime_type_from_extension(self, file_name: str, expected: str) -> None:
        assert guess_image_mime_type(file_name) == expected
        assert ImageUpload(file_name=file_name, content=b"").mime_type == expected

    def test_from_path_reads_bytes_and_name(self, tmp_path) -> None:
        image_path = tmp_path / "snapshot.png"
        image_path.write_bytes(b"\x89PNG")

        upload = ImageUpload.from_path(str(image_path))

        assert upload.file_name == "snapshot.png"
        assert upload.content == b"\x89PNG"
        assert upload.mime_type == "image/png"
