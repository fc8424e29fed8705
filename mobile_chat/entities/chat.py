from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TypedDict

ChatMessageResult = dict[str, Any]
ChatHistoryEntry = dict[str, Any]


class DeleteChatResult(TypedDict):
    """Outcome of a successful chat deletion."""

    success: bool
    message: str


def guess_image_mime_type(file_name: str) -> str:
    """PNG files are sent as image/png, everything else as image/jpeg."""
    extension = file_name.rsplit(".", 1)[-1].lower() if "." in file_name else ""
    if extension == "png":
        return "image/png"
    return "image/jpeg"


@dataclass(frozen=True)
class ImageUpload:
    """Binary image attachment sent alongside a chat prompt."""

    file_name: str
    content: bytes

    @property
    def mime_type(self) -> str:
        return guess_image_mime_type(self.file_name)

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> ImageUpload:
        file_path = Path(path)
        return cls(file_name=file_path.name, content=file_path.read_bytes())
