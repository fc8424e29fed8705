"""
Deployment targets and the base URLs the chat client talks to.

Each target maps to a configured API base; the media base is derived from it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping

_API_SUFFIX = "/api"


class DeploymentTarget(str, Enum):
    WEB = "web"
    ANDROID = "android"
    DESKTOP = "desktop"

    @classmethod
    def parse(cls, value: str | DeploymentTarget) -> DeploymentTarget:
        if isinstance(value, DeploymentTarget):
            return value
        normalized = str(value).strip().lower()
        for target in cls:
            if target.value == normalized:
                return target
        valid = ", ".join(t.value for t in cls)
        raise ValueError(f"Unknown deployment target '{value}' (expected one of: {valid})")


@dataclass(frozen=True)
class EndpointBase:
    """API root plus the origin used for server-relative media paths."""

    api_base: str
    media_base: str

    @classmethod
    def from_api_base(cls, api_base: str) -> EndpointBase:
        api_base = api_base.rstrip("/")
        media_base = api_base
        if media_base.endswith(_API_SUFFIX):
            media_base = media_base[: -len(_API_SUFFIX)]
        return cls(api_base=api_base, media_base=media_base)


def resolve_base(
    target: DeploymentTarget | str, base_urls: Mapping[DeploymentTarget, str]
) -> EndpointBase:
    """
    Map a deployment target to its endpoint pair.

    Args:
        target: Deployment target (enum member or its name)
        base_urls: API base URL for each supported target

    Returns:
        The resolved EndpointBase.

    Raises:
        ValueError: If the target is unknown or has no configured URL.
    """
    resolved_target = DeploymentTarget.parse(target)
    api_base = (base_urls.get(resolved_target) or "").strip()
    if not api_base:
        raise ValueError(
            f"No API base URL configured for deployment target '{resolved_target.value}'"
        )
    return EndpointBase.from_api_base(api_base)
