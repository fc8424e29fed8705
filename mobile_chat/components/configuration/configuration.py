"""
YAML-backed configuration with environment variable overrides.

Values are looked up in this order:
1. Process environment (after loading ``.env`` with python-dotenv)
2. ``<config_path>/<env>.yaml``
3. The ``default`` passed by the caller
"""

import os
from pathlib import Path
from typing import Any, TypeVar, cast

import yaml
from dotenv import load_dotenv

from mobile_chat.components.configuration.configuration_interface import (
    ConfigurationInterface,
)

T = TypeVar("T")

_TRUTHY = {"true", "1", "yes", "on"}
_FALSY = {"false", "0", "no", "off", ""}


class Configuration(ConfigurationInterface):
    def __init__(self, env: str, config_path: str) -> None:
        load_dotenv()
        self.__env: str = env
        self.__config_file: Path = Path(config_path) / f"{env}.yaml"
        self.__values: dict[str, Any] = self.__load_yaml()

    def __load_yaml(self) -> dict[str, Any]:
        if not self.__config_file.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {self.__config_file}"
            )

        with self.__config_file.open(encoding="utf-8") as file:
            data = yaml.safe_load(file) or {}

        if not isinstance(data, dict):
            raise ValueError(
                f"Configuration file must contain a mapping: {self.__config_file}"
            )
        return cast(dict[str, Any], data)

    def get_environment(self) -> str:
        return self.__env

    def get_configuration(self, key: str, cast_type: type[T], default: Any = ...) -> T:
        raw: Any
        if key in os.environ:
            raw = os.environ[key]
        elif key in self.__values:
            raw = self.__values[key]
        elif default is not ...:
            return cast(T, default)
        else:
            raise KeyError(f"Configuration key '{key}' is not set")

        if raw is None:
            return cast(T, default if default is not ... else None)

        return self._cast(key, raw, cast_type)

    @staticmethod
    def _cast(key: str, raw: Any, cast_type: type[T]) -> T:
        if isinstance(raw, cast_type):
            return raw

        if cast_type is bool:
            text = str(raw).strip().lower()
            if text in _TRUTHY:
                return cast(T, True)
            if text in _FALSY:
                return cast(T, False)
            raise ValueError(f"Configuration key '{key}' is not a boolean: {raw!r}")

        try:
            return cast_type(raw)  # type: ignore[call-arg]
        except (TypeError, ValueError) as e:
            raise ValueError(
                f"Configuration key '{key}' cannot be cast to {cast_type.__name__}: {raw!r}"
            ) from e
