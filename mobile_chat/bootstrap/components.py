import os
from pathlib import Path
from threading import Lock
from typing import Any, TypeVar, cast

from mobile_chat.components.configuration.configuration import Configuration
from mobile_chat.components.configuration.configuration_interface import (
    ConfigurationInterface,
)
from mobile_chat.components.endpoints.endpoints import (
    DeploymentTarget,
    EndpointBase,
    resolve_base,
)
from mobile_chat.components.logger.logger import Logger
from mobile_chat.components.logger.logger_interface import LoggerInterface


VALID_ENVIRONMENTS = frozenset({"development", "staging", "production", "test"})

T = TypeVar("T")


def _load_base_urls(
    configuration: ConfigurationInterface,
) -> dict[DeploymentTarget, str]:
    return {
        target: configuration.get_configuration(
            f"API_BASE_URL_{target.name}", str, default=""
        )
        for target in DeploymentTarget
    }


class ComponentsMeta(type):
    _instances: dict[tuple[type, str], "Components"] = {}
    _lock: Lock = Lock()

    def __call__(cls, *args, **kwargs):
        env = args[0] if args else kwargs.get("env")
        if env is None:
            raise ValueError("Environment must be provided")

        env_key = str(env)
        key = (cls, env_key)
        with cls._lock:
            if key not in cls._instances:
                instance = super().__call__(*args, **kwargs)
                cls._instances[key] = instance
        return cls._instances[key]

    def reset(cls) -> None:
        """Forget every cached instance."""
        with cls._lock:
            cls._instances.clear()


class Components(metaclass=ComponentsMeta):
    def __init__(self, env: str, config_path: str) -> None:
        self.__env: str = env
        if os.path.isabs(config_path):
            self.__config_path: str = config_path
        else:
            root_dir: str = str(Path(__file__).resolve().parents[2])
            self.__config_path = os.path.join(root_dir, config_path)
        self.__components: dict[type[Any], Any] = self.__bootstrap_components()

    def __bootstrap_components(self) -> dict[type[Any], Any]:
        if self.__env in VALID_ENVIRONMENTS:
            return self.__get_components()

        raise ValueError(f"Invalid environment: {self.__env}")

    def __get_components(self) -> dict[type[Any], Any]:
        configuration: ConfigurationInterface = Configuration(
            self.__env, self.__config_path
        )

        logger: LoggerInterface = Logger(
            log_format=configuration.get_configuration("LOG_FORMAT", str, default=None),
            log_level=configuration.get_configuration("LOG_LEVEL", str, default="INFO"),
        )
        _logger_instance = logger.get_logger("Components")

        target: str = configuration.get_configuration(
            "DEPLOYMENT_TARGET", str, default=DeploymentTarget.DESKTOP.value
        )
        endpoints: EndpointBase = resolve_base(target, _load_base_urls(configuration))

        _logger_instance.info(
            "Components ready: env=%s target=%s api_base=%s",
            self.__env,
            target,
            endpoints.api_base,
        )

        components: dict[type[Any], Any] = {
            ConfigurationInterface: configuration,
            LoggerInterface: logger,
            EndpointBase: endpoints,
        }

        return components

    def get_component(self, component_name: type[T]) -> T:
        if component_name not in self.__components:
            raise ValueError(f"Component {component_name} not found")

        return cast(T, self.__components[component_name])

    def get_config_path(self) -> str:
        return self.__config_path

    def get_environment(self) -> str:
        return self.__env
