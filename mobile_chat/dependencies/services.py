from mobile_chat.bootstrap.components import Components
from mobile_chat.components.configuration.configuration_interface import (
    ConfigurationInterface,
)
from mobile_chat.components.endpoints.endpoints import EndpointBase
from mobile_chat.components.logger.logger_interface import LoggerInterface
from mobile_chat.services.AuthService.auth_service import TokenAuthService
from mobile_chat.services.AuthService.auth_service_interface import (
    AuthServiceInterface,
)
from mobile_chat.services.ChatApiService.chat_api_service import ChatApiService
from mobile_chat.services.ChatApiService.chat_api_service_interface import (
    ChatApiServiceInterface,
)


def get_auth_service(components: Components) -> AuthServiceInterface:
    """
    Create the token-backed session authority.

    Environment variables:
        AUTH_TOKEN: Bearer access token (optional; anonymous when unset)
    """
    configuration = components.get_component(ConfigurationInterface)
    access_token = configuration.get_configuration("AUTH_TOKEN", str, default="")

    return TokenAuthService(
        access_token=access_token or None,
        logger=components.get_component(LoggerInterface).get_logger("AuthService"),
    )


def get_chat_api_service(
    components: Components, auth_service: AuthServiceInterface | None = None
) -> ChatApiServiceInterface:
    configuration = components.get_component(ConfigurationInterface)

    reachability_timeout = configuration.get_configuration(
        "REACHABILITY_TIMEOUT", float, default=5.0
    )
    read_timeout = configuration.get_configuration("READ_TIMEOUT", float, default=10.0)
    send_timeout = configuration.get_configuration("SEND_TIMEOUT", float, default=30.0)

    return ChatApiService(
        endpoints=components.get_component(EndpointBase),
        auth_service=auth_service or get_auth_service(components),
        logger=components.get_component(LoggerInterface).get_logger("ChatApiService"),
        reachability_timeout=reachability_timeout,
        read_timeout=read_timeout,
        send_timeout=send_timeout,
    )
