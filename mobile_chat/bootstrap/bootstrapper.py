from mobile_chat.dependencies.components import get_components
from mobile_chat.dependencies.services import get_auth_service, get_chat_api_service
from mobile_chat.services.AuthService.auth_service_interface import (
    AuthServiceInterface,
)
from mobile_chat.services.ChatApiService.chat_api_service_interface import (
    ChatApiServiceInterface,
)


def bootstrap_chat_api(
    env: str = "development",
    config_path: str = "configuration",
) -> ChatApiServiceInterface:
    components = get_components(env=env, config_path=config_path)
    auth: AuthServiceInterface = get_auth_service(components)

    return get_chat_api_service(components, auth)
