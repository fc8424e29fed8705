import asyncio
import logging
import os

from mobile_chat.bootstrap.bootstrapper import bootstrap_chat_api
from mobile_chat.services.ChatApiService.chat_api_errors import ChatApiError
from mobile_chat.services.ChatApiService.chat_api_service_interface import (
    ChatApiServiceInterface,
)

logger = logging.getLogger("main")


async def main() -> None:
    env = os.getenv("APP_ENV", "development")
    client: ChatApiServiceInterface = bootstrap_chat_api(env=env)
    try:
        if not await client.check_reachability():
            print(f"Server at {client.resolve_base().api_base} is not reachable")
            return

        if not await client.is_authenticated():
            print("No session configured; set AUTH_TOKEN to fetch chat history")
            return

        try:
            history = await client.get_chat_history()
        except ChatApiError as error:
            print(error.message)
            return

        print(f"{len(history)} chats")
        for entry in history:
            print(f"- [{entry.get('id')}] {entry.get('prompt', '')}")
    finally:
        await client.close()


if __name__ == "__main__":
    asyncio.run(main())
