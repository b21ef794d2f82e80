"""Example: use the service layer directly (no HTTP layer).

Lists the stored users, then looks one up by username.
"""

import asyncio

from src.user_management.user_management.main import create_container


async def main():
    container = create_container()
    service = container.user_service
    for user in await service.get_all_users():
        print(user)
    print(await service.get_user_by_unique_key({"username": "aanderson"}))


if __name__ == "__main__":
    asyncio.run(main())
