#!/usr/bin/env python3
"""
Print information about the user the access token belongs to.

Reads the token from PUSHBULLET_TOKEN (environment or .env file).
"""
import asyncio
import logging
import sys

from pb_async import Client, PushbulletException
from pb_async.config import get_config
from pb_async.utils.logging import setup_logging

logger = logging.getLogger('pb_async.examples.get_user')


async def main() -> int:
    """Main script execution."""
    config = get_config()
    if not config.has_token:
        logger.error("expected PUSHBULLET_TOKEN env var")
        return 1

    try:
        async with Client(config.pushbullet_token) as client:
            user = await client.get_user()
    except PushbulletException as e:
        logger.error(f"error: {e}")
        return 1

    print(f"User email is {user.email}")
    print(user)
    return 0


if __name__ == '__main__':
    setup_logging()
    sys.exit(asyncio.run(main()))
