#!/usr/bin/env python3
"""
Push a greeting note to the user's own stream.

Reads the token from PUSHBULLET_TOKEN (environment or .env file).
"""
import asyncio
import logging
import sys

from pb_async import Client, Note, PushbulletException, SelfUser
from pb_async.config import get_config
from pb_async.utils.logging import setup_logging

logger = logging.getLogger('pb_async.examples.push_hello')


async def main() -> int:
    """Main script execution."""
    config = get_config()
    if not config.has_token:
        logger.error("expected PUSHBULLET_TOKEN env var")
        return 1

    try:
        async with Client(config.pushbullet_token) as client:
            push = await client.push(SelfUser(), Note(title="User Greetings", body="Hello, user!"))
    except PushbulletException as e:
        logger.error(f"error: {e}")
        return 1

    print(f"Pushed note {push.iden}")
    return 0


if __name__ == '__main__':
    setup_logging()
    sys.exit(asyncio.run(main()))
