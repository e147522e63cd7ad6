#!/usr/bin/env python3
"""
Upload a small text file and push it to the user's own stream.

Reads the token from PUSHBULLET_TOKEN (environment or .env file).
"""
import asyncio
import logging
import sys

from pb_async import Client, PushbulletException, SelfUser
from pb_async.config import get_config
from pb_async.utils.logging import setup_logging

logger = logging.getLogger('pb_async.examples.upload_hello_world')


async def main() -> int:
    """Main script execution."""
    config = get_config()
    if not config.has_token:
        logger.error("expected PUSHBULLET_TOKEN env var")
        return 1

    try:
        async with Client(config.pushbullet_token) as client:
            uploaded = await client.upload_request("hello.txt", "text/plain", b"Hello, world!\n")
            push = await client.push(SelfUser(), uploaded.to_push_data())
    except PushbulletException as e:
        logger.error(f"error pushing file: {e}")
        return 1

    print(f"Pushed {uploaded.file_name} ({uploaded.file_url}) as {push.iden}")
    return 0


if __name__ == '__main__':
    setup_logging()
    sys.exit(asyncio.run(main()))
