#!/usr/bin/env python3
"""
List the devices registered to the account.

Reads the token from PUSHBULLET_TOKEN (environment or .env file).
"""
import asyncio
import logging
import sys

from pb_async import Client, PushbulletException
from pb_async.config import get_config
from pb_async.utils.logging import setup_logging

logger = logging.getLogger('pb_async.examples.list_devices')


async def main() -> int:
    """Main script execution."""
    config = get_config()
    if not config.has_token:
        logger.error("expected PUSHBULLET_TOKEN env var")
        return 1

    try:
        async with Client(config.pushbullet_token) as client:
            devices = await client.list_devices()
    except PushbulletException as e:
        logger.error(f"error: {e}")
        return 1

    print(f"Devices ({len(devices)}):")
    for device in devices:
        status = "active" if device.active else "deleted"
        print(f"  {device.iden}  {device.display_name}  [{status}]")
    return 0


if __name__ == '__main__':
    setup_logging()
    sys.exit(asyncio.run(main()))
