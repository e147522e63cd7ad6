"""
Pytest configuration and fixtures for pb-async tests.

This file provides test isolation and shared fixtures.
"""
import asyncio
import pytest

import pb_async.config as cfg
from pb_async.config import PushbulletConfig
from pb_async.utils.logging import clear_context
from tests.factories import API_ROOT, TEST_TOKEN


@pytest.fixture(autouse=True)
def test_config():
    """
    Install a deterministic configuration for every test.

    Environment variables and .env files on the developer's machine never leak
    into tests; the singleton is reset afterwards.
    """
    config = PushbulletConfig(
        pushbullet_token=TEST_TOKEN,
        api_root=API_ROOT,
        _env_file=None,
    )
    cfg._config = config
    clear_context()

    yield config

    cfg._config = None
    clear_context()


@pytest.fixture(scope="session")
def event_loop_policy():
    """Use default event loop policy."""
    return asyncio.DefaultEventLoopPolicy()
