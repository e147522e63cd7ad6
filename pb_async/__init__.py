"""
pb-async - asynchronous PushBullet client

Create a Client with an access token from the PushBullet account settings,
then await any of its request methods:

    async with Client(token) as client:
        await client.push(SelfUser(), Note(title="User Greetings", body="Hello, user!"))
"""
__version__ = "0.1.0"

from pb_async.exceptions import (
    PushbulletException,
    StartupError,
    InvalidTokenError,
    ConfigurationException,
    RequestError,
    TransportError,
    StatusError,
    ResponseDecodeError,
    ServerError,
    AuthenticationError,
)
from pb_async.models import (
    User,
    Device,
    Push,
    UploadRequestResponse,
    PushTarget,
    SelfUser,
    DeviceTarget,
    UserTarget,
    ChannelTarget,
    ClientTarget,
    PushData,
    Note,
    Link,
    File,
)
from pb_async.client import Client, get_client

__all__ = [
    '__version__',
    'Client',
    'get_client',
    'User',
    'Device',
    'Push',
    'UploadRequestResponse',
    'PushTarget',
    'SelfUser',
    'DeviceTarget',
    'UserTarget',
    'ChannelTarget',
    'ClientTarget',
    'PushData',
    'Note',
    'Link',
    'File',
    'PushbulletException',
    'StartupError',
    'InvalidTokenError',
    'ConfigurationException',
    'RequestError',
    'TransportError',
    'StatusError',
    'ResponseDecodeError',
    'ServerError',
    'AuthenticationError',
]
