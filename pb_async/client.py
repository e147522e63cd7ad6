"""
PushBullet client

Typed entry point for every supported API operation. Each method is a
coroutine that resolves to a model or raises a RequestError subclass.
"""
import json
from contextlib import asynccontextmanager
from typing import Any, List, Optional, Type, TypeVar

import aiohttp

from pb_async.api.client import APIClient, UploadBody
from pb_async.exceptions import ResponseDecodeError
from pb_async.models import (
    Device,
    Push,
    PushbulletBaseModel,
    PushData,
    PushTarget,
    RawUploadRequestResponse,
    SelfUser,
    UploadRequestResponse,
    User,
    build_push_payload,
    check_push_data,
    check_push_target,
)
from pb_async.utils.decorators import logged_operation
from pb_async.utils.logging import get_contextual_logger

M = TypeVar('M', bound=PushbulletBaseModel)


class Client:
    """
    PushBullet client.

    Example:
        async with Client(token) as client:
            user = await client.get_user()
            await client.push(UserTarget(email=user.email), Note(body="Hello"))
    """

    def __init__(
        self,
        token: Optional[str] = None,
        session: Optional[aiohttp.ClientSession] = None,
        api_root: Optional[str] = None
    ):
        """
        Create a client.

        Args:
            token: Access token from the PushBullet account settings;
                falls back to the PUSHBULLET_TOKEN setting
            session: Existing aiohttp session to share; left open on close()
            api_root: Override the API root URL

        Raises:
            InvalidTokenError: If the token cannot be sent as a header value
        """
        self.api = APIClient(api_token=token, api_root=api_root, session=session)
        self.logger = get_contextual_logger(f'{__name__}.Client')

    @staticmethod
    def _decode(model_class: Type[M], data: Any) -> M:
        """Validate decoded JSON into a model, mapping failures to ResponseDecodeError."""
        try:
            return model_class.from_api_data(data)
        except (ValueError, TypeError) as e:
            raise ResponseDecodeError(
                f"unexpected {model_class.__name__} payload: {e}",
                json.dumps(data, default=str).encode()
            ) from e

    @logged_operation("get_user")
    async def get_user(self) -> User:
        """Retrieve information about the logged in user."""
        data = await self.api.get('users/me')
        return self._decode(User, data)

    @logged_operation("list_devices")
    async def list_devices(self) -> List[Device]:
        """
        Retrieve the account's devices.

        Deleted devices are included with active=False.
        """
        data = await self.api.get('devices')
        if not isinstance(data, dict) or not isinstance(data.get('devices'), list):
            raise ResponseDecodeError(
                "expected an object with a 'devices' list",
                json.dumps(data, default=str).encode()
            )
        return [self._decode(Device, item) for item in data['devices']]

    @logged_operation("push")
    async def push(self, target: PushTarget, data: PushData) -> Push:
        """
        Push some data to a target.

        Args:
            target: Who receives the push (SelfUser, DeviceTarget, ...)
            data: What is pushed (Note, Link, File)

        Returns:
            The created push as echoed by the API
        """
        check_push_target(target)
        check_push_data(data)

        payload = build_push_payload(target, data)
        self.logger.debug(f"posting body to start push: {payload}")
        response = await self.api.post('pushes', payload)
        return self._decode(Push, response)

    @logged_operation("upload_request", exclude_params=["data"])
    async def upload_request(self, file_name: str, file_type: str, data: UploadBody) -> UploadRequestResponse:
        """
        Upload a file so it can be pushed with a File push.

        Requests an upload slot, then transfers the contents to it as
        multipart/form-data. Binary file objects are streamed.

        Args:
            file_name: Desired file name
            file_type: MIME type of the file
            data: File contents

        Returns:
            The file name, type and URL the server settled on
        """
        response = await self.api.post('upload-request', {
            'file_name': file_name,
            'file_type': file_type,
        })
        slot = self._decode(RawUploadRequestResponse, response)

        await self.api.upload_file(slot.upload_url, slot.file_name, slot.file_type, data)
        return slot.to_response()

    @logged_operation("upload", exclude_params=["data"])
    async def upload(
        self,
        file_name: str,
        file_type: str,
        data: UploadBody,
        target: Optional[PushTarget] = None,
        body: str = ""
    ) -> Push:
        """
        Upload a file and push it.

        Args:
            file_name: Desired file name
            file_type: MIME type of the file
            data: File contents
            target: Recipient, defaults to the user's own stream
            body: Message to go with the file

        Returns:
            The created file push
        """
        if target is not None:
            check_push_target(target)

        uploaded = await self.upload_request(file_name, file_type, data)
        return await self.push(target if target is not None else SelfUser(), uploaded.to_push_data(body=body))

    async def close(self) -> None:
        """Release the HTTP session if the client created it."""
        await self.api.close()

    async def __aenter__(self):
        await self.api.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()


@asynccontextmanager
async def get_client(token: Optional[str] = None):
    """
    Get a client as async context manager.

    Usage:
        async with get_client() as client:
            devices = await client.list_devices()
    """
    client = Client(token)
    try:
        yield client
    finally:
        await client.close()
