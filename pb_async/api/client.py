"""
API client for pb-async

aiohttp-based HTTP pipeline for the PushBullet v2 REST API.
Builds authenticated requests, and classifies every response into decoded
JSON or a typed error before handing it back.
"""
import asyncio
import json
import logging
from typing import Optional, Dict, Any, Union, IO
from urllib.parse import urljoin

import aiohttp

from pb_async.config import get_config
from pb_async.exceptions import (
    AuthenticationError,
    InvalidTokenError,
    ResponseDecodeError,
    ServerError,
    StatusError,
    TransportError,
)

logger = logging.getLogger(f'{__name__}.APIClient')

TOKEN_HEADER = 'Access-Token'
AUTH_FAILURE_STATUSES = (401, 403)

UploadBody = Union[bytes, str, IO[bytes]]


def validate_token(token: str) -> str:
    """
    Check that a token can be sent verbatim as an HTTP header value.

    Visible latin-1 characters, spaces and tabs are allowed; control
    characters (including CR/LF) and DEL are not.

    Raises:
        InvalidTokenError: If the token contains a forbidden character
    """
    for position, char in enumerate(token):
        code = ord(char)
        if code > 255:
            raise InvalidTokenError(token, f"non latin-1 character at position {position}")
        if (code < 32 and char != '\t') or code == 127:
            raise InvalidTokenError(token, f"control character at position {position}")
    return token


def is_success(status: int) -> bool:
    return 200 <= status < 300


class APIClient:
    """
    Async HTTP client for PushBullet API communication.

    Features:
    - Access-Token authentication on every request
    - JSON request bodies and multipart file uploads
    - Response classification into data or typed errors
    - Debug logging with response truncation
    - Owns its aiohttp session, or borrows one supplied by the caller
    """

    def __init__(
        self,
        api_token: Optional[str] = None,
        api_root: Optional[str] = None,
        session: Optional[aiohttp.ClientSession] = None,
        timeout: Optional[int] = None
    ):
        """
        Initialize API client with configuration.

        Args:
            api_token: Override the access token from config
            api_root: Override the API root URL from config
            session: Existing aiohttp session to borrow; it is never closed by this client
            timeout: Total request timeout in seconds for sessions this client creates

        Raises:
            InvalidTokenError: If the token cannot be used as a header value
        """
        config = get_config()
        self.api_root = api_root or config.api_root
        self.api_token = validate_token(config.pushbullet_token if api_token is None else api_token)
        self.user_agent = config.user_agent
        self.timeout = timeout or config.default_timeout
        self.log_response_limit = config.log_response_limit
        self._session = session
        self._owns_session = session is None

        logger.debug(f"APIClient initialized with api_root: {self.api_root}")

    @property
    def headers(self) -> Dict[str, str]:
        """Get headers with authentication."""
        return {
            TOKEN_HEADER: self.api_token,
            'User-Agent': self.user_agent
        }

    @property
    def owns_session(self) -> bool:
        return self._owns_session

    def _build_url(self, endpoint: str) -> str:
        """
        Build complete API URL for an endpoint.

        Args:
            endpoint: API endpoint path, or an absolute URL used as-is

        Returns:
            Complete URL for API request
        """
        if endpoint.startswith(('http://', 'https://')):
            return endpoint
        return urljoin(self.api_root.rstrip('/') + '/', endpoint.lstrip('/'))

    def _truncate(self, data: Any) -> str:
        data_str = str(data)
        if len(data_str) > self.log_response_limit:
            return data_str[:self.log_response_limit] + "..."
        return data_str

    def _require_token(self, url: str) -> None:
        if not self.api_token:
            logger.error(f"No access token configured for: {url}")
            raise AuthenticationError(
                "missing_access_token",
                "No access token configured - set PUSHBULLET_TOKEN"
            )

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure an open aiohttp session exists and return it."""
        if self._owns_session:
            if self._session is None or self._session.closed:
                timeout = aiohttp.ClientTimeout(total=self.timeout)
                self._session = aiohttp.ClientSession(timeout=timeout)
                logger.debug("Created new aiohttp session")
        elif self._session.closed:
            raise TransportError("Borrowed aiohttp session is closed")
        return self._session

    def decode_response(self, url: str, status: int, body: bytes) -> Any:
        """
        Classify a raw API response into decoded JSON or a typed error.

        Args:
            url: Request URL, used for logging
            status: HTTP status code
            body: Raw response body

        Returns:
            Decoded JSON document of a successful response

        Raises:
            ServerError: Response carries an error object ({"error": {"code", "message"}})
            AuthenticationError: 401/403, with or without an error object
            StatusError: Other non-2xx responses
            ResponseDecodeError: A 2xx response whose body is not valid JSON
        """
        data = None
        decode_failure = None
        if body.strip():
            try:
                data = json.loads(body)
            except ValueError as e:
                decode_failure = str(e)
        else:
            decode_failure = "empty response body"

        if isinstance(data, dict) and isinstance(data.get('error'), dict):
            code = data['error'].get('code')
            message = data['error'].get('message')
            if isinstance(code, str) and isinstance(message, str):
                error_cls = AuthenticationError if status in AUTH_FAILURE_STATUSES else ServerError
                logger.error(f"API error {status}: {url} - {code}: {message}")
                raise error_cls(code, message, status=status)

        if status in AUTH_FAILURE_STATUSES:
            logger.error(f"Authentication failed for: {url}")
            raise AuthenticationError(
                "unauthorized",
                f"Authentication failed with status {status} - check access token",
                status=status
            )
        if not is_success(status):
            logger.error(f"API error {status}: {url} - {self._truncate(body)}")
            raise StatusError(status, body)
        if decode_failure is not None:
            logger.error(f"Invalid JSON from {url}: {decode_failure}")
            raise ResponseDecodeError(decode_failure, body)

        logger.debug(f"Response: {self._truncate(data)}")
        return data

    async def request(
        self,
        method: str,
        endpoint: str,
        json_body: Optional[Dict[str, Any]] = None
    ) -> Any:
        """
        Make an authenticated request to the API.

        Args:
            method: HTTP method
            endpoint: API endpoint
            json_body: Optional JSON payload

        Returns:
            Decoded JSON response data

        Raises:
            TransportError: For network issues and timeouts
            RequestError: Any of the classifications from decode_response
        """
        url = self._build_url(endpoint)
        self._require_token(url)
        session = await self._ensure_session()

        try:
            logger.debug(f"{method}: {endpoint} data: {json_body}")

            async with session.request(method, url, json=json_body, headers=self.headers) as response:
                status = response.status
                body = await response.read()

        except aiohttp.ClientError as e:
            logger.error(f"HTTP client error for {method} {url}: {e}")
            raise TransportError(f"Network error: {e}") from e
        except asyncio.TimeoutError as e:
            logger.error(f"Timeout for {method} {url}")
            raise TransportError(f"Request timed out: {e}") from e

        return self.decode_response(url, status, body)

    async def get(self, endpoint: str) -> Any:
        """Make GET request to API."""
        return await self.request('GET', endpoint)

    async def post(self, endpoint: str, data: Dict[str, Any]) -> Any:
        """Make POST request to API with a JSON body."""
        return await self.request('POST', endpoint, json_body=data)

    async def upload_file(
        self,
        upload_url: str,
        file_name: str,
        file_type: str,
        data: UploadBody
    ) -> None:
        """
        Transfer file contents to an upload slot as multipart/form-data.

        File objects are streamed by aiohttp rather than read into memory.

        Args:
            upload_url: Absolute upload destination issued by upload-request
            file_name: File name for the 'file' form field
            file_type: MIME type for the 'file' form field
            data: File contents as bytes, str or a binary file object

        Raises:
            TransportError: For network issues and timeouts
            StatusError: If the upload destination rejects the file
        """
        self._require_token(upload_url)
        session = await self._ensure_session()

        form = aiohttp.FormData()
        form.add_field('file', data, filename=file_name, content_type=file_type)

        try:
            logger.debug(f"UPLOAD: {file_name} ({file_type}) to {upload_url}")

            async with session.post(upload_url, data=form, headers=self.headers) as response:
                status = response.status
                body = await response.read()

        except aiohttp.ClientError as e:
            logger.error(f"HTTP client error for upload {upload_url}: {e}")
            raise TransportError(f"Network error: {e}") from e
        except asyncio.TimeoutError as e:
            logger.error(f"Timeout for upload {upload_url}")
            raise TransportError(f"Request timed out: {e}") from e

        if not is_success(status):
            logger.error(f"Upload error {status}: {upload_url} - {self._truncate(body)}")
            raise StatusError(status, body)

        logger.debug(f"Upload successful: {upload_url}")

    async def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()
            logger.debug("Closed aiohttp session")

    async def __aenter__(self):
        """Async context manager entry."""
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit with cleanup."""
        await self.close()
