"""
Async gofile API client.

Owns the HTTP session and knows how to talk to the broker and to the
worker servers it hands out.
"""
import logging
from typing import Dict, Optional, Any, Type

import aiohttp

from .config import APIConfig
from .response_handler import ResponseHandler
from ..exceptions import GofileError, ServerResolutionError
from ..logging import get_logger


class AsyncAPIClient:
    """
    Asynchronous gofile API client.

    Features:
    - Full async/await support
    - Configurable proxy, SSL, timeouts
    - Connection pooling
    - Broker resolution of worker servers

    Server names returned by the broker are never cached: every operation
    resolves its own binding.

    Example:
        >>> async with AsyncAPIClient(APIConfig.default()) as api:
        ...     server = await api.resolve_server()
    """

    def __init__(self, config: Optional[APIConfig] = None):
        """
        Initialize async API client.

        Args:
            config: API configuration (uses defaults if not provided)
        """
        self._config = config or APIConfig.default()
        self._session: Optional[aiohttp.ClientSession] = None
        self._connector: Optional[aiohttp.TCPConnector] = None
        self._closed = False

        self._logger = get_logger('gofilepy.api')
        root_logger = logging.getLogger()
        if not root_logger.handlers:
            self._logger.setLevel(self._config.log_level)

    @property
    def config(self) -> APIConfig:
        """Get current configuration."""
        return self._config

    @property
    def closed(self) -> bool:
        return self._closed

    async def __aenter__(self) -> 'AsyncAPIClient':
        """Async context manager entry."""
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure session is created and open."""
        if self._closed:
            raise GofileError("Client is closed")

        if self._session is None or self._session.closed:
            self._connector = aiohttp.TCPConnector(
                **self._config.get_connector_kwargs()
            )
            self._session = aiohttp.ClientSession(
                connector=self._connector,
                **self._config.get_session_kwargs()
            )
        return self._session

    async def close(self):
        """Close client and release resources."""
        self._closed = True

        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

        if self._connector and not self._connector.closed:
            await self._connector.close()
        self._connector = None

    def _proxy(self) -> Optional[str]:
        return self._config.proxy.to_aiohttp_proxy() if self._config.proxy else None

    def _headers(self, upload_code: Optional[str] = None) -> Dict[str, str]:
        return {'Referer': self._config.referrer(upload_code)}

    async def get_envelope(
        self,
        url: str,
        error_cls: Type[GofileError],
        message: str,
        params: Optional[Dict[str, str]] = None,
        upload_code: Optional[str] = None
    ) -> Any:
        """
        GET a JSON envelope and return its data.

        Args:
            url: Absolute URL
            error_cls: Exception raised on non-success status or network error
            message: Prefix of the error message
            params: Query string parameters
            upload_code: Upload the request is about (sets the Referer)

        Returns:
            The envelope's `data` field

        Raises:
            error_cls: If the status is not 'ok' or the request fails
        """
        session = await self._ensure_session()
        self._logger.debug(f"GET {url} params={sorted((params or {}).keys())}")

        try:
            async with session.get(
                url,
                params=params,
                headers=self._headers(upload_code),
                proxy=self._proxy()
            ) as response:
                response_text = await response.text(errors='replace')
        except aiohttp.ClientError as e:
            self._logger.error(f"Network error: {e}")
            raise error_cls(f"{message}: network error: {e}") from e

        self._logger.debug(f"Response data: {response_text[:1000]}")
        envelope = ResponseHandler.parse_response(response_text)
        return ResponseHandler.process_response(envelope, error_cls, message)

    async def post_envelope(
        self,
        url: str,
        data: Any,
        error_cls: Type[GofileError],
        message: str,
        upload_code: Optional[str] = None
    ) -> Any:
        """
        POST a body and return the data of the JSON envelope answered.

        Raises:
            error_cls: If the status is not 'ok' or the request fails
        """
        session = await self._ensure_session()
        self._logger.debug(f"POST {url}")

        try:
            async with session.post(
                url,
                data=data,
                headers=self._headers(upload_code),
                proxy=self._proxy()
            ) as response:
                response_text = await response.text(errors='replace')
        except aiohttp.ClientError as e:
            self._logger.error(f"Network error: {e}")
            raise error_cls(f"{message}: network error: {e}") from e

        self._logger.debug(f"Response data: {response_text[:1000]}")
        envelope = ResponseHandler.parse_response(response_text)
        return ResponseHandler.process_response(envelope, error_cls, message)

    async def open_link(self, url: str) -> aiohttp.ClientResponse:
        """
        Start a plain GET on a file link (download headers, no Referer).

        The caller owns the returned response and must release it.
        """
        session = await self._ensure_session()
        self._logger.debug(f"GET {url}")
        return await session.get(
            url,
            headers=self._config.download_headers,
            proxy=self._proxy()
        )

    async def resolve_server(self, upload_code: Optional[str] = None) -> str:
        """
        Ask the broker which worker server handles a request.

        Args:
            upload_code: Existing upload the request is about. Without it the
                broker may route to a worker that does not hold the upload.

        Returns:
            Worker server name

        Raises:
            ServerResolutionError: If the broker reports a failure or the
                payload carries no server
        """
        params = {'c': upload_code} if upload_code else None
        data = await self.get_envelope(
            f"{self._config.broker_url}getServer",
            ServerResolutionError,
            "Fetching server info failed",
            params=params,
            upload_code=upload_code
        )

        server = data.get('server') if isinstance(data, dict) else None
        if not server:
            raise ServerResolutionError(
                f"Fetching server info failed: no server in {ResponseHandler.describe(data)}",
                detail=data
            )

        self._logger.debug(f"Resolved server {server}" + (f" for {upload_code}" if upload_code else ""))
        return server

    def worker_url(self, server: str) -> str:
        """Base URL of a worker server."""
        return self._config.worker_url(server)
