"""Deletion of uploads."""
from typing import Any

from .api import AsyncAPIClient
from .exceptions import RemovalError
from .logging import get_logger

logger = get_logger('gofilepy.removal')


class RemovalRequester:
    """Deletes an upload on the server holding it."""

    def __init__(self, api_client: AsyncAPIClient):
        self._api = api_client

    async def remove(self, upload_code: str, removal_code: str) -> Any:
        """
        Delete an upload.

        Args:
            upload_code: Upload code
            removal_code: Removal code returned by the upload

        Returns:
            The service's confirmation payload

        Raises:
            ServerResolutionError: If no worker server is handed out
            RemovalError: If the removal code is wrong, the upload is
                unknown or already removed, or the request fails
        """
        server = await self._api.resolve_server(upload_code)

        data = await self._api.get_envelope(
            f"{self._api.worker_url(server)}deleteUpload",
            RemovalError,
            "Removing file failed",
            params={'c': upload_code, 'rc': removal_code},
            upload_code=upload_code
        )

        logger.info(f"Removed upload {upload_code}")
        return data
