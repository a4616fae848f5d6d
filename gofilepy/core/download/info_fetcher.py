"""Upload metadata retrieval."""
from typing import Optional

from .models import UploadInfo
from ..api import AsyncAPIClient
from ..crypto import hash_passphrase
from ..exceptions import InfoFetchError
from ..logging import get_logger

logger = get_logger('gofilepy.download')


class InfoFetcher:
    """Fetches the metadata of an existing upload from the server holding it."""

    def __init__(self, api_client: AsyncAPIClient):
        self._api = api_client

    async def get_info(
        self,
        upload_code: str,
        passphrase: Optional[str] = None
    ) -> UploadInfo:
        """
        Get the metadata of an upload.

        Args:
            upload_code: Upload code
            passphrase: Passphrase of a protected upload. Only its SHA-256
                digest is sent.

        Returns:
            UploadInfo with the file manifest

        Raises:
            ServerResolutionError: If no worker server is handed out
            InfoFetchError: If the upload is unknown, the passphrase is
                wrong, the request fails or the manifest is malformed
        """
        server = await self._api.resolve_server(upload_code)

        params = {'c': upload_code}
        if passphrase:
            params['p'] = hash_passphrase(passphrase)

        data = await self._api.get_envelope(
            f"{self._api.worker_url(server)}getUpload",
            InfoFetchError,
            "Fetching file info failed",
            params=params,
            upload_code=upload_code
        )

        if not isinstance(data, dict):
            raise InfoFetchError(f"Fetching file info failed: unexpected payload {data!r}", detail=data)

        try:
            info = UploadInfo.from_dict(data)
        except ValueError as e:
            raise InfoFetchError(f"Fetching file info failed: malformed manifest: {e}", detail=data) from e

        logger.debug(f"Upload {upload_code}: {len(info.files)} file(s), {info.total_size} bytes")
        return info
