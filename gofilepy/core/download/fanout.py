"""
Concurrent download of every file of an upload.
"""
import asyncio
from typing import List, Optional, Union

import aiohttp

from .info_fetcher import InfoFetcher
from .models import DownloadStream, FileEntry, Representation
from ..api import AsyncAPIClient
from ..exceptions import DownloadError
from ..logging import get_logger

logger = get_logger('gofilepy.download')

Payload = Union[bytes, DownloadStream]


class DownloadFanout:
    """
    Downloads all files of an upload concurrently.

    All requests run to completion before the result is assembled; a
    failure does not cancel requests already in flight, but the call
    fails as a whole and no partial list is returned.
    """

    def __init__(
        self,
        api_client: AsyncAPIClient,
        info_fetcher: Optional[InfoFetcher] = None
    ):
        self._api = api_client
        self._info = info_fetcher or InfoFetcher(api_client)

    async def download_all(
        self,
        upload_code: str,
        passphrase: Optional[str] = None,
        representation: Union[Representation, str] = Representation.BUFFER
    ) -> List[Payload]:
        """
        Download every file of an upload.

        Args:
            upload_code: Upload code
            passphrase: Passphrase of a protected upload
            representation: BUFFER for bytes, STREAM for DownloadStream objects

        Returns:
            Payloads in manifest order

        Raises:
            InfoFetchError: If the metadata cannot be fetched
            DownloadError: If any file fails to download
        """
        representation = Representation(representation)
        info = await self._info.get_info(upload_code, passphrase)
        entries = list(info.files.values())

        logger.info(f"Downloading {len(entries)} file(s) of {upload_code}")
        results = await asyncio.gather(
            *(self._fetch(entry, representation) for entry in entries),
            return_exceptions=True
        )

        failures = [
            (entry, result) for entry, result in zip(entries, results)
            if isinstance(result, BaseException)
        ]
        if failures:
            for result in results:
                if isinstance(result, DownloadStream):
                    result.close()

            for _, error in failures:
                if not isinstance(error, DownloadError):
                    raise error

            names = [entry.name for entry, _ in failures]
            logger.error(f"Download of {upload_code} failed for {names}")
            raise DownloadError(
                f"Downloading files failed: {', '.join(names)}",
                detail=[str(error) for _, error in failures],
                failed=names
            ) from failures[0][1]

        return results

    async def _fetch(
        self,
        entry: FileEntry,
        representation: Representation
    ) -> Payload:
        """Download one file in the requested representation."""
        if not entry.link:
            raise DownloadError(f"No link for file {entry.name}", detail=entry.raw, failed=[entry.name])

        try:
            response = await self._api.open_link(entry.link)
            if representation is Representation.STREAM:
                response.raise_for_status()
                return DownloadStream(entry, response)

            async with response:
                response.raise_for_status()
                data = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(f"Downloading {entry.name} failed: {e}")
            raise DownloadError(f"Downloading {entry.name} failed: {e}", failed=[entry.name]) from e

        logger.debug(f"Downloaded {entry.name} ({len(data)} bytes)")
        return data
