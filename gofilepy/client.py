"""
GofileClient - High-level async client for gofile.io.

Example:
    >>> async with GofileClient() as gofile:
    ...     result = await gofile.upload_buffer(b"hello", "hello.txt")
    ...     info = await gofile.get_info(result.code)
    ...     await gofile.remove(result.code, result.removal_code)
"""
import io
from collections.abc import AsyncIterable
from pathlib import Path
from typing import Optional, List, Dict, Any, Union, Sequence

from .core.api import AsyncAPIClient, APIConfig, ProxyConfig, SSLConfig, TimeoutConfig
from .core.download import DownloadFanout, InfoFetcher, UploadInfo, Representation, DownloadStream
from .core.exceptions import InvalidFileError
from .core.logging import get_logger
from .core.removal import RemovalRequester
from .core.upload import (
    UploadCoordinator,
    UploadTarget,
    UploadOptions,
    UploadResult,
    FileValidator,
    iter_file
)

OptionsLike = Union[UploadOptions, Dict[str, Any], None]


class GofileClient:
    """
    High-level async client for gofile.io.

    Every operation resolves its own worker server through the broker;
    nothing is cached between calls. Failures raise a GofileError subclass.

    With custom configuration:
        >>> config = GofileClient.create_config(proxy="http://proxy:8080")
        >>> async with GofileClient(config=config) as gofile:
        ...     info = await gofile.get_info("abc123")
    """

    def __init__(self, config: Optional[APIConfig] = None):
        """
        Initialize gofile client.

        Args:
            config: Optional API configuration
        """
        self._config = config or APIConfig.default()
        self._logger = get_logger('gofilepy.client')

        self._api = AsyncAPIClient(self._config)
        self._uploader = UploadCoordinator(self._api)
        self._info = InfoFetcher(self._api)
        self._downloader = DownloadFanout(self._api, self._info)
        self._remover = RemovalRequester(self._api)
        self._file_validator = FileValidator()

    @staticmethod
    def create_config(
        proxy: Optional[str] = None,
        timeout: Optional[float] = None,
        verify_ssl: bool = True,
        user_agent: Optional[str] = None,
        **kwargs
    ) -> APIConfig:
        """
        Create an API configuration.

        Args:
            proxy: Proxy URL
            timeout: Total request timeout in seconds
            verify_ssl: Whether to verify TLS certificates
            user_agent: Custom User-Agent
            **kwargs: Other APIConfig fields
        """
        config = APIConfig(**kwargs)
        if proxy:
            config.proxy = ProxyConfig(url=proxy)
        if timeout is not None:
            config.timeout = TimeoutConfig(total=timeout)
        if not verify_ssl:
            config.ssl = SSLConfig(verify=False, check_hostname=False)
        if user_agent:
            config.user_agent = user_agent
        return config

    @property
    def config(self) -> APIConfig:
        return self._config

    async def __aenter__(self) -> 'GofileClient':
        await self._api.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        """Close the HTTP session."""
        await self._api.close()

    # Uploads

    async def upload_buffer(
        self,
        data: Union[bytes, bytearray, memoryview],
        name: str,
        options: OptionsLike = None
    ) -> UploadResult:
        """
        Upload an in-memory buffer.

        Args:
            data: File content
            name: File name (required, the service cannot infer it)
            options: Upload options

        Raises:
            InvalidFileError: If data is not a buffer or name is blank
        """
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise InvalidFileError(f"Invalid file type: {type(data).__name__}")
        return await self.upload_files([UploadTarget(data, name)], options)

    async def upload_stream(
        self,
        stream: Union[io.IOBase, AsyncIterable],
        name: Optional[str] = None,
        options: OptionsLike = None
    ) -> UploadResult:
        """
        Upload a binary file object or an async iterable of bytes.

        Args:
            stream: Content source. It is not closed by the client.
            name: File name; inferred from file objects when omitted
            options: Upload options

        Raises:
            InvalidFileError: If stream is neither a file object nor an async iterable
        """
        if not isinstance(stream, (io.IOBase, AsyncIterable)):
            raise InvalidFileError(f"Invalid file type: {type(stream).__name__}")
        return await self.upload_files([UploadTarget(stream, name)], options)

    async def upload_path(
        self,
        path: Union[str, Path],
        name: Optional[str] = None,
        options: OptionsLike = None
    ) -> UploadResult:
        """
        Upload a local file, streamed from disk.

        Args:
            path: Path of the file
            name: File name (default: the file's own name)
            options: Upload options

        Raises:
            InvalidFileError: If the file doesn't exist or is not a regular file
        """
        path, size = self._file_validator.validate(path)
        self._logger.debug(f"Uploading {path} ({size} bytes)")

        stream = iter_file(path)
        try:
            return await self.upload_files([UploadTarget(stream, name or path.name)], options)
        finally:
            await stream.aclose()

    async def upload_files(
        self,
        targets: Sequence[UploadTarget],
        options: OptionsLike = None
    ) -> UploadResult:
        """
        Upload several files as one upload.

        Args:
            targets: Files to upload
            options: Upload options

        Returns:
            Upload code and removal code
        """
        return await self._uploader.upload(targets, self._coerce_options(options))

    # Existing uploads

    async def get_info(self, upload_code: str, passphrase: Optional[str] = None) -> UploadInfo:
        """Get the metadata of an upload."""
        return await self._info.get_info(upload_code, passphrase)

    async def download_all(
        self,
        upload_code: str,
        passphrase: Optional[str] = None,
        representation: Union[Representation, str] = Representation.BUFFER
    ) -> List[Union[bytes, DownloadStream]]:
        """
        Download every file of an upload concurrently.

        Returns:
            Payloads in manifest order: bytes, or DownloadStream objects the
            caller must read or close
        """
        return await self._downloader.download_all(upload_code, passphrase, representation)

    async def remove(self, upload_code: str, removal_code: str) -> Any:
        """Delete an upload."""
        return await self._remover.remove(upload_code, removal_code)

    @staticmethod
    def _coerce_options(options: OptionsLike) -> Optional[UploadOptions]:
        if isinstance(options, dict):
            return UploadOptions.from_dict(options)
        return options

    def __repr__(self) -> str:
        return f"<GofileClient broker={self._config.broker_url!r}>"
