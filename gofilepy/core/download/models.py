"""
Data models for upload metadata and downloaded payloads.
"""
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Any, Optional, List, Union

import aiohttp

_ARRAY_INDEX = re.compile(r'^(0|[1-9][0-9]*)$')
_MAX_ARRAY_INDEX = 2 ** 32 - 2


class Representation(str, Enum):
    """Form in which downloaded files are returned."""
    BUFFER = 'buffer'
    STREAM = 'stream'


def _is_index_key(key: str) -> bool:
    return bool(_ARRAY_INDEX.match(key)) and int(key) <= _MAX_ARRAY_INDEX


def manifest_keys(files: Union[Dict[str, Any], List[Any], None]) -> List[str]:
    """
    Keys of a file manifest in enumeration order.

    Integer-like keys come first in ascending numeric order, then the other
    keys in the order the service sent them. This is the order the
    service's own web clients enumerate files in. A list manifest keeps its
    list order.
    """
    if not files:
        return []
    if isinstance(files, list):
        return [str(i) for i in range(len(files))]

    keys = [str(k) for k in files]
    index_keys = sorted((k for k in keys if _is_index_key(k)), key=int)
    other_keys = [k for k in keys if not _is_index_key(k)]
    return index_keys + other_keys


@dataclass(frozen=True)
class FileEntry:
    """
    One file of an upload.

    Attributes:
        name: File name
        size: Size in bytes
        md5: MD5 hash of the content
        mimetype: MIME type
        link: Direct download link
        raw: Entry as sent by the service
    """
    name: str
    size: int = 0
    md5: Optional[str] = None
    mimetype: Optional[str] = None
    link: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FileEntry':
        """Create from a manifest entry."""
        if not isinstance(data, dict):
            raise ValueError(f"Manifest entry is not an object: {data!r}")
        return cls(
            name=data.get('name', ''),
            size=data.get('size', 0),
            md5=data.get('md5'),
            mimetype=data.get('mimetype'),
            link=data.get('link'),
            raw=dict(data)
        )


@dataclass(frozen=True)
class UploadInfo:
    """
    Metadata of an existing upload.

    Attributes:
        code: Upload code
        server: Server holding the upload
        upload_time: Creation time (epoch seconds)
        total_size: Size of all files in bytes
        views: View count
        has_zip: Whether an archive of the upload is available
        files: Manifest key -> FileEntry, in enumeration order
        raw: Metadata exactly as returned by the service
    """
    code: str
    server: Optional[str] = None
    upload_time: Optional[int] = None
    total_size: int = 0
    views: int = 0
    has_zip: bool = False
    files: Dict[str, FileEntry] = field(default_factory=dict)
    raw: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'UploadInfo':
        """Create from the info response payload."""
        manifest = data.get('files') or {}
        if isinstance(manifest, list):
            items = {str(i): entry for i, entry in enumerate(manifest)}
        elif isinstance(manifest, dict):
            items = {str(k): v for k, v in manifest.items()}
        else:
            raise ValueError(f"Manifest is not an object: {manifest!r}")

        files = {key: FileEntry.from_dict(items[key]) for key in manifest_keys(manifest)}

        return cls(
            code=data.get('code', ''),
            server=data.get('server'),
            upload_time=data.get('uploadTime'),
            total_size=data.get('totalSize', 0),
            views=data.get('views', 0),
            has_zip=bool(data.get('hasZip', False)),
            files=files,
            raw=data
        )

    @property
    def file_names(self) -> List[str]:
        return [entry.name for entry in self.files.values()]


class DownloadStream:
    """
    Streamed body of one downloaded file.

    Holds an open response; read it fully or close it.

    Example:
        >>> async with stream:
        ...     async for chunk in stream.iter_chunked(65536):
        ...         out.write(chunk)
    """

    def __init__(self, entry: FileEntry, response: aiohttp.ClientResponse):
        self.entry = entry
        self._response = response

    @property
    def name(self) -> str:
        return self.entry.name

    @property
    def content(self) -> aiohttp.StreamReader:
        """Raw response body reader."""
        return self._response.content

    @property
    def closed(self) -> bool:
        return self._response.closed

    def iter_chunked(self, size: int):
        """Iterate over the body in chunks of at most `size` bytes."""
        return self._response.content.iter_chunked(size)

    async def read(self) -> bytes:
        """Read the remaining body."""
        return await self._response.read()

    def close(self) -> None:
        """Close the underlying response."""
        self._response.close()

    async def __aenter__(self) -> 'DownloadStream':
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __repr__(self) -> str:
        return f"DownloadStream(name={self.name!r})"
