"""
Multipart body construction and local file streaming.

Single Responsibility: each helper handles one specific task.
"""
from pathlib import Path
from typing import AsyncIterator, Sequence, Tuple, Union
import logging

import aiofiles
import aiohttp

from .models import UploadTarget, ValidatedOptions
from ..exceptions import InvalidFileError

FILES_FIELD = 'filesUploaded'
CATEGORY_FIELD = 'category'
CATEGORY = 'file'

READ_CHUNK_SIZE = 1024 * 1024


def build_upload_form(
    targets: Sequence[UploadTarget],
    options: ValidatedOptions
) -> aiohttp.MultipartWriter:
    """
    Build the multipart body of an upload request.

    One `filesUploaded` part per target (named when a filename is known),
    the constant category marker, then each validated option.

    Args:
        targets: Validated upload targets
        options: Validated options

    Returns:
        MultipartWriter usable as request data
    """
    writer = aiohttp.MultipartWriter('form-data')

    for target in targets:
        part = writer.append(target.content)
        filename = target.filename
        if filename:
            part.set_content_disposition('form-data', name=FILES_FIELD, filename=filename)
        else:
            part.set_content_disposition('form-data', name=FILES_FIELD)

    part = writer.append(CATEGORY)
    part.set_content_disposition('form-data', name=CATEGORY_FIELD)

    for name, value in options.to_fields():
        part = writer.append(value)
        part.set_content_disposition('form-data', name=name)

    return writer


class FileValidator:
    """
    Validates local files before upload.

    Responsibilities:
    - Check file existence
    - Verify file is not a directory
    - Get file size
    """

    def validate(self, file_path: Union[str, Path]) -> Tuple[Path, int]:
        """
        Validate a file for upload.

        Args:
            file_path: Path to the file

        Returns:
            Tuple of (validated Path, file size in bytes)

        Raises:
            InvalidFileError: If the file doesn't exist or is not a regular file
        """
        path = Path(file_path) if isinstance(file_path, str) else file_path

        if not path.exists():
            raise InvalidFileError(f"File not found: {path}")

        if not path.is_file():
            raise InvalidFileError(f"Path is not a file: {path}")

        return path, path.stat().st_size


async def iter_file(path: Path, chunk_size: int = READ_CHUNK_SIZE) -> AsyncIterator[bytes]:
    """
    Stream a local file in chunks without blocking the event loop.

    The file is opened on first iteration and closed when the generator is
    exhausted or closed.
    """
    logger = logging.getLogger('gofilepy.upload.file')
    async with aiofiles.open(path, 'rb') as f:
        while True:
            chunk = await f.read(chunk_size)
            if not chunk:
                break
            logger.debug(f"Read {len(chunk)} bytes from {path.name}")
            yield chunk
