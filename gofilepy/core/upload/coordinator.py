"""
Upload coordinator.

Orchestrates the upload process: server binding, option validation,
multipart body, submission.
"""
from typing import Optional, Sequence

from .form import build_upload_form
from .models import UploadTarget, UploadOptions, UploadResult
from .validator import OptionValidator
from ..api import AsyncAPIClient
from ..exceptions import InvalidFileError, UploadError
from ..logging import get_logger

logger = get_logger('gofilepy.upload')


class UploadCoordinator:
    """
    Coordinates the upload of one or more files as a single upload.

    Either every file is accepted and one result is returned, or the
    whole call fails. Each call makes exactly one broker request and one
    upload request.
    """

    def __init__(
        self,
        api_client: AsyncAPIClient,
        validator: Optional[OptionValidator] = None
    ):
        """
        Initialize upload coordinator.

        Args:
            api_client: gofile API client
            validator: Option validator (default OptionValidator())
        """
        self._api = api_client
        self._validator = validator or OptionValidator()

    async def upload(
        self,
        targets: Sequence[UploadTarget],
        options: Optional[UploadOptions] = None
    ) -> UploadResult:
        """
        Execute the complete upload process.

        Args:
            targets: Files to upload
            options: Optional upload options

        Returns:
            Upload code and removal code

        Raises:
            InvalidFileError: If there is no target or a target is invalid
            ServerResolutionError: If no worker server is handed out
            InvalidOptionError: If an option is invalid
            UploadError: If the worker rejects the upload
        """
        targets = list(targets)
        if not targets:
            raise InvalidFileError("No files to upload")
        for target in targets:
            target.validate()

        server = await self._api.resolve_server()
        logger.info(f"Uploading {len(targets)} file(s) to server {server}")

        validated = self._validator.validate(options)
        form = build_upload_form(targets, validated)

        data = await self._api.post_envelope(
            f"{self._api.worker_url(server)}upload",
            form,
            UploadError,
            "Uploading file failed"
        )

        try:
            result = UploadResult.from_dict(data)
        except (KeyError, TypeError) as e:
            raise UploadError(f"Uploading file failed: incomplete response {data!r}", detail=data) from e

        logger.info(f"Upload complete: {result.code}")
        return result
