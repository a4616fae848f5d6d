"""
gofilepy - Async Python client for gofile.io.

Usage:
    >>> from gofilepy import GofileClient
    >>> 
    >>> async with GofileClient() as gofile:
    ...     result = await gofile.upload_path("report.pdf")
    ...     print(result.code, result.removal_code)
"""
import logging
from .client import GofileClient

# Configuration
from .core.api import (
    APIConfig,
    ProxyConfig,
    SSLConfig,
    TimeoutConfig,
    AsyncAPIClient
)

# Models
from .core.upload import UploadTarget, UploadOptions, UploadResult
from .core.download import UploadInfo, FileEntry, Representation, DownloadStream
from .core.crypto import hash_passphrase

# Errors
from .core.exceptions import (
    GofileError,
    ServerResolutionError,
    InvalidOptionError,
    InvalidFileError,
    UploadError,
    InfoFetchError,
    DownloadError,
    RemovalError
)

__version__ = '1.0.0'


def setup_logging(level=logging.INFO):
    """
    Configure logging for gofilepy modules.
    
    Sets the level of every gofilepy logger and keeps propagation on.
    
    Args:
        level: Logging level (default: logging.INFO)
    """
    loggers = [
        'gofilepy',
        'gofilepy.client',
        'gofilepy.api',
        'gofilepy.upload',
        'gofilepy.upload.file',
        'gofilepy.download',
        'gofilepy.removal',
    ]
    
    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True


__all__ = [
    'GofileClient',
    'AsyncAPIClient',
    'APIConfig',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',
    'UploadTarget',
    'UploadOptions',
    'UploadResult',
    'UploadInfo',
    'FileEntry',
    'Representation',
    'DownloadStream',
    'hash_passphrase',
    'GofileError',
    'ServerResolutionError',
    'InvalidOptionError',
    'InvalidFileError',
    'UploadError',
    'InfoFetchError',
    'DownloadError',
    'RemovalError',
    'setup_logging',
]
