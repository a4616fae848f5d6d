"""
Custom exceptions for gofile operations.

Every public operation raises one of these instead of returning an empty
result, so callers can tell a failure from an empty success.
"""
from typing import Optional, Any


class GofileError(Exception):
    """Base exception for all gofile-related errors."""
    
    def __init__(self, message: str, detail: Any = None) -> None:
        """
        Initialize the exception.
        
        Args:
            message: Error message
            detail: Raw service response (decoded JSON or text), if any
        """
        self.detail = detail
        super().__init__(message)


class ServerResolutionError(GofileError):
    """Raised when the broker does not hand out a worker server."""
    pass


class InvalidOptionError(GofileError):
    """Raised when an upload option fails validation."""
    
    def __init__(self, field: str, value: Any = None) -> None:
        """
        Initialize the exception.
        
        Args:
            field: Name of the offending option ('description', 'password', 'expire')
            value: Rejected value (never set for passwords)
        """
        self.field = field
        super().__init__(f"Invalid value for field {field}", detail=value)


class InvalidFileError(GofileError):
    """Raised when an upload target is missing, unnamed or unsupported."""
    pass


class UploadError(GofileError):
    """Raised when the worker rejects an upload."""
    pass


class InfoFetchError(GofileError):
    """Raised when upload metadata cannot be fetched (not found, wrong passphrase)."""
    pass


class DownloadError(GofileError):
    """Raised when any file of an upload fails to download."""
    
    def __init__(
        self,
        message: str,
        detail: Any = None,
        failed: Optional[list] = None
    ) -> None:
        """
        Initialize the exception.
        
        Args:
            message: Error message
            detail: Raw service response, if any
            failed: Names of the files that failed
        """
        self.failed = failed or []
        super().__init__(message, detail)


class RemovalError(GofileError):
    """Raised when an upload cannot be deleted."""
    pass
