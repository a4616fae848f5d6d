"""
Data models for upload module.

Uses dataclasses for type-safe data structures.
"""
import io
import os
from collections.abc import AsyncIterable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Any, Optional, List, Tuple, Union

from ..exceptions import InvalidFileError

BUFFER_TYPES = (bytes, bytearray, memoryview)

Content = Union[bytes, bytearray, memoryview, io.IOBase, AsyncIterable]


@dataclass
class UploadTarget:
    """
    One file to upload.

    Attributes:
        content: Fixed buffer (bytes), binary file object, or async iterable of bytes
        name: Display name. Mandatory for buffers; streams may omit it.

    Example:
        >>> UploadTarget(b"hello", "hello.txt")
        >>> UploadTarget(open("report.pdf", "rb"))  # name inferred: report.pdf
    """
    content: Content
    name: Optional[str] = None

    @property
    def is_buffer(self) -> bool:
        return isinstance(self.content, BUFFER_TYPES)

    @property
    def is_stream(self) -> bool:
        return isinstance(self.content, (io.IOBase, AsyncIterable))

    @property
    def filename(self) -> Optional[str]:
        """Name sent with the part, inferred from file objects when not given."""
        if self.name:
            return self.name
        inferred = getattr(self.content, 'name', None)
        if isinstance(inferred, str) and inferred:
            return os.path.basename(inferred)
        return None

    def validate(self) -> None:
        """
        Check the target can be uploaded.

        Raises:
            InvalidFileError: If a buffer has no name or the content type is unsupported
        """
        if self.is_buffer:
            if not self.name:
                raise InvalidFileError("Filename must not be blank when using a buffer")
        elif not self.is_stream:
            raise InvalidFileError(
                f"Invalid file type: {type(self.content).__name__}"
            )


@dataclass
class UploadOptions:
    """
    Optional per-upload settings.

    Attributes:
        description: Upload description, at most 1000 characters
        password: 6-20 alphanumeric characters
        expire: Expiration as epoch seconds or milliseconds (number or numeric string) or a datetime
    """
    description: Optional[str] = None
    password: Optional[str] = None
    expire: Optional[Union[int, float, str, datetime]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'UploadOptions':
        """Create from dictionary."""
        return cls(
            description=data.get('description'),
            password=data.get('password'),
            expire=data.get('expire')
        )

    def __repr__(self) -> str:
        password = '***' if self.password else None
        return (
            f"UploadOptions(description={self.description!r}, "
            f"password={password!r}, expire={self.expire!r})"
        )


@dataclass(frozen=True)
class ValidatedOptions:
    """
    Upload options that passed validation.

    `expire` is already normalized to whole epoch seconds.
    """
    description: Optional[str] = None
    password: Optional[str] = None
    expire: Optional[int] = None

    def to_fields(self) -> List[Tuple[str, str]]:
        """Form fields for the present options."""
        fields = []
        if self.description is not None:
            fields.append(('description', self.description))
        if self.password is not None:
            fields.append(('password', self.password))
        if self.expire is not None:
            fields.append(('expire', str(self.expire)))
        return fields


@dataclass(frozen=True)
class UploadResult:
    """
    Result of a successful upload.

    Attributes:
        code: Upload code
        removal_code: Secret needed to delete the upload
        response: Raw data payload returned by the service
    """
    code: str
    removal_code: str
    response: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'UploadResult':
        """Create from the upload response payload."""
        return cls(
            code=data['code'],
            removal_code=data['removalCode'],
            response=dict(data)
        )

    @property
    def link(self) -> str:
        """Public page of the upload."""
        return f"https://gofile.io/?c={self.code}"
