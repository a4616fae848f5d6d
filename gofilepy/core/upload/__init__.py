"""
Upload module for gofile uploads.

Resolves a worker server, validates options and sends every file in a
single multipart request.
"""
from .coordinator import UploadCoordinator
from .form import build_upload_form, iter_file, FileValidator
from .models import UploadTarget, UploadOptions, ValidatedOptions, UploadResult
from .validator import (
    OptionValidator,
    normalize_expire,
    MAX_DESCRIPTION_LENGTH,
    EXPIRE_MILLISECONDS_THRESHOLD
)

__all__ = [
    # Main classes
    'UploadCoordinator',
    'OptionValidator',
    'FileValidator',
    
    # Models
    'UploadTarget',
    'UploadOptions',
    'ValidatedOptions',
    'UploadResult',
    
    # Helpers
    'build_upload_form',
    'iter_file',
    'normalize_expire',
    'MAX_DESCRIPTION_LENGTH',
    'EXPIRE_MILLISECONDS_THRESHOLD',
]
