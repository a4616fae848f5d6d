"""
Download module: upload metadata and concurrent file retrieval.
"""
from .fanout import DownloadFanout
from .info_fetcher import InfoFetcher
from .models import UploadInfo, FileEntry, Representation, DownloadStream, manifest_keys

__all__ = [
    'DownloadFanout',
    'InfoFetcher',
    'UploadInfo',
    'FileEntry',
    'Representation',
    'DownloadStream',
    'manifest_keys',
]
