"""gofile API module."""
from .config import APIConfig, ProxyConfig, SSLConfig, TimeoutConfig
from .async_client import AsyncAPIClient
from .response_handler import ResponseHandler

__all__ = [
    # Async client
    'AsyncAPIClient',
    'ResponseHandler',
    
    # Configuration
    'APIConfig',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',
]
