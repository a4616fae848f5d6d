"""
Hashing utilities.
"""
from .hashing import hash_passphrase

__all__ = [
    'hash_passphrase',
]
