"""Passphrase hashing."""
import hashlib


def hash_passphrase(passphrase: str) -> str:
    """
    Hash a passphrase the way the service expects it on protected uploads.
    
    Args:
        passphrase: Plaintext passphrase (may be empty)
        
    Returns:
        64-character lowercase SHA-256 hex digest
    """
    return hashlib.sha256(passphrase.encode('utf-8')).hexdigest()
