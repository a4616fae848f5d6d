"""Tests for passphrase hashing."""
import hashlib
import re

import pytest

from gofilepy.core.crypto import hash_passphrase

HEX_64 = re.compile(r'^[0-9a-f]{64}$')


class TestHashPassphrase:
    """Test suite for hash_passphrase."""
    
    @pytest.mark.parametrize("passphrase", ["", "a", "secret", "pässwörd", "x" * 10000])
    def test_digest_format(self, passphrase):
        """Test digest is 64 lowercase hex characters."""
        assert HEX_64.match(hash_passphrase(passphrase))
    
    def test_deterministic(self):
        """Test same input gives same digest."""
        assert hash_passphrase("hunter2") == hash_passphrase("hunter2")
    
    def test_known_value(self):
        """Test digest matches SHA-256 of the UTF-8 bytes."""
        assert hash_passphrase("abc") == (
            "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
        )
    
    def test_empty_string(self):
        """Test empty passphrase hashes without error."""
        assert hash_passphrase("") == hashlib.sha256(b"").hexdigest()
    
    def test_no_collisions(self):
        """Test distinct inputs give distinct digests."""
        samples = [f"pass{i}" for i in range(500)] + ["Pass0", "pass0 ", ""]
        digests = {hash_passphrase(p) for p in samples}
        
        assert len(digests) == len(set(samples))
