"""Tests for local file helpers."""
import tempfile
from pathlib import Path

import pytest

from gofilepy.core.exceptions import InvalidFileError
from gofilepy.core.upload import FileValidator, iter_file


class TestFileValidator:
    """Test suite for FileValidator."""
    
    @pytest.fixture
    def validator(self):
        return FileValidator()
    
    def test_validate_existing_file(self, validator, tmp_path):
        path = tmp_path / "a.txt"
        path.write_bytes(b"test content")
        
        validated, size = validator.validate(str(path))
        
        assert validated == path
        assert size == 12
    
    def test_validate_nonexistent_file(self, validator):
        with pytest.raises(InvalidFileError, match="not found"):
            validator.validate(Path("/nonexistent/file.txt"))
    
    def test_validate_directory(self, validator):
        with pytest.raises(InvalidFileError, match="not a file"):
            validator.validate(Path(tempfile.gettempdir()))


class TestIterFile:
    """Test suite for iter_file."""
    
    @pytest.mark.asyncio
    async def test_reads_in_chunks(self, tmp_path):
        path = tmp_path / "data.bin"
        path.write_bytes(b"0123456789ABCDEFGHIJ")
        
        chunks = [chunk async for chunk in iter_file(path, chunk_size=8)]
        
        assert chunks == [b"01234567", b"89ABCDEF", b"GHIJ"]
    
    @pytest.mark.asyncio
    async def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.bin"
        path.write_bytes(b"")
        
        assert [chunk async for chunk in iter_file(path)] == []
