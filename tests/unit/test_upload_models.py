"""Tests for upload models."""
import io

import pytest

from gofilepy.core.exceptions import InvalidFileError
from gofilepy.core.upload import UploadTarget, UploadOptions, ValidatedOptions, UploadResult


async def _chunks():
    yield b"chunk"


class TestUploadTarget:
    """Test suite for UploadTarget."""
    
    def test_named_buffer_is_valid(self):
        target = UploadTarget(b"data", "a.txt")
        
        target.validate()
        assert target.is_buffer
        assert target.filename == "a.txt"
    
    @pytest.mark.parametrize("name", [None, ""])
    def test_unnamed_buffer_is_invalid(self, name):
        with pytest.raises(InvalidFileError, match="blank"):
            UploadTarget(b"data", name).validate()
    
    @pytest.mark.parametrize("content", [bytearray(b"x"), memoryview(b"x")])
    def test_other_buffer_types(self, content):
        target = UploadTarget(content, "x.bin")
        
        target.validate()
        assert target.is_buffer
    
    def test_stream_without_name(self):
        target = UploadTarget(io.BytesIO(b"data"))
        
        target.validate()
        assert target.is_stream
        assert target.filename is None
    
    def test_name_inferred_from_file_object(self, tmp_path):
        path = tmp_path / "report.pdf"
        path.write_bytes(b"%PDF")
        
        with open(path, "rb") as f:
            assert UploadTarget(f).filename == "report.pdf"
    
    def test_explicit_name_wins(self, tmp_path):
        path = tmp_path / "report.pdf"
        path.write_bytes(b"%PDF")
        
        with open(path, "rb") as f:
            assert UploadTarget(f, "renamed.pdf").filename == "renamed.pdf"
    
    @pytest.mark.asyncio
    async def test_async_iterable_is_stream(self):
        stream = _chunks()
        try:
            target = UploadTarget(stream)
            target.validate()
            assert target.is_stream
        finally:
            await stream.aclose()
    
    @pytest.mark.parametrize("content", ["text", 42, None, ["a"]])
    def test_unsupported_content(self, content):
        with pytest.raises(InvalidFileError, match="Invalid file type"):
            UploadTarget(content, "x").validate()


class TestUploadOptions:
    """Test suite for UploadOptions."""
    
    def test_from_dict(self):
        options = UploadOptions.from_dict({"description": "d", "password": "abc123", "expire": 5})
        
        assert options == UploadOptions(description="d", password="abc123", expire=5)
    
    def test_repr_hides_password(self):
        assert "abc123" not in repr(UploadOptions(password="abc123"))


class TestValidatedOptions:
    """Test suite for ValidatedOptions."""
    
    def test_only_present_fields(self):
        assert ValidatedOptions(expire=123).to_fields() == [("expire", "123")]


class TestUploadResult:
    """Test suite for UploadResult."""
    
    def test_from_dict(self):
        result = UploadResult.from_dict({"code": "abc123", "removalCode": "xyz"})
        
        assert result.code == "abc123"
        assert result.removal_code == "xyz"
        assert result.response == {"code": "abc123", "removalCode": "xyz"}
    
    def test_link(self):
        assert UploadResult("abc123", "xyz").link == "https://gofile.io/?c=abc123"
    
    def test_missing_key(self):
        with pytest.raises(KeyError):
            UploadResult.from_dict({"code": "abc123"})
