"""
Unit Tests: File Storage Models

Tests for the upload adapters and the resource handle.
"""

from io import BytesIO
from pathlib import Path

import pytest
from fastapi import UploadFile

from flatstore.toolkit.file_storage import BytesUpload, FileResource, Upload, UploadFileAdapter


class TestUploadFileAdapter:
    """Test adapting FastAPI uploads."""

    def test_known_empty_size(self):
        upload = UploadFileAdapter(UploadFile(file=BytesIO(b""), filename="empty.txt", size=0))

        assert upload.is_empty() is True

    def test_known_size(self):
        upload = UploadFileAdapter(UploadFile(file=BytesIO(b"hi"), filename="a.txt", size=2))

        assert upload.is_empty() is False

    def test_unknown_size_of_empty_stream(self):
        upload = UploadFileAdapter(UploadFile(file=BytesIO(b""), filename="empty.txt"))

        assert upload.upload_file.size is None
        assert upload.is_empty() is True

    def test_unknown_size_of_non_empty_stream(self):
        stream = BytesIO(b"hello")
        upload = UploadFileAdapter(UploadFile(file=stream, filename="a.txt"))

        assert upload.is_empty() is False
        # Peeking must not consume the content
        assert stream.tell() == 0
        assert upload.get_input_stream().read() == b"hello"

    def test_peek_keeps_the_position(self):
        stream = BytesIO(b"hello")
        stream.seek(2)
        upload = UploadFileAdapter(UploadFile(file=stream, filename="a.txt"))

        assert upload.is_empty() is False
        assert stream.tell() == 2

    def test_stream_is_rewound(self):
        stream = BytesIO(b"hello")
        stream.read()
        upload = UploadFileAdapter(UploadFile(file=stream, filename="a.txt"))

        assert upload.get_input_stream().read() == b"hello"

    def test_original_filename(self):
        upload = UploadFileAdapter(UploadFile(file=BytesIO(b"hi"), filename="a.txt"))

        assert upload.original_filename == "a.txt"

    def test_is_an_upload(self):
        assert isinstance(UploadFileAdapter(UploadFile(file=BytesIO(b"hi"), filename="a.txt")), Upload)


class TestBytesUpload:
    """Test in-memory uploads."""

    @pytest.mark.parametrize("content, is_empty", [(b"", True), (b"\x00", False)])
    def test_is_empty(self, content: bytes, is_empty: bool):
        assert BytesUpload("a.bin", content).is_empty() is is_empty

    def test_is_an_upload(self):
        assert isinstance(BytesUpload("a.txt", b"hi"), Upload)


class TestFileResource:
    """Test the resource handle."""

    def test_missing_file(self, tmp_path: Path):
        resource = FileResource(tmp_path / "missing.txt")

        assert resource.exists() is False
        assert resource.is_readable() is False

    def test_directory_exists_but_is_not_readable(self, tmp_path: Path):
        resource = FileResource(tmp_path)

        assert resource.exists() is True
        assert resource.is_readable() is False

    def test_equality(self, tmp_path: Path):
        assert FileResource(tmp_path / "a.txt") == FileResource(tmp_path / "a.txt")
        assert FileResource(tmp_path / "a.txt") != FileResource(tmp_path / "b.txt")
