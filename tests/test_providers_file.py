import os
from pathlib import Path, PurePath

import pytest
from zope.interface.verify import verifyObject

from ioshim.exceptions import (
    ResourceNotFound,
    ResourcePermissionDenied,
    ResourceUnavailable,
)
from ioshim.interfaces import IStreamAppender, IStreamReader, IStreamWriter
from ioshim.providers.file import (
    FileUrlAppender,
    FileUrlReader,
    FileUrlWriter,
    PathReader,
)
from ioshim.resources import FileUrl
from ioshim.settings import Settings
from ioshim.strategy import Failure, return_result
from ioshim.streams import BYTES, LINE, STR, ByteInput, LineOutput, StreamOptions


class TestFileProviders:
    def test_interfaces(self):
        verifyObject(IStreamReader, FileUrlReader())
        verifyObject(IStreamWriter, FileUrlWriter())
        verifyObject(IStreamAppender, FileUrlAppender())

    def test_from_settings(self):
        reader = FileUrlReader.from_settings(Settings({"BUFFER_SIZE": 10}))
        assert reader.options.buffer_size == 10

    def test_path_provider_handles_paths(self):
        assert PathReader.resource_type is PurePath
        assert PathReader.mode == FileUrlReader.mode


class TestFiles:
    @pytest.fixture(autouse=True)
    def _setup(self, tmp_path, default_providers):
        self.providers = default_providers
        self.tmp_path = tmp_path

    def test_read_bytes(self):
        path = self.tmp_path / "data.bin"
        path.write_bytes(b"\x00\x01\x02")
        handle = self.providers.open_input(FileUrl(path))
        assert isinstance(handle, ByteInput)
        assert list(handle) == [0, 1, 2]
        handle.close()
        assert handle.closed

    def test_read_file_uri(self):
        path = self.tmp_path / "data.txt"
        path.write_text("content", encoding="utf-8")
        with self.providers.open_input(FileUrl(path.as_uri()), STR) as handle:
            assert handle.read_all() == "content"

    def test_read_path(self):
        path = self.tmp_path / "lines.txt"
        path.write_bytes(b"one\ntwo\n")
        with self.providers.open_input(path, LINE) as handle:
            assert list(handle) == ["one", "two"]

    def test_write_truncates(self):
        path = self.tmp_path / "out.txt"
        path.write_text("previous content")
        with self.providers.open_output(FileUrl(path), STR) as handle:
            handle.write_block("new")
        assert path.read_text() == "new"

    def test_write_lines(self):
        path = self.tmp_path / "out.txt"
        with self.providers.open_output(path, LINE) as handle:
            assert isinstance(handle, LineOutput)
            handle.write_block(["a", "b"])
        assert path.read_bytes() == b"a\nb\n"

    def test_sequential_appends(self):
        path = self.tmp_path / "log.txt"
        for text in ("a", "b"):
            with self.providers.open_append(FileUrl(path), STR) as handle:
                handle.write(text)
        with self.providers.open_input(FileUrl(path), STR) as handle:
            assert handle.read_all() == "ab"

    def test_append_bytes(self):
        path = self.tmp_path / "log.bin"
        path.write_bytes(b"x")
        output = self.providers.open_append(path, BYTES)
        output.write(ord("y"))
        output.close()
        assert path.read_bytes() == b"xy"

    def test_missing_file_throwing(self):
        missing = FileUrl(self.tmp_path / "missing.txt")
        with pytest.raises(ResourceNotFound) as excinfo:
            self.providers.open_input(missing)
        error = excinfo.value
        assert isinstance(error, ResourceUnavailable)
        assert isinstance(error, OSError)
        assert isinstance(error.__cause__, FileNotFoundError)
        assert error.resource == missing
        assert error.filename == str(missing.path)

    def test_missing_file_result(self):
        missing = FileUrl(self.tmp_path / "missing.txt")
        result = self.providers.open_input(
            missing, STR, strategy=return_result, category=ResourceNotFound
        )
        assert isinstance(result, Failure)
        assert isinstance(result.error, ResourceNotFound)

    def test_missing_directory_on_write(self):
        target = self.tmp_path / "no" / "such" / "dir.txt"
        result = self.providers.open_output(target, strategy=return_result)
        assert isinstance(result.error, ResourceNotFound)
        assert not target.parent.exists()

    def test_directory_is_unavailable(self):
        with pytest.raises(ResourceUnavailable):
            self.providers.open_input(self.tmp_path)

    def test_buffer_size_option(self):
        path = self.tmp_path / "data.bin"
        path.write_bytes(b"abcdef")
        reader = FileUrlReader(StreamOptions(buffer_size=2))
        with reader.open(FileUrl(path)) as handle:
            assert handle.read_block(4) == b"abcd"


class TestPermissions:
    @pytest.fixture(autouse=True)
    def _skip_as_root(self):
        if hasattr(os, "geteuid") and os.geteuid() == 0:
            pytest.skip("root ignores file permissions")

    def test_permission_denied(self, tmp_path: Path, default_providers):
        path = tmp_path / "secret.txt"
        path.write_text("secret")
        path.chmod(0)
        try:
            with pytest.raises(ResourcePermissionDenied):
                default_providers.open_input(path)
        finally:
            path.chmod(0o600)
