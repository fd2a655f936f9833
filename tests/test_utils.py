import pathlib

import pytest

from pakraster.pakexceptions import PAKEOFError
from pakraster.utils import (
    open_filename,
    resource_name,
    unpack_u8,
    unpack_u16,
    unpack_u32,
)


class TestOpenFilename:
    def test_string_input(self, tmp_path):
        filename = tmp_path / "CLIMATE.PAK"
        filename.write_bytes(b"\x00")
        with open_filename(str(filename), "rb") as fp:
            assert fp.read() == b"\x00"
        assert fp.closed

    def test_pathlib_input(self, tmp_path):
        filename = tmp_path / "CLIMATE.PAK"
        filename.write_bytes(b"\x00")
        with open_filename(filename, "rb") as fp:
            assert fp.read() == b"\x00"
        assert fp.closed

    def test_file_object_rejected(self, tmp_path):
        filename = tmp_path / "CLIMATE.PAK"
        filename.write_bytes(b"\x00")
        with open(filename, "rb") as in_file:
            with pytest.raises(TypeError):
                open_filename(in_file)

    def test_unsupported_input(self):
        with pytest.raises(TypeError):
            open_filename(0)


class TestResourceName:
    def test_posix_path(self):
        assert resource_name("/games/arena2/climate.pak") == "CLIMATE.PAK"

    def test_windows_path(self):
        assert resource_name("C:\\ARENA2\\Politic.Pak") == "POLITIC.PAK"

    def test_pathlib_path(self):
        assert resource_name(pathlib.PurePosixPath("a/b/POLITIC.PAK")) == "POLITIC.PAK"

    def test_bare_name(self):
        assert resource_name("foo.pak") == "FOO.PAK"


class TestUnpack:
    def test_little_endian(self):
        data = b"\x01\x02\x03\x04\x05"
        assert unpack_u16(data, 0) == 0x0201
        assert unpack_u32(data, 1) == 0x05040302
        assert unpack_u8(data, 4) == 5

    def test_past_end(self):
        data = b"\x01\x02\x03"
        with pytest.raises(PAKEOFError):
            unpack_u32(data, 0)
        with pytest.raises(PAKEOFError):
            unpack_u16(data, 2)
        with pytest.raises(PAKEOFError):
            unpack_u8(data, 3)

    def test_eof_error_is_eoferror(self):
        with pytest.raises(EOFError):
            unpack_u16(b"", 0)
