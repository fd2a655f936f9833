"""Miscellaneous Routines."""

import pathlib
import struct
from typing import Any, BinaryIO, Union, cast

from pakraster.pakexceptions import PAKEOFError, PAKTypeError

PathLike = Union[pathlib.PurePath, str]

_U16 = struct.Struct("<H")
_U32 = struct.Struct("<I")


class open_filename:
    """Context manager that allows opening a filename
    (str or pathlib.PurePath type is supported) and closes it on exit,
    (just like `open`).
    """

    def __init__(self, filename: PathLike, *args: Any, **kwargs: Any) -> None:
        if isinstance(filename, pathlib.PurePath):
            filename = str(filename)
        if isinstance(filename, str):
            self.file_handler: BinaryIO = open(filename, *args, **kwargs)  # noqa: SIM115
        else:
            raise PAKTypeError(f"Unsupported input type: {type(filename)}")

    def __enter__(self) -> BinaryIO:
        return self.file_handler

    def __exit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        self.file_handler.close()


def resource_name(path: PathLike) -> str:
    """Returns the terminal component of a path, upper-cased."""
    if isinstance(path, pathlib.PurePath):
        path = str(path)
    if not isinstance(path, str):
        raise PAKTypeError(f"Unsupported path type: {type(path)}")
    # PAK names come from DOS-era installs, accept either separator
    return path.replace("\\", "/").rsplit("/", 1)[-1].upper()


def unpack_u16(data: bytes, pos: int) -> int:
    """Unpacks a little endian unsigned short at pos."""
    try:
        return cast(int, _U16.unpack_from(data, pos)[0])
    except struct.error:
        raise PAKEOFError(f"u16 at {pos} runs past end of data ({len(data)} bytes)")


def unpack_u32(data: bytes, pos: int) -> int:
    """Unpacks a little endian unsigned long at pos."""
    try:
        return cast(int, _U32.unpack_from(data, pos)[0])
    except struct.error:
        raise PAKEOFError(f"u32 at {pos} runs past end of data ({len(data)} bytes)")


def unpack_u8(data: bytes, pos: int) -> int:
    if not 0 <= pos < len(data):
        raise PAKEOFError(f"u8 at {pos} runs past end of data ({len(data)} bytes)")
    return data[pos]
