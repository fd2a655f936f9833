from importlib.metadata import PackageNotFoundError, version

from pakraster.pakfile import (
    PAK_HEIGHT,
    PAK_MAP_HEIGHT,
    PAK_MAP_WIDTH,
    PAK_WIDTH,
    LoadResult,
    PakBitmap,
    PakError,
    PakFile,
    decode_pak,
)

try:
    __version__ = version("pakraster")
except PackageNotFoundError:
    # package is not installed, return default
    __version__ = "0.0"

__all__ = [
    "PAK_HEIGHT",
    "PAK_MAP_HEIGHT",
    "PAK_MAP_WIDTH",
    "PAK_WIDTH",
    "LoadResult",
    "PakBitmap",
    "PakError",
    "PakFile",
    "decode_pak",
]

if __name__ == "__main__":
    print(__version__)
