"""Reader for the CLIMATE.PAK and POLITIC.PAK world map rasters.

Both files share one layout, all little endian::

    u32 offsets[height]          one per row, in row order
    ...                          row data at arbitrary positions

Row data is a sequence of runs, each a ``u16`` count followed by a ``u8``
palette index, whose counts add up to the row width. Offsets are absolute
positions in the file, so rows may be shared or appear in any order.
"""

import enum
import logging
from typing import NamedTuple

from pakraster import settings
from pakraster.pakexceptions import (
    PAKEOFError,
    PAKRunOverflowError,
    PAKValueError,
)
from pakraster.utils import (
    PathLike,
    open_filename,
    resource_name,
    unpack_u8,
    unpack_u16,
    unpack_u32,
)

log = logging.getLogger(__name__)

# The world map itself is 1001x500, but the shipped decoder was tuned down to
# 29x16 and that is what existing callers expect.
PAK_WIDTH = 29
PAK_HEIGHT = 16
PAK_MAP_WIDTH = 1001
PAK_MAP_HEIGHT = 500

PAK_NAMES = ("CLIMATE.PAK", "POLITIC.PAK")

OFFSET_SIZE = 4
RUN_SIZE = 3


class PakError(enum.Enum):
    INVALID_NAME = "invalid name"
    OPEN_FAILED = "open failed"
    READ_FAILED = "read failed"
    RUN_OVERFLOW = "run overflow"


class LoadResult(NamedTuple):
    """Outcome of PakFile.load(). Truthy only on success."""

    ok: bool
    error: PakError | None = None
    detail: str = ""

    def __bool__(self) -> bool:
        return self.ok


LOAD_OK = LoadResult(True)


class PakBitmap(NamedTuple):
    """Indexed bitmap handed to consumers. Each byte is a palette index."""

    width: int
    height: int
    data: bytes


def decode_pak(
    data: bytes,
    width: int = PAK_WIDTH,
    height: int = PAK_HEIGHT,
    strict: bool | None = None,
) -> bytearray:
    """Expands PAK row runs into a row-major buffer of width * height bytes.

    Raises PAKEOFError when an offset or a run lies outside data. A run that
    overshoots its row is clamped, or raises PAKRunOverflowError when strict
    (defaults to settings.STRICT).
    """
    if strict is None:
        strict = settings.STRICT
    buf = bytearray(width * height)
    offset_pos = 0
    for row in range(height):
        row_pos = unpack_u32(data, offset_pos)
        offset_pos += OFFSET_SIZE
        base = row * width
        x = 0
        while x < width:
            count = unpack_u16(data, row_pos)
            value = unpack_u8(data, row_pos + 2)
            row_pos += RUN_SIZE
            if x + count > width:
                if strict:
                    raise PAKRunOverflowError(
                        f"row {row}: run of {count} at x={x} overshoots width {width}"
                    )
                log.warning(
                    "row %d: clamping run of %d at x=%d to width %d",
                    row,
                    count,
                    x,
                    width,
                )
                count = width - x
            buf[base + x : base + x + count] = bytes((value,)) * count
            x += count
    return buf


class PakFile:
    """Decodes CLIMATE.PAK or POLITIC.PAK into an indexed raster.

    Instances are not thread safe; serialize calls to load().
    """

    def __init__(
        self,
        path: PathLike | None = None,
        width: int = PAK_WIDTH,
        height: int = PAK_HEIGHT,
    ) -> None:
        if width <= 0 or height <= 0:
            raise PAKValueError(f"Invalid PAK dimensions: {width}x{height}")
        self._width = width
        self._height = height
        self._buffer = bytearray(width * height)
        self.loaded = False
        self.last_result: LoadResult | None = None
        if path is not None:
            self.load(path)

    def __repr__(self) -> str:
        return "<PakFile %dx%d loaded=%r>" % (self._width, self._height, self.loaded)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    # Names used by the map tools
    row_length = width
    row_count = height

    @property
    def buffer(self) -> bytes:
        return bytes(self._buffer)

    def replace_buffer(self, data: bytes) -> None:
        """Overwrites the raster with data, which must be width * height long."""
        if len(data) != len(self._buffer):
            raise PAKValueError(
                f"Buffer must be {len(self._buffer)} bytes, got {len(data)}"
            )
        self._buffer[:] = data

    def load(self, path: PathLike) -> LoadResult:
        """Loads and decodes a PAK file.

        The raster is only replaced when the whole file decodes; any failure
        leaves it as it was.
        """
        name = resource_name(path)
        if name not in PAK_NAMES:
            result = LoadResult(False, PakError.INVALID_NAME, name)
        else:
            result = self._load(path)
        if not result:
            log.warning("load %r failed: %s %s", path, result.error, result.detail)
        self.last_result = result
        return result

    def _load(self, path: PathLike) -> LoadResult:
        log.debug("loading: %r", path)
        try:
            with open_filename(path, "rb") as fp:
                data = fp.read()
        except OSError as e:
            return LoadResult(False, PakError.OPEN_FAILED, str(e))

        try:
            buf = decode_pak(data, self._width, self._height)
        except PAKEOFError as e:
            return LoadResult(False, PakError.READ_FAILED, str(e))
        except PAKRunOverflowError as e:
            return LoadResult(False, PakError.RUN_OVERFLOW, str(e))

        self._buffer = buf
        self.loaded = True
        log.debug("loaded: %r, %d bytes", path, len(data))
        return LOAD_OK

    def get_bitmap(self) -> PakBitmap:
        return PakBitmap(self._width, self._height, bytes(self._buffer))

    def get_value(self, x: int, y: int) -> int:
        """Returns the palette index at (x, y), or -1 when out of range."""
        if not (0 <= x < self._width and 0 <= y < self._height):
            return -1
        return self._buffer[y * self._width + x]
