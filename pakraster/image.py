import os
import os.path
from collections.abc import Sequence

from pakraster.pakexceptions import PAKValueError
from pakraster.pakfile import PakBitmap

PIL_ERROR_MESSAGE = (
    "Could not import Pillow. This dependency of pakraster is not "
    "installed by default. You need it to save PAK rasters as images. Install it "
    "with `pip install 'pakraster[image]'`"
)


class BitmapWriter:
    """Write decoded PAK rasters to image files

    Without a palette the raster is saved as grayscale, one level per index.
    """

    def __init__(self, outdir: str) -> None:
        self.outdir = outdir
        if not os.path.exists(self.outdir):
            os.makedirs(self.outdir)

    def export_bitmap(
        self,
        bitmap: PakBitmap,
        name: str,
        palette: Sequence[int] | None = None,
        ext: str = ".bmp",
    ) -> str:
        """Save a PakBitmap to disk, returns the file name used"""
        if len(bitmap.data) != bitmap.width * bitmap.height:
            raise PAKValueError(
                "Bitmap data is %d bytes, expected %dx%d"
                % (len(bitmap.data), bitmap.width, bitmap.height)
            )
        try:
            from PIL import Image  # type: ignore[import]
        except ImportError:
            raise ImportError(PIL_ERROR_MESSAGE)

        fmt = Image.registered_extensions().get(ext.lower())
        if fmt is None:
            raise PAKValueError(f"Unsupported image extension: {ext}")

        size = (bitmap.width, bitmap.height)
        if palette is None:
            img = Image.frombytes("L", size, bitmap.data, "raw")
        else:
            if len(palette) % 3 or len(palette) > 768:
                raise PAKValueError(
                    "Palette must be flat RGB triples, got %d entries" % len(palette)
                )
            img = Image.frombytes("P", size, bitmap.data, "raw")
            img.putpalette(list(palette))

        name, path = self._create_unique_image_name(name, ext)
        with open(path, "wb") as fp:
            img.save(fp, format=fmt)
        return name

    def _create_unique_image_name(self, base: str, ext: str) -> tuple[str, str]:
        name = base + ext
        path = os.path.join(self.outdir, name)
        img_index = 0
        while os.path.exists(path):
            name = "%s.%d%s" % (base, img_index, ext)
            path = os.path.join(self.outdir, name)
            img_index += 1
        return name, path
