"""Helper module, which provides a TemporaryDirPath() context manager"""

import shutil
import tempfile


class TemporaryDirPath():
    """Context manager class, which creates a temporary directory and
    removes it with everything in it upon exit.

    Example:

        >>> with TemporaryDirPath() as dirname:
        >>>    writer = BitmapWriter(dirname)

    Args:
        suffix: If 'suffix' is not None, the directory name will end with
            that suffix.
        prefix: If 'prefix' is not None, the directory name will begin with
            that prefix, otherwise a default prefix is used.
    """

    def __init__(self, suffix=None, prefix=None):
        self.suffix = suffix
        self.prefix = prefix

    def __enter__(self) -> str:
        self.dirname = tempfile.mkdtemp(suffix=self.suffix, prefix=self.prefix)
        return self.dirname

    def __exit__(self, exc_type, exc_val, exc_tb):
        shutil.rmtree(self.dirname, ignore_errors=True)
