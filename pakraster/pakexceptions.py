__all__ = [
    "PAKException",
    "PAKTypeError",
    "PAKValueError",
    "PAKEOFError",
    "PAKRunOverflowError",
]


class PAKException(Exception):
    """Base class for PAK raster exceptions."""


class PAKTypeError(PAKException, TypeError):
    pass


class PAKValueError(PAKException, ValueError):
    pass


class PAKEOFError(PAKException, EOFError):
    """Raised when a read runs past the end of the PAK data."""


class PAKRunOverflowError(PAKValueError):
    """Raised in strict mode when a run does not fit in its row."""
