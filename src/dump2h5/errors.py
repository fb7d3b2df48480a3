"""dump2h5 exception hierarchy.

Every failure during an import maps to one of these types. Components
raise them; only the command-line run loop reports them and exits.
"""


class Dump2H5Error(Exception):
    """Base exception for all import failures."""


class MetadataError(Dump2H5Error):
    """Raised for a missing or malformed .dims or .dtype sidecar file."""


class SizeMismatchError(Dump2H5Error):
    """Raised when the dump length does not match the declared shape."""


class AlignmentError(Dump2H5Error):
    """Raised when the dump length is not a multiple of the element size."""


class DumpIOError(Dump2H5Error):
    """Raised when a dump or container file cannot be opened, read or mapped."""


class LibraryError(Dump2H5Error):
    """Raised when the HDF5 or NetCDF library rejects a definition or write."""
