"""Import raw binary dataset dumps into HDF5 or NetCDF data files."""

from dump2h5.errors import (
    Dump2H5Error,
    MetadataError,
    SizeMismatchError,
    AlignmentError,
    DumpIOError,
    LibraryError,
)
from dump2h5.importer import import_file, BatchImporter

__version__ = '0.1.0'
