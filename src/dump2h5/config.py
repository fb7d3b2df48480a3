# -*- coding: utf-8 -*-

"""
dump2h5/config.py

Central place for the constants that shape an import: metadata limits,
sidecar file suffixes, and the output-format selection rules. Other
modules import these names instead of hard-coding values.

Usage:
------
    from dump2h5.config import MAX_RANK, DIMS_SUFFIX
"""

# ───────────────────────────────────────────────────────────────────────────────
# 1) METADATA LIMITS
# ───────────────────────────────────────────────────────────────────────────────
MAX_RANK = 7                    # dimensions read from a .dims file, extra lines ignored
MAX_DIM_NAME_LENGTH = 512       # characters
UNLIMITED = -1                  # size sentinel, first dimension only

# ───────────────────────────────────────────────────────────────────────────────
# 2) SIDECAR FILES
# ───────────────────────────────────────────────────────────────────────────────
DIMS_SUFFIX = '.dims'
DTYPE_SUFFIX = '.dtype'

# literal contents of the .dtype file -> element size in bytes
ELEMENT_TYPES = {
    'float32': 4,
    'float64': 8,
}

# ───────────────────────────────────────────────────────────────────────────────
# 3) OUTPUT CONTAINERS
# ───────────────────────────────────────────────────────────────────────────────
DEFAULT_OUTFILE = 'data.h5'

# output paths ending in one of these (case-insensitive) are written as NetCDF
TABULAR_SUFFIXES = ('.nc', '.nc4')
TABULAR_FORMAT = 'NETCDF4'
# NetCDF variables are always double precision, whatever the dump holds
TABULAR_VARIABLE_DTYPE = 'f8'

# dump files are stored big-endian on disk
DUMP_BYTE_ORDER = '>'
