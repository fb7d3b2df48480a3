"""Container writers: HDF5 (hierarchical) and NetCDF (tabular).

Both writers add one named dataset per call and close the container
before returning. Which one is used depends only on the output path,
see ``select_writer``.
"""

import logging
from typing import Tuple

import h5py
import netCDF4

from dump2h5.acquire import RawBuffer
from dump2h5.config import TABULAR_SUFFIXES, TABULAR_FORMAT, TABULAR_VARIABLE_DTYPE
from dump2h5.descriptor import DatasetDescriptor
from dump2h5.errors import DumpIOError, LibraryError

logger = logging.getLogger(__name__)


class ContainerWriter:
    """Interface shared by the container writers.

    ``host_order`` tells the importer whether the buffer must be in host
    byte order (True) or may stay in the big-endian dump order (False)
    when ``write`` is called.
    """

    host_order = False

    def write(self, container_path: str, dataset_name: str, descriptor: DatasetDescriptor,
              buffer: RawBuffer, append: bool) -> None:
        raise NotImplementedError


class HierarchicalWriter(ContainerWriter):
    """Writes datasets into an HDF5 file with h5py.

    Elements are stored as big-endian IEEE floats of the dump's width,
    which is also the dump encoding, so the mapped bytes go to the
    library unconverted.
    """

    host_order = False

    def _open(self, path: str, append: bool) -> h5py.File:
        if append:
            try:
                return h5py.File(path, 'r+')
            except OSError as e:
                logger.debug('%s: cannot open for append (%s), creating', path, e)
        try:
            return h5py.File(path, 'w')
        except OSError as e:
            raise DumpIOError(f'{path}: Could not open file: {e}') from e

    def write(self, container_path, dataset_name, descriptor, buffer, append):
        dtype = descriptor.element_type.dump_dtype()
        data = buffer.view(dtype, descriptor.shape)
        with self._open(container_path, append) as h5:
            try:
                h5.create_dataset(dataset_name, shape=descriptor.shape, dtype=dtype, data=data)
            except (ValueError, TypeError, OSError, KeyError) as e:
                raise LibraryError(f'Could not create dataset "{dataset_name}": {e}') from e
        logger.info('%s: wrote dataset "%s" %s %s', container_path, dataset_name,
                    descriptor.shape, dtype.str)


class TabularWriter(ContainerWriter):
    """Writes variables into a NetCDF-4 file with netCDF4.

    Every dimension gets a named NetCDF dimension, taken from the .dims
    file or synthesized as ``<dataset>_<index>``. Variables are always
    stored as double precision, so float32 dumps are upcast on write.
    """

    host_order = True

    def _open(self, path: str, append: bool) -> netCDF4.Dataset:
        if append:
            try:
                return netCDF4.Dataset(path, 'a')
            except OSError as e:
                logger.debug('%s: cannot open for append (%s), creating', path, e)
        try:
            return netCDF4.Dataset(path, 'w', clobber=True, format=TABULAR_FORMAT)
        except OSError as e:
            raise DumpIOError(f'{path}: Could not open file: {e}') from e

    @staticmethod
    def dimension_names(dataset_name: str, descriptor: DatasetDescriptor) -> Tuple[str, ...]:
        return tuple(d.name if d.name else f'{dataset_name}_{i}'
                     for i, d in enumerate(descriptor.dims))

    def _define_dimensions(self, nc: netCDF4.Dataset, dataset_name: str,
                           descriptor: DatasetDescriptor) -> Tuple[str, ...]:
        names = self.dimension_names(dataset_name, descriptor)
        for name, dim in zip(names, descriptor.dims):
            existing = nc.dimensions.get(name)
            if existing is None:
                nc.createDimension(name, None if dim.unlimited else dim.size)
                continue
            if existing.isunlimited() or len(existing) == dim.size:
                continue
            raise LibraryError(
                f'{nc.filepath()}: dimension "{name}" already defined with size '
                f'{len(existing)}, {dataset_name} needs {dim.size}'
            )
        return names

    def write(self, container_path, dataset_name, descriptor, buffer, append):
        data = buffer.view(descriptor.element_type.native_dtype(), descriptor.shape)
        nc = self._open(container_path, append)
        try:
            names = self._define_dimensions(nc, dataset_name, descriptor)
            var = nc.createVariable(dataset_name, TABULAR_VARIABLE_DTYPE, names)
            var[tuple(slice(0, n) for n in descriptor.shape)] = data
        except (RuntimeError, ValueError, TypeError, IndexError) as e:
            raise LibraryError(f'{container_path}: {e}') from e
        finally:
            nc.close()
        logger.info('%s: wrote variable "%s" %s', container_path, dataset_name, descriptor.shape)


def is_tabular_path(path: str) -> bool:
    return str(path).lower().endswith(TABULAR_SUFFIXES)


def select_writer(output_path: str) -> ContainerWriter:
    """Pick the writer for ``output_path`` from its suffix."""
    if is_tabular_path(output_path):
        return TabularWriter()
    return HierarchicalWriter()
