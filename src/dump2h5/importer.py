"""Import pipeline for dump files.

``import_file`` moves one dump into a container:

1. read ``<dump>.dims`` and ``<dump>.dtype``
2. compute block sizes and check the dump length, resolving an
   unlimited first dimension
3. map the dump, byte-swap it if the writer needs host order
4. hand it to the writer chosen from the output suffix

``BatchImporter`` runs ``import_file`` over files and directories in
order and owns the append policy of a run.
"""

import logging
import os
from typing import Iterable, List, Optional

from dump2h5.acquire import acquire
from dump2h5.config import DIMS_SUFFIX, DTYPE_SUFFIX
from dump2h5.descriptor import DatasetDescriptor
from dump2h5.endian import host_differs_from_dump, swap_in_place
from dump2h5.errors import MetadataError, SizeMismatchError, AlignmentError, DumpIOError
from dump2h5.layout import compute_block_sizes, validate_and_resolve_size
from dump2h5.metadata import parse_shape, parse_element_type
from dump2h5.writers import ContainerWriter, select_writer

logger = logging.getLogger(__name__)


def dataset_name_for(dump_path: str) -> str:
    return os.path.basename(dump_path)


def read_descriptor(dump_path: str) -> DatasetDescriptor:
    """Build the descriptor of ``dump_path`` from its sidecar files."""
    name = dataset_name_for(dump_path)
    dims = parse_shape(dump_path + DIMS_SUFFIX)
    if len(dims) == 0:
        raise MetadataError(f'{name}: Dataset has zero dimensions')
    element_type = parse_element_type(dump_path + DTYPE_SUFFIX)
    return DatasetDescriptor(dims=dims, element_type=element_type)


def import_file(output_path: str, dump_path: str, append: bool,
                writer: Optional[ContainerWriter] = None) -> bool:
    """Import one dump file as a dataset of ``output_path``.

    Args:
        output_path: HDF5 or NetCDF container to write to.
        dump_path: raw dump; its sidecars are ``dump_path + '.dims'`` and
            ``dump_path + '.dtype'``.
        append: open an existing container instead of truncating it.
        writer: writer to use, chosen from ``output_path`` when omitted.

    Returns:
        True if a dataset was written, False for an empty dump, which
        leaves the container untouched.
    """
    dataset_name = dataset_name_for(dump_path)
    descriptor = read_descriptor(dump_path)
    block_sizes = compute_block_sizes(descriptor.dims)

    try:
        total_bytes = os.path.getsize(dump_path)
    except OSError as e:
        raise DumpIOError(f'{dump_path}: {e}') from e

    try:
        dims = validate_and_resolve_size(descriptor.dims, block_sizes,
                                         descriptor.itemsize, total_bytes)
    except (SizeMismatchError, AlignmentError) as e:
        raise type(e)(f'{dump_path}: {e}') from e
    descriptor = DatasetDescriptor(dims=dims, element_type=descriptor.element_type)
    logger.debug('%s: rank %d, shape %s, %s', dump_path, descriptor.rank,
                 descriptor.shape, descriptor.element_type.value)

    if total_bytes == 0:
        logger.debug('%s: empty dump, nothing to write', dump_path)
        return False

    if writer is None:
        writer = select_writer(output_path)
    swap = writer.host_order and host_differs_from_dump()

    with acquire(dump_path, writable=swap) as buffer:
        if swap:
            swap_in_place(buffer.data, descriptor.itemsize)
        writer.write(output_path, dataset_name, descriptor, buffer, append)
    return True


def list_dump_files(directory: str) -> List[str]:
    """Dump files directly inside ``directory``.

    A dump is any non-directory entry whose name contains no ``.``,
    which excludes the sidecar files. Sorted by name.
    """
    try:
        with os.scandir(directory) as it:
            names = sorted(e.name for e in it if '.' not in e.name and not e.is_dir())
    except OSError as e:
        raise DumpIOError(f'{directory}: {e}') from e
    return [os.path.join(directory, n) for n in names]


class BatchImporter:
    """Imports a sequence of files and directories into one container.

    With ``append_after_first`` set (the default), only the first
    import of the run honours ``append``; every later import opens the
    existing container, so a run that starts by truncating the output
    still collects all of its datasets. With it cleared, every import
    uses ``append`` as given.
    """

    def __init__(self, output_path: str, append: bool = False, append_after_first: bool = True,
                 writer: Optional[ContainerWriter] = None):
        self.output_path = output_path
        self.append = append
        self.append_after_first = append_after_first
        self.writer = writer if writer is not None else select_writer(output_path)

    def run(self, paths: Iterable[str]) -> List[str]:
        """Import every path in order and return the dataset names written.

        The first failure propagates and ends the run.
        """
        written: List[str] = []
        append = self.append
        for position, path in enumerate(paths):
            if position > 0 and self.append_after_first:
                append = True
            if os.path.isdir(path):
                dumps = list_dump_files(path)
            else:
                dumps = [path]
            for dump_path in dumps:
                logger.debug('importing %s (append=%s)', dump_path, append)
                if import_file(self.output_path, dump_path, append, writer=self.writer):
                    written.append(dataset_name_for(dump_path))
                if self.append_after_first:
                    append = True
        return written
