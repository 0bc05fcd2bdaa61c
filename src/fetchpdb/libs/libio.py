"""Functions for reading and writing files."""
import os

from fetchpdb import Path, log
from fetchpdb.core.definitions import FILE_PERMISSIONS
from fetchpdb.logger import S


def concatenate_entries(entry_list):
    """
    Concatenate entries.

    Entries can be given in a list of entries or file paths with
    entry lists. Single entries in the input list are used directly
    while files are read and the first word of each line is added to
    the concatenated list. Empty lines and lines starting with ``#``
    are ignored.

    Notice:
        Does not discriminate between single entries and misspelled
        file paths. Every string that cannot be opened as a file
        is considered an individual entry.

    Parameters
    ----------
    entry_list : list
        List containing strings or file paths

    Yields
    ------
    str
        Single entries plus entries read from files.
    """
    for entry in entry_list:
        try:
            with Path(entry).open('r') as fh:
                lines = filter(bool, map(str.strip, fh))
                for line in lines:
                    if not line.startswith('#'):
                        yield line.split()[0]
        except (FileNotFoundError, NotADirectoryError, IsADirectoryError):
            yield str(entry)


def save_file(path, data, mode=FILE_PERMISSIONS):
    """
    Save bytes to a file.

    Existing files are overwritten.

    Parameters
    ----------
    path : str or Path
        The output file path.

    data : bytes
        The content to write.

    mode : int, optional
        The file permissions. Defaults to ``0o644``.
    """
    path = Path(path)
    path.write_bytes(data)
    os.chmod(path, mode)
    log.debug(S('saved {} bytes to {}', len(data), path))
