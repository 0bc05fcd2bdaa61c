"""Functions and variables to download files from the wwPDB FTP mirrors."""
import ftplib
import gzip
import posixpath
import zlib
from collections import namedtuple
from io import BytesIO

from fetchpdb import Path, log
from fetchpdb.core import exceptions as EXCPTS
from fetchpdb.core.definitions import (
    ANONYMOUS,
    CONNECTION_TIMEOUT,
    DEFAULT_FORMAT,
    DEFAULT_REGION,
    formats,
    mirrors,
    )
from fetchpdb.libs.libio import save_file
from fetchpdb.libs.libpdb import validate_pdbids
from fetchpdb.logger import S, T


FTP_ERRORS = ftplib.all_errors
# ValueError: ftplib refuses commands with line breaks
ITEM_ERRORS = FTP_ERRORS + (zlib.error, ValueError)

RetrievalTask = namedtuple('RetrievalTask', ['remote', 'filename'])
ItemResult = namedtuple('ItemResult', ['task', 'error'])


class BatchReport:
    """
    Ordered outcome of a batch download.

    Each element is an :class:`ItemResult`, whose ``error`` is ``None``
    when the file was written to disk and the failure message otherwise.
    """

    def __init__(self, results=()):
        self.results = list(results)

    def __repr__(self):
        return '{}(\n    {})\n'.format(
            self.__class__.__name__,
            ',\n    '.join(repr(x) for x in self),
            )

    def __str__(self):
        return '{} with {} succeeded and {} failed.'.format(
            self.__class__.__name__,
            len(self.succeeded),
            len(self.failed),
            )

    def __iter__(self):
        return iter(self.results)

    def __getitem__(self, index):
        return self.results[index]

    def __len__(self):
        return len(self.results)

    def append(self, result):
        """Register the result of one task."""
        self.results.append(result)

    @property
    def succeeded(self):
        """Tasks written to disk."""
        return [r.task for r in self.results if r.error is None]

    @property
    def failed(self):
        """Results of the tasks that failed."""
        return [r for r in self.results if r.error is not None]


def get_mirror(region):
    """
    Get the mirror endpoint for a region.

    Parameters
    ----------
    region : str
        One of ``us``, ``eu`` or ``jp``.

    Returns
    -------
    :class:`fetchpdb.core.definitions.MirrorEndpoint`

    Raises
    ------
    :class:`fetchpdb.core.exceptions.MirrorNotFoundError`
    """
    try:
        return mirrors[region]
    except KeyError as err:
        raise EXCPTS.MirrorNotFoundError(region) from err


def get_format(name):
    """Get the :class:`FormatSpec` for a format name, ``pdb`` or ``cif``."""
    try:
        return formats[name]
    except KeyError as err:
        raise EXCPTS.FormatNotSupportedError(name) from err


def make_task(pdbid, fmt, mirror):
    """
    Resolve the remote path and the local file name of a PDB ID.

    The wwPDB archive is divided in folders named after the second
    and third characters of the PDB ID, for example: ``1abc`` is under
    the ``ab`` folder.

    Parameters
    ----------
    pdbid : str
        A validated lower case PDB ID.

    fmt : :class:`fetchpdb.core.definitions.FormatSpec`

    mirror : :class:`fetchpdb.core.definitions.MirrorEndpoint`

    Returns
    -------
    :class:`RetrievalTask`
    """
    remote = posixpath.join(
        mirror.path,
        fmt.folder,
        pdbid[1:3],
        f'{fmt.prefix}{pdbid}{fmt.remote_ext}',
        )
    return RetrievalTask(remote, f'{pdbid}{fmt.local_ext}')


def make_tasks(pdbids, fmt, mirror):
    """Resolve a :class:`RetrievalTask` for each PDB ID, keeping order."""
    return [make_task(pdbid, fmt, mirror) for pdbid in pdbids]


def open_session(mirror, timeout=CONNECTION_TIMEOUT):
    """
    Open an anonymous FTP session to a mirror.

    Raises
    ------
    :class:`fetchpdb.core.exceptions.SessionError`
        If connection or login fail.
    """
    address = f'{mirror.host}:{mirror.port}'
    ftp = ftplib.FTP(timeout=timeout)

    try:
        ftp.connect(mirror.host, mirror.port)
    except FTP_ERRORS as err:
        raise EXCPTS.SessionError(address, err) from err

    try:
        ftp.login(ANONYMOUS, ANONYMOUS)
    except FTP_ERRORS as err:
        ftp.close()
        raise EXCPTS.SessionError(address, err) from err

    log.info(S('connected to {}', address))
    return ftp


def close_session(ftp):
    """Send QUIT to the server, raises SessionError if it fails."""
    try:
        ftp.quit()
    except FTP_ERRORS as err:
        raise EXCPTS.SessionError(ftp.host, err) from err


def retrieve_from_conn(ftp, task, destination=None):
    """
    Download, decompress and save the file of a task.

    Parameters
    ----------
    ftp : ftplib.FTP
        An open and logged in session.

    task : :class:`RetrievalTask`

    destination : str or Path, optional
        The folder where to save the file.
        Defaults to the current working directory.

    Returns
    -------
    Path
        The path of the saved file.

    Raises
    ------
    :class:`fetchpdb.core.exceptions.DownloadFailedError`
        If the transfer, decompression or writing fail.
    """
    if destination:
        fout = Path(destination, task.filename)
    else:
        fout = Path(task.filename)
    buffer = BytesIO()

    try:
        ftp.retrbinary(f'RETR {task.remote}', buffer.write)
        save_file(fout, gzip.decompress(buffer.getvalue()))
    except ITEM_ERRORS as err:
        raise EXCPTS.DownloadFailedError(task.filename, err) from err

    log.info(S('loaded {}', fout))
    return fout


def fetch_batch(mirror, tasks, destination=None):
    """
    Download a list of tasks reusing a single session.

    Failed tasks are logged and skipped. Errors opening or closing
    the session propagate.

    Parameters
    ----------
    mirror : :class:`fetchpdb.core.definitions.MirrorEndpoint`

    tasks : list of :class:`RetrievalTask`

    destination : str or Path, optional
        As in :func:`retrieve_from_conn`.

    Returns
    -------
    :class:`BatchReport`
    """
    ftp = open_session(mirror)

    report = BatchReport()
    try:
        for task in tasks:
            try:
                retrieve_from_conn(ftp, task, destination=destination)
            except EXCPTS.DownloadFailedError as err:
                log.error(S('{}', err))
                report.append(ItemResult(task, str(err)))
            else:
                report.append(ItemResult(task, None))
    finally:
        close_session(ftp)

    return report


def fetch_pdbs(
        pdbids,
        fmt=DEFAULT_FORMAT,
        region=DEFAULT_REGION,
        destination=None,
        ):
    """
    Download PDB IDs from a regional mirror.

    Configuration and PDB ID errors are raised before connecting.
    Files that fail to download do not raise, see the returned report.

    Parameters
    ----------
    pdbids : list of str
        The raw PDB IDs.

    fmt : str, optional
        ``pdb`` or ``cif``. Defaults to ``pdb``.

    region : str, optional
        ``us``, ``eu`` or ``jp``. Defaults to ``us``.

    destination : str or Path, optional
        An existing folder, as in :func:`retrieve_from_conn`.

    Returns
    -------
    :class:`BatchReport`
    """
    mirror = get_mirror(region)
    fmt = get_format(fmt)
    if destination and not Path(destination).is_dir():
        raise EXCPTS.DestinationNotFoundError(destination)
    tasks = make_tasks(validate_pdbids(pdbids), fmt, mirror)

    log.info(T('downloading {} {} files', len(tasks), fmt.name))
    return fetch_batch(mirror, tasks, destination=destination)
