"""
PDB/mmCIF FTP Downloader.

Downloads structures from the wwPDB FTP mirrors, decompresses them
and saves them as <PDBID>.pdb or <PDBID>.cif files.

A single anonymous FTP session is opened and reused for all the
requested PDBIDs. PDBIDs that fail to download are logged and skipped.

PDBIDs are four character codes with at least one letter; purely
numeric codes are not valid. PDBIDs can be given as arguments or in
files listing one PDBID per line. At least two PDBIDs are required.

Mirrors:
    * us: ftp.wwpdb.org
    * eu: ftp.ebi.ac.uk
    * jp: ftp.pdbj.org

USAGE:
    $ fetchpdb 1ABC 4HHB
    $ fetchpdb -format cif -region eu 1ABC 4HHB
    $ fetchpdb pdbid.list another.list -d <FOLDER>
"""
import argparse
import sys

from fetchpdb import has_terminal, log
from fetchpdb.core.exceptions import FetchPDBException
from fetchpdb.libs import libcli
from fetchpdb.libs.libdownload import fetch_pdbs
from fetchpdb.libs.libio import concatenate_entries
from fetchpdb.logger import S, T, init_files


LOGFILESNAME = '.fetchpdb'
MIN_PDBIDS = 2

_prog, _des, _us = libcli.parse_doc_params(__doc__)

ap = libcli.CustomParser(
    prog='fetchpdb',
    description=libcli.detailed.format(_des),
    usage=_us,
    formatter_class=argparse.RawDescriptionHelpFormatter,
    )

libcli.add_version(ap)
libcli.add_argument_pdbids(ap)
libcli.add_argument_format(ap)
libcli.add_argument_region(ap)
libcli.add_argument_destination_folder(ap)


def main(pdbids, fmt='pdb', region='us', destination=None, **kwargs):
    """
    Perform main logic.

    Returns
    -------
    :class:`fetchpdb.libs.libdownload.BatchReport`
    """
    init_files(log, LOGFILESNAME)

    log.info(T('reading input PDB list'))
    pdbids = list(concatenate_entries(pdbids))
    log.info(S('{} PDBIDs', len(pdbids)))

    report = fetch_pdbs(
        pdbids,
        fmt=fmt,
        region=region,
        destination=destination,
        )

    log.info(T('PDB Downloader finished'))
    log.info(S('{}', report))
    if report.failed:
        log.info(S(
            'Failed PDBIDs have been registered in the '
            f'{LOGFILESNAME}.error file.'
            ))
    return report


def maincli():
    """
    Execute the downloader.

    Arguments are read from user command line input.
    Prints help and exits if less than two PDBIDs are given.
    """
    cmd = libcli.load_args(ap)

    if len(cmd.pdbids) < MIN_PDBIDS:
        ap.print_help()
        return

    try:
        main(**vars(cmd))
    except FetchPDBException as err:
        log.error(S('{}', err.report()))
        # without terminal the package log has no console handler
        if not has_terminal:
            sys.stderr.write(f'{err.report()}\n')
        sys.exit(1)

    log.info(S('finished properly'))


if __name__ == '__main__':
    maincli()
