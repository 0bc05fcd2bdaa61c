"""Operations shared by client interfaces."""
import argparse
import sys

from fetchpdb import Path, __version__
from fetchpdb.core.definitions import (
    DEFAULT_FORMAT,
    DEFAULT_REGION,
    formats,
    mirrors,
    )


detailed = "detailed instructions:\n\n{}"


def load_args(ap):
    cmd = ap.parse_args()
    return cmd


# https://stackoverflow.com/questions/4042452
class CustomParser(argparse.ArgumentParser):
    """Custom Parser class."""

    def error(self, message):
        """Present error message."""
        self.print_help()
        sys.stderr.write('\nerror: %s\n' % message)
        sys.exit(2)


def parse_doc_params(docstring):
    """
    Parse client docstrings.

    Separates PROG, DESCRIPTION and USAGE from client main docstring.

    Parameters
    ----------
    docstring : str
        The module docstring.

    Returns
    -------
    tuple
        (prog, description, usage)
    """
    doclines = docstring.lstrip().split('\n')
    prog = doclines[0]
    description = '\n'.join(doclines[2:doclines.index('USAGE:')])
    usage = '\n'.join(doclines[doclines.index('USAGE:') + 1:])

    return prog, description, usage


def add_version(parser):
    """
    Add version ``-v`` option to parser.

    Displays a message informing the current version.
    Also accessible via ``--version``.

    Parameters
    ----------
    parser : `argparse.ArgumentParser <https://docs.python.org/3/library/argparse.html#argparse.ArgumentParser>`_
        The argument parser to add the version argument.
    """  # noqa: E501
    parser.add_argument(
        '-v',
        '--version',
        action='version',
        version=__version__,
        )


# arguments index:
# positional:
# pdbids

# optional:
# -d, --destination       : destination folder
# -format, --format       : file format
# -region, --region       : FTP mirror region


def add_argument_pdbids(parser):
    """
    Add arguments for PDBIDs.

    Files with the `.list` extension listing PDBIDs are also accepted.
    """
    parser.add_argument(
        'pdbids',
        help='PDBID identifiers to download, or files listing them.',
        nargs='*',
        )


def add_argument_destination_folder(parser):
    """
    Add destination folder argument.

    Parameters
    ----------
    parser : `argparse.ArgumentParser` object
    """
    parser.add_argument(
        '-d',
        '--destination',
        help=(
            'Existing folder where files will be stored. '
            'Defaults to current working directory.'
            ),
        type=Path,
        default=None,
        )


def add_argument_format(parser):
    """Add file format argument."""
    parser.add_argument(
        '-format',
        '--format',
        help=(
            'Format of the downloaded files {'
            + '|'.join(formats)
            + f'}}. Defaults to {DEFAULT_FORMAT}.'
            ),
        dest='fmt',
        default=DEFAULT_FORMAT,
        )


def add_argument_region(parser):
    """
    Add FTP mirror region argument.

    Values are not restricted here; unknown regions are
    reported when the mirror is selected.
    """
    parser.add_argument(
        '-region',
        '--region',
        help=(
            'Region of the FTP mirror {'
            + '|'.join(mirrors)
            + f'}}. Defaults to {DEFAULT_REGION}.'
            ),
        default=DEFAULT_REGION,
        )
