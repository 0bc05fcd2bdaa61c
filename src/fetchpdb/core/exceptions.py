"""fetchpdb Exceptions."""
from fetchpdb import log
from fetchpdb.core import count_string_formatters


class FetchPDBException(Exception):
    r"""
    fetchpdb base exception.

    Parameters
    ----------
    *args
        If the first element of args contains ``'{}'`` it will be
        used as :attr:`errmsg` base string.
        Else, ``args`` are used to feed the sting method ``.format()``
        for the default exception :attr:`errmsg`.

    errmsg : optional
        If given, overrides any previous parameter and the ``str``
        value of ``errmsg`` is used as the Exception message.
        Defaults to ``None``.

    Examples
    --------
    Uses the default errormsg.
    >>> err = PDBIDError(1, '1234')

    >>> err = FetchPDBException('An error happened: {}, {}', var1, var2)

    >>> err = FetchPDBException('An error happened')

    >>> err = FetchPDBException(errmsg='Custom error msg')
    """

    errmsg = 'An unknown error has occurred.'

    def __init__(self, *args, errmsg=None):

        # FetchPDBException(errmsg='Custom error msg')
        if errmsg is not None:
            assert isinstance(errmsg, str), f'wrong errmsg type: {type(errmsg)}'
            self.errmsg = errmsg
            self.args = []

        elif len(args) == count_string_formatters(self.errmsg):
            self.args = args

        else:
            assert count_string_formatters(args[0]) == len(args[1:]), \
                'args passed to Exception are not compatible to form a message'
            self.errmsg = args[0]
            self.args = args[1:]

        log.debug(f'Exception errors: {self.errmsg}')
        log.debug(f'Exception args: {self.args}')

        assert count_string_formatters(self.errmsg) == len(self.args), (
            'Bad Exception message:\n'
            f'errmsg: {self.errmsg}\n'
            f'args: {self.args}'
            )

    def __str__(self):
        """Make me a string :-)."""
        return self.errmsg.format(*self.args)

    def report(self):
        """
        Report error in the form of a string.

        Identifies Error type and error message.

        Returns
        -------
        str
            The formatted string report.
        """
        return f'{self.__class__.__name__} * {self}'


class PDBIDError(FetchPDBException):
    """Raise when an input token is not a valid PDB ID."""

    errmsg = 'error in pdb {}: {}'


class MirrorNotFoundError(FetchPDBException):
    """Raise when the region does not name a known mirror."""

    errmsg = 'no such mirror: {}'


class FormatNotSupportedError(FetchPDBException):
    """Raise when the requested file format is not served."""

    errmsg = 'format not supported: {}'


class SessionError(FetchPDBException):
    """Raise when the FTP session cannot be opened, logged or closed."""

    errmsg = 'session with {} failed: {}'


class DownloadFailedError(FetchPDBException):
    """Raise when download fails."""

    errmsg = 'failed to download {}: {}'


class DestinationNotFoundError(FetchPDBException):
    """Raise when the destination folder does not exist."""

    errmsg = 'destination folder not found: {}'
