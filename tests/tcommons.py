"""Common funcs and variables for tests."""
import ftplib
import gzip
import random

from fetchpdb.libs import libdownload


PDB_1ABC = b'HEADER    1ABC\nATOM      1  N   MET A   1\nEND\n'
PDB_4HHB = b'HEADER    4HHB\nATOM      1  N   VAL A   1\nEND\n'
PDB_2XYZ = b'HEADER    2XYZ\nATOM      1  N   GLY A   1\nEND\n'
CIF_4HHB = b'data_4HHB\n_entry.id 4HHB\n'

US_PDB = '/pub/pdb/data/structures/divided/pdb/'
US_CIF = '/pub/pdb/data/structures/divided/mmCIF/'


class FakeFTP:
    """
    Mimic :class:`ftplib.FTP` serving gzipped files from memory.

    Subclass it to set the served `files` and the errors to raise.
    """

    files = {}
    instances = []
    connect_error = None
    login_error = None
    quit_error = None

    def __init__(self, timeout=None):
        self.timeout = timeout
        self.host = ''
        self.port = None
        self.user = None
        self.passwd = None
        self.commands = []
        self.closed = False
        self.instances.append(self)

    def connect(self, host, port):
        self.host = host
        self.port = port
        if self.connect_error:
            raise self.connect_error
        return '220 welcome'

    def login(self, user, passwd):
        self.user = user
        self.passwd = passwd
        if self.login_error:
            raise self.login_error
        return '230 logged in'

    def retrbinary(self, cmd, callback):
        # as ftplib.FTP.putline
        if '\r' in cmd or '\n' in cmd:
            raise ValueError(
                'an illegal newline character should not be contained'
                )
        self.commands.append(cmd)
        remote = cmd.split(' ', 1)[1]
        try:
            data = self.files[remote]
        except KeyError:
            raise ftplib.error_perm(f'550 {remote}: No such file') from None
        callback(data)
        return '226 transfer complete'

    def quit(self):
        self.commands.append('QUIT')
        self.closed = True
        if self.quit_error:
            raise self.quit_error
        return '221 goodbye'

    def close(self):
        self.closed = True


def patch_ftp(monkeypatch, files=None, **errors):
    """
    Replace ftplib.FTP by a fresh :class:`FakeFTP` subclass.

    Parameters
    ----------
    files : dict, optional
        Maps remote paths to their uncompressed content.

    **errors
        `connect_error`, `login_error` or `quit_error` exceptions.

    Returns
    -------
    The FakeFTP subclass in use.
    """
    attrs = {
        'files': {k: gzip.compress(v) for k, v in (files or {}).items()},
        'instances': [],
        }
    attrs.update(errors)
    fake = type('FTP', (FakeFTP,), attrs)
    monkeypatch.setattr(libdownload.ftplib, 'FTP', fake)
    return fake


def random_type():
    """Return a random builtin type."""
    types = [
        1,
        1.0,
        [1, 2],
        {'a': 1},
        None,
        {},
        [],
        set(),
        ]
    return random.choice(types)
