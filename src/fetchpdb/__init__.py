"""
fetchpdb.

Downloads protein structure entries from the wwPDB FTP mirrors.
"""
import logging
from os import get_terminal_size
from pathlib import Path as _Path


log = logging.getLogger(__name__)
log.setLevel(logging.DEBUG)

try:
    get_terminal_size()
except OSError:
    has_terminal = False
    log.addHandler(logging.NullHandler())
else:
    _ch = logging.StreamHandler()
    _ch.setLevel(logging.INFO)
    _ch.setFormatter(logging.Formatter('[%(asctime)s]%(message)s'))
    log.addHandler(_ch)
    has_terminal = True


class Path(type(_Path())):
    """
    Path object dedicated to this software.

    Inherits from pathlib.Path.

    This creates an interface so that if new methods are required
    the Path interface does not need to be refactored across.
    """


__version__ = '0.1.0'
