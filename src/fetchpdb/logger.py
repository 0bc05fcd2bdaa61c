"""Manages operations with logging."""
import logging


def titlelog(msg, *args):
    """Format a message to a title."""
    msg = msg.title()
    return f'{msg.format(*args)}:'


def subline(msg, *args, spacer=' ', indent=4):
    """Format a line to a sub log line."""
    return f'{spacer * indent}{msg.format(*args)}'


T = titlelog
S = subline


def init_files(log, logfilesname, clear=False):
    """
    Initiate log files.

    Three log files are created:
        - .debug
        - .log
        - .error

    where, .debug stores all technical details related to debugging
    routines; .log refers to user directed messages, the record of
    which entries were downloaded; finally, .error stores the entries
    that failed to download and the errors that stopped the run.
    """
    if clear:
        log.handlers.clear()

    debugfile = logging.FileHandler(f'{logfilesname}.debug', mode='w')
    debugfile.setLevel(logging.DEBUG)
    debugfile.setFormatter(logging.Formatter(
        "[%(asctime)s]%(filename)s:%(name)s:%(funcName)s:%(lineno)d: "
        "%(message)s"
        ))
    log.addHandler(debugfile)

    infolog = logging.FileHandler(f'{logfilesname}.log', mode='w')
    infolog.setLevel(logging.INFO)
    log.addHandler(infolog)
    infolog.setFormatter(logging.Formatter('[%(asctime)s]%(message)s'))

    errorlog = logging.FileHandler(f'{logfilesname}.error', mode='w')
    errorlog.setLevel(logging.ERROR)
    errorlog.setFormatter(logging.Formatter('[%(asctime)s]%(message)s'))
    log.addHandler(errorlog)
