"""Test custom Exceptions."""
import inspect

import pytest
from hypothesis import given
from hypothesis import strategies as st

from fetchpdb.core import count_string_formatters
from fetchpdb.core import exceptions as EXCPTNS

from .tcommons import random_type


EXCPT_classes = inspect.getmembers(EXCPTNS, predicate=inspect.isclass)
error_classes = [
    t[1] for t in EXCPT_classes
    if issubclass(t[1], EXCPTNS.FetchPDBException)
    and t[0].endswith('Error')
    ]


@pytest.fixture(params=error_classes)
def ErrorClass(request):
    """Return custom Error Classes in exception module."""
    return request.param


exceptions_with_formattable_erromsg = list(filter(
    lambda x: count_string_formatters(x.errmsg) > 0,
    error_classes,
    ))


@pytest.fixture(params=exceptions_with_formattable_erromsg)
def ExcptsFormattable(request):
    """Return fetchpdb Exceptions with formattable errmsg."""
    return request.param


def test_all_errors_names_end_in_error():
    """Test whether all custom error classes end with 'Error'."""
    endswitherror = [t[1] for t in EXCPT_classes if t[0].endswith('Error')]
    subclss = [
        t[1] for t in EXCPT_classes
        if issubclass(t[1], EXCPTNS.FetchPDBException)
        ]
    assert len(endswitherror) == len(subclss) - 1  # FetchPDBException itself


def test_FetchPDBException_type():
    """Test FetchPDBException is Exception."""
    assert issubclass(EXCPTNS.FetchPDBException, Exception)


def test_FetchPDBExc_no_error_mg_0():
    """Test clean instation gives error msg."""
    errmsg = EXCPTNS.FetchPDBException.errmsg
    assert str(EXCPTNS.FetchPDBException()) == errmsg


@given(st.none())
def test_FetchPDBExc_errmsg_None(errmsg):
    """Test init with errmsg=None, should be ignored."""
    err = EXCPTNS.FetchPDBException(errmsg=errmsg)
    assert str(err) == EXCPTNS.FetchPDBException.errmsg


def test_ExceptionFormattableError(ExcptsFormattable):
    """Test Exceptions with formattable errmsgs."""
    num = count_string_formatters(ExcptsFormattable.errmsg)
    args = [random_type() for i in range(num)]
    str(ExcptsFormattable(*args))


@pytest.fixture(
    params=[
        ('some error {} {} {}', 1, 2, 'asd', 'some error 1 2 asd'),
        ('error {} {} {} {}', 1, 2, 3, 4, 'error 1 2 3 4'),
        ]
    )
def forcing_messages(request):
    """Formattable messages that override the default errmsg."""
    return request.param


def test_forcing_messages(ErrorClass, forcing_messages):
    """Test behaviour against when formattable string."""
    args, expected = forcing_messages[:-1], forcing_messages[-1]
    err = ErrorClass(*args)
    assert str(err) == expected


@pytest.mark.parametrize(
    'args,errmsg',
    [
        (['this should be ignored {} {}', 1, 2], 'some error.'),
        ]
    )
def test_FetchPDBException_errmsg(ErrorClass, args, errmsg):
    """Test FetchPDBException to errmsg without formatting args."""
    err = ErrorClass(*args, errmsg=errmsg)
    assert err.errmsg == errmsg


def test_ErrorClasses_are_FetchPDBExc_subclasses(ErrorClass):
    """Is subclass of FetchPDBException."""
    assert issubclass(ErrorClass, EXCPTNS.FetchPDBException)


@pytest.mark.parametrize(
    'err,expected',
    [
        (EXCPTNS.PDBIDError(2, '1234'), 'error in pdb 2: 1234'),
        (EXCPTNS.MirrorNotFoundError('xx'), 'no such mirror: xx'),
        (EXCPTNS.FormatNotSupportedError('map'), 'format not supported: map'),
        ]
    )
def test_default_messages(err, expected):
    """Test the default messages of the errors."""
    assert str(err) == expected


def test_report():
    """Test report identifies the error class."""
    err = EXCPTNS.MirrorNotFoundError('xx')
    assert err.report() == 'MirrorNotFoundError * no such mirror: xx'
