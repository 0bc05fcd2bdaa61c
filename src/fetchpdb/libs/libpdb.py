"""Contain handlers of PDB ID information."""
from fetchpdb.core import exceptions as EXCPTS


PDBID_LENGTH = 4


def _is_not_digit(char):
    return not '0' <= char <= '9'


def is_valid_pdbid(token):
    """
    Evaluate if `token` is a valid PDB ID.

    A valid PDB ID has exactly four characters and at least one of them
    is not a decimal digit. Purely numeric tokens, for example ``1234``,
    are not PDB IDs.

    Parameters
    ----------
    token : str

    Returns
    -------
    bool
    """
    return len(token) == PDBID_LENGTH and any(map(_is_not_digit, token))


def validate_pdbids(tokens):
    """
    Validate and normalize raw PDB ID tokens.

    Validation is all or nothing: the first invalid token aborts.

    Parameters
    ----------
    tokens : iterable of str
        The raw PDB IDs as given by the user.

    Returns
    -------
    tuple of str
        The lower case PDB IDs, in the input order.

    Raises
    ------
    :class:`fetchpdb.core.exceptions.PDBIDError`
        Reporting the 1-indexed position and the invalid token.
    """
    pdbids = []
    for i, token in enumerate(tokens, start=1):
        if not is_valid_pdbid(token):
            raise EXCPTS.PDBIDError(i, token)
        pdbids.append(token.lower())
    return tuple(pdbids)
