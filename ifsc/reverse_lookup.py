"""
Reverse lookups: bank name -> bank codes / IFSCs, and bank code membership.

Bank names are matched case-insensitively through the derived
lowercase-name index.
"""

from __future__ import annotations

from typing import Optional

from ifsc import datasets
from ifsc.errors import BankNameNotFoundError, InvalidFormatError
from ifsc.indexes import IFSCIndexes
from ifsc.models import BankDetails
from ifsc.validator import validate


def validate_bank_code(indexes: IFSCIndexes, bank_code: str) -> bool:
    """True if `bank_code` has a bank name entry."""
    return isinstance(bank_code, str) and bank_code in indexes.bank_names


def get_bank_codes(indexes: IFSCIndexes, bank_name: str) -> list[str]:
    """
    Get every bank code registered under `bank_name`.

    Raises:
        BankNameNotFoundError: no bank carries that name.
    """

    codes = indexes.bank_codes.get(bank_name.lower())
    if codes is None:
        raise BankNameNotFoundError(bank_name)
    return list(codes)


def get_bank_details(indexes: IFSCIndexes, bank_code: str) -> Optional[BankDetails]:
    """Get bank details by bank code, or None if the bank has no details entry."""
    return indexes.banks.get(bank_code)


def get_ifscs_by_bank_name(indexes: IFSCIndexes, bank_name: str) -> list[str]:
    """
    Get the representative IFSC of every bank code registered under `bank_name`.

    Codes without bank details or without an IFSC are skipped; order follows
    `get_bank_codes`.
    """

    ifscs: list[str] = []
    for bank_code in get_bank_codes(indexes, bank_name):
        details = get_bank_details(indexes, bank_code)
        if details is not None and details.ifsc:
            ifscs.append(details.ifsc)
    return ifscs


def validate_ifsc_for_bank(indexes: IFSCIndexes, bank_name: str, ifsc: str) -> bool:
    """
    Check whether `ifsc` belongs to the bank named `bank_name`.

    Raises:
        InvalidFormatError: `ifsc` is not a valid IFSC.
        BankNameNotFoundError: no bank carries that name.
    """

    if not validate(indexes, ifsc):
        raise InvalidFormatError(ifsc)

    bank_codes = get_bank_codes(indexes, bank_name)
    return ifsc[: datasets.BANK_CODE_LENGTH].upper() in bank_codes
