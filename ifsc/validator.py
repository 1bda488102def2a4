from __future__ import annotations

from typing import Any

from ifsc import datasets
from ifsc.indexes import IFSCIndexes
from ifsc.normalizer import normalize_code


def validate(indexes: IFSCIndexes, code: Any) -> bool:
    """
    Check that `code` is a well-formed IFSC whose branch exists under its bank.

    Layout is AAAA0BBBBBB: 11 characters with a literal "0" at index 4. Letters
    are matched case-insensitively. A malformed code is simply not valid; no
    exception is raised.
    """

    if not isinstance(code, str):
        return False
    if len(code) != datasets.IFSC_LENGTH or code[datasets.SEPARATOR_INDEX] != datasets.SEPARATOR_CHAR:
        return False

    bank_code = code[: datasets.BANK_CODE_LENGTH].upper()
    branch_code = code[datasets.SEPARATOR_INDEX + 1 :].upper()

    branches = indexes.primary.get(bank_code)
    if branches is None:
        return False

    return normalize_code(branch_code) in branches
