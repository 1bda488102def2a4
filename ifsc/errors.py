"""
Exceptions raised by the IFSC directory.

DatasetError is a startup failure: the directory cannot serve queries without
every dataset. The rest are per-query failures surfaced to the caller.
"""

from __future__ import annotations

from typing import Optional


class IFSCError(Exception):
    """Base class for all IFSC directory errors."""


class DatasetError(IFSCError):
    """A required dataset is missing or malformed."""

    def __init__(self, dataset: str, reason: str) -> None:
        super().__init__(f"there is some error in {dataset} file: {reason}")
        self.dataset = dataset
        self.reason = reason


class InvalidCodeError(IFSCError, ValueError):
    """A code failed structural or membership validation."""

    def __init__(self, code: Optional[str], message: str = "invalid bank code") -> None:
        super().__init__(f"{message}: {code!r}")
        self.code = code


class InvalidFormatError(InvalidCodeError):
    """An IFSC passed for bank matching is not a valid IFSC."""

    def __init__(self, code: Optional[str]) -> None:
        super().__init__(code, "invalid IFSC code format")


class BankNameNotFoundError(IFSCError, LookupError):
    def __init__(self, bank_name: str) -> None:
        super().__init__(f"bank name not found: {bank_name!r}")
        self.bank_name = bank_name
