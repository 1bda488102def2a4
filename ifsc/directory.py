from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from ifsc import resolver, reverse_lookup, validator
from ifsc.indexes import IFSCIndexes, build_indexes
from ifsc.loader import DatasetLoader, DirectoryDatasetLoader
from ifsc.models import BankDetails


class IFSCDirectory:
    """
    Read-only IFSC directory over one set of built indexes.

    Build it once at startup and share it; every query is a pure read.

    Usage:
        directory = IFSCDirectory.from_directory("/srv/ifsc-data")
        directory.validate("HDFC0000001")
        directory.get_bank_name("HDFC0000001")
    """

    def __init__(self, indexes: IFSCIndexes) -> None:
        if not isinstance(indexes, IFSCIndexes):
            raise TypeError("indexes must be an IFSCIndexes.")
        self._indexes = indexes

    @classmethod
    def from_loader(cls, loader: DatasetLoader) -> "IFSCDirectory":
        return cls(build_indexes(loader))

    @classmethod
    def from_directory(cls, path: Union[str, Path]) -> "IFSCDirectory":
        return cls.from_loader(DirectoryDatasetLoader(path))

    def validate(self, code: str) -> bool:
        return validator.validate(self._indexes, code)

    def get_bank_name(self, code: str) -> str:
        return resolver.get_bank_name(self._indexes, code)

    def validate_bank_code(self, bank_code: str) -> bool:
        return reverse_lookup.validate_bank_code(self._indexes, bank_code)

    def get_bank_codes(self, bank_name: str) -> list[str]:
        return reverse_lookup.get_bank_codes(self._indexes, bank_name)

    def get_bank_details(self, bank_code: str) -> Optional[BankDetails]:
        return reverse_lookup.get_bank_details(self._indexes, bank_code)

    def get_ifscs_by_bank_name(self, bank_name: str) -> list[str]:
        return reverse_lookup.get_ifscs_by_bank_name(self._indexes, bank_name)

    def validate_ifsc_for_bank(self, bank_name: str, ifsc: str) -> bool:
        return reverse_lookup.validate_ifsc_for_bank(self._indexes, bank_name, ifsc)

    def stats(self) -> dict[str, int]:
        """Entry counts per index."""
        ix = self._indexes
        return {
            "bank_prefixes": len(ix.primary),
            "branches": sum(len(branches) for branches in ix.primary.values()),
            "bank_names": len(ix.bank_names),
            "sublets": len(ix.sublets),
            "custom_sublets": len(ix.custom_sublets),
            "banks": len(ix.banks),
            "distinct_bank_names": len(ix.bank_codes),
        }
