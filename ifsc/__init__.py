from .directory import IFSCDirectory
from .errors import (
    BankNameNotFoundError,
    DatasetError,
    IFSCError,
    InvalidCodeError,
    InvalidFormatError,
)
from .indexes import IFSCIndexes, build_indexes
from .loader import DatasetLoader, DirectoryDatasetLoader, MappingDatasetLoader
from .models import BankDetails
from .normalizer import normalize_code
from .resolver import get_bank_name
from .reverse_lookup import (
    get_bank_codes,
    get_bank_details,
    get_ifscs_by_bank_name,
    validate_bank_code,
    validate_ifsc_for_bank,
)
from .validator import validate

__all__ = [
    "BankDetails",
    "BankNameNotFoundError",
    "DatasetError",
    "DatasetLoader",
    "DirectoryDatasetLoader",
    "IFSCDirectory",
    "IFSCError",
    "IFSCIndexes",
    "InvalidCodeError",
    "InvalidFormatError",
    "MappingDatasetLoader",
    "build_indexes",
    "get_bank_codes",
    "get_bank_details",
    "get_bank_name",
    "get_ifscs_by_bank_name",
    "normalize_code",
    "validate",
    "validate_bank_code",
    "validate_ifsc_for_bank",
]
