"""
Index builder for the IFSC directory.

Parses the five reference datasets into read-only indexes and derives the
reverse bank-name index. Runs once; any dataset that is still missing or
malformed after one reload attempt aborts construction with DatasetError.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Mapping

from ifsc import datasets
from ifsc.errors import DatasetError
from ifsc.loader import DatasetLoader
from ifsc.models import BankDetails, bank_details_from_dict
from ifsc.normalizer import normalize_code


@dataclass(frozen=True)
class IFSCIndexes:
    """
    Immutable bundle of every index the query functions read.

    primary:        bank prefix -> normalized branch suffixes
    bank_names:     bank code -> display name
    sublets:        alias code -> bank code
    custom_sublets: code prefix -> bank code
    banks:          bank code -> BankDetails
    bank_codes:     lowercase bank name -> bank codes (derived from bank_names)
    """

    primary: Mapping[str, tuple[str, ...]]
    bank_names: Mapping[str, str]
    sublets: Mapping[str, str]
    custom_sublets: Mapping[str, str]
    banks: Mapping[str, BankDetails]
    bank_codes: Mapping[str, tuple[str, ...]]


def _decode(payload: bytes) -> Any:
    if isinstance(payload, str):
        return json.loads(payload)
    if not isinstance(payload, (bytes, bytearray)):
        raise ValueError(f"loader returned {type(payload).__name__}, expected bytes")
    return json.loads(payload.decode("utf-8"))


def _require_object(data: Any) -> dict:
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    return data


def _branch_value(value: Any) -> str:
    # bool is an int subclass; true/false are not branch codes
    if isinstance(value, bool):
        raise ValueError(f"invalid branch code value: {value!r}")
    if isinstance(value, int):
        return normalize_code(str(value))
    if isinstance(value, float) and value.is_integer():
        return normalize_code(str(int(value)))
    if isinstance(value, str):
        return normalize_code(value)
    raise ValueError(f"invalid branch code value: {value!r}")


def parse_primary(data: Any) -> dict[str, tuple[str, ...]]:
    result: dict[str, tuple[str, ...]] = {}
    for bank_code, branches in _require_object(data).items():
        if not isinstance(branches, list):
            raise ValueError(f"branches for {bank_code!r} must be an array")
        result[bank_code] = tuple(_branch_value(v) for v in branches)
    return result


def parse_string_map(data: Any) -> dict[str, str]:
    result: dict[str, str] = {}
    for key, value in _require_object(data).items():
        if not isinstance(value, str):
            raise ValueError(f"value for {key!r} must be a string, got {value!r}")
        result[key] = value
    return result


def parse_bank_details(data: Any) -> dict[str, BankDetails]:
    result: dict[str, BankDetails] = {}
    for code, entry in _require_object(data).items():
        try:
            result[code] = bank_details_from_dict(code, entry)
        except (TypeError, ValueError) as e:
            raise ValueError(f"invalid bank details for {code!r}: {e}") from e
    return result


_PARSERS: dict[str, Callable[[Any], dict]] = {
    datasets.DATASET_IFSC: parse_primary,
    datasets.DATASET_BANK_NAMES: parse_string_map,
    datasets.DATASET_BANKS: parse_bank_details,
    datasets.DATASET_SUBLET: parse_string_map,
    datasets.DATASET_CUSTOM_SUBLETS: parse_string_map,
}


def load_dataset(loader: DatasetLoader, name: str) -> dict:
    """
    Load and parse a single dataset.

    Raises DatasetError (chained from the loader or parser failure).
    """

    parser = _PARSERS[name]
    try:
        payload = loader(name)
    except Exception as e:
        raise DatasetError(name, f"could not be loaded: {e}") from e

    try:
        return parser(_decode(payload))
    except (UnicodeDecodeError, json.JSONDecodeError, ValueError) as e:
        raise DatasetError(name, str(e)) from e


def generate_bank_codes_map(bank_names: Mapping[str, str]) -> dict[str, tuple[str, ...]]:
    """Group bank codes under their lowercased bank name, keeping insertion order."""
    grouped: dict[str, list[str]] = {}
    for bank_code, bank_name in bank_names.items():
        grouped.setdefault(bank_name.lower(), []).append(bank_code)
    return {name: tuple(codes) for name, codes in grouped.items()}


def build_indexes(loader: DatasetLoader) -> IFSCIndexes:
    """
    Build every index from `loader`.

    First pass loads all datasets; any dataset that failed gets one explicit
    reload. A dataset still failing after that raises DatasetError.
    """

    loaded: dict[str, dict] = {}
    failed: dict[str, DatasetError] = {}

    for name in datasets.ALL_DATASETS:
        try:
            loaded[name] = load_dataset(loader, name)
        except DatasetError as e:
            failed[name] = e

    for name, first_error in failed.items():
        print(f"[IFSCIndexes] WARNING: {first_error}; reloading {name}")
        # A second failure propagates and aborts construction
        loaded[name] = load_dataset(loader, name)

    bank_names = loaded[datasets.DATASET_BANK_NAMES]
    indexes = IFSCIndexes(
        primary=MappingProxyType(loaded[datasets.DATASET_IFSC]),
        bank_names=MappingProxyType(bank_names),
        sublets=MappingProxyType(loaded[datasets.DATASET_SUBLET]),
        custom_sublets=MappingProxyType(loaded[datasets.DATASET_CUSTOM_SUBLETS]),
        banks=MappingProxyType(loaded[datasets.DATASET_BANKS]),
        bank_codes=MappingProxyType(generate_bank_codes_map(bank_names)),
    )

    print(
        f"[IFSCIndexes] Loaded {len(indexes.primary)} bank prefixes, "
        f"{len(indexes.bank_names)} bank names, {len(indexes.sublets)} sublets, "
        f"{len(indexes.custom_sublets)} custom sublets, {len(indexes.banks)} bank details"
    )
    return indexes
