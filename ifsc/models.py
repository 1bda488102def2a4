from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True, slots=True)
class BankDetails:
    """
    Bank-level reference record keyed by bank code.

    `ifsc` is the representative IFSC published for the bank (usually its
    head office or service branch). Every field except `code` is optional
    because the published datasets do not fill them for every bank.
    """

    code: str
    type: Optional[str] = None
    ifsc: Optional[str] = None
    micr: Optional[str] = None
    iin: Optional[str] = None
    apbs: bool = False
    ach_credit: bool = False
    ach_debit: bool = False
    nach_debit: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.code, str) or not self.code.strip():
            raise ValueError("code must be a non-empty string.")
        for name in ("type", "ifsc", "micr", "iin"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise TypeError(f"{name} must be a string or None.")


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, bool):
        raise TypeError(f"expected string, got {value!r}")
    # MICR/IIN are sometimes published as bare numbers
    if isinstance(value, int):
        return str(value)
    if not isinstance(value, str):
        raise TypeError(f"expected string, got {value!r}")
    return value


def bank_details_from_dict(code: str, data: Any) -> BankDetails:
    """
    Build a BankDetails record from one entry of the bank details dataset.

    The entry's own "code" field wins over the mapping key when present.
    Raises TypeError/ValueError when the entry has the wrong shape.
    """

    if not isinstance(data, dict):
        raise TypeError(f"bank details for {code!r} must be an object.")

    return BankDetails(
        code=_optional_str(data.get("code")) or code,
        type=_optional_str(data.get("type")),
        ifsc=_optional_str(data.get("ifsc")),
        micr=_optional_str(data.get("micr")),
        iin=_optional_str(data.get("iin")),
        apbs=bool(data.get("apbs", False)),
        ach_credit=bool(data.get("ach_credit", False)),
        ach_debit=bool(data.get("ach_debit", False)),
        nach_debit=bool(data.get("nach_debit", False)),
    )
