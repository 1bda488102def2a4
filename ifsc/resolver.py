"""
Bank name resolution for IFSC codes.

Resolution order (first hit wins):
1. Direct entry in the bank name dataset (any code, no validation).
2. The code must now validate, otherwise InvalidCodeError.
3. Sublet alias -> name of the aliased bank code.
4. Custom sublet prefix -> name of the target bank code (or the raw target).
5. Name of the bare 4-char bank prefix.

Steps 3 and 5 may yield "" when the target has no name entry. That is a
successful resolution, not an error: once a code validates, resolution never
raises.
"""

from __future__ import annotations

from typing import Optional, Protocol

from ifsc import datasets
from ifsc.errors import InvalidCodeError
from ifsc.indexes import IFSCIndexes
from ifsc.validator import validate


class ResolutionStrategy(Protocol):
    """One step of the name resolution chain; None means "not answered here"."""

    def resolve(self, indexes: IFSCIndexes, code: str) -> Optional[str]:
        ...


class DirectNameStrategy:
    def resolve(self, indexes: IFSCIndexes, code: str) -> Optional[str]:
        return indexes.bank_names.get(code)


class SubletStrategy:
    def resolve(self, indexes: IFSCIndexes, code: str) -> Optional[str]:
        bank_code = indexes.sublets.get(code)
        if bank_code is None:
            return None
        return indexes.bank_names.get(bank_code, "")


class CustomSubletStrategy:
    """Longest custom-sublet prefix of the code wins (case-sensitive)."""

    def match_prefix(self, indexes: IFSCIndexes, code: str) -> Optional[str]:
        best: Optional[str] = None
        for prefix in indexes.custom_sublets:
            if code.startswith(prefix) and (best is None or len(prefix) > len(best)):
                best = prefix
        return best

    def resolve(self, indexes: IFSCIndexes, code: str) -> Optional[str]:
        prefix = self.match_prefix(indexes, code)
        if prefix is None:
            return None
        target = indexes.custom_sublets[prefix]
        return indexes.bank_names.get(target, target)


class BankPrefixStrategy:
    def resolve(self, indexes: IFSCIndexes, code: str) -> Optional[str]:
        return indexes.bank_names.get(code[: datasets.BANK_CODE_LENGTH], "")


DIRECT_STRATEGIES: tuple[ResolutionStrategy, ...] = (DirectNameStrategy(),)

# Only consulted once the code has validated; the last step always answers
VALIDATED_STRATEGIES: tuple[ResolutionStrategy, ...] = (
    SubletStrategy(),
    CustomSubletStrategy(),
    BankPrefixStrategy(),
)


def _first_hit(strategies: tuple[ResolutionStrategy, ...], indexes: IFSCIndexes, code: str) -> Optional[str]:
    for strategy in strategies:
        name = strategy.resolve(indexes, code)
        if name is not None:
            return name
    return None


def get_bank_name(indexes: IFSCIndexes, code: str) -> str:
    """
    Resolve `code` (a bank code or an IFSC) to a bank name.

    Raises:
        InvalidCodeError: the code has no direct name entry and is not a valid IFSC.
    """

    if isinstance(code, str):
        name = _first_hit(DIRECT_STRATEGIES, indexes, code)
        if name is not None:
            return name

    if not validate(indexes, code):
        raise InvalidCodeError(code)

    name = _first_hit(VALIDATED_STRATEGIES, indexes, code)
    return name if name is not None else ""
