"""Nigerian bank directory: CBN 3-digit bank codes and bank names.

The built-in table is static data. A JSON file of extra or corrected
entries can be merged over it, either explicitly with
``BankDirectory.from_json`` or through the ``NUBAN_BANKS_FILE``
environment variable for the shared default directory.
"""
from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Union

from nuban.errors import BankNotFound, InvalidBankCode

logger = logging.getLogger(__name__)

_BANKS_FILE_ENV = "NUBAN_BANKS_FILE"

BANK_CODE_PATTERN = re.compile(r"[0-9]{3}")

# =============================================================================
# CBN bank codes
# =============================================================================

_BANK_CODES: Dict[str, str] = {
    "011": "First Bank",
    "014": "Afribank",
    "023": "Citibank",
    "030": "Heritage Bank",
    "032": "Union Bank",
    "033": "United Bank For Africa",
    "035": "Wema Bank",
    "040": "Equatorial Trust Bank",
    "044": "Access Bank",
    "050": "Ecobank",
    "056": "Oceanic Bank",
    "057": "Zenith Bank",
    "058": "Guaranty Trust Bank",
    "063": "Diamond Bank",
    "068": "Standard Chartered Bank",
    "069": "Intercontinental Bank",
    "070": "Fidelity",
    "076": "Skye Bank",
    "082": "BankPhb",
    "084": "SpringBank",
    "085": "FinBank",
    "100": "SunTrust Bank",
    "101": "Providus Bank",
    "102": "Titan Trust Bank",
    "103": "Globus Bank",
    "214": "FCMB",
    "215": "Unity Bank",
    "221": "StanbicIBTC",
    "232": "Sterling Bank",
}

BANK_CODES: Mapping[str, str] = MappingProxyType(_BANK_CODES)


def is_valid_bank_code(code: str) -> bool:
    """Check if a string is a well-formed bank code (exactly 3 ASCII digits)."""
    return isinstance(code, str) and bool(BANK_CODE_PATTERN.fullmatch(code))


class BankDirectory(Mapping[str, str]):
    """Read-only mapping of 3-digit bank code to bank name.

    Entries are validated and copied on construction; nothing handed
    out by the directory can change its contents afterwards.

    Example:
        >>> directory = BankDirectory({"058": "Guaranty Trust Bank"})
        >>> directory.get_name("058")
        'Guaranty Trust Bank'
    """

    def __init__(self, entries: Optional[Mapping[str, str]] = None):
        if entries is None:
            entries = _BANK_CODES
        banks = {}
        for code, name in entries.items():
            if not is_valid_bank_code(code):
                raise InvalidBankCode(
                    "Bank code %r in directory must be exactly 3 digits" % (code,)
                )
            if not isinstance(name, str) or not name.strip():
                raise ValueError(
                    "Bank name for code '%s' must be a non-empty string, got %r"
                    % (code, name)
                )
            banks[code] = name
        self._banks = MappingProxyType(banks)

    @classmethod
    def from_json(
        cls,
        path: Union[str, Path],
        include_defaults: bool = True,
    ) -> "BankDirectory":
        """Load a directory from a JSON object of code -> name.

        Args:
            path: Path to the JSON file.
            include_defaults: Merge the file over the built-in table.
                If False, the file is the whole directory.

        Returns:
            A new BankDirectory.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the file is not a JSON object of strings.
        """
        path = Path(path).expanduser()
        if not path.exists():
            raise FileNotFoundError("Bank directory file not found: %s" % path)
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(
                "Bank directory file %s must contain a JSON object, got %s"
                % (path, type(data).__name__)
            )

        entries = dict(_BANK_CODES) if include_defaults else {}
        entries.update(data)
        logger.info("Loaded %d bank entries from %s", len(data), path)
        return cls(entries)

    def __getitem__(self, code: str) -> str:
        return self._banks[code]

    def __iter__(self) -> Iterator[str]:
        return iter(self._banks)

    def __len__(self) -> int:
        return len(self._banks)

    def __repr__(self) -> str:
        return "BankDirectory(%d banks)" % len(self._banks)

    def get_name(self, code: str) -> str:
        """Look up the bank name for a code.

        Raises:
            BankNotFound: If the code has no entry.
        """
        try:
            return self._banks[code]
        except KeyError:
            raise BankNotFound("No bank registered for code '%s'" % code) from None

    def find_code(self, name: str) -> str:
        """Reverse lookup: bank code for a bank name (case-insensitive).

        Raises:
            BankNotFound: If no bank has that name.
        """
        wanted = name.strip().lower()
        for code, bank_name in self._banks.items():
            if bank_name.lower() == wanted:
                return code
        raise BankNotFound("No bank registered with name '%s'" % name)

    def as_dict(self) -> Dict[str, str]:
        """Return a fresh, mutable copy of all entries."""
        return dict(self._banks)

    def codes(self) -> List[str]:
        """Sorted list of known bank codes."""
        return sorted(self._banks)

    def names(self) -> List[str]:
        """Sorted list of known bank names."""
        return sorted(self._banks.values())


# Shared directory, built on first use
_default: Optional[BankDirectory] = None


def default_directory() -> BankDirectory:
    """Get the shared bank directory.

    Uses the built-in table, merged with the JSON file named by
    $NUBAN_BANKS_FILE when that variable is set. Built once and cached.

    Returns:
        The shared BankDirectory.
    """
    global _default

    if _default is not None:
        return _default

    override = os.environ.get(_BANKS_FILE_ENV)
    if override:
        _default = BankDirectory.from_json(override)
    else:
        _default = BankDirectory()
    return _default


def reset_default_directory() -> None:
    """Forget the cached default directory so it is rebuilt on next use."""
    global _default
    _default = None
