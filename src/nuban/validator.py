"""NUBAN check-digit validation.

A NUBAN is a 10-digit account number whose last digit is a check digit
computed from the 3-digit CBN bank code and the first 9 digits of the
account number:

    1. Concatenate bank code and account serial (12 digits).
    2. Multiply positionally by 3, 7, 3, 3, 7, 3, 3, 7, 3, 3, 7, 3 and sum.
    3. The check digit is (10 - sum % 10) % 10.

Example:
    >>> from nuban import Nuban
    >>> account = Nuban.create("058", "0152792740")
    >>> account.is_valid()
    True
    >>> account.get_bank_name()
    'Guaranty Trust Bank'
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from nuban.banks import BankDirectory, default_directory, is_valid_bank_code
from nuban.errors import InvalidAccountNumber, InvalidBankCode

logger = logging.getLogger(__name__)

NUBAN_LENGTH = 10
SERIAL_LENGTH = NUBAN_LENGTH - 1

WEIGHTS: Tuple[int, ...] = (3, 7, 3, 3, 7, 3, 3, 7, 3, 3, 7, 3)

# str.isdigit() and \d both accept non-ASCII digits, so spell the range out
NUBAN_PATTERN = re.compile(r"[0-9]{10}")
_SERIAL_PATTERN = re.compile(r"[0-9]{9,10}")


def _check_bank_code(bank_code: str) -> None:
    if not is_valid_bank_code(bank_code):
        raise InvalidBankCode(
            "Bank code must be exactly 3 digits, got %r" % (bank_code,)
        )


def _check_account_number(account_number: str) -> None:
    if not (isinstance(account_number, str) and NUBAN_PATTERN.fullmatch(account_number)):
        raise InvalidAccountNumber(
            "Account number must be exactly %d digits, got %r"
            % (NUBAN_LENGTH, account_number)
        )


def _weighted_check_digit(digits: str) -> int:
    total = sum(int(d) * w for d, w in zip(digits, WEIGHTS))
    return (10 - total % 10) % 10


def calculate_check_digit(bank_code: str, account_number: str) -> int:
    """Compute the NUBAN check digit for a bank code and account number.

    Only the first 9 digits of the account number are used, so either the
    9-digit serial or the full 10-digit NUBAN may be passed.

    Args:
        bank_code: 3-digit CBN bank code.
        account_number: 9-digit serial or 10-digit account number.

    Returns:
        Check digit in the range 0-9.

    Raises:
        InvalidBankCode: If the bank code is not 3 digits.
        InvalidAccountNumber: If the account number is not 9 or 10 digits.

    Example:
        >>> calculate_check_digit("058", "015279274")
        0
    """
    _check_bank_code(bank_code)
    if not (isinstance(account_number, str) and _SERIAL_PATTERN.fullmatch(account_number)):
        raise InvalidAccountNumber(
            "Account number must be 9 or 10 digits, got %r" % (account_number,)
        )
    return _weighted_check_digit(bank_code + account_number[:SERIAL_LENGTH])


@dataclass(frozen=True)
class Nuban:
    """A validated (bank code, account number) pair.

    Construction fails unless the bank code is exactly 3 ASCII digits and
    the account number exactly 10. Both values are stored verbatim.
    A well-formed instance may still fail the check digit test; use
    ``is_valid()`` for that.

    Attributes:
        bank_code: 3-digit CBN bank code.
        account_number: 10-digit account number, check digit last.
        directory: Bank directory used for name lookups. Defaults to the
            shared directory, resolved on first lookup.
    """

    bank_code: str
    account_number: str
    directory: Optional[BankDirectory] = field(default=None, repr=False, compare=False)

    def __post_init__(self):
        _check_bank_code(self.bank_code)
        _check_account_number(self.account_number)

    @classmethod
    def create(
        cls,
        bank_code: str,
        account_number: str,
        directory: Optional[BankDirectory] = None,
    ) -> "Nuban":
        """Validate inputs and build a Nuban.

        Raises:
            InvalidBankCode: If the bank code is not 3 digits.
            InvalidAccountNumber: If the account number is not 10 digits.
        """
        return cls(bank_code, account_number, directory)

    def __str__(self) -> str:
        return "%s-%s" % (self.bank_code, self.account_number)

    def _directory(self) -> BankDirectory:
        if self.directory is None:
            return default_directory()
        return self.directory

    @property
    def check_digit(self) -> int:
        """The stored check digit (last digit of the account number)."""
        last = self.account_number[-1:]
        if not (len(last) == 1 and "0" <= last <= "9"):
            raise InvalidAccountNumber(
                "Check digit %r of account number %r is not a digit"
                % (last, self.account_number)
            )
        return int(last)

    def calculate_check_digit(self) -> int:
        """Compute the expected check digit (0-9) from bank code and serial."""
        return _weighted_check_digit(self.bank_code + self.account_number[:SERIAL_LENGTH])

    def is_valid(self) -> bool:
        """Check whether the stored check digit matches the computed one."""
        expected = self.calculate_check_digit()
        valid = self.check_digit == expected
        logger.debug("NUBAN %s: expected check digit %d, valid=%s", self, expected, valid)
        return valid

    is_valid_account = is_valid

    def get_bank_name(self) -> str:
        """Look up the bank name for this account's bank code.

        Raises:
            BankNotFound: If the code is not in the directory.
        """
        return self._directory().get_name(self.bank_code)

    def bank(self) -> Dict[str, str]:
        """All known banks as a fresh code -> name dict."""
        return self._directory().as_dict()


def is_valid_nuban(bank_code: str, account_number: str) -> bool:
    """Check if a bank code and account number form a valid NUBAN.

    Malformed input returns False rather than raising.

    Example:
        >>> is_valid_nuban("058", "0152792740")
        True
        >>> is_valid_nuban("058", "015-279-2740")
        False
    """
    try:
        return Nuban(bank_code, account_number).is_valid()
    except (InvalidBankCode, InvalidAccountNumber):
        return False


def possible_banks(
    account_number: str,
    directory: Optional[BankDirectory] = None,
) -> List[Tuple[str, str]]:
    """Find every bank the account number passes the check digit test for.

    Args:
        account_number: 10-digit account number.
        directory: Banks to try. Defaults to the shared directory.

    Returns:
        List of (bank_code, bank_name) tuples sorted by bank code.

    Raises:
        InvalidAccountNumber: If the account number is not 10 digits.
    """
    _check_account_number(account_number)
    if directory is None:
        directory = default_directory()

    serial = account_number[:SERIAL_LENGTH]
    stored = int(account_number[-1])
    matches = [
        (code, directory[code])
        for code in directory.codes()
        if _weighted_check_digit(code + serial) == stored
    ]
    logger.debug("Account %s matches %d of %d banks", account_number, len(matches), len(directory))
    return matches
