"""Exceptions raised by the NUBAN validator and bank directory."""
from __future__ import annotations


class NubanError(Exception):
    """Base class for all naija-nuban errors."""


class InvalidBankCode(NubanError, ValueError):
    """Bank code is not exactly 3 ASCII digits."""


class InvalidAccountNumber(NubanError, ValueError):
    """Account number is not exactly 10 ASCII digits."""


class BankNotFound(NubanError, LookupError):
    """Bank code is well-formed but has no entry in the directory."""
