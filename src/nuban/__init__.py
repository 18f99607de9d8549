"""naija-nuban - Nigerian Uniform Bank Account Number (NUBAN) validation."""
__version__ = "0.1.0"

from nuban.banks import BANK_CODES, BankDirectory, default_directory
from nuban.errors import BankNotFound, InvalidAccountNumber, InvalidBankCode, NubanError
from nuban.validator import Nuban, calculate_check_digit, is_valid_nuban, possible_banks

__all__ = [
    # Validation
    "Nuban",
    "calculate_check_digit",
    "is_valid_nuban",
    "possible_banks",
    # Banks
    "BANK_CODES",
    "BankDirectory",
    "default_directory",
    # Errors
    "NubanError",
    "InvalidBankCode",
    "InvalidAccountNumber",
    "BankNotFound",
]
