"""
Bank Simulation

A small in-memory bank with checking and savings accounts.
Supports deposits, withdrawals, overdrafts, monthly fees and interest.
"""

__version__ = "0.1.0"
__author__ = "Developer"
__email__ = "dev@example.com"

from .models import (
    Account,
    AccountType,
    CheckingAccount,
    InvalidArgument,
    SavingsAccount,
    format_currency,
)
from .bank import Bank
from .cli import main


def create_bank(*accounts: Account) -> Bank:
    """
    Create a Bank holding the given accounts.

    Args:
        accounts: Accounts to add, in order

    Returns:
        Bank instance
    """
    bank = Bank()
    for account in accounts:
        bank.add_account(account)
    return bank


__all__ = [
    "Account",
    "AccountType",
    "CheckingAccount",
    "SavingsAccount",
    "InvalidArgument",
    "format_currency",
    "Bank",
    "create_bank",
    "main"
]
