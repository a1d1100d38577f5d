"""
Data models for the bank simulation.

This module contains the account hierarchy used throughout the application:
an abstract Account and its Checking and Savings variants.
"""

import logging
from abc import ABC, abstractmethod
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Dict


logger = logging.getLogger(__name__)


class AccountType(Enum):
    """Types of bank accounts."""
    CHECKING = "checking"
    SAVINGS = "savings"


class InvalidArgument(ValueError):
    """Raised when an account operation receives an invalid value."""


def to_decimal(value: Any) -> Decimal:
    """Convert a numeric input to Decimal."""
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError) as e:
        raise InvalidArgument(f"Invalid amount: {value!r}") from e

    # NaN and infinity are not amounts
    if not result.is_finite():
        raise InvalidArgument(f"Invalid amount: {value!r}")
    return result


def format_currency(amount: Decimal) -> str:
    """Format currency for display."""
    if amount < 0:
        return f"-${-amount:,.2f}"
    return f"${amount:,.2f}"


class Account(ABC):
    """Represents a bank account."""

    account_type: AccountType

    def __init__(self, account_number: str, holder_name: str,
                 initial_balance: Decimal = Decimal('0.00')):
        """Initialize account, rejecting a negative opening balance."""
        initial_balance = to_decimal(initial_balance)
        if initial_balance < 0:
            raise InvalidArgument("Initial balance cannot be negative")

        self._account_number = account_number
        self._holder_name = holder_name
        self.balance = initial_balance

    @property
    def account_number(self) -> str:
        return self._account_number

    @property
    def holder_name(self) -> str:
        return self._holder_name

    def deposit(self, amount: Decimal) -> None:
        """Deposit money to account."""
        amount = to_decimal(amount)
        if amount <= 0:
            raise InvalidArgument("Deposit amount must be positive")

        self.balance += amount

    def withdraw(self, amount: Decimal) -> bool:
        """Withdraw money from account.

        Returns False without touching the balance when funds are insufficient.
        """
        amount = to_decimal(amount)
        if amount <= 0:
            raise InvalidArgument("Withdrawal amount must be positive")

        if amount > self.balance:
            return False

        self.balance -= amount
        return True

    @abstractmethod
    def apply_periodic_adjustment(self) -> Decimal:
        """Apply the once-per-period balance change and return it."""

    def describe(self) -> Dict[str, Any]:
        """Get account details for display."""
        return {
            'account_number': self.account_number,
            'holder_name': self.holder_name,
            'balance': self.balance,
        }

    def __repr__(self) -> str:
        return (f"{type(self).__name__}({self.account_number!r}, "
                f"{self.holder_name!r}, balance={self.balance})")


class CheckingAccount(Account):
    """Checking account with a monthly fee and an overdraft allowance."""

    account_type = AccountType.CHECKING

    MONTHLY_FEE = Decimal('10.00')
    OVERDRAFT_LIMIT = Decimal('100.00')

    def withdraw(self, amount: Decimal) -> bool:
        """Withdraw money, allowing the balance to drop to -OVERDRAFT_LIMIT."""
        amount = to_decimal(amount)
        if amount <= 0:
            raise InvalidArgument("Withdrawal amount must be positive")

        if amount > self.balance + self.OVERDRAFT_LIMIT:
            return False

        self.balance -= amount
        return True

    def apply_periodic_adjustment(self) -> Decimal:
        """Charge the monthly fee if the balance covers it in full."""
        if self.balance < self.MONTHLY_FEE:
            logger.debug(f"Fee skipped for {self.account_number}: balance {self.balance}")
            return Decimal('0')

        self.balance -= self.MONTHLY_FEE
        return -self.MONTHLY_FEE

    def describe(self) -> Dict[str, Any]:
        info = super().describe()
        info['account_type'] = "Checking"
        info['monthly_fee'] = self.MONTHLY_FEE
        return info


class SavingsAccount(Account):
    """Savings account that earns interest each period.

    The minimum balance applies to the opening deposit only; later
    withdrawals use the base rule and may leave less than the minimum.
    """

    account_type = AccountType.SAVINGS

    INTEREST_RATE = Decimal('0.05')
    MINIMUM_BALANCE = Decimal('100.00')

    def __init__(self, account_number: str, holder_name: str,
                 initial_balance: Decimal = Decimal('0.00')):
        super().__init__(account_number, holder_name, initial_balance)
        if self.balance < self.MINIMUM_BALANCE:
            raise InvalidArgument(
                f"Minimum initial balance for Savings is {format_currency(self.MINIMUM_BALANCE)}"
            )

    def apply_periodic_adjustment(self) -> Decimal:
        """Add simple interest on the current balance."""
        interest = self.balance * self.INTEREST_RATE
        self.balance += interest
        return interest

    def describe(self) -> Dict[str, Any]:
        info = super().describe()
        info['account_type'] = "Savings"
        info['interest_rate'] = self.INTEREST_RATE * 100
        return info
