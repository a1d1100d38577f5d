"""Shared fixtures for bank-sim tests."""

import logging
from decimal import Decimal

import pytest

from bank_sim.bank import Bank
from bank_sim.models import CheckingAccount, SavingsAccount


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo any logging configuration made by a test.

    pytest swaps its own capture handlers on the root logger for every
    test phase, so only the remaining handlers are saved and restored.
    """
    root_logger = logging.getLogger()
    package_logger = logging.getLogger("bank_sim")
    handlers = [h for h in root_logger.handlers if not _is_pytest_handler(h)]
    root_level = root_logger.level
    package_level = package_logger.level
    yield
    capture_handlers = [h for h in root_logger.handlers if _is_pytest_handler(h)]
    root_logger.handlers[:] = handlers + capture_handlers
    root_logger.setLevel(root_level)
    package_logger.setLevel(package_level)


def _is_pytest_handler(handler):
    return type(handler).__module__.startswith("_pytest")


@pytest.fixture
def checking_account():
    """Create a checking account with 500.00."""
    return CheckingAccount("CH001", "John Doe", Decimal('500.00'))


@pytest.fixture
def savings_account():
    """Create a savings account with 1000.00."""
    return SavingsAccount("SV001", "Jane Smith", Decimal('1000.00'))


@pytest.fixture
def bank(checking_account, savings_account):
    """Create a bank holding one checking and one savings account."""
    bank = Bank()
    bank.add_account(checking_account)
    bank.add_account(savings_account)
    return bank
