"""
Account registry for the bank simulation.

The Bank owns every account, keeps them in insertion order and applies
bulk per-period operations across all of them.
"""

import logging
from decimal import Decimal
from typing import Any, Dict, Iterator, List, Optional

from .models import Account, InvalidArgument, format_currency


logger = logging.getLogger(__name__)

SEPARATOR = "-" * 24


def render_account(info: Dict[str, Any]) -> List[str]:
    """Render the result of Account.describe() as display lines."""
    lines = [
        f"Account Number: {info['account_number']}",
        f"Account Holder: {info['holder_name']}",
        f"Balance: {format_currency(info['balance'])}",
        f"Account Type: {info['account_type']}",
    ]
    if 'monthly_fee' in info:
        lines.append(f"Monthly Fee: {format_currency(info['monthly_fee'])}")
    if 'interest_rate' in info:
        lines.append(f"Interest Rate: {info['interest_rate'].normalize():f}%")
    return lines


class Bank:
    """Owns the accounts and runs operations over all of them."""

    def __init__(self):
        self._accounts: List[Account] = []

    def add_account(self, account: Account) -> None:
        """Add an account. Account numbers are not checked for uniqueness."""
        if not isinstance(account, Account):
            raise InvalidArgument(f"Expected an Account, got {type(account).__name__}")

        self._accounts.append(account)
        logger.info(f"Added {account.account_type.value} account {account.account_number}")

    def find_account(self, account_number: str) -> Optional[Account]:
        """Get the first account with the given number, or None."""
        for account in self._accounts:
            if account.account_number == account_number:
                return account

        logger.debug(f"Account {account_number} not found")
        return None

    def get_all_accounts(self) -> List[Account]:
        """Get all accounts in insertion order."""
        return list(self._accounts)

    def process_periodic_updates(self) -> None:
        """Apply the periodic fee or interest to every account."""
        net_change = Decimal('0')
        for account in self._accounts:
            change = account.apply_periodic_adjustment()
            logger.debug(f"{account.account_number}: {change:+} -> {account.balance}")
            net_change += change

        logger.info(f"Periodic updates applied to {len(self._accounts)} accounts, net change {net_change}")

    def display_all(self) -> str:
        """Render every account, each followed by a separator line."""
        lines = []
        for account in self._accounts:
            lines.extend(render_account(account.describe()))
            lines.append(SEPARATOR)
        return "\n".join(lines)

    def __len__(self) -> int:
        return len(self._accounts)

    def __iter__(self) -> Iterator[Account]:
        return iter(self._accounts)
