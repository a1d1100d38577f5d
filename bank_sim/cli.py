"""
CLI interface for the bank simulation.

This module provides a command-line entry point that runs the demonstration
scenario against an in-memory Bank.
"""

import logging
import sys
from decimal import Decimal
from typing import Callable

import click

from .bank import Bank
from .log import setup_logging
from .models import CheckingAccount, InvalidArgument, SavingsAccount, format_currency


logger = logging.getLogger(__name__)


def run_demo(bank: Bank, echo: Callable[[str], None] = click.echo) -> None:
    """Populate the bank, exercise one account and echo the report."""
    bank.add_account(CheckingAccount("CH001", "John Doe", Decimal('500.00')))
    bank.add_account(SavingsAccount("SV001", "Jane Smith", Decimal('1000.00')))

    john_account = bank.find_account("CH001")
    if john_account:
        echo(f"Initial John's Account Balance: {format_currency(john_account.balance)}")

        john_account.deposit(Decimal('200.00'))
        john_account.withdraw(Decimal('50.00'))

        echo(f"Updated John's Account Balance: {format_currency(john_account.balance)}")

    bank.process_periodic_updates()

    echo("")
    echo("Accounts after monthly updates:")
    echo(bank.display_all())


@click.group()
@click.option('--log-level', default='WARNING',
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Logging level (logs go to stderr)')
def cli(log_level):
    """Bank Simulation CLI"""
    setup_logging(log_level)


@cli.command()
@click.option('--strict', is_flag=True, default=False,
              help='Exit with status 1 if an error is reported')
def demo(strict):
    """Run the checking/savings demonstration."""
    bank = Bank()

    try:
        run_demo(bank)
        return
    except InvalidArgument as e:
        click.echo(f"Banking Error: {e}", err=True)
    except Exception as e:
        logger.exception("Demo failed")
        click.echo(f"Unexpected Error: {e}", err=True)

    if strict:
        sys.exit(1)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == '__main__':
    main()
