# Transaction processing and accounts

import logging
from datetime import date
from decimal import Decimal

from data.models import Transaction
from utils.helpers import format_money

logger = logging.getLogger(__name__)


class TransactionProcessor:
    """
    Renders a transaction as handled by one payment channel.
    """
    tag = None

    def process(self, transaction):
        return (f"[{self.tag}] Processing {format_money(transaction.amount)} "
                f"for '{transaction.category}' on {transaction.date:%Y-%m-%d}")


class BankTransferProcessor(TransactionProcessor):
    tag = "BankTransfer"


class MobileMoneyProcessor(TransactionProcessor):
    tag = "MobileMoney"


class CryptoWalletProcessor(TransactionProcessor):
    tag = "Crypto"


class Account:
    def __init__(self, account_number, initial_balance):
        self.account_number = account_number
        self.balance = Decimal(initial_balance)

    def apply_transaction(self, transaction):
        self.balance -= transaction.amount
        return f"[Account] Applied {format_money(transaction.amount)}. New balance: {format_money(self.balance)}"


class SavingsAccount(Account):
    """
    An account that refuses to go below zero.
    """

    def apply_transaction(self, transaction):
        if transaction.amount > self.balance:
            logger.info("Rejected transaction %s on %s: insufficient funds", transaction.id, self.account_number)
            return "Insufficient funds"
        self.balance -= transaction.amount
        return (f"[SavingsAccount] Deducted {format_money(transaction.amount)}. "
                f"Updated balance: {format_money(self.balance)}")


class FinanceApp:
    def __init__(self):
        self.transactions = []

    def run(self, today=None):
        """
        Routes three sample transactions through their processors and a
        savings account, returning the report lines in order.
        """
        today = today or date.today()
        account = SavingsAccount("SA-001", Decimal("1000"))

        t1 = Transaction(1, today, Decimal("120"), "Groceries")
        t2 = Transaction(2, today, Decimal("300"), "Utilities")
        t3 = Transaction(3, today, Decimal("700"), "Entertainment")

        routed = [
            (MobileMoneyProcessor(), t1),
            (BankTransferProcessor(), t2),
            (CryptoWalletProcessor(), t3),
        ]
        lines = [processor.process(t) for processor, t in routed]
        lines.extend(account.apply_transaction(t) for _, t in routed)

        self.transactions.extend(t for _, t in routed)
        lines.append("")
        lines.append(f"Total transactions recorded: {len(self.transactions)}")
        return lines
