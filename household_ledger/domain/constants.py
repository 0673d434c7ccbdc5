"""Domain constants for the household ledger."""

INCOME = "income"
EXPENSE = "expense"
TRANSFER = "transfer"

TRANSACTION_TYPES = (INCOME, EXPENSE)
ENTRY_TYPES = (INCOME, EXPENSE, TRANSFER)

DEFAULT_INCOME_EMOJI = "💰"
DEFAULT_EXPENSE_EMOJI = "📦"

TRANSACTION_ENTRY_PREFIX = "tx-"
TRANSFER_ENTRY_PREFIX = "tr-"


__all__ = [
    "INCOME",
    "EXPENSE",
    "TRANSFER",
    "TRANSACTION_TYPES",
    "ENTRY_TYPES",
    "DEFAULT_INCOME_EMOJI",
    "DEFAULT_EXPENSE_EMOJI",
    "TRANSACTION_ENTRY_PREFIX",
    "TRANSFER_ENTRY_PREFIX",
]
