"""Household ledger: balances and monthly summaries over a personal ledger."""
