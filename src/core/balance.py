"""Balance calculation - Pure functions.

This module applies transactions to a starting balance.
All functions are pure with no side effects.
"""

from collections.abc import Iterable


def apply_transaction(balance: float, delta: float) -> float:
    """Apply a single transaction to a balance.

    Pure function - returns a new balance.
    """
    return balance + delta


def calculate_balance(initial: float, transactions: Iterable[float]) -> float:
    """Calculate the final balance after applying all transactions.

    Pure function. Transactions are summed left to right, so the result
    is exactly what native float addition gives in sequence order.

    Args:
        initial: Starting balance
        transactions: Ordered deltas to apply

    Returns:
        Final balance (initial unchanged if there are no transactions)
    """
    balance = initial
    for delta in transactions:
        balance = apply_transaction(balance, delta)
    return balance


def running_balances(initial: float, transactions: Iterable[float]) -> list[float]:
    """Get the balance after each transaction.

    Pure function.

    Args:
        initial: Starting balance
        transactions: Ordered deltas to apply

    Returns:
        Balances starting with initial, one more entry per transaction
    """
    balances = [initial]
    for delta in transactions:
        balances.append(apply_transaction(balances[-1], delta))
    return balances
