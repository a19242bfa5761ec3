"""Functional Core - Pure functions with no side effects.

This module contains all business logic as pure functions:
- Balance calculation
- Argument parsing
- Output formatting

All functions here are deterministic and have no I/O.
"""

from src.core.balance import apply_transaction, calculate_balance, running_balances
from src.core.parsing import ParseError, ParseResult, parse_amount, parse_arguments
from src.core.formatter import (
    format_amount,
    format_balance,
    format_parse_error,
    format_steps,
    format_usage,
)

__all__ = [
    # Balance
    "apply_transaction",
    "calculate_balance",
    "running_balances",
    # Parsing
    "ParseError",
    "ParseResult",
    "parse_amount",
    "parse_arguments",
    # Formatter
    "format_amount",
    "format_balance",
    "format_parse_error",
    "format_steps",
    "format_usage",
]
