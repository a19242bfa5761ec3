"""Message formatting - Pure functions.

This module formats balances and errors into the text the CLI prints.
All functions are pure with no side effects.
"""

from src.core.parsing import ParseError


BALANCE_LABEL = "Final balance"
DECIMAL_PLACES = 2


def format_amount(amount: float) -> str:
    """Format an amount with two decimal places.

    Pure function.
    """
    return f"{amount:.{DECIMAL_PLACES}f}"


def format_balance(balance: float) -> str:
    """Format the final balance line.

    Pure function.

    Args:
        balance: Balance to format

    Returns:
        Line such as "Final balance: 140.00"
    """
    return f"{BALANCE_LABEL}: {format_amount(balance)}"


def format_usage(program: str) -> str:
    """Format the usage message.

    Pure function.
    """
    return f"Usage: {program} <initial balance> <transaction1> [transaction2 ...]"


def format_parse_error(error: ParseError) -> str:
    """Format an argument parse error for the user.

    Pure function.
    """
    return f"Error: {error.message}"


def format_steps(balances: list[float]) -> str:
    """Format running balances as a single arrow-separated line.

    Pure function.

    Example:
        "100.00 -> 150.00 -> 130.00"
    """
    return " -> ".join(format_amount(b) for b in balances)
