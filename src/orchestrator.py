"""Orchestrator - Wires Functional Core and Imperative Shell.

This module coordinates the flow of data between the pure functional
core and the entry point. It decides what the program says and which
exit code it returns, but leaves the printing to src/main.py.
"""

import logging
from dataclasses import dataclass, field

from src.core.balance import calculate_balance, running_balances
from src.core.formatter import (
    format_balance,
    format_parse_error,
    format_steps,
    format_usage,
)
from src.core.parsing import parse_arguments


logger = logging.getLogger(__name__)

DEFAULT_PROGRAM = "balance-calculator"


@dataclass
class CalculationResult:
    """Result of a single calculator invocation.

    Attributes:
        final_balance: Computed balance (None if parsing failed)
        output: Line to print on success
        errors: Messages to print on failure
    """
    final_balance: float | None = None
    output: str | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """Returns True if no errors occurred."""
        return len(self.errors) == 0

    @property
    def exit_code(self) -> int:
        """Process exit status for this result."""
        return 0 if self.success else 1


class Orchestrator:
    """Coordinates argument parsing, calculation and formatting.

    This class wires together:
    - Core parsing (strings to amounts)
    - Core balance reducer
    - Core formatter (result and error text)
    """

    def __init__(self, program: str = DEFAULT_PROGRAM) -> None:
        """Initialize orchestrator.

        Args:
            program: Program name shown in the usage message
        """
        self.program = program

    def run(self, args: list[str]) -> CalculationResult:
        """Run one calculation.

        Args:
            args: Command-line arguments, without the program name

        Returns:
            CalculationResult with the output line or error messages
        """
        # Pure core function
        parsed = parse_arguments(args)

        if not parsed.success:
            error = parsed.error
            if error.is_usage_error:
                logger.debug("Usage error: %s", error.message)
                message = format_usage(self.program)
            else:
                logger.debug("Parse error at position %d: %s", error.position, error.message)
                message = format_parse_error(error)
            return CalculationResult(errors=[message])

        initial = parsed.initial_balance
        transactions = parsed.transactions

        final = calculate_balance(initial, transactions)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Running balance: %s",
                format_steps(running_balances(initial, transactions)),
            )

        logger.info("Applied %d transactions to %s", len(transactions), initial)

        return CalculationResult(
            final_balance=final,
            output=format_balance(final),
        )
