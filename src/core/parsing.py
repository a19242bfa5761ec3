"""Argument parsing - Pure functions.

This module turns command-line strings into numeric amounts.
No I/O happens here; the shell decides what to do with failures.
"""

from dataclasses import dataclass, field


MIN_ARGUMENTS = 2


@dataclass(frozen=True)
class ParseError:
    """A single argument that could not be parsed.

    Attributes:
        argument: The offending argument string (None for missing arguments)
        position: Zero-based index in the argument list (None for missing arguments)
        message: Human-readable description
    """
    argument: str | None
    position: int | None
    message: str

    @property
    def is_usage_error(self) -> bool:
        """Returns True if the error is about missing arguments."""
        return self.argument is None


@dataclass(frozen=True)
class ParseResult:
    """Result of parsing the argument list.

    Attributes:
        values: Parsed amounts in argument order (empty on failure)
        error: First error encountered (None on success)
    """
    values: tuple[float, ...] = field(default_factory=tuple)
    error: ParseError | None = None

    @property
    def success(self) -> bool:
        """Returns True if every argument parsed."""
        return self.error is None

    @property
    def initial_balance(self) -> float | None:
        """The first parsed value, if any."""
        return self.values[0] if self.values else None

    @property
    def transactions(self) -> tuple[float, ...]:
        """All parsed values after the first."""
        return self.values[1:]


def parse_amount(value: str) -> float:
    """Parse a single amount.

    Pure function.

    Raises:
        ValueError: If value is not a valid number
    """
    return float(value)


def parse_arguments(args: list[str]) -> ParseResult:
    """Parse an initial balance followed by one or more transactions.

    Pure function. Stops at the first argument that fails to parse.

    Args:
        args: Command-line arguments, without the program name

    Returns:
        ParseResult with all values, or the first error
    """
    if len(args) < MIN_ARGUMENTS:
        return ParseResult(error=ParseError(
            argument=None,
            position=None,
            message=f"Expected at least {MIN_ARGUMENTS} arguments, got {len(args)}",
        ))

    values = []
    for position, arg in enumerate(args):
        try:
            values.append(parse_amount(arg))
        except ValueError:
            return ParseResult(error=ParseError(
                argument=arg,
                position=position,
                message=f"'{arg}' is not a valid number",
            ))

    return ParseResult(values=tuple(values))
