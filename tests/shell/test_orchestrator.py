"""Tests for the Orchestrator module.

Tests the coordination between functional core and the entry point.
"""

import logging
from dataclasses import fields

import pytest

from src.orchestrator import Orchestrator, CalculationResult


@pytest.fixture
def orchestrator():
    """Orchestrator with a short program name."""
    return Orchestrator(program="balance")


class TestCalculationResult:
    """Tests for CalculationResult dataclass."""

    def test_success_when_no_errors(self):
        result = CalculationResult(final_balance=2.0, output="x")

        assert result.success is True
        assert result.exit_code == 0

    def test_failure_when_errors(self):
        result = CalculationResult(errors=["Error: 'abc' is not a valid number"])

        assert result.success is False
        assert result.exit_code == 1

    def test_holds_only_outcome_fields(self):
        """Result carries the outcome, not the parsed inputs."""
        assert [f.name for f in fields(CalculationResult)] == [
            "final_balance",
            "output",
            "errors",
        ]


class TestOrchestratorRun:
    """Tests for Orchestrator.run()."""

    def test_example_run(self, orchestrator):
        result = orchestrator.run(["100", "50", "-20", "10"])

        assert result.success is True
        assert result.output == "Final balance: 140.00"
        assert result.final_balance == 140.0

    def test_usage_on_too_few_arguments(self, orchestrator):
        result = orchestrator.run(["100"])

        assert result.exit_code == 1
        assert result.output is None
        assert result.errors == [
            "Usage: balance <initial balance> <transaction1> [transaction2 ...]"
        ]

    def test_usage_on_no_arguments(self, orchestrator):
        result = orchestrator.run([])

        assert result.errors[0].startswith("Usage: balance")

    def test_parse_error_names_argument(self, orchestrator):
        result = orchestrator.run(["100", "abc"])

        assert result.exit_code == 1
        assert len(result.errors) == 1
        assert "abc" in result.errors[0]
        assert result.final_balance is None

    def test_only_first_parse_error_reported(self, orchestrator):
        result = orchestrator.run(["100", "abc", "def"])

        assert result.errors == ["Error: 'abc' is not a valid number"]

    def test_output_always_two_decimals(self, orchestrator):
        result = orchestrator.run(["1", "0.5"])

        assert result.output == "Final balance: 1.50"

    def test_default_program(self):
        orchestrator = Orchestrator()

        assert orchestrator.run(["1"]).errors[0].startswith("Usage: balance-calculator ")

    def test_logs_running_balance_at_debug(self, orchestrator, caplog):
        caplog.set_level(logging.DEBUG, logger="src.orchestrator")

        orchestrator.run(["100", "50", "-20"])

        assert "100.00 -> 150.00 -> 130.00" in caplog.text
