"""Command-line Entry Point - Root Module.

Lets the calculator run straight from a checkout:

    python main.py 100 50 -20 10

It imports from the src package.
"""

from src.main import main, run

__all__ = [
    "main",
    "run",
]


if __name__ == "__main__":
    run()
