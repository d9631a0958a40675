import sys

from cli._runner import run

PYTEST = ["uv", "run", "pytest"]


def _pytest(*args: str) -> None:
    # Extra command-line arguments are forwarded to pytest.
    sys.exit(run([*PYTEST, *args, *sys.argv[1:]]))


def main() -> None:
    """Run the full test suite."""
    _pytest()


def test_v() -> None:
    """Run the full test suite with verbose output."""
    _pytest("-v")


def test_unit() -> None:
    """Run unit tests only."""
    _pytest("tests/unit")


def test_smoke() -> None:
    """Run API smoke tests against the fake SOAP backend."""
    _pytest("-m", "smoke")
