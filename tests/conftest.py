import pytest

from tdkit import bootstrap


@pytest.fixture(scope="session", autouse=True)
def setup_tdkit() -> None:
    """Load plugins once for the entire test session."""

    bootstrap()
