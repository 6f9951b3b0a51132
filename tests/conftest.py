from dataclasses import dataclass

import pytest

from chronopage import disable_tracing


@dataclass(frozen=True)
class Mew:
    """Minimal Timestamped item used across the test suite."""

    content: str
    created: int

    def timestamp(self) -> int:
        return self.created


@pytest.fixture(autouse=True)
def reset_tracing():
    """Reset observability state between tests."""
    yield
    disable_tracing()


@pytest.fixture
def mews() -> list[Mew]:
    """Four items with distinct timestamps, deliberately out of order."""
    return [
        Mew("third", 30),
        Mew("first", 10),
        Mew("fourth", 40),
        Mew("second", 20),
    ]
