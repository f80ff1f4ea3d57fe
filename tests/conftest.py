from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import httpx
import pytest

from aretry.utils.structured_logging import clear_correlation_id
from tests.helpers import FakeClock

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def fake_clock() -> Generator[FakeClock, None, None]:
    """Patch time.monotonic and time.sleep with a deterministic clock.

    Sleeping advances the clock instead of blocking, so elapsed-time
    stop strategies can be tested without waiting.
    """
    clock = FakeClock()
    with (
        patch("time.monotonic", side_effect=clock.monotonic),
        patch("time.sleep", side_effect=clock.sleep),
    ):
        yield clock


@pytest.fixture
def mock_client() -> httpx.Client:
    """Create a mock httpx.Client for testing."""
    return Mock(spec=httpx.Client)


@pytest.fixture(autouse=True)
def _clean_correlation_id() -> Generator[None, None, None]:
    yield
    clear_correlation_id()
