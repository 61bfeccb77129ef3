import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from tenpin.scoring.bowling import Game  # noqa: E402
from tenpin.services.users import UserRegistry  # noqa: E402


@pytest.fixture
def game():
    return Game()


@pytest.fixture
def registry():
    return UserRegistry()


@pytest.fixture(autouse=True)
def no_sentry(monkeypatch):
    """Keep tests from reporting to a real Sentry project."""
    monkeypatch.delenv("SENTRY_DSN", raising=False)
    yield
