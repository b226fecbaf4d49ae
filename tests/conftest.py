import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path to allow `import agents`, `import environments`, etc.
# The tests directory itself is added so test modules can `import mocks`.
TESTS_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = TESTS_DIR.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))
if str(TESTS_DIR) not in sys.path:
    sys.path.append(str(TESTS_DIR))

from config.config import TycoonGameConfig  # noqa: E402
from models.company import Company  # noqa: E402


@pytest.fixture
def game_config() -> TycoonGameConfig:
    """Default game configuration with the standard seed."""
    return TycoonGameConfig()


@pytest.fixture
def company() -> Company:
    """A fresh company with the default starting ledger."""
    return Company()
