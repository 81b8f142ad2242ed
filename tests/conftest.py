# Test configuration
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

REPO_ROOT = Path(__file__).parent.parent

# Add repo root to path so tests can import modules
sys.path.insert(0, str(REPO_ROOT))

from matbench.config import Settings  # noqa: E402
from matbench.main import create_app  # noqa: E402


@pytest.fixture
def results_path(tmp_path: Path) -> Path:
    return tmp_path / "results.json"


@pytest.fixture
def settings(results_path: Path) -> Settings:
    return Settings(RESULTS_FILE=str(results_path))


@pytest.fixture
def client(settings: Settings) -> TestClient:
    return TestClient(create_app(settings))
