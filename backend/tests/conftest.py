import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Ensure the backend package root is on sys.path for direct pytest runs
BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from api.database import create_books_repo  # noqa: E402
from api.main import create_app  # noqa: E402


@pytest.fixture()
def books_repo():
    return create_books_repo()


@pytest.fixture()
def client(books_repo) -> TestClient:
    return TestClient(create_app(books_repo))
