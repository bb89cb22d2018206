import pytest
from fastapi.testclient import TestClient

from main import app
from routes import get_expense_store
from services.expense_store import ExpenseStore
from services.seeding import FixtureSeeder


@pytest.fixture()
def store() -> ExpenseStore:
    """A store holding the ten fixture expenses (ids 1-10)."""
    store = ExpenseStore()
    FixtureSeeder().seed(store)
    return store


@pytest.fixture()
def empty_store() -> ExpenseStore:
    return ExpenseStore()


@pytest.fixture()
def client(store: ExpenseStore):
    app.dependency_overrides[get_expense_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()
