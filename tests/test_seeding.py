import random
from datetime import date, timedelta

import pytest

from services.expense_store import ExpenseStore
from services.seeding import DESCRIPTIONS, FIXTURE_EXPENSES, FixtureSeeder, RandomSeeder, build_seeder
from utils.settings import Settings


def test_fixture_seeder_loads_ten_records_with_sequential_ids():
    store = ExpenseStore()
    assert FixtureSeeder().seed(store) == 10
    assert [e.id for e in store.list_expenses()] == list(range(1, 11))
    assert store.get_expense(1).description == FIXTURE_EXPENSES[0]["description"]


def test_random_seeder_respects_count_window_and_catalogue():
    today = date(2025, 3, 1)
    store = ExpenseStore()
    seeder = RandomSeeder(count=30, window_days=60, rng=random.Random(7), today=today)

    assert seeder.seed(store) == 30

    earliest = today - timedelta(days=59)
    for expense in store.list_expenses():
        assert expense.description in DESCRIPTIONS[expense.category]
        assert 5 <= expense.amount <= 105
        assert round(expense.amount, 2) == expense.amount
        assert earliest <= date.fromisoformat(expense.date) <= today


def test_random_seeder_is_reproducible_with_same_rng_seed():
    first = RandomSeeder(rng=random.Random(42), today=date(2025, 1, 1)).generate()
    second = RandomSeeder(rng=random.Random(42), today=date(2025, 1, 1)).generate()
    assert first == second


def test_build_seeder_picks_strategy():
    assert isinstance(build_seeder(Settings(seed_strategy="fixture")), FixtureSeeder)

    seeder = build_seeder(Settings(seed_strategy="random", seed_count=5, seed_window_days=7))
    assert isinstance(seeder, RandomSeeder)
    assert seeder.count == 5
    assert seeder.window_days == 7


def test_build_seeder_rejects_unknown_strategy():
    settings = Settings.model_construct(seed_strategy="csv")
    with pytest.raises(ValueError):
        build_seeder(settings)
