"""Startup seeding strategies for the expense store."""
import logging
import random
from datetime import date, timedelta
from typing import Any, Dict, List, Optional, Sequence

from services.expense_store import ExpenseStore
from utils.settings import Settings

logger = logging.getLogger(__name__)

DESCRIPTIONS: Dict[str, List[str]] = {
    "Food": ["Coffee", "Lunch", "Dinner", "Breakfast", "Snacks", "Grocery shopping", "Restaurant", "Pizza", "Burger", "Sushi"],
    "Transport": ["Gas", "Uber ride", "Taxi", "Bus fare", "Parking", "Car maintenance", "Train ticket", "Flight", "Bike repair"],
    "Entertainment": ["Movie ticket", "Concert", "Gaming", "Netflix subscription", "Spotify subscription", "Book", "Video game", "Theme park"],
    "Health": ["Gym membership", "Doctor visit", "Dentist", "Pharmacy", "Yoga class", "Vitamins", "Haircut"],
    "Education": ["Course", "Textbook", "Online class", "Workshop", "Tuition", "Training"],
    "Utilities": ["Phone bill", "Internet", "Electric", "Water bill", "Gas bill", "Wifi"],
    "Shopping": ["Clothes", "Shoes", "Electronics", "Furniture", "Home decor", "Jewelry"],
}

CATEGORIES = list(DESCRIPTIONS)

FIXTURE_EXPENSES: List[Dict[str, Any]] = [
    {"description": "Grocery shopping", "amount": 85.5, "category": "Food", "date": "2024-01-15"},
    {"description": "Monthly bus pass", "amount": 60.0, "category": "Transport", "date": "2024-01-14"},
    {"description": "Movie tickets", "amount": 24.0, "category": "Entertainment", "date": "2024-01-13"},
    {"description": "Electric bill", "amount": 120.75, "category": "Utilities", "date": "2024-01-12"},
    {"description": "Lunch with colleagues", "amount": 32.4, "category": "Food", "date": "2024-01-11"},
    {"description": "Gym membership", "amount": 45.0, "category": "Health", "date": "2024-01-10"},
    {"description": "Online course", "amount": 199.99, "category": "Education", "date": "2024-01-09"},
    {"description": "Winter jacket", "amount": 89.95, "category": "Shopping", "date": "2024-01-08"},
    {"description": "Taxi to airport", "amount": 38.2, "category": "Transport", "date": "2024-01-07"},
    {"description": "Pharmacy", "amount": 15.3, "category": "Health", "date": "2024-01-06"},
]

class RandomSeeder:
    """Generates `count` random expenses dated within the last `window_days` days."""

    def __init__(self, count: int = 30, window_days: int = 60,
                 rng: Optional[random.Random] = None, today: Optional[date] = None):
        self.count = count
        self.window_days = window_days
        self.rng = rng or random.Random()
        self.today = today

    def generate(self) -> List[Dict[str, Any]]:
        today = self.today or date.today()
        records = []
        for _ in range(self.count):
            category = self.rng.choice(CATEGORIES)
            days_ago = self.rng.randrange(self.window_days)
            records.append({
                "description": self.rng.choice(DESCRIPTIONS[category]),
                "amount": round(self.rng.random() * 100 + 5, 2),
                "category": category,
                "date": (today - timedelta(days=days_ago)).isoformat(),
            })
        return records

    def seed(self, store: ExpenseStore) -> int:
        records = self.generate()
        for record in records:
            store.create_expense(record)
        logger.info(f"Seeded store with {len(records)} random expenses over the last {self.window_days} days.")
        return len(records)

class FixtureSeeder:
    """Loads a fixed list of illustrative expenses."""

    def __init__(self, records: Sequence[Dict[str, Any]] = FIXTURE_EXPENSES):
        self.records = records

    def seed(self, store: ExpenseStore) -> int:
        for record in self.records:
            store.create_expense(dict(record))
        logger.info(f"Seeded store with {len(self.records)} fixture expenses.")
        return len(self.records)

def build_seeder(settings: Settings):
    """Returns the seeding strategy named by settings.seed_strategy."""
    if settings.seed_strategy == "random":
        rng = random.Random(settings.seed_random_state)
        return RandomSeeder(count=settings.seed_count, window_days=settings.seed_window_days, rng=rng)
    if settings.seed_strategy == "fixture":
        return FixtureSeeder()
    raise ValueError(f"Unknown seed strategy: {settings.seed_strategy}")
