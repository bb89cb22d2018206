"""In-memory expense store: the authoritative record set and its summary."""
import logging
import threading
from typing import Any, Dict, List, Optional

from models.expense import Expense, ExpenseSummary

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("description", "amount", "category", "date")
TEXT_FIELDS = ("description", "category", "date")


class ExpenseStoreError(Exception):
    """Base class for store failures the API layer maps to client errors."""


class ExpenseNotFoundError(ExpenseStoreError):
    message = "Expense not found"

    def __init__(self, expense_id: Any):
        super().__init__(f"Expense {expense_id} not found")
        self.expense_id = expense_id


class ExpenseValidationError(ExpenseStoreError):
    def __init__(self, message: str = "Missing required fields"):
        super().__init__(message)
        self.message = message


def _coerce_amount(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ExpenseValidationError(f"Invalid amount: {value!r}")


class ExpenseStore:
    """
    Process-lifetime collection of expenses keyed by a monotonically increasing id.

    Every operation runs under one lock; create/update/delete read-then-write
    both the collection and the id counter.
    """

    def __init__(self):
        self._expenses: List[Expense] = []
        self._next_id = 1
        self._lock = threading.Lock()

    @property
    def count(self) -> int:
        with self._lock:
            return len(self._expenses)

    def _find(self, expense_id: int) -> Expense:
        for expense in self._expenses:
            if expense.id == expense_id:
                return expense
        raise ExpenseNotFoundError(expense_id)

    def list_expenses(self, category: Optional[str] = None) -> List[Expense]:
        """Returns all expenses, or only those whose category matches exactly."""
        with self._lock:
            if category:
                matches = [e for e in self._expenses if e.category == category]
            else:
                matches = list(self._expenses)
            return [e.model_copy() for e in matches]

    def get_expense(self, expense_id: int) -> Expense:
        with self._lock:
            return self._find(expense_id).model_copy()

    def create_expense(self, fields: Dict[str, Any]) -> Expense:
        """
        Validates presence of every required field, assigns the next id and appends.
        Text fields must be non-empty; amount only has to be present (zero and
        negative amounts are accepted).
        """
        missing = [name for name in TEXT_FIELDS if not fields.get(name)]
        if fields.get("amount") is None:
            missing.append("amount")
        if missing:
            logger.warning(f"Rejected expense creation, missing fields: {missing}")
            raise ExpenseValidationError()

        amount = _coerce_amount(fields["amount"])
        with self._lock:
            expense = Expense(
                id=self._next_id,
                description=fields["description"],
                amount=amount,
                category=fields["category"],
                date=fields["date"],
            )
            self._next_id += 1
            self._expenses.append(expense)
        logger.debug(f"Created expense {expense.id}: {expense.description} ({expense.category}) {expense.amount}")
        return expense.model_copy()

    def update_expense(self, expense_id: int, fields: Dict[str, Any]) -> Expense:
        """Overwrites only the fields provided; the id never changes."""
        amount = fields.get("amount")
        if amount is not None:
            amount = _coerce_amount(amount)
        with self._lock:
            expense = self._find(expense_id)
            for name in TEXT_FIELDS:
                if fields.get(name):
                    setattr(expense, name, fields[name])
            if amount is not None:
                expense.amount = amount
            return expense.model_copy()

    def delete_expense(self, expense_id: int) -> Expense:
        with self._lock:
            expense = self._find(expense_id)
            self._expenses.remove(expense)
        logger.debug(f"Deleted expense {expense_id}")
        return expense

    def summarize(self) -> ExpenseSummary:
        """Total (rounded to cents), record count and per-category totals."""
        with self._lock:
            by_category: Dict[str, float] = {}
            total = 0.0
            for expense in self._expenses:
                total += expense.amount
                by_category[expense.category] = by_category.get(expense.category, 0.0) + expense.amount
            count = len(self._expenses)
        return ExpenseSummary(
            total=round(total, 2),
            count=count,
            by_category={name: round(value, 2) for name, value in by_category.items()},
        )
