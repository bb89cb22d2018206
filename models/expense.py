"""Pydantic models for Expense data"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, Optional

class Expense(BaseModel):
    """
    Represents a single tracked spending entry.
    """
    id: int
    description: str
    amount: float
    category: str
    date: str  # ISO YYYY-MM-DD by convention, not enforced

    model_config = ConfigDict(from_attributes=True)

class ExpenseCreate(BaseModel):
    # Everything optional so missing fields reach the store's own check (400, not 422)
    description: Optional[str] = None
    amount: Optional[float] = None
    category: Optional[str] = None
    date: Optional[str] = None

class ExpenseUpdate(ExpenseCreate):
    """Partial update payload; only the fields provided are applied."""

class ExpenseSummary(BaseModel):
    total: float
    count: int
    by_category: Dict[str, float] = Field(default_factory=dict, alias="byCategory")

    model_config = ConfigDict(populate_by_name=True)

class ErrorMessage(BaseModel):
    message: str
