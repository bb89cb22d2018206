"""API Routes for expenses"""
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from typing import List, Annotated, Optional
from models.expense import Expense, ExpenseCreate, ExpenseUpdate, ExpenseSummary, ErrorMessage
from services.expense_store import ExpenseStore, ExpenseNotFoundError
import logging

router = APIRouter()
logger = logging.getLogger(__name__)

NOT_FOUND_RESPONSE = {404: {"model": ErrorMessage, "description": "Expense not found"}}

# --- Dependency Function ---
def get_expense_store(request: Request) -> ExpenseStore:
    """Dependency to get the expense store from the request state."""
    store = getattr(request.state, "expense_store", None)
    if store is None:
        logger.error("Expense store not found in application state. Was the lifespan run?")
        raise HTTPException(status_code=503, detail="Expense store not available.")
    return store

ExpenseStoreDep = Annotated[ExpenseStore, Depends(get_expense_store)]

def parse_expense_id(raw_id: str) -> int:
    """Path ids that are not integers can never match a record."""
    try:
        return int(raw_id)
    except ValueError:
        logger.warning(f"Non-numeric expense id requested: {raw_id!r}")
        raise ExpenseNotFoundError(raw_id)

# --- API Routes ---

@router.get("/expenses", response_model=List[Expense], summary="List Expenses", description="Retrieves all expenses, optionally filtered by exact category.")
async def list_expenses(
    store: ExpenseStoreDep,
    category: Optional[str] = Query(None, description="Exact, case-sensitive category to filter by."),
) -> List[Expense]:
    logger.info(f"GET /expenses endpoint called. Category filter: {category!r}")
    return store.list_expenses(category or None)

@router.get("/expenses/{expense_id}", response_model=Expense, responses=NOT_FOUND_RESPONSE, summary="Get Expense")
async def get_expense(expense_id: str, store: ExpenseStoreDep) -> Expense:
    logger.info(f"GET /expenses/{expense_id} endpoint called.")
    return store.get_expense(parse_expense_id(expense_id))

@router.post("/expenses", response_model=Expense, status_code=201, responses={400: {"model": ErrorMessage}}, summary="Create Expense")
async def create_expense(payload: ExpenseCreate, store: ExpenseStoreDep) -> Expense:
    """Creates an expense; all four fields are required."""
    logger.info(f"POST /expenses endpoint called with: {payload.model_dump()}")
    expense = store.create_expense(payload.model_dump())
    logger.info(f"Expense {expense.id} created.")
    return expense

@router.put("/expenses/{expense_id}", response_model=Expense, responses=NOT_FOUND_RESPONSE, summary="Update Expense")
async def update_expense(expense_id: str, payload: ExpenseUpdate, store: ExpenseStoreDep) -> Expense:
    """Applies a partial update; omitted fields keep their current values."""
    logger.info(f"PUT /expenses/{expense_id} endpoint called with: {payload.model_dump(exclude_unset=True)}")
    return store.update_expense(parse_expense_id(expense_id), payload.model_dump(exclude_unset=True))

@router.delete("/expenses/{expense_id}", response_model=Expense, responses=NOT_FOUND_RESPONSE, summary="Delete Expense")
async def delete_expense(expense_id: str, store: ExpenseStoreDep) -> Expense:
    logger.info(f"DELETE /expenses/{expense_id} endpoint called.")
    expense = store.delete_expense(parse_expense_id(expense_id))
    logger.info(f"Expense {expense.id} deleted.")
    return expense

@router.get("/summary", response_model=ExpenseSummary, summary="Expense Summary", description="Total, count and per-category totals over all current expenses.")
async def get_summary(store: ExpenseStoreDep) -> ExpenseSummary:
    logger.info("GET /summary endpoint called.")
    return store.summarize()
