"""Main FastAPI application"""
import logging
import logging.config
from pathlib import Path
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from contextlib import asynccontextmanager
from dotenv import load_dotenv
from routes import router as api_router
from services.expense_store import ExpenseStore, ExpenseNotFoundError, ExpenseValidationError
from services.seeding import build_seeder
from utils.settings import load_settings

from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

# Load environment variables from .env before reading settings
load_dotenv()
settings = load_settings()

BASE_DIR = Path(__file__).resolve().parent

# --- Unified Logging Configuration with Rich ---
LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            # RichHandler renders time and level itself
            "format": "%(name)s - %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "default": {
            "class": "rich.logging.RichHandler",
            "formatter": "default",
            "level": "DEBUG",
            "rich_tracebacks": True,
            "show_time": True,
            "show_path": False,
            "log_time_format": "%Y-%m-%d %H:%M:%S",
            "markup": False,
        },
    },
    "loggers": {
        "uvicorn": {
            "handlers": ["default"],
            "level": "INFO",
            "propagate": False,
        },
        "uvicorn.error": {
            "handlers": ["default"],
            "level": "INFO",
            "propagate": False,
        },
        "uvicorn.access": {
            "handlers": ["default"],
            "level": "INFO",
            "propagate": False,
        },
        "": { # Root logger for our application
            "handlers": ["default"],
            "level": settings.log_level.upper(),
            "propagate": False,
        },
    },
}

logging.config.dictConfig(LOGGING_CONFIG)
logger = logging.getLogger(__name__)

# Application state to hold the expense store
app_state = {}

# --- Rate Limiter Setup ---
# In-memory storage; only enforced when RATE_LIMIT is configured
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.rate_limit] if settings.rate_limit else [],
)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: build and seed the store
    store = ExpenseStore()
    seeder = build_seeder(settings)
    logger.info(f"Seeding expense store using '{settings.seed_strategy}' strategy...")
    seeded = seeder.seed(store)
    app_state["expense_store"] = store
    logger.info(f"Expense store ready with {seeded} expenses.")

    yield # Application runs here

    logger.info(f"Shutting down; discarding {store.count} in-memory expenses.")
    app_state.pop("expense_store", None)

app = FastAPI(
    title="Expense Tracker API",
    description="API for recording, filtering and summarizing personal expenses.",
    version="0.1.0",
    lifespan=lifespan
)

# --- Error Mapping ---
async def expense_not_found_handler(request: Request, exc: ExpenseNotFoundError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path}: expense {exc.expense_id!r} not found.")
    return JSONResponse(status_code=404, content={"message": ExpenseNotFoundError.message})

async def expense_validation_handler(request: Request, exc: ExpenseValidationError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=400, content={"message": exc.message})

app.add_exception_handler(ExpenseNotFoundError, expense_not_found_handler)
app.add_exception_handler(ExpenseValidationError, expense_validation_handler)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# --- Middleware (Order Matters) ---
if settings.rate_limit:
    logger.info(f"Rate limiting enabled: {settings.rate_limit}")
    app.add_middleware(SlowAPIMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api", tags=["api"])

# Mount static files directory (MUST be after API router)
static_dir = BASE_DIR / settings.static_dir
if static_dir.is_dir():
    app.mount("/", StaticFiles(directory=str(static_dir), html=True), name="static")
else:
    logger.warning(f"Static directory {static_dir} not found; client assets will not be served.")

# Make the store accessible to route dependencies
@app.middleware("http")
async def add_store_to_request(request: Request, call_next):
    """Adds the expense store to the request state."""
    request.state.expense_store = app_state.get("expense_store")
    response = await call_next(request)
    return response

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )
