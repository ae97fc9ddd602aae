import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ledger.core.errors import LedgerError
from ledger.core.settings import settings
from ledger.db import init_db
from ledger.routers.accounts import router as accounts_router
from ledger.routers.expenses import router as expenses_router
from ledger.routers.revenues import router as revenues_router
from ledger.schemas.common import make_error_response
from ledger.services.validation import first_error

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.AUTO_CREATE_TABLES:
        init_db()
        logger.info("Ledger tables ensured")
    yield


app = FastAPI(
    title="Personal Ledger API",
    description="Accounts, expenses and revenues, with balance transfers between accounts",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(accounts_router)
app.include_router(expenses_router)
app.include_router(revenues_router)


@app.exception_handler(LedgerError)
async def ledger_error_handler(request: Request, exc: LedgerError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=make_error_response(code=exc.code, message=exc.message, details=exc.details),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    error = first_error(exc.errors())
    return JSONResponse(
        status_code=error.status_code,
        content=make_error_response(code=error.code, message=error.message, details=error.details),
    )


@app.get("/healthz", tags=["Health Check"])
async def health_check():
    return {"status": "ok"}
